"""
Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import asyncio
import json
from typing import Any, Callable, List

import httpx

from services.alertmanager_service import AlertManagerService
from services.common.http_client import create_async_client

BASE_URL = "http://am.test:9093"


def alert_payload(
    fingerprint="fp-1",
    alertname="HighCPULoad",
    labels=None,
    annotations=None,
    silenced_by=None,
    inhibited_by=None,
    state="active",
):
    merged_labels = {"alertname": alertname}
    merged_labels.update(labels or {})
    return {
        "fingerprint": fingerprint,
        "labels": merged_labels,
        "annotations": annotations if annotations is not None else {},
        "startsAt": "2026-01-01T00:00:00.000Z",
        "endsAt": "2026-01-01T04:00:00.000Z",
        "updatedAt": "2026-01-01T00:01:00.000Z",
        "generatorURL": "http://prometheus.test/graph?g0.expr=up",
        "receivers": [{"name": "default"}],
        "status": {
            "state": state,
            "silencedBy": silenced_by or [],
            "inhibitedBy": inhibited_by or [],
        },
    }


def silence_payload(silence_id="s-1", state="active", matchers=None):
    return {
        "id": silence_id,
        "status": {"state": state},
        "updatedAt": "2026-01-01T00:00:00.000Z",
        "createdBy": "alice",
        "comment": "maintenance",
        "startsAt": "2026-01-01T00:00:00.000Z",
        "endsAt": "2026-01-01T02:00:00.000Z",
        "matchers": matchers if matchers is not None else [
            {"name": "alertname", "value": "HighCPULoad", "isRegex": False, "isEqual": True},
        ],
    }


class RecordingTransport:
    """Serves canned responses and records every request it sees."""

    def __init__(self, responder: Callable[[httpx.Request], Any]):
        self.responder = responder
        self.requests: List[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self.responder(request)
        if asyncio.iscoroutine(result):
            result = await result
        return result

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def json_response(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status_code, json=payload)


def status_response(status_code: int, text: str = "") -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status_code, text=text)


def hanging_response(delay: float = 5.0) -> Callable[[httpx.Request], Any]:
    async def respond(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(delay)
        return httpx.Response(200, json=[])

    return respond


def make_service(responder, timeout: float = 10.0):
    transport = RecordingTransport(responder)
    client = create_async_client(timeout, transport=httpx.MockTransport(transport))
    service = AlertManagerService(alertmanager_url=BASE_URL, timeout=timeout, client=client)
    return service, transport
