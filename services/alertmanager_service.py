"""
Service for calling the Alertmanager v2 API. The `AlertManagerService` owns the single HTTP helper used by every tool: it builds the request URL under `/api/v2/`, bounds each call by the configured timeout, classifies transport, status and body failures into `AlertManagerError` subclasses, and logs every failure before raising. Typed operations for alerts, alert groups and silences delegate to the alerting ops modules, which decode each response into its expected shape.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from config import config
from middleware.resilience import with_timeout
from models.alerting.alerts import Alert
from models.alerting.silences import Silence, SilenceCreate
from services.common.http_client import create_async_client
from services.alerting.errors import (
    AlertManagerConnectionError,
    AlertManagerResponseError,
    AlertManagerStatusError,
    AlertManagerTimeoutError,
)
from services.alerting.alerts_ops import get_alerts, find_alert, get_alert_groups
from services.alerting.silences_ops import get_silences, create_silence, delete_silence

logger = logging.getLogger(__name__)

T = TypeVar("T")
QueryParams = Sequence[Tuple[str, str]]


class AlertManagerService:
    def __init__(
        self,
        alertmanager_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.alertmanager_url = (alertmanager_url or config.ALERTMANAGER_URL).rstrip("/")
        self.api_path = config.ALERTMANAGER_API_PATH.strip("/")
        self.timeout = timeout if timeout is not None else config.DEFAULT_TIMEOUT
        self._client = client or create_async_client(self.timeout)
        self.logger = logger

    def api_url(self, path: str) -> str:
        return f"{self.alertmanager_url}/{self.api_path}/{path.lstrip('/')}"

    async def aclose(self) -> None:
        await self._client.aclose()

    @with_timeout()
    async def request(
        self,
        path: str,
        method: str = "GET",
        *,
        params: Optional[QueryParams] = None,
        body: Any = None,
        expect_json: bool = True,
    ) -> Any:
        url = self.api_url(path)
        try:
            response = await self._client.request(
                method,
                url,
                params=list(params) if params else None,
                json=body,
            )
        except httpx.TimeoutException as exc:
            self.logger.error("Error calling Alertmanager %s %s: timed out after %ss", method, url, self.timeout)
            raise AlertManagerTimeoutError(self.timeout) from exc
        except httpx.HTTPError as exc:
            self.logger.error("Error calling Alertmanager %s %s: %s", method, url, exc)
            raise AlertManagerConnectionError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            self.logger.error(
                "Error calling Alertmanager %s %s: %s %s",
                method, url, response.status_code, response.reason_phrase,
            )
            raise AlertManagerStatusError(response.status_code, response.reason_phrase)

        if not expect_json:
            return None
        try:
            return response.json()
        except ValueError as exc:
            self.logger.error("Error calling Alertmanager %s %s: response body is not valid JSON", method, url)
            raise AlertManagerResponseError("response body is not valid JSON") from exc

    def decode(self, adapter: TypeAdapter[T], payload: Any, what: str) -> T:
        try:
            return adapter.validate_python(payload)
        except ValidationError as exc:
            self.logger.error("Unexpected %s payload from Alertmanager: %s", what, exc)
            raise AlertManagerResponseError(
                f"unexpected {what} payload ({exc.error_count()} validation error(s))"
            ) from exc

    async def get_alerts(self, params: Optional[QueryParams] = None) -> List[Alert]:
        return await get_alerts(self, params)

    async def find_alert(self, fingerprint: str) -> Alert:
        return await find_alert(self, fingerprint)

    async def get_alert_groups(self, params: Optional[QueryParams] = None) -> Any:
        return await get_alert_groups(self, params)

    async def get_silences(self, params: Optional[QueryParams] = None) -> List[Silence]:
        return await get_silences(self, params)

    async def create_silence(self, silence: SilenceCreate) -> str:
        return await create_silence(self, silence)

    async def delete_silence(self, silence_id: str) -> None:
        await delete_silence(self, silence_id)
