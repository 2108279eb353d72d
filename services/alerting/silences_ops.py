"""
Silence operations against Alertmanager: building and creating silences, listing them, summarizing them for display, and deleting them by id.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple
from urllib.parse import quote

from pydantic import TypeAdapter

from models.alerting.requests import CreateSilenceRequest
from models.alerting.silences import Matcher, Silence, SilenceCreate, SilenceCreated, SilenceSummary

_SILENCE_LIST = TypeAdapter(List[Silence])
_SILENCE_CREATED = TypeAdapter(SilenceCreated)


def isoformat_utc(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_silence(request: CreateSilenceRequest, now: Optional[datetime] = None) -> SilenceCreate:
    starts_at = request.startsAt or isoformat_utc(now or datetime.now(timezone.utc))
    return SilenceCreate(
        matchers=[
            Matcher(name=m.name, value=m.value, is_regex=m.isRegex or False)
            for m in request.matchers
        ],
        starts_at=starts_at,
        ends_at=request.endsAt,
        created_by=request.createdBy,
        comment=request.comment,
    )


async def create_silence(service, silence: SilenceCreate) -> str:
    payload = await service.request(
        "silences",
        method="POST",
        body=silence.model_dump(by_alias=True, exclude_none=True),
    )
    return service.decode(_SILENCE_CREATED, payload, "silence creation").silence_id


async def get_silences(service, params: Optional[Sequence[Tuple[str, str]]] = None) -> List[Silence]:
    payload = await service.request("silences", params=params)
    return service.decode(_SILENCE_LIST, payload, "silences")


def summarize_silence(silence: Silence) -> SilenceSummary:
    return SilenceSummary(
        id=silence.id,
        status=silence.status.state,
        created_by=silence.created_by,
        comment=silence.comment,
        starts_at=silence.starts_at,
        ends_at=silence.ends_at,
        matchers=silence.matchers,
    )


async def delete_silence(service, silence_id: str) -> None:
    # Alertmanager deletes on the singular "silence" path.
    await service.request(f"silence/{quote(silence_id, safe='')}", method="DELETE", expect_json=False)
