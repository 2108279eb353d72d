"""
Alert operations against Alertmanager: listing alerts, locating a single alert by fingerprint, fetching alert groups, and projecting alerts into their display forms.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Any, List, Optional, Sequence, Tuple

from pydantic import TypeAdapter

from config import constants
from models.alerting.alerts import Alert, AlertDetails, FormattedAlert, FormattedAlertStatus
from services.alerting.errors import AlertNotFoundError

_ALERT_LIST = TypeAdapter(List[Alert])


async def get_alerts(service, params: Optional[Sequence[Tuple[str, str]]] = None) -> List[Alert]:
    payload = await service.request("alerts", params=params)
    return service.decode(_ALERT_LIST, payload, "alerts")


async def find_alert(service, fingerprint: str) -> Alert:
    # Alertmanager has no lookup by fingerprint; scan the full list.
    alerts = await get_alerts(service)
    for alert in alerts:
        if alert.fingerprint == fingerprint:
            return alert
    raise AlertNotFoundError(fingerprint)


async def get_alert_groups(service, params: Optional[Sequence[Tuple[str, str]]] = None) -> Any:
    return await service.request("alerts/groups", params=params)


def format_alert(alert: Alert) -> FormattedAlert:
    return FormattedAlert(
        fingerprint=alert.fingerprint,
        alertname=alert.alertname,
        severity=alert.labels.get("severity") or constants.SEVERITY_UNKNOWN,
        summary=alert.annotations.get("summary") or constants.NO_SUMMARY,
        description=alert.annotations.get("description") or constants.NO_DESCRIPTION,
        starts_at=alert.starts_at,
        status=FormattedAlertStatus(
            state=alert.status.state,
            silenced=len(alert.status.silenced_by) > 0,
            inhibited=len(alert.status.inhibited_by) > 0,
        ),
        labels=alert.labels,
    )


def alert_details(alert: Alert) -> AlertDetails:
    return AlertDetails(
        fingerprint=alert.fingerprint,
        alertname=alert.alertname,
        labels=alert.labels,
        annotations=alert.annotations,
        starts_at=alert.starts_at,
        ends_at=alert.ends_at,
        generator_url=alert.generator_url,
        status=alert.status,
    )
