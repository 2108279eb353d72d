"""
Tool handlers for the Alertmanager surface: listing alerts, inspecting an alert, creating, listing and deleting silences, and fetching alert groups. Each handler validates its arguments, makes one upstream call through the service, and renders a result envelope.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
from typing import Any, Dict

from mcp.types import CallToolResult

from middleware.error_handlers import handle_tool_errors
from models.alerting.requests import (
    CreateSilenceRequest,
    DeleteSilenceRequest,
    GetAlertDetailsRequest,
    GetAlertGroupsRequest,
    GetAlertsRequest,
    GetSilencesRequest,
)
from models.tools.results import json_result, text_result
from services.alertmanager_service import AlertManagerService
from services.alerting.alerts_ops import alert_details, format_alert
from services.alerting.query import (
    ALERT_GROUP_QUERY_RULES,
    ALERT_QUERY_RULES,
    SILENCE_QUERY_RULES,
    encode_query,
)
from services.alerting.silences_ops import build_silence, summarize_silence

logger = logging.getLogger(__name__)


@handle_tool_errors(error_prefix="Error fetching alerts: ")
async def get_alerts(service: AlertManagerService, arguments: Dict[str, Any]) -> CallToolResult:
    request = GetAlertsRequest.model_validate(arguments)
    alerts = await service.get_alerts(encode_query(ALERT_QUERY_RULES, request.model_dump()))
    logger.debug("Fetched %d alerts", len(alerts))
    return json_result([format_alert(alert).model_dump(mode="json", by_alias=True) for alert in alerts])


@handle_tool_errors(error_prefix="Error fetching alert details: ")
async def get_alert_details(service: AlertManagerService, arguments: Dict[str, Any]) -> CallToolResult:
    request = GetAlertDetailsRequest.model_validate(arguments)
    alert = await service.find_alert(request.fingerprint)
    return json_result(alert_details(alert).model_dump(mode="json", by_alias=True))


@handle_tool_errors(error_prefix="Error creating silence: ")
async def create_silence(service: AlertManagerService, arguments: Dict[str, Any]) -> CallToolResult:
    request = CreateSilenceRequest.model_validate(arguments)
    silence_id = await service.create_silence(build_silence(request))
    logger.info("Created silence %s by %s", silence_id, request.createdBy)
    return text_result(f"Successfully created silence with ID: {silence_id}")


@handle_tool_errors(error_prefix="Error fetching silences: ")
async def get_silences(service: AlertManagerService, arguments: Dict[str, Any]) -> CallToolResult:
    request = GetSilencesRequest.model_validate(arguments)
    silences = await service.get_silences(encode_query(SILENCE_QUERY_RULES, request.model_dump()))
    return json_result([summarize_silence(s).model_dump(mode="json", by_alias=True, exclude_none=True) for s in silences])


@handle_tool_errors(error_prefix="Error deleting silence: ")
async def delete_silence(service: AlertManagerService, arguments: Dict[str, Any]) -> CallToolResult:
    request = DeleteSilenceRequest.model_validate(arguments)
    await service.delete_silence(request.silenceId)
    logger.info("Deleted silence %s", request.silenceId)
    return text_result(f"Successfully deleted silence with ID: {request.silenceId}")


@handle_tool_errors(error_prefix="Error fetching alert groups: ")
async def get_alert_groups(service: AlertManagerService, arguments: Dict[str, Any]) -> CallToolResult:
    request = GetAlertGroupsRequest.model_validate(arguments)
    groups = await service.get_alert_groups(encode_query(ALERT_GROUP_QUERY_RULES, request.model_dump()))
    return json_result(groups)
