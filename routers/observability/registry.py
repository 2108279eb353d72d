"""
Tool registry: the table mapping each tool name to its description, argument model and bound handler. The table is built once at startup and handed to the server binding in `main`.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from dataclasses import dataclass
from functools import partial
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Type

from mcp.types import CallToolResult, Tool
from pydantic import BaseModel

from models.alerting.requests import (
    CreateSilenceRequest,
    DeleteSilenceRequest,
    GetAlertDetailsRequest,
    GetAlertGroupsRequest,
    GetAlertsRequest,
    GetSilencesRequest,
)
from models.tools.results import error_result
from routers.observability import alertmanager_tools
from services.alertmanager_service import AlertManagerService

ToolHandler = Callable[[Dict[str, Any]], Awaitable[CallToolResult]]


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    arguments_model: Type[BaseModel]
    handler: ToolHandler

    def to_tool(self) -> Tool:
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.arguments_model.model_json_schema(),
        )


def build_tool_registry(service: AlertManagerService) -> Dict[str, ToolDefinition]:
    definitions = (
        ToolDefinition(
            name="get-alerts",
            description="List current alerts, optionally filtered, including silenced or inhibited alerts on request.",
            arguments_model=GetAlertsRequest,
            handler=partial(alertmanager_tools.get_alerts, service),
        ),
        ToolDefinition(
            name="get-alert-details",
            description="Show the full details of the alert with the given fingerprint.",
            arguments_model=GetAlertDetailsRequest,
            handler=partial(alertmanager_tools.get_alert_details, service),
        ),
        ToolDefinition(
            name="create-silence",
            description="Create a silence for the alerts matching the given matchers.",
            arguments_model=CreateSilenceRequest,
            handler=partial(alertmanager_tools.create_silence, service),
        ),
        ToolDefinition(
            name="get-silences",
            description="List silences, optionally filtered.",
            arguments_model=GetSilencesRequest,
            handler=partial(alertmanager_tools.get_silences, service),
        ),
        ToolDefinition(
            name="delete-silence",
            description="Delete (expire) the silence with the given ID.",
            arguments_model=DeleteSilenceRequest,
            handler=partial(alertmanager_tools.delete_silence, service),
        ),
        ToolDefinition(
            name="get-alert-groups",
            description="List alert groups as returned by Alertmanager.",
            arguments_model=GetAlertGroupsRequest,
            handler=partial(alertmanager_tools.get_alert_groups, service),
        ),
    )
    return {definition.name: definition for definition in definitions}


async def dispatch_tool(
    registry: Mapping[str, ToolDefinition],
    name: str,
    arguments: Optional[Dict[str, Any]],
) -> CallToolResult:
    definition = registry.get(name)
    if definition is None:
        return error_result(f"Unknown tool: {name}")
    return await definition.handler(arguments or {})
