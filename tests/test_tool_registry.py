"""
Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import asyncio
from unittest.mock import patch

import pytest

from tests._env import ensure_test_env

ensure_test_env()

from mcp.types import CallToolRequest, CallToolRequestParams, ListToolsRequest

import main
from routers.observability import build_tool_registry, dispatch_tool
from tests._fakes import json_response, make_service, status_response

TOOL_NAMES = [
    "get-alerts",
    "get-alert-details",
    "create-silence",
    "get-silences",
    "delete-silence",
    "get-alert-groups",
]


def _registry():
    service, transport = make_service(json_response([]))
    return build_tool_registry(service), transport


def test_registry_holds_the_six_tools():
    registry, _ = _registry()
    assert list(registry) == TOOL_NAMES
    assert all(definition.description for definition in registry.values())


def test_input_schemas_declare_required_fields():
    registry, _ = _registry()
    schemas = {name: definition.to_tool().inputSchema for name, definition in registry.items()}

    assert schemas["get-alerts"].get("required", []) == []
    assert set(schemas["get-alerts"]["properties"]) == {"filter", "silenced", "inhibited", "active"}
    assert schemas["get-alerts"]["properties"]["active"]["default"] is True
    assert schemas["get-alert-details"]["required"] == ["fingerprint"]
    assert set(schemas["create-silence"]["required"]) == {"matchers", "endsAt", "createdBy", "comment"}
    assert schemas["create-silence"]["properties"]["matchers"]["minItems"] == 1
    assert schemas["get-silences"].get("required", []) == []
    assert schemas["delete-silence"]["required"] == ["silenceId"]
    assert set(schemas["get-alert-groups"]["properties"]) == {"active", "silenced", "inhibited"}


def test_to_tool_carries_name_and_description():
    registry, _ = _registry()
    tool = registry["delete-silence"].to_tool()
    assert tool.name == "delete-silence"
    assert tool.description == registry["delete-silence"].description


def test_dispatch_runs_bound_handler():
    registry, transport = _registry()

    result = asyncio.run(dispatch_tool(registry, "get-silences", None))

    assert result.isError is False
    assert result.content[0].text == "[]"
    assert transport.last.url.path == "/api/v2/silences"


def test_dispatch_unknown_tool():
    registry, transport = _registry()

    result = asyncio.run(dispatch_tool(registry, "get-receivers", {}))

    assert result.isError is True
    assert result.content[0].text == "Unknown tool: get-receivers"
    assert transport.requests == []


def test_create_server_registers_tool_handlers():
    registry, _ = _registry()

    server = main.create_server(registry)

    assert server.name == "alertmanager"
    assert ListToolsRequest in server.request_handlers
    assert CallToolRequest in server.request_handlers


def _call_tool(server, name, arguments):
    request = CallToolRequest(method="tools/call", params=CallToolRequestParams(name=name, arguments=arguments))
    return asyncio.run(server.request_handlers[CallToolRequest](request)).root


def test_server_call_tool_returns_envelope():
    service, transport = make_service(json_response({"silenceID": "x1"}))
    server = main.create_server(build_tool_registry(service))

    result = _call_tool(server, "create-silence", {
        "matchers": [{"name": "alertname", "value": "X"}],
        "endsAt": "2030-01-01T00:00:00Z",
        "createdBy": "u",
        "comment": "c",
    })

    assert result.isError is False
    assert result.content[0].text == "Successfully created silence with ID: x1"
    assert transport.last.url.path == "/api/v2/silences"


def test_server_call_tool_reports_upstream_status():
    service, _ = make_service(status_response(404))
    server = main.create_server(build_tool_registry(service))

    result = _call_tool(server, "delete-silence", {"silenceId": "abc"})

    assert result.isError is True
    assert result.content[0].text == "Error deleting silence: Alertmanager API error: 404 Not Found"


def test_startup_config_error_is_logged_and_fatal(caplog):
    with patch.object(main, "configure_logging"), \
            patch.object(main.config, "_errors", ["ALERTMANAGER_TIMEOUT must be a number, got 'abc'"]), \
            caplog.at_level("ERROR", logger="alertmanager_mcp"):
        with pytest.raises(SystemExit) as exc_info:
            main.main()

    assert exc_info.value.code == 1
    assert "Fatal error in main()" in caplog.text
