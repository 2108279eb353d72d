"""
Entrypoint for the Alertmanager MCP server. Builds the tool registry once, binds it to an MCP server, and serves it over stdio until the host closes the stream.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict, List, Mapping, Optional

import uvloop
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from config import config
from routers.observability import ToolDefinition, build_tool_registry, dispatch_tool
from services.alertmanager_service import AlertManagerService

logger = logging.getLogger("alertmanager_mcp")

SERVER_INSTRUCTIONS = """
Tools for a Prometheus Alertmanager instance.

- get-alerts: current alerts in a compact form (use filter, silenced, inhibited, active)
- get-alert-details: everything about one alert, looked up by fingerprint from get-alerts
- get-alert-groups: alerts grouped the way Alertmanager routes them
- get-silences / create-silence / delete-silence: manage silences

Timestamps are ISO 8601. create-silence starts now unless startsAt is given.
"""


def configure_logging() -> None:
    # stdout carries the protocol stream
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_server(registry: Mapping[str, ToolDefinition]) -> Server:
    server = Server(config.SERVER_NAME, version=config.SERVER_VERSION, instructions=SERVER_INSTRUCTIONS)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return [definition.to_tool() for definition in registry.values()]

    @server.call_tool()
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
        return await dispatch_tool(registry, name, arguments)

    return server


async def serve() -> None:
    service = AlertManagerService()
    registry = build_tool_registry(service)
    server = create_server(registry)
    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Alertmanager MCP Server started on stdio (upstream %s)", service.alertmanager_url)
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await service.aclose()


def main() -> None:
    configure_logging()
    try:
        config.validate()
        uvloop.run(serve())
    except KeyboardInterrupt:
        logger.info("Alertmanager MCP Server interrupted")
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
