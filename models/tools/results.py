"""
Result envelopes returned by every tool: a single text block, flagged as an error on failure.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import json
from typing import Any

from mcp.types import CallToolResult, TextContent


def text_result(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)])


def json_result(payload: Any) -> CallToolResult:
    return text_result(json.dumps(payload, indent=2, ensure_ascii=False))


def error_result(message: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=message)], isError=True)
