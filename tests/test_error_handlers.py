"""
Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import asyncio

import pytest
from pydantic import BaseModel

from tests._env import ensure_test_env

ensure_test_env()

from middleware.error_handlers import handle_tool_errors
from models.tools.results import text_result
from services.alerting.errors import AlertManagerStatusError, AlertNotFoundError


class _Args(BaseModel):
    count: int


def test_success_passes_through():
    @handle_tool_errors(error_prefix="Error doing things: ")
    async def tool():
        return text_result("ok")

    result = asyncio.run(tool())
    assert result.isError is False
    assert result.content[0].text == "ok"


def test_classified_error_gets_prefix():
    @handle_tool_errors(error_prefix="Error doing things: ")
    async def tool():
        raise AlertManagerStatusError(404, "Not Found")

    result = asyncio.run(tool())
    assert result.isError is True
    assert result.content[0].text == "Error doing things: Alertmanager API error: 404 Not Found"


def test_not_found_keeps_its_own_wording():
    @handle_tool_errors(error_prefix="Error doing things: ")
    async def tool():
        raise AlertNotFoundError("fp-1")

    result = asyncio.run(tool())
    assert result.isError is True
    assert result.content[0].text == "Alert with fingerprint fp-1 not found"


def test_validation_error_is_enveloped():
    @handle_tool_errors(error_prefix="Error doing things: ")
    async def tool():
        _Args.model_validate({"count": "many"})

    result = asyncio.run(tool())
    assert result.isError is True
    assert result.content[0].text.startswith("Error doing things: Invalid arguments: count: ")


def test_unexpected_error_is_enveloped_and_logged(caplog):
    @handle_tool_errors(error_prefix="Error doing things: ")
    async def tool():
        raise RuntimeError("boom")

    with caplog.at_level("ERROR", logger="middleware.error_handlers"):
        result = asyncio.run(tool())
    assert result.isError is True
    assert result.content[0].text == "Error doing things: boom"
    assert "Unhandled exception in tool tool" in caplog.text


def test_cancellation_is_not_swallowed():
    @handle_tool_errors(error_prefix="Error doing things: ")
    async def tool():
        raise asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        asyncio.run(tool())
