"""
Tool-level error boundary. Decorator mapping expected exceptions to error envelopes consistently across tool handlers, so no exception escapes a tool call.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from functools import wraps
from typing import Any, Awaitable, Callable, TypeVar
import logging

from mcp.types import CallToolResult
from pydantic import ValidationError

from models.tools.results import error_result
from services.alerting.errors import AlertManagerError, AlertNotFoundError


F = TypeVar("F", bound=Callable[..., Awaitable[CallToolResult]])
logger = logging.getLogger(__name__)


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "arguments"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "Invalid arguments: " + "; ".join(parts)


def handle_tool_errors(*, error_prefix: str) -> Callable[[F], F]:

    def decorator(func: F) -> F:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> CallToolResult:
            try:
                return await func(*args, **kwargs)
            except AlertNotFoundError as exc:
                logger.info("%s: %s", func.__name__, exc)
                return error_result(str(exc))
            except ValidationError as exc:
                logger.warning("Invalid arguments for %s: %s", func.__name__, exc)
                return error_result(f"{error_prefix}{_validation_message(exc)}")
            except AlertManagerError as exc:
                logger.warning("Upstream request failed in %s: %s", func.__name__, exc)
                return error_result(f"{error_prefix}{exc}")
            except Exception as exc:
                logger.exception("Unhandled exception in tool %s: %s", func.__name__, exc)
                return error_result(f"{error_prefix}{exc}")

        return wrapper  # type: ignore[return-value]

    return decorator
