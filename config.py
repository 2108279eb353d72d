"""
Configuration management for the Alertmanager MCP server, loading settings from environment variables with support for defaults, type conversion, and validation. This module defines a `Config` class that encapsulates the upstream Alertmanager location, the request timeout, HTTP client pool tuning, logging and server identity, plus a `Constants` holder for the display placeholders used when shaping alerts.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Callable, List, Optional, TypeVar
from urllib.parse import urlparse

T = TypeVar("T")

DEFAULT_ALERTMANAGER_URL = "http://localhost:9093"
_ALLOWED_SCHEMES = frozenset({"http", "https"})
_LOG_LEVELS = frozenset({"critical", "error", "warning", "info", "debug"})


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_number(name: str, default: T, parse: Callable[[str], T], errors: List[str]) -> T:
    value: Optional[str] = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return parse(value.strip())
    except ValueError:
        errors.append(f"{name} must be a number, got {value!r}")
        return default


class Config:
    def __init__(self) -> None:
        # Malformed numeric env values, reported by validate()
        self._errors: List[str] = []

        # Server identity and logging
        self.SERVER_NAME: str = _env_str("MCP_SERVER_NAME", "alertmanager")
        self.SERVER_VERSION: str = "1.0.0"
        self.LOG_LEVEL: str = _env_str("LOG_LEVEL", "info").lower()

        # Upstream Alertmanager
        self.ALERTMANAGER_URL: str = _env_str("ALERTMANAGER_URL", DEFAULT_ALERTMANAGER_URL)
        self.ALERTMANAGER_API_PATH: str = "/api/v2"

        # Request settings
        self.DEFAULT_TIMEOUT: float = _env_number("ALERTMANAGER_TIMEOUT", 10.0, float, self._errors)

        # Shared upstream HTTP client pool tuning
        self.HTTP_CLIENT_MAX_CONNECTIONS: int = _env_number("HTTP_CLIENT_MAX_CONNECTIONS", 20, int, self._errors)
        self.HTTP_CLIENT_MAX_KEEPALIVE_CONNECTIONS: int = _env_number("HTTP_CLIENT_MAX_KEEPALIVE_CONNECTIONS", 10, int, self._errors)
        self.HTTP_CLIENT_KEEPALIVE_EXPIRY: float = _env_number("HTTP_CLIENT_KEEPALIVE_EXPIRY", 30.0, float, self._errors)

    def validate(self) -> None:
        if self._errors:
            raise ValueError("; ".join(self._errors))
        parsed = urlparse(self.ALERTMANAGER_URL)
        if parsed.scheme not in _ALLOWED_SCHEMES or not parsed.netloc:
            raise ValueError(f"ALERTMANAGER_URL must be an absolute http(s) URL, got {self.ALERTMANAGER_URL!r}")
        if self.DEFAULT_TIMEOUT <= 0:
            raise ValueError("ALERTMANAGER_TIMEOUT must be greater than 0")
        if self.LOG_LEVEL not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        if self.HTTP_CLIENT_MAX_KEEPALIVE_CONNECTIONS > self.HTTP_CLIENT_MAX_CONNECTIONS:
            raise ValueError("HTTP_CLIENT_MAX_KEEPALIVE_CONNECTIONS cannot exceed HTTP_CLIENT_MAX_CONNECTIONS")


class Constants:
    # Alert display placeholders
    SEVERITY_UNKNOWN: str = "unknown"
    NO_SUMMARY: str = "No summary provided"
    NO_DESCRIPTION: str = "No description provided"

config = Config()
constants = Constants()
