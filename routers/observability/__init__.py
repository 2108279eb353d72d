"""
Tool surface for Alertmanager: alert, alert group and silence tools, and the registry that binds them to a service.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from .registry import ToolDefinition, build_tool_registry, dispatch_tool

__all__ = [
    "ToolDefinition",
    "build_tool_registry",
    "dispatch_tool",
]
