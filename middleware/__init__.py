"""
Middleware components for the Alertmanager tools: call deadlines and the tool error boundary.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from .resilience import with_timeout
from .error_handlers import handle_tool_errors

__all__ = [
    "with_timeout",
    "handle_tool_errors",
]
