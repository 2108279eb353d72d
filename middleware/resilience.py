"""
Timeout decorator for upstream service calls. Calls are single-attempt; a call that outlives its deadline is cancelled and surfaced as a classified timeout.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import asyncio
import logging
from functools import wraps
from typing import Awaitable, Callable, Optional, TypeVar, ParamSpec

from config import config
from services.alerting.errors import AlertManagerTimeoutError

logger = logging.getLogger(__name__)

P = ParamSpec('P')
T = TypeVar('T')


def with_timeout(
    timeout: Optional[float] = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """Bound a coroutine method by a deadline.

    When ``timeout`` is omitted the deadline is read from the ``timeout``
    attribute of the bound instance, falling back to ``config.DEFAULT_TIMEOUT``.
    """
    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            deadline = timeout
            if deadline is None:
                deadline = getattr(args[0], "timeout", None) if args else None
            if deadline is None:
                deadline = config.DEFAULT_TIMEOUT
            try:
                return await asyncio.wait_for(func(*args, **kwargs), timeout=deadline)
            except asyncio.TimeoutError as exc:
                logger.error("Timeout after %ss for %s", deadline, func.__name__)
                raise AlertManagerTimeoutError(deadline) from exc

        return wrapper
    return decorator
