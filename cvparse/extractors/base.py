"""
Failure boundary shared by all field extractors.

Field extraction is best effort: a malformed section must never blank the
whole parse. Each extractor is wrapped so that empty or non-string input
short-circuits to an empty result, and any exception raised inside is
logged and converted to the same empty result for that field only.
"""

from __future__ import annotations

import functools
import logging
import traceback
from typing import Any, Callable, Optional, TypeVar

from ..logging_utils import resolve_log

T = TypeVar("T")


def best_effort(default_factory: Callable[[], T]) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorate an extractor taking ``(text, ..., log=None)``.

    Args:
        default_factory: Builds the empty result (``list``, ``str``, ...)
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(text: Any, *args: Any, log: Optional[logging.Logger] = None, **kwargs: Any) -> T:
            log = resolve_log(log)
            if not isinstance(text, str) or not text.strip():
                log.debug("%s: empty or non-string input, nothing to extract", func.__name__)
                return default_factory()
            try:
                return func(text, *args, log=log, **kwargs)
            except Exception as e:
                log.error("%s failed, returning empty result: %s", func.__name__, e)
                log.debug(traceback.format_exc())
                return default_factory()
        return wrapper
    return decorator
