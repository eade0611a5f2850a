"""Debounced: call-rate limiting for Python functions.

Wraps a function so bursts of calls are deferred, coalesced, or forwarded
according to a debounce policy: trailing and leading edges, caps on skipped
calls and skipped time, argument batching and result memoization.

Basic usage (inside a running asyncio loop):

    from debounced import DebounceConfig, make_debounced

    save = make_debounced(store.put, DebounceConfig(debounce_time=500))

    save(doc)  # deferred
    save(doc)  # resets the 500 ms window; store.put runs once

Decorator usage:

    from debounced import debounce

    @debounce(debounce_time=300, leading=True, max_skipped_calls=10)
    def refresh(query: str) -> list[str]:
        return search(query)

Logging goes through loguru and is disabled by default; enable it with
``logger.enable("debounced")``.
"""

from loguru import logger

from debounced.config import DebounceConfig
from debounced.core import Call, Scheduler, SchedulerState, TimerLoop
from debounced.decorator import debounce, make_debounced
from debounced.errors import ConfigurationError, DebounceError, MemoizationKeyError
from debounced.keys import make_key

__all__ = [
    "Call",
    "ConfigurationError",
    "DebounceConfig",
    "DebounceError",
    "MemoizationKeyError",
    "Scheduler",
    "SchedulerState",
    "TimerLoop",
    "debounce",
    "make_debounced",
    "make_key",
]

__version__ = "0.1.0"

logger.disable(__name__)
