"""Decorator API for applying debounce behavior to sync functions."""

from collections.abc import Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar, cast, overload

from debounced.config import DebounceConfig
from debounced.core import Scheduler, TimerLoop

P = ParamSpec("P")
R = TypeVar("R")


def make_debounced(
    target: Callable[P, R],
    config: DebounceConfig | None = None,
    *,
    loop: TimerLoop | None = None,
) -> Callable[P, R | None]:
    """Wrap *target* in its own :class:`Scheduler`.

    The wrapper takes the same arguments as *target* and returns the
    target's result when an invocation ran synchronously inside the call
    (leading edge or override), otherwise None. Trailing results are only
    observable through the memo cache or the target's own side effects.

    Method-style targets must be bound before wrapping. The scheduler is
    available as ``wrapper.scheduler``.
    """
    scheduler = Scheduler(target, config, loop=loop)

    @wraps(target)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R | None:
        return scheduler(*args, **kwargs)

    wrapper.scheduler = scheduler  # type: ignore[attr-defined]

    return wrapper


@overload
def debounce(
    func: Callable[P, R],
    /,
) -> Callable[P, R | None]: ...


@overload
def debounce(
    *,
    debounce_time: float = 1000,
    max_skipped_calls: int | None = None,
    max_skipped_time: float | None = None,
    leading: bool = False,
    trailing: bool = True,
    batching: bool = False,
    memoization: bool = False,
    loop: TimerLoop | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R | None]]: ...


def debounce(
    func: Callable[..., Any] | None = None,
    /,
    *,
    debounce_time: float = 1000,
    max_skipped_calls: int | None = None,
    max_skipped_time: float | None = None,
    leading: bool = False,
    trailing: bool = True,
    batching: bool = False,
    memoization: bool = False,
    loop: TimerLoop | None = None,
) -> Any:
    """Decorator that debounces calls to a function.

    Args:
        func: The function to decorate (when used without parentheses).
        debounce_time: Trailing-edge delay in milliseconds.
        max_skipped_calls: Invoke immediately after this many suppressed calls.
        max_skipped_time: Invoke immediately once this many milliseconds
            passed without an invocation.
        leading: Invoke on the first call of a burst.
        trailing: Invoke after the burst goes quiet.
        batching: Pass all accumulated calls as one ``list[Call]`` argument.
        memoization: Return cached results for repeated arguments.
        loop: Timer loop; defaults to the running asyncio loop.

    Examples:
    ```python
        # With parentheses
        @debounce(debounce_time=300, leading=True)
        def refresh(query: str) -> None:
            search(query)

        # Without parentheses (uses defaults)
        @debounce
        def save(document: dict) -> None:
            store.put(document)
    ```
    """
    config = DebounceConfig(
        debounce_time=debounce_time,
        max_skipped_calls=max_skipped_calls,
        max_skipped_time=max_skipped_time,
        leading=leading,
        trailing=trailing,
        batching=batching,
        memoization=memoization,
    )

    def decorator(fn: Callable[P, R]) -> Callable[P, R | None]:
        return make_debounced(fn, config, loop=loop)

    if func is not None:
        return decorator(cast("Callable[..., Any]", func))

    return decorator
