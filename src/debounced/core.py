"""Core Scheduler class: decides when calls reach the wrapped function."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Protocol

from loguru import logger

from debounced.config import DebounceConfig
from debounced.keys import make_key


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class TimerLoop(Protocol):
    """Clock and deferred-execution primitive a scheduler runs on.

    ``asyncio.AbstractEventLoop`` satisfies it: ``time()`` is monotonic
    seconds and ``call_later`` returns a cancellable handle.
    """

    def time(self) -> float: ...

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


class Call(NamedTuple):
    """Arguments of one call made through a debounced function."""

    args: tuple[Any, ...]
    kwargs: dict[str, Any]


@dataclass(slots=True)
class SchedulerState:
    """Mutable bookkeeping owned by exactly one :class:`Scheduler`."""

    pending: TimerHandle | None = None
    skipped_calls: int = 0
    window_start: float | None = None
    leading_armed: bool = False
    batched: list[Call] = field(default_factory=list)
    cache: dict[str, Any] = field(default_factory=dict)

    def reset_skips(self, window_start: float | None = None) -> None:
        self.skipped_calls = 0
        self.window_start = window_start


class Scheduler:
    """Debounce, coalesce, or forward calls to *func*.

    How it works:
        - Every call cancels the pending trailing invocation (counting it as
          skipped) and arms a new one ``debounce_time`` later.
        - ``max_skipped_calls`` and ``max_skipped_time`` force an immediate
          invocation when a burst keeps deferring the trailing one. The first
          override that triggers resets both counters, so at most one of them
          fires per call.
        - ``leading`` invokes on the first call of a burst; the edge re-arms
          once the debounce window completes.

    Example::

        debounce_time=100, leading=True, max_skipped_calls=2

        t=0    call(a)  -> leading invocation with (a), arm timer
        t=10   call(b)  -> cancel timer (skipped=1), arm timer
        t=20   call(c)  -> cancel timer (skipped=2), override invocation with (c)
        t=120  timer    -> trailing invocation with (c), leading re-armed

    The call returns the result of an invocation that ran synchronously
    inside it, or None when everything was deferred.

    Complexity:
        Time:   O(1) per call, plus key serialization when memoizing
        Memory: O(n) batched calls, unbounded memo cache
    """

    __slots__ = ("_config", "_func", "_loop", "_state")

    def __init__(
        self,
        func: Callable[..., Any],
        config: DebounceConfig | None = None,
        *,
        loop: TimerLoop | None = None,
    ) -> None:
        if not callable(func):
            raise TypeError(f"Scheduler target must be callable, got {type(func).__name__}")
        if inspect.iscoroutinefunction(func):
            raise TypeError("Scheduler only supports sync functions.")

        self._func = func
        self._config = config or DebounceConfig()
        self._loop = loop
        self._state = SchedulerState(leading_armed=self._config.leading)

        if not self._config.leading and not self._config.trailing:
            logger.warning(
                "{} has leading and trailing disabled; it only runs when an override triggers{}",
                _name(func),
                "; batched calls accumulate until then" if self._config.batching else "",
            )

    @property
    def config(self) -> DebounceConfig:
        return self._config

    @property
    def pending(self) -> bool:
        """Whether a deferred invocation is armed."""
        return self._state.pending is not None

    @property
    def skipped_calls(self) -> int:
        return self._state.skipped_calls

    @property
    def window_start(self) -> float | None:
        """Loop time the skipped-time window opened at, or None."""
        return self._state.window_start

    @property
    def cache_size(self) -> int:
        return len(self._state.cache)

    def _get_loop(self) -> TimerLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        loop = self._get_loop()
        config = self._config
        state = self._state
        call = Call(args, kwargs)

        if state.window_start is None:
            state.window_start = loop.time()

        if config.batching:
            state.batched.append(call)

        if state.pending is not None:
            state.pending.cancel()
            state.pending = None
            state.skipped_calls += 1

        result = None
        try:
            if (
                config.max_skipped_calls is not None
                and state.skipped_calls >= config.max_skipped_calls
            ):
                logger.debug(
                    "{}: {} calls skipped, invoking now", _name(self._func), state.skipped_calls
                )
                result = self._invoke(call)
            elif (
                config.max_skipped_time is not None
                and (loop.time() - state.window_start) * 1000 >= config.max_skipped_time
            ):
                logger.debug(
                    "{}: max_skipped_time {}ms reached, invoking now",
                    _name(self._func),
                    config.max_skipped_time,
                )
                result = self._invoke(call)

            if config.leading and state.leading_armed:
                state.leading_armed = False
                logger.debug("{}: leading edge", _name(self._func))
                result = self._invoke(call)
        finally:
            # the target may have called back into this scheduler
            if state.pending is not None:
                state.pending.cancel()
            state.pending = loop.call_later(config.debounce_time / 1000, self._on_timer, call)

        return result

    def _on_timer(self, call: Call) -> None:
        state = self._state
        state.pending = None
        state.reset_skips()
        state.leading_armed = self._config.leading

        if self._config.trailing:
            logger.debug("{}: trailing edge", _name(self._func))
            self._invoke(call, restart_window=False)

    def _invoke(self, call: Call, *, restart_window: bool = True) -> Any:
        config = self._config
        state = self._state

        key = make_key(call.args, call.kwargs) if config.memoization else None

        if config.batching and state.batched:
            batch, state.batched = state.batched, []
            args: tuple[Any, ...] = (batch,)
            kwargs: dict[str, Any] = {}
        else:
            args, kwargs = call.args, call.kwargs

        if key is not None and key in state.cache:
            logger.debug("{}: memoized result for {}", _name(self._func), key)
            return state.cache[key]

        # synchronous invocations restart the window at once; a completed
        # burst leaves it unset for the next call to open
        state.reset_skips(self._get_loop().time() if restart_window else None)
        result = self._func(*args, **kwargs)

        if key is not None:
            state.cache[key] = result
        return result

    def __repr__(self) -> str:
        return (
            f"Scheduler(func={_name(self._func)}, "
            f"debounce_time={self._config.debounce_time}, "
            f"leading={self._config.leading}, "
            f"trailing={self._config.trailing}, "
            f"pending={self.pending})"
        )


def _name(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or repr(func)
