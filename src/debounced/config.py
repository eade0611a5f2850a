"""Configuration types for the debounced library."""

import math
from dataclasses import dataclass

from debounced.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class DebounceConfig:
    """Scheduling policy for a debounced function.

    All times are in milliseconds.

    Attributes:
        debounce_time: Quiet period after the last call before the trailing
                       invocation fires.
        max_skipped_calls: Force an invocation once this many consecutive
                           calls were suppressed. None means unbounded.
        max_skipped_time: Force an invocation once this much time passed
                          since the first call without one. None means
                          unbounded.
        leading: Invoke immediately on the first call of a burst.
        trailing: Invoke once the debounce window elapses with no new call.
        batching: Pass every call accumulated since the last invocation to
                  the target as a single ``list[Call]`` argument.
        memoization: Cache results by the canonical form of the call
                     arguments and return them without invoking the target.
    """

    debounce_time: float = 1000
    max_skipped_calls: int | None = None
    max_skipped_time: float | None = None
    leading: bool = False
    trailing: bool = True
    batching: bool = False
    memoization: bool = False

    def __post_init__(self) -> None:
        if not _is_number(self.debounce_time):
            raise ConfigurationError(
                f"debounce_time must be a number, got {type(self.debounce_time).__name__}"
            )

        if not math.isfinite(self.debounce_time) or self.debounce_time < 0:
            raise ConfigurationError(
                f"debounce_time must be a non-negative number, got {self.debounce_time}"
            )

        if self.max_skipped_calls is not None and (
            isinstance(self.max_skipped_calls, bool)
            or not isinstance(self.max_skipped_calls, int)
            or self.max_skipped_calls < 1
        ):
            raise ConfigurationError(
                f"max_skipped_calls must be a positive integer or None, got {self.max_skipped_calls!r}"
            )

        if self.max_skipped_time is not None and not _is_number(self.max_skipped_time):
            raise ConfigurationError(
                f"max_skipped_time must be a number or None, got {type(self.max_skipped_time).__name__}"
            )

        if self.max_skipped_time is not None and not self.max_skipped_time > 0:
            raise ConfigurationError(
                f"max_skipped_time must be positive or None, got {self.max_skipped_time}"
            )


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
