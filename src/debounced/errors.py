"""Exceptions raised by the debounced library."""


class DebounceError(Exception):
    """Base class for all debounced errors."""


class ConfigurationError(DebounceError, ValueError):
    """Raised when a :class:`DebounceConfig` option is out of range."""


class MemoizationKeyError(DebounceError, TypeError):
    """Raised when memoized call arguments have no canonical serialization."""
