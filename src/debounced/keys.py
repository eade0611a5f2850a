"""Canonical cache keys for memoized calls.

A key is the compact JSON form of ``[args, kwargs]`` with object keys
sorted, so keyword order never changes the key. Supported argument types
are ``None``, ``bool``, ``int``, ``float``, ``str`` and lists, tuples and
string-keyed dicts of those. Scalars must be exactly those types, so
subclasses like ``IntEnum`` members are rejected rather than colliding
with their plain values. Tuples and lists produce the same key.
"""

import json
from typing import Any

from debounced.errors import MemoizationKeyError

_SCALARS = (str, int, float, bool, type(None))


def _check(value: Any, path: str, parents: frozenset[int] = frozenset()) -> None:
    # exact types: subclasses such as IntEnum would share their base value's key
    if type(value) in _SCALARS:
        return

    if id(value) in parents:
        raise MemoizationKeyError(f"{path} contains a reference to itself")

    if isinstance(value, (list, tuple)):
        inner = parents | {id(value)}
        for index, item in enumerate(value):
            _check(item, f"{path}[{index}]", inner)
        return

    if isinstance(value, dict):
        inner = parents | {id(value)}
        for key, item in value.items():
            if not isinstance(key, str):
                raise MemoizationKeyError(f"{path} has non-string key {key!r}")
            _check(item, f"{path}[{key!r}]", inner)
        return

    raise MemoizationKeyError(
        f"{path} of type {type(value).__name__} cannot be used in a memoization key"
    )


def make_key(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    """Return the canonical cache key for a call.

    Raises:
        MemoizationKeyError: An argument falls outside the supported types.
    """
    _check(args, "args")
    _check(kwargs, "kwargs")
    return json.dumps([list(args), kwargs], sort_keys=True, separators=(",", ":"))
