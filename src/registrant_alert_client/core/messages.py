"""Normalization of the ``messages`` field of error responses.

The service sends ``messages`` as a list of strings, a bare string, or any
other JSON value. All three are normalized to a tuple of strings: a list of
strings is kept as is, anything else becomes a single element holding its
canonical text form (objects as ``map[key:value ...]`` with sorted keys,
arrays as ``[a b]``).
"""

from __future__ import annotations


def normalize_messages(value: object) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(value)
    return (format_value(value),)


def format_value(value: object) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        items = " ".join(
            f"{key}:{format_value(value[key])}" for key in sorted(value, key=str)
        )
        return f"map[{items}]"
    if isinstance(value, list):
        return "[" + " ".join(format_value(item) for item in value) + "]"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


__all__ = [
    "normalize_messages",
    "format_value",
]
