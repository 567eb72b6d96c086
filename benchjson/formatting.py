"""Formatting of JSON key/value pairs as the reporter writes them."""

from __future__ import annotations

import math

_ESCAPES = {
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\\": "\\\\",
    '"': '\\"',
}


def str_escape(s: str) -> str:
    """Escape quotes, backslashes and common control characters."""
    return "".join(_ESCAPES.get(c, c) for c in s)


def format_double(value: float) -> str:
    """Format a float with enough digits to round-trip."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    return f"{value:.16e}"


def format_kv(key: str, value: str | bool | int | float) -> str:
    """Format one ``"key": value`` pair."""
    prefix = f'"{str_escape(key)}": '
    if isinstance(value, bool):
        return prefix + ("true" if value else "false")
    if isinstance(value, int):
        return prefix + str(value)
    if isinstance(value, float):
        return prefix + format_double(value)
    if isinstance(value, str):
        return prefix + f'"{str_escape(value)}"'
    raise TypeError(f"cannot format value of type {type(value).__name__}")