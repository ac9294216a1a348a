"""Boolean coercion for values that may arrive as strings."""

from __future__ import annotations

from typing import Any

TRUE_STRINGS = frozenset({"true", "1", "yes", "on", "y"})


def parse_bool(value: Any) -> bool:
    """Coerce configuration values to a boolean.

    ``bool`` passes through, numbers are true when non-zero, strings are true
    for ``true``/``1``/``yes``/``on``/``y`` (case-insensitive) and ``None`` is
    false. Any other value falls back to its truthiness.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)
