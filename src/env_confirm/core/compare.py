"""Comparison and coercion rules for environment variable values.

Environment values are always strings, while callers compare them against
numbers, strings, and booleans. The rules here decide how each pair is
compared:

- a numeric ``compare`` (int or float, but not bool) compares numerically;
  a value that does not parse as a number fails every relation
- a string ``compare`` compares numerically when both sides parse as
  numbers, otherwise lexically
- booleans compare as the strings ``true`` and ``false``
"""

from __future__ import annotations

import json
import math
import operator
import re
from typing import Any, Callable, Iterable

_ORDERING: dict[str, Callable[[Any, Any], bool]] = {
    "eq": operator.eq,
    "gt": operator.gt,
    "ge": operator.ge,
    "lt": operator.lt,
    "le": operator.le,
}

# ASCII decimal with optional sign, fraction and exponent; no underscores
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_number(text: Any) -> float | None:
    """Parse a value as a number.

    Args:
        text: Value to parse

    Returns:
        The parsed float, or None if it is not a plain ASCII decimal number.
        Digit separators like ``1_000``, non-ASCII digits, ``inf`` and ``nan``
        are rejected.
    """
    if isinstance(text, bool):
        return None
    if isinstance(text, (int, float)):
        number = float(text)
    else:
        stripped = str(text).strip()
        if not _NUMBER_RE.fullmatch(stripped):
            return None
        number = float(stripped)
    if math.isnan(number):
        return None
    return number


def parse_integer(text: Any) -> int | None:
    """Parse a value as an integer, accepting integral floats like ``8.0``."""
    number = parse_number(text)
    if number is None or math.isinf(number) or not number.is_integer():
        return None
    return int(number)


def to_text(value: Any) -> str:
    """Render a value the way it would be stored in the environment."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def relate(value: str, op: str, compare: Any) -> bool:
    """Apply a relation between an environment value and a comparison operand.

    Args:
        value: The environment value
        op: One of eq, gt, ge, lt, le
        compare: The operand to compare against

    Returns:
        Whether ``value <op> compare`` holds under the coercion rules
    """
    fn = _ORDERING[op]

    if isinstance(compare, (int, float)) and not isinstance(compare, bool):
        left = parse_number(value)
        right = parse_number(compare)
        if left is None or right is None:
            return False
        return fn(left, right)

    compare_text = to_text(compare)
    left = parse_number(value)
    right = parse_number(compare_text)
    if left is not None and right is not None:
        return fn(left, right)
    return fn(value, compare_text)


def loose_equals(value: str, compare: Any) -> bool:
    """Check equality under the coercion rules."""
    return relate(value, "eq", compare)


def text_to_array(text: str) -> list[str]:
    """Split a comma-separated string into a list of trimmed items."""
    return [item.strip() for item in text.strip().split(",")]


def array_to_text(values: Iterable[Any]) -> str:
    """Render a list of values for a failure message, e.g. ``["a", "b"]``."""
    return "[" + ", ".join(json.dumps(v, default=str) for v in values) + "]"
