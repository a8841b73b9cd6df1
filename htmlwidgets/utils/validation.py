"""Integer-like input validation and normalization.

Widget constructors accept integers and numeric strings interchangeably
(query-string values arrive as text). These helpers decide what counts as
integer-like and turn it into a strict ``int`` at the boundary.
"""

import re
from typing import Any, Optional

_INT_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")


def is_int_like(value: Any) -> bool:
    """Check whether a value can be read as an integer without loss.

    Args:
        value: Value to check

    Returns:
        True for ints, integral floats and strings of an optional sign followed
        by digits. Booleans and None are never integer-like.

    Example:
        >>> is_int_like("42")
        True
        >>> is_int_like("4.2")
        False
    """
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        return bool(_INT_PATTERN.match(value))
    return False


def to_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    """Convert an integer-like value to ``int``, falling back to a default.

    Args:
        value: Value to convert
        default: Returned when ``value`` is not integer-like

    Returns:
        The converted integer or ``default``
    """
    if not is_int_like(value):
        return default
    if isinstance(value, bytes):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return int(value.strip())
    return int(value)


def to_positive_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    """Convert an integer-like value that must be greater than zero.

    Empty values, zero and negatives all yield ``default``.
    """
    converted = to_int(value)
    if converted is None or converted <= 0:
        return default
    return converted
