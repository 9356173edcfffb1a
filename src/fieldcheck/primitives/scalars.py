"""Type, number, comparison and presence checks."""

import re
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from ..values import is_empty

_NUMBER_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_DIGITS_PATTERN = re.compile(r"[0-9]+")
_ALPHA_PATTERN = re.compile(r"[A-Za-z]+")
_ALNUM_PATTERN = re.compile(r"[A-Za-z0-9]+")


def to_number(value: Any) -> int | float | Decimal | None:
    """Coerce a value to a number, returning None when it is not numeric.

    Booleans and Decimal NaNs are not numbers here. Strings may carry a sign,
    decimals, an exponent and surrounding whitespace.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal) and value.is_nan():
        return None
    if isinstance(value, (int, float, Decimal)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            return int(text)
        if _NUMBER_PATTERN.fullmatch(text):
            return float(text)
    return None


def _strict_in(value: Any, candidates) -> bool:
    # 1 == True in Python, so compare types as well
    return any(type(value) is type(candidate) and value == candidate for candidate in candidates)


def _loose_equal(left: Any, right: Any) -> bool:
    if any(isinstance(side, Decimal) and side.is_snan() for side in (left, right)):
        # signaling NaNs raise on ==
        return False
    left_number, right_number = to_number(left), to_number(right)
    if left_number is not None and right_number is not None:
        return left_number == right_number
    return left == right


def _scalar_text(value: Any) -> str | None:
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (str, int, float, Decimal)):
        return str(value)
    return None


def accepted(value: Any, acceptables: Sequence = (True, 1, "1")) -> bool:
    """Validate a value is accepted, e.g. a ticked checkbox."""
    return _strict_in(value, acceptables)


def alpha(value: Any) -> bool:
    return isinstance(value, str) and bool(_ALPHA_PATTERN.fullmatch(value))


def alpha_numeric(value: Any) -> bool:
    return isinstance(value, str) and bool(_ALNUM_PATTERN.fullmatch(value))


def array(value: Any) -> bool:
    """Validate a value is a list, tuple or mapping."""
    return isinstance(value, (list, tuple, Mapping))


def boolean(value: Any, values: Sequence = (True, False, 0, 1, "0", "1")) -> bool:
    return value is not None and _strict_in(value, values)


def is_float(value: Any) -> bool:
    """Validate a float, or a string holding a number with a fraction or exponent."""
    if isinstance(value, str):
        text = value.strip()
        return bool(_NUMBER_PATTERN.fullmatch(text)) and not _INTEGER_PATTERN.fullmatch(text)
    return isinstance(value, float)


def decimal(value: Any) -> bool:
    """Alias for :func:`is_float`."""
    return is_float(value)


def integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and bool(_DIGITS_PATTERN.fullmatch(value))


def numeric(value: Any) -> bool:
    return to_number(value) is not None


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def equal_to(value: Any, compared_to: Any) -> bool:
    """Validate a value equals another, comparing numeric strings as numbers."""
    return _loose_equal(value, compared_to)


def _compare(value: Any, other: Any, op) -> bool:
    left, right = to_number(value), to_number(other)
    if left is None or right is None:
        return False
    return op(left, right)


def greater_than(value: Any, other: Any) -> bool:
    return _compare(value, other, lambda a, b: a > b)


def greater_than_or_equal(value: Any, other: Any) -> bool:
    return _compare(value, other, lambda a, b: a >= b)


def less_than(value: Any, other: Any) -> bool:
    return _compare(value, other, lambda a, b: a < b)


def less_than_or_equal(value: Any, other: Any) -> bool:
    return _compare(value, other, lambda a, b: a <= b)


def in_range(value: Any, minimum: Any, maximum: Any) -> bool:
    """Validate a number lies between minimum and maximum, both inclusive."""
    number, low, high = to_number(value), to_number(minimum), to_number(maximum)
    if number is None or low is None or high is None:
        return False
    return low <= number <= high


def in_list(value: Any, choices: Sequence, case_insensitive: bool = False) -> bool:
    """Validate a value is one of ``choices``.

    Args:
        value: Value to look up
        choices: Allowed values
        case_insensitive: Compare strings ignoring case

    Returns:
        True when a loosely equal choice exists
    """
    if case_insensitive:
        choices = [c.lower() if isinstance(c, str) else c for c in choices]
        if isinstance(value, str):
            value = value.lower()
    return any(_loose_equal(value, choice) for choice in choices)


def not_in(value: Any, choices: Sequence, case_insensitive: bool = False) -> bool:
    return not in_list(value, choices, case_insensitive)


def length(value: Any, size: int) -> bool:
    return isinstance(value, str) and len(value) == size


def max_length(value: Any, maximum: int) -> bool:
    text = _scalar_text(value)
    return text is not None and len(text) <= maximum


def min_length(value: Any, minimum: int) -> bool:
    text = _scalar_text(value)
    return text is not None and len(text) >= minimum


def lowercase(value: Any) -> bool:
    return isinstance(value, str) and value != "" and value.lower() == value


def uppercase(value: Any) -> bool:
    return isinstance(value, str) and value != "" and value.upper() == value


def not_empty(value: Any) -> bool:
    return not is_empty(value)


def not_blank(value: Any) -> bool:
    """Validate a value has something other than whitespace.

    Numbers and booleans are never blank.
    """
    if isinstance(value, (bool, int, float, Decimal)):
        return True
    if is_empty(value):
        return False
    return bool(re.search(r"\S", str(value)))


def present(value: Any, key: Any) -> bool:
    """Validate a mapping has ``key``, whatever its value."""
    return isinstance(value, Mapping) and key in value


def confirm(value: Any, field: str, data: Mapping) -> bool:
    """Validate a value matches its ``<field>_confirm`` sibling in the record."""
    key = f"{field}_confirm"
    return key in data and data[key] == value
