"""Utility functions for the mortgage calculator.

This module provides helpers for turning user input (strings such as
``"500k"``, floats from JSON payloads, plain integers) into ``Decimal``
values so that every calculation runs on the same numeric type.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, getcontext
from typing import Union

from .exceptions import InvalidInputError

getcontext().prec = 28  # increase decimal precision to avoid rounding errors

Number = Union[int, float, str, Decimal]

_SUFFIXES = {
    "k": Decimal("1000"),
    "m": Decimal("1000000"),
}


def decimal_from_str(value: str) -> Decimal:
    """Convert a numeric string into a ``Decimal``.

    The function strips any commas, whitespace and a leading ``$`` and handles
    both integer and float-like strings. It raises ``InvalidInputError`` if
    conversion fails.
    """
    cleaned = value.strip().replace(",", "").lstrip("$")
    try:
        result = Decimal(cleaned)
    except InvalidOperation as exc:
        raise InvalidInputError(f"Invalid numeric value: {value}") from exc
    if not result.is_finite():
        raise InvalidInputError(f"Invalid numeric value: {value}")
    return result


def to_decimal(value: Number, name: str = "value") -> Decimal:
    """Normalize ``value`` to a finite ``Decimal``.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        result = decimal_from_str(value)
    else:
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if not result.is_finite():
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    return result


def parse_amount(value: str) -> Decimal:
    """Parse a money string with optional shorthand suffixes.

    Accepts plain numbers ("500000") and shorthand with ``k``/``m`` suffixes
    (e.g., "500k" meaning 500_000, "1.2m" meaning 1_200_000).
    """
    text = value.strip().lower().replace(",", "")
    factor = Decimal("1")
    if text and text[-1] in _SUFFIXES:
        factor = _SUFFIXES[text[-1]]
        text = text[:-1]
    try:
        return decimal_from_str(text) * factor
    except InvalidInputError as exc:
        raise InvalidInputError(f"Invalid amount: {value}") from exc


def to_jsonable(value):
    """Convert ``Decimal`` values (possibly nested in dicts/lists) to floats."""
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value
