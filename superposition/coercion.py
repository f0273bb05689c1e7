"""
Value Coercion for the Superposition algebra.

Every arithmetic and comparison pair is evaluated on double-precision
floats. This module decides which operands can be read as numbers.

Numeric kinds:
    INTEGER — any integral value (int, numbers.Integral)
    FLOAT   — any real floating value (float, numbers.Real)
    INVALID — everything else: text, containers, None, bool, complex

Coercion never raises. Callers test the success flag.
"""

from __future__ import annotations

import numbers
from enum import Enum
from typing import Any


class NumericKind(Enum):
    """The closed set of operand kinds the engines can act on."""
    INTEGER = "integer"
    FLOAT = "float"
    INVALID = "invalid"


def numeric_kind(value: Any) -> NumericKind:
    """
    Classify an operand.

    bool is an int subclass in Python but is not a number here.
    """
    if isinstance(value, bool):
        return NumericKind.INVALID
    if isinstance(value, numbers.Integral):
        return NumericKind.INTEGER
    if isinstance(value, numbers.Real):
        return NumericKind.FLOAT
    return NumericKind.INVALID


def coerce_numeric(value: Any) -> tuple[float, bool]:
    """
    Convert an operand to a float.

    Returns:
        (number, True) on success, (0.0, False) if not numeric.
        Integers beyond double range are reported as not numeric.
    """
    kind = numeric_kind(value)
    if kind is NumericKind.INVALID:
        return 0.0, False

    try:
        return float(value), True
    except (OverflowError, TypeError, ValueError):
        return 0.0, False


def is_numeric(value: Any) -> bool:
    """Check whether an operand coerces to a float."""
    return coerce_numeric(value)[1]
