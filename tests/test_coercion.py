"""
Tests for Value Coercion.

These tests verify that:
1. Every integer and real float width coerces to a float
2. Text, containers, None, bool and complex are rejected
3. Coercion never raises
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from superposition.coercion import (
    NumericKind,
    coerce_numeric,
    is_numeric,
    numeric_kind,
)
from superposition.domain import any_of


class TestNumericKind:
    """Test classification of operands."""

    @pytest.mark.parametrize("value", [0, 7, -3, 2**63, 10**30])
    def test_integers(self, value):
        assert numeric_kind(value) is NumericKind.INTEGER

    @pytest.mark.parametrize("value", [0.0, -2.5, 1e300, math.inf, Fraction(1, 3)])
    def test_reals(self, value):
        assert numeric_kind(value) is NumericKind.FLOAT

    @pytest.mark.parametrize(
        "value",
        ["5", "cat", None, [1], (1,), {"a": 1}, 1 + 2j, Decimal("1.5")],
    )
    def test_non_numeric(self, value):
        assert numeric_kind(value) is NumericKind.INVALID

    def test_bool_is_not_numeric(self):
        """bool subclasses int but is not a number here."""
        assert numeric_kind(True) is NumericKind.INVALID
        assert numeric_kind(False) is NumericKind.INVALID

    def test_superposition_is_not_numeric(self):
        assert numeric_kind(any_of(1, 2)) is NumericKind.INVALID


class TestCoerceNumeric:
    """Test conversion to float."""

    def test_integer_becomes_float(self):
        value, ok = coerce_numeric(42)
        assert ok is True
        assert value == 42.0
        assert isinstance(value, float)

    def test_float_passes_through(self):
        assert coerce_numeric(-2.5) == (-2.5, True)

    def test_fraction_coerces(self):
        assert coerce_numeric(Fraction(1, 4)) == (0.25, True)

    def test_text_fails(self):
        assert coerce_numeric("12") == (0.0, False)

    def test_none_fails(self):
        assert coerce_numeric(None) == (0.0, False)

    def test_huge_integer_fails_without_raising(self):
        """An int beyond double range is reported, not raised."""
        assert coerce_numeric(10**400) == (0.0, False)

    def test_nan_is_numeric(self):
        value, ok = coerce_numeric(math.nan)
        assert ok is True
        assert math.isnan(value)

    def test_is_numeric(self):
        assert is_numeric(3)
        assert not is_numeric("3")
