"""
Tests for the Superposition entity.

These tests verify that:
1. Constructors tag the right mode and keep order and duplicates
2. Superpositions are immutable
3. Truth is non-emptiness, regardless of mode
4. Display renders single eigenstates bare and others as mode(...)
5. Arithmetic operators delegate to the combination engine
"""

import dataclasses

import pytest

from superposition.domain import (
    Mode,
    Superposition,
    all_of,
    any_of,
    display,
    eigenstates,
    format_value,
    is_true,
    promote_mode,
)
from superposition.engine.combination import add


# =============================================================================
# CONSTRUCTION
# =============================================================================

class TestConstructors:
    """Test any_of / all_of construction."""

    def test_any_of_is_disjunctive(self):
        sp = any_of(1, 2, 3)
        assert sp.mode is Mode.DISJUNCTIVE
        assert sp.eigenstates() == (1, 2, 3)

    def test_all_of_is_conjunctive(self):
        sp = all_of(4, 5)
        assert sp.mode is Mode.CONJUNCTIVE
        assert sp.is_conjunctive

    def test_zero_arguments_is_legal(self):
        assert any_of().eigenstates() == ()
        assert all_of().eigenstates() == ()

    def test_duplicates_and_order_are_kept(self):
        assert any_of(3, 1, 3, 2).eigenstates() == (3, 1, 3, 2)

    def test_heterogeneous_values_are_stored(self):
        sp = all_of("cat", 2.5, None)
        assert sp.eigenstates() == ("cat", 2.5, None)

    def test_single_list_is_expanded(self):
        assert all_of([10, 15, 20]) == all_of(10, 15, 20)

    def test_single_range_is_expanded(self):
        assert any_of(range(2, 5)).eigenstates() == (2, 3, 4)

    def test_single_string_is_not_expanded(self):
        assert any_of("abc").eigenstates() == ("abc",)

    def test_single_set_is_not_expanded(self):
        """A set has no order, so it stays one eigenstate."""
        assert any_of({1, 2}).eigenstates() == ({1, 2},)
        assert all_of(frozenset({3})).eigenstates() == (frozenset({3}),)

    def test_list_among_several_arguments_is_one_eigenstate(self):
        assert any_of([1, 2], 3).eigenstates() == ([1, 2], 3)


class TestSuperpositionEntity:
    """Test invariants enforced by the dataclass."""

    def test_values_are_stored_as_tuple(self):
        sp = Superposition(values=[1, 2], mode=Mode.DISJUNCTIVE)
        assert sp.values == (1, 2)

    def test_mode_accepts_its_string_value(self):
        assert Superposition(values=(1,), mode="all").mode is Mode.CONJUNCTIVE

    def test_invalid_mode_is_rejected(self):
        with pytest.raises(ValueError):
            Superposition(values=(1,), mode="some")

    def test_is_immutable(self):
        sp = any_of(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            sp.mode = Mode.CONJUNCTIVE

    def test_structural_equality(self):
        assert any_of(1, 2) == Superposition(values=(1, 2), mode=Mode.DISJUNCTIVE)
        assert any_of(1, 2) != all_of(1, 2)

    def test_default_is_empty_disjunctive(self):
        sp = Superposition()
        assert sp.values == ()
        assert sp.mode is Mode.DISJUNCTIVE


class TestModePromotion:
    """Test the mode promotion rule."""

    def test_any_and_any_stays_disjunctive(self):
        assert promote_mode(Mode.DISJUNCTIVE, Mode.DISJUNCTIVE) is Mode.DISJUNCTIVE

    @pytest.mark.parametrize("modes", [
        (Mode.CONJUNCTIVE, Mode.DISJUNCTIVE),
        (Mode.DISJUNCTIVE, Mode.CONJUNCTIVE),
        (Mode.CONJUNCTIVE, Mode.CONJUNCTIVE),
    ])
    def test_any_conjunctive_promotes(self, modes):
        assert promote_mode(*modes) is Mode.CONJUNCTIVE


# =============================================================================
# TRUTH AND ACCESS
# =============================================================================

class TestTruthEvaluation:
    """Truth is solely 'has at least one eigenstate'."""

    @pytest.mark.parametrize("factory", [any_of, all_of])
    def test_empty_is_false(self, factory):
        sp = factory()
        assert is_true(sp) is False
        assert not sp

    @pytest.mark.parametrize("factory", [any_of, all_of])
    def test_non_empty_is_true(self, factory):
        assert is_true(factory(0)) is True

    def test_conjunctive_literal_is_not_rechecked(self):
        """all_of(0, None, '') is true: it has eigenstates."""
        assert all_of(0, None, "").is_true()

    def test_eigenstates_accessor(self):
        sp = all_of(1, 2)
        assert eigenstates(sp) == (1, 2)
        assert eigenstates(sp) is sp.values


class TestDisplay:
    """Test string rendering."""

    def test_single_eigenstate_renders_bare(self):
        assert display(any_of(5)) == "5"
        assert str(all_of("cat")) == "cat"

    def test_multiple_eigenstates_render_with_mode(self):
        assert display(any_of(1, 2, 3)) == "any(1, 2, 3)"
        assert display(all_of(4, 5)) == "all(4, 5)"

    def test_empty_renders_with_mode(self):
        assert display(all_of()) == "all()"

    def test_integral_floats_drop_fraction(self):
        assert display(add(any_of(1, 2, 3), all_of(4, 5))) == "all(5, 6, 6, 7, 7, 8)"

    def test_fractional_floats_keep_fraction(self):
        assert display(any_of(2.5, "cat")) == "any(2.5, cat)"

    def test_format_value(self):
        assert format_value(6.0) == "6"
        assert format_value(-0.25) == "-0.25"
        assert format_value(float("inf")) == "inf"
        assert format_value(1e22) == "1e+22"


# =============================================================================
# OPERATOR OVERLOADING
# =============================================================================

class TestArithmeticOperators:
    """Operators on Superposition delegate to the combination engine."""

    def test_add_scalar(self):
        assert (any_of(1, 2) + 10).eigenstates() == (11.0, 12.0)

    def test_reflected_subtract(self):
        assert (10 - any_of(1, 2)).eigenstates() == (9.0, 8.0)

    def test_multiply_promotes_mode(self):
        result = all_of(2) * any_of(3, 4)
        assert result.mode is Mode.CONJUNCTIVE
        assert result.eigenstates() == (6.0, 8.0)

    def test_divide_drops_zero(self):
        assert (any_of(1, 2) / any_of(0, 2)).eigenstates() == (0.5, 1.0)

    def test_reflected_modulo(self):
        assert (7 % any_of(2, 3)).eigenstates() == (1.0, 1.0)

    def test_operators_compose(self):
        result = (any_of(1, 2) + any_of(10, 20)) * 2
        assert result.eigenstates() == (22.0, 42.0, 24.0, 44.0)
