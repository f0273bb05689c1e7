"""
Operand Extraction.

Every engine operation accepts either a bare value or a Superposition.
A bare value is treated as a one-element disjunctive superposition.
"""

from __future__ import annotations

from typing import Any, Union

from ..domain import Mode, Superposition

Operand = Union[Superposition, Any]


def extract_operand(operand: Operand) -> tuple[tuple, Mode]:
    """Return the (values, mode) pair the engines scan over."""
    if isinstance(operand, Superposition):
        return operand.values, operand.mode
    return (operand,), Mode.DISJUNCTIVE
