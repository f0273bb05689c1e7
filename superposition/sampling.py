"""
Eigenstate sampling.

Draws one eigenstate from a superposition using a generator owned by
the caller. No process-wide random state is touched or reseeded.
"""

from __future__ import annotations

import random
from typing import Any, Optional

from .domain import Superposition


def random_eigenstate(
    superposition: Superposition,
    rng: Optional[random.Random] = None,
    default: Any = None,
) -> Any:
    """
    Return one eigenstate chosen uniformly at random.

    Args:
        superposition: Source of eigenstates
        rng: Generator to draw from; a fresh unseeded random.Random if None
        default: Returned when there are no eigenstates
    """
    if not superposition.values:
        return default
    if rng is None:
        rng = random.Random()
    return rng.choice(superposition.values)
