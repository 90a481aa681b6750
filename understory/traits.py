"""
Trait scoring functions for the mutation trade-off.

Every heritable trait is projected onto a shared real-valued "trade-off
scale" so that mutation can move a fixed amount of evolutionary budget
between traits measured in incommensurable native units.

The scores are logarithmic: equal score deltas correspond to multiplicative
changes in native units, so large trait values cost more to grow further.

    height:          s = ln(h)
    width:           s = 2 ln(w)          (canopy area grows with w^2)
    life_span:       s = ln(l)
    shade_tolerance: s = ln((t + 1) / (101 - t))   (finite on [0, 100])

Each score has a matching inverse. Traits are looked up by name in the
`TRAITS` table rather than by incidental positional coincidence.
"""

from collections.abc import Callable
from typing import NamedTuple

import numpy as np

MAX_SHADE_TOLERANCE = 100


class TraitScale(NamedTuple):
    """Score/inverse-score pair for one heritable trait."""

    name: str  # Field name on Plant
    score: Callable[[float], float]
    inverse_score: Callable[[float], float]
    lower: int  # Inclusive floor after rounding
    upper: int | None = None  # Inclusive ceiling, if bounded


def log_score(x: float) -> float:
    """Natural-log score, defined for x > 0."""
    return float(np.log(x))


def log_inverse(s: float) -> float:
    return float(np.exp(s))


def area_score(x: float) -> float:
    """Score of a radius whose cost scales with the covered area."""
    return float(2.0 * np.log(x))


def area_inverse(s: float) -> float:
    return float(np.exp(s / 2.0))


def shade_score(t: float) -> float:
    """Logit-style score of a shade tolerance in [0, 100]."""
    return float(np.log((t + 1.0) / (MAX_SHADE_TOLERANCE + 1.0 - t)))


def shade_inverse(s: float) -> float:
    e = np.exp(s)
    return float(((MAX_SHADE_TOLERANCE + 1.0) * e - 1.0) / (1.0 + e))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from -inf (2.5 -> 3)."""
    return int(np.floor(x + 0.5))


TRAITS: tuple[TraitScale, ...] = (
    TraitScale("height", log_score, log_inverse, lower=1),
    TraitScale("width", area_score, area_inverse, lower=1),
    TraitScale("life_span", log_score, log_inverse, lower=1),
    TraitScale(
        "shade_tolerance",
        shade_score,
        shade_inverse,
        lower=0,
        upper=MAX_SHADE_TOLERANCE,
    ),
)

TRAIT_NAMES: tuple[str, ...] = tuple(trait.name for trait in TRAITS)


def get_trait(name: str) -> TraitScale:
    """Look up a trait scale by its Plant field name."""
    for trait in TRAITS:
        if trait.name == name:
            return trait
    raise ValueError(f"Unknown trait: {name}")


def clamp(trait: TraitScale, value: int, min_trait_value: int = 1) -> int:
    """
    Clamp a rounded trait value into the trait's valid domain.

    Positive-only traits use `max(lower, min_trait_value)` as their floor so
    that mutation can never produce a zero-width canopy or a stillborn plant.
    """
    floor = trait.lower if trait.lower == 0 else max(trait.lower, min_trait_value)
    if value < floor:
        return floor
    if trait.upper is not None and value > trait.upper:
        return trait.upper
    return value


def shift_trait(
    trait: TraitScale,
    value: int,
    delta: float,
    min_trait_value: int = 1,
) -> int:
    """
    Move a native trait value by `delta` on the trade-off scale.

    new = clamp(round(inverse(score(value) + delta)))
    """
    shifted = trait.inverse_score(trait.score(value) + delta)
    return clamp(trait, round_half_up(shifted), min_trait_value)

