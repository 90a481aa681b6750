"""
Configuration and type definitions for the plant grid simulation.

This module defines the plant record, its lifecycle statuses, and the
constants that drive a simulation run.

Plant record:
    status: Lifecycle stage (seed, germinating, seeding)
    height: Canopy height, decides who wins light at shared cells
    width: Canopy radius and seed dispersal radius
    age: Ticks since the last germinating -> seeding transition
    life_span: Plant is removed once age reaches this
    shade_tolerance: Heritable trait in [0, 100], takes part in trade-offs
    sunlight: Accumulated light units, spent on seeds

All trait values are integers; sunlight is a nonnegative float.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Status(str, Enum):
    """Lifecycle stage of a plant. Death is represented by absence."""

    SEED = "seed"
    GERMINATING = "germinating"
    SEEDING = "seeding"


class CanopyShape(str, Enum):
    """Footprint used to compute which cells a canopy covers."""

    DIAMOND = "diamond"  # |dx| + |dy| < width
    SQUARE = "square"  # max(|dx|, |dy|) < width


class Plant(NamedTuple):
    """
    A single plant occupying (or competing for) a grid cell.

    Plants are immutable; every phase produces updated copies via `_replace`.
    """

    status: Status
    height: int
    width: int
    age: int
    life_span: int
    shade_tolerance: int
    sunlight: float = 0.0

    @classmethod
    def initial(cls, config: "SimConfig") -> "Plant":
        """Create the founding plant placed at the centre of a new world.

        The founder starts out already seeding, so it can disperse as soon
        as it has collected enough light.
        """
        return cls(
            status=Status.SEEDING,
            height=config.initial_height,
            width=config.initial_width,
            age=0,
            life_span=config.initial_life_span,
            shade_tolerance=config.initial_shade_tolerance,
            sunlight=0.0,
        )

    def is_valid(self) -> bool:
        """Check that the record is usable by the tick pipeline."""
        return (
            isinstance(self.status, Status)
            and self.height > 0
            and self.width > 0
            and self.life_span > 0
            and 0 <= self.shade_tolerance <= 100
            and self.age >= 0
            and self.sunlight >= 0
        )

    def traits(self) -> tuple[int, int, int, int]:
        """Heritable trait vector (height, width, life_span, shade_tolerance)."""
        return (self.height, self.width, self.life_span, self.shade_tolerance)


@dataclass(frozen=True)
class SimConfig:
    """
    Complete simulation configuration.

    Defaults reproduce the reference run: a 40x40 world seeded with a single
    plant at its centre, iterated for 20 ticks.
    """

    # World parameters
    world_size: int = 40
    num_ticks: int = 20

    # Lifecycle
    germination_time: int = 5  # Ticks a germinating plant waits before seeding

    # Reproduction
    # Plants need this much light per unit of canopy area to send out seeds
    light_for_seeds_coefficient: float = 2.5
    num_seeds: int = 4

    # Mutation
    mutation_factor: float = 0.5  # Score units moved from one trait to another
    min_trait_value: int = 1  # Floor for height, width and life_span

    # Canopy footprint
    canopy_shape: CanopyShape = CanopyShape.DIAMOND

    # Founding plant
    initial_height: int = 8
    initial_width: int = 3
    initial_life_span: int = 20
    initial_shade_tolerance: int = 50  # out of 100

    def __post_init__(self) -> None:
        if self.world_size < 1:
            raise ValueError("world_size must be positive")
        if self.num_ticks < 0:
            raise ValueError("num_ticks must be nonnegative")
        if self.germination_time < 0:
            raise ValueError("germination_time must be nonnegative")
        if self.light_for_seeds_coefficient <= 0:
            raise ValueError("light_for_seeds_coefficient must be positive")
        if self.num_seeds < 0:
            raise ValueError("num_seeds must be nonnegative")
        if self.mutation_factor < 0:
            raise ValueError("mutation_factor must be nonnegative")
        if self.min_trait_value < 1:
            raise ValueError("min_trait_value must be at least 1")
        if not isinstance(self.canopy_shape, CanopyShape):
            # Accept plain strings such as "square"
            object.__setattr__(self, "canopy_shape", CanopyShape(self.canopy_shape))
        for name in ("initial_height", "initial_width", "initial_life_span"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive")
        if not 0 <= self.initial_shade_tolerance <= 100:
            raise ValueError("initial_shade_tolerance must be in [0, 100]")
