"""
Tick orchestration and full-run simulation.

One tick applies, in fixed order:

1. Maturation: germinating plants old enough start seeding
2. Light: canopies compete and plants collect sunlight
3. Dispersal: plants with enough sunlight throw seeds
4. Resolution: every cell collapses to at most one plant
5. Mutation: surviving seeds trade one trait against another
6. Germination: seeds become germinating plants
7. Aging: every plant ages by one tick
8. Removal: plants past their life span die

Each phase is a whole-world transform; the sampler is the only source of
randomness.
"""

from collections.abc import Iterator
from dataclasses import dataclass

import jax.random as jr
import numpy as np
from jax import Array

from understory import dispersal, lifecycle, light, mutation, resolution
from understory.config import SimConfig, Status
from understory.sampling import KeySampler, Sampler
from understory.traits import TRAIT_NAMES
from understory.world import (
    World,
    count_by_status,
    make_world,
    population,
    trait_vectors,
    validate_world,
)


def tick(world: World, config: SimConfig, sampler: Sampler) -> World:
    """
    Advance the world by one tick.

    Args:
        world: Resolved world (at most one plant per cell)
        config: Simulation configuration
        sampler: Source of dispersal, resolution and mutation draws

    Returns:
        New world after all eight phases
    """
    world = lifecycle.make_plants_seeding(world, config)
    world = light.collect_sunlight(world, config)
    world = dispersal.spread_seeds(world, config, sampler)
    world = resolution.resolve_seeds(world, sampler)
    world = mutation.mutate_seeds(world, config, sampler)
    world = lifecycle.germinate_seeds(world)
    world = lifecycle.age_plants(world)
    world = lifecycle.kill_old_plants(world)
    return world


def iterate_ticks(
    world: World,
    num_ticks: int,
    config: SimConfig,
    sampler: Sampler,
) -> Iterator[World]:
    """Lazily yield the world after each of `num_ticks` ticks."""
    validate_world(world)
    for _ in range(num_ticks):
        world = tick(world, config, sampler)
        yield world


def run(
    world: World,
    num_ticks: int,
    config: SimConfig,
    sampler: Sampler,
) -> list[World]:
    """Run `num_ticks` ticks and return one snapshot per completed tick."""
    return list(iterate_ticks(world, num_ticks, config, sampler))


@dataclass
class History:
    """
    Complete record of a simulation run.

    Contains:
    - worlds: World at each tick (including the initial world)
    - config: Configuration the run used
    """

    worlds: list[World]
    config: SimConfig

    @property
    def num_ticks(self) -> int:
        return len(self.worlds) - 1

    def trait_records(self) -> list[list[tuple[int, int, int, int]]]:
        """Per completed tick, the row-major trait vectors of living plants."""
        return [trait_vectors(world) for world in self.worlds[1:]]

    def get_population_arrays(self) -> dict[str, np.ndarray]:
        """Population counts per world (initial included), total and by status."""
        counts = [count_by_status(world) for world in self.worlds]
        arrays = {"total": np.array([population(world) for world in self.worlds])}
        for status in Status:
            arrays[status.value] = np.array([c[status] for c in counts])
        return arrays

    def get_trait_arrays(self) -> dict[str, np.ndarray]:
        """
        Mean of each trait over living plants, per world.

        Ticks with no living plants give NaN.
        """
        means: dict[str, list[float]] = {name: [] for name in TRAIT_NAMES}
        for world in self.worlds:
            vectors = np.array(trait_vectors(world), dtype=float).reshape(-1, 4)
            for column, name in enumerate(TRAIT_NAMES):
                if len(vectors) == 0:
                    means[name].append(float("nan"))
                else:
                    means[name].append(float(vectors[:, column].mean()))
        return {name: np.array(values) for name, values in means.items()}

    def get_scalar_summary(self) -> dict[str, float]:
        """
        Compute scalar diagnostic summary of the run.

        Returns a dictionary with:
        - Ticks: Number of completed ticks
        - FinalPopulation / PeakPopulation: Living plants
        - ExtinctAt: First tick with no living plants (-1 if never)
        - Mean<Trait>: Final mean trait values (NaN if extinct)
        """
        populations = self.get_population_arrays()["total"]
        traits = self.get_trait_arrays()
        extinct = np.nonzero(populations[1:] == 0)[0]

        summary = {
            "Ticks": self.num_ticks,
            "FinalPopulation": int(populations[-1]),
            "PeakPopulation": int(populations.max()),
            "ExtinctAt": int(extinct[0]) + 1 if len(extinct) else -1,
        }
        for name in TRAIT_NAMES:
            label = "Mean" + "".join(part.title() for part in name.split("_"))
            summary[label] = float(traits[name][-1])
        return summary

    def print_summary(self) -> None:
        """Print a formatted summary table to stdout."""
        summary = self.get_scalar_summary()
        print("\n" + "=" * 40)
        print("SIMULATION SUMMARY")
        print("=" * 40)
        for key, value in summary.items():
            if isinstance(value, int):
                print(f"{key:20s}: {value:>10d}")
            else:
                print(f"{key:20s}: {value:>10.3f}")
        print("=" * 40)


def run_simulation(
    config: SimConfig,
    key: Array | None = None,
    initial_world: World | None = None,
    num_ticks: int | None = None,
) -> History:
    """
    Run a complete simulation from a configuration.

    Args:
        config: Simulation configuration
        key: JAX random key (defaults to PRNGKey(0))
        initial_world: Optional starting world (defaults to a single founder
            at the centre)
        num_ticks: Number of ticks (defaults to config.num_ticks)

    Returns:
        History containing the initial world and one world per tick
    """
    if key is None:
        key = jr.PRNGKey(0)
    if initial_world is None:
        initial_world = make_world(config)
    if num_ticks is None:
        num_ticks = config.num_ticks

    sampler = KeySampler(key)
    worlds = [initial_world]
    worlds.extend(iterate_ticks(initial_world, num_ticks, config, sampler))
    return History(worlds=worlds, config=config)
