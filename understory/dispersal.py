"""
Seed dispersal.

A seeding plant that has stored enough sunlight spends one threshold's worth
of it and throws `num_seeds` seeds into the surrounding square of radius
`width`. Seeds landing outside the world are lost.

Parents are read from the phase-start world and seeds are written into a
fresh buffer, so a seed placed this phase never influences which plants
disperse in the same phase.
"""

from understory.config import Plant, SimConfig, Status
from understory.sampling import Sampler
from understory.world import World, from_cells, occupant


def seed_threshold(plant: Plant, config: SimConfig) -> float:
    """
    Sunlight needed for one round of seeds.

    threshold = width^2 * 2 * light_for_seeds_coefficient
    """
    return plant.width * plant.width * 2 * config.light_for_seeds_coefficient


def can_disperse(plant: Plant, config: SimConfig) -> bool:
    return plant.status is Status.SEEDING and plant.sunlight >= seed_threshold(
        plant, config
    )


def make_seed(parent: Plant) -> Plant:
    """A seed inherits every trait of its parent but starts afresh."""
    return parent._replace(status=Status.SEED, age=0, sunlight=0.0)


def spread_seeds(world: World, config: SimConfig, sampler: Sampler) -> World:
    """
    Disperse seeds from every plant that can afford them.

    Args:
        world: Resolved world after light collection
        config: Simulation configuration
        sampler: Source of dispersal offsets (one block per emitting parent)

    Returns:
        New world whose cells may hold an occupant plus any landed seeds,
        in landing order
    """
    size = len(world)
    cells = [[list(cell) for cell in row] for row in world]

    for i, row in enumerate(world):
        for j, cell in enumerate(row):
            parent = occupant(cell)
            if parent is None or not can_disperse(parent, config):
                continue

            spent = parent._replace(
                sunlight=parent.sunlight - seed_threshold(parent, config)
            )
            cells[i][j] = [spent if plant is parent else plant for plant in cells[i][j]]

            seed = make_seed(parent)
            for dx, dy in sampler.offsets(config.num_seeds, parent.width):
                x, y = i + dx, j + dy
                if 0 <= x < size and 0 <= y < size:
                    cells[x][y].append(seed)

    return from_cells(cells)
