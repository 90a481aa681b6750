"""
Canopy shading and sunlight collection.

Every living plant spreads a canopy over nearby cells. Each covered cell
receives a claim (owner position, owner height); the tallest claim wins the
cell, and the winner collects one unit of sunlight for every cell it wins.

Tie-break: plants are enumerated row-major, and each plant's canopy offsets
in ascending dx then ascending dy. The earliest-enumerated claim keeps a
contested cell unless a strictly taller claim arrives, which makes the
outcome reproducible for a given layout.
"""

from understory.config import CanopyShape, Plant, SimConfig
from understory.world import Position, World, iter_occupants, map_positions


def canopy_offsets(
    width: int, shape: CanopyShape = CanopyShape.DIAMOND
) -> list[tuple[int, int]]:
    """
    Offsets covered by a canopy of the given width, in enumeration order.

    Diamond: |dx| + |dy| < width (Manhattan radius width - 1)
    Square:  max(|dx|, |dy|) < width
    """
    reach = width - 1
    offsets = []
    for dx in range(-reach, reach + 1):
        for dy in range(-reach, reach + 1):
            if shape is CanopyShape.DIAMOND and abs(dx) + abs(dy) >= width:
                continue
            offsets.append((dx, dy))
    return offsets


def canopy_cells(
    world: World,
    position: Position,
    width: int,
    shape: CanopyShape = CanopyShape.DIAMOND,
) -> list[Position]:
    """Cells covered by a canopy, clipped to the world bounds."""
    size = len(world)
    i, j = position
    return [
        (i + dx, j + dy)
        for dx, dy in canopy_offsets(width, shape)
        if 0 <= i + dx < size and 0 <= j + dy < size
    ]


def resolve_claims(world: World, config: SimConfig) -> dict[Position, Position]:
    """
    Decide which plant receives the light falling on each covered cell.

    Returns:
        Mapping from covered cell to the position of the winning plant
    """
    # cell -> (height, owner)
    best: dict[Position, tuple[int, Position]] = {}
    for owner, plant in iter_occupants(world):
        for cell in canopy_cells(world, owner, plant.width, config.canopy_shape):
            current = best.get(cell)
            if current is None or plant.height > current[0]:
                best[cell] = (plant.height, owner)
    return {cell: owner for cell, (_, owner) in best.items()}


def light_received(world: World, config: SimConfig) -> dict[Position, int]:
    """Units of sunlight each plant wins this tick, keyed by plant position."""
    totals: dict[Position, int] = {}
    for owner in resolve_claims(world, config).values():
        totals[owner] = totals.get(owner, 0) + 1
    return totals


def collect_sunlight(world: World, config: SimConfig) -> World:
    """
    Add this tick's light to every plant's sunlight store.

    Args:
        world: Resolved world (at most one plant per cell)
        config: Simulation configuration (canopy shape)

    Returns:
        New world with updated sunlight
    """
    totals = light_received(world, config)

    def gain(position: Position, plant: Plant) -> Plant:
        units = totals.get(position, 0)
        if units == 0:
            return plant
        return plant._replace(sunlight=plant.sunlight + units)

    return map_positions(world, gain)
