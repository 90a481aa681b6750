"""
Grid representation for the plant simulation.

A world is an N x N grid of cells. Each cell is an ordered tuple of plant
candidates: empty, a single occupant, or (transiently, between dispersal and
seed resolution) an occupant plus any number of freshly landed seeds.

Worlds are immutable nested tuples. Every phase of a tick reads one world
and builds a fresh one, so no plant ever observes another plant's
same-phase update.
"""

from collections.abc import Callable, Iterator

from understory.config import Plant, SimConfig, Status

Cell = tuple[Plant, ...]
World = tuple[tuple[Cell, ...], ...]
Position = tuple[int, int]

EMPTY: Cell = ()


def empty_world(size: int) -> World:
    """Create a size x size world with no plants."""
    if size < 1:
        raise ValueError("World size must be positive")
    return tuple(tuple(EMPTY for _ in range(size)) for _ in range(size))


def make_world(config: SimConfig, plant: Plant | None = None) -> World:
    """
    Build the initial world: one plant at the centre cell, all else empty.

    Args:
        config: Simulation configuration (world_size, founding traits)
        plant: Optional founder (defaults to Plant.initial(config))

    Returns:
        Validated world
    """
    if plant is None:
        plant = Plant.initial(config)
    middle = config.world_size // 2
    world = place(empty_world(config.world_size), (middle, middle), plant)
    validate_world(world)
    return world


def place(world: World, position: Position, plant: Plant) -> World:
    """Return a copy of `world` whose cell at `position` holds only `plant`."""
    i, j = position
    size = len(world)
    if not (0 <= i < size and 0 <= j < size):
        raise ValueError(f"Position {position} outside {size}x{size} world")
    return tuple(
        tuple(
            (plant,) if (x, y) == (i, j) else cell for y, cell in enumerate(row)
        )
        for x, row in enumerate(world)
    )


def from_cells(cells: list[list[list[Plant]]]) -> World:
    """Freeze a mutable nested-list grid into a World."""
    return tuple(tuple(tuple(cell) for cell in row) for row in cells)


def validate_world(world: World) -> None:
    """
    Check that a world is well formed before it enters the tick pipeline.

    Raises:
        ValueError: If the grid is not square, a row has the wrong length,
            a cell holds more than one candidate, or a candidate is not a
            valid Plant.
    """
    size = len(world)
    if size == 0:
        raise ValueError("World must have at least one row")
    for x, row in enumerate(world):
        if len(row) != size:
            raise ValueError(
                f"Row {x} has {len(row)} cells, expected {size} (world must be square)"
            )
        for y, cell in enumerate(row):
            if not isinstance(cell, tuple):
                raise ValueError(f"Cell ({x}, {y}) is not a tuple of plants")
            if len(cell) > 1:
                raise ValueError(
                    f"Cell ({x}, {y}) holds {len(cell)} candidates, expected 0 or 1"
                )
            for plant in cell:
                if not isinstance(plant, Plant) or not plant.is_valid():
                    raise ValueError(f"Cell ({x}, {y}) holds an invalid plant: {plant!r}")


def map_cells(world: World, func: Callable[[Cell], Cell]) -> World:
    """Apply `func` to every cell, building a fresh world."""
    return tuple(tuple(func(cell) for cell in row) for row in world)


def map_positions(
    world: World, func: Callable[[Position, Plant], Plant | None]
) -> World:
    """
    Apply `func(position, plant)` to the plant of every occupied cell.

    Expects a resolved world (at most one plant per cell). Returning None
    from `func` empties the cell. Empty cells stay empty.
    """

    def apply(x: int, y: int, cell: Cell) -> Cell:
        if not cell:
            return cell
        (plant,) = cell
        result = func((x, y), plant)
        return EMPTY if result is None else (result,)

    return tuple(
        tuple(apply(x, y, cell) for y, cell in enumerate(row))
        for x, row in enumerate(world)
    )


def map_occupants(world: World, func: Callable[[Plant], Plant | None]) -> World:
    """Apply `func` to the plant of every occupied cell (see map_positions)."""
    return map_positions(world, lambda _, plant: func(plant))


def occupant(cell: Cell) -> Plant | None:
    """The committed (non-seed) plant of a cell, if any."""
    for plant in cell:
        if plant.status is not Status.SEED:
            return plant
    return None


def iter_occupants(world: World) -> Iterator[tuple[Position, Plant]]:
    """
    Yield ((x, y), plant) for every occupied cell in row-major order.

    A cell's plant is its committed occupant, or its first candidate when it
    holds only seeds.
    """
    for x, row in enumerate(world):
        for y, cell in enumerate(row):
            if cell:
                plant = occupant(cell)
                yield (x, y), plant if plant is not None else cell[0]


def population(world: World) -> int:
    """Number of occupied cells."""
    return sum(1 for row in world for cell in row if cell)


def trait_vectors(world: World) -> list[tuple[int, int, int, int]]:
    """
    Living plants as trait vectors, one per occupied cell, row-major.

    This is the per-tick output consumed by the serialization side.
    """
    return [plant.traits() for _, plant in iter_occupants(world)]


def count_by_status(world: World) -> dict[Status, int]:
    counts = {status: 0 for status in Status}
    for _, plant in iter_occupants(world):
        counts[plant.status] += 1
    return counts
