"""
Seed resolution: collapse every cell to at most one plant.

If a cell already has a committed occupant, every seed that landed there
is discarded. If it holds only seeds, one of them is kept uniformly at
random. Empty cells stay empty.
"""

from understory.sampling import Sampler
from understory.world import EMPTY, Cell, World, map_cells, occupant


def resolve_cell(cell: Cell, sampler: Sampler) -> Cell:
    if not cell:
        return EMPTY
    resident = occupant(cell)
    if resident is not None:
        return (resident,)
    if len(cell) == 1:
        return cell
    return (cell[sampler.index(len(cell))],)


def resolve_seeds(world: World, sampler: Sampler) -> World:
    """
    Resolve every cell of a post-dispersal world.

    Cells are visited row-major; the sampler is drawn from only for cells
    holding two or more seeds and no occupant.
    """
    return map_cells(world, lambda cell: resolve_cell(cell, sampler))
