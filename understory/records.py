"""
Serialization of per-tick plant records.

Each tick becomes one row. Each living plant becomes one column holding its
comma-joined trait vector `height,width,life_span,shade_tolerance`, in
row-major cell order. Columns are separated by `;` and no header is
written, so rows have as many columns as the tick had living plants.
"""

import csv
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from understory.rollout import History
from understory.world import World, trait_vectors

COLUMN_SEPARATOR = ";"
FIELD_SEPARATOR = ","


def format_record(vector: tuple[int, int, int, int]) -> str:
    """Join a trait vector into one column value, e.g. '8,3,20,50'."""
    return FIELD_SEPARATOR.join(str(value) for value in vector)


def world_row(world: World) -> list[str]:
    """One row of formatted records for a single world."""
    return [format_record(vector) for vector in trait_vectors(world)]


def history_rows(worlds: Iterable[World]) -> list[list[str]]:
    return [world_row(world) for world in worlds]


def write_rows(
    rows: Iterable[list[str]],
    stream: TextIO,
    separator: str = COLUMN_SEPARATOR,
) -> int:
    """
    Stream rows to an open text sink.

    Returns:
        Number of rows written
    """
    writer = csv.writer(stream, delimiter=separator, lineterminator="\n")
    count = 0
    for row in rows:
        writer.writerow(row)
        count += 1
    return count


def write_history(
    history: History,
    path: str | Path,
    separator: str = COLUMN_SEPARATOR,
) -> int:
    """
    Write one row per completed tick of a run to `path`.

    The initial world is not written, matching the tick-by-tick stream.
    """
    with open(path, "w", newline="") as stream:
        return write_rows(history_rows(history.worlds[1:]), stream, separator)
