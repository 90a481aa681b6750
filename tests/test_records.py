"""
Tests for per-tick record serialization.
"""

import io

import jax.random as jr

from understory import records, rollout
from understory.config import Plant, SimConfig, Status
from understory.world import empty_world, place


def make_test_plant(height: int = 8, width: int = 3) -> Plant:
    """Create a seeding test plant."""
    return Plant(Status.SEEDING, height, width, 0, 20, 50, 0.0)


class TestFormatting:
    """Tests for turning worlds into rows."""

    def test_format_record(self) -> None:
        assert records.format_record((8, 3, 20, 50)) == "8,3,20,50"

    def test_world_row_row_major(self) -> None:
        world = empty_world(3)
        world = place(world, (1, 0), make_test_plant(height=2))
        world = place(world, (0, 1), make_test_plant(height=1))

        assert records.world_row(world) == ["1,3,20,50", "2,3,20,50"]

    def test_empty_world_empty_row(self) -> None:
        assert records.world_row(empty_world(4)) == []

    def test_rows_vary_with_population(self) -> None:
        one = place(empty_world(3), (0, 0), make_test_plant())
        two = place(one, (2, 2), make_test_plant())
        rows = records.history_rows([one, two])
        assert [len(row) for row in rows] == [1, 2]


class TestWriting:
    """Tests for streaming rows to a sink."""

    def test_semicolon_separated_no_header(self) -> None:
        world = empty_world(3)
        world = place(world, (0, 0), make_test_plant(height=4))
        world = place(world, (2, 2), make_test_plant(height=6))
        stream = io.StringIO()

        count = records.write_rows(records.history_rows([world, empty_world(3)]), stream)

        assert count == 2
        assert stream.getvalue() == "4,3,20,50;6,3,20,50\n\n"

    def test_write_history(self, tmp_path) -> None:
        config = SimConfig(world_size=9, num_ticks=6)
        history = rollout.run_simulation(config, key=jr.PRNGKey(0))
        path = tmp_path / "history.csv"

        count = records.write_history(history, path)

        lines = path.read_text().splitlines()
        assert count == 6
        assert len(lines) == 6
        for line, vectors in zip(lines, history.trait_records()):
            columns = line.split(";") if line else []
            assert len(columns) == len(vectors)
