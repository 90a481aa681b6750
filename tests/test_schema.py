"""
Tests for the run configuration schema.
"""

import json

import pytest
from pydantic import ValidationError

from understory.config import CanopyShape, SimConfig
from understory.schema import PlantSchema, RunSchema, load_run


class TestRunSchema:
    """Tests for parsing run descriptions."""

    def test_defaults_match_sim_config(self) -> None:
        assert RunSchema().to_config() == SimConfig()

    def test_founder_traits_carried_over(self) -> None:
        run = RunSchema(founder=PlantSchema(height=12, width=2, life_span=30))
        config = run.to_config()
        assert config.initial_height == 12
        assert config.initial_width == 2
        assert config.initial_life_span == 30

    def test_canopy_shape_from_string(self) -> None:
        run = RunSchema.model_validate({"canopy_shape": "square"})
        assert run.to_config().canopy_shape is CanopyShape.SQUARE

    def test_invalid_shade_tolerance(self) -> None:
        with pytest.raises(ValidationError):
            PlantSchema(shade_tolerance=101)

    def test_invalid_world_size(self) -> None:
        with pytest.raises(ValidationError):
            RunSchema(world_size=0)

    def test_load_run(self, tmp_path) -> None:
        path = tmp_path / "run.json"
        path.write_text(
            json.dumps({"world_size": 11, "num_ticks": 3, "founder": {"width": 2}})
        )

        run = load_run(path)

        assert run.world_size == 11
        assert run.num_ticks == 3
        assert run.founder.width == 2
        assert run.founder.height == 8
