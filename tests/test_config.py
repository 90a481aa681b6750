"""
Tests for the plant record and simulation configuration.
"""

import pytest

from understory.config import CanopyShape, Plant, SimConfig, Status


def make_test_plant(
    status: Status = Status.SEEDING,
    height: int = 8,
    width: int = 3,
    age: int = 0,
    life_span: int = 20,
    shade_tolerance: int = 50,
    sunlight: float = 0.0,
) -> Plant:
    """Create a test plant with given values."""
    return Plant(
        status=status,
        height=height,
        width=width,
        age=age,
        life_span=life_span,
        shade_tolerance=shade_tolerance,
        sunlight=sunlight,
    )


class TestPlant:
    """Tests for the plant record."""

    def test_initial_plant_matches_config(self) -> None:
        """Founder takes its traits from the config and starts seeding."""
        config = SimConfig(initial_height=12, initial_width=2)
        plant = Plant.initial(config)

        assert plant.status is Status.SEEDING
        assert plant.height == 12
        assert plant.width == 2
        assert plant.age == 0
        assert plant.life_span == config.initial_life_span
        assert plant.shade_tolerance == config.initial_shade_tolerance
        assert plant.sunlight == 0.0

    def test_default_plant_is_valid(self) -> None:
        assert make_test_plant().is_valid()

    def test_nonpositive_traits_invalid(self) -> None:
        """Zero height, width or life span makes a plant unusable."""
        assert not make_test_plant(height=0).is_valid()
        assert not make_test_plant(width=0).is_valid()
        assert not make_test_plant(life_span=0).is_valid()

    def test_negative_counters_invalid(self) -> None:
        assert not make_test_plant(age=-1).is_valid()
        assert not make_test_plant(sunlight=-0.5).is_valid()

    def test_shade_tolerance_out_of_range_invalid(self) -> None:
        assert not make_test_plant(shade_tolerance=101).is_valid()
        assert not make_test_plant(shade_tolerance=-1).is_valid()

    def test_trait_vector_order(self) -> None:
        """Trait vector is (height, width, life_span, shade_tolerance)."""
        plant = make_test_plant(height=8, width=3, life_span=20, shade_tolerance=50)
        assert plant.traits() == (8, 3, 20, 50)

    def test_replace_returns_copy(self) -> None:
        """Plants are immutable; updates produce new records."""
        plant = make_test_plant()
        aged = plant._replace(age=3)
        assert plant.age == 0
        assert aged.age == 3


class TestSimConfig:
    """Tests for configuration defaults and validation."""

    def test_reference_defaults(self) -> None:
        config = SimConfig()
        assert config.world_size == 40
        assert config.num_ticks == 20
        assert config.germination_time == 5
        assert config.light_for_seeds_coefficient == 2.5
        assert config.num_seeds == 4
        assert config.mutation_factor == 0.5
        assert config.canopy_shape is CanopyShape.DIAMOND

    def test_canopy_shape_accepts_string(self) -> None:
        config = SimConfig(canopy_shape="square")
        assert config.canopy_shape is CanopyShape.SQUARE

    def test_unknown_canopy_shape_rejected(self) -> None:
        with pytest.raises(ValueError):
            SimConfig(canopy_shape="hexagon")

    @pytest.mark.parametrize(
        "field,value",
        [
            ("world_size", 0),
            ("num_ticks", -1),
            ("germination_time", -1),
            ("light_for_seeds_coefficient", 0.0),
            ("num_seeds", -1),
            ("mutation_factor", -0.1),
            ("min_trait_value", 0),
            ("initial_height", 0),
            ("initial_width", 0),
            ("initial_life_span", 0),
            ("initial_shade_tolerance", 150),
        ],
    )
    def test_invalid_values_rejected(self, field: str, value: float) -> None:
        with pytest.raises(ValueError):
            SimConfig(**{field: value})

    def test_config_is_frozen(self) -> None:
        config = SimConfig()
        with pytest.raises(AttributeError):
            config.num_seeds = 10  # type: ignore[misc]
