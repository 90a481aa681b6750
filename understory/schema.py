# Input schema for a simulation run
# Parses external configuration (JSON files, dicts) into a SimConfig

from pathlib import Path

from pydantic import BaseModel, Field

from understory.config import CanopyShape, SimConfig

#
# Schemata
#


class PlantSchema(BaseModel):
    """Traits of the founding plant placed at the centre of the world."""

    height: int = Field(default=8, ge=1, description="Canopy height")
    width: int = Field(
        default=3, ge=1, description="Canopy radius and seed dispersal radius"
    )
    life_span: int = Field(default=20, ge=1, description="Ticks lived once seeding")
    shade_tolerance: int = Field(
        default=50, ge=0, le=100, description="Shade tolerance out of 100"
    )


class RunSchema(BaseModel):
    """Input schema for a simulation run."""

    world_size: int = Field(default=40, ge=1, description="Side length of the grid")
    num_ticks: int = Field(default=20, ge=0, description="Number of ticks to run")
    seed: int = Field(default=0, description="Seed for the JAX PRNG key")

    germination_time: int = Field(
        default=5, ge=0, description="Ticks before a germinating plant seeds"
    )
    light_for_seeds_coefficient: float = Field(
        default=2.5, gt=0, description="Light needed per unit canopy area per seed round"
    )
    num_seeds: int = Field(default=4, ge=0, description="Seeds per dispersal event")
    mutation_factor: float = Field(
        default=0.5, ge=0, description="Trade-off score moved per mutation"
    )
    min_trait_value: int = Field(
        default=1, ge=1, description="Floor for height, width and life span"
    )
    canopy_shape: CanopyShape = Field(
        default=CanopyShape.DIAMOND, description="Canopy footprint"
    )

    founder: PlantSchema = Field(
        default_factory=PlantSchema, description="Founding plant traits"
    )

    def to_config(self) -> SimConfig:
        return SimConfig(
            world_size=self.world_size,
            num_ticks=self.num_ticks,
            germination_time=self.germination_time,
            light_for_seeds_coefficient=self.light_for_seeds_coefficient,
            num_seeds=self.num_seeds,
            mutation_factor=self.mutation_factor,
            min_trait_value=self.min_trait_value,
            canopy_shape=self.canopy_shape,
            initial_height=self.founder.height,
            initial_width=self.founder.width,
            initial_life_span=self.founder.life_span,
            initial_shade_tolerance=self.founder.shade_tolerance,
        )


#
# Loading
#


def load_run(path: str | Path) -> RunSchema:
    """Read and validate a JSON run description."""
    return RunSchema.model_validate_json(Path(path).read_text())
