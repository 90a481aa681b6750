"""
Understory Simulation Module

An agent-based plant ecology on a fixed grid: plants compete for sunlight
through height-based shading, disperse seeds whose traits mutate under a
zero-sum trade-off, and die of old age.

Modules:
    config: Plant record, statuses and simulation constants
    traits: Trade-off scale scoring for heritable traits
    world: Grid construction, validation and enumeration
    sampling: Seedable random draws
    light: Canopy shading and sunlight collection
    dispersal: Seed dispersal
    resolution: Collapsing cells to a single plant
    mutation: Trait trade-off mutation
    lifecycle: Germination, maturation, aging and death
    rollout: Tick pipeline and full runs
    records: Per-tick record serialization
    schema: Run configuration input schema
    visualization: Population and trait plots
"""

from understory.config import CanopyShape, Plant, SimConfig, Status
from understory.records import format_record, write_history
from understory.rollout import History, iterate_ticks, run, run_simulation, tick
from understory.sampling import KeySampler, Sampler
from understory.schema import PlantSchema, RunSchema, load_run
from understory.traits import TRAITS, TraitScale, get_trait
from understory.world import make_world, trait_vectors, validate_world

__all__ = [
    # Config
    "CanopyShape",
    "Plant",
    "SimConfig",
    "Status",
    # Traits
    "TRAITS",
    "TraitScale",
    "get_trait",
    # World
    "make_world",
    "trait_vectors",
    "validate_world",
    # Simulation
    "History",
    "KeySampler",
    "Sampler",
    "iterate_ticks",
    "run",
    "run_simulation",
    "tick",
    # Records
    "format_record",
    "write_history",
    # Input
    "PlantSchema",
    "RunSchema",
    "load_run",
]
