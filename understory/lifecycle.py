"""
Plant lifecycle: seed -> germinating -> seeding, then removal by old age.

- Seeds germinate unconditionally the tick they are resolved into a cell.
- Germinating plants start seeding once their age reaches
  `germination_time`; their age restarts at 0.
- Every plant ages by one tick per tick.
- Plants whose age has reached their life span are removed, whatever
  their status.
"""

from understory.config import Plant, SimConfig, Status
from understory.world import World, map_occupants


def make_plants_seeding(world: World, config: SimConfig) -> World:
    """Promote germinating plants that have waited long enough."""

    def mature(plant: Plant) -> Plant:
        if plant.status is Status.GERMINATING and plant.age >= config.germination_time:
            return plant._replace(status=Status.SEEDING, age=0)
        return plant

    return map_occupants(world, mature)


def germinate_seeds(world: World) -> World:
    def germinate(plant: Plant) -> Plant:
        if plant.status is Status.SEED:
            return plant._replace(status=Status.GERMINATING)
        return plant

    return map_occupants(world, germinate)


def age_plants(world: World) -> World:
    return map_occupants(world, lambda plant: plant._replace(age=plant.age + 1))


def kill_old_plants(world: World) -> World:
    """Remove every plant with age >= life_span."""
    return map_occupants(
        world, lambda plant: None if plant.age >= plant.life_span else plant
    )
