"""
Trait mutation under a zero-sum trade-off.

Each freshly resolved seed mutates exactly once: one trait (the "from"
trait) gives up `mutation_factor` units on the trade-off scale and a
different trait (the "to" trait) gains the same amount.

    new_from = round(inverse_from(score_from(old_from) - mutation_factor))
    new_to   = round(inverse_to(score_to(old_to) + mutation_factor))

Because scores are logarithmic, the same budget buys less of a trait the
larger it already is. Results are clamped to each trait's valid domain
(see traits.clamp).
"""

from understory.config import Plant, SimConfig, Status
from understory.sampling import Sampler
from understory.traits import TRAITS, shift_trait
from understory.world import World, map_occupants


def choose_trait_pair(sampler: Sampler) -> tuple[int, int]:
    """
    Pick two distinct trait indices.

    `from_index` is uniform over all traits; `to_index` is uniform over the
    remaining ones.
    """
    from_index = sampler.index(len(TRAITS))
    to_index = sampler.index(len(TRAITS) - 1)
    if to_index >= from_index:
        to_index += 1
    return from_index, to_index


def mutate_plant(
    plant: Plant,
    from_index: int,
    to_index: int,
    config: SimConfig,
) -> Plant:
    """
    Transfer `mutation_factor` score units from one trait to another.

    Args:
        plant: Plant to mutate
        from_index: Index into TRAITS of the trait that pays
        to_index: Index into TRAITS of the trait that gains
        config: Simulation configuration (mutation_factor, min_trait_value)

    Returns:
        Mutated copy of the plant
    """
    if from_index == to_index:
        raise ValueError("Mutation requires two distinct traits")
    source = TRAITS[from_index]
    target = TRAITS[to_index]
    return plant._replace(
        **{
            source.name: shift_trait(
                source,
                getattr(plant, source.name),
                -config.mutation_factor,
                config.min_trait_value,
            ),
            target.name: shift_trait(
                target,
                getattr(plant, target.name),
                config.mutation_factor,
                config.min_trait_value,
            ),
        }
    )


def mutate_seeds(world: World, config: SimConfig, sampler: Sampler) -> World:
    """Mutate every seed occupant of a resolved world, row-major."""

    def mutate(plant: Plant) -> Plant:
        if plant.status is not Status.SEED:
            return plant
        from_index, to_index = choose_trait_pair(sampler)
        return mutate_plant(plant, from_index, to_index, config)

    return map_occupants(world, mutate)
