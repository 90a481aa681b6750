"""
Understory - Plant Competition Simulation

Runs a single simulation and streams its history:
1. Build a world with one founding plant at its centre
2. Tick it forward, writing each tick's living plants to a CSV sink
3. Print a run summary and (optionally) save plots

Each CSV row is one tick; each column one plant as
`height,width,life_span,shade_tolerance`; columns are `;`-separated.
"""

import argparse

import jax.random as jr

from understory import records
from understory.rollout import History, iterate_ticks
from understory.sampling import KeySampler
from understory.schema import RunSchema, load_run
from understory.world import make_world, population


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--config", help="JSON run description (see RunSchema)")
    parser.add_argument("--iterations", type=int, help="Number of ticks to run")
    parser.add_argument("--size", type=int, help="Side length of the world grid")
    parser.add_argument("--seed", type=int, help="PRNG seed")
    parser.add_argument("--output", default="history.csv", help="CSV sink path")
    parser.add_argument("--plots", help="Directory to save plots into")
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    run = load_run(args.config) if args.config else RunSchema()
    overrides = {
        "num_ticks": args.iterations,
        "world_size": args.size,
        "seed": args.seed,
    }
    run = run.model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )
    # Re-validate after overrides
    run = RunSchema.model_validate(run.model_dump())
    config = run.to_config()

    print("\n" + "=" * 60)
    print("  UNDERSTORY: Plant Competition Simulation")
    print("=" * 60)
    print(
        f"World {config.world_size}x{config.world_size}, "
        f"{config.num_ticks} ticks, seed {run.seed}"
    )

    world = make_world(config)
    sampler = KeySampler(jr.PRNGKey(run.seed))
    worlds = [world]

    with open(args.output, "w", newline="") as stream:
        for number, world in enumerate(
            iterate_ticks(world, config.num_ticks, config, sampler), start=1
        ):
            records.write_rows([records.world_row(world)], stream)
            worlds.append(world)
            if number % 5 == 0 or number == config.num_ticks:
                print(f"  Tick {number}: population={population(world)}")

    print(f"\nWrote {config.num_ticks} ticks to {args.output}")

    history = History(worlds=worlds, config=config)
    history.print_summary()

    if args.plots:
        from understory.visualization import save_history_plots

        for path in save_history_plots(history, args.plots):
            print(f"Saved {path}")


if __name__ == "__main__":
    main()
