"""Run a biots simulation without a window and log census lines."""
from __future__ import annotations

import argparse
import logging

from biots import EntropyError, entropy_seed
from biots_life import (
    WorldConfig,
    build_simulation,
    census,
    make_census_system,
    make_extinction_system,
)

logger = logging.getLogger("petri_dish")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the biots simulation headless.")
    parser.add_argument("ticks", type=int, nargs="?", default=1000)
    parser.add_argument("--biots", type=int, default=600)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--width", type=float, default=1920.0)
    parser.add_argument("--height", type=float, default=1200.0)
    parser.add_argument("--every", type=int, default=100, help="census interval in ticks")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    seed = args.seed
    if seed is None:
        try:
            seed = entropy_seed()
        except EntropyError:
            logger.exception("Cannot seed the simulation")
            return 1

    engine, population = build_simulation(
        args.biots, seed, WorldConfig(args.width, args.height),
    )
    engine.add_system(make_census_system(population, every=args.every))
    engine.add_system(make_extinction_system(population))
    engine.run(args.ticks)

    logger.info("Finished after %d ticks: %s", engine.tick_number, census(population).summary())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
