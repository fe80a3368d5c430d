"""
Grove - Daily Tree Lifecycle Demo

Plants a handful of trees on a small farm and a hibernating grove in a
forest, then runs one in-game year:
1. start_day - take over the passive trees
2. run_days - one tick per day, calendar advancing through the seasons
3. suspend - hand the trees back to their passive form (as before saving)

Config is read from grove.json next to this file if present, otherwise
the defaults are used.
"""

import logging
from pathlib import Path

from grove.calendar import DAYS_PER_SEASON, SeasonCalendar
from grove.config import MAX_STAGE, PassiveTree, Species, load_config
from grove.host import TreeManager
from grove.rng import JaxRandom
from grove.rollout import run_days
from grove.world import Grass, GridLocation, World


def build_world() -> World:
    """A 32x32 farm with a pond and some grass, and a 16x16 forest."""
    farm = GridLocation(name="Farm", width=32, height=32, farm_like=True)
    for pos in [(10, 10), (20, 12), (15, 24)]:
        farm.features[pos] = PassiveTree(growth_stage=MAX_STAGE)
    farm.features[(4, 4)] = PassiveTree(growth_stage=1)
    for x in range(24, 28):
        for y in range(24, 28):
            farm.add_water((x, y))
    for x in range(8, 14):
        farm.features[(x, 14)] = Grass()

    forest = GridLocation(name="Forest", width=16, height=16)
    for pos in [(3, 3), (8, 8), (12, 4)]:
        forest.features[pos] = PassiveTree(
            growth_stage=MAX_STAGE, species=Species.HIBERNATING
        )

    return World(locations=[farm, forest])


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("\n" + "=" * 60)
    print("  GROVE: Daily Tree Lifecycle Simulation")
    print("=" * 60)

    config = load_config(Path(__file__).resolve().parent / "grove.json")
    world = build_world()
    calendar = SeasonCalendar()
    rng = JaxRandom(seed=42)
    manager = TreeManager()

    manager.start_day(world)
    trajectory = run_days(
        manager, world, calendar, rng, config, num_days=4 * DAYS_PER_SEASON
    )
    trajectory.print_summary()

    manager.suspend(world)
    for location in world.active_locations():
        passive = sum(isinstance(f, PassiveTree) for f in location.features.values())
        print(f"{location.name}: {passive} passive trees after suspend")


if __name__ == "__main__":
    main()
