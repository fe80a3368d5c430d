"""
Seed presence.

Mature, non-stump trees roll each day for a seed. Without seed
persistence the flag is cleared first, so it reflects only today's roll.
"""

from grove.config import GroveConfig, Tree
from grove.rng import RandomSource


def populate_seed(tree: Tree, rng: RandomSource, config: GroveConfig) -> None:
    if not tree.is_mature or tree.stump:
        return

    if not config.do_seeds_persist:
        tree.has_seed = False

    if rng.uniform() < config.daily_seed_chance:
        tree.has_seed = True
