"""
Growth stage progression.

Each day a non-mature tree may advance one stage (or jump straight to
maturity with instant growth). Stumps never grow here; hibernation
regrowth is their only way out. Growth stalls when:
- the tree is at or above `max_shaded_growth_stage` and shaded
- the location is experiencing winter and winter growth is off
- the tree hibernates and hibernation is on (regardless of winter growth)
"""

from grove import shade
from grove.config import MAX_STAGE, GroveConfig, Season, Species, Tree
from grove.rng import RandomSource
from grove.world import Location, Position


def experiences_winter(location: Location) -> bool:
    """Outdoor, non-desert locations have a winter."""
    return location.is_outdoors() and not location.is_desert()


def experiencing_winter(location: Location, season: Season) -> bool:
    return season is Season.WINTER and experiences_winter(location)


def winter_blocks_growth(
    tree: Tree, location: Location, season: Season, config: GroveConfig
) -> bool:
    if not experiencing_winter(location, season):
        return False
    hibernates = (
        tree.species is Species.HIBERNATING and config.do_mushroom_trees_hibernate
    )
    return not config.do_grow_in_winter or hibernates


def try_increase_stage(
    tree: Tree,
    location: Location,
    position: Position,
    season: Season,
    rng: RandomSource,
    config: GroveConfig,
) -> None:
    """
    Advance the tree's growth stage for one day.

    Args:
        tree: Tree to update in place
        location: Location the tree stands in
        position: Tile of the tree
        season: Current season
        rng: Random source (drawn only when a roll is needed)
        config: Simulation configuration
    """
    if tree.growth_stage >= MAX_STAGE or tree.stump:
        return
    # Shade is only checked once the stage is high enough to be capped
    if tree.growth_stage >= config.max_shaded_growth_stage and shade.is_shaded(
        location, position
    ):
        return
    if winter_blocks_growth(tree, location, season, config):
        return

    if config.do_grow_instantly:
        tree.growth_stage = MAX_STAGE
    elif rng.uniform() < config.daily_growth_chance:
        tree.growth_stage += 1
