"""
Seed dispersal into the surrounding grid.

A mature tree on a farm-like location may, once per day, pick one random
tile in the 7x7 window around itself and plant a sapling there:

1. If grass replacement is on and the tile holds grass, the grass becomes
   a sapling.
2. Otherwise the tile must be open, unoccupied, dry and on the map.
3. Otherwise the attempt is wasted and the seed is kept.

Saplings carry the skip flag so they sit out their first daily update.
"""

import logging

from grove.config import GroveConfig, Season, Tree
from grove.rng import RandomSource
from grove.world import Grass, Location, Position

logger = logging.getLogger(__name__)

SPREAD_RADIUS = 3  # Offsets are drawn from [-3, 3] on each axis


def can_spread(
    tree: Tree, location: Location, season: Season, config: GroveConfig
) -> bool:
    """Preconditions for a spread attempt (before any roll)."""
    if not location.is_farm_like() or not tree.is_mature or tree.stump:
        return False
    if season is Season.WINTER and not config.do_spread_in_winter:
        return False
    if tree.tapped and not config.do_tapped_spread:
        return False
    return True


def pick_spread_position(
    position: Position, rng: RandomSource, config: GroveConfig
) -> Position | None:
    """Roll the daily spread chance and pick at most one candidate tile."""
    if rng.uniform() >= config.daily_spread_chance:
        return None

    x, y = position
    dx = rng.int_range(-SPREAD_RADIUS, SPREAD_RADIUS + 1)
    dy = rng.int_range(-SPREAD_RADIUS, SPREAD_RADIUS + 1)
    return (x + dx, y + dy)


def can_plant_at(location: Location, position: Position) -> bool:
    return (
        location.is_open_at(position)
        and not location.is_occupied_at(position)
        and not location.has_water_at(position)
        and location.in_bounds(position)
    )


def try_spread(
    tree: Tree,
    location: Location,
    position: Position,
    season: Season,
    rng: RandomSource,
    config: GroveConfig,
) -> list[tuple[Position, Tree]]:
    """
    Attempt one day of seed dispersal.

    Insertions are written to `location.features` directly and also
    returned so the caller can account for them.

    Args:
        tree: Parent tree
        location: Location the parent stands in
        position: Tile of the parent
        season: Current season
        rng: Random source
        config: Simulation configuration

    Returns:
        List of (position, sapling) insertions, at most one
    """
    if not can_spread(tree, location, season, config):
        return []

    target = pick_spread_position(position, rng, config)
    if target is None:
        return []

    feature = location.features.get(target)
    if config.seeds_replace_grass and isinstance(feature, Grass):
        sapling = Tree.seedling(tree.species, skip_first_update=True)
        location.features[target] = sapling
        tree.has_seed = False
        logger.debug("%s: %s replaced grass at %s", location.name, position, target)
        return [(target, sapling)]

    if can_plant_at(location, target):
        sapling = Tree.seedling(tree.species, skip_first_update=True)
        location.features[target] = sapling
        tree.has_seed = False
        logger.debug("%s: %s planted sapling at %s", location.name, position, target)
        return [(target, sapling)]

    # Blocked: the seed is kept and nothing happens
    return []
