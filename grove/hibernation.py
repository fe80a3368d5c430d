"""
Seasonal stump cycle for hibernating species.

Hibernating trees in locations that experience winter turn into stumps
for the winter and regrow on the first day of spring (if not shaded).
Optionally, stumps also regrow at random outside winter.
"""

from grove import shade
from grove.config import (
    HIBERNATION_HEALTH,
    STARTING_HEALTH,
    GroveConfig,
    Season,
    Species,
    Tree,
)
from grove.growth import experiences_winter, experiencing_winter
from grove.rng import RandomSource
from grove.world import Location, Position


def regrow_if_not_shaded(tree: Tree, location: Location, position: Position) -> None:
    """Bring a stump back to a full tree unless a neighbour shades it."""
    if shade.is_shaded(location, position):
        return

    tree.stump = False
    tree.health = STARTING_HEALTH


def manage_hibernation(
    tree: Tree,
    location: Location,
    position: Position,
    season: Season,
    day_of_month: int,
    config: GroveConfig,
) -> None:
    """
    Apply the winter stump / spring regrowth transition.

    Winter forces the stump state every day, so repeated calls are
    idempotent. Spring regrowth only happens on day 1.
    """
    if (
        tree.species is not Species.HIBERNATING
        or not config.do_mushroom_trees_hibernate
        or not experiences_winter(location)
    ):
        return

    if season is Season.WINTER:
        tree.stump = True
        tree.health = HIBERNATION_HEALTH
    elif season is Season.SPRING and day_of_month <= 1:
        regrow_if_not_shaded(tree, location, position)


def try_regrow(
    tree: Tree,
    location: Location,
    position: Position,
    season: Season,
    rng: RandomSource,
    config: GroveConfig,
) -> None:
    """
    Randomly regrow a hibernating stump when winter rules allow growth.

    The roll uses half the daily growth chance and is skipped entirely
    with instant growth.
    """
    if (
        tree.species is not Species.HIBERNATING
        or not config.do_mushroom_trees_regrow
        or not tree.stump
    ):
        return

    winter_allows = not experiencing_winter(location, season) or (
        not config.do_mushroom_trees_hibernate and config.do_grow_in_winter
    )
    if not winter_allows:
        return

    if config.do_grow_instantly or rng.uniform() < config.daily_growth_chance / 2:
        regrow_if_not_shaded(tree, location, position)
