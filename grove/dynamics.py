"""
Daily tree update - the core simulation step.

This module sequences one day for one tree:

1. Destruction check (health at or below the threshold)
2. Blocked tile check (no-spawn tile, or a seed under an object)
3. One-shot skip for saplings spread during the previous pass
4. Sub-steps in fixed order:
   a. Spread (sees the tree before today's growth)
   b. Growth
   c. Hibernation
   d. Regrowth
   e. Seed roll

The order is part of the behaviour: a tree cannot grow to maturity and
spread on the same day, and hibernation sees the post-growth state.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from grove import growth, hibernation, seeds, spread
from grove.calendar import Calendar
from grove.config import GroveConfig, Tree
from grove.rng import RandomSource
from grove.world import Location, Position

logger = logging.getLogger(__name__)


class DayOutcome(Enum):
    DESTROYED = "destroyed"
    SKIPPED = "skipped"
    ACTIVE = "active"


@dataclass
class DayResult:
    """Outcome of one tree's day, plus any saplings it planted."""

    outcome: DayOutcome
    insertions: list[tuple[Position, Tree]] = field(default_factory=list)


def tree_can_grow(tree: Tree, location: Location, position: Position) -> bool:
    """A tree on a no-spawn tile, or a seed under an object, sits the day out."""
    blocked_seed = tree.growth_stage == 0 and location.has_object_at(position)
    return not location.no_spawn_at(position) and not blocked_seed


def step(
    tree: Tree,
    location: Location,
    position: Position,
    calendar: Calendar,
    rng: RandomSource,
    config: GroveConfig,
) -> DayResult:
    """
    Perform one day of simulation for a single tree.

    Args:
        tree: Tree to update in place
        location: Location holding the tree (its feature map may gain saplings)
        position: Tile of the tree
        calendar: Calendar for season and day of month
        rng: Random source
        config: Simulation configuration

    Returns:
        DayResult with the outcome and spread insertions
    """
    if tree.is_destroyed:
        tree.destroy = True
        logger.debug("%s: tree at %s marked for destruction", location.name, position)
        return DayResult(DayOutcome.DESTROYED)

    if tree.skip_first_update or not tree_can_grow(tree, location, position):
        tree.skip_first_update = False
        return DayResult(DayOutcome.SKIPPED)

    season = calendar.season()

    insertions = spread.try_spread(tree, location, position, season, rng, config)
    growth.try_increase_stage(tree, location, position, season, rng, config)
    hibernation.manage_hibernation(
        tree, location, position, season, calendar.day_of_month(), config
    )
    hibernation.try_regrow(tree, location, position, season, rng, config)
    seeds.populate_seed(tree, rng, config)

    return DayResult(DayOutcome.ACTIVE, insertions)


def day_update(
    tree: Tree,
    location: Location,
    position: Position,
    calendar: Calendar,
    rng: RandomSource,
    config: GroveConfig,
) -> DayOutcome:
    """Run `step` and return only the outcome."""
    return step(tree, location, position, calendar, rng, config).outcome
