"""
Shade evaluation.

A tile is shaded when any of its 8 neighbours holds a mature tree that is
not a stump. Shade caps growth near maturity and blocks stump regrowth.
"""

from grove.config import MAX_STAGE, PassiveTree, Tree
from grove.world import Location, Position, surrounding_positions


def casts_shade(feature: object) -> bool:
    """Whether a feature shades its neighbours."""
    return (
        isinstance(feature, (Tree, PassiveTree))
        and feature.growth_stage >= MAX_STAGE
        and not feature.stump
    )


def is_shaded(location: Location, position: Position) -> bool:
    """
    Check whether `position` is shaded by a neighbouring tree.

    Reads the live feature map, so trees already updated this tick are
    seen in their new state.

    Args:
        location: Location holding the feature map
        position: Tile to check

    Returns:
        True if any adjacent tile holds a mature, non-stump tree
    """
    for neighbour in surrounding_positions(position):
        if casts_shade(location.features.get(neighbour)):
            return True
    return False
