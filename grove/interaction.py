"""
Player-facing tree interactions: walking through and hitting trees.
"""

from enum import Enum

from grove.config import DESTROY_HEALTH, PASSABLE_HEALTH, GroveConfig, Tree


class Tool(Enum):
    """
    Kind of tool a host reports for a hit.

    Only melee weapons are treated differently; the other members stand in
    for the host's remaining tool kinds and all take damage the same way.
    """

    AXE = "axe"
    PICKAXE = "pickaxe"
    HOE = "hoe"
    MELEE_WEAPON = "melee_weapon"


def is_passable(tree: Tree, config: GroveConfig) -> bool:
    """Dead trees and small saplings can be walked through."""
    return (
        tree.health <= PASSABLE_HEALTH
        or tree.growth_stage <= config.max_passable_growth_stage
    )


def perform_tool_action(
    tree: Tree, tool: Tool, damage: int, config: GroveConfig
) -> bool:
    """
    Hit a tree with a tool.

    With `prevent_scythe`, melee weapons bounce off and nothing changes.

    Args:
        tree: Tree being hit
        tool: Tool used
        damage: Health removed by the hit
        config: Simulation configuration

    Returns:
        True if the hit brought the tree to the destruction threshold
    """
    if damage < 0:
        raise ValueError(f"damage must be nonnegative, got {damage}")
    if config.prevent_scythe and tool is Tool.MELEE_WEAPON:
        return False

    tree.health = max(tree.health - damage, DESTROY_HEALTH)
    return tree.health <= DESTROY_HEALTH
