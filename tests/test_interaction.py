"""
Tests for passability and tool hits.
"""

import pytest

from grove.config import DESTROY_HEALTH, MAX_STAGE, GroveConfig, Tree
from grove.interaction import Tool, is_passable, perform_tool_action


class TestPassable:
    def test_small_sapling_passable(self) -> None:
        config = GroveConfig(max_passable_growth_stage=0)
        assert is_passable(Tree(growth_stage=0), config)

    def test_larger_tree_blocks(self) -> None:
        config = GroveConfig(max_passable_growth_stage=0)
        assert not is_passable(Tree(growth_stage=1), config)

    def test_threshold_from_config(self) -> None:
        config = GroveConfig(max_passable_growth_stage=3)
        assert is_passable(Tree(growth_stage=3), config)
        assert not is_passable(Tree(growth_stage=4), config)

    def test_dead_tree_passable(self) -> None:
        tree = Tree(growth_stage=MAX_STAGE, health=-99)
        assert is_passable(tree, GroveConfig())


class TestToolAction:
    def test_axe_damages(self) -> None:
        tree = Tree(growth_stage=MAX_STAGE, health=10)
        assert not perform_tool_action(tree, Tool.AXE, 4, GroveConfig())
        assert tree.health == 6

    def test_melee_blocked_with_prevent_scythe(self) -> None:
        tree = Tree(growth_stage=1, health=10)
        config = GroveConfig(prevent_scythe=True)
        assert not perform_tool_action(tree, Tool.MELEE_WEAPON, 50, config)
        assert tree.health == 10

    def test_melee_allowed_by_default(self) -> None:
        tree = Tree(growth_stage=1, health=10)
        perform_tool_action(tree, Tool.MELEE_WEAPON, 3, GroveConfig())
        assert tree.health == 7

    def test_prevent_scythe_only_affects_melee(self) -> None:
        tree = Tree(growth_stage=1, health=10)
        config = GroveConfig(prevent_scythe=True)
        perform_tool_action(tree, Tool.AXE, 3, config)
        assert tree.health == 7

    def test_killing_blow_reports_destruction(self) -> None:
        tree = Tree(growth_stage=MAX_STAGE, health=5)
        assert perform_tool_action(tree, Tool.AXE, 500, GroveConfig())
        assert tree.health == DESTROY_HEALTH
        assert tree.is_destroyed

    def test_negative_damage_rejected(self) -> None:
        with pytest.raises(ValueError):
            perform_tool_action(Tree(growth_stage=1), Tool.AXE, -1, GroveConfig())

    @pytest.mark.parametrize("tool", [Tool.AXE, Tool.PICKAXE, Tool.HOE])
    def test_non_melee_tools_ignore_prevent_scythe(self, tool: Tool) -> None:
        tree = Tree(growth_stage=1, health=10)
        config = GroveConfig(prevent_scythe=True)
        perform_tool_action(tree, tool, 2, config)
        assert tree.health == 8
