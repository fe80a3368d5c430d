"""
Tests for tree representations and configuration.
"""

import pytest
from pydantic import ValidationError

from grove.config import (
    MAX_STAGE,
    STARTING_HEALTH,
    GroveConfig,
    InvalidTreeState,
    PassiveTree,
    Species,
    Tree,
    load_config,
    save_config,
)


class TestTreeConstruction:
    """Tests for building trees."""

    def test_stage_bounds_accepted(self) -> None:
        """Stages 0 and MAX_STAGE are both valid."""
        assert Tree(growth_stage=0).growth_stage == 0
        assert Tree(growth_stage=MAX_STAGE).growth_stage == MAX_STAGE

    def test_negative_stage_rejected(self) -> None:
        """Negative stages are a construction fault, not clamped."""
        with pytest.raises(InvalidTreeState):
            Tree(growth_stage=-1)

    def test_stage_above_max_rejected(self) -> None:
        with pytest.raises(InvalidTreeState):
            Tree(growth_stage=MAX_STAGE + 1)

    def test_passive_tree_validated_too(self) -> None:
        with pytest.raises(InvalidTreeState):
            PassiveTree(growth_stage=9)

    def test_invalid_state_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Tree(growth_stage=-3)

    def test_seedling_defaults(self) -> None:
        """Seedlings start at stage 0 with starting health."""
        tree = Tree.seedling(Species.HIBERNATING, skip_first_update=True)
        assert tree.growth_stage == 0
        assert tree.species is Species.HIBERNATING
        assert tree.health == STARTING_HEALTH
        assert tree.skip_first_update
        assert not tree.has_seed


class TestConversion:
    """Tests for passive <-> active conversion."""

    def test_from_passive_copies_fields(self) -> None:
        passive = PassiveTree(
            growth_stage=3,
            species=Species.HIBERNATING,
            health=7,
            flipped=True,
            stump=True,
            tapped=True,
            has_seed=True,
        )
        tree = Tree.from_passive(passive)

        assert tree.growth_stage == 3
        assert tree.species is Species.HIBERNATING
        assert tree.health == 7
        assert tree.flipped
        assert tree.stump
        assert tree.tapped
        assert tree.has_seed
        assert not tree.skip_first_update

    def test_to_passive_carries_destroy_flag(self) -> None:
        tree = Tree(growth_stage=MAX_STAGE, health=-100, destroy=True)
        passive = tree.to_passive()
        assert passive.destroy
        assert passive.health == -100

    def test_to_passive_drops_skip_flag(self) -> None:
        tree = Tree.seedling(Species.ORDINARY, skip_first_update=True)
        passive = tree.to_passive()
        assert not hasattr(passive, "skip_first_update")
        assert Tree.from_passive(passive).skip_first_update is False


class TestGroveConfig:
    """Tests for configuration validation."""

    def test_defaults(self) -> None:
        config = GroveConfig()
        assert config.max_shaded_growth_stage == 4
        assert config.daily_growth_chance == 0.2
        assert config.do_mushroom_trees_hibernate
        assert not config.do_seeds_persist

    @pytest.mark.parametrize(
        "field", ["daily_growth_chance", "daily_spread_chance", "daily_seed_chance"]
    )
    def test_probability_above_one_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            GroveConfig(**{field: 1.5})

    @pytest.mark.parametrize(
        "field", ["daily_growth_chance", "daily_spread_chance", "daily_seed_chance"]
    )
    def test_negative_probability_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            GroveConfig(**{field: -0.1})

    def test_probability_bounds_inclusive(self) -> None:
        config = GroveConfig(daily_growth_chance=0.0, daily_spread_chance=1.0)
        assert config.daily_spread_chance == 1.0

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GroveConfig(daily_growth_chanse=0.3)

    def test_config_is_frozen(self) -> None:
        config = GroveConfig()
        with pytest.raises(ValidationError):
            config.daily_growth_chance = 0.9

    def test_presets_are_valid(self) -> None:
        assert GroveConfig.aggressive().daily_spread_chance == 0.5
        assert not GroveConfig.vanilla_like().do_spread_in_winter


    def test_vanilla_like_differs_only_in_spread_gates(self) -> None:
        """The preset keeps every default except the two spread gates."""
        preset = GroveConfig.vanilla_like().model_dump()
        defaults = GroveConfig().model_dump()
        changed = {key for key in defaults if preset[key] != defaults[key]}
        assert changed == {"do_spread_in_winter", "do_tapped_spread"}

class TestLoadConfig:
    """Tests for reading configuration from disk."""

    def test_missing_file_gives_defaults(self, tmp_path) -> None:
        config = load_config(tmp_path / "absent.json")
        assert config == GroveConfig()

    def test_save_then_load(self, tmp_path) -> None:
        path = tmp_path / "grove.json"
        save_config(GroveConfig.aggressive(), path)
        assert load_config(path) == GroveConfig.aggressive()

    def test_partial_file_fills_defaults(self, tmp_path) -> None:
        path = tmp_path / "grove.json"
        path.write_text('{"daily_spread_chance": 0.9}')
        config = load_config(path)
        assert config.daily_spread_chance == 0.9
        assert config.daily_growth_chance == 0.2

    def test_invalid_file_fails_at_load(self, tmp_path) -> None:
        path = tmp_path / "grove.json"
        path.write_text('{"daily_seed_chance": 2.0}')
        with pytest.raises(ValidationError):
            load_config(path)
