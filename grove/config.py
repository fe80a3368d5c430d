"""
Configuration and type definitions for the tree lifecycle simulation.

This module defines all constants, tree representations, and configuration
for the daily tree simulation.

Tree state:
    growth_stage: 0 (seed) .. MAX_STAGE (mature)
    species: ORDINARY or HIBERNATING (mushroom-like trees)
    health: destruction once it drops to DESTROY_HEALTH
    stump: dormant/cut stump, orthogonal to growth_stage
    tapped: carries a tapper, only affects spread
    has_seed: gates spread attempts
    flipped: cosmetic, carried through conversions

Two representations exist: the passive `PassiveTree` (what gets persisted)
and the active `Tree` (what the daily simulation mutates).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# Tree constants
MAX_STAGE = 5  # Canonical "mature" stage
STARTING_HEALTH = 10  # Health of a freshly regrown tree
HIBERNATION_HEALTH = 5  # Buffer so a hibernating stump survives until spring
DESTROY_HEALTH = -100  # At or below: marked for removal
PASSABLE_HEALTH = -99  # At or below: walkable regardless of stage


class Species(Enum):
    """Species variants. Only HIBERNATING trees follow the stump cycle."""

    ORDINARY = "ordinary"
    HIBERNATING = "hibernating"


class Season(Enum):
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"


class InvalidTreeState(ValueError):
    """Raised when a tree is built with an out-of-domain field."""


def _check_stage(growth_stage: int) -> None:
    if not 0 <= growth_stage <= MAX_STAGE:
        raise InvalidTreeState(
            f"growth_stage must be in [0, {MAX_STAGE}], got {growth_stage}"
        )


@dataclass(frozen=True)
class PassiveTree:
    """
    Persisted tree representation.

    This is what sits in a location while the simulation is suspended
    (e.g. around saving). It carries plain fields only.
    """

    growth_stage: int
    species: Species = Species.ORDINARY
    health: int = STARTING_HEALTH
    flipped: bool = False
    stump: bool = False
    tapped: bool = False
    has_seed: bool = False
    destroy: bool = False

    def __post_init__(self) -> None:
        _check_stage(self.growth_stage)


@dataclass
class Tree:
    """
    Active simulated tree.

    Mutated in place by the daily update. `skip_first_update` is a
    one-shot flag set on saplings created during a parent's pass.
    """

    growth_stage: int
    species: Species = Species.ORDINARY
    health: int = STARTING_HEALTH
    flipped: bool = False
    stump: bool = False
    tapped: bool = False
    has_seed: bool = False
    destroy: bool = False
    skip_first_update: bool = False

    def __post_init__(self) -> None:
        _check_stage(self.growth_stage)

    @classmethod
    def seedling(cls, species: Species, skip_first_update: bool = False) -> "Tree":
        """Create a fresh stage-0 tree of the given species."""
        return cls(growth_stage=0, species=species, skip_first_update=skip_first_update)

    @classmethod
    def from_passive(cls, passive: PassiveTree) -> "Tree":
        """Take over a passive tree by cloning its fields."""
        return cls(
            growth_stage=passive.growth_stage,
            species=passive.species,
            health=passive.health,
            flipped=passive.flipped,
            stump=passive.stump,
            tapped=passive.tapped,
            has_seed=passive.has_seed,
            destroy=passive.destroy,
        )

    def to_passive(self) -> PassiveTree:
        """Export to the persisted representation (skip flag is dropped)."""
        return PassiveTree(
            growth_stage=self.growth_stage,
            species=self.species,
            health=self.health,
            flipped=self.flipped,
            stump=self.stump,
            tapped=self.tapped,
            has_seed=self.has_seed,
            destroy=self.destroy,
        )

    @property
    def is_mature(self) -> bool:
        return self.growth_stage >= MAX_STAGE

    @property
    def is_destroyed(self) -> bool:
        return self.health <= DESTROY_HEALTH


class GroveConfig(BaseModel):
    """
    Complete simulation configuration.

    Immutable; probabilities are validated once when the model is built,
    never per tick.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Passability and shade
    max_passable_growth_stage: int = Field(
        default=0, ge=0, le=MAX_STAGE, description="Stages <= this are walkable"
    )
    max_shaded_growth_stage: int = Field(
        default=4,
        ge=0,
        le=MAX_STAGE,
        description="Growth stalls at or above this stage while shaded",
    )

    # Growth
    do_grow_in_winter: bool = Field(default=False, description="Allow winter growth")
    do_grow_instantly: bool = Field(
        default=False, description="Skip the roll and jump straight to mature"
    )
    daily_growth_chance: float = Field(
        default=0.2, ge=0.0, le=1.0, description="Chance of +1 stage per day"
    )

    # Hibernation
    do_mushroom_trees_hibernate: bool = Field(
        default=True, description="Hibernating species become stumps in winter"
    )
    do_mushroom_trees_regrow: bool = Field(
        default=False, description="Stumps of hibernating species regrow on their own"
    )

    # Spread
    do_spread_in_winter: bool = Field(default=True, description="Allow winter spread")
    do_tapped_spread: bool = Field(default=True, description="Allow spread while tapped")
    seeds_replace_grass: bool = Field(
        default=False, description="Spread may replace grass with a sapling"
    )
    daily_spread_chance: float = Field(
        default=0.15, ge=0.0, le=1.0, description="Chance of one spread attempt per day"
    )

    # Seeds
    daily_seed_chance: float = Field(
        default=0.05, ge=0.0, le=1.0, description="Chance of gaining a seed per day"
    )
    do_seeds_persist: bool = Field(
        default=False, description="If false, the seed is re-rolled every day"
    )

    # Interaction
    prevent_scythe: bool = Field(
        default=False, description="Melee weapons cannot damage trees"
    )

    @classmethod
    def aggressive(cls) -> "GroveConfig":
        """Fast growth and spread; good for watching a farm fill up."""
        return cls(
            daily_growth_chance=0.5,
            daily_spread_chance=0.5,
            daily_seed_chance=0.5,
            do_seeds_persist=True,
            seeds_replace_grass=True,
            do_mushroom_trees_regrow=True,
        )

    @classmethod
    def vanilla_like(cls) -> "GroveConfig":
        """Slow, conservative settings close to unmodified behaviour."""
        return cls(do_spread_in_winter=False, do_tapped_spread=False)


def load_config(path: str | Path) -> GroveConfig:
    """
    Load configuration from a JSON file.

    A missing file yields the defaults. Invalid values raise
    pydantic.ValidationError here, at startup.

    Args:
        path: Path to the JSON file

    Returns:
        Validated configuration
    """
    path = Path(path)
    if not path.exists():
        logger.info("Config %s not found; using defaults", path)
        return GroveConfig()

    config = GroveConfig.model_validate_json(path.read_text())
    logger.info("Loaded config from %s", path)
    return config


def save_config(config: GroveConfig, path: str | Path) -> None:
    """Write configuration to a JSON file (the defaults file for a new install)."""
    Path(path).write_text(config.model_dump_json(indent=2))
