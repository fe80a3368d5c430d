"""
Grove Simulation Module

A daily tree lifecycle simulator for a tile-based sandbox world: growth,
seasonal hibernation, seed spread and destruction.

Modules:
    config: Constants, tree representations and configuration
    world: Location/world collaborators and in-memory implementations
    calendar: Season and day-of-month provider
    rng: Seedable and scripted random sources
    shade: Shade evaluation from mature neighbours
    growth: Growth stage progression
    hibernation: Winter stump cycle and stump regrowth
    spread: Seed dispersal into the surrounding grid
    seeds: Seed presence roll
    dynamics: One-day update for a single tree
    interaction: Passability and tool hits
    host: Active/passive conversion and the daily tick
    rollout: Multi-day runs
"""

from grove.calendar import SeasonCalendar
from grove.config import (
    MAX_STAGE,
    STARTING_HEALTH,
    GroveConfig,
    InvalidTreeState,
    PassiveTree,
    Season,
    Species,
    Tree,
    load_config,
)
from grove.dynamics import DayOutcome, DayResult, day_update, step
from grove.host import DayReport, TreeManager
from grove.interaction import Tool, is_passable, perform_tool_action
from grove.rng import JaxRandom, ScriptedRandom
from grove.rollout import Census, Trajectory, run_days
from grove.shade import is_shaded
from grove.world import Grass, GridLocation, World

__all__ = [
    # Config
    "MAX_STAGE",
    "STARTING_HEALTH",
    "GroveConfig",
    "InvalidTreeState",
    "PassiveTree",
    "Season",
    "Species",
    "Tree",
    "load_config",
    # Collaborators
    "Grass",
    "GridLocation",
    "World",
    "SeasonCalendar",
    "JaxRandom",
    "ScriptedRandom",
    # Simulation
    "DayOutcome",
    "DayResult",
    "day_update",
    "step",
    "is_shaded",
    # Interaction
    "Tool",
    "is_passable",
    "perform_tool_action",
    # Host and rollout
    "DayReport",
    "TreeManager",
    "Census",
    "Trajectory",
    "run_days",
]
