"""
Multi-day rollout.

This module runs the daily tick over a stretch of days, combining:
- The host tick (one sequential pass per location)
- The calendar (advanced after each tick)
- A census of the world after each day

The result is a trajectory with the full history of reports and censuses.
"""

from dataclasses import dataclass

import jax.numpy as jnp
from jax import Array

from grove.calendar import SeasonCalendar
from grove.config import MAX_STAGE, GroveConfig, Season, Tree
from grove.host import DayReport, TreeManager
from grove.rng import RandomSource
from grove.world import WorldProvider


@dataclass(frozen=True)
class Census:
    """Snapshot of the active trees in the world."""

    stages: tuple[int, ...]  # Tree count per growth stage, 0..MAX_STAGE
    stumps: int
    seeds: int

    @property
    def total(self) -> int:
        return sum(self.stages)

    @property
    def mature(self) -> int:
        return self.stages[MAX_STAGE]


def take_census(world: WorldProvider) -> Census:
    stages = [0] * (MAX_STAGE + 1)
    stumps = 0
    seeds = 0
    for location in world.active_locations():
        for feature in location.features.values():
            if not isinstance(feature, Tree):
                continue
            stages[feature.growth_stage] += 1
            stumps += feature.stump
            seeds += feature.has_seed
    return Census(stages=tuple(stages), stumps=stumps, seeds=seeds)


@dataclass
class Trajectory:
    """
    Complete record of a rollout.

    Contains:
    - censuses: Census before the first day and after every day
    - reports: DayReport for every day
    - seasons: Season each day was simulated in
    """

    censuses: list[Census]
    reports: list[DayReport]
    seasons: list[Season]

    def get_count_arrays(self) -> dict[str, Array]:
        """Convert census history to arrays for plotting."""
        arrays = {
            "total": jnp.array([c.total for c in self.censuses]),
            "mature": jnp.array([c.mature for c in self.censuses]),
            "stumps": jnp.array([c.stumps for c in self.censuses]),
            "seeds": jnp.array([c.seeds for c in self.censuses]),
        }
        arrays["stages"] = jnp.array([c.stages for c in self.censuses])
        return arrays

    def get_report_arrays(self) -> dict[str, Array]:
        """Per-day activity counts."""
        return {
            "planted": jnp.array([len(r.planted) for r in self.reports]),
            "removed": jnp.array([len(r.removed) for r in self.reports]),
            "processed": jnp.array([r.processed for r in self.reports]),
        }

    def get_scalar_summary(self) -> dict[str, float]:
        """
        Compute scalar diagnostic summary of the rollout.

        Returns a dictionary with key metrics:
        - Days: Number of simulated days
        - InitialTrees / FinalTrees: Active tree counts
        - FinalMature: Mature trees at the end
        - PeakTrees: Largest tree count seen
        - TotalPlanted: Saplings planted by spread
        - TotalRemoved: Trees removed after destruction
        - MeanStumps: Average stump count per day
        """
        counts = self.get_count_arrays()
        activity = self.get_report_arrays()
        return {
            "Days": len(self.reports),
            "InitialTrees": self.censuses[0].total,
            "FinalTrees": self.censuses[-1].total,
            "FinalMature": self.censuses[-1].mature,
            "PeakTrees": int(jnp.max(counts["total"])),
            "TotalPlanted": int(jnp.sum(activity["planted"])),
            "TotalRemoved": int(jnp.sum(activity["removed"])),
            "MeanStumps": float(jnp.mean(counts["stumps"])),
        }

    def print_summary(self) -> None:
        """Print a formatted summary table to stdout."""
        summary = self.get_scalar_summary()
        print("\n" + "=" * 40)
        print("ROLLOUT SUMMARY")
        print("=" * 40)
        for key, value in summary.items():
            if isinstance(value, int):
                print(f"{key:20s}: {value:>10d}")
            else:
                print(f"{key:20s}: {value:>10.3f}")
        print("=" * 40)


def run_days(
    manager: TreeManager,
    world: WorldProvider,
    calendar: SeasonCalendar,
    rng: RandomSource,
    config: GroveConfig,
    num_days: int,
) -> Trajectory:
    """
    Run the daily tick for `num_days` days.

    Args:
        manager: Host manager running the tick
        world: World whose locations are simulated
        calendar: Calendar, advanced after every day
        rng: Random source
        config: Simulation configuration
        num_days: Number of days to simulate

    Returns:
        Trajectory containing the full history
    """
    if num_days < 0:
        raise ValueError(f"num_days must be nonnegative, got {num_days}")

    censuses = [take_census(world)]
    reports: list[DayReport] = []
    seasons: list[Season] = []

    for _ in range(num_days):
        seasons.append(calendar.season())
        reports.append(manager.run_day(world, calendar, rng, config))
        censuses.append(take_census(world))
        calendar.advance()

    return Trajectory(censuses=censuses, reports=reports, seasons=seasons)
