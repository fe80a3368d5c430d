"""
Host lifecycle glue.

`TreeManager` decides which tree representation lives in the world and
drives the daily tick:

- start_day: take over every location (PassiveTree -> Tree)
- suspend: hand trees back before persistence (Tree -> PassiveTree)
- on_locations_added / on_features_added: take over deltas while managing
- run_day: one sequential pass per location, authoritative party only

Trees are updated in discovery order over a snapshot taken at the start of
each location's pass. Saplings inserted during the pass are not visited
until the next tick, and destroyed trees are removed once the pass ends.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field

from grove import dynamics
from grove.calendar import Calendar
from grove.config import GroveConfig, PassiveTree, Tree
from grove.dynamics import DayOutcome
from grove.rng import RandomSource
from grove.world import Location, Position, WorldProvider

logger = logging.getLogger(__name__)


@dataclass
class DayReport:
    """What happened during one tick across all locations."""

    outcomes: dict[DayOutcome, int] = field(
        default_factory=lambda: {outcome: 0 for outcome in DayOutcome}
    )
    planted: list[tuple[str, Position]] = field(default_factory=list)
    removed: list[tuple[str, Position]] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return sum(self.outcomes.values())


def take_over(passive: PassiveTree) -> Tree:
    return Tree.from_passive(passive)


def hand_back(tree: Tree) -> PassiveTree:
    return tree.to_passive()


def replace_features(
    location: Location,
    items: Iterable[tuple[Position, object]],
    kind: type,
    converter: Callable,
) -> int:
    """
    Convert every feature of exactly `kind` among `items` in place.

    Returns:
        Number of features replaced
    """
    to_replace = [(pos, feature) for pos, feature in items if type(feature) is kind]
    for pos, feature in to_replace:
        location.features[pos] = converter(feature)
    return len(to_replace)


class TreeManager:
    """
    Owns the active/passive switch and the daily tick.

    Args:
        authoritative: Only the authoritative party runs the simulation;
            others just observe its results.
    """

    def __init__(self, authoritative: bool = True) -> None:
        self.authoritative = authoritative
        self._managing = False

    @property
    def managing(self) -> bool:
        return self._managing

    def _set_managing(self, value: bool) -> None:
        if value == self._managing:
            return
        logger.info(
            "%s watching for new trees/new areas.", "Started" if value else "Stopped"
        )
        self._managing = value

    def _take_over_locations(self, locations: Iterable[Location]) -> int:
        total = 0
        for location in locations:
            count = replace_features(
                location, list(location.features.items()), PassiveTree, take_over
            )
            if count:
                logger.info(
                    "%s - replaced %d PassiveTree with Tree.", location.name, count
                )
            total += count
        return total

    def start_day(self, world: WorldProvider) -> int:
        """Activate every passive tree in the world and start managing."""
        logger.info("Activating trees in all available areas.")
        count = self._take_over_locations(world.active_locations())
        self._set_managing(True)
        return count

    def suspend(self, world: WorldProvider) -> int:
        """Stop managing and convert active trees back (e.g. before saving)."""
        self._set_managing(False)
        logger.info("Suspending trees in all available areas.")
        total = 0
        for location in world.active_locations():
            count = replace_features(
                location, list(location.features.items()), Tree, hand_back
            )
            if count:
                logger.info(
                    "%s - replaced %d Tree with PassiveTree.", location.name, count
                )
            total += count
        return total

    def on_locations_added(self, locations: Iterable[Location]) -> int:
        if not self._managing:
            return 0
        logger.info("Found new areas; activating any trees.")
        return self._take_over_locations(locations)

    def on_features_added(
        self, location: Location, added: Mapping[Position, object]
    ) -> int:
        """Activate passive trees in a delta of newly added features."""
        if not self._managing:
            return 0
        count = replace_features(location, list(added.items()), PassiveTree, take_over)
        if count:
            logger.debug(
                "%s - feature list changed: replaced %d PassiveTree with Tree.",
                location.name,
                count,
            )
        return count

    def run_location(
        self,
        location: Location,
        calendar: Calendar,
        rng: RandomSource,
        config: GroveConfig,
        report: DayReport,
    ) -> None:
        """One sequential pass over the trees present at the start of the pass."""
        trees = [
            (pos, feature)
            for pos, feature in location.features.items()
            if isinstance(feature, Tree)
        ]
        destroyed: list[tuple[Position, Tree]] = []

        for pos, tree in trees:
            result = dynamics.step(tree, location, pos, calendar, rng, config)
            report.outcomes[result.outcome] += 1
            for target, _ in result.insertions:
                report.planted.append((location.name, target))
            if result.outcome is DayOutcome.DESTROYED:
                destroyed.append((pos, tree))

        for pos, tree in destroyed:
            if location.features.get(pos) is tree:
                del location.features[pos]
                report.removed.append((location.name, pos))

    def run_day(
        self,
        world: WorldProvider,
        calendar: Calendar,
        rng: RandomSource,
        config: GroveConfig,
    ) -> DayReport:
        """
        Run the daily tick over every active location.

        Collaborator failures (e.g. a location that cannot be listed)
        propagate to the caller.
        """
        report = DayReport()
        if not self.authoritative:
            logger.debug("Not the authoritative party; skipping tree simulation.")
            return report

        for location in world.active_locations():
            self.run_location(location, calendar, rng, config, report)

        logger.debug(
            "Day tick: %d trees, %d planted, %d removed",
            report.processed,
            len(report.planted),
            len(report.removed),
        )
        return report
