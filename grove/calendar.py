"""
Calendar collaborator: current season and day of month.

Seasons are 28 days long and cycle spring -> summer -> fall -> winter.
"""

from dataclasses import dataclass
from typing import Protocol

from grove.config import Season

DAYS_PER_SEASON = 28
SEASON_ORDER = (Season.SPRING, Season.SUMMER, Season.FALL, Season.WINTER)


class Calendar(Protocol):
    def season(self) -> Season: ...

    def day_of_month(self) -> int: ...


@dataclass
class SeasonCalendar:
    """Mutable calendar; `advance()` moves to the next day."""

    current_season: Season = Season.SPRING
    day: int = 1
    year: int = 1

    def __post_init__(self) -> None:
        if not 1 <= self.day <= DAYS_PER_SEASON:
            raise ValueError(f"day must be in [1, {DAYS_PER_SEASON}], got {self.day}")

    def season(self) -> Season:
        return self.current_season

    def day_of_month(self) -> int:
        return self.day

    def advance(self) -> None:
        if self.day < DAYS_PER_SEASON:
            self.day += 1
            return

        self.day = 1
        index = SEASON_ORDER.index(self.current_season)
        if index == len(SEASON_ORDER) - 1:
            self.year += 1
        self.current_season = SEASON_ORDER[(index + 1) % len(SEASON_ORDER)]
