"""
World collaborators: locations, terrain features and the world provider.

The engine only talks to the `Location` and `WorldProvider` protocols.
`GridLocation` and `World` are in-memory implementations used by the
rollout, the demo and the tests.

A location's feature map is keyed by integer tile position. Trees are one
feature kind among others (grass, passive trees, anything the host puts
there).
"""

from collections.abc import MutableMapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

Position = tuple[int, int]
Feature = Any


@dataclass
class Grass:
    """Grass terrain feature. Spread may replace it with a sapling."""

    blades: int = 4


class Location(Protocol):
    """What the engine needs to know about an area of the world."""

    name: str
    features: MutableMapping[Position, Feature]

    def is_farm_like(self) -> bool: ...

    def is_outdoors(self) -> bool: ...

    def is_desert(self) -> bool: ...

    def has_water_at(self, position: Position) -> bool: ...

    def is_open_at(self, position: Position) -> bool: ...

    def is_occupied_at(self, position: Position) -> bool: ...

    def in_bounds(self, position: Position) -> bool: ...

    def no_spawn_at(self, position: Position) -> bool: ...

    def has_object_at(self, position: Position) -> bool: ...


class WorldProvider(Protocol):
    def active_locations(self) -> Sequence[Location]: ...


# Back-layer NoSpawn values that forbid trees
NO_SPAWN_VALUES = frozenset({"All", "Tree", "True"})


@dataclass
class GridLocation:
    """
    Rectangular in-memory location.

    Tile properties are looked up per (position, layer); a missing
    property is `None`, never an error.
    """

    name: str
    width: int
    height: int
    farm_like: bool = False
    outdoors: bool = True
    desert: bool = False
    features: dict[Position, Feature] = field(default_factory=dict)
    objects: dict[Position, Any] = field(default_factory=dict)
    blocked: set[Position] = field(default_factory=set)
    properties: dict[tuple[Position, str, str], str] = field(default_factory=dict)

    def is_farm_like(self) -> bool:
        return self.farm_like

    def is_outdoors(self) -> bool:
        return self.outdoors

    def is_desert(self) -> bool:
        return self.desert

    def tile_property(
        self, position: Position, name: str, layer: str = "Back"
    ) -> str | None:
        return self.properties.get((position, name, layer))

    def set_tile_property(
        self, position: Position, name: str, value: str, layer: str = "Back"
    ) -> None:
        self.properties[(position, name, layer)] = value

    def add_water(self, position: Position) -> None:
        self.set_tile_property(position, "Water", "T")

    def has_water_at(self, position: Position) -> bool:
        return self.tile_property(position, "Water") is not None

    def is_open_at(self, position: Position) -> bool:
        return position not in self.blocked

    def is_occupied_at(self, position: Position) -> bool:
        return position in self.features or position in self.objects

    def in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def no_spawn_at(self, position: Position) -> bool:
        return self.tile_property(position, "NoSpawn") in NO_SPAWN_VALUES

    def has_object_at(self, position: Position) -> bool:
        return position in self.objects


@dataclass
class World:
    """List-backed world provider."""

    locations: list[Location] = field(default_factory=list)

    def active_locations(self) -> Sequence[Location]:
        return list(self.locations)

    def add_location(self, location: Location) -> list[Location]:
        """Add a location and return the delta of newly added locations."""
        self.locations.append(location)
        return [location]


def surrounding_positions(position: Position) -> list[Position]:
    """The 8 tiles around `position`."""
    x, y = position
    return [
        (x + dx, y + dy)
        for dx in (-1, 0, 1)
        for dy in (-1, 0, 1)
        if (dx, dy) != (0, 0)
    ]
