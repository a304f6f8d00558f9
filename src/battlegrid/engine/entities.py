"""Concrete combatant kinds.

``Battleship`` and ``Army`` are deliberately unrelated to each other; all they
share is the :class:`~battlegrid.engine.combatant.Combatant` capability.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .combatant import Combatant, Occupant
from .coordinate import Coordinate, Orientation, build_occupancy


def describe(entity: Occupant) -> str:
    """Render ``"<Kind> at Coordinates: (x,y) (x,y) "`` for an entity."""
    text = f"{type(entity).__name__} at Coordinates: "
    for coord in entity.occupancy():
        text += f"{coord} "
    return text


@dataclass(frozen=True)
class Battleship(Combatant):
    """A ship laid out in a straight line from its origin."""

    origin: Coordinate
    orientation: Orientation
    length: int
    _coordinates: tuple[Coordinate, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_coordinates", build_occupancy(self.origin, self.orientation, self.length)
        )

    def occupancy(self) -> tuple[Coordinate, ...]:
        return self._coordinates

    def __str__(self) -> str:
        return describe(self)


@dataclass(frozen=True)
class Army(Combatant):
    """A column of troops; fights with the same rules as a ship."""

    origin: Coordinate
    orientation: Orientation
    length: int
    _positions: tuple[Coordinate, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_positions", build_occupancy(self.origin, self.orientation, self.length)
        )

    def occupancy(self) -> tuple[Coordinate, ...]:
        return self._positions

    def __str__(self) -> str:
        return describe(self)


ENTITY_KINDS: dict[str, type[Combatant]] = {
    "battleship": Battleship,
    "army": Army,
}
