"""Hit-testing and torpedo capabilities shared by every combatant kind.

Entity types opt in by listing :class:`HitDetectable`, :class:`TorpedoLaunchable`
or the combined :class:`Combatant` as a base and implementing ``occupancy()``.
The default ``test_for_hit`` and ``launch_torpedo`` bodies come along for free.
The module-level functions expose the same algorithms for objects that only
match the protocols structurally.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol, Sequence, runtime_checkable

from battlegrid.telemetry import get_meter, get_tracer

from .coordinate import Coordinate

logger = logging.getLogger(__name__)
tracer = get_tracer("battlegrid.engine.combatant")
meter = get_meter("battlegrid.engine.combatant")

TORPEDO_COUNTER = meter.create_counter(
    "battlegrid_torpedoes_launched",
    unit="1",
    description="Torpedoes launched at hit-detectable targets",
)


class TorpedoResult(Enum):
    """Outcome of a torpedo, each carrying a fixed message."""

    HIT = "hit"
    MISS = "miss"

    @property
    def message(self) -> str:
        return _MESSAGES[self]

    def __str__(self) -> str:
        return self.message


_MESSAGES = {
    TorpedoResult.HIT: "You sunk my battleship! 😡",
    TorpedoResult.MISS: "Not even close Mister! 😎",
}


class Occupant(Protocol):
    """Anything that can report the grid cells it covers."""

    def occupancy(self) -> Sequence[Coordinate]: ...


@runtime_checkable
class HitDetectable(Protocol):
    """Can be targeted: reports its occupancy and answers hit-tests."""

    def occupancy(self) -> Sequence[Coordinate]: ...

    def test_for_hit(self, coordinate: Coordinate) -> TorpedoResult:
        """Return HIT iff ``coordinate`` is one of the occupied cells."""
        return test_for_hit(self, coordinate)


@runtime_checkable
class TorpedoLaunchable(Protocol):
    """Can fire at any hit-detectable target, whatever its concrete type."""

    def launch_torpedo(self, target: HitDetectable, coordinate: Coordinate) -> TorpedoResult:
        return launch_torpedo(self, target, coordinate)


@runtime_checkable
class Combatant(HitDetectable, TorpedoLaunchable, Protocol):
    """Both targetable and able to fire."""


def occupancy(entity: Occupant) -> tuple[Coordinate, ...]:
    """Return a read-only snapshot of the cells ``entity`` occupies."""
    return tuple(entity.occupancy())


def test_for_hit(entity: Occupant, coordinate: Coordinate) -> TorpedoResult:
    """Hit-test ``coordinate`` against the occupancy of ``entity``."""
    if coordinate in entity.occupancy():
        return TorpedoResult.HIT
    return TorpedoResult.MISS


def launch_torpedo(firing: object, target: HitDetectable, coordinate: Coordinate) -> TorpedoResult:
    """Fire at ``target`` and return its hit-test result unchanged.

    The firing entity's own occupancy plays no part in the outcome.
    """
    with tracer.start_as_current_span("combatant.launch_torpedo") as span:
        span.set_attribute("firing.kind", type(firing).__name__)
        span.set_attribute("target.kind", type(target).__name__)
        span.set_attribute("shot.x", coordinate.x)
        span.set_attribute("shot.y", coordinate.y)

        result = target.test_for_hit(coordinate)

        span.set_attribute("shot.outcome", result.value)
        TORPEDO_COUNTER.add(1, attributes={"result": result.value})
        logger.info(
            "torpedo_launched",
            extra={
                "firing": type(firing).__name__,
                "target": type(target).__name__,
                "x": coordinate.x,
                "y": coordinate.y,
                "outcome": result.value,
            },
        )
        return result
