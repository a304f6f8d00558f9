"""Grid occupancy and hit-detection engine."""

from .combatant import (
    Combatant,
    HitDetectable,
    TorpedoLaunchable,
    TorpedoResult,
    launch_torpedo,
    occupancy,
    test_for_hit,
)
from .coordinate import Coordinate, InvalidLengthError, Orientation, build_occupancy
from .entities import ENTITY_KINDS, Army, Battleship, describe

__all__ = [
    "Army",
    "Battleship",
    "Combatant",
    "Coordinate",
    "ENTITY_KINDS",
    "HitDetectable",
    "InvalidLengthError",
    "Orientation",
    "TorpedoLaunchable",
    "TorpedoResult",
    "build_occupancy",
    "describe",
    "launch_torpedo",
    "occupancy",
    "test_for_hit",
]
