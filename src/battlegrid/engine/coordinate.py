"""Grid coordinates and occupancy generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class InvalidLengthError(ValueError):
    """Raised when an occupancy is requested with a non-positive length."""

    def __init__(self, length: object) -> None:
        super().__init__(f"Occupancy length must be a positive integer, got {length!r}.")
        self.length = length


@dataclass(frozen=True)
class Coordinate:
    """Immutable grid cell."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class Orientation(Enum):
    """Axis along which an occupancy extends."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def parse(cls, text: str) -> Orientation:
        """Parse user input such as ``H``, ``ver`` or ``horizontal``."""
        cleaned = text.strip().upper()
        if cleaned in {"H", "HOR", "HORIZONTAL"}:
            return cls.HORIZONTAL
        if cleaned in {"V", "VER", "VERTICAL"}:
            return cls.VERTICAL
        raise ValueError(f"Unknown orientation {text!r}; use H or V.")


_STEPS = {
    Orientation.HORIZONTAL: (1, 0),
    Orientation.VERTICAL: (0, 1),
}


def build_occupancy(origin: Coordinate, orientation: Orientation, length: int) -> tuple[Coordinate, ...]:
    """Expand an origin into ``length`` contiguous cells along ``orientation``.

    The first cell is ``origin`` itself; each following cell steps +1 along x
    (horizontal) or y (vertical). Lengths below one raise
    :class:`InvalidLengthError` rather than being clamped; anything other than
    an :class:`Orientation` member raises ``ValueError``.
    """
    step = _STEPS.get(orientation) if isinstance(orientation, Orientation) else None
    if step is None:
        logger.error(
            "occupancy_invalid_orientation",
            extra={"orientation": repr(orientation), "x": origin.x, "y": origin.y},
        )
        raise ValueError(f"Orientation must be an Orientation member, got {orientation!r}.")

    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        logger.error(
            "occupancy_invalid_length",
            extra={
                "length": length,
                "orientation": orientation.name,
                "x": origin.x,
                "y": origin.y,
            },
        )
        raise InvalidLengthError(length)

    dx, dy = step
    return tuple(Coordinate(origin.x + dx * offset, origin.y + dy * offset) for offset in range(length))
