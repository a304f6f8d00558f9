"""Command-line driver: replay the classic engagement or fire a single torpedo."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from battlegrid.engine.combatant import TorpedoResult
from battlegrid.engine.coordinate import Coordinate, InvalidLengthError, Orientation
from battlegrid.engine.entities import ENTITY_KINDS, Battleship
from battlegrid.telemetry import init_telemetry, record_metric

logger = logging.getLogger(__name__)


def _coordinate_from_input(text: str) -> Coordinate:
    """Parse ``"x,y"`` or ``"x y"`` into a coordinate."""
    cleaned = text.strip().strip("()")
    if not cleaned:
        raise ValueError("Empty coordinate.")
    parts = cleaned.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Use formats like 3,7 or '3 7', got {text!r}.")
    try:
        x, y = map(int, parts)
    except ValueError as exc:
        raise ValueError(f"Coordinates must be integers, got {text!r}.") from exc
    return Coordinate(x, y)


def _describe_shot(firing: object, target: object, coord: Coordinate, result: TorpedoResult) -> str:
    return (
        f"{type(firing).__name__} fired at {type(target).__name__} {coord}: "
        f"{result.name.lower()} - {result}"
    )


def run_demo() -> list[TorpedoResult]:
    """Replay the two-ship engagement and print each outcome."""
    ship1 = Battleship(Coordinate(2, 1), Orientation.VERTICAL, 3)
    ship2 = Battleship(Coordinate(6, 4), Orientation.HORIZONTAL, 5)
    print(ship1)
    print(ship2)

    results = []
    for firing, target, coord in (
        (ship1, ship2, Coordinate(0, 2)),
        (ship2, ship1, Coordinate(2, 2)),
    ):
        result = firing.launch_torpedo(target, coord)
        print(_describe_shot(firing, target, coord, result))
        results.append(result)
    return results


def run_fire(kind: str, origin: Coordinate, orientation: Orientation, length: int, at: Coordinate) -> TorpedoResult:
    """Build the described target and fire a single torpedo at it."""
    target = ENTITY_KINDS[kind](origin, orientation, length)
    firing = Battleship(Coordinate(0, 0), Orientation.HORIZONTAL, 1)
    print(target)
    result = firing.launch_torpedo(target, at)
    print(_describe_shot(firing, target, at, result))
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="battlegrid", description="Fire torpedoes at grid-occupying combatants."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("demo", help="Replay the two-battleship engagement.")

    fire = subparsers.add_parser("fire", help="Fire one torpedo at a described target.")
    fire.add_argument("--kind", choices=sorted(ENTITY_KINDS), default="battleship")
    fire.add_argument("--origin", required=True, help="Target origin, e.g. 6,4.")
    fire.add_argument("--orientation", default="H", help="H(orizontal) or V(ertical).")
    fire.add_argument("--length", type=int, required=True, help="Number of occupied cells.")
    fire.add_argument("--at", required=True, help="Coordinate to fire at, e.g. 7,4.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    init_telemetry()
    record_metric("battlegrid_cli_runs_total", 1, {"command": args.command})

    if args.command == "demo":
        run_demo()
        return 0

    try:
        origin = _coordinate_from_input(args.origin)
        at = _coordinate_from_input(args.at)
        orientation = Orientation.parse(args.orientation)
        result = run_fire(args.kind, origin, orientation, args.length, at)
    except InvalidLengthError as exc:
        parser.error(str(exc))
    except ValueError as exc:
        parser.error(f"Invalid input: {exc}")

    logger.info("cli_fire", extra={"kind": args.kind, "outcome": result.name})
    return 0 if result is TorpedoResult.HIT else 1


if __name__ == "__main__":
    raise SystemExit(main())
