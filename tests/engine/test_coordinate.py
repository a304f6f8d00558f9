"""Tests for coordinates and occupancy generation."""

import logging

import pytest
from battlegrid.engine.coordinate import (
    Coordinate,
    InvalidLengthError,
    Orientation,
    build_occupancy,
)


def test_coordinate_equality_is_structural() -> None:
    a = Coordinate(3, 4)
    b = Coordinate(3, 4)
    assert a == a
    assert a == b and b == a
    assert a != Coordinate(4, 3)
    assert len({a, b, Coordinate(4, 3)}) == 2


def test_coordinate_has_no_ordering() -> None:
    with pytest.raises(TypeError):
        Coordinate(0, 0) < Coordinate(1, 1)  # noqa: B015


def test_coordinate_accepts_negative_and_large_values() -> None:
    coord = Coordinate(-5, 10**9)
    assert coord.x == -5
    assert coord.y == 10**9


def test_coordinate_str() -> None:
    assert str(Coordinate(2, 1)) == "(2,1)"
    assert str(Coordinate(-1, 0)) == "(-1,0)"


def test_horizontal_occupancy_steps_along_x() -> None:
    origin = Coordinate(6, 4)
    cells = build_occupancy(origin, Orientation.HORIZONTAL, 5)
    assert cells == (
        Coordinate(6, 4),
        Coordinate(7, 4),
        Coordinate(8, 4),
        Coordinate(9, 4),
        Coordinate(10, 4),
    )


@pytest.mark.parametrize("length", [1, 2, 7, 20])
@pytest.mark.parametrize("origin", [Coordinate(0, 0), Coordinate(-3, 8), Coordinate(100, -100)])
def test_occupancy_shape(origin: Coordinate, length: int) -> None:
    horizontal = build_occupancy(origin, Orientation.HORIZONTAL, length)
    assert len(horizontal) == length
    assert horizontal[0] == origin
    for i, cell in enumerate(horizontal):
        assert cell == Coordinate(origin.x + i, origin.y)

    vertical = build_occupancy(origin, Orientation.VERTICAL, length)
    assert len(vertical) == length
    assert vertical[0] == origin
    for i, cell in enumerate(vertical):
        assert cell == Coordinate(origin.x, origin.y + i)


@pytest.mark.parametrize("orientation", list(Orientation))
def test_length_one_is_just_the_origin(orientation: Orientation) -> None:
    assert build_occupancy(Coordinate(2, 6), orientation, 1) == (Coordinate(2, 6),)


@pytest.mark.parametrize("length", [0, -1, -20])
def test_non_positive_length_is_rejected(length: int) -> None:
    with pytest.raises(InvalidLengthError) as excinfo:
        build_occupancy(Coordinate(0, 0), Orientation.VERTICAL, length)
    assert excinfo.value.length == length
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("length", [2.0, "3", True])
def test_non_integer_length_is_rejected(length: object) -> None:
    with pytest.raises(InvalidLengthError):
        build_occupancy(Coordinate(0, 0), Orientation.HORIZONTAL, length)  # type: ignore[arg-type]


def test_invalid_length_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="battlegrid.engine.coordinate"):
        with pytest.raises(InvalidLengthError):
            build_occupancy(Coordinate(1, 1), Orientation.HORIZONTAL, 0)
    assert [record.message for record in caplog.records] == ["occupancy_invalid_length"]
    assert caplog.records[0].length == 0


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("H", Orientation.HORIZONTAL),
        (" horizontal ", Orientation.HORIZONTAL),
        ("hor", Orientation.HORIZONTAL),
        ("v", Orientation.VERTICAL),
        ("Vertical", Orientation.VERTICAL),
    ],
)
def test_orientation_parse(text: str, expected: Orientation) -> None:
    assert Orientation.parse(text) is expected


def test_orientation_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        Orientation.parse("diagonal")


@pytest.mark.parametrize("orientation", ["horizontal", "H", None, 0])
def test_non_orientation_values_are_rejected(orientation: object) -> None:
    with pytest.raises(ValueError) as excinfo:
        build_occupancy(Coordinate(0, 0), orientation, 3)  # type: ignore[arg-type]
    assert not isinstance(excinfo.value, InvalidLengthError)


def test_bad_orientation_is_reported_before_bad_length(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="battlegrid.engine.coordinate"):
        with pytest.raises(ValueError, match="Orientation"):
            build_occupancy(Coordinate(0, 0), "horizontal", 0)  # type: ignore[arg-type]
    assert [record.message for record in caplog.records] == ["occupancy_invalid_orientation"]
