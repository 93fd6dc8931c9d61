import pytest

from dirac_nav.factory import (
    MovementDirection,
    create_strategy,
    is_valid_direction,
    to_movement_direction,
)
from dirac_nav.strategies import (
    BackwardMovement,
    ForwardMovement,
    LeftMovement,
    RightMovement,
)


@pytest.mark.parametrize(
    "code, expected",
    [(1, ForwardMovement), (2, BackwardMovement), (3, LeftMovement), (4, RightMovement)],
)
def test_create_strategy_from_code(code, expected):
    assert type(create_strategy(code)) is expected


@pytest.mark.parametrize(
    "direction, name",
    [
        (MovementDirection.FORWARD, "ForwardMovement"),
        (MovementDirection.BACKWARD, "BackwardMovement"),
        (MovementDirection.LEFT, "LeftMovement"),
        (MovementDirection.RIGHT, "RightMovement"),
    ],
)
def test_create_strategy_from_enum(direction, name):
    assert create_strategy(direction).name == name


@pytest.mark.parametrize("code", [0, 5, -1, 100])
def test_create_strategy_invalid_returns_none(code):
    assert create_strategy(code) is None


def test_is_valid_direction_bounds():
    assert [is_valid_direction(c) for c in range(0, 6)] == [False, True, True, True, True, False]


def test_to_movement_direction_round_trip():
    for direction in MovementDirection:
        assert to_movement_direction(int(direction)) is direction


def test_to_movement_direction_rejects_invalid():
    with pytest.raises(ValueError, match="Invalid direction code: 5"):
        to_movement_direction(5)


def test_each_call_returns_fresh_strategy():
    first = create_strategy(1)
    second = create_strategy(1)
    assert type(first) is ForwardMovement
    assert type(second) is ForwardMovement
    assert first.name == "ForwardMovement"
    assert second.name == "ForwardMovement"
    assert first is not second