"""Mapping from discrete direction codes to movement strategies."""

from __future__ import annotations

from enum import IntEnum

from dirac_nav.strategies import (
    BackwardMovement,
    ForwardMovement,
    LeftMovement,
    MovementStrategy,
    RightMovement,
)


class MovementDirection(IntEnum):
    """Direction codes carried by agent commands."""

    FORWARD = 1
    BACKWARD = 2
    LEFT = 3
    RIGHT = 4


_STRATEGIES: dict[MovementDirection, type[MovementStrategy]] = {
    MovementDirection.FORWARD: ForwardMovement,
    MovementDirection.BACKWARD: BackwardMovement,
    MovementDirection.LEFT: LeftMovement,
    MovementDirection.RIGHT: RightMovement,
}


def is_valid_direction(direction_code: int) -> bool:
    """Return True if the code names one of the four movement directions."""
    return MovementDirection.FORWARD <= direction_code <= MovementDirection.RIGHT


def to_movement_direction(direction_code: int) -> MovementDirection:
    """Convert a code to a direction, raising ValueError for unknown codes."""
    if not is_valid_direction(direction_code):
        raise ValueError(f"Invalid direction code: {direction_code}")
    return MovementDirection(direction_code)


def create_strategy(direction: MovementDirection | int) -> MovementStrategy | None:
    """Build the strategy for a direction or code; None if the code is invalid."""
    if not isinstance(direction, MovementDirection):
        if not is_valid_direction(direction):
            return None
        try:
            direction = to_movement_direction(direction)
        except ValueError:
            return None
    strategy_class = _STRATEGIES.get(direction)
    return strategy_class() if strategy_class is not None else None