"""Movement strategies that turn discrete commands into timed velocity commands."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable

from dirac_nav.messages import Twist, Vector3
from dirac_nav.node import Node, Publisher, Timer

_logger = logging.getLogger(__name__)


@dataclass
class MovementParameters:
    """Speeds and distances used by the strategies."""

    linear_speed: float = 2.0
    angular_speed: float = 1.57
    move_distance: float = 1.0
    turn_angle: float = 1.57


@dataclass
class MovementContext:
    """Everything a strategy needs to move one agent."""

    publisher: Publisher | None
    node: Node | None
    parameters: MovementParameters = field(default_factory=MovementParameters)
    agent_id: int = 0
    completion_callback: Callable[[], None] | None = None


def _log(context: MovementContext) -> logging.Logger:
    return context.node.logger if context.node is not None else _logger


def _travel_time(amount: float, speed: float) -> timedelta:
    return timedelta(milliseconds=int(amount / speed * 1000))


class MovementStrategy(ABC):
    """Base class for a movement executed through timed velocity commands."""

    name = "MovementStrategy"

    @abstractmethod
    def execute(self, context: MovementContext) -> None:
        """Start the movement described by this strategy."""

    def publish_twist(self, context: MovementContext, twist: Twist) -> None:
        if context.publisher is not None:
            context.publisher.publish(twist)
            _log(context).debug(
                "Agent %d (%s): Published twist - linear.x=%.2f, angular.z=%.2f",
                context.agent_id, self.name, twist.linear.x, twist.angular.z,
            )
        else:
            _log(context).error(
                "Agent %d (%s): Publisher is null, cannot publish twist",
                context.agent_id, self.name,
            )

    def create_movement_timer(
        self, context: MovementContext, duration: timedelta, callback: Callable[[], None]
    ) -> Timer | None:
        """Run ``callback`` once after ``duration`` on the context's node."""
        if context.node is None:
            _logger.error(
                "Agent %d (%s): Node is null, cannot create timer", context.agent_id, self.name
            )
            return None

        def fire() -> None:
            timer.cancel()
            callback()

        timer = context.node.create_timer(duration.total_seconds(), fire)
        context.node.logger.debug(
            "Agent %d (%s): Created timer for %d ms",
            context.agent_id, self.name, duration // timedelta(milliseconds=1),
        )
        return timer

    def stop_agent(self, context: MovementContext) -> None:
        self.publish_twist(context, Twist())
        _log(context).info(
            "Agent %d (%s): Movement complete - agent stopped", context.agent_id, self.name
        )
        if context.completion_callback is not None:
            context.completion_callback()

    def _drive(
        self, context: MovementContext, velocity: float, callback: Callable[[], None]
    ) -> None:
        self.publish_twist(context, Twist(linear=Vector3(x=velocity)))
        params = context.parameters
        self.create_movement_timer(
            context, _travel_time(params.move_distance, params.linear_speed), callback
        )


class ForwardMovement(MovementStrategy):
    """Drive forward one move distance."""

    name = "ForwardMovement"

    def execute(self, context: MovementContext) -> None:
        params = context.parameters
        _log(context).info(
            "Agent %d: Executing forward movement (%.2f units at %.2f m/s)",
            context.agent_id, params.move_distance, params.linear_speed,
        )
        self._drive(context, params.linear_speed, lambda: self.stop_agent(context))


class BackwardMovement(MovementStrategy):
    """Drive backward one move distance."""

    name = "BackwardMovement"

    def execute(self, context: MovementContext) -> None:
        params = context.parameters
        _log(context).info(
            "Agent %d: Executing backward movement (%.2f units at %.2f m/s)",
            context.agent_id, params.move_distance, params.linear_speed,
        )
        self._drive(context, -params.linear_speed, lambda: self.stop_agent(context))


class _SidestepMovement(MovementStrategy):
    """Turn, drive forward, then turn back to the original heading."""

    _turn_sign = 1.0
    _label = ""

    def execute(self, context: MovementContext) -> None:
        _log(context).info(
            "Agent %d: Executing %s movement (turn-move-turn sequence)",
            context.agent_id, self._label,
        )
        turn = self._turn_sign * context.parameters.angular_speed

        def turn_back() -> None:
            self._execute_turn(context, -turn, lambda: self.stop_agent(context))

        def advance() -> None:
            self._execute_forward(context, turn_back)

        self._execute_turn(context, turn, advance)

    def _execute_turn(
        self, context: MovementContext, angular_velocity: float, callback: Callable[[], None]
    ) -> None:
        self.publish_twist(context, Twist(angular=Vector3(z=angular_velocity)))
        duration = _travel_time(context.parameters.turn_angle, abs(angular_velocity))
        self.create_movement_timer(context, duration, callback)

    def _execute_forward(self, context: MovementContext, callback: Callable[[], None]) -> None:
        self._drive(context, context.parameters.linear_speed, callback)


class LeftMovement(_SidestepMovement):
    """Turn left, drive forward, turn right."""

    name = "LeftMovement"
    _turn_sign = 1.0
    _label = "left"


class RightMovement(_SidestepMovement):
    """Turn right, drive forward, turn left."""

    name = "RightMovement"
    _turn_sign = -1.0
    _label = "right"