"""Navigation configuration and loading it from node parameters."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from dirac_nav.node import Node, ParameterError
from dirac_nav.publishers import TopicConfig
from dirac_nav.strategies import MovementParameters

_logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a navigation configuration cannot be loaded or is invalid."""


@dataclass
class ControllerConfig:
    """Controller behaviour switches."""

    enable_controller: bool = True

    def load_from_parameters(self, node: Node, prefix: str = "navigation") -> None:
        name = f"{prefix}.enable_controller"
        if node.has_parameter(name):
            self.enable_controller = bool(node.get_parameter(name))

    def is_valid(self) -> bool:
        return True


def _in_range(value: float, upper: float) -> bool:
    return 0.0 < value <= upper


@dataclass
class NavigationConfig:
    """Complete navigation configuration."""

    controller: ControllerConfig = field(default_factory=ControllerConfig)
    movement: MovementParameters = field(default_factory=MovementParameters)
    topics: TopicConfig = field(default_factory=TopicConfig)

    def load_from_parameters(self, node: Node) -> None:
        """Declare the navigation parameters on ``node`` and load their values."""
        if node is None:
            _logger.error("Node is null, cannot load parameters")
            raise ConfigError("Node is null, cannot load parameters")
        try:
            self._declare_parameters(node)
            self.controller.load_from_parameters(node, "navigation")
            self._load_movement_parameters(node)
            self._load_topic_parameters(node)
        except ParameterError as exc:
            node.logger.error("Failed to load navigation configuration: %s", exc)
            raise ConfigError(f"Failed to load navigation configuration: {exc}") from exc
        node.logger.info("Successfully loaded navigation configuration from parameters")

    def is_valid(self) -> bool:
        if not self.controller.is_valid():
            return False
        m = self.movement
        return (
            _in_range(m.linear_speed, 10.0)
            and _in_range(m.angular_speed, 10.0)
            and _in_range(m.move_distance, 10.0)
            and _in_range(m.turn_angle, 2 * math.pi)
            and bool(self.topics.base_topic)
        )

    def log_configuration(self) -> None:
        m = self.movement
        lines = [
            "=== Navigation Configuration ===",
            "Controller:",
            f"  enable_controller: {str(self.controller.enable_controller).lower()}",
            "Movement:",
            f"  linear_speed: {m.linear_speed:.3f} m/s",
            f"  angular_speed: {m.angular_speed:.3f} rad/s",
            f"  move_distance: {m.move_distance:.3f} units",
            f"  turn_angle: {m.turn_angle:.3f} rad ({math.degrees(m.turn_angle):.1f}°)",
            "Topics:",
            f"  base_topic: {self.topics.base_topic}",
            f"  simulation_mode: {str(self.topics.simulation_mode).lower()}",
            "================================",
        ]
        for line in lines:
            _logger.info("%s", line)

    def _declare_parameters(self, node: Node) -> None:
        node.declare_parameter("navigation.enable_controller", self.controller.enable_controller)
        node.declare_parameter("navigation.linear_speed", self.movement.linear_speed)
        node.declare_parameter("navigation.angular_speed", self.movement.angular_speed)
        node.declare_parameter("navigation.move_distance", self.movement.move_distance)
        node.declare_parameter("navigation.turn_angle", self.movement.turn_angle)
        node.declare_parameter("navigation.cmd_vel_topic", self.topics.base_topic)
        node.declare_parameter("simulation_mode", self.topics.simulation_mode)

    def _load_movement_parameters(self, node: Node) -> None:
        self.movement.linear_speed = float(node.get_parameter("navigation.linear_speed"))
        self.movement.angular_speed = float(node.get_parameter("navigation.angular_speed"))
        self.movement.move_distance = float(node.get_parameter("navigation.move_distance"))
        if node.has_parameter("navigation.turn_angle"):
            self.movement.turn_angle = float(node.get_parameter("navigation.turn_angle"))
        else:
            self.movement.turn_angle = math.pi / 2.0

    def _load_topic_parameters(self, node: Node) -> None:
        self.topics.base_topic = node.get_parameter("navigation.cmd_vel_topic")
        self.topics.simulation_mode = bool(node.get_parameter("simulation_mode"))


def default_config() -> NavigationConfig:
    """A configuration holding the built-in defaults."""
    return NavigationConfig()


def config_from_parameters(node: Node) -> NavigationConfig:
    """Load a configuration from ``node``; raises ConfigError if loading fails or it is invalid."""
    config = NavigationConfig()
    config.load_from_parameters(node)
    if not config.is_valid():
        raise ConfigError("Invalid navigation configuration loaded from parameters")
    return config


def try_config_from_parameters(node: Node) -> tuple[NavigationConfig, bool]:
    """Load a configuration and report whether it loaded and is valid."""
    config = NavigationConfig()
    try:
        config.load_from_parameters(node)
    except ConfigError:
        return config, False
    return config, config.is_valid()