"""Navigation controller that turns direction codes into agent movements."""

from __future__ import annotations

import copy
import dataclasses
import math

from dirac_nav.config import ConfigError, NavigationConfig, config_from_parameters
from dirac_nav.factory import create_strategy
from dirac_nav.node import Node
from dirac_nav.publishers import PublisherManager
from dirac_nav.strategies import MovementContext


class NavigationController:
    """Executes discrete movement commands for agents on a node."""

    def __init__(self, node: Node, config: NavigationConfig | None = None) -> None:
        if node is None:
            raise ValueError("Node cannot be null")
        self._node = node
        config = copy.deepcopy(config) if config is not None else NavigationConfig()
        if not config.is_valid():
            node.logger.warning("Invalid configuration provided, using defaults")
            config = NavigationConfig()
        self._config = config
        self.publishers = PublisherManager(node, dataclasses.replace(config.topics))
        self._config.log_configuration()
        node.logger.info("Navigation Controller initialized with configuration management")

    @property
    def config(self) -> NavigationConfig:
        """The configuration currently in use."""
        return self._config

    def initialize_from_parameters(self, node: Node) -> None:
        """Load the configuration from ``node``'s parameters; raises ConfigError on failure."""
        try:
            new_config = config_from_parameters(node)
        except ConfigError as exc:
            self._node.logger.error("Failed to initialize from parameters: %s", exc)
            raise
        self.update_configuration(new_config)
        self._node.logger.info("Successfully initialized from ROS parameters")

    def update_configuration(self, config: NavigationConfig) -> None:
        """Replace the configuration; raises ConfigError if it is invalid."""
        if not config.is_valid():
            self._node.logger.error("Attempted to update with invalid configuration")
            raise ConfigError("Attempted to update with invalid configuration")
        self._config = copy.deepcopy(config)
        self._apply_configuration()
        self._node.logger.info("Configuration updated successfully")
        self._config.log_configuration()

    def execute_command(self, agent_id: int, direction: int) -> None:
        """Start the movement for ``direction`` on agent ``agent_id``."""
        logger = self._node.logger
        logger.info("Executing command for agent %d: direction %d", agent_id, direction)
        strategy = create_strategy(direction)
        if strategy is None:
            logger.warning(
                "Invalid direction %d for agent %d. Valid directions: "
                "1=forward, 2=backward, 3=left, 4=right",
                direction, agent_id,
            )
            return
        context = self._movement_context(agent_id)
        logger.info("Agent %d: Executing %s strategy", agent_id, strategy.name)
        strategy.execute(context)

    def set_movement_parameters(
        self, linear_speed: float, angular_speed: float, move_distance: float
    ) -> None:
        movement = self._config.movement
        movement.linear_speed = linear_speed
        movement.angular_speed = angular_speed
        movement.move_distance = move_distance
        movement.turn_angle = math.pi / 2.0
        self._node.logger.info(
            "Movement parameters updated: linear=%.2f, angular=%.2f, distance=%.2f",
            linear_speed, angular_speed, move_distance,
        )

    def set_cmd_vel_topic(self, topic_name: str) -> None:
        self._config.topics.base_topic = topic_name
        self._apply_configuration()
        self._node.logger.info("Command velocity topic updated to: %s", topic_name)

    def set_simulation_mode(self, is_simulation: bool) -> None:
        self._config.topics.simulation_mode = is_simulation
        self._apply_configuration()
        self._node.logger.info(
            "Simulation mode updated to: %s",
            "true (turtle topics)" if is_simulation else "false (namespaced robot topics)",
        )

    def _apply_configuration(self) -> None:
        self.publishers.update_config(dataclasses.replace(self._config.topics))

    def _movement_context(self, agent_id: int) -> MovementContext:
        return MovementContext(
            publisher=self.publishers.get_publisher(agent_id),
            node=self._node,
            parameters=dataclasses.replace(self._config.movement),
            agent_id=agent_id,
            completion_callback=None,
        )