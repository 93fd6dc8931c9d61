"""Node that listens for agent commands and drives the agent accordingly."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from dirac_nav.config import ConfigError
from dirac_nav.controller import NavigationController
from dirac_nav.messages import AgentCommand
from dirac_nav.node import MessageBus, Node, agent_id_from_environment


class DiscreteNavigationControllerNode(Node):
    """Receives discrete commands for one agent and executes them."""

    def __init__(
        self,
        bus: MessageBus | None = None,
        parameters: Mapping[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__("discrete_navigation_controller", bus, parameters)
        self.agent_id = agent_id_from_environment(environ)
        self.logger.info("Agent ID: %d", self.agent_id)
        self.navigation: NavigationController | None = None

        self.is_simulation = bool(self.declare_parameter("simulation_mode", True))
        self.commands_topic = f"/robot{self.agent_id}/agent_commands"
        self.create_subscription(self.commands_topic, 10, self.on_command)
        self.logger.info("Listening for agent commands on '%s' topic", self.commands_topic)
        self.logger.info(
            "Running in %s mode", "simulation" if self.is_simulation else "real robot"
        )
        self.logger.info(
            "Discrete Navigation Controller Node started for agent %d", self.agent_id
        )
        self.logger.info("Command mapping: 1=forward, 2=backward, 3=left, 4=right")

    def initialize_navigation(self) -> None:
        """Create the navigation controller and load its parameters, if possible."""
        self.navigation = NavigationController(self)
        try:
            self.navigation.initialize_from_parameters(self)
        except ConfigError:
            self.logger.warning("Failed to initialize from parameters, using defaults")
        self.logger.info("Navigation controller initialized for agent %d", self.agent_id)

    def on_command(self, msg: AgentCommand) -> None:
        self.logger.info(
            "Received command: direction=%d for agent %d", msg.direction, self.agent_id
        )
        if self.navigation is None:
            self.initialize_navigation()
        self.navigation.execute_command(self.agent_id, msg.direction)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the discrete navigation controller until interrupted."""
    logging.basicConfig(level=logging.INFO)
    node = DiscreteNavigationControllerNode()
    node.spin()
    return 0