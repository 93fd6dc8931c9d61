"""Per-agent velocity publishers and the topic naming they follow."""

from __future__ import annotations

from dataclasses import dataclass

from dirac_nav.node import Node, Publisher


@dataclass
class TopicConfig:
    """How velocity topics are named for each agent."""

    base_topic: str = "cmd_vel"
    simulation_mode: bool = True

    def topic_name(self, agent_id: int) -> str:
        """Full topic name for an agent: turtle topics in simulation, robot topics otherwise."""
        prefix = "turtle" if self.simulation_mode else "robot"
        return f"/{prefix}{agent_id}/{self.base_topic}"


class PublisherManager:
    """Creates and caches one velocity publisher per agent."""

    def __init__(self, node: Node, config: TopicConfig | None = None) -> None:
        if node is None:
            raise ValueError("Node cannot be null")
        self.node = node
        self.config = config if config is not None else TopicConfig()
        self._publishers: dict[int, Publisher] = {}
        node.logger.info(
            "Publisher Manager initialized in %s mode with base topic '%s'",
            "simulation" if self.config.simulation_mode else "real robot",
            self.config.base_topic,
        )

    def get_publisher(self, agent_id: int) -> Publisher:
        """Return the agent's publisher, creating it on first use."""
        existing = self._publishers.get(agent_id)
        if existing is not None:
            self.node.logger.debug("Returning existing publisher for agent %d", agent_id)
            return existing
        return self._create_publisher(agent_id)

    def update_config(self, config: TopicConfig) -> None:
        """Switch topic configuration; cached publishers are dropped."""
        self.node.logger.info(
            "Updating publisher configuration - mode: %s, base_topic: %s",
            "simulation" if config.simulation_mode else "real robot",
            config.base_topic,
        )
        self.config = config
        self.clear_all()

    def remove_publisher(self, agent_id: int) -> None:
        if self._publishers.pop(agent_id, None) is not None:
            self.node.logger.info("Removing publisher for agent %d", agent_id)
        else:
            self.node.logger.warning(
                "Attempted to remove non-existent publisher for agent %d", agent_id
            )

    def clear_all(self) -> None:
        if self._publishers:
            self.node.logger.info("Clearing all %d publishers", len(self._publishers))
            self._publishers.clear()

    def __len__(self) -> int:
        return len(self._publishers)

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._publishers

    def _create_publisher(self, agent_id: int) -> Publisher:
        topic = self.config.topic_name(agent_id)
        self.node.logger.info("Creating publisher for agent %d on topic '%s'", agent_id, topic)
        publisher = self.node.create_publisher(topic, 10)
        self._publishers[agent_id] = publisher
        self.node.logger.info(
            "Successfully created publisher for agent %d on topic '%s'", agent_id, topic
        )
        return publisher