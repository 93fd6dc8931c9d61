"""Publishes an agent's simulator pose quantised to grid cells."""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Sequence

from dirac_nav.messages import GridPose, Pose
from dirac_nav.node import MessageBus, Node, agent_id_from_environment

_QUARTER_TURN = math.pi / 2.0


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


class GridPosePublisher(Node):
    """Converts continuous poses into grid poses at a limited rate."""

    def __init__(
        self,
        bus: MessageBus | None = None,
        parameters: Mapping[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__("grid_pose_publisher", bus, parameters)
        self.grid_size = float(self.declare_parameter("grid_size", 10.0))
        self.world_size = float(self.declare_parameter("world_size", 11.0))
        self.agent_id = agent_id_from_environment(environ)
        self._last_pose_pub_time = self.now()

        self.grid_pose_topic = f"/robot{self.agent_id}/location"
        self.pose_topic = f"/turtle{self.agent_id}/pose"
        self._grid_pose_pub = self.create_publisher(self.grid_pose_topic, 10)
        self.create_subscription(self.pose_topic, 10, self.on_pose)
        self.logger.info("Publishing grid poses on: %s", self.grid_pose_topic)
        self.logger.info("Subscribing to poses from: %s", self.pose_topic)

        self.cell_size = self.world_size / self.grid_size
        self.origin_x = 0.0
        self.origin_y = 0.0
        self.pose_pub_period = 0.1

        self.logger.info("Grid Pose Publisher initialized for agent %d", self.agent_id)
        self.logger.info("Grid size: %.1f x %.1f cells", self.grid_size, self.grid_size)
        self.logger.info("World size: %.1f x %.1f meters", self.world_size, self.world_size)
        self.logger.info("Cell size: %.2f meters", self.cell_size)
        self.logger.info("Origin: (%.1f, %.1f)", self.origin_x, self.origin_y)
        self.logger.info("Publishing rate: %.1f Hz", 1.0 / self.pose_pub_period)

    def grid_coordinate(self, real_coord: float, origin: float) -> int:
        """Index of the cell containing ``real_coord``."""
        return math.floor((real_coord - origin) / self.cell_size)

    def quantize_orientation(self, theta: float) -> float:
        """Snap a heading to the nearest quarter turn."""
        theta = math.fmod(theta + 2.0 * math.pi, 2.0 * math.pi)
        return _round_half_away(theta / _QUARTER_TURN) * _QUARTER_TURN

    def on_pose(self, msg: Pose) -> None:
        """Publish the grid pose for ``msg`` if the publishing period has elapsed."""
        now = self.now()
        if now - self._last_pose_pub_time < self.pose_pub_period:
            return
        grid_pose = GridPose(
            x=self.grid_coordinate(msg.x, self.origin_x),
            y=self.grid_coordinate(msg.y, self.origin_y),
            theta=self.quantize_orientation(msg.theta),
            grid_size=self.grid_size,
            cell_size=self.cell_size,
        )
        self._grid_pose_pub.publish(grid_pose)
        self.logger.debug(
            "Published grid pose: (%d, %d, %.2f) with grid size: %.1f, cell size: %.2f",
            grid_pose.x, grid_pose.y, grid_pose.theta, self.grid_size, self.cell_size,
        )
        self._last_pose_pub_time = now


def main(argv: Sequence[str] | None = None) -> int:
    """Run the grid pose publisher until interrupted."""
    logging.basicConfig(level=logging.INFO)
    node = GridPosePublisher()
    node.spin()
    return 0