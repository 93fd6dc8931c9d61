import math

import pytest

from dirac_nav.grid_pose import GridPosePublisher
from dirac_nav.messages import GridPose, Pose
from dirac_nav.node import MessageBus


def _publisher(**params):
    return GridPosePublisher(parameters=params or None, environ={})


def test_topics_follow_agent_id():
    node = GridPosePublisher(environ={"AGENT_ID": "3"})
    assert node.agent_id == 3
    assert node.grid_pose_topic == "/robot3/location"
    assert node.pose_topic == "/turtle3/pose"


def test_invalid_agent_id_falls_back_to_one():
    node = GridPosePublisher(environ={"AGENT_ID": "abc"})
    assert node.grid_pose_topic == "/robot1/location"


def test_defaults():
    node = _publisher()
    assert node.grid_size == 10.0
    assert node.world_size == 11.0
    assert node.pose_pub_period == 0.1


def test_cell_size_from_parameters():
    node = _publisher(grid_size=4.0, world_size=8.0)
    assert node.cell_size == 2.0


@pytest.mark.parametrize("coord", [0.0, 0.5, 3.9, 7.2, 9.99])
def test_grid_coordinate_with_unit_cells(coord):
    node = _publisher(grid_size=10.0, world_size=10.0)
    cell = node.grid_coordinate(coord, 0.0)
    assert cell <= coord < cell + 1


def test_grid_coordinate_floors_negative():
    node = _publisher(grid_size=4.0, world_size=8.0)
    assert node.grid_coordinate(-0.5, 0.0) == -1
    assert node.grid_coordinate(5.0, 0.0) == 2


def test_grid_coordinate_respects_origin():
    node = _publisher(grid_size=4.0, world_size=8.0)
    assert node.grid_coordinate(5.0, 5.0) == 0


@pytest.mark.parametrize("theta", [0.0, 0.3, 1.0, 2.5, 3.5, 5.0, -0.4, -2.0])
def test_quantize_orientation_snaps_to_quarter_turns(theta):
    node = _publisher()
    snapped = node.quantize_orientation(theta)
    quarters = snapped / (math.pi / 2)
    assert quarters == pytest.approx(round(quarters))
    normalized = math.fmod(theta + 2 * math.pi, 2 * math.pi)
    assert abs(snapped - normalized) <= math.pi / 4 + 1e-12


def test_quantize_exact_quarter_is_kept():
    node = _publisher()
    assert node.quantize_orientation(math.pi / 2) == pytest.approx(math.pi / 2)
    assert node.quantize_orientation(-math.pi / 2) == pytest.approx(3 * math.pi / 2)


def test_pose_publishing_is_rate_limited():
    bus = MessageBus()
    node = GridPosePublisher(bus=bus, environ={"AGENT_ID": "2"},
                             parameters={"grid_size": 4.0, "world_size": 8.0})
    received = []
    bus.subscribe("/robot2/location", received.append)

    bus.publish("/turtle2/pose", Pose(x=5.0, y=1.0, theta=0.0))
    assert received == []

    node.spin_for(0.1)
    bus.publish("/turtle2/pose", Pose(x=5.0, y=1.0, theta=math.pi / 2))
    bus.publish("/turtle2/pose", Pose(x=1.0, y=1.0, theta=0.0))
    assert len(received) == 1
    pose = received[0]
    assert (pose.x, pose.y) == (2, 0)
    assert pose.theta == pytest.approx(math.pi / 2)
    assert pose.grid_size == 4.0
    assert pose.cell_size == 2.0

    node.spin_for(0.1)
    node.on_pose(Pose(x=1.0, y=7.0, theta=0.0))
    assert received[-1] == GridPose(x=0, y=3, theta=0.0, grid_size=4.0, cell_size=2.0)