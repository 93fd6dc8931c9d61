import logging
import math

import pytest

from dirac_nav.config import (
    ConfigError,
    ControllerConfig,
    NavigationConfig,
    config_from_parameters,
    default_config,
    try_config_from_parameters,
)
from dirac_nav.node import Node


def test_defaults():
    config = default_config()
    assert config.controller.enable_controller is True
    assert config.movement.linear_speed == 2.0
    assert config.movement.angular_speed == 1.57
    assert config.movement.move_distance == 1.0
    assert config.movement.turn_angle == 1.57
    assert config.topics.base_topic == "cmd_vel"
    assert config.topics.simulation_mode is True
    assert config.is_valid()


@pytest.mark.parametrize(
    "attr, value",
    [
        ("linear_speed", 0.0),
        ("linear_speed", 10.5),
        ("angular_speed", -1.0),
        ("move_distance", 11.0),
        ("turn_angle", 0.0),
        ("turn_angle", 2 * math.pi + 0.1),
    ],
)
def test_invalid_movement(attr, value):
    config = NavigationConfig()
    setattr(config.movement, attr, value)
    assert not config.is_valid()


def test_upper_bounds_are_inclusive():
    config = NavigationConfig()
    config.movement.linear_speed = 10.0
    config.movement.turn_angle = 2 * math.pi
    assert config.is_valid()


def test_empty_topic_invalid():
    config = NavigationConfig()
    config.topics.base_topic = ""
    assert not config.is_valid()


def test_controller_config_loads_with_prefix():
    node = Node("n", parameters={"custom.enable_controller": False})
    node.declare_parameter("custom.enable_controller", True)
    controller = ControllerConfig()
    controller.load_from_parameters(node, "custom")
    assert controller.enable_controller is False
    assert controller.is_valid()


def test_controller_config_ignores_missing_parameter():
    controller = ControllerConfig()
    controller.load_from_parameters(Node("n"), "navigation")
    assert controller.enable_controller is True


def test_load_uses_overrides():
    node = Node(
        "n",
        parameters={
            "navigation.linear_speed": 3.0,
            "navigation.cmd_vel_topic": "vel",
            "simulation_mode": False,
            "navigation.enable_controller": False,
        },
    )
    config = config_from_parameters(node)
    assert config.movement.linear_speed == 3.0
    assert config.topics.base_topic == "vel"
    assert config.topics.simulation_mode is False
    assert config.controller.enable_controller is False
    assert node.get_parameter("navigation.move_distance") == config.movement.move_distance


def test_load_without_overrides_matches_defaults():
    assert config_from_parameters(Node("n")) == default_config()


def test_load_fails_when_already_declared():
    node = Node("n")
    node.declare_parameter("simulation_mode", True)
    with pytest.raises(ConfigError):
        NavigationConfig().load_from_parameters(node)


def test_load_rejects_null_node():
    with pytest.raises(ConfigError):
        NavigationConfig().load_from_parameters(None)


def test_config_from_parameters_rejects_invalid_values():
    node = Node("n", parameters={"navigation.linear_speed": 50.0})
    with pytest.raises(ConfigError, match="Invalid navigation configuration"):
        config_from_parameters(node)


def test_try_config_reports_invalid():
    config, ok = try_config_from_parameters(Node("n", parameters={"navigation.move_distance": -2.0}))
    assert ok is False
    assert config.movement.move_distance == -2.0


def test_try_config_reports_load_failure():
    node = Node("n")
    node.declare_parameter("navigation.linear_speed", 2.0)
    _, ok = try_config_from_parameters(node)
    assert ok is False


def test_try_config_success():
    config, ok = try_config_from_parameters(Node("n"))
    assert ok is True
    assert config == default_config()


def test_mistyped_parameter_fails():
    node = Node("n", parameters={"navigation.cmd_vel_topic": 5})
    _, ok = try_config_from_parameters(node)
    assert ok is False


def test_log_configuration(caplog):
    caplog.set_level(logging.INFO, logger="dirac_nav.config")
    default_config().log_configuration()
    assert "=== Navigation Configuration ===" in caplog.text
    assert "base_topic: cmd_vel" in caplog.text
    assert "simulation_mode: true" in caplog.text