# dirac-nav

Discrete, grid-based navigation for one or more agents. An agent receives a
direction code and carries it out as a timed series of velocity commands
(`Twist` messages). A companion node watches the agent's continuous pose and
reports it as a grid cell, with the heading snapped to a quarter turn.

Everything runs on a small in-process runtime (`dirac_nav.node`): a
`MessageBus` that delivers messages synchronously to subscribers, and `Node`
objects with parameters and timers driven by the node's own clock.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Direction codes

| Code | `MovementDirection` | What the agent does                                 |
|------|---------------------|-----------------------------------------------------|
| 1    | `FORWARD`           | drive forward one move distance, then stop          |
| 2    | `BACKWARD`          | drive backward one move distance, then stop         |
| 3    | `LEFT`              | turn left, drive forward, turn right, then stop     |
| 4    | `RIGHT`             | turn right, drive forward, turn left, then stop     |

`create_strategy` returns `None` for any other code, and
`NavigationController.execute_command` logs a warning and does nothing.

Each phase lasts `move_distance / linear_speed` or
`turn_angle / angular_speed` seconds, cut down to whole milliseconds. Phases
are chained through one-shot timers, so they only advance while the node's
clock advances (`Node.spin_for` or `Node.spin`). The last step publishes an
all-zero `Twist`.

## Using the library

Driving an agent:

```python
from dirac_nav.controller import NavigationController
from dirac_nav.node import MessageBus, Node

bus = MessageBus()
twists = []
bus.subscribe("/turtle1/cmd_vel", twists.append)

node = Node("demo", bus)
controller = NavigationController(node)
controller.execute_command(1, 1)  # agent 1, forward
node.spin_for(1.0)                # 1.0 m at 2.0 m/s ends after 0.5 s

# twists: a Twist with linear.x == 2.0, then an all-zero Twist()
```

Turning poses into grid poses:

```python
from dirac_nav.grid_pose import GridPosePublisher
from dirac_nav.messages import Pose
from dirac_nav.node import MessageBus

bus = MessageBus()
received = []
bus.subscribe("/robot2/location", received.append)

node = GridPosePublisher(bus, environ={"AGENT_ID": "2"})
node.spin_for(0.1)
bus.publish("/turtle2/pose", Pose(x=5.6, y=2.0, theta=1.6))

# received[0]: GridPose(x=5, y=1, theta=π/2, grid_size=10.0, cell_size=1.1)
```

Direction codes and topic names:

```python
from dirac_nav.factory import MovementDirection, is_valid_direction, to_movement_direction
from dirac_nav.publishers import TopicConfig

assert is_valid_direction(3)
assert to_movement_direction(4) is MovementDirection.RIGHT  # ValueError for unknown codes
print(TopicConfig().topic_name(5))                           # /turtle5/cmd_vel
print(TopicConfig(simulation_mode=False).topic_name(5))      # /robot5/cmd_vel
```

### Modules

- `dirac_nav.messages`: `Vector3`, `Twist`, `AgentCommand`, `GridPose`, `Pose`
  (frozen dataclasses).
- `dirac_nav.node`: `MessageBus` (`publish`, `subscribe`, which returns an
  unsubscribe function), `Publisher`, `Timer` (`cancel`), `Node`
  (`declare_parameter`, `get_parameter`, `has_parameter`, `create_publisher`,
  `create_subscription`, `create_timer`, `now`, `spin_for`, `spin`),
  `ParameterError`, and `agent_id_from_environment`.
- `dirac_nav.strategies`: `MovementParameters`, `MovementContext`, and the
  strategies `ForwardMovement`, `BackwardMovement`, `LeftMovement`,
  `RightMovement`, each started with `execute(context)`.
- `dirac_nav.factory`: `MovementDirection`, `create_strategy`,
  `is_valid_direction`, `to_movement_direction`.
- `dirac_nav.publishers`: `TopicConfig` and `PublisherManager`, which keeps one
  velocity publisher per agent (`get_publisher`, `update_config`,
  `remove_publisher`, `clear_all`, `len()` and `in`).
- `dirac_nav.config`: `ControllerConfig`, `NavigationConfig` (`load_from_parameters`,
  `is_valid`, `log_configuration`), `ConfigError`, `default_config`,
  `config_from_parameters` and `try_config_from_parameters`.
- `dirac_nav.controller`: `NavigationController` (`execute_command`,
  `initialize_from_parameters`, `update_configuration`,
  `set_movement_parameters`, `set_cmd_vel_topic`, `set_simulation_mode`, and
  the `config` and `publishers` attributes).
- `dirac_nav.grid_pose`: `GridPosePublisher` (`grid_coordinate`,
  `quantize_orientation`, `on_pose`) and `main`.
- `dirac_nav.controller_node`: `DiscreteNavigationControllerNode`
  (`initialize_navigation`, `on_command`) and `main`.

## Agent id

Both nodes take their agent from the `AGENT_ID` environment variable, or from
the `environ` mapping passed to them. A leading integer is used, so `"3abc"`
gives 3. If the variable is missing, has no leading integer, or is outside the
32-bit signed range, agent `1` is used.

## Configuration parameters

Parameter values are given as the `parameters` mapping when a node is built.
They must match the default's type, or `ParameterError` is raised.

| Parameter                      | Default   | Valid range |
|--------------------------------|-----------|-------------|
| `navigation.enable_controller` | `true`    |             |
| `navigation.linear_speed`      | `2.0`     | `(0, 10]`   |
| `navigation.angular_speed`     | `1.57`    | `(0, 10]`   |
| `navigation.move_distance`     | `1.0`     | `(0, 10]`   |
| `navigation.turn_angle`        | `1.57`    | `(0, 2π]`   |
| `navigation.cmd_vel_topic`     | `cmd_vel` | non-empty   |
| `simulation_mode`              | `true`    |             |
| `grid_size` (grid pose node)   | `10.0`    |             |
| `world_size` (grid pose node)  | `11.0`    |             |

`NavigationController` replaces an invalid configuration given to its
constructor with the defaults. `update_configuration` and
`initialize_from_parameters` raise `ConfigError` and keep the current
configuration. `set_movement_parameters` also resets `turn_angle` to π/2.

`DiscreteNavigationControllerNode` declares `simulation_mode` itself. When its
controller then loads the navigation parameters from the same node, loading
fails because that parameter is already declared. The node logs a warning and
runs on the default configuration. Its velocity commands therefore go to
`/turtle<N>/cmd_vel` whatever values were passed.

## Grid poses

`GridPosePublisher` listens on `/turtle<N>/pose` and publishes on
`/robot<N>/location`. It publishes at most once every 0.1 s of node time, and
only after the clock has moved at least 0.1 s since the node started or since
the last publish. The cell size is `world_size / grid_size`, with the origin
at `(0, 0)`. The cell index is `floor(coordinate / cell_size)`. The heading
becomes `fmod(theta + 2π, 2π)`, rounded to the nearest multiple of π/2 with
halves rounded away from zero.

## Commands

```
AGENT_ID=2 discrete-navigation-controller
AGENT_ID=2 grid-pose-publisher
```

Each command builds its node on a fresh in-process bus with no parameters,
advances the node clock in real time, and stops on Ctrl-C. Command-line
arguments are ignored.

## What this package does not do

There is no network transport. Messages reach only subscribers on the same
`MessageBus` in the same process. The two commands cannot talk to each other,
to a simulator or to a robot. Run on their own, they wait and receive nothing.
To do useful work, use the classes as a library and feed messages in through a
shared `MessageBus`. Parameters cannot be set from the command line or from
files.