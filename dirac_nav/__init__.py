"""Discrete grid navigation for multi-agent robots on an in-process message bus."""

__version__ = "0.1.0"

__all__ = [
    "config",
    "controller",
    "controller_node",
    "factory",
    "grid_pose",
    "messages",
    "node",
    "publishers",
    "strategies",
]