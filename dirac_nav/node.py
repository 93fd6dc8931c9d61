"""In-process node runtime: parameters, topics and timers on a node clock."""

from __future__ import annotations

import logging
import math
import os
import re
import time
from collections import defaultdict
from typing import Any, Callable, Mapping

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_SPIN_STEP = 0.01

_logger = logging.getLogger(__name__)


class ParameterError(Exception):
    """Raised for undeclared, re-declared or mistyped parameters."""


class MessageBus:
    """Delivers messages synchronously to the subscribers of a topic."""

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Callable[[Any], None]]] = defaultdict(list)

    def publish(self, topic: str, message: Any) -> None:
        for callback in list(self._subscribers.get(topic, ())):
            callback(message)

    def subscribe(self, topic: str, callback: Callable[[Any], None]) -> Callable[[], None]:
        """Register a callback; returns a function that removes it again."""
        self._subscribers[topic].append(callback)

        def unsubscribe() -> None:
            try:
                self._subscribers[topic].remove(callback)
            except ValueError:
                pass

        return unsubscribe


class Publisher:
    """Publishes messages on one topic of a bus."""

    def __init__(self, bus: MessageBus, topic: str, qos_depth: int = 10) -> None:
        self.bus = bus
        self.topic = topic
        self.qos_depth = qos_depth

    def publish(self, message: Any) -> None:
        self.bus.publish(self.topic, message)


class Timer:
    """A repeating timer driven by a node's clock."""

    def __init__(self, period: float, callback: Callable[[], None], start: float) -> None:
        if period < 0:
            raise ValueError(f"timer period must not be negative: {period}")
        self.period = period
        self.callback = callback
        self.cancelled = False
        self._due = start + period

    def cancel(self) -> None:
        self.cancelled = True


def _coerce(name: str, value: Any, default: Any) -> Any:
    if default is None:
        return value
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ParameterError(f"parameter '{name}' expects a bool, got {value!r}")
        return value
    if isinstance(default, float):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ParameterError(f"parameter '{name}' expects a double, got {value!r}")
        return float(value)
    if isinstance(default, int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ParameterError(f"parameter '{name}' expects an integer, got {value!r}")
        return value
    if isinstance(default, str):
        if not isinstance(value, str):
            raise ParameterError(f"parameter '{name}' expects a string, got {value!r}")
        return value
    return value


class Node:
    """A named participant on a message bus with parameters and timers."""

    def __init__(
        self,
        name: str,
        bus: MessageBus | None = None,
        parameters: Mapping[str, Any] | None = None,
    ) -> None:
        self.name = name
        self.bus = bus if bus is not None else MessageBus()
        self.logger = logging.getLogger(f"dirac_nav.{name}")
        self._overrides = dict(parameters or {})
        self._parameters: dict[str, Any] = {}
        self._timers: list[Timer] = []
        self._now = 0.0

    def declare_parameter(self, name: str, default: Any) -> Any:
        """Declare a parameter; an override given at construction wins over the default."""
        if name in self._parameters:
            raise ParameterError(f"parameter '{name}' has already been declared")
        value = _coerce(name, self._overrides.get(name, default), default)
        self._parameters[name] = value
        return value

    def get_parameter(self, name: str) -> Any:
        try:
            return self._parameters[name]
        except KeyError:
            raise ParameterError(f"parameter '{name}' has not been declared") from None

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    def create_publisher(self, topic: str, qos_depth: int) -> Publisher:
        return Publisher(self.bus, topic, qos_depth)

    def create_subscription(
        self, topic: str, qos_depth: int, callback: Callable[[Any], None]
    ) -> Callable[[], None]:
        return self.bus.subscribe(topic, callback)

    def create_timer(self, period: float, callback: Callable[[], None]) -> Timer:
        timer = Timer(period, callback, self._now)
        self._timers.append(timer)
        return timer

    def now(self) -> float:
        """Current node time in seconds."""
        return self._now

    def spin_for(self, seconds: float) -> None:
        """Advance the node clock by ``seconds``, firing timers as they fall due."""
        if seconds < 0:
            raise ValueError(f"cannot spin for a negative duration: {seconds}")
        end = self._now + seconds
        while True:
            self._timers = [t for t in self._timers if not t.cancelled]
            pending = [t for t in self._timers if t._due <= end]
            if not pending:
                break
            timer = min(pending, key=lambda t: t._due)
            self._now = max(self._now, timer._due)
            if timer.period > 0:
                timer._due = self._now + timer.period
            else:
                timer._due = math.nextafter(end, math.inf)
            timer.callback()
        self._now = end

    def spin(self) -> None:
        """Run timers against wall-clock time until interrupted."""
        last = time.monotonic()
        try:
            while True:
                time.sleep(_SPIN_STEP)
                current = time.monotonic()
                self.spin_for(current - last)
                last = current
        except KeyboardInterrupt:
            self.logger.info("Shutting down node '%s'", self.name)


def agent_id_from_environment(environ: Mapping[str, str] | None = None) -> int:
    """Read the agent id from AGENT_ID, falling back to 1 when absent or invalid."""
    env = os.environ if environ is None else environ
    raw = env.get("AGENT_ID")
    if raw is None:
        return 1
    match = _LEADING_INT.match(raw)
    if match:
        value = int(match.group(1))
        if _INT32_MIN <= value <= _INT32_MAX:
            return value
    _logger.warning("Invalid AGENT_ID environment variable, using default: 1")
    return 1