from __future__ import annotations
from enum import Enum
from typing import Callable, List


class Direction(Enum):
    """
    Orientation of a branch, or of a cycle's walk through a branch.

    FORWARD and BACKWARD are defined once for the whole circuit. OPEN marks a
    disconnected branch that carries no current and is left out of every
    equation.
    """
    FORWARD = "forward"
    BACKWARD = "backward"
    OPEN = "open"

    def reversed(self) -> Direction:
        if self is Direction.FORWARD:
            return Direction.BACKWARD
        if self is Direction.BACKWARD:
            return Direction.FORWARD
        return Direction.OPEN


CurrentObserver = Callable[["Conductor"], None]


class Conductor:
    """
    Current-carrying element with a constant resistance.

    The current is written only by the branch the conductor belongs to; scene
    code polls ``current`` (or subscribes to changes) to react to it.

    Attributes:
        name: Optional label used in logs and reprs.
    """

    def __init__(self, resistance: float = 0.0, name: str = "") -> None:
        if resistance < 0:
            raise ValueError("Conductor resistance must be non-negative.")
        self.name = name
        self._resistance = float(resistance)
        self._current = 0.0
        self._observers: List[CurrentObserver] = []

    @property
    def resistance(self) -> float:
        return self._resistance

    @property
    def current(self) -> float:
        return self._current

    def set_current(self, value: float) -> None:
        """
        Store ``value`` and notify observers in registration order.
        """
        self.store_current(value)
        self.notify()

    def store_current(self, value: float) -> None:
        """Store ``value`` without notifying observers."""
        self._current = float(value)

    def notify(self) -> None:
        for observer in list(self._observers):
            observer(self)

    def subscribe(self, observer: CurrentObserver) -> None:
        """Register a callback invoked with this conductor after every update."""
        self._observers.append(observer)

    def unsubscribe(self, observer: CurrentObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def __repr__(self) -> str:
        label = f"'{self.name}', " if self.name else ""
        return f"{type(self).__name__}({label}R={self._resistance:g}, I={self._current:g})"
