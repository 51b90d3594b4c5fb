from __future__ import annotations
from .base import Conductor


class Load(Conductor):
    """
    Conductor that is powered when its current exceeds a threshold.

    Scene objects (doors, lamps, ...) subclass it and override ``on_powered``;
    ``update`` is meant to be polled by the surrounding frame loop.

    Attributes:
        threshold: Current the load must exceed to function (default: 0).
    """

    def __init__(self, resistance: float = 0.0, threshold: float = 0.0,
                 name: str = "") -> None:
        super().__init__(resistance=resistance, name=name)
        self.threshold = float(threshold)

    @property
    def is_powered(self) -> bool:
        return self.current > self.threshold

    def on_powered(self) -> None:
        """Hook run by ``update`` while the load is powered."""

    def update(self) -> bool:
        """
        Poll the current and run ``on_powered`` when the load is powered.

        Returns:
            True if the hook ran.
        """
        if not self.is_powered:
            return False
        self.on_powered()
        return True


class OverloadLoad(Load):
    """
    Load with an upper current limit as well as a lower one.

    Above ``overload_current`` the load refuses to work.
    """

    def __init__(self, resistance: float = 0.0, threshold: float = 0.0,
                 overload_current: float = float("inf"), name: str = "") -> None:
        if overload_current < threshold:
            raise ValueError("overload_current must not be below threshold.")
        super().__init__(resistance=resistance, threshold=threshold, name=name)
        self.overload_current = float(overload_current)

    @property
    def is_overloaded(self) -> bool:
        return self.current > self.overload_current

    @property
    def is_powered(self) -> bool:
        return super().is_powered and not self.is_overloaded
