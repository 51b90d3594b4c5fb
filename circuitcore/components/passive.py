from __future__ import annotations
from .base import Conductor


class Wire(Conductor):
    """Ideal or lossy interconnect; resistance defaults to zero."""

    def __init__(self, resistance: float = 0.0, name: str = "") -> None:
        super().__init__(resistance=resistance, name=name)


class Resistor(Conductor):
    """Lumped resistive element."""

    def __init__(self, resistance: float, name: str = "") -> None:
        super().__init__(resistance=resistance, name=name)
