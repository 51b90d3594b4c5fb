from __future__ import annotations
from .base import Conductor, Direction


class Source(Conductor):
    """
    Ideal DC voltage source (battery).

    The polarity is the direction through the source from its negative to its
    positive terminal. A cycle walking through the source in that direction
    gains ``voltage``; walking against it loses ``voltage``. The source's own
    resistance never enters the cycle's resistance terms.

    Attributes:
        name: Optional label.
    """

    def __init__(self, voltage: float, polarity: Direction = Direction.FORWARD,
                 resistance: float = 0.0, name: str = "") -> None:
        if polarity is Direction.OPEN:
            raise ValueError("Source polarity must be FORWARD or BACKWARD.")
        super().__init__(resistance=resistance, name=name)
        self._voltage = float(voltage)
        self._polarity = polarity

    @property
    def voltage(self) -> float:
        return self._voltage

    @property
    def polarity(self) -> Direction:
        return self._polarity

    def __repr__(self) -> str:
        label = f"'{self.name}', " if self.name else ""
        return (f"Source({label}V={self._voltage:g}, {self._polarity.value}, "
                f"I={self.current:g})")
