from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple
from ..components.base import Conductor, Direction
from ..components.sources import Source


class Branch:
    """
    Ordered run of conductors that share one current.

    A branch does not own its conductors; it only writes the solved current to
    them. Branches compare and hash by identity, so two branches built from the
    same conductors are still two distinct unknowns of the linear system.

    Invariant: a branch whose direction is OPEN carries zero current.

    Attributes:
        name: Optional label used in logs and reprs.
    """

    def __init__(self, conductors: Iterable[Conductor] = (),
                 direction: Direction = Direction.FORWARD, name: str = "") -> None:
        self.name = name
        self._conductors: List[Conductor] = list(conductors)
        self._direction = direction
        self._current = 0.0

    @property
    def conductors(self) -> Tuple[Conductor, ...]:
        return tuple(self._conductors)

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def is_open(self) -> bool:
        return self._direction is Direction.OPEN

    @property
    def current(self) -> float:
        return self._current

    @property
    def sources(self) -> Tuple[Source, ...]:
        return tuple(c for c in self._conductors if isinstance(c, Source))

    @property
    def resistance(self) -> float:
        """Series resistance of the non-source conductors."""
        return sum(c.resistance for c in self._conductors if not isinstance(c, Source))

    def set_direction(self, direction: Direction) -> None:
        self._direction = direction
        if direction is Direction.OPEN:
            self.set_current(0.0)

    def reverse(self) -> None:
        """Swap FORWARD and BACKWARD; an OPEN branch stays OPEN."""
        self._direction = self._direction.reversed()

    def set_current(self, value: float) -> None:
        """
        Store ``value`` and broadcast it to every conductor of the branch.
        """
        self.store_current(value)
        self.notify()

    def store_current(self, value: float) -> None:
        """Write ``value`` to the branch and its conductors, without notifications."""
        self._current = float(value)
        for conductor in self._conductors:
            conductor.store_current(self._current)

    def notify(self) -> None:
        """Run the observers of every conductor, in conductor order."""
        for conductor in self._conductors:
            conductor.notify()

    def __repr__(self) -> str:
        label = f"'{self.name}', " if self.name else ""
        return (f"Branch({label}{len(self._conductors)} conductors, "
                f"{self._direction.value}, I={self._current:g})")


@dataclass(frozen=True)
class DirectedBranch:
    """
    A branch together with the direction a cycle walks through it.

    Attributes:
        branch: The underlying branch.
        active_direction: Traversal direction chosen when the cycle was authored.
    """
    branch: Branch
    active_direction: Direction

    def matches_stored_direction(self) -> bool:
        # read on every call: the branch direction changes between passes
        return self.active_direction is self.branch.direction
