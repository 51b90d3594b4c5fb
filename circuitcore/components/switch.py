from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Callable, List
from .base import Direction
from .passive import Wire

if TYPE_CHECKING:
    from circuitcore.network.branch import Branch

logger = logging.getLogger(__name__)


class Switch(Wire):
    """
    Wire that opens or closes the branch it controls.

    The switch is normally one of the conductors of that branch, so it is
    created first and bound with ``attach`` once the branch exists.

    Closing sets the branch FORWARD (the next recalculation fixes the actual
    orientation); opening sets it OPEN, which zeroes its current at once.
    Listeners, typically ``Circuit.recalculate``, are called synchronously
    after every flip.
    """

    def __init__(self, closed: bool = True, resistance: float = 0.0,
                 name: str = "", branch: Branch | None = None) -> None:
        super().__init__(resistance=resistance, name=name)
        self._branch: Branch | None = None
        self._closed = closed
        self._listeners: List[Callable[[], object]] = []
        if branch is not None:
            self.attach(branch)

    @property
    def branch(self) -> Branch | None:
        return self._branch

    @property
    def closed(self) -> bool:
        return self._closed

    def attach(self, branch: Branch) -> None:
        """Bind the branch this switch opens and closes."""
        self._branch = branch

    def add_listener(self, listener: Callable[[], object]) -> None:
        """Register a zero-argument callable run after every flip."""
        self._listeners.append(listener)

    def flip(self, closed: bool) -> None:
        if self._branch is None:
            raise RuntimeError(f"Switch '{self.name}' is not attached to a branch.")
        self._closed = closed
        if closed:
            self._branch.set_direction(Direction.FORWARD)
        else:
            self._branch.set_direction(Direction.OPEN)
        logger.debug("Switch %r %s", self.name, "closed" if closed else "opened")
        for listener in list(self._listeners):
            listener()

    def toggle(self) -> None:
        self.flip(not self._closed)
