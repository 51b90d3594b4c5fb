from __future__ import annotations
import logging
from typing import Dict, Iterable, List
from ..errors import ConfigurationError
from .branch import Branch

logger = logging.getLogger(__name__)


class Node:
    """
    Junction of branches, source of one Kirchhoff current-law equation.

    Incoming branches contribute +1, outgoing branches -1. A branch belongs to
    at most one of the two sets.

    Attributes:
        name: Optional label used in logs.
    """

    def __init__(self, incoming: Iterable[Branch] = (), outgoing: Iterable[Branch] = (),
                 name: str = "") -> None:
        self.name = name
        self._incoming: List[Branch] = []
        self._outgoing: List[Branch] = []
        for branch in incoming:
            self._attach(self._incoming, branch)
        for branch in outgoing:
            self._attach(self._outgoing, branch)

    def _attach(self, target: List[Branch], branch: Branch) -> None:
        if branch in self:
            raise ConfigurationError(
                f"Branch {branch!r} is listed more than once in node '{self.name}'."
            )
        target.append(branch)

    @property
    def incoming(self) -> tuple[Branch, ...]:
        return tuple(self._incoming)

    @property
    def outgoing(self) -> tuple[Branch, ...]:
        return tuple(self._outgoing)

    def __contains__(self, branch: Branch) -> bool:
        return any(b is branch for b in self._incoming) or any(b is branch for b in self._outgoing)

    def equation(self) -> Dict[Branch, float]:
        """
        Current-law coefficients for the non-open branches of this node.

        Returns:
            Mapping branch -> +1.0 (incoming) or -1.0 (outgoing). OPEN branches
            are omitted, not zeroed.
        """
        equation: Dict[Branch, float] = {}
        for branch in self._incoming:
            if not branch.is_open:
                equation[branch] = 1.0
        for branch in self._outgoing:
            if not branch.is_open:
                equation[branch] = -1.0
        return equation

    def move_to_other_set(self, branch: Branch) -> None:
        """
        Move ``branch`` from incoming to outgoing or vice versa.

        A branch that is in neither set is reported with a warning and left
        alone.
        """
        if any(b is branch for b in self._incoming):
            self._incoming = [b for b in self._incoming if b is not branch]
            self._outgoing.append(branch)
        elif any(b is branch for b in self._outgoing):
            self._outgoing = [b for b in self._outgoing if b is not branch]
            self._incoming.append(branch)
        else:
            logger.warning("Branch %r does not belong to node '%s'; nothing moved.",
                           branch, self.name)

    def __repr__(self) -> str:
        return (f"Node('{self.name}', {len(self._incoming)} in, "
                f"{len(self._outgoing)} out)")
