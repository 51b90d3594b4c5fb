from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Sequence, Tuple, Union
from ..components.base import Direction
from ..errors import ConfigurationError
from .branch import Branch, DirectedBranch


@dataclass(frozen=True, eq=False)
class CycleEquation:
    """
    Voltage-law equation produced by a closed cycle.

    Attributes:
        coefficients: Mapping branch -> signed resistance sum for that branch.
        voltage: Signed sum of the source voltages met along the cycle.
    """
    coefficients: Dict[Branch, float] = field(default_factory=dict)
    voltage: float = 0.0


@dataclass(frozen=True)
class OpenPath:
    """
    Outcome of a cycle that runs through an OPEN branch.

    The cycle has no equation for this pass and is tried again on the next one.

    Attributes:
        branch: First open branch found along the cycle.
    """
    branch: Branch


CycleResult = Union[CycleEquation, OpenPath]


class Cycle:
    """
    Closed walk through a sequence of branches (a mesh of the circuit).

    Each branch is paired with the direction the walk takes through it, so one
    cycle can span branches authored with different orientations.

    Attributes:
        name: Optional label used in logs.
    """

    def __init__(self, branches: Sequence[Branch], directions: Sequence[Direction],
                 name: str = "") -> None:
        if len(branches) != len(directions):
            raise ConfigurationError(
                f"Cycle '{name}' has {len(branches)} branches but "
                f"{len(directions)} traversal directions."
            )
        for direction in directions:
            if direction is Direction.OPEN:
                raise ConfigurationError(
                    f"Cycle '{name}' uses OPEN as a traversal direction."
                )
        self.name = name
        self._path: Tuple[DirectedBranch, ...] = tuple(
            DirectedBranch(branch, direction) for branch, direction in zip(branches, directions)
        )

    @property
    def path(self) -> Tuple[DirectedBranch, ...]:
        return self._path

    @property
    def branches(self) -> Tuple[Branch, ...]:
        return tuple(step.branch for step in self._path)

    def equation(self) -> CycleResult:
        """
        Build the voltage-law equation for the current topology.

        For every branch a single sign is chosen: its non-source resistances
        are subtracted when the walk follows the branch's stored direction and
        added otherwise. Each source adds its voltage to the cycle total when
        its polarity equals the walk direction, and subtracts it otherwise.

        Returns:
            ``CycleEquation`` with the coefficient map and voltage total, or
            ``OpenPath`` if any branch of the cycle is open.
        """
        coefficients: Dict[Branch, float] = {}
        voltage = 0.0
        for step in self._path:
            branch = step.branch
            if branch.is_open:
                return OpenPath(branch)

            sign = -1.0 if step.matches_stored_direction() else 1.0
            for source in branch.sources:
                if source.polarity is step.active_direction:
                    voltage += source.voltage
                else:
                    voltage -= source.voltage
            # a branch repeated within the cycle keeps its last contribution
            coefficients[branch] = sign * branch.resistance
        return CycleEquation(coefficients=coefficients, voltage=voltage)

    def __repr__(self) -> str:
        return f"Cycle('{self.name}', {len(self._path)} branches)"
