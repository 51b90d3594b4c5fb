from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Tuple
import logging
import numpy as np
from .components.switch import Switch
from .errors import ConfigurationError
from .network.branch import Branch
from .network.cycle import Cycle, CycleEquation, OpenPath
from .network.node import Node
from .solver.linear import LinearSolverConfig, solve_linear

Array = np.ndarray

logger = logging.getLogger(__name__)


@dataclass
class CircuitSolution:
    """
    Snapshot of one successful recalculation.

    Attributes:
        branches: Solved branches, in matrix column order.
        values: Signed solution of the linear system (before direction fixes).
        matrix: Assembled coefficient matrix (rows = selected equations).
        rhs: Assembled right-hand side.
        n_cycle_equations: Number of leading rows that come from cycles.
    """
    branches: List[Branch]
    values: Array
    matrix: Array
    rhs: Array
    n_cycle_equations: int

    @property
    def currents(self) -> Dict[Branch, float]:
        """Stored (non-negative) current of every solved branch."""
        return {branch: float(abs(x)) for branch, x in zip(self.branches, self.values)}

    @property
    def reversed_branches(self) -> List[Branch]:
        """Branches whose direction was flipped by this pass."""
        return [branch for branch, x in zip(self.branches, self.values) if x < 0]

    def value(self, branch: Branch) -> float:
        for candidate, x in zip(self.branches, self.values):
            if candidate is branch:
                return float(x)
        raise KeyError(f"Branch {branch!r} was not part of this solution.")


@dataclass
class Circuit:
    """
    DC circuit solved with Kirchhoff's voltage and current laws.

    The circuit borrows every cycle and node of the scene. ``recalculate``
    gathers their equations, keeps ceil(n/2) cycle equations and floor(n/2)
    node equations for the n distinct closed branches, solves the square
    system and writes the currents back to the branches. Nothing is written
    unless the whole pass succeeds.

    Attributes:
        cycles: All cycles (meshes) of the circuit, in evaluation order.
        nodes: All nodes (junctions) of the circuit, in evaluation order.
        solver_config: Settings forwarded to ``solve_linear``.
    """

    cycles: List[Cycle] = field(default_factory=list)
    nodes: List[Node] = field(default_factory=list)
    solver_config: LinearSolverConfig = field(default_factory=LinearSolverConfig)

    def add_cycle(self, cycle: Cycle) -> None:
        if any(c is cycle for c in self.cycles):
            raise ValueError(f"Cycle '{cycle.name}' already exists.")
        self.cycles.append(cycle)

    def add_node(self, node: Node) -> None:
        if any(n is node for n in self.nodes):
            raise ValueError(f"Node '{node.name}' already exists.")
        self.nodes.append(node)

    def watch(self, switch: Switch) -> None:
        """Recalculate the circuit every time ``switch`` is flipped."""
        switch.add_listener(self.recalculate)

    # ------------------------------------------------------------------
    # Equation gathering
    # ------------------------------------------------------------------

    def _cycle_equations(self) -> List[CycleEquation]:
        equations: List[CycleEquation] = []
        for cycle in self.cycles:
            result = cycle.equation()
            if isinstance(result, OpenPath):
                logger.debug("Cycle '%s' skipped: branch %r is open.", cycle.name, result.branch)
                continue
            equations.append(result)
        return equations

    @staticmethod
    def _collect_branches(coefficient_maps: List[Dict[Branch, float]]
                          ) -> Tuple[List[Branch], List[Branch]]:
        """
        Distinct branches referenced by the equations, in discovery order.

        Returns:
            Tuple containing:
            - closed branches (the unknowns, matrix column order)
            - open branches met on the way (to be forced to zero current)
        """
        unknowns: List[Branch] = []
        open_branches: List[Branch] = []
        seen: set[int] = set()
        for coefficients in coefficient_maps:
            for branch in coefficients:
                if id(branch) in seen:
                    continue
                seen.add(id(branch))
                if branch.is_open:
                    open_branches.append(branch)
                else:
                    unknowns.append(branch)
        return unknowns, open_branches

    # ------------------------------------------------------------------
    # Solution
    # ------------------------------------------------------------------

    def recalculate(self) -> CircuitSolution | None:
        """
        Solve the circuit for the current topology and update every branch.

        Cycles that currently run through an open branch are skipped for this
        pass. Each cycle row encodes sum(R_k * I_k) + V = 0, with the signed
        resistances and voltage total produced by ``Cycle.equation``; each node
        row encodes sum(+-I_k) = 0. A negative solution means the current
        flows against the branch's stored direction: the branch is reversed
        and the magnitude is stored.

        Returns:
            CircuitSolution for the pass, or None if every cycle is open (in
            which case nothing is modified).

        Raises:
            ConfigurationError: no cycles, not enough equations of either
                kind, or a singular system. State is left untouched.
        """
        if not self.cycles:
            raise ConfigurationError("Circuit has no cycles; currents cannot be calculated.")

        cycle_equations = self._cycle_equations()
        if not cycle_equations:
            logger.debug("Every cycle is open; recalculation skipped.")
            return None
        node_equations = [node.equation() for node in self.nodes]

        unknowns, open_branches = self._collect_branches(
            [eq.coefficients for eq in cycle_equations] + node_equations
        )
        n = len(unknowns)
        n_cycles = (n + 1) // 2
        n_nodes = n // 2
        if len(cycle_equations) < n_cycles:
            raise ConfigurationError(
                f"{n} branch currents need {n_cycles} cycle equations, "
                f"only {len(cycle_equations)} available."
            )
        if len(node_equations) < n_nodes:
            raise ConfigurationError(
                f"{n} branch currents need {n_nodes} node equations, "
                f"only {len(node_equations)} available."
            )

        column = {id(branch): j for j, branch in enumerate(unknowns)}
        A = np.zeros((n, n))
        b = np.zeros(n)
        for i, eq in enumerate(cycle_equations[:n_cycles]):
            for branch, coefficient in eq.coefficients.items():
                j = column.get(id(branch))
                if j is not None:
                    A[i, j] = coefficient
            b[i] = -eq.voltage
        for k, coefficients in enumerate(node_equations[:n_nodes]):
            i = n_cycles + k
            for branch, coefficient in coefficients.items():
                j = column.get(id(branch))
                if j is not None:
                    A[i, j] = coefficient
        logger.debug("Assembled %dx%d system (%d cycle rows, %d node rows).",
                     n, n, n_cycles, n_nodes)

        x = solve_linear(A, b, self.solver_config)

        # commit: nothing above this line touches branch state. Every current
        # is written before any observer runs.
        for branch in open_branches:
            branch.store_current(0.0)
        for branch, value in zip(unknowns, x):
            if value < 0:
                branch.reverse()
            branch.store_current(abs(float(value)))
        for branch in open_branches + unknowns:
            branch.notify()

        solution = CircuitSolution(
            branches=unknowns,
            values=x,
            matrix=A,
            rhs=b,
            n_cycle_equations=n_cycles,
        )
        logger.info("Recalculated %d branch currents (%d reversed).",
                    n, len(solution.reversed_branches))
        return solution
