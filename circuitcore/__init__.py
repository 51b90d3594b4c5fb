"""
Top-level namespace for circuitcore.

A small DC circuit solver for hand-authored scenes: branches of conductors are
joined by nodes and closed by cycles, and ``Circuit.recalculate`` solves the
Kirchhoff equations for the current through every branch.
"""

import logging

from .errors import CircuitError, ConfigurationError  # noqa: F401
from .components import (  # noqa: F401
    Conductor,
    Direction,
    Wire,
    Resistor,
    Source,
    Load,
    OverloadLoad,
    Switch,
)
from .network import Branch, DirectedBranch, Node, Cycle, CycleEquation, OpenPath  # noqa: F401
from .solver import LinearSolverConfig, solve_linear  # noqa: F401
from .circuit import Circuit, CircuitSolution  # noqa: F401
from .logging_config import setup_logging  # noqa: F401

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "CircuitError",
    "ConfigurationError",
    "Conductor",
    "Direction",
    "Wire",
    "Resistor",
    "Source",
    "Load",
    "OverloadLoad",
    "Switch",
    "Branch",
    "DirectedBranch",
    "Node",
    "Cycle",
    "CycleEquation",
    "OpenPath",
    "LinearSolverConfig",
    "solve_linear",
    "Circuit",
    "CircuitSolution",
    "setup_logging",
]
