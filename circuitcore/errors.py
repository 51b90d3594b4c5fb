"""
Exception hierarchy shared by the circuit solver.
"""


class CircuitError(Exception):
    """Base class for every error raised by circuitcore."""


class ConfigurationError(CircuitError, ValueError):
    """
    Raised when the authored topology cannot be turned into a solvable system.

    Typical causes:
    - no cycle has been configured;
    - fewer usable cycle or node equations than distinct branches require;
    - a singular or ill-conditioned coefficient matrix;
    - malformed authoring (mismatched cycle lists, overlapping node sets).

    A recalculation that raises this error leaves every branch and conductor
    with its previously computed current.
    """
