from .linear import LinearSolverConfig, solve_linear  # noqa: F401
