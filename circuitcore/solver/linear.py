from __future__ import annotations
from dataclasses import dataclass
import numpy as np
import scipy.linalg
from ..errors import ConfigurationError

Array = np.ndarray


@dataclass
class LinearSolverConfig:
    """
    Configuration parameters for the dense linear solve.

    Attributes:
        rcond: Smallest accepted reciprocal condition number; matrices below it
            are treated as singular (default: 1e-12).
        check_finite: Reject matrices or right-hand sides with inf/NaN entries
            (default: True).
    """
    rcond: float = 1e-12
    check_finite: bool = True


def solve_linear(A: Array, b: Array, cfg: LinearSolverConfig | None = None) -> Array:
    """
    Solve the square system A x = b over the reals.

    The matrix is checked before solving: it must be square, match the length
    of ``b`` and be well conditioned. Exactly singular systems (for instance a
    cycle whose only resistance is zero) and numerically singular ones both
    raise, so callers never receive a meaningless solution.

    Args:
        A: Coefficient matrix, shape (n, n).
        b: Right-hand side, shape (n,).
        cfg: LinearSolverConfig; defaults are used when omitted.

    Returns:
        Solution vector x, shape (n,).

    Raises:
        ConfigurationError: malformed, singular or ill-conditioned system.
    """
    cfg = cfg or LinearSolverConfig()
    A = np.asarray(A, dtype=float)
    b = np.asarray(b, dtype=float)

    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ConfigurationError(f"Coefficient matrix must be square, got shape {A.shape}.")
    if b.shape != (A.shape[0],):
        raise ConfigurationError(
            f"Right-hand side has shape {b.shape}, expected ({A.shape[0]},)."
        )
    if A.shape[0] == 0:
        return np.empty(0)
    if cfg.check_finite and not (np.all(np.isfinite(A)) and np.all(np.isfinite(b))):
        raise ConfigurationError("Linear system contains non-finite entries.")

    # reciprocal condition number in the 2-norm
    s = np.linalg.svd(A, compute_uv=False)
    rcond = s[-1] / s[0] if s[0] > 0 else 0.0
    if rcond < cfg.rcond:
        raise ConfigurationError(
            f"Linear system is singular (reciprocal condition number {rcond:.3g})."
        )

    try:
        x = scipy.linalg.solve(A, b, check_finite=False)
    except (np.linalg.LinAlgError, ValueError) as exc:
        raise ConfigurationError(f"Linear system could not be solved: {exc}") from exc

    if not np.all(np.isfinite(x)):
        raise ConfigurationError("Linear solve produced non-finite currents.")
    return x
