"""Vector norm helpers used by the generators, the ball type and the encloser."""

from __future__ import annotations

import numpy as np


def norm(x) -> float:
    """L2 (Euclidean) norm of a vector."""
    return float(np.linalg.norm(np.asarray(x, dtype=float)))


def norm_inf(x) -> float:
    """L-infinity norm: largest absolute component."""
    arr = np.abs(np.asarray(x, dtype=float))
    return float(arr.max()) if arr.size > 0 else 0.0


def norm_sq(x) -> float:
    """Squared L2 norm. Avoids the square root when only comparing lengths."""
    arr = np.asarray(x, dtype=float)
    return float(np.dot(arr, arr))


def distance(a, b) -> float:
    """Euclidean distance between two points."""
    return norm(np.asarray(a, dtype=float) - np.asarray(b, dtype=float))


def is_real_non_zero(value: float) -> bool:
    """True if value is finite and not zero."""
    return bool(np.isfinite(value)) and value != 0.0
