"""Quality metrics for enclosing ball evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ._ball import EnclosingBall
    from ._generators import SupportBallGenerator


def _distances(points, ball: "EnclosingBall") -> np.ndarray:
    coords = np.asarray(points, dtype=float)
    return np.linalg.norm(coords - np.asarray(ball.center), axis=1)


def compute_coverage(points, ball: "EnclosingBall", margin: float = 0.0) -> float:
    """Compute fraction of points inside the ball enlarged by margin.

    Args:
        points: (N, D) array of points
        ball: Ball to check coverage

    Returns:
        Fraction of points covered (0.0 to 1.0)
    """
    if len(points) == 0 or ball.is_empty:
        return 0.0
    covered = _distances(points, ball) <= ball.radius + margin
    return float(covered.sum() / len(covered))


def compute_slack(points, ball: "EnclosingBall") -> float:
    """Largest distance from the center minus the radius.

    Zero or slightly negative for a correct enclosing ball; positive values
    measure how far the worst point sticks out.
    """
    if len(points) == 0 or ball.is_empty:
        return 0.0
    return float(_distances(points, ball).max() - ball.radius)


def support_on_boundary(ball: "EnclosingBall", margin: float = 1e-10) -> bool:
    """Check that every support point is within margin of the boundary."""
    if ball.is_empty:
        return True
    gaps = np.abs(_distances(list(ball.support), ball) - ball.radius)
    return bool(np.all(gaps <= margin))


def is_minimal(
    points,
    ball: "EnclosingBall",
    generator: "SupportBallGenerator",
    margin: float = 1e-10,
) -> bool:
    """Check that no support point can be dropped.

    Removing any single support point and rebuilding the ball on the rest
    must leave at least one input point outside. Radius and center alone
    cannot show this.
    """
    if ball.is_empty or len(points) == 0:
        return True
    for i in range(ball.support_size):
        reduced = generator.ball_on_support(
            [s for j, s in enumerate(ball.support) if j != i]
        )
        if reduced.is_empty:
            continue
        if compute_coverage(points, reduced, margin) >= 1.0:
            return False
    return True
