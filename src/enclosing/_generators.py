"""Balls on exact support sets.

A generator turns up to D+1 boundary points into the smallest ball having all
of them on its boundary. It is the only part of the encloser that knows the
dimension of the space.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from scipy.linalg import solve_triangular

from ._ball import EnclosingBall, empty_ball
from ._errors import DegenerateSupportError, SupportSizeError
from ._tolerance import Tolerance
from .utils._vectors import is_real_non_zero, norm, norm_sq


class SupportBallGenerator:
    """Computes the ball whose boundary passes through a support set.

    Support of size k (1 <= k <= D+1) spans an affine subspace of dimension
    k-1. The ball is centered in that subspace, equidistant from all support
    points. For k = D+1 this is the circumball; for k = 2 the diametral ball.

    Degeneracy is judged relative to the support extent: a point is rejected
    when its distance to the affine hull of the earlier points, divided by
    the longest edge from the first point, is within the tolerance.
    """

    def __init__(self, dimension: int, tolerance: Tolerance | None = None):
        if dimension < 1:
            raise ValueError(f"Dimension must be positive, got: {dimension}")
        self.dimension = dimension
        self.tolerance = tolerance or Tolerance()

    @property
    def max_support(self) -> int:
        return self.dimension + 1

    def ball_on_support(self, support: Sequence) -> EnclosingBall:
        """
        Create the ball with the given points on its boundary.

        Args:
            support: Up to dimension+1 points. They are kept by identity in
                the returned ball's support.

        Returns:
            The sentinel empty ball for no points, otherwise the ball through
            all support points

        Raises:
            SupportSizeError: More than dimension+1 points, or a point of the
                wrong dimension
            DegenerateSupportError: A point lies within tolerance of the affine
                hull of the points before it, so no unique ball exists
        """
        support = tuple(support)
        if len(support) > self.max_support:
            raise SupportSizeError(
                f"At most {self.max_support} support points in dimension "
                f"{self.dimension}, got {len(support)}"
            )
        if len(support) == 0:
            return empty_ball(self.dimension)

        pts = self._as_array(support)

        if len(support) == 1:
            return EnclosingBall(center=pts[0].copy(), radius=0.0, support=support)

        if len(support) == 2:
            center = 0.5 * (pts[0] + pts[1])
            radius = 0.5 * norm(pts[1] - pts[0])
            return EnclosingBall(center=center, radius=radius, support=support)

        center = self._circumcenter(pts)
        # Largest distance, so every support point is inside despite rounding
        radius = max(norm(p - center) for p in pts)
        return EnclosingBall(center=center, radius=radius, support=support)

    def _as_array(self, support: tuple) -> np.ndarray:
        rows = [np.asarray(p, dtype=float).reshape(-1) for p in support]
        for row in rows:
            if row.shape[0] != self.dimension:
                raise SupportSizeError(
                    f"Expected points of dimension {self.dimension}, "
                    f"got a point of dimension {row.shape[0]}"
                )
        return np.stack(rows)

    def _circumcenter(self, pts: np.ndarray) -> np.ndarray:
        # Relative coordinates keep the system well conditioned far from origin
        origin = pts[0]
        edges = pts[1:] - origin  # (k-1, D)

        extent = max(norm(e) for e in edges)
        if not is_real_non_zero(extent):
            raise DegenerateSupportError(f"Support points have no extent ({extent})")

        # edges.T = Q R; |R_ii| is the distance of point i to the affine hull
        # of the points before it
        q, r = np.linalg.qr(edges.T, mode="reduced")
        heights = np.abs(np.diag(r))
        for i, h in enumerate(heights):
            if self.tolerance.eq_zero(h / extent):
                raise DegenerateSupportError(
                    f"Support point {i + 1} is within {self.tolerance.epsilon} x {extent:.3e} "
                    f"of the span of the previous points (distance {h:.3e})"
                )

        # Center offset x = edges.T @ lam with (edges @ edges.T) lam = |edges|^2 / 2.
        # Substituting y = R lam gives R.T y = b and x = Q y.
        b = 0.5 * np.array([norm_sq(e) for e in edges])
        y = solve_triangular(r, b, trans="T", lower=False)
        center = origin + q @ y

        if not np.all(np.isfinite(center)):
            raise DegenerateSupportError(f"Non-finite circumcenter: {center}")
        return center


class DiskGenerator(SupportBallGenerator):
    """Disks in the plane, on up to 3 support points."""

    def __init__(self, tolerance: Tolerance | None = None):
        super().__init__(2, tolerance)


class SphereGenerator(SupportBallGenerator):
    """Spheres in 3D space, on up to 4 support points."""

    def __init__(self, tolerance: Tolerance | None = None):
        super().__init__(3, tolerance)


def generator_for_dimension(
    dimension: int, tolerance: Tolerance | None = None
) -> SupportBallGenerator:
    """Pick the generator matching a point dimension."""
    if dimension == 2:
        return DiskGenerator(tolerance)
    if dimension == 3:
        return SphereGenerator(tolerance)
    return SupportBallGenerator(dimension, tolerance)
