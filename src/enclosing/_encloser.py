"""Minimum enclosing ball with Welzl's move-to-front algorithm.

Uses the pivoting variant from Gaertner's "Fast and Robust Smallest Enclosing
Balls": the outer loop repeatedly picks the point farthest from the current
ball and rebuilds the ball with that point forced onto the support, scanning
only a short list of "extreme" points. Welzl's recursion on the extreme list
is unrolled onto an explicit stack.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from loguru import logger
from scipy.spatial import ConvexHull, QhullError

from ._ball import EnclosingBall, empty_ball
from ._config import EncloserConfig
from ._errors import DegenerateSupportError, EnclosingBallError
from ._generators import SupportBallGenerator, generator_for_dimension
from ._tolerance import Tolerance
from .utils._vectors import distance, norm_inf

# Relative slack, in ulps, for distances compared against a computed radius
_ROUNDING_ULPS = 4.0


@dataclass
class _Frame:
    """One level of the move-to-front recursion."""

    limit: int  # scan extreme[0:limit]
    index: int  # next extreme position to test
    ball: EnclosingBall


class WelzlEncloser:
    """Computes minimum enclosing balls for any dimension the generator supports.

    The encloser holds no per-call state, so one instance can be shared.

    Usage:
        encloser = WelzlEncloser(Tolerance(1e-10), DiskGenerator())
        ball = encloser.enclose([(0, 0), (1, 0), (0, 1)])
    """

    def __init__(
        self,
        tolerance: Tolerance,
        generator: SupportBallGenerator,
        config: EncloserConfig | None = None,
    ):
        self.tolerance = tolerance
        self.generator = generator
        self.config = config or EncloserConfig(epsilon=tolerance.epsilon)

    def enclose(self, points: Sequence | None) -> EnclosingBall:
        """
        Compute the smallest ball enclosing all points.

        Args:
            points: Iterable of points of the generator's dimension. May be
                None or empty. The input is not modified.

        Returns:
            The minimum enclosing ball. Its support points are the objects
            yielded by iterating `points`. None or empty input gives the empty
            ball (negative radius).

            Iterating an (N, D) np.ndarray yields fresh row views, so for
            array input the support points compare equal to rows of the
            array but are not identical to anything the caller holds. Pass
            `list(array)` to keep identity.

        Raises:
            ValueError: Points have the wrong dimension or non-finite coordinates
            EnclosingBallError: The ball shrank between pivots by more than
                the tolerance, or no ball was found within max_pivots
        """
        if points is None:
            return self.generator.ball_on_support(())
        points = list(points)
        if not points:
            return self.generator.ball_on_support(())

        coords = np.asarray([np.asarray(p, dtype=float).reshape(-1) for p in points])
        if coords.ndim != 2 or coords.shape[1] != self.generator.dimension:
            raise ValueError(
                f"Expected points of dimension {self.generator.dimension}, "
                f"got shape {coords.shape}"
            )
        if not np.all(np.isfinite(coords)):
            raise ValueError("Point coordinates must be finite")

        candidates = self._select_candidates(coords)
        if len(candidates) < len(points):
            points = [points[i] for i in candidates]
            coords = coords[candidates]

        return self._pivoting_ball(points, coords)

    def _select_candidates(self, coords: np.ndarray) -> np.ndarray:
        n = len(coords)
        everything = np.arange(n)
        if not self.config.hull_prefilter or n < self.config.hull_prefilter_min_points:
            return everything
        if coords.shape[1] < 2:
            return everything

        try:
            hull = ConvexHull(coords)
        except (QhullError, ValueError):
            # Flat or otherwise degenerate input, enclose everything
            return everything

        vertices = np.sort(hull.vertices)
        logger.debug(f"Hull prefilter kept {len(vertices)} of {n} points")
        return vertices

    def _pivoting_ball(self, points: list, coords: np.ndarray) -> EnclosingBall:
        extreme = [0]
        ball = self._move_to_front_ball(points, coords, extreme, len(extreme), [])

        for n_pivots in range(self.config.max_pivots):
            sq_dists = np.sum((coords - ball.center) ** 2, axis=1)
            farthest = int(np.argmax(sq_dists))
            # Extreme points already sit on the boundary of the current ball
            if farthest in extreme or self._contains(ball, coords[farthest]):
                logger.debug(
                    f"Enclosed {len(points)} points after {n_pivots} pivots "
                    f"(radius={ball.radius:.6g}, support={ball.support_size})"
                )
                return ball

            saved = ball
            ball = self._move_to_front_ball(
                points, coords, extreme, len(extreme), [farthest]
            )

            slack = self._rounding_slack(saved)
            if ball.radius <= saved.radius + slack:
                if self.tolerance.lt(ball.radius, saved.radius - slack):
                    raise EnclosingBallError(
                        f"Ball shrank from {saved.radius} to {ball.radius} after "
                        f"pivoting on point {farthest}"
                    )
                # The pivot was outside by rounding only, the radius cannot grow
                logger.debug(f"Radius stopped growing after {n_pivots + 1} pivots")
                return ball if ball.radius >= saved.radius else saved

            # The new support is now at the front; points past it are stale
            extreme.insert(0, farthest)
            del extreme[ball.support_size :]

        raise EnclosingBallError(
            f"No enclosing ball after {self.config.max_pivots} pivots "
            f"(epsilon={self.tolerance.epsilon})"
        )

    def _move_to_front_ball(
        self,
        points: list,
        coords: np.ndarray,
        extreme: list[int],
        n_extreme: int,
        support: list[int],
    ) -> EnclosingBall:
        """Smallest ball enclosing extreme[0:n_extreme] with support on its boundary.

        Every point found outside the current ball is pushed onto the support
        and the prefix before it is solved again. Afterwards the point moves
        to the front of `extreme`.
        """
        max_support = self.generator.max_support
        stack = [_Frame(limit=n_extreme, index=0, ball=self._ball_on_support(points, support))]

        while True:
            frame = stack[-1]
            if frame.index < frame.limit and len(support) < max_support:
                i = extreme[frame.index]
                if i in support or self._contains(frame.ball, coords[i]):
                    frame.index += 1
                    continue
                support.append(i)
                stack.append(
                    _Frame(
                        limit=frame.index,
                        index=0,
                        ball=self._ball_on_support(points, support),
                    )
                )
                continue

            stack.pop()
            if not stack:
                return frame.ball

            parent = stack[-1]
            support.pop()
            extreme.insert(0, extreme.pop(parent.index))
            parent.ball = frame.ball
            parent.index += 1

    def _ball_on_support(self, points: list, support: list[int]) -> EnclosingBall:
        try:
            return self.generator.ball_on_support([points[i] for i in support])
        except DegenerateSupportError:
            reduced = self._reduced_ball(points, support)
            if reduced is None:
                raise
            logger.warning(
                f"Degenerate support of {len(support)} points reduced to "
                f"{reduced.support_size} (radius={reduced.radius:.6g})"
            )
            return reduced

    def _reduced_ball(
        self, points: list, support: list[int]
    ) -> EnclosingBall | None:
        """Smallest ball on a subset of the support that keeps its last point.

        The last support point is the one just found outside, so it stays on
        the boundary. The other support points only need to be contained.
        Among equal radii, subsets using earlier support points win.
        """
        forced = support[-1]
        others = support[:-1]
        best: EnclosingBall | None = None
        for size in range(len(others)):
            for subset in itertools.combinations(others, size):
                try:
                    ball = self.generator.ball_on_support(
                        [points[i] for i in subset] + [points[forced]]
                    )
                except DegenerateSupportError:
                    continue
                if not all(self._contains(ball, points[i]) for i in others):
                    continue
                if best is None or ball.radius < best.radius:
                    best = ball
        return best

    def _rounding_slack(self, ball: EnclosingBall) -> float:
        """Error bound of a distance to the ball's center, from float rounding alone."""
        scale = abs(ball.radius) + norm_inf(ball.center)
        return _ROUNDING_ULPS * float(np.finfo(float).eps) * scale

    def _contains(self, ball: EnclosingBall, point) -> bool:
        """Containment within the tolerance plus a few ulps of rounding slack.

        The slack keeps a zero (or sub-rounding) epsilon from reporting support
        points, or duplicates of them, as outside the ball built on them.
        """
        if ball.is_empty:
            return False
        return self.tolerance.lte(
            distance(point, ball.center), ball.radius + self._rounding_slack(ball)
        )


def enclose(
    points: Sequence | None,
    epsilon: float | None = None,
    config: EncloserConfig | None = None,
    dimension: int | None = None,
) -> EnclosingBall:
    """
    Compute the minimum enclosing ball of points.

    Picks the generator from the point dimension (disk for 2D, sphere for 3D).

    Args:
        points: (N, D) array or iterable of points. May be None or empty.
        epsilon: Containment tolerance. Overrides config.epsilon if given.
        config: Encloser parameters. If None, uses defaults.
        dimension: Point dimension, only needed to shape the empty ball's
            center when points is empty.

    Returns:
        The minimum enclosing ball
    """
    cfg = config or EncloserConfig()
    tolerance = Tolerance(cfg.epsilon if epsilon is None else epsilon)

    points = [] if points is None else list(points)
    if not points:
        return empty_ball(dimension or 0)

    if dimension is None:
        dimension = int(np.asarray(points[0], dtype=float).reshape(-1).shape[0])

    encloser = WelzlEncloser(tolerance, generator_for_dimension(dimension), cfg)
    return encloser.enclose(points)
