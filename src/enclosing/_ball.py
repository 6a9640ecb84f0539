"""Enclosing ball value type."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jax_dataclasses as jdc
import numpy as np

from ._tolerance import Tolerance
from .utils._vectors import distance


@jdc.pytree_dataclass
class EnclosingBall:
    """A ball together with the points that define its boundary.

    A negative radius marks the ball computed for an empty point set. It
    encodes absence, not a degenerate zero-size ball (a single point gives
    radius 0).
    """

    center: np.ndarray
    """(D,) center of the ball."""

    radius: float
    """Ball radius, negative for the empty ball."""

    support: tuple[Any, ...] = ()
    """Points on the boundary, by identity with the caller's input."""

    @property
    def support_size(self) -> int:
        return len(self.support)

    @property
    def dimension(self) -> int:
        return int(np.asarray(self.center).shape[-1])

    @property
    def is_empty(self) -> bool:
        """True for the ball of an empty point set."""
        return self.radius < 0

    def contains(self, point, margin: float = 0.0) -> bool:
        """Check if point lies inside the ball enlarged by margin.

        Args:
            point: Point to test
            margin: Slack added to the radius. A negative margin shrinks the
                ball, which is how boundary points are told apart.

        Returns:
            True if distance(point, center) <= radius + margin
        """
        return distance(point, self.center) <= self.radius + margin

    def contains_within(self, point, tolerance: Tolerance) -> bool:
        """Check containment, treating distances within epsilon of the radius as inside."""
        return tolerance.lte(distance(point, self.center), self.radius)

    def to_dict(self) -> dict:
        return {
            "center": np.asarray(self.center, dtype=float).tolist(),
            "radius": float(self.radius),
            "support": [np.asarray(p, dtype=float).tolist() for p in self.support],
        }


def empty_ball(dimension: int) -> EnclosingBall:
    """Ball returned for an empty (or missing) point set."""
    return EnclosingBall(center=np.zeros(dimension), radius=float("-inf"), support=())


def export_ball_to_json(ball: EnclosingBall, output_path: Path) -> None:
    """
    Export an enclosing ball to a JSON file.

    Args:
        ball: Ball to export
        output_path: Path to write JSON file (must have .json extension)

    Raises:
        ValueError: If output_path doesn't have .json extension

    Output format:
        {
            "center": [x, y, ...],
            "radius": r,
            "support": [[x, y, ...], ...]
        }

    The empty ball is written with a null radius since JSON has no infinity.
    """
    resolved_path = Path(output_path).resolve()
    if resolved_path.suffix.lower() != ".json":
        raise ValueError(
            f"Output file must have .json extension, got: '{resolved_path.suffix}'"
        )

    data = ball.to_dict()
    if ball.is_empty:
        data["radius"] = None

    with open(resolved_path, "w") as f:
        json.dump(data, f, indent=2)
