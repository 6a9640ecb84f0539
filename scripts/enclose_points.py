"""Compute the minimum enclosing ball of a point set."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import tyro
from loguru import logger

from enclosing import EncloserConfig, TolerancePreset, enclose, export_ball_to_json
from enclosing.metrics import compute_slack, support_on_boundary


def main(
    points_path: Path | None = None,
    n_points: int = 1000,
    dimension: int = 2,
    seed: int = 0,
    preset: TolerancePreset = TolerancePreset.DEFAULT,
    output_path: Path | None = None,
) -> None:
    """Enclose points loaded from a file or sampled uniformly in the unit cube.

    Args:
        points_path: Text (.txt/.csv, one point per row) or .npy file. If not
            provided, random points are generated.
        n_points: Number of random points when points_path is not given.
        dimension: Dimension of random points.
        seed: Random seed for generated points.
        preset: Tolerance preset.
        output_path: Optional JSON output path.

    Examples:
        python scripts/enclose_points.py
        python scripts/enclose_points.py --n-points 10000 --dimension 3
        python scripts/enclose_points.py --points-path points.csv --preset COARSE
    """
    if points_path is not None:
        logger.info(f"Loading points from {points_path}...")
        if points_path.suffix == ".npy":
            points = np.load(points_path)
        else:
            delimiter = "," if points_path.suffix == ".csv" else None
            points = np.loadtxt(points_path, delimiter=delimiter, ndmin=2)
    else:
        rng = np.random.default_rng(seed)
        points = rng.random((n_points, dimension))
    logger.info(f"Enclosing {len(points)} points of dimension {points.shape[1]}")

    config = EncloserConfig.from_preset(preset)
    ball = enclose(points, config=config)

    logger.info(f"Center: {ball.center}")
    logger.info(f"Radius: {ball.radius:.10g}")
    for i, s in enumerate(ball.support):
        logger.debug(f"  support[{i}] = {np.asarray(s).tolist()}")
    logger.info(f"Slack: {compute_slack(points, ball):.3e}")
    logger.info(f"Support on boundary: {support_on_boundary(ball, config.epsilon)}")

    if output_path is not None:
        export_ball_to_json(ball, output_path)
        logger.info(f"Exported ball to {output_path}")


if __name__ == "__main__":
    tyro.cli(main)
