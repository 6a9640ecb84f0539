"""Benchmark the Welzl encloser on random point sets."""

from __future__ import annotations

import time

import numpy as np

from enclosing import EncloserConfig, enclose
from enclosing.metrics import compute_slack


def run(points: np.ndarray, config: EncloserConfig) -> tuple[float, float, int]:
    """Enclose points and return (elapsed ms, slack, support size)."""
    start = time.perf_counter()
    ball = enclose(points, config=config)
    elapsed_ms = (time.perf_counter() - start) * 1000
    return elapsed_ms, compute_slack(points, ball), ball.support_size


def main():
    """Time enclosing uniform points in 2D and 3D with and without the hull prefilter."""
    rng = np.random.default_rng(0)
    sizes = [10, 100, 1000, 10000, 100000]

    for dimension in (2, 3):
        print("\n" + "="*80)
        print(f"UNIFORM POINTS IN THE UNIT {'SQUARE' if dimension == 2 else 'CUBE'}")
        print("="*80)
        print(f"{'Points':>8} | {'Plain ms':>10} | {'Hull ms':>10} | {'Slack':>10} | {'Support':>8}")
        print("-"*80)

        for n in sizes:
            points = rng.random((n, dimension))
            plain_ms, slack, support = run(points, EncloserConfig())
            hull_ms, _, _ = run(
                points, EncloserConfig(hull_prefilter=True, hull_prefilter_min_points=0)
            )
            print(f"{n:>8} | {plain_ms:>10.2f} | {hull_ms:>10.2f} | {slack:>10.1e} | {support:>8}")

        print("="*80)


if __name__ == "__main__":
    main()
