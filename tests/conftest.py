"""Pytest configuration and fixtures for enclosing tests."""

from __future__ import annotations

import numpy as np
import pytest

from enclosing import (
    DiskGenerator,
    EnclosingBall,
    SphereGenerator,
    SupportBallGenerator,
    Tolerance,
    WelzlEncloser,
)
from enclosing.metrics import is_minimal


# =============================================================================
# TOLERANCE SETTINGS
# =============================================================================

# Epsilon used by the encloser under test
TEST_EPS = 1e-10

# Slack allowed when checking results against input points
CHECK_EPS = 1e-10

# Support points must lie outside the ball shrunk by this much
SUPPORT_SHRINK = 1e-3


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def tolerance() -> Tolerance:
    return Tolerance(TEST_EPS)


@pytest.fixture
def disk_encloser(tolerance: Tolerance) -> WelzlEncloser:
    """Welzl encloser for points in the plane."""
    return WelzlEncloser(tolerance, DiskGenerator())


@pytest.fixture
def sphere_encloser(tolerance: Tolerance) -> WelzlEncloser:
    """Welzl encloser for points in 3D space."""
    return WelzlEncloser(tolerance, SphereGenerator())


# =============================================================================
# PYTEST HOOKS
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


# =============================================================================
# HELPERS
# =============================================================================


def build_list(*coordinates: float, dimension: int = 2) -> list[tuple[float, ...]]:
    """Group a flat coordinate list into point tuples."""
    assert len(coordinates) % dimension == 0
    return [
        tuple(coordinates[i : i + dimension])
        for i in range(0, len(coordinates), dimension)
    ]


def as_coords(points) -> np.ndarray:
    return np.asarray([np.asarray(p, dtype=float) for p in points])


# =============================================================================
# ASSERTION HELPERS
# =============================================================================


def assert_encloses_all(points, ball: EnclosingBall, margin: float = CHECK_EPS) -> None:
    """Assert that every point is inside the ball enlarged by margin."""
    coords = as_coords(points)
    dists = np.linalg.norm(coords - ball.center, axis=1)
    worst = int(np.argmax(dists))
    if dists[worst] > ball.radius + margin:
        raise AssertionError(
            f"Point {worst} ({coords[worst]}) is {dists[worst] - ball.radius:.3e} "
            f"outside the ball (center={ball.center}, radius={ball.radius})"
        )


def assert_support_valid(points, ball: EnclosingBall, max_support: int) -> None:
    """Assert support size, identity and boundary position."""
    assert 1 <= ball.support_size <= max_support, (
        f"Support size {ball.support_size} outside [1, {max_support}]"
    )
    for s in ball.support:
        assert any(s is p for p in points), f"Support point {s} not drawn from input"
        assert not ball.contains(s, -SUPPORT_SHRINK), (
            f"Support point {s} is not on the boundary"
        )


def assert_minimal(
    points,
    ball: EnclosingBall,
    generator: SupportBallGenerator,
    margin: float = CHECK_EPS,
) -> None:
    """Assert that dropping any support point leaves some input point outside."""
    assert is_minimal(as_coords(points), ball, generator, margin), (
        f"A support point of {ball.support_size} can be dropped "
        f"(center={ball.center}, radius={ball.radius})"
    )


def check_ball(encloser: WelzlEncloser, points, ref_support=None) -> EnclosingBall:
    """Enclose points and check the enclosing ball properties.

    If ref_support is given, the ball must also match the ball on that
    support, and its support points must be the same objects.
    """
    ball = encloser.enclose(points)
    generator = encloser.generator

    assert_encloses_all(points, ball)
    assert_support_valid(points, ball, generator.max_support)
    assert_minimal(points, ball, generator)

    if ref_support is not None:
        expected = generator.ball_on_support(ref_support)
        assert ball.support_size == len(ref_support)
        assert ball.radius == pytest.approx(expected.radius, abs=1e-10)
        np.testing.assert_allclose(ball.center, expected.center, atol=1e-10)
        for s in ball.support:
            assert any(s is rs for rs in ref_support), (
                f"Support point {s} not in the reference support"
            )

    return ball
