"""Epsilon-based floating point comparisons."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Tolerance:
    """Compares floats using an absolute epsilon.

    Two values are equal when ``|a - b| <= epsilon``. For any pair of finite
    floats exactly one of ``lt``, ``eq`` and ``gt`` holds.
    """

    epsilon: float = 1e-10

    def __post_init__(self):
        if not math.isfinite(self.epsilon) or self.epsilon < 0.0:
            raise ValueError(
                f"Tolerance epsilon must be finite and non-negative, got: {self.epsilon}"
            )

    def eq(self, a: float, b: float) -> bool:
        return abs(a - b) <= self.epsilon

    def eq_zero(self, a: float) -> bool:
        return self.eq(a, 0.0)

    def lt(self, a: float, b: float) -> bool:
        return self.compare(a, b) < 0

    def lte(self, a: float, b: float) -> bool:
        return self.compare(a, b) <= 0

    def gt(self, a: float, b: float) -> bool:
        return self.compare(a, b) > 0

    def gte(self, a: float, b: float) -> bool:
        return self.compare(a, b) >= 0

    def compare(self, a: float, b: float) -> int:
        """Return -1, 0 or 1 as a is less than, equal to or greater than b."""
        if self.eq(a, b):
            return 0
        return -1 if a < b else 1

    def sign(self, a: float) -> int:
        """Sign of a, with values within epsilon of zero treated as zero."""
        return self.compare(a, 0.0)

    @property
    def max_zero(self) -> float:
        """Largest positive value considered equal to zero."""
        return self.epsilon
