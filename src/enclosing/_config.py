"""Configuration for enclosing ball computation."""

from __future__ import annotations

from enum import Enum

import jax_dataclasses as jdc


class TolerancePreset(Enum):
    """Preset configurations for the encloser.

    STRICT: Tight epsilon for well-scaled inputs (coordinates near unit
            magnitude). Support points are resolved very precisely.

    DEFAULT: Epsilon of 1e-10. Good general-purpose setting.

    COARSE: Loose epsilon for large coordinates or noisy data. Points
            within 1e-6 of the boundary count as enclosed. Enables the
            convex hull prefilter for large point sets.
    """

    STRICT = "strict"
    DEFAULT = "default"
    COARSE = "coarse"


@jdc.pytree_dataclass
class EncloserConfig:
    """Parameters for the Welzl encloser."""

    epsilon: float = 1e-10
    """Absolute tolerance for containment tests."""

    hull_prefilter: bool = False
    """Restrict candidate points to convex hull vertices before enclosing.

    Only hull vertices can lie on the boundary of the minimum enclosing ball.
    Computing the hull with scipy's Qhull is cheap compared to repeated
    farthest-point scans when most points are interior. Falls back to all
    points when Qhull rejects the input (flat or too few points).
    """

    hull_prefilter_min_points: int = 1000
    """Inputs smaller than this skip the hull prefilter."""

    max_pivots: int = 1000
    """Upper bound on pivot iterations before giving up.

    The expected number of pivots is small (usually below 10). Hitting this
    limit means the tolerance is too small for the input's scale.
    """

    @classmethod
    def from_preset(cls, preset: TolerancePreset) -> "EncloserConfig":
        """Create config from a preset.

        Args:
            preset: Base preset to use

        Returns:
            EncloserConfig with preset values
        """
        return jdc.replace(_PRESET_CONFIGS[preset])


# Preset definitions
_PRESET_CONFIGS: dict[TolerancePreset, EncloserConfig] = {
    TolerancePreset.STRICT: EncloserConfig(
        epsilon=1e-12,
        hull_prefilter=False,
    ),
    TolerancePreset.DEFAULT: EncloserConfig(
        epsilon=1e-10,
        hull_prefilter=False,
    ),
    TolerancePreset.COARSE: EncloserConfig(
        epsilon=1e-6,
        hull_prefilter=True,
        hull_prefilter_min_points=500,
    ),
}
