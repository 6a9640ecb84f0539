"""Error taxonomy for enclosing ball computation."""


class EnclosingError(Exception):
    """Base class for errors raised while computing enclosing balls."""


class DegenerateSupportError(EnclosingError):
    """Support points do not determine a unique ball.

    Raised when a support point lies (within tolerance) on the affine hull of
    the points before it, e.g. coincident points or three collinear points in
    the plane.
    """


class SupportSizeError(EnclosingError, ValueError):
    """A generator received more support points than its dimension allows."""


class EnclosingBallError(EnclosingError, RuntimeError):
    """The incremental algorithm reached an inconsistent state."""
