"""Scalar interpolation."""


def lerp(start: float, end: float, t: float) -> float:
    """
    Linear interpolation between ``start`` and ``end``.

    ``t`` is not clamped; values outside [0, 1] extrapolate.
    """
    return start + (end - start) * t
