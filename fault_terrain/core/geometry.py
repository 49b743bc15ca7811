"""
2D vector helpers used by the fault side test.

Vector components may be plain floats or numpy arrays, so the same
functions evaluate a single point or the whole grid at once.
"""

from typing import NamedTuple, Union

import numpy as np

Scalar = Union[float, np.ndarray]


class Vector2(NamedTuple):
    """A point or direction in continuous grid space."""

    x: Scalar
    y: Scalar


def subtract(a: Vector2, b: Vector2) -> Vector2:
    """Return the elementwise difference ``a - b``."""
    return Vector2(a.x - b.x, a.y - b.y)


def perp_dot_product(test_direction: Vector2, fault_vector: Vector2) -> Scalar:
    """Perpendicular dot product of two vectors."""
    return test_direction.x * fault_vector.y - test_direction.y * fault_vector.x


def perp_dot_side(test_direction: Vector2, fault_vector: Vector2) -> Union[bool, np.ndarray]:
    """
    Check which side of a fault line a point lies on.

    Args:
        test_direction: Vector from the fault line's first point to the tested point
        fault_vector: Vector from the first to the second fault point

    Returns:
        True when the perpendicular dot product is strictly negative. Points
        exactly on the line count as False. Array components give a boolean mask.
    """
    product = perp_dot_product(test_direction, fault_vector)
    if isinstance(product, np.ndarray):
        return product < 0
    return bool(product < 0)
