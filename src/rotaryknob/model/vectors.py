from __future__ import annotations

from math import atan2, degrees, radians, sqrt, cos, sin
from typing import Sequence

import numpy as np
from numpy import typing as npt

Vector = Sequence[float] | npt.NDArray[np.float64]


def dot(a: Vector, b: Vector) -> float:
    """
    Dot product of two vectors.

    Vectors of different lengths are allowed; only the first ``min(len(a), len(b))``
    components take part in the product.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        The scalar product of both vectors.
    """
    n = min(len(a), len(b))
    return float(np.dot(np.asarray(a[:n], dtype=float), np.asarray(b[:n], dtype=float)))


def length(vector: Vector) -> float:
    """Euclidean length (magnitude) of a vector."""
    return sqrt(dot(vector, vector))


def normalize(vector: Vector) -> npt.NDArray[np.float64]:
    """
    Scale a vector to unit length.

    Args:
        vector: Input vector of any dimension.

    Returns:
        A new array of the same dimension with length 1.

    Raises:
        ValueError: If the vector has zero length, since it has no direction.
    """
    arr = np.asarray(vector, dtype=float)
    magnitude = length(arr)
    if magnitude == 0.0:
        raise ValueError("Cannot normalize a zero-length vector.")
    return arr / magnitude


def direction(angle_deg: float) -> npt.NDArray[np.float64]:
    """
    Unit vector for a dial angle in screen coordinates.

    0° points up (negative y) and angles grow clockwise, i.e. ``(sin θ, -cos θ)``.
    """
    theta = radians(angle_deg)
    return np.array([sin(theta), -cos(theta)])


def angle_from_up(vector: Vector) -> float:
    """
    Clockwise angle between "up" ``(0, -1)`` and ``vector``, in degrees within [0, 360).

    The dot product with up is ``-y`` and the determinant is ``x``, so the
    angle reduces to ``atan2(x, -y)``.

    Raises:
        ValueError: If the vector has zero length.
    """
    x, y = normalize(vector)[:2]
    angle = atan2(x, -y)
    if angle < 0.0:
        angle += 2.0 * np.pi
    result = degrees(angle)
    return 0.0 if result >= 360.0 else result
