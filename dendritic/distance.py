"""Distance metrics between points."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike


def _same_shape(p1: ArrayLike, p2: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    a = np.asarray(p1, dtype=float)
    b = np.asarray(p2, dtype=float)
    if a.shape != b.shape:
        raise ValueError("Supplied points must be of same shape")
    return a, b


def euclidean(p1: ArrayLike, p2: ArrayLike) -> float:
    """Euclidean distance between two points of the same shape."""
    a, b = _same_shape(p1, p2)
    return math.sqrt(sum(d ** 2 for d in (a - b).ravel().tolist()))


def manhattan(p1: ArrayLike, p2: ArrayLike) -> float:
    """Manhattan distance, taken between the absolute values of the points."""
    a, b = _same_shape(p1, p2)
    return sum(np.abs(np.abs(a) - np.abs(b)).ravel().tolist())