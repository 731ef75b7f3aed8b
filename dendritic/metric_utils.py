"""Helpers shared by metrics: axis application, impurity and entropy."""

from __future__ import annotations

import math
from collections import Counter
from typing import Callable

import numpy as np
from numpy.typing import ArrayLike


def apply(
    value: ArrayLike,
    axis: int,
    loss_function: Callable[[np.ndarray], np.ndarray],
) -> np.ndarray:
    """Apply a function to each slice along an axis; results refill the original shape."""
    arr = np.asarray(value, dtype=float)
    pieces = [
        np.asarray(loss_function(np.take(arr, idx, axis=axis).reshape(-1, 1)), dtype=float).ravel()
        for idx in range(arr.shape[axis])
    ]
    flat = np.concatenate(pieces) if pieces else np.empty(0)
    return flat.reshape(arr.shape)


def _class_counts(y: ArrayLike) -> tuple[list[int], int]:
    values = np.asarray(y, dtype=float).ravel().tolist()
    counts = Counter(values)
    return [counts[label] for label in sorted(counts)], len(values)


def gini_impurity(y: ArrayLike) -> float:
    """Gini impurity of a set of labels."""
    counts, size = _class_counts(y)
    gini = 0.0
    for count in counts:
        gini += (count / size) ** 2
    return 1.0 - gini


def entropy(y: ArrayLike) -> float:
    """Shannon entropy, in bits, of a set of labels."""
    counts, size = _class_counts(y)
    ent = 0.0
    for count in counts:
        p = count / size
        ent += -p * math.log2(p)
    return ent