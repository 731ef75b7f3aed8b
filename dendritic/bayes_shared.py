"""Helpers shared by the Bayesian classifiers."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike


def class_idxs(target: ArrayLike) -> list[list[int]]:
    """Row indices of each class, one list per class in ascending class order."""
    values = np.asarray(target, dtype=float).ravel()
    return [np.flatnonzero(values == label).tolist() for label in np.unique(values)]


def class_probabilities(target: ArrayLike, class_idxs: list[list[int]]) -> list[float]:
    """Share of the target taken by each class."""
    size = np.asarray(target).size
    return [len(indices) / size for indices in class_idxs]


def gaussian_probability(x: float, mu: float, sigma: float) -> float:
    """Normal density of x for mean mu and standard deviation sigma."""
    denom = sigma * math.sqrt(2.0 * math.pi)
    exponent = -((x - mu) ** 2 / (2.0 * sigma ** 2))
    return (1.0 / denom) * math.exp(exponent)