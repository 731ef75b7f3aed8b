"""K nearest neighbours for classification and regression."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable

import numpy as np
from numpy.typing import ArrayLike

DistanceMetric = Callable[[np.ndarray, np.ndarray], float]


def calculate_distances(
    distance_metric: DistanceMetric,
    features: ArrayLike,
    point: ArrayLike,
) -> list[tuple[float, int]]:
    """Distances from a point to every row of features, as sorted (distance, row) pairs."""
    data = np.asarray(features, dtype=float)
    pt = np.asarray(point, dtype=float)
    if pt.shape[0] != data.shape[1]:
        raise ValueError("KNN: Rows of point doesn't match cols of sample data")
    distances = [
        (float(distance_metric(pt, row.reshape(pt.shape))), idx)
        for idx, row in enumerate(data)
    ]
    return sorted(distances)


def _checked_dataset(features: ArrayLike, outputs: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    data = np.asarray(features, dtype=float)
    targets = np.asarray(outputs, dtype=float)
    if data.shape[0] != targets.shape[0]:
        raise ValueError("Feature rows must match output rows")
    return data, targets


def _neighbour_targets(
    distance_metric: DistanceMetric,
    features: np.ndarray,
    outputs: np.ndarray,
    k: int,
    point: ArrayLike,
) -> list[float]:
    distances = calculate_distances(distance_metric, features, point)
    if k > len(distances):
        raise ValueError("k is larger than the number of samples")
    targets = outputs.ravel()
    return [float(targets[row]) for _, row in distances[:k]]


def _predict_rows(predict_sample: Callable[[np.ndarray], float], point: ArrayLike) -> np.ndarray:
    samples = np.asarray(point, dtype=float)
    preds = [predict_sample(row.reshape(-1, 1)) for row in samples]
    return np.array(preds, dtype=float).reshape(len(preds), 1)


@dataclass
class KNN:
    """Majority-vote K nearest neighbours classifier."""

    features: np.ndarray
    outputs: np.ndarray
    k: int
    distance_metric: DistanceMetric = field(repr=False)

    @classmethod
    def fit(cls, features: ArrayLike, outputs: ArrayLike, k: int, distance_metric: DistanceMetric) -> KNN:
        """Store a dataset for neighbour lookups."""
        data, targets = _checked_dataset(features, outputs)
        return cls(data, targets, k, distance_metric)

    def predict_sample(self, point: ArrayLike) -> float:
        """Most common class among the k nearest rows; ties go to the smaller class."""
        counts = Counter(
            _neighbour_targets(self.distance_metric, self.features, self.outputs, self.k, point)
        )
        if not counts:
            return 0.0
        return max(sorted(counts), key=counts.__getitem__)

    def predict(self, point: ArrayLike) -> np.ndarray:
        """Predict every row of a sample matrix; returns shape (rows, 1)."""
        return _predict_rows(self.predict_sample, point)


@dataclass
class KNNRegressor:
    """K nearest neighbours regressor averaging neighbour targets."""

    features: np.ndarray
    outputs: np.ndarray
    k: int
    distance_metric: DistanceMetric = field(repr=False)

    @classmethod
    def fit(
        cls, features: ArrayLike, outputs: ArrayLike, k: int, distance_metric: DistanceMetric
    ) -> KNNRegressor:
        """Store a dataset for neighbour lookups."""
        data, targets = _checked_dataset(features, outputs)
        return cls(data, targets, k, distance_metric)

    def predict_sample(self, point: ArrayLike) -> float:
        """Mean target of the k nearest rows."""
        targets = _neighbour_targets(self.distance_metric, self.features, self.outputs, self.k, point)
        if not targets:
            return math.nan
        return sum(targets) / len(targets)

    def predict(self, point: ArrayLike) -> np.ndarray:
        """Predict every row of a sample matrix; returns shape (rows, 1)."""
        return _predict_rows(self.predict_sample, point)