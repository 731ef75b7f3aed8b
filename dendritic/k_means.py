"""K means clustering."""

from __future__ import annotations

from typing import Callable

import numpy as np
from numpy.typing import ArrayLike

DistanceMetric = Callable[[np.ndarray, np.ndarray], float]


class KMeans:
    """K means clustering seeded with the first ``k`` rows of the data.

    Centroids are column vectors of shape (features, 1), matching the shape
    of a single row sample handed to the distance metric.
    """

    def __init__(
        self,
        data: ArrayLike,
        k: int,
        max_iter: int,
        distance_metric: DistanceMetric,
    ) -> None:
        arr = np.asarray(data, dtype=float)
        if arr.ndim != 2:
            raise ValueError("Sample data must be two dimensional")
        if arr.shape[0] <= k:
            raise ValueError("Not enough rows in sample data")
        self.data = arr
        self.k = k
        self.max_iter = max_iter
        self.distance_metric = distance_metric
        self.centroids: list[np.ndarray] = [self._row(n) for n in range(k)]

    def _row(self, index: int) -> np.ndarray:
        return self.data[index].reshape(-1, 1)

    def set_centroids(self, indices: list[int]) -> None:
        """Use the data rows at the given indices as centroids."""
        self.centroids = [self._row(n) for n in indices]

    def assign_clusters(self) -> np.ndarray:
        """Index of the nearest centroid for every row; returns shape (rows, 1)."""
        distances = np.array(
            [
                [float(self.distance_metric(self._row(row), centroid)) for centroid in self.centroids]
                for row in range(self.data.shape[0])
            ],
            dtype=float,
        )
        if distances.size == 0:
            raise ValueError("No centroids to assign clusters to")
        return np.argmin(distances, axis=1).astype(float).reshape(-1, 1)

    def calculate_centroids(self, values: ArrayLike) -> None:
        """Recompute centroids as the mean of the rows in each assigned cluster."""
        labels = np.asarray(values, dtype=float).ravel()
        self.centroids = [
            self.data[np.flatnonzero(labels == category)].mean(axis=0).reshape(-1, 1)
            for category in np.unique(labels)
        ]

    def fit(self) -> np.ndarray:
        """Run ``max_iter`` rounds of updates and return the final cluster assignment."""
        assigned = self.assign_clusters()
        for _ in range(self.max_iter):
            self.calculate_centroids(assigned)
            assigned = self.assign_clusters()
        return assigned