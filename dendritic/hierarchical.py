"""Agglomerative hierarchical clustering building blocks."""

from __future__ import annotations

from typing import Callable

import numpy as np
from numpy.typing import ArrayLike

DistanceMetric = Callable[[np.ndarray, np.ndarray], float]


class HierarchicalClustering:
    """Hierarchical clustering over a lower-triangular distance matrix.

    ``distance_matrix[j, i]`` holds the distance between rows ``i`` and ``j``
    for ``j > i``; every other entry is zero.
    """

    def __init__(self, data: ArrayLike, distance_metric: DistanceMetric) -> None:
        arr = np.asarray(data, dtype=float)
        if arr.ndim != 2:
            raise ValueError("Sample data must be two dimensional")
        rows = arr.shape[0]
        if rows <= 1:
            raise ValueError("Not enough rows in sample data")
        self.data = arr
        self.distance_matrix = np.zeros((rows, rows), dtype=float)
        self.clusters: list[int] = []
        self.distance_metric = distance_metric

    def _row(self, index: int) -> np.ndarray:
        return self.data[index].reshape(-1, 1)

    def calculate_distance_matrix(self) -> None:
        """Fill the lower triangle with pairwise distances between rows."""
        rows = self.data.shape[0]
        for i in range(rows):
            x = self._row(i)
            for j in range(i + 1, rows):
                self.distance_matrix[j, i] = float(self.distance_metric(x, self._row(j)))

    def get_comparison_coords(
        self,
        row: int,
        min_coord: int,
        max_coord: int,
        d_matrix: ArrayLike,
        coordinate: list[int],
    ) -> tuple[list[int], list[int]]:
        """Matrix coordinates linking ``row`` to each of the two merged points.

        Both lists are empty when no pair of non-zero entries is found.
        """
        matrix = np.asarray(d_matrix, dtype=float)
        x = matrix[row, :]
        y = matrix[:, row]
        p1_x, p2_x = x[coordinate[0]], x[coordinate[1]]
        p1_y, p2_y = y[coordinate[0]], y[coordinate[1]]

        if p1_y != 0.0 and p2_y != 0.0:
            return [min_coord, row], [max_coord, row]
        if p1_x != 0.0 and p2_x != 0.0:
            return [row, min_coord], [row, max_coord]
        if p2_x != 0.0 and p1_y != 0.0:
            return [row, min_coord], [max_coord, row]
        if p1_x != 0.0 and p1_y != 0.0:
            return [min_coord, row], [max_coord, min_coord]
        return [], []

    def update_dist_mat(self, d_matrix: ArrayLike, coordinate: list[int]) -> np.ndarray:
        """Merge the two points at ``coordinate`` using single linkage.

        The larger index is dropped from the matrix, distances to the merged
        point become the smaller of the two, and the smaller index is recorded
        as a cluster.
        """
        matrix = np.asarray(d_matrix, dtype=float)
        min_coord = min(coordinate)
        max_coord = max(coordinate)

        new_mat = np.delete(np.delete(matrix, max_coord, axis=0), max_coord, axis=1)

        for row in range(matrix.shape[0]):
            if row in coordinate:
                continue
            c1, c2 = self.get_comparison_coords(row, min_coord, max_coord, matrix, coordinate)
            if not c1 or not c2:
                continue
            shortest = min(matrix[tuple(c1)], matrix[tuple(c2)])
            if c1[0] < new_mat.shape[0] and c1[1] < new_mat.shape[1]:
                new_mat[c1[0], c1[1]] = shortest

        self.clusters.append(min_coord)
        return new_mat

    def find_min_coord(self, dist_matrix: ArrayLike) -> list[int]:
        """Row and column of the smallest non-zero distance."""
        matrix = np.asarray(dist_matrix, dtype=float)
        nonzero = matrix[matrix != 0.0]
        if nonzero.size == 0:
            raise ValueError("Distance matrix has no non-zero entries")
        smallest = nonzero.min()
        flat_index = int(np.flatnonzero(matrix.ravel() == smallest)[0])
        return [int(i) for i in np.unravel_index(flat_index, matrix.shape)]

    def fit_transform(self) -> list[int]:
        """Coordinate of the closest pair in the current distance matrix."""
        return self.find_min_coord(self.distance_matrix)