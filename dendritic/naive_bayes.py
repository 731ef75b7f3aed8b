"""Categorical naive Bayes classifier built on frequency tables."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from dendritic import bayes_shared


class NaiveBayes:
    """Naive Bayes over discrete feature values."""

    def __init__(self, features: ArrayLike, outputs: ArrayLike) -> None:
        data = np.asarray(features, dtype=float)
        targets = np.asarray(outputs, dtype=float)
        if data.shape[0] != targets.shape[0]:
            raise ValueError("Feature rows must match output rows")
        self.features = data
        self.outputs = targets
        self.frequencies: list[np.ndarray] = []
        self.likelihoods: list[np.ndarray] = []

    def frequency_table(self, feature: ArrayLike, class_idxs: list[list[int]]) -> np.ndarray:
        """Rows of [value, count in class 0, count in class 1, ...] for each distinct value."""
        column = np.asarray(feature, dtype=float)
        if column.ndim == 1:
            column = column.reshape(-1, 1)
        if column.shape[0] != self.outputs.shape[0]:
            raise ValueError("Rows of feature must match rows of output")
        if column.shape[1] != 1:
            raise ValueError("Feature to frequency table must be shape (N, 1)")

        values = column[:, 0]
        rows = []
        for val in np.unique(values):
            present = set(np.flatnonzero(values == val).tolist())
            counts = [float(len(present.intersection(cls))) for cls in class_idxs]
            rows.append([float(val), *counts])
        return np.array(rows, dtype=float).reshape(len(rows), len(class_idxs) + 1)

    def likelihood_table(self, freq_table: ArrayLike) -> np.ndarray:
        """Transposed frequency table with each class column divided by its class size.

        Row 0 holds the feature values; row c + 1 holds the likelihoods for class c.
        """
        table = np.asarray(freq_table, dtype=float)
        class_counts = bayes_shared.class_idxs(self.outputs)
        rows = [table[:, 0]]
        rows.extend(
            table[:, col] / len(class_counts[col - 1]) for col in range(1, table.shape[1])
        )
        return np.array(rows, dtype=float)

    def feature_prior_probability(self, feature_idx: int, feature_value: float) -> float:
        """Share of rows in which a feature takes the given value."""
        column = self.features[:, feature_idx]
        count = int(np.count_nonzero(column == feature_value))
        return count / self.outputs.shape[0]

    def predict_feature(self, feature_col: int, value: float, klass: float) -> float:
        """Likelihood of a feature value within a class (given by its index)."""
        column = self.features[:, feature_col : feature_col + 1]
        freq_table = self.frequency_table(column, bayes_shared.class_idxs(self.outputs))
        lh_table = self.likelihood_table(freq_table)

        self.frequencies.append(freq_table)
        self.likelihoods.append(lh_table)

        matches = np.flatnonzero(lh_table[0] == value)
        row_idx = int(matches[-1]) if matches.size else 0
        return float(lh_table[int(klass) + 1, row_idx])

    def fit(self, data: ArrayLike) -> int:
        """Index of the most probable class for one row sample."""
        values = np.asarray(data, dtype=float).ravel().tolist()
        class_indices = bayes_shared.class_idxs(self.outputs)
        priors = bayes_shared.class_probabilities(self.outputs, class_indices)

        largest_prob = 0.0
        predict_class = 0
        for cls, class_prob in enumerate(priors):
            product = 1.0
            for idx, item in enumerate(values):
                product *= self.predict_feature(idx, item, cls)
            if product * class_prob > largest_prob:
                largest_prob = product * class_prob
                predict_class = cls
        return predict_class