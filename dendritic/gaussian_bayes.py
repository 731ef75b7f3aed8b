"""Gaussian naive Bayes classifier."""

from __future__ import annotations

import math
from pathlib import Path

import numpy as np
from numpy.typing import ArrayLike

from dendritic import bayes_shared

_ROW_ERROR = "row sample not equal to features column count"


class GaussianNB:
    """Naive Bayes with a normal density per feature and class.

    ``likelihoods`` has shape (classes, features, 2), holding mean and
    sample standard deviation for every class and feature.
    """

    def __init__(self, features: ArrayLike, outputs: ArrayLike) -> None:
        data = np.asarray(features, dtype=float)
        targets = np.asarray(outputs, dtype=float)
        if data.shape[0] != targets.shape[0]:
            raise ValueError("Feature rows must match output rows")
        self.features = data
        self.outputs = targets
        self.likelihoods = np.zeros((0, 0))
        self.build_likelihoods()

    @property
    def _feature_count(self) -> int:
        return self.features.shape[1]

    def build_likelihoods(self) -> None:
        """Compute mean and sample standard deviation for every class and feature."""
        groups = bayes_shared.class_idxs(self.outputs)
        table = np.empty((len(groups), self._feature_count, 2), dtype=float)
        for col in range(self._feature_count):
            column = self.features[:, col]
            for cls, indices in enumerate(groups):
                vals = column[indices].tolist()
                mean = sum(vals) / len(vals)
                squares = sum((v - mean) ** 2 for v in vals)
                std_dev = math.sqrt(squares / (len(vals) - 1)) if len(vals) > 1 else math.nan
                table[cls, col] = (mean, std_dev)
        self.likelihoods = table

    def predict_feature(self, feature_col: int, value: float, klass: float) -> float:
        """Density of a feature value within a class (given by its index)."""
        mean, std_dev = self.likelihoods[int(klass), feature_col]
        return bayes_shared.gaussian_probability(value, float(mean), float(std_dev))

    def fit_row(self, x: ArrayLike) -> float:
        """Index of the most probable class for one row sample."""
        row = np.asarray(x, dtype=float)
        if row.ndim == 0 or row.shape[0] != self._feature_count:
            raise ValueError(_ROW_ERROR)

        priors = bayes_shared.class_probabilities(
            self.outputs, bayes_shared.class_idxs(self.outputs)
        )
        largest_prob = 0.0
        predict_class = 0.0
        for cls, class_prob in enumerate(priors):
            product = 1.0
            for idx, item in enumerate(row.ravel().tolist()):
                product *= self.predict_feature(idx, item, cls)
            if product * class_prob > largest_prob:
                largest_prob = product * class_prob
                predict_class = float(cls)
        return predict_class

    def fit(self, x: ArrayLike) -> np.ndarray:
        """Predicted class index for every row; returns shape (rows, 1)."""
        samples = np.asarray(x, dtype=float)
        if samples.ndim != 2 or samples.shape[1] != self._feature_count:
            raise ValueError(_ROW_ERROR)
        preds = [self.fit_row(row) for row in samples]
        return np.array(preds, dtype=float).reshape(len(preds), 1)

    def save(self, filepath: str | Path) -> None:
        """Write the likelihoods into a directory, creating it if needed."""
        directory = Path(filepath)
        directory.mkdir(parents=True, exist_ok=True)
        with open(directory / "likelihoods", "wb") as handle:
            np.save(handle, self.likelihoods)

    @classmethod
    def load(cls, filepath: str | Path, features: ArrayLike, outputs: ArrayLike) -> "GaussianNB":
        """Restore a model from saved likelihoods and its training data."""
        with open(Path(filepath) / "likelihoods", "rb") as handle:
            likelihoods = np.load(handle)
        model = cls.__new__(cls)
        model.features = np.asarray(features, dtype=float)
        model.outputs = np.asarray(outputs, dtype=float)
        model.likelihoods = likelihoods
        return model