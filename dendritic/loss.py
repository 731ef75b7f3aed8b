"""Loss functions for regressors and classifiers."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike


def _ln(x: float) -> float:
    if x == 0.0:
        return -math.inf
    if x < 0.0 or math.isnan(x):
        return math.nan
    return math.log(x)


def _paired(y_hat: ArrayLike, y_true: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    hat = np.asarray(y_hat, dtype=float).ravel()
    true = np.asarray(y_true, dtype=float).ravel()
    if hat.size < true.size:
        raise ValueError("Predictions are shorter than true values")
    return hat, true


def mse(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """Mean squared error."""
    true = np.asarray(y_true, dtype=float).ravel()
    pred = np.asarray(y_pred, dtype=float).ravel()
    if true.size != pred.size:
        raise ValueError("Size of y values do not match")
    total = 0.0
    for t, p in zip(true.tolist(), pred.tolist()):
        total += (t - p) ** 2
    return total / true.size


def binary_cross_entropy(y_hat: ArrayLike, y_true: ArrayLike) -> float:
    """Binary cross entropy of predicted probabilities against labels."""
    hat, true = _paired(y_hat, y_true)
    total = 0.0
    for y, p in zip(true.tolist(), hat.tolist()):
        total += y * _ln(p) + (1.0 - y) * _ln(1.0 - p)
    return -(1.0 / hat.size) * total


def categorical_cross_entropy(y_hat: ArrayLike, y_true: ArrayLike) -> float:
    """Categorical cross entropy for multi-class classification."""
    hat, true = _paired(y_hat, y_true)
    total = 0.0
    for y, p in zip(true.tolist(), hat.tolist()):
        total += -y * _ln(p)
    return total / hat.size