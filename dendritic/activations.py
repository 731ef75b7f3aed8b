"""Activation functions and their derivatives."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike


def sigmoid(x: float) -> float:
    """Logistic sigmoid of a scalar."""
    try:
        return 1.0 / (1.0 + math.exp(-x))
    except OverflowError:
        return 0.0


def sigmoid_vec(x: ArrayLike) -> np.ndarray:
    """Sigmoid applied to every element, keeping the shape."""
    arr = np.asarray(x, dtype=float)
    return np.array([sigmoid(v) for v in arr.ravel()], dtype=float).reshape(arr.shape)


def sigmoid_prime(x: ArrayLike) -> np.ndarray:
    """Derivative of the sigmoid, element by element."""
    arr = np.asarray(x, dtype=float)
    values = [sigmoid(v) * (1.0 - sigmoid(v)) for v in arr.ravel()]
    return np.array(values, dtype=float).reshape(arr.shape)


def softmax(x: ArrayLike) -> np.ndarray:
    """Numerically stable softmax over all elements, keeping the shape."""
    arr = np.asarray(x, dtype=float)
    values = arr.ravel().tolist()
    if not values:
        raise ValueError("softmax of an empty array")
    peak = max(values)
    exps = [math.exp(v - peak) for v in values]
    total = sum(exps)
    return np.array([e / total for e in exps], dtype=float).reshape(arr.shape)


def softmax_prime(x: ArrayLike) -> np.ndarray:
    """Jacobian of the softmax, of shape (n, n) for n rows of input."""
    arr = np.asarray(x, dtype=float)
    n = arr.shape[0]
    s = softmax(arr).ravel()[:n]
    jacobian = -np.outer(s, s)
    np.fill_diagonal(jacobian, s * (1.0 - s))
    return jacobian


def relu(x: float) -> float:
    """Rectified linear unit."""
    return x if x > 0.0 else 0.0