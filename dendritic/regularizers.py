"""Weight penalties that discourage overfitting."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from dendritic.node import Node


def _step(learning_rate: float, upstream_gradient: ArrayLike) -> float:
    return learning_rate / np.asarray(upstream_gradient).size


class L2Regularization(Node):
    """Ridge penalty ``lambda * sum(w ** 2)``.

    ``rhs`` holds the weights and ``lhs`` the penalty strength; the backward
    pass stores ``w * lambda * 2 * lr / n`` in ``grad``.
    """

    def __init__(self, rhs: Node, lhs: Node, learning_rate: float) -> None:
        self.rhs = rhs
        self.lhs = lhs
        self.learning_rate = learning_rate
        self.value = self._penalty()
        self.grad = self.value.copy()

    def __repr__(self) -> str:
        return f"L2Regularization({self.rhs!r}, {self.lhs!r}, {self.learning_rate!r})"

    def _penalty(self) -> np.ndarray:
        total = float(np.sum(np.square(self.rhs.value)))
        return np.asarray(self.lhs.value * total, dtype=float)

    def forward(self) -> np.ndarray:
        """Forward the inputs, then recompute the penalty."""
        self.rhs.forward()
        self.lhs.forward()
        self.value = self._penalty()
        return self.value

    def backward(self, upstream_gradient: ArrayLike) -> None:
        """Set ``grad`` to the weights scaled by ``lambda * 2 * lr / n``."""
        alpha = self.lhs.value * (2.0 * _step(self.learning_rate, upstream_gradient))
        self.grad = np.asarray(self.rhs.value * alpha, dtype=float)


class L1Regularization(Node):
    """Lasso penalty ``lambda * sum(|w|)``.

    The backward pass stores ``sign(w) * lambda * lr / n`` in ``grad``.
    """

    def __init__(self, rhs: Node, lhs: Node, learning_rate: float) -> None:
        self.rhs = rhs
        self.lhs = lhs
        self.learning_rate = learning_rate
        self.value = self._penalty()
        self.grad = self.value.copy()

    def __repr__(self) -> str:
        return f"L1Regularization({self.rhs!r}, {self.lhs!r}, {self.learning_rate!r})"

    def _penalty(self) -> np.ndarray:
        total = float(np.sum(np.abs(self.rhs.value)))
        return np.asarray(self.lhs.value * total, dtype=float)

    def forward(self) -> np.ndarray:
        """Forward the inputs, then recompute the penalty."""
        self.rhs.forward()
        self.lhs.forward()
        self.value = self._penalty()
        return self.value

    def backward(self, upstream_gradient: ArrayLike) -> None:
        """Set ``grad`` to the sign of the weights scaled by ``lambda * lr / n``."""
        alpha = self.lhs.value * _step(self.learning_rate, upstream_gradient)
        self.grad = np.asarray(np.sign(self.rhs.value) * alpha, dtype=float)