"""Differentiable operations: dot product, broadcast add and weight penalty."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from dendritic.node import Node


class _BinaryOp(Node):
    """Operation over two input nodes, caching its output and gradient."""

    def __init__(self, rhs: Node, lhs: Node) -> None:
        self.rhs = rhs
        self.lhs = lhs
        self.value = self._compute(rhs.value, lhs.value)
        self.grad = self.value.copy()

    def _compute(self, rhs: np.ndarray, lhs: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rhs!r}, {self.lhs!r})"


class Dot(_BinaryOp):
    """Matrix product ``rhs @ lhs``."""

    def __init__(self, rhs: Node, lhs: Node) -> None:
        """Join two nodes and compute their product straight away."""
        super().__init__(rhs, lhs)

    def _compute(self, rhs: np.ndarray, lhs: np.ndarray) -> np.ndarray:
        return np.asarray(np.dot(rhs, lhs), dtype=float)

    def forward(self) -> np.ndarray:
        """Forward the inputs and recompute the product from their prior values."""
        rhs = self.rhs.value
        lhs = self.lhs.value
        self.rhs.forward()
        self.lhs.forward()
        self.value = self._compute(rhs, lhs)
        return self.value

    def backward(self, upstream_gradient: ArrayLike) -> None:
        """Send ``rhs.T @ g`` to the right input and ``g @ lhs.T`` to the left one."""
        upstream = np.array(upstream_gradient, dtype=float)
        self.grad = upstream
        rhs_grad = np.dot(self.rhs.value.T, upstream)
        lhs_grad = np.dot(upstream, self.lhs.value.T)
        self.rhs.backward(rhs_grad)
        self.lhs.backward(lhs_grad)


class ScaleAdd(_BinaryOp):
    """Elementwise sum, broadcasting ``lhs`` across ``rhs``."""

    def __init__(self, rhs: Node, lhs: Node) -> None:
        """Join two nodes and compute their sum straight away."""
        super().__init__(rhs, lhs)

    def _compute(self, rhs: np.ndarray, lhs: np.ndarray) -> np.ndarray:
        return np.asarray(rhs + lhs, dtype=float)

    def forward(self) -> np.ndarray:
        """Forward the inputs, then add their new values."""
        self.rhs.forward()
        self.lhs.forward()
        self.value = self._compute(self.rhs.value, self.lhs.value)
        return self.value

    def backward(self, upstream_gradient: ArrayLike) -> None:
        """Pass the upstream gradient unchanged to both inputs."""
        upstream = np.array(upstream_gradient, dtype=float)
        self.grad = upstream
        self.lhs.backward(upstream.copy())
        self.rhs.backward(upstream)


class Regularization(_BinaryOp):
    """Squared-weight penalty ``lambda * sum(w ** 2)``.

    ``rhs`` holds the weights and ``lhs`` the penalty strength. The backward
    pass stores the weight update in ``grad`` without touching the inputs.
    """

    def __init__(self, rhs: Node, lhs: Node, learning_rate: float) -> None:
        super().__init__(rhs, lhs)
        self.learning_rate = learning_rate

    def _compute(self, rhs: np.ndarray, lhs: np.ndarray) -> np.ndarray:
        return np.asarray(lhs * float(np.sum(np.square(rhs))), dtype=float)

    def forward(self) -> np.ndarray:
        """Forward the inputs, then recompute the penalty."""
        self.rhs.forward()
        self.lhs.forward()
        self.value = self._compute(self.rhs.value, self.lhs.value)
        return self.value

    def backward(self, upstream_gradient: ArrayLike) -> None:
        """Set ``grad`` to ``w * lambda * 2 * lr / n`` for ``n`` upstream elements."""
        step = self.learning_rate / np.asarray(upstream_gradient).size
        alpha = self.lhs.value * (2.0 * step)
        self.grad = np.asarray(self.rhs.value * alpha, dtype=float)