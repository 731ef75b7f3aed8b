"""Nodes of a computation graph for reverse-mode differentiation."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from numpy.typing import ArrayLike


class Node(ABC):
    """A value in a computation graph.

    Every node exposes its current output as ``value`` and the gradient
    received in the last backward pass as ``grad``.
    """

    value: np.ndarray
    grad: np.ndarray

    @abstractmethod
    def forward(self) -> np.ndarray:
        """Recompute ``value`` from the node's inputs and return it."""

    @abstractmethod
    def backward(self, upstream_gradient: ArrayLike) -> None:
        """Take the gradient from upstream and pass it on to the inputs."""


class Value(Node):
    """Leaf node holding an array and its gradient.

    The gradient starts out as a copy of the value. Graph operations keep a
    reference to the same ``Value`` object, so changes made through it are
    seen by every operation that uses it.
    """

    def __init__(self, value: ArrayLike) -> None:
        arr = np.array(value, dtype=float)
        self.value = arr
        self.grad = arr.copy()

    def __repr__(self) -> str:
        return f"Value(shape={self.value.shape})"

    def forward(self) -> np.ndarray:
        """Return the stored array; a leaf has no inputs to recompute from."""
        return self.value

    def backward(self, upstream_gradient: ArrayLike) -> None:
        """Store the upstream gradient."""
        self.grad = np.array(upstream_gradient, dtype=float)