# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

Pure 2D vector helpers used by the force model and the particle update.
All functions operate on 2D vectors represented as numpy arrays of shape (2,).
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Allows tuple/list inputs for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def displacement(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Vector pointing from b to a (a - b)."""
    return np.array([a[0] - b[0], a[1] - b[1]], dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    """
    Return a unit (normalized) vector in the same direction as v.

    Returns zero vector if |v| < eps to avoid division by zero.
    """
    n = norm(v)
    if n < eps:
        return np.zeros(2, dtype=np.float64)
    return v / n


def clamp(value, lo, hi):
    """Limit value to the closed interval [lo, hi]."""
    return max(lo, min(hi, value))
