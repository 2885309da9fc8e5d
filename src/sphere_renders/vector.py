"""
Point and vector arithmetic for the sphere renderer.

Points and directions are NumPy float arrays. A single vector has shape (3,);
a batch of vectors has shape (N, 3). Every operation returns a new array and
reductions (dot, length) run over the last axis, so the same functions serve
one ray or a whole canvas of rays.
"""
import numpy as np

from sphere_renders.errors import DegenerateVectorError


def point(x, y, z):
    """Create an immutable 3D point/vector."""
    p = np.array([x, y, z], dtype=float)
    p.flags.writeable = False
    return p


def as_vectors(v):
    """Coerce input to a float array of shape (3,) or (N, 3)."""
    arr = np.asarray(v, dtype=float)
    if arr.ndim not in (1, 2) or arr.shape[-1] != 3:
        raise ValueError(f"Expected a (3,) or (N, 3) array, got shape {arr.shape}")
    return arr


def add(a, b):
    return np.add(a, b)


def sub(a, b):
    return np.subtract(a, b)


def scale(v, k):
    """
    Multiply vectors by scalars.

    Args:
        v: (3,) or (N, 3) vectors
        k: scalar, or (N,) array with one factor per vector
    """
    k = np.asarray(k, dtype=float)
    if k.ndim == 1:
        k = k[:, None]
    return np.multiply(v, k)


def divide(v, k):
    """
    Divide vectors by scalars.

    Raises:
        DegenerateVectorError: if any divisor is zero.
    """
    k = np.asarray(k, dtype=float)
    if np.any(k == 0.0):
        raise DegenerateVectorError("Cannot divide a vector by zero")
    if k.ndim == 1:
        k = k[:, None]
    return np.divide(v, k)


def dot(a, b):
    return np.sum(np.multiply(a, b), axis=-1)


def length(v):
    return np.sqrt(dot(v, v))


def normalize(v):
    """Return unit-length copies of *v*; zero-length input is degenerate."""
    return divide(v, length(v))
