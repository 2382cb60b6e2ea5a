"""3-vector helpers.

Vectors are plain ``(x, y, z)`` tuples of backend scalars. Inputs may be
any sequence that unpacks into three components (tuple, list, NumPy array,
1-D tensor).
"""

from __future__ import annotations

from quatmod.backend import divide, sqrt
from quatmod.types import Vector3, VectorLike


def dot3(a: VectorLike, b: VectorLike):
    """Dot product of two 3-vectors."""
    ax, ay, az = a
    bx, by, bz = b
    return ax * bx + ay * by + az * bz


def cross(a: VectorLike, b: VectorLike) -> Vector3:
    """Cross product ``a x b``."""
    ax, ay, az = a
    bx, by, bz = b
    return (
        ay * bz - az * by,
        az * bx - ax * bz,
        ax * by - ay * bx,
    )


def length3(v: VectorLike):
    return sqrt(dot3(v, v))


def normalize3(v: VectorLike) -> Vector3:
    """Scale ``v`` to unit length.

    A zero vector yields NaN components for every scalar kind.
    """
    x, y, z = v
    n = length3(v)
    return (divide(x, n), divide(y, n), divide(z, n))
