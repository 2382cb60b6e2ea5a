"""Quaternion algebra: identity, addition, scaling, dot product, Hamilton
product and conjugation.

Every function is pure and returns a new :class:`Quaternion` whose
components have the same scalar kind as the inputs.

Example:
    >>> from quatmod import Quaternion, add, identity, mul
    >>> q = Quaternion(1.0, (1.0, 1.0, 1.0))
    >>> add(identity(), q)
    Quaternion(w=2.0, v=(1.0, 1.0, 1.0))
    >>> mul(identity(), q) == q
    True
"""

from __future__ import annotations

from quatmod.backend import constant, like
from quatmod.types import Quaternion


def identity(dtype=float, device=None) -> Quaternion:
    """Return the identity quaternion ``(1, [0, 0, 0])``.

    Multiplicative identity under :func:`mul`; represents "no rotation".

    :param dtype: ``float``, a NumPy dtype, or a torch dtype
    :param device: Torch device (implies tensor components)
    :returns: Identity quaternion
    """
    one = constant(1.0, dtype, device)
    zero = constant(0.0, dtype, device)
    return Quaternion(one, (zero, zero, zero))


def identity_like(x) -> Quaternion:
    """Identity quaternion with components of the same kind as scalar ``x``."""
    one = like(x, 1.0)
    zero = like(x, 0.0)
    return Quaternion(one, (zero, zero, zero))


def add(a: Quaternion, b: Quaternion) -> Quaternion:
    """Component-wise sum of two quaternions."""
    ax, ay, az = a.v
    bx, by, bz = b.v
    return Quaternion(a.w + b.w, (ax + bx, ay + by, az + bz))


def scale(q: Quaternion, t) -> Quaternion:
    """Multiply scalar and vector parts of ``q`` by scalar ``t``."""
    x, y, z = q.v
    return Quaternion(q.w * t, (x * t, y * t, z * t))


def dot(a: Quaternion, b: Quaternion):
    """4-vector dot product ``a.w*b.w + a.v . b.v``."""
    ax, ay, az = a.v
    bx, by, bz = b.v
    return a.w * b.w + ax * bx + ay * by + az * bz


def mul(a: Quaternion, b: Quaternion) -> Quaternion:
    """Hamilton product ``a * b``.

    scalar: ``a.w*b.w - a.v . b.v``
    vector: ``a.w*b.v + b.w*a.v + a.v x b.v``

    Not commutative. For rotations, ``mul(a, b)`` applies ``b`` first.

    :param a: Left quaternion (w, x, y, z)
    :param b: Right quaternion (w, x, y, z)
    :returns: Product quaternion
    """
    w1, (x1, y1, z1) = a.w, a.v
    w2, (x2, y2, z2) = b.w, b.v

    w = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2
    x = w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2
    y = w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2
    z = w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2

    return Quaternion(w, (x, y, z))


def conj(a: Quaternion) -> Quaternion:
    """Conjugate ``(w, -v)``; the inverse of a unit quaternion."""
    x, y, z = a.v
    return Quaternion(a.w, (-x, -y, -z))
