"""Quaternion norm and length."""

from __future__ import annotations

from quatmod.algebra import dot
from quatmod.backend import divide, sqrt
from quatmod.types import Quaternion


def square_len(q: Quaternion):
    """Squared norm ``w^2 + v . v``; identical to ``dot(q, q)``."""
    return dot(q, q)


def length(q: Quaternion):
    """Norm of ``q``.

    NaN components propagate; the result is never an exception.
    """
    return sqrt(square_len(q))


def normalize(q: Quaternion) -> Quaternion:
    """Divide ``q`` by its length.

    A zero quaternion gives NaN components rather than raising.

    :param q: Quaternion (w, x, y, z), not necessarily unit
    :returns: Unit quaternion pointing the same way as ``q``
    """
    n = length(q)
    x, y, z = q.v
    return Quaternion(divide(q.w, n), (divide(x, n), divide(y, n), divide(z, n)))
