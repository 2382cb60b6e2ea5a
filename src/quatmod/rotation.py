"""Rotation construction and application.

Rotation quaternions are unit quaternions. :func:`rotate_vector` and
:func:`axis_angle` trust their inputs to be unit length;
:func:`rotation_from_to` normalizes the directions it is given.

Example:
    >>> import math
    >>> from quatmod import axis_angle, rotate_vector
    >>> q = axis_angle((0.0, 0.0, 1.0), math.pi / 2)  # 90 deg about Z
    >>> rotate_vector(q, (1.0, 0.0, 0.0))  # ~(0, 1, 0)
"""

from __future__ import annotations

import logging
import math

from quatmod.algebra import conj, identity_like, mul
from quatmod.backend import cos, like, sin
from quatmod.config import DEFAULT_TOLERANCES, RotationTolerances
from quatmod.norm import normalize
from quatmod.types import Quaternion, Vector3, VectorLike
from quatmod.vector import cross, dot3, length3, normalize3

logger = logging.getLogger(__name__)


def rotate_vector(q: Quaternion, v: VectorLike) -> Vector3:
    """Rotate vector ``v`` by quaternion ``q``.

    Computes ``q * (0, v) * conj(q)`` and returns its vector part. ``q`` is
    expected to be unit length; other quaternions also scale the result.

    :param q: Unit quaternion (w, x, y, z)
    :param v: Vector [3]
    :returns: Rotated vector (x, y, z)
    """
    x, y, z = v
    pure = Quaternion(like(q.w, 0.0), (x, y, z))
    return mul(mul(q, pure), conj(q)).v


def axis_angle(axis: VectorLike, theta) -> Quaternion:
    """Rotation of ``theta`` radians about ``axis``.

    :param axis: Unit axis [3]; not normalized here
    :param theta: Angle in radians
    :returns: Quaternion ``(cos(theta/2), axis * sin(theta/2))``
    """
    half_angle = theta / 2
    sin_half = sin(half_angle)
    x, y, z = axis
    return Quaternion(cos(half_angle), (x * sin_half, y * sin_half, z * sin_half))


def euler_angles(x, y, z) -> Quaternion:
    """Rotation from Euler angles in radians.

    :param x: Roll (rotation about X)
    :param y: Pitch (rotation about Y)
    :param z: Yaw (rotation about Z)
    :returns: Unit quaternion (w, x, y, z)
    """
    half_x = x / 2
    half_y = y / 2
    half_z = z / 2

    sx, cx = sin(half_x), cos(half_x)
    sy, cy = sin(half_y), cos(half_y)
    sz, cz = sin(half_z), cos(half_z)

    w = cz * cy * cx + sz * sy * sx
    qx = cz * cy * sx - sz * sy * cx
    qy = cz * sy * cx + sz * cy * sx
    qz = sz * cy * cx - cz * sy * sx

    return Quaternion(w, (qx, qy, qz))


def rotation_from_to(
    a: VectorLike, b: VectorLike, tolerances: RotationTolerances | None = None
) -> Quaternion:
    """Shortest-arc rotation taking direction ``a`` onto direction ``b``.

    Both inputs are normalized first. Aligned inputs give the identity;
    opposite inputs (where ``(1 + d, a x b)`` degenerates) give a 180 degree
    turn about an axis perpendicular to ``a``.

    :param a: Source direction [3], any length; a zero vector gives an all-NaN result
    :param b: Target direction [3], any length; a zero vector gives an all-NaN result
    :param tolerances: Branch thresholds (defaults to DEFAULT_TOLERANCES)
    :returns: Unit quaternion q with ``rotate_vector(q, a)`` parallel to ``b``

    Example:
        >>> q = rotation_from_to([1, 1, 1], [-1, -1, -1])
        >>> rotate_vector(q, [1, 1, 1])  # ~(-1, -1, -1)
    """
    if tolerances is None:
        tolerances = DEFAULT_TOLERANCES

    a = normalize3(a)
    b = normalize3(b)
    d = dot3(a, b)

    if d >= tolerances.parallel_threshold:
        logger.debug("[Rotation] Directions aligned (dot=%s), returning identity", d)
        return identity_like(d)

    if d < tolerances.antiparallel_threshold:
        one, zero = like(d, 1.0), like(d, 0.0)
        axis = cross((one, zero, zero), a)
        if length3(axis) == 0:
            # a lies on X
            axis = cross((zero, one, zero), a)
        axis = normalize3(axis)
        logger.debug("[Rotation] Directions opposite (dot=%s), turning 180 deg about %s", d, axis)
        return axis_angle(axis, like(d, math.pi))

    return normalize(Quaternion(1 + d, cross(a, b)))
