"""Approximate comparison utilities for quaternions and vectors.

Floating-point results are only equal up to rounding, and ``q`` and ``-q``
describe the same rotation. These helpers compare with a tolerance and work
for every scalar kind (builtin float, NumPy, torch).

Example:
    >>> from quatmod.verification import QuaternionVerifier
    >>>
    >>> q = rotation_from_to(a, b)
    >>> QuaternionVerifier.assert_close(rotate_vector(q, a), b)
    >>> QuaternionVerifier.is_unit(q)
    True
"""

from __future__ import annotations

import logging

from quatmod.algebra import scale
from quatmod.norm import square_len
from quatmod.types import Quaternion, VectorLike

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-5


def _components(x: Quaternion | VectorLike) -> list[float]:
    return [float(c) for c in x]


class QuaternionVerifier:
    """Utilities for approximate quaternion and vector comparison."""

    @staticmethod
    def max_difference(actual: Quaternion | VectorLike, expected: Quaternion | VectorLike) -> float:
        """Largest absolute component difference.

        :param actual: Quaternion or vector
        :param expected: Quaternion or vector of the same size
        :return: max |actual[i] - expected[i]|
        :raises ValueError: If the sizes differ
        """
        a = _components(actual)
        b = _components(expected)
        if len(a) != len(b):
            raise ValueError(f"Size mismatch: {len(a)} vs {len(b)} components")
        return max(abs(x - y) for x, y in zip(a, b, strict=True))

    @staticmethod
    def is_close(
        actual: Quaternion | VectorLike,
        expected: Quaternion | VectorLike,
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> bool:
        """Check that every component differs by at most ``tolerance``."""
        return QuaternionVerifier.max_difference(actual, expected) <= tolerance

    @staticmethod
    def is_unit(q: Quaternion, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Check that ``square_len(q)`` is within ``tolerance`` of 1."""
        return abs(float(square_len(q)) - 1.0) <= tolerance

    @staticmethod
    def same_rotation(a: Quaternion, b: Quaternion, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Check that ``a`` and ``b`` rotate identically (``q`` or ``-q``)."""
        return QuaternionVerifier.is_close(a, b, tolerance) or QuaternionVerifier.is_close(
            a, scale(b, -1), tolerance
        )

    @staticmethod
    def assert_close(
        actual: Quaternion | VectorLike,
        expected: Quaternion | VectorLike,
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> None:
        """Assert component-wise closeness.

        :param actual: Result under test
        :param expected: Reference value
        :param tolerance: Maximum allowed absolute difference per component
        :raises AssertionError: If any component differs by more than ``tolerance``
        """
        diff = QuaternionVerifier.max_difference(actual, expected)
        if diff > tolerance:
            raise AssertionError(
                f"Max component difference {diff:.3e} exceeds tolerance {tolerance:.1e}\n"
                f"  actual:   {_components(actual)}\n"
                f"  expected: {_components(expected)}"
            )

        logger.debug("[QuaternionVerifier] Match within %.1e (max diff %.3e)", tolerance, diff)
