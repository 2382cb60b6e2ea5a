"""Numeric tolerances for rotation construction.

:func:`quatmod.rotation.rotation_from_to` switches branches on the dot
product of its normalized inputs. The thresholds live in a frozen dataclass
so callers can tighten or loosen them per call without global state.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from quatmod.backend import is_torch_dtype


@dataclass(frozen=True)
class RotationTolerances:
    """Branch thresholds for shortest-arc rotation construction.

    Attributes:
        parallel_threshold: Dot product at or above which the directions
            count as aligned and the identity is returned
        antiparallel_threshold: Dot product below which the directions count
            as opposite and a 180 degree fallback rotation is built

    Example:
        >>> strict = RotationTolerances(antiparallel_threshold=-0.99999999)
        >>> q = rotation_from_to(a, b, tolerances=strict)
    """

    parallel_threshold: float = 1.0
    antiparallel_threshold: float = -0.999999

    def __post_init__(self):
        if not 0.0 < self.parallel_threshold <= 1.0:
            raise ValueError(
                f"parallel_threshold={self.parallel_threshold} is outside valid range (0.0, 1.0]"
            )
        if not -1.0 <= self.antiparallel_threshold < 0.0:
            raise ValueError(
                f"antiparallel_threshold={self.antiparallel_threshold} "
                "is outside valid range [-1.0, 0.0)"
            )

    @classmethod
    def for_dtype(cls, dtype) -> RotationTolerances:
        """Tolerances suited to the precision of ``dtype``.

        The ``(1 + d, a x b)`` construction loses relative precision as
        ``d`` approaches -1, so lower precisions switch to the fallback
        branch earlier.

        :param dtype: ``float``, a NumPy floating dtype, or a torch floating dtype
        :returns: RotationTolerances for that precision
        """
        if is_torch_dtype(dtype):
            import torch

            bits = torch.finfo(dtype).bits
        else:
            bits = np.finfo(dtype).bits

        threshold = _ANTIPARALLEL_BY_BITS.get(bits)
        if threshold is None:
            return DEFAULT_TOLERANCES
        return cls(antiparallel_threshold=threshold)


# Half and single precision
_ANTIPARALLEL_BY_BITS = {
    16: -0.99,
    32: -0.9999,
}

DEFAULT_TOLERANCES = RotationTolerances()
