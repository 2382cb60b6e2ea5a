"""Value types for quatmod.

A quaternion is a scalar part ``w`` plus a vector part ``v``, kept in a
frozen dataclass so it behaves as a plain value. Components may be builtin
floats, NumPy floating scalars or 0-d PyTorch tensors (see
:mod:`quatmod.backend`); every operation returns components of the kind it
was given.

Quaternion Convention: (w, x, y, z) - scalar first
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeAlias, TypeVar

import numpy as np

from quatmod.backend import is_scalar, is_torch_tensor

if TYPE_CHECKING:
    import torch

# Scalar component type (float, np.floating or 0-d torch.Tensor)
T = TypeVar("T")

# 3D vector (direction, axis or point); results are always tuples
Vector3 = tuple[T, T, T]

# Anything that unpacks into three components
VectorLike: TypeAlias = Sequence[float] | np.ndarray


@dataclass(frozen=True)
class Quaternion(Generic[T]):
    """Quaternion ``w + x*i + y*j + z*k`` with ``v = (x, y, z)``.

    Operators map onto the functional API: ``a + b`` is :func:`add`,
    ``a * b`` is the Hamilton product :func:`mul`, ``q * t`` and ``t * q``
    are :func:`scale`, and ``~q`` is :func:`conj`.

    Example:
        >>> q = Quaternion(1.0, (0.0, 0.0, 0.0))
        >>> q * Quaternion(0.0, (1.0, 0.0, 0.0))
        Quaternion(w=0.0, v=(1.0, 0.0, 0.0))
    """

    w: T
    v: tuple[T, T, T]

    # NumPy scalars must defer to __rmul__ instead of broadcasting over us
    __array_ufunc__ = None

    def __post_init__(self):
        x, y, z = self.v
        object.__setattr__(self, "v", (x, y, z))

    @classmethod
    def from_array(cls, values: Sequence[T] | np.ndarray | torch.Tensor) -> Quaternion[T]:
        """Build a quaternion from ``[w, x, y, z]``.

        Elements keep their scalar kind: NumPy arrays give NumPy scalars and
        tensors give 0-d tensors.

        :param values: Sequence, NumPy array or torch tensor with 4 elements
        :returns: Quaternion
        :raises ValueError: If ``values`` does not hold exactly 4 elements
        """
        shape = getattr(values, "shape", None)
        if shape is not None and tuple(shape) != (4,):
            raise ValueError(f"Quaternion must be shape (4,), got {tuple(shape)}")
        if len(values) != 4:
            raise ValueError(f"Quaternion must have 4 elements (w, x, y, z), got {len(values)}")
        w, x, y, z = values
        return cls(w, (x, y, z))

    def to_array(self, dtype=None) -> np.ndarray:
        """Return ``[w, x, y, z]`` as a NumPy array.

        :param dtype: Optional output dtype (defaults to the components' dtype)
        :returns: Array of shape (4,)
        """
        components = [c.item() if is_torch_tensor(c) else c for c in self]
        return np.array(components, dtype=dtype)

    def to_tensor(self, dtype=None, device=None) -> torch.Tensor:
        """Return ``[w, x, y, z]`` as a PyTorch tensor.

        :param dtype: Optional torch dtype
        :param device: Optional torch device
        :returns: Tensor of shape (4,)
        """
        import torch

        if is_torch_tensor(self.w):
            return torch.stack(list(self)).to(device=device, dtype=dtype)
        return torch.tensor(self.to_array(), dtype=dtype, device=device)

    def __iter__(self) -> Iterator[T]:
        yield self.w
        yield from self.v

    def __add__(self, other: Quaternion[T]) -> Quaternion[T]:
        if not isinstance(other, Quaternion):
            return NotImplemented
        from quatmod.algebra import add

        return add(self, other)

    def __radd__(self, other):
        """Support sum() with initial value 0."""
        if other == 0:
            return self
        return self.__add__(other)

    def __mul__(self, other):
        from quatmod.algebra import mul, scale

        if isinstance(other, Quaternion):
            return mul(self, other)
        if not is_scalar(other):
            return NotImplemented
        return scale(self, other)

    def __rmul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        from quatmod.algebra import scale

        return scale(self, other)

    def __invert__(self) -> Quaternion[T]:
        from quatmod.algebra import conj

        return conj(self)
