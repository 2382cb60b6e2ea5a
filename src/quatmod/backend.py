"""Scalar backends for quaternion components.

Every component of a quaternion is a scalar of one kind. This module picks
the matching math functions and literal conversion for that kind, so the
algebra is written once and works for all of them:

- builtin ``float``: :mod:`math`
- NumPy scalars and arrays: NumPy ufuncs (dtype preserved)
- PyTorch tensors: torch functions (dtype and device preserved)

PyTorch is only imported once a tensor or torch dtype is actually seen.
"""

from __future__ import annotations

import math
import numbers
from typing import Any

import numpy as np


def is_torch_tensor(x) -> bool:
    """Check if input is a PyTorch tensor without importing torch."""
    return type(x).__module__.startswith("torch")


def is_torch_dtype(dtype) -> bool:
    """Check if dtype is a ``torch.dtype`` without importing torch."""
    return type(dtype).__module__.startswith("torch")


def _is_numpy(x) -> bool:
    return isinstance(x, np.generic | np.ndarray)


def sqrt(x):
    """Square root in the scalar kind of ``x``.

    Negative builtin floats give NaN instead of raising, matching the
    NumPy and PyTorch backends.
    """
    if is_torch_tensor(x):
        import torch

        return torch.sqrt(x)
    if _is_numpy(x):
        return np.sqrt(x)
    return math.sqrt(x) if x >= 0 else math.nan


def sin(x):
    """Sine in the scalar kind of ``x`` (radians)."""
    if is_torch_tensor(x):
        import torch

        return torch.sin(x)
    if _is_numpy(x):
        return np.sin(x)
    return math.sin(x) if math.isfinite(x) else math.nan


def cos(x):
    """Cosine in the scalar kind of ``x`` (radians)."""
    if is_torch_tensor(x):
        import torch

        return torch.cos(x)
    if _is_numpy(x):
        return np.cos(x)
    return math.cos(x) if math.isfinite(x) else math.nan


def divide(x, n):
    """``x / n`` with IEEE semantics for every scalar kind.

    Builtin numbers divided by zero give NaN (``0/0``) or a signed infinity
    instead of raising, matching the NumPy and PyTorch backends.
    """
    if _is_builtin_number(x) and _is_builtin_number(n) and n == 0:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, n)
    return x / n


def _is_builtin_number(x) -> bool:
    return isinstance(x, int | float) and not _is_numpy(x)


def is_scalar(x) -> bool:
    """Check if ``x`` is a single number: builtin, NumPy scalar or 0-d array/tensor."""
    if is_torch_tensor(x):
        return x.dim() == 0
    if isinstance(x, np.ndarray):
        return x.ndim == 0
    return isinstance(x, numbers.Number)


def like(x, value: float):
    """Convert a float literal to the scalar kind of ``x``.

    Integer inputs map to a floating kind: NumPy integers promote the way
    NumPy promotes them against a float, torch integers use the default
    torch dtype.

    :param x: Reference scalar (float, NumPy scalar/array or tensor)
    :param value: Literal to convert
    :returns: ``value`` as the same scalar kind as ``x``

    Example:
        >>> like(np.float32(2.0), 0.5)
        np.float32(0.5)
    """
    if is_torch_tensor(x):
        import torch

        dtype = x.dtype if x.is_floating_point() else torch.get_default_dtype()
        return torch.as_tensor(value, dtype=dtype, device=x.device)
    if _is_numpy(x):
        return np.result_type(x.dtype, np.float16).type(value)
    return float(value)


def constant(value: float, dtype: Any = float, device=None):
    """Build a scalar of the requested kind.

    :param value: Literal value
    :param dtype: ``float`` for builtin floats, a NumPy dtype, or a torch dtype
    :param device: Torch device; implies a tensor result
    :returns: Scalar holding ``value``

    Example:
        >>> constant(1.0)
        1.0
        >>> constant(1.0, np.float32)
        np.float32(1.0)
    """
    if device is not None or is_torch_dtype(dtype):
        import torch

        torch_dtype = dtype if is_torch_dtype(dtype) else None
        return torch.tensor(value, dtype=torch_dtype, device=device)
    if dtype is float:
        return float(value)
    return np.dtype(dtype).type(value)
