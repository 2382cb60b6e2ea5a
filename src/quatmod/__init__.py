"""
quatmod - Type-generic quaternion algebra

Minimal quaternion math for composing and applying 3D rotations.

Features:
- One value type, ``Quaternion(w, v)``, scalar first
- Generic over the scalar kind: builtin float, NumPy float16/32/64 scalars,
  PyTorch 0-d tensors on any device (dtype and device preserved)
- Algebra: identity, add, scale, dot, mul (Hamilton product), conj
- Norm: square_len, length, normalize
- Rotation: rotate_vector, axis_angle, euler_angles, rotation_from_to
- Pure functions, no shared state, safe from any thread

Example - Functional API:
    >>> import math
    >>> from quatmod import axis_angle, mul, rotate_vector, rotation_from_to
    >>>
    >>> yaw = axis_angle((0.0, 0.0, 1.0), math.pi / 2)
    >>> pitch = axis_angle((0.0, 1.0, 0.0), math.pi / 4)
    >>> rotate_vector(mul(yaw, pitch), (1.0, 0.0, 0.0))
    >>>
    >>> # Shortest arc between two directions
    >>> q = rotation_from_to([1, 1, 1], [-1, -1, -1])

Example - Operators:
    >>> from quatmod import Quaternion
    >>>
    >>> a = Quaternion(1.0, (0.0, 0.0, 0.0))
    >>> b = Quaternion(1.0, (1.0, 1.0, 1.0))
    >>> a + b, a * b, 5.0 * a, ~b

Example - Single precision:
    >>> import numpy as np
    >>> from quatmod import RotationTolerances, identity
    >>>
    >>> q = identity(np.float32)
    >>> tol = RotationTolerances.for_dtype(np.float32)
"""

__version__ = "0.1.0"

from quatmod.algebra import add, conj, dot, identity, identity_like, mul, scale
from quatmod.config import DEFAULT_TOLERANCES, RotationTolerances
from quatmod.norm import length, normalize, square_len
from quatmod.rotation import axis_angle, euler_angles, rotate_vector, rotation_from_to
from quatmod.types import Quaternion, Vector3
from quatmod.verification import QuaternionVerifier

__all__ = [
    # Types
    "Quaternion",
    "Vector3",
    # Algebra
    "identity",
    "identity_like",
    "add",
    "scale",
    "dot",
    "mul",
    "conj",
    # Norm & length
    "square_len",
    "length",
    "normalize",
    # Rotation
    "rotate_vector",
    "axis_angle",
    "euler_angles",
    "rotation_from_to",
    # Configuration
    "RotationTolerances",
    "DEFAULT_TOLERANCES",
    # Verification
    "QuaternionVerifier",
    # Version
    "__version__",
]
