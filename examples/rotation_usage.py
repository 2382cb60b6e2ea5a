"""
Example: quaternion rotation usage.

Demonstrates how to use quatmod for:
- Building rotations from axis-angle and Euler angles
- Composing rotations and rotating vectors
- Shortest-arc rotation between two directions
- Single precision and PyTorch components
"""

import logging
import math

import numpy as np

from quatmod import (
    QuaternionVerifier,
    RotationTolerances,
    axis_angle,
    conj,
    euler_angles,
    length,
    mul,
    rotate_vector,
    rotation_from_to,
)

# Configure logging to see which rotation_from_to branch is taken
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


def example_1_axis_angle():
    """Example 1: Rotate a vector 90 degrees about Z."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Axis-Angle Rotation")
    print("=" * 70)

    q = axis_angle((0.0, 0.0, 1.0), math.pi / 2)
    v = rotate_vector(q, (1.0, 0.0, 0.0))

    print(f"Quaternion: {q}")
    print(f"X rotated 90 deg about Z: ({v[0]:.3f}, {v[1]:.3f}, {v[2]:.3f})")


def example_2_composition():
    """Example 2: Compose yaw and pitch, then undo with the conjugate."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Composition")
    print("=" * 70)

    yaw = axis_angle((0.0, 0.0, 1.0), math.radians(30))
    pitch = axis_angle((0.0, 1.0, 0.0), math.radians(45))
    combined = mul(yaw, pitch)  # pitch first, then yaw

    v = (1.0, 2.0, 3.0)
    rotated = rotate_vector(combined, v)
    restored = rotate_vector(conj(combined), rotated)

    from_euler = euler_angles(0.0, math.radians(45), math.radians(30))

    print(f"Same as Euler angles: {QuaternionVerifier.is_close(combined, from_euler)}")
    print(f"|q| = {length(combined):.6f}")
    print(f"Rotated {v} -> ({rotated[0]:.3f}, {rotated[1]:.3f}, {rotated[2]:.3f})")
    print(f"Restored by conjugate: {QuaternionVerifier.is_close(restored, v)}")


def example_3_shortest_arc():
    """Example 3: Rotation taking one direction onto another."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Shortest Arc")
    print("=" * 70)

    pairs = [
        ([1.0, 0.0, 0.0], [0.0, 1.0, 0.0]),  # general
        ([0.0, 0.0, 2.0], [0.0, 0.0, 5.0]),  # aligned
        ([1.0, 1.0, 1.0], [-1.0, -1.0, -1.0]),  # opposite
    ]
    for a, b in pairs:
        q = rotation_from_to(a, b)
        mapped = rotate_vector(q, a)
        x, y, z = mapped
        print(f"{a} -> {b}: w={q.w:.4f}, rotated a = ({x:.3f}, {y:.3f}, {z:.3f})")


def example_4_single_precision():
    """Example 4: float32 components with matching tolerances."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Single Precision")
    print("=" * 70)

    a = np.array([0.0, 1.0, 0.0], dtype=np.float32)
    b = np.array([0.0, -1.0, 1e-3], dtype=np.float32)
    tolerances = RotationTolerances.for_dtype(np.float32)

    q = rotation_from_to(a, b, tolerances=tolerances)
    print(f"Component type: {type(q.w).__name__}")
    print(f"Antiparallel threshold: {tolerances.antiparallel_threshold}")
    print(f"Unit: {QuaternionVerifier.is_unit(q)}")


def example_5_torch():
    """Example 5: PyTorch tensors as components (skipped without torch)."""
    print("\n" + "=" * 70)
    print("EXAMPLE 5: PyTorch Components")
    print("=" * 70)

    try:
        import torch
    except ImportError:
        print("PyTorch not installed, skipping")
        return

    device = "cuda" if torch.cuda.is_available() else "cpu"
    a = torch.tensor([1.0, 0.0, 0.0], dtype=torch.float64, device=device)
    b = torch.tensor([0.0, 0.0, 1.0], dtype=torch.float64, device=device)

    q = rotation_from_to(a, b)
    print(f"Tensor quaternion on {device}: {q.to_tensor()}")


def main():
    """Run all examples."""
    print("\n" + "=" * 70)
    print("QUATMOD ROTATION EXAMPLES")
    print("=" * 70)

    example_1_axis_angle()
    example_2_composition()
    example_3_shortest_arc()
    example_4_single_precision()
    example_5_torch()

    print("\n" + "=" * 70)
    print("ALL EXAMPLES COMPLETED")
    print("=" * 70)


if __name__ == "__main__":
    main()
