"""Tests for the Quaternion value type."""

import dataclasses

import numpy as np
import pytest

from quatmod import Quaternion, conj, identity, mul, scale


class TestConstruction:
    """Test building quaternions."""

    def test_fields(self):
        """Test w and v are stored as given."""
        q = Quaternion(1.0, (2.0, 3.0, 4.0))
        assert q.w == 1.0
        assert q.v == (2.0, 3.0, 4.0)

    def test_vector_part_stored_as_tuple(self):
        """Test list and array vector parts become tuples."""
        assert Quaternion(0.0, [1.0, 2.0, 3.0]).v == (1.0, 2.0, 3.0)
        q = Quaternion(0.0, np.array([1.0, 2.0, 3.0], dtype=np.float32))
        assert isinstance(q.v, tuple)
        assert all(isinstance(c, np.float32) for c in q.v)

    def test_wrong_vector_size_raises(self):
        """Test vector parts must have 3 components."""
        with pytest.raises(ValueError):
            Quaternion(0.0, (1.0, 2.0))

    def test_frozen(self):
        """Test quaternions are immutable."""
        q = identity()
        with pytest.raises(dataclasses.FrozenInstanceError):
            q.w = 2.0

    def test_hashable(self):
        """Test equal quaternions hash equally."""
        assert len({identity(), Quaternion(1.0, (0.0, 0.0, 0.0))}) == 1


class TestArrayInterop:
    """Test from_array / to_array."""

    def test_from_list(self):
        """Test [w, x, y, z] ordering."""
        assert Quaternion.from_array([1.0, 2.0, 3.0, 4.0]) == Quaternion(1.0, (2.0, 3.0, 4.0))

    def test_from_numpy_keeps_dtype(self):
        """Test NumPy elements stay NumPy scalars."""
        q = Quaternion.from_array(np.array([1, 0, 0, 0], dtype=np.float32))
        assert all(isinstance(c, np.float32) for c in q)

    def test_from_array_wrong_length(self):
        """Test sequences must have 4 elements."""
        with pytest.raises(ValueError, match="must have 4 elements"):
            Quaternion.from_array([1.0, 0.0, 0.0])

    def test_from_array_wrong_shape(self):
        """Test arrays must be shape (4,)."""
        with pytest.raises(ValueError, match=r"must be shape \(4,\), got \(4, 4\)"):
            Quaternion.from_array(np.eye(4))

    def test_to_array(self):
        """Test to_array gives [w, x, y, z]."""
        arr = Quaternion(1.0, (2.0, 3.0, 4.0)).to_array()
        np.testing.assert_array_equal(arr, [1.0, 2.0, 3.0, 4.0])
        assert arr.dtype == np.float64

    def test_to_array_dtype(self):
        """Test to_array keeps component dtype or casts on request."""
        q = identity(np.float32)
        assert q.to_array().dtype == np.float32
        assert q.to_array(dtype=np.float64).dtype == np.float64

    def test_iter_unpacking(self):
        """Test a quaternion unpacks as w, x, y, z."""
        w, x, y, z = Quaternion(1.0, (2.0, 3.0, 4.0))
        assert (w, x, y, z) == (1.0, 2.0, 3.0, 4.0)


class TestOperators:
    """Test operator overloads map onto the functional API."""

    a = Quaternion(1.0, (2.0, 3.0, 4.0))
    b = Quaternion(0.5, (-1.0, 0.0, 2.0))

    def test_add(self):
        """Test a + b."""
        assert self.a + self.b == Quaternion(1.5, (1.0, 3.0, 6.0))

    def test_sum(self):
        """Test sum() over quaternions."""
        assert sum([self.a, self.b, identity()]) == Quaternion(2.5, (1.0, 3.0, 6.0))

    def test_add_rejects_other_types(self):
        """Test adding a non-quaternion raises TypeError."""
        with pytest.raises(TypeError):
            self.a + 1.0

    def test_mul_quaternion(self):
        """Test a * b is the Hamilton product."""
        assert self.a * self.b == mul(self.a, self.b)
        assert self.b * self.a == mul(self.b, self.a)

    def test_mul_scalar(self):
        """Test q * t and t * q scale."""
        assert self.a * 2.0 == scale(self.a, 2.0)
        assert 2.0 * self.a == scale(self.a, 2.0)

    def test_numpy_scalar_rmul(self):
        """Test NumPy scalars on the left scale instead of broadcasting."""
        q = identity(np.float32)
        result = np.float32(3.0) * q
        assert isinstance(result, Quaternion)
        assert result.w == 3.0

    def test_invert(self):
        """Test ~q is the conjugate."""
        assert ~self.a == conj(self.a)

    def test_mul_rejects_strings(self):
        """Test multiplying by a non-number raises TypeError."""
        with pytest.raises(TypeError):
            self.a * "x"
        with pytest.raises(TypeError):
            "x" * self.a

    def test_mul_rejects_arrays(self):
        """Test multiplying by a NumPy vector raises instead of broadcasting."""
        with pytest.raises(TypeError):
            self.a * np.ones(3)
        with pytest.raises(TypeError):
            np.ones(3) * self.a

    def test_mul_zero_dim_array(self):
        """Test a 0-d array scales like a scalar."""
        assert self.a * np.array(2.0) == scale(self.a, np.array(2.0))
