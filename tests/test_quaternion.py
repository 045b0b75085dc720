"""Tests for the general Quaternion class and the quaternion kernels."""

import jax
import jax.numpy as jnp
import pytest

from spinjax.position.vector import Vector3
from spinjax.rotations._kernels import (
    axis_to_quaternion,
    quaternion_magnitude,
    quaternion_multiply,
)
from spinjax.rotations.quaternion import Quaternion

ATOL = 1e-12


class TestQuaternionAlgebra:
    def test_unit_products(self):
        """i*j = k, j*k = i, k*i = j and i*i = -1."""
        i = Quaternion(0.0, 1.0, 0.0, 0.0)
        j = Quaternion(0.0, 0.0, 1.0, 0.0)
        k = Quaternion(0.0, 0.0, 0.0, 1.0)
        assert i * j == k
        assert j * k == i
        assert k * i == j
        assert i * i == Quaternion(-1.0, 0.0, 0.0, 0.0)
        assert j * i == -k

    def test_general_product(self):
        p = Quaternion(1.0, 2.0, 3.0, 4.0)
        q = Quaternion(5.0, 6.0, 7.0, 8.0)
        assert p * q == Quaternion(-60.0, 12.0, 30.0, 24.0)

    def test_add_sub_scale(self):
        p = Quaternion(1.0, 2.0, 3.0, 4.0)
        q = Quaternion(0.5, 0.5, 0.5, 0.5)
        assert p + q == Quaternion(1.5, 2.5, 3.5, 4.5)
        assert p - q == Quaternion(0.5, 1.5, 2.5, 3.5)
        assert p.scale(2.0) == Quaternion(2.0, 4.0, 6.0, 8.0)

    def test_norms(self):
        q = Quaternion(1.0, 2.0, 2.0, 4.0)
        assert float(q.sq_norm()) == pytest.approx(25.0)
        assert float(q.norm()) == pytest.approx(5.0)
        assert float(q.dot(Quaternion(1.0, 0.0, 0.0, 1.0))) == pytest.approx(5.0)

    def test_conjugate(self):
        assert Quaternion(1.0, 2.0, 3.0, 4.0).conjugate() == Quaternion(1.0, -2.0, -3.0, -4.0)

    def test_inverse(self):
        q = Quaternion(1.0, 2.0, 3.0, 4.0)
        assert q * q.inverse() == Quaternion.identity()
        assert q.inverse() * q == Quaternion.identity()

    def test_inverse_of_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            Quaternion(0.0, 0.0, 0.0, 0.0).inverse()


class TestQuaternionNormalization:
    def test_normalize_keeps_real_non_negative(self):
        n = Quaternion(-1.0, 1.0, 1.0, 1.0).normalize()
        assert n == Quaternion(0.5, -0.5, -0.5, -0.5)

    def test_normalize_zero_is_identity(self):
        assert Quaternion(0.0, 0.0, 0.0, 0.0).normalize() == Quaternion.identity()

    def test_normalize_vector(self):
        assert Quaternion(7.0, 0.0, 3.0, 4.0).normalize_vector() == Quaternion(0.0, 0.0, 0.6, 0.8)

    def test_normalize_vector_zero_is_unit_i(self):
        assert Quaternion(2.0, 0.0, 0.0, 0.0).normalize_vector() == Quaternion(0.0, 1.0, 0.0, 0.0)

    def test_vector_part(self):
        assert Quaternion(1.0, 2.0, 3.0, 4.0).vector_part() == Vector3(2.0, 3.0, 4.0)
        assert Quaternion.from_vector(Vector3(2.0, 3.0, 4.0)) == Quaternion(0.0, 2.0, 3.0, 4.0)


class TestQuaternionRotateVector:
    def test_rotate_about_z(self):
        c = jnp.cos(jnp.pi / 4)
        q = Quaternion(c, 0.0, 0.0, c)
        assert q.rotate_vector(Vector3(1.0, 0.0, 0.0)) == Vector3(0.0, 1.0, 0.0)

    def test_rotation_preserves_length(self):
        q = Quaternion(0.3, -0.4, 0.5, 0.2).normalize()
        v = Vector3(1.5, -2.0, 0.7)
        assert float(q.rotate_vector(v).magnitude()) == pytest.approx(float(v.magnitude()), abs=ATOL)


class TestKernels:
    def test_multiply_is_jittable(self):
        p = jnp.array([1.0, 2.0, 3.0, 4.0])
        q = jnp.array([5.0, 6.0, 7.0, 8.0])
        assert jnp.allclose(quaternion_multiply(p, q), jnp.array([-60.0, 12.0, 30.0, 24.0]))

    def test_axis_to_quaternion_zero_is_identity(self):
        q = axis_to_quaternion(jnp.zeros(3))
        assert jnp.allclose(q, jnp.array([1.0, 0.0, 0.0, 0.0]))

    def test_magnitude_clips_rounding(self):
        q = jnp.array([1.0 + 1e-15, 0.0, 0.0, 0.0])
        assert not bool(jnp.isnan(quaternion_magnitude(q)))

    def test_vmap_over_axes(self):
        axes = jnp.array([[0.1, 0.0, 0.0], [0.0, 0.2, 0.0], [0.0, 0.0, 0.3]])
        qs = jax.vmap(axis_to_quaternion)(axes)
        assert qs.shape == (3, 4)
        assert jnp.allclose(jax.vmap(quaternion_magnitude)(qs), jnp.array([0.1, 0.2, 0.3]))
