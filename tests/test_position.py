"""Tests for the position module: Vector3, axis mappings and aviation vectors."""

import jax
import jax.numpy as jnp
import pytest

from spinjax.position import (
    AviationAxis,
    AviationMapping,
    AviationVector,
    CartesianAxis,
    DimensionMapping,
    Vector3,
)


def _classic_mapping() -> AviationMapping:
    return AviationMapping([
        DimensionMapping(AviationAxis.VERTICAL, CartesianAxis.Z),
        DimensionMapping(AviationAxis.LATERAL, CartesianAxis.X),
        DimensionMapping(AviationAxis.LONGITUDINAL, CartesianAxis.Y),
    ])


def _pointy_mapping() -> AviationMapping:
    return AviationMapping([
        DimensionMapping(AviationAxis.VERTICAL, CartesianAxis.Y),
        DimensionMapping(AviationAxis.LATERAL, CartesianAxis.X, inverse=True),
        DimensionMapping(AviationAxis.LONGITUDINAL, CartesianAxis.Z),
    ])


# ===========================================================================
# Vector3
# ===========================================================================


class TestVector3:
    def test_components(self):
        v = Vector3(1.0, 2.0, 3.0)
        assert float(v.x) == 1.0
        assert float(v.y) == 2.0
        assert float(v.z) == 3.0

    def test_arithmetic(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(0.5, -1.0, 2.0)
        assert a + b == Vector3(1.5, 1.0, 5.0)
        assert a - b == Vector3(0.5, 3.0, 1.0)
        assert -a == Vector3(-1.0, -2.0, -3.0)
        assert a * 2.0 == Vector3(2.0, 4.0, 6.0)
        assert 2.0 * a == Vector3(2.0, 4.0, 6.0)
        assert a / 2.0 == Vector3(0.5, 1.0, 1.5)

    def test_magnitude(self):
        v = Vector3(3.0, 4.0, 12.0)
        assert float(v.magnitude()) == pytest.approx(13.0)
        assert float(v.sq_magnitude()) == pytest.approx(169.0)

    def test_normalize(self):
        assert Vector3(0.0, 3.0, 4.0).normalize() == Vector3(0.0, 0.6, 0.8)

    def test_normalize_zero_is_unit_x(self):
        assert Vector3.zero().normalize() == Vector3(1.0, 0.0, 0.0)

    def test_dot_cross(self):
        x = Vector3(1.0, 0.0, 0.0)
        y = Vector3(0.0, 1.0, 0.0)
        assert float(x.dot(y)) == 0.0
        assert x.cross(y) == Vector3(0.0, 0.0, 1.0)

    def test_distance(self):
        assert float(Vector3(1.0, 1.0, 1.0).distance(Vector3(1.0, 4.0, 5.0))) == pytest.approx(5.0)

    def test_elementwise(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(2.0, 4.0, 6.0)
        assert a.elementwise_product(b) == Vector3(2.0, 8.0, 18.0)
        assert b.elementwise_divide(a) == Vector3(2.0, 2.0, 2.0)

    def test_elementwise_divide_by_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            Vector3(1.0, 1.0, 1.0).elementwise_divide(Vector3(1.0, 0.0, 1.0))

    def test_from_array_shape_check(self):
        with pytest.raises(ValueError, match="shape"):
            Vector3.from_array(jnp.zeros(4))

    def test_equality_tolerance(self):
        assert Vector3(1.0, 2.0, 3.0) == Vector3(1.0, 2.0, 3.0 + 1e-14)
        assert Vector3(1.0, 2.0, 3.0) != Vector3(1.0, 2.0, 3.001)

    def test_pytree_roundtrip(self):
        v = Vector3(1.0, 2.0, 3.0)
        leaves, treedef = jax.tree_util.tree_flatten(v)
        assert len(leaves) == 1
        assert jax.tree_util.tree_unflatten(treedef, leaves) == v


# ===========================================================================
# Axis mappings
# ===========================================================================


class TestDimensionMapping:
    def test_sign(self):
        assert DimensionMapping(AviationAxis.VERTICAL, CartesianAxis.Z).sign == 1.0
        assert DimensionMapping(AviationAxis.VERTICAL, CartesianAxis.Z, inverse=True).sign == -1.0

    def test_from_sign(self):
        m = DimensionMapping.from_sign(AviationAxis.LATERAL, -2.0, CartesianAxis.X)
        assert m.inverse
        assert DimensionMapping.from_sign(AviationAxis.LATERAL, 1.0, CartesianAxis.X).inverse is False


class TestAviationMapping:
    def test_lookup(self):
        mapping = _classic_mapping()
        assert mapping.vertical.xyz == CartesianAxis.Z
        assert mapping.x.aviation == AviationAxis.LATERAL
        assert mapping.for_cartesian(CartesianAxis.Y).aviation == AviationAxis.LONGITUDINAL
        assert mapping.for_aviation(AviationAxis.LATERAL).xyz == CartesianAxis.X

    def test_wrong_length_raises(self):
        with pytest.raises(ValueError, match="length of 3"):
            AviationMapping([DimensionMapping(AviationAxis.VERTICAL, CartesianAxis.Z)])

    def test_missing_cartesian_axis_raises(self):
        with pytest.raises(ValueError, match="Y not specified"):
            AviationMapping([
                DimensionMapping(AviationAxis.VERTICAL, CartesianAxis.Z),
                DimensionMapping(AviationAxis.LATERAL, CartesianAxis.X),
                DimensionMapping(AviationAxis.LONGITUDINAL, CartesianAxis.X),
            ])

    def test_missing_aviation_axis_raises(self):
        with pytest.raises(ValueError, match="Vertical not specified"):
            AviationMapping([
                DimensionMapping(AviationAxis.LATERAL, CartesianAxis.Z),
                DimensionMapping(AviationAxis.LATERAL, CartesianAxis.X),
                DimensionMapping(AviationAxis.LONGITUDINAL, CartesianAxis.Y),
            ])

    def test_vector_coordinates(self):
        v = Vector3(1.0, 2.0, 3.0)
        pointy = _pointy_mapping()
        assert float(v.longitudinal(pointy)) == 3.0
        assert float(v.lateral(pointy)) == -1.0
        assert float(v.vertical(pointy)) == 2.0


class TestAviationVector:
    def test_to_vector(self):
        av = AviationVector(longitudinal=1.0, lateral=2.0, vertical=3.0)
        assert av.to_vector(_classic_mapping()) == Vector3(2.0, 1.0, 3.0)
        assert av.to_vector(_pointy_mapping()) == Vector3(-2.0, 3.0, 1.0)

    def test_unit(self):
        assert AviationVector.unit(AviationAxis.VERTICAL) == AviationVector(0.0, 0.0, 1.0)

    def test_roundtrip(self):
        mapping = _pointy_mapping()
        v = Vector3(0.3, -1.2, 2.5)
        assert AviationVector.from_vector(v, mapping).to_vector(mapping) == v
