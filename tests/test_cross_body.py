"""Tests for CrossRotatableBody.

Tests cover:
- External orientation round trip and the identity start
- Torque suppliers seeing the external orientation
- Equivalence with a principal-frame body carrying a known tilt
- Kinetic energy against finite differences of the point-mass motion
"""

import jax.numpy as jnp
import pytest

from spinjax.dynamics import CrossRotatableBody, RotatableBody, RotatingBody
from spinjax.inertia import (
    InertiaTensor,
    PointMass,
    build_aligned_body,
    distribute_rotation,
    stack_point_masses,
)
from spinjax.position import Vector3
from spinjax.rotations import QUATERNION_SYSTEM

DYN_ATOL = 1e-3


def _assert_vec_close(actual: Vector3, expected: Vector3, atol: float = DYN_ATOL):
    assert jnp.allclose(actual.to_array(), expected.to_array(), atol=atol), f"{actual} != {expected}"


@pytest.fixture
def correction():
    return QUATERNION_SYSTEM.from_axis(Vector3(0.2, -0.5, 0.4))


@pytest.fixture
def body(correction):
    return CrossRotatableBody(Vector3(1.0, 2.0, 3.0), correction)


# ===========================================================================
# Orientation bookkeeping
# ===========================================================================


class TestOrientation:
    def test_starts_at_identity(self, body, correction):
        assert body.orientation == QUATERNION_SYSTEM.identity()
        assert body.inner_orientation == correction.inverse()

    def test_round_trip(self, body):
        target = QUATERNION_SYSTEM.from_axis(Vector3(-0.7, 0.1, 1.2))
        body.orientation = target
        assert body.orientation == target

    def test_rotate_by_is_global(self, body):
        turn = QUATERNION_SYSTEM.angle_yz(0.4)
        body.rotate_by(turn)
        assert body.orientation == turn

    def test_forwarded_state(self, body):
        body.momentum = Vector3(0.5, 0.0, 0.0)
        body.apply_impulse(Vector3(0.0, 1.0, 0.0))
        assert body.momentum == Vector3(0.5, 1.0, 0.0)
        body.elapsed_time = 4.0
        assert body.elapsed_time == 4.0
        body.step_threshold = 0.05
        assert body.step_threshold == 0.05
        assert body.inertia == Vector3(1.0, 2.0, 3.0)

    def test_satisfies_protocol(self, body):
        assert isinstance(body, RotatingBody)


# ===========================================================================
# Torque suppliers
# ===========================================================================


class TestTorque:
    def test_supplier_receives_external_orientation(self, body):
        seen = []

        def supplier(orientation, time):
            seen.append(orientation)
            return Vector3.zero()

        target = QUATERNION_SYSTEM.angle_xy(0.6)
        body.orientation = target
        body.torque_supplier = supplier
        body.torque_global()
        assert seen[-1] == target
        assert body.torque_supplier is supplier


# ===========================================================================
# Dynamics
# ===========================================================================


def _axis_masses(center: Vector3) -> list[PointMass]:
    out = []
    for moment, axis in ((1.0, Vector3(1.0, 0.0, 0.0)),
                         (2.0, Vector3(0.0, 1.0, 0.0)),
                         (3.0, Vector3(0.0, 0.0, 1.0))):
        out.append(PointMass(0.5 * moment, axis + center))
        out.append(PointMass(0.5 * moment, -axis + center))
    return out


class TestDynamics:
    def test_matches_tilted_principal_body(self):
        tilt = QUATERNION_SYSTEM.from_axis(Vector3(-0.4, 0.6, 0.7))
        start = QUATERNION_SYSTEM.angle_xy(1.0)
        tilted_tensor = InertiaTensor.centered(
            distribute_rotation(_axis_masses(Vector3(0.4, 0.2, 0.6)), tilt)
        )

        def torque(orientation, time):
            return orientation.rotate_vector(Vector3(1.2, 0.8, -0.3 + time))

        tilt_inverse = tilt.inverse()
        principal = RotatableBody(Vector3(5.0, 4.0, 3.0), tilt)
        principal.rotate_by(start)
        principal.torque_supplier = lambda r, t: torque(r.compose(tilt_inverse), t)
        principal.momentum = Vector3(1.2, 2.1, 2.9)

        cross = build_aligned_body(QUATERNION_SYSTEM, tilted_tensor)
        cross.orientation = start
        cross.torque_supplier = torque
        cross.momentum = Vector3(1.2, 2.1, 2.9)

        principal.advance(1.0)
        cross.advance(1.0)

        probe = Vector3(3.0, 2.0, 1.0)
        _assert_vec_close(
            principal.orientation.compose(tilt_inverse).rotate_vector(probe),
            cross.orientation.rotate_vector(probe),
        )
        _assert_vec_close(principal.momentum, cross.momentum)

    def test_energy_matches_point_mass_motion(self):
        masses = [
            PointMass(1.1, Vector3(0.8, 0.2, 0.0)),
            PointMass(0.8, Vector3(-0.6, -0.5, 0.0)),
            PointMass(3.6, Vector3(0.8, 0.4, 1.0)),
            PointMass(2.4, Vector3(2.2, 0.0, -1.0)),
            PointMass(1.3, Vector3(0.0, 0.8, -0.5)),
        ]
        m, r = stack_point_masses(masses)
        # tensor about the origin, so the body spins about the origin
        body = build_aligned_body(QUATERNION_SYSTEM, InertiaTensor.from_point_masses(masses))
        body.momentum = Vector3(1.43724, -0.8226, 0.3115)

        dt = 1e-3
        previous = body.orientation.rotate_array(r)
        for _ in range(300):
            body.advance(dt)
            current = body.orientation.rotate_array(r)
            speed_sq = jnp.sum((current - previous) ** 2, axis=-1) / dt ** 2
            true_energy = 0.5 * float(jnp.sum(m * speed_sq))
            assert abs(true_energy - float(body.rotational_energy())) < DYN_ATOL
            previous = current
