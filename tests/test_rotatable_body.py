"""Tests for RotatableBody, the torque suppliers and IntegratorConfig use.

Tests cover:
- Construction and property validation
- Derived quantities (local momentum, angular velocity, energy)
- Torque-free rotation about a principal axis
- Constant torque along a fixed axis against the closed form
- Energy conservation of a free asymmetric body
- Non-commutativity of successive rotations
- Torque suppliers and sub-step reporting
"""

import logging

import jax.numpy as jnp
import pytest

from spinjax.dynamics import (
    AdvanceResult,
    IntegratorConfig,
    RotatableBody,
    RotatingBody,
    body_fixed_torque,
    constant_torque,
    zero_torque,
)
from spinjax.position import Vector3
from spinjax.rotations import QUATERNION_SYSTEM

DYN_ATOL = 1e-3

X = Vector3(1.0, 0.0, 0.0)
Y = Vector3(0.0, 1.0, 0.0)


def _assert_vec_close(actual: Vector3, expected: Vector3, atol: float = DYN_ATOL):
    assert jnp.allclose(actual.to_array(), expected.to_array(), atol=atol), f"{actual} != {expected}"


# ===========================================================================
# Construction and properties
# ===========================================================================


class TestConstruction:
    def test_defaults(self):
        body = RotatableBody(Vector3(1.0, 2.0, 3.0))
        assert body.orientation == QUATERNION_SYSTEM.identity()
        assert body.momentum == Vector3.zero()
        assert body.elapsed_time == 0.0
        assert body.step_threshold == IntegratorConfig().step_threshold
        assert body.torque_supplier is zero_torque

    def test_config_threshold(self):
        body = RotatableBody(Vector3(1.0, 1.0, 1.0), config=IntegratorConfig.fine())
        assert body.step_threshold == 0.001

    @pytest.mark.parametrize("inertia", [(0.0, 1.0, 1.0), (1.0, 0.0, 1.0), (1.0, 1.0, 0.0)])
    def test_zero_inertia_raises(self, inertia):
        with pytest.raises(ValueError, match="inertia in all three dimensions"):
            RotatableBody(Vector3(*inertia))

    @pytest.mark.parametrize("threshold", [0.0, -0.5])
    def test_threshold_must_be_positive(self, threshold):
        body = RotatableBody(Vector3(1.0, 1.0, 1.0))
        with pytest.raises(ValueError, match="step_threshold must be positive"):
            body.step_threshold = threshold

    def test_elapsed_time_setter(self):
        body = RotatableBody(Vector3(1.0, 1.0, 1.0))
        body.elapsed_time = 2.5
        assert body.elapsed_time == 2.5

    def test_satisfies_protocol(self):
        assert isinstance(RotatableBody(Vector3(1.0, 1.0, 1.0)), RotatingBody)


# ===========================================================================
# Derived quantities
# ===========================================================================


class TestDerivedQuantities:
    def test_momentum_local(self):
        body = RotatableBody(Vector3(1.0, 2.0, 3.0), QUATERNION_SYSTEM.angle_xy(jnp.pi / 2))
        body.momentum = Vector3(0.0, 2.0, 0.0)
        _assert_vec_close(body.momentum_local(), Vector3(2.0, 0.0, 0.0), atol=1e-12)

    def test_angular_velocity_local(self):
        body = RotatableBody(Vector3(2.0, 4.0, 8.0))
        body.momentum = Vector3(2.0, 2.0, 2.0)
        _assert_vec_close(body.angular_velocity_local(), Vector3(1.0, 0.5, 0.25), atol=1e-12)

    def test_rotational_energy(self):
        body = RotatableBody(Vector3(1.0, 2.0, 3.0))
        body.momentum = Vector3(1.0, 2.0, 3.0)
        assert float(body.rotational_energy()) == pytest.approx(3.0)

    def test_energy_independent_of_global_frame(self):
        body = RotatableBody(Vector3(1.0, 2.0, 3.0))
        body.momentum = Vector3(1.0, 2.0, 3.0)
        before = float(body.rotational_energy())
        turn = QUATERNION_SYSTEM.from_axis(Vector3(0.3, -0.2, 0.9))
        body.rotate_by(turn)
        body.momentum = turn.rotate_vector(body.momentum)
        assert float(body.rotational_energy()) == pytest.approx(before)

    def test_torque_local(self):
        body = RotatableBody(Vector3(1.0, 1.0, 1.0), QUATERNION_SYSTEM.angle_xy(jnp.pi / 2))
        body.torque_supplier = constant_torque(Y)
        _assert_vec_close(body.torque_global(), Y, atol=1e-12)
        _assert_vec_close(body.torque_local(), X, atol=1e-12)


# ===========================================================================
# Mutators
# ===========================================================================


class TestMutators:
    def test_rotate_by_is_global(self):
        body = RotatableBody(Vector3(1.0, 1.0, 1.0), QUATERNION_SYSTEM.angle_zx(jnp.pi / 2))
        body.rotate_by(QUATERNION_SYSTEM.angle_xy(jnp.pi / 2))
        # z -> x by the first turn, then x -> y
        _assert_vec_close(body.orientation.rotate_vector(Vector3(0.0, 0.0, 1.0)), Y, atol=1e-12)

    def test_rotate_by_keeps_momentum(self):
        body = RotatableBody(Vector3(1.0, 1.0, 1.0))
        body.momentum = Vector3(1.0, 2.0, 3.0)
        body.rotate_by(QUATERNION_SYSTEM.angle_yz(0.7))
        assert body.momentum == Vector3(1.0, 2.0, 3.0)

    def test_apply_impulse(self):
        body = RotatableBody(Vector3(1.0, 1.0, 1.0))
        body.momentum = Vector3(1.0, 0.0, 0.0)
        body.apply_impulse(Vector3(0.5, -1.0, 2.0))
        assert body.momentum == Vector3(1.5, -1.0, 2.0)


# ===========================================================================
# Advance
# ===========================================================================


class TestAdvance:
    @pytest.mark.parametrize("duration", [0.0, -1.0])
    def test_non_positive_duration_is_noop(self, duration):
        body = RotatableBody(Vector3(1.0, 2.0, 3.0))
        body.momentum = Vector3(1.0, 1.0, 1.0)
        result = body.advance(duration)
        assert result.substeps == 0
        assert body.elapsed_time == 0.0
        assert body.orientation == QUATERNION_SYSTEM.identity()

    def test_result(self):
        body = RotatableBody(Vector3(1.0, 1.0, 1.0))
        body.momentum = Vector3(0.0, 0.0, 1.0)
        result = body.advance(0.5)
        assert isinstance(result, AdvanceResult)
        assert result.duration == 0.5
        # 0.01 rad per sub-step at 1 rad/s
        assert result.substeps == pytest.approx(50, abs=1)
        assert result.elapsed_time == pytest.approx(0.5)
        assert body.elapsed_time == pytest.approx(0.5)

    @pytest.mark.parametrize("threshold, substeps", [(0.01, 50), (0.04, 13)])
    def test_acceleration_limits_substeps(self, threshold, substeps):
        body = RotatableBody(Vector3(1.0, 1.0, 1.0), config=IntegratorConfig(step_threshold=threshold))
        body.torque_supplier = constant_torque(X)
        result = body.advance(0.5)
        # threshold / sqrt(1 rad/s^2) per sub-step while the spin-up is slow
        assert result.substeps == pytest.approx(substeps, abs=1)
        _assert_vec_close(body.momentum, Vector3(0.5, 0.0, 0.0), atol=1e-12)

    def test_free_body_at_rest_takes_one_step(self):
        body = RotatableBody(Vector3(1.0, 2.0, 3.0))
        result = body.advance(3.0)
        assert result.substeps == 1
        assert body.orientation == QUATERNION_SYSTEM.identity()

    def test_single_axis_rotation(self):
        body = RotatableBody(Vector3(2.0, 1.0, 1.0))
        body.momentum = Vector3(1.5, 0.0, 0.0)
        body.advance(0.3)
        _assert_vec_close(body.orientation.axis(), Vector3(0.225, 0.0, 0.0))

    def test_successive_rotations_do_not_commute(self):
        body = RotatableBody(Vector3(1.0, 1.0, 1.0))
        body.momentum = Vector3(1.0, 0.0, 0.0)
        body.advance(jnp.pi / 2)
        body.momentum = Vector3(0.0, 1.0, 0.0)
        body.advance(jnp.pi / 2)
        _assert_vec_close(body.orientation.rotate_vector(Vector3(1.0, 2.0, 3.0)), Vector3(2.0, -3.0, -1.0))

    @pytest.mark.parametrize(
        "inertia, momentum, torque, duration",
        [
            ((1.0, 2.0, 3.0), (1.0, 0.0, 0.0), (-1.0, 0.0, 0.0), 1.0),
            ((1.0, 2.0, 1.0), (0.0, 2.0, 0.0), (0.0, 1.0, 0.0), 0.5),
            ((1.0, 2.0, 1.0), (0.0, 0.0, 0.5), (0.0, 0.0, -1.0), 0.75),
            ((1.0, 1.0, 1.0), (1.0, 1.0, 0.0), (-2.0, -2.0, 0.0), 0.25),
        ],
    )
    def test_constant_torque_along_axis(self, inertia, momentum, torque, duration):
        inertia, momentum, torque = Vector3(*inertia), Vector3(*momentum), Vector3(*torque)
        body = RotatableBody(inertia)
        body.momentum = momentum
        body.torque_supplier = constant_torque(torque)
        body.advance(duration)

        _assert_vec_close(body.momentum, momentum + torque * duration)
        # turned by the time-average momentum over the interval
        mean_momentum = momentum + torque * (duration / 2.0)
        expected = QUATERNION_SYSTEM.from_axis(
            (mean_momentum * duration).elementwise_divide(inertia)
        )
        _assert_vec_close(body.orientation.axis(), expected.axis())

    def test_energy_conserved_without_torque(self):
        body = RotatableBody(Vector3(1.0, 2.0, 3.0), QUATERNION_SYSTEM.from_axis(Vector3(0.4, 0.2, 0.3)))
        body.momentum = Vector3(2.1, 2.3, 1.9)
        initial = float(body.rotational_energy())
        for _ in range(10):
            body.advance(1.0)
            assert abs(float(body.rotational_energy()) - initial) < DYN_ATOL
        _assert_vec_close(body.momentum, Vector3(2.1, 2.3, 1.9), atol=1e-12)

    def test_fine_threshold_agrees(self):
        def run(config):
            body = RotatableBody(Vector3(1.0, 2.0, 3.0), config=config)
            body.momentum = Vector3(0.3, 1.1, -0.4)
            body.torque_supplier = body_fixed_torque(Vector3(0.2, 0.0, 0.1))
            body.advance(1.0)
            return body

        default, fine = run(IntegratorConfig()), run(IntegratorConfig.fine())
        probe = Vector3(1.0, 2.0, 3.0)
        _assert_vec_close(default.orientation.rotate_vector(probe), fine.orientation.rotate_vector(probe))
        _assert_vec_close(default.momentum, fine.momentum)

    def test_coarse_steps_correct_for_non_commuting_rotations(self):
        def run(threshold):
            body = RotatableBody(Vector3(1.0, 2.0, 3.0), config=IntegratorConfig(step_threshold=threshold))
            body.momentum = Vector3(2.1, 2.3, 1.9)
            body.advance(3.0)
            return body.orientation.rotate_vector(Vector3(1.0, 2.0, 3.0))

        _assert_vec_close(run(0.1), run(0.0005), atol=1e-4)

    def test_logs_advance(self, caplog):
        caplog.set_level(logging.DEBUG, logger="spinjax.dynamics.rotatable_body")
        body = RotatableBody(Vector3(1.0, 1.0, 1.0))
        body.advance(1.0)
        assert "Advanced RotatableBody" in caplog.text


# ===========================================================================
# Torque suppliers
# ===========================================================================


class TestTorqueSuppliers:
    def test_zero_torque(self):
        assert zero_torque(QUATERNION_SYSTEM.identity(), 3.0) == Vector3.zero()

    def test_constant_torque_ignores_state(self):
        supplier = constant_torque(Vector3(1.0, 2.0, 3.0))
        assert supplier(QUATERNION_SYSTEM.angle_xy(1.0), 5.0) == Vector3(1.0, 2.0, 3.0)

    def test_body_fixed_torque_follows_orientation(self):
        supplier = body_fixed_torque(X)
        _assert_vec_close(supplier(QUATERNION_SYSTEM.angle_xy(jnp.pi / 2), 0.0), Y, atol=1e-12)

    def test_body_fixed_spin_up(self):
        body = RotatableBody(Vector3(1.0, 1.0, 1.0))
        body.torque_supplier = body_fixed_torque(Vector3(0.0, 0.0, 1.0))
        body.advance(1.0)
        _assert_vec_close(body.momentum, Vector3(0.0, 0.0, 1.0))
        _assert_vec_close(body.orientation.axis(), Vector3(0.0, 0.0, 0.5))

    def test_supplier_receives_elapsed_time(self):
        body = RotatableBody(Vector3(1.0, 1.0, 1.0))
        body.torque_supplier = lambda orientation, time: Vector3(0.0, 0.0, time)
        body.advance(1.0)
        _assert_vec_close(body.momentum, Vector3(0.0, 0.0, 0.5))

    def test_supplier_sees_time_offset(self):
        body = RotatableBody(Vector3(1.0, 1.0, 1.0))
        body.elapsed_time = 10.0
        body.torque_supplier = lambda orientation, time: Vector3(time, 0.0, 0.0)
        _assert_vec_close(body.torque_global(0.5), Vector3(10.5, 0.0, 0.0), atol=1e-12)
