"""Rotational dynamics of a rigid body in its principal frame.

Provides :class:`RotatableBody`, which tracks a body's orientation and
angular momentum and advances them in time under an external torque.

The body's local axes are its principal axes, so its inertia is a
diagonal given by a :class:`~spinjax.position.vector.Vector3`.  Momentum is
stored in global coordinates, where it is conserved in the absence of
torque; angular velocity is derived from it in local coordinates.

Integration scheme
------------------
``advance`` splits the requested duration into adaptive sub-steps.  Each
sub-step ``h`` is short enough that neither the current angular velocity
nor the current angular acceleration turns the body by more than the
step threshold.  Within a sub-step:

1. Local angular velocities are estimated at ``0``, ``h/2`` and ``h`` by
   chaining trial rotations of ``h/4``, ``h/2`` and ``h``.  Each estimate
   is rotated by half of its trial rotation, correcting for the
   non-commutativity of rotations.
2. The orientation advances by the Simpson-weighted average
   ``(v0 + 4 v_half + v_full) / 6`` applied as one local rotation.
3. Momentum advances by the trapezoidal rule on the torque at the start
   and end of the sub-step.

Runge-Kutta integrators do not apply directly because angular velocities
taken at different orientations do not add.
"""

from __future__ import annotations

import logging

import jax.numpy as jnp
from jax import Array

from spinjax.dynamics._types import AdvanceResult, TorqueSupplier
from spinjax.dynamics.config import IntegratorConfig
from spinjax.dynamics.torques import zero_torque
from spinjax.position.vector import Vector3
from spinjax.rotations.quaternion_rotation import QUATERNION_SYSTEM
from spinjax.rotations.rotation import Rotation

logger = logging.getLogger(__name__)


class RotatableBody:
    """Rigid body rotating under an external torque.

    Args:
        inertia (Vector3): Moments of inertia about the local x, y and z
            axes.  All three must be non-zero.
        orientation (Rotation): Local-to-global orientation.  Defaults to
            the identity of the quaternion system.
        config (IntegratorConfig): Sub-stepping controls.

    Raises:
        ValueError: If any inertia component is zero.

    Examples:
        ```python
        from spinjax.dynamics import RotatableBody
        from spinjax.position import Vector3
        body = RotatableBody(Vector3(1.0, 2.0, 3.0))
        body.momentum = Vector3(0.0, 0.0, 3.0)
        body.advance(1.0)
        body.orientation.magnitude()  # ~ 1.0
        ```
    """

    def __init__(
        self,
        inertia: Vector3,
        orientation: Rotation | None = None,
        config: IntegratorConfig | None = None,
    ) -> None:
        if bool(jnp.any(inertia.to_array() == 0.0)):
            raise ValueError("Rotatable body must have inertia in all three dimensions.")
        if config is None:
            config = IntegratorConfig()
        if orientation is None:
            orientation = QUATERNION_SYSTEM.identity()

        self._inertia = inertia
        self._orientation = orientation
        self._momentum = Vector3.zero()
        self._elapsed_time = 0.0
        self._config = config
        self._step_threshold = config.step_threshold
        self._torque_supplier: TorqueSupplier = zero_torque

    # Properties

    @property
    def inertia(self) -> Vector3:
        """Principal moments of inertia in local coordinates."""
        return self._inertia

    @property
    def orientation(self) -> Rotation:
        """Local-to-global orientation."""
        return self._orientation

    @orientation.setter
    def orientation(self, value: Rotation) -> None:
        self._orientation = value

    @property
    def momentum(self) -> Vector3:
        """Angular momentum in global coordinates."""
        return self._momentum

    @momentum.setter
    def momentum(self, value: Vector3) -> None:
        self._momentum = value

    @property
    def elapsed_time(self) -> float:
        """Total time advanced so far, passed to the torque supplier."""
        return self._elapsed_time

    @elapsed_time.setter
    def elapsed_time(self, value: float) -> None:
        self._elapsed_time = float(value)

    @property
    def step_threshold(self) -> float:
        """Largest rotation a single sub-step may produce [rad]."""
        return self._step_threshold

    @step_threshold.setter
    def step_threshold(self, value: float) -> None:
        if value <= 0.0:
            raise ValueError(f"step_threshold must be positive, got {value}")
        self._step_threshold = float(value)

    @property
    def torque_supplier(self) -> TorqueSupplier:
        """Callable giving the global torque for an orientation and time."""
        return self._torque_supplier

    @torque_supplier.setter
    def torque_supplier(self, value: TorqueSupplier) -> None:
        self._torque_supplier = value

    # Derived quantities

    def momentum_local(self) -> Vector3:
        """Angular momentum in local coordinates."""
        return self._orientation.inverse().rotate_vector(self._momentum)

    def angular_velocity_local(self) -> Vector3:
        """Angular velocity in local coordinates."""
        return self._local_velocity(self._orientation, self._momentum)

    def torque_global(self, delay: float = 0.0) -> Vector3:
        """Torque at the current orientation, ``delay`` after the elapsed time."""
        return self._torque_supplier(self._orientation, self._elapsed_time + delay)

    def torque_local(self, delay: float = 0.0) -> Vector3:
        """:meth:`torque_global` in local coordinates."""
        return self._orientation.inverse().rotate_vector(self.torque_global(delay))

    def rotational_energy(self) -> Array:
        """Kinetic energy ``0.5 * sum(L_local^2 / I)``."""
        local = self.momentum_local().to_array()
        return 0.5 * jnp.sum(local * local / self._inertia.to_array())

    # Mutators

    def rotate_by(self, rotation: Rotation) -> None:
        """Turn the body by an external (global) rotation.

        Momentum is left unchanged.
        """
        self._orientation = rotation.compose(self._orientation)

    def apply_impulse(self, impulse: Vector3) -> None:
        """Add an angular impulse (global coordinates) to the momentum."""
        self._momentum = self._momentum + impulse

    def advance(self, duration: float) -> AdvanceResult:
        """Advance orientation, momentum and elapsed time by ``duration``.

        Args:
            duration: Time to advance.  Non-positive values do nothing.

        Returns:
            AdvanceResult: Duration, number of sub-steps and the new
            elapsed time.
        """
        remaining = float(duration)
        substeps = 0
        while remaining > 0.0:
            v0 = self.angular_velocity_local()
            h = self._step_length(v0, remaining)
            start_half = self.torque_global(0.0) * (h / 2.0)

            v_quarter = self._velocity_after_rotation(v0, h / 4.0)
            v_half = self._velocity_after_rotation(v_quarter, h / 2.0)
            v_full = self._velocity_after_rotation(v_half, h)
            average = (v0 + v_half * 4.0 + v_full) / 6.0

            self._orientation = self._orientation.compose(
                self._orientation.system.from_axis(average * h)
            )
            self._elapsed_time += h

            end_half = self.torque_global(0.0) * (h / 2.0)
            self._momentum = self._momentum + start_half + end_half
            remaining -= h
            substeps += 1

        logger.debug(
            "Advanced %s by %.6g in %d sub-steps (elapsed %.6g)",
            type(self).__name__,
            duration,
            substeps,
            self._elapsed_time,
        )
        return AdvanceResult(float(duration), substeps, self._elapsed_time)

    # Internals

    def _local_velocity(self, orientation: Rotation, momentum: Vector3) -> Vector3:
        local = orientation.inverse().rotate_vector(momentum).to_array()
        return Vector3._from_internal(local / self._inertia.to_array())

    def _step_length(self, velocity: Vector3, remaining: float) -> float:
        """Sub-step length limited by angular velocity and acceleration."""
        config = self._config
        threshold = self._step_threshold

        speed = float(velocity.magnitude())
        velocity_time = remaining
        if speed >= config.velocity_floor:
            velocity_time = min(threshold / speed, remaining)

        acceleration = self.torque_local(0.0).to_array() / self._inertia.to_array()
        accel = float(jnp.linalg.norm(acceleration))
        accel_time = remaining
        if accel >= config.acceleration_floor:
            accel_time = min(threshold / accel ** 0.5, remaining)

        return min(velocity_time, accel_time)

    def _velocity_after_rotation(self, velocity: Vector3, time: float) -> Vector3:
        """Local angular velocity after turning at ``velocity`` for ``time``.

        The body itself is not modified.  The result is rotated by half of
        the trial rotation.
        """
        system = self._orientation.system
        half_shift = system.from_axis(velocity * (time / 2.0))
        rotated = self._orientation.compose(system.from_axis(velocity * time))
        torque = self._torque_supplier(rotated, self._elapsed_time + time / 2.0)
        momentum = self._momentum + torque * time
        return half_shift.rotate_vector(self._local_velocity(rotated, momentum))

    def __repr__(self) -> str:
        return (
            f"RotatableBody(orientation={self._orientation!r}, momentum={self._momentum!r}, "
            f"inertia={self._inertia!r}, step_threshold={self._step_threshold})"
        )
