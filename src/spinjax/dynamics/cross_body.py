"""Rotatable body whose principal axes differ from its reference frame.

Provides :class:`CrossRotatableBody`, which lets a body with a non-diagonal
inertia tensor be driven as if it were described in its original frame.
Internally the body is integrated in its principal frame by a wrapped
:class:`~spinjax.dynamics.rotatable_body.RotatableBody`; a fixed
*correction* rotation ``C`` converts between the two.

For an external orientation ``a`` the inner body stores ``a * C^-1``, and
reading the orientation returns ``inner * C``.  Setting and then reading an
orientation therefore returns the same value.
"""

from __future__ import annotations

from jax import Array

from spinjax.dynamics._types import AdvanceResult, TorqueSupplier
from spinjax.dynamics.config import IntegratorConfig
from spinjax.dynamics.rotatable_body import RotatableBody
from spinjax.dynamics.torques import zero_torque
from spinjax.position.vector import Vector3
from spinjax.rotations.rotation import Rotation


class CrossRotatableBody:
    """Rotatable body with a correction between reference and principal frames.

    The body starts at the identity external orientation with zero
    momentum.  Torque suppliers assigned to it receive the external
    orientation.

    Args:
        inertia (Vector3): Principal moments of inertia.  All three must be
            non-zero.
        correction (Rotation): Rotation taking the reference frame to the
            principal frame, as found by
            :func:`~spinjax.inertia.principal_axes.find_principal_rotation`.
        config (IntegratorConfig): Sub-stepping controls.

    Raises:
        ValueError: If any inertia component is zero.
    """

    def __init__(
        self,
        inertia: Vector3,
        correction: Rotation,
        config: IntegratorConfig | None = None,
    ) -> None:
        self._correction = correction
        self._correction_inverse = correction.inverse()
        self._inner = RotatableBody(inertia, self._correction_inverse, config)
        self._torque_supplier: TorqueSupplier = zero_torque

    # Properties

    @property
    def correction(self) -> Rotation:
        """Rotation taking the reference frame to the principal frame."""
        return self._correction

    @property
    def inner_orientation(self) -> Rotation:
        """Orientation of the principal frame, as integrated."""
        return self._inner.orientation

    @property
    def orientation(self) -> Rotation:
        """External (reference-frame) orientation."""
        return self._inner.orientation.compose(self._correction)

    @orientation.setter
    def orientation(self, value: Rotation) -> None:
        self._inner.orientation = value.compose(self._correction_inverse)

    @property
    def inertia(self) -> Vector3:
        """Principal moments of inertia."""
        return self._inner.inertia

    @property
    def momentum(self) -> Vector3:
        """Angular momentum in global coordinates."""
        return self._inner.momentum

    @momentum.setter
    def momentum(self, value: Vector3) -> None:
        self._inner.momentum = value

    @property
    def elapsed_time(self) -> float:
        """Total time advanced so far."""
        return self._inner.elapsed_time

    @elapsed_time.setter
    def elapsed_time(self, value: float) -> None:
        self._inner.elapsed_time = value

    @property
    def step_threshold(self) -> float:
        """Largest rotation a single sub-step may produce [rad]."""
        return self._inner.step_threshold

    @step_threshold.setter
    def step_threshold(self, value: float) -> None:
        self._inner.step_threshold = value

    @property
    def torque_supplier(self) -> TorqueSupplier:
        """Callable giving the global torque for an external orientation and time."""
        return self._torque_supplier

    @torque_supplier.setter
    def torque_supplier(self, value: TorqueSupplier) -> None:
        self._torque_supplier = value
        correction = self._correction
        self._inner.torque_supplier = lambda r, t: value(r.compose(correction), t)

    # Forwarded operations

    def momentum_local(self) -> Vector3:
        """Angular momentum in principal-frame coordinates."""
        return self._inner.momentum_local()

    def angular_velocity_local(self) -> Vector3:
        """Angular velocity in principal-frame coordinates."""
        return self._inner.angular_velocity_local()

    def torque_global(self, delay: float = 0.0) -> Vector3:
        """Torque at the current orientation, ``delay`` after the elapsed time."""
        return self._inner.torque_global(delay)

    def rotational_energy(self) -> Array:
        """Kinetic energy of the rotation."""
        return self._inner.rotational_energy()

    def rotate_by(self, rotation: Rotation) -> None:
        """Turn the body by an external (global) rotation."""
        self._inner.rotate_by(rotation)

    def apply_impulse(self, impulse: Vector3) -> None:
        """Add an angular impulse (global coordinates) to the momentum."""
        self._inner.apply_impulse(impulse)

    def advance(self, duration: float) -> AdvanceResult:
        """Advance the body by ``duration``; see :meth:`RotatableBody.advance`."""
        return self._inner.advance(duration)

    def __repr__(self) -> str:
        return f"CrossRotatableBody(inner={self._inner!r}, correction={self._correction!r})"
