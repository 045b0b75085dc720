"""Type definitions for rotational dynamics.

Provides:

- :data:`TorqueSupplier`: callable giving the external torque on a body.
- :class:`AdvanceResult`: summary of one ``advance`` call.
- :class:`RotatingBody`: the protocol shared by
  :class:`~spinjax.dynamics.rotatable_body.RotatableBody` and
  :class:`~spinjax.dynamics.cross_body.CrossRotatableBody`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple, Protocol, runtime_checkable

from jax import Array

from spinjax.position.vector import Vector3
from spinjax.rotations.rotation import Rotation

TorqueSupplier = Callable[[Rotation, float], Vector3]
"""Maps ``(orientation, absolute_time)`` to a torque in global coordinates.

The orientation passed is the body's public, local-to-global orientation
(for a trial sub-step, the orientation the body would have at that
point).  Suppliers must not mutate the body.
"""


class AdvanceResult(NamedTuple):
    """Result of :meth:`RotatableBody.advance`.

    Attributes:
        duration: Time span that was integrated.
        substeps: Number of adaptive sub-steps taken.
        elapsed_time: Body's elapsed time after the call.
    """

    duration: float
    substeps: int
    elapsed_time: float


@runtime_checkable
class RotatingBody(Protocol):
    """A rigid body whose orientation and momentum evolve in time."""

    @property
    def orientation(self) -> Rotation: ...

    @orientation.setter
    def orientation(self, value: Rotation) -> None: ...

    @property
    def momentum(self) -> Vector3: ...

    @momentum.setter
    def momentum(self, value: Vector3) -> None: ...

    @property
    def inertia(self) -> Vector3: ...

    @property
    def elapsed_time(self) -> float: ...

    def advance(self, duration: float) -> AdvanceResult: ...

    def rotational_energy(self) -> Array: ...

    def rotate_by(self, rotation: Rotation) -> None: ...

    def apply_impulse(self, impulse: Vector3) -> None: ...
