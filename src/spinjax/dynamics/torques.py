"""Ready-made torque suppliers.

Each supplier has the :data:`~spinjax.dynamics._types.TorqueSupplier`
signature ``(orientation, time) -> Vector3`` and returns a torque in global
coordinates.
"""

from __future__ import annotations

from spinjax.dynamics._types import TorqueSupplier
from spinjax.position.vector import Vector3
from spinjax.rotations.rotation import Rotation


def zero_torque(orientation: Rotation, time: float) -> Vector3:
    """Supplier for a torque-free body."""
    return Vector3.zero()


def constant_torque(torque: Vector3) -> TorqueSupplier:
    """Supplier returning the same global torque at every call.

    Args:
        torque: Torque in global coordinates.

    Returns:
        TorqueSupplier: The supplier.
    """

    def supplier(orientation: Rotation, time: float) -> Vector3:
        return torque

    return supplier


def body_fixed_torque(torque: Vector3) -> TorqueSupplier:
    """Supplier for a torque fixed to the body, such as a thruster.

    Args:
        torque: Torque in the body's local coordinates.

    Returns:
        TorqueSupplier: Supplier rotating ``torque`` into global
        coordinates with the body's current orientation.

    Examples:
        ```python
        body.torque_supplier = body_fixed_torque(Vector3(0.0, 0.0, 0.1))
        ```
    """

    def supplier(orientation: Rotation, time: float) -> Vector3:
        return orientation.rotate_vector(torque)

    return supplier
