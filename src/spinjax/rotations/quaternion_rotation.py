"""Unit-quaternion realization of :class:`~spinjax.rotations.rotation.Rotation`.

Provides:

- :class:`QuaternionRotation` -- an immutable rotation stored as a
  quaternion in canonical form (non-negative real part).
- :class:`QuaternionSystem` -- the right-handed factory for such rotations.
- :data:`QUATERNION_SYSTEM` -- the shared system instance.

Composition renormalizes its result, so long chains of small rotations
(as produced by the integrator) do not drift away from unit length.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

from spinjax.config import get_dtype
from spinjax.position.axes import SpatialParity
from spinjax.position.vector import Vector3
from spinjax.rotations._kernels import (
    axis_to_quaternion,
    plane_quaternion,
    quaternion_axis,
    quaternion_canonical,
    quaternion_compose,
    quaternion_conjugate,
    quaternion_magnitude,
    quaternion_rotate_vector,
    quaternion_rotate_vectors,
    quaternion_scale_to_size,
)
from spinjax.rotations._tolerance import get_rotation_epsilon
from spinjax.rotations.quaternion import Quaternion
from spinjax.rotations.rotation import RotationSystem


class QuaternionRotation:
    """Rotation represented by a quaternion with non-negative real part.

    The quaternion is canonicalized (negated when its real part is
    negative) but not normalized on construction.  Every rotation produced
    by :class:`QuaternionSystem` or by :meth:`compose` is a unit quaternion.

    This class is registered as a JAX pytree with the data array as the
    sole leaf and no auxiliary data.

    Args:
        q (Quaternion): Underlying quaternion.

    Examples:
        ```python
        import jax.numpy as jnp
        from spinjax.position import Vector3
        from spinjax.rotations import QUATERNION_SYSTEM
        quarter = QUATERNION_SYSTEM.angle_xy(jnp.pi / 2)
        quarter.rotate_vector(Vector3(1.0, 0.0, 0.0))  # ~ (0, 1, 0)
        ```
    """

    __slots__ = ('_data',)

    def __init__(self, q: Quaternion) -> None:
        self._data = quaternion_canonical(q.to_array())

    @classmethod
    def _from_internal(cls, data: jax.Array) -> QuaternionRotation:
        """Create from a raw, already canonical JAX array.

        Args:
            data (jax.Array): Array of shape ``(4,)`` in scalar-first order.

        Returns:
            QuaternionRotation: New instance.
        """
        obj = object.__new__(cls)
        obj._data = data
        return obj

    # Properties

    @property
    def system(self) -> QuaternionSystem:
        """The system that produces quaternion rotations."""
        return QUATERNION_SYSTEM

    @property
    def quaternion(self) -> Quaternion:
        """The underlying quaternion."""
        return Quaternion._from_internal(self._data)

    def to_array(self) -> jax.Array:
        """Return ``[real, i, j, k]`` as an array of shape ``(4,)``."""
        return self._data

    # Methods

    def compose(self, other: QuaternionRotation) -> QuaternionRotation:
        """Return the rotation that applies ``other`` first, then ``self``.

        The Hamilton product is renormalized and canonicalized.

        Args:
            other (QuaternionRotation): Rotation applied first.

        Returns:
            QuaternionRotation: Combined rotation.
        """
        return QuaternionRotation._from_internal(quaternion_compose(self._data, other._data))

    def inverse(self) -> QuaternionRotation:
        """Return the rotation that undoes ``self``.

        Raises:
            ZeroDivisionError: If the underlying quaternion is zero.
        """
        sq = jnp.dot(self._data, self._data)
        if float(sq) == 0.0:
            raise ZeroDivisionError("Cannot invert a zero rotation")
        return QuaternionRotation._from_internal(
            quaternion_canonical(quaternion_conjugate(self._data) / sq)
        )

    def rotate_vector(self, v: Vector3) -> Vector3:
        """Apply the rotation to ``v``."""
        return Vector3._from_internal(quaternion_rotate_vector(self._data, v.to_array()))

    def rotate_array(self, vs: jax.Array) -> jax.Array:
        """Apply the rotation to every row of an ``(n, 3)`` array."""
        return quaternion_rotate_vectors(self._data, jnp.asarray(vs, dtype=self._data.dtype))

    def scale(self, factor: float) -> QuaternionRotation:
        """Return a rotation about the same axis by ``factor`` times the angle.

        Args:
            factor (float): Multiplier for the rotation angle.

        Returns:
            QuaternionRotation: Scaled rotation.
        """
        return self.scale_to_size(factor * self.magnitude())

    def scale_to_size(self, magnitude: float) -> QuaternionRotation:
        """Return a rotation about the same axis by exactly ``magnitude`` radians.

        The identity has no axis of its own; it is scaled about ``(1, 0, 0)``.
        """
        angle = jnp.asarray(magnitude, dtype=self._data.dtype)
        return QuaternionRotation._from_internal(quaternion_scale_to_size(self._data, angle))

    def magnitude(self) -> jax.Array:
        """Return the rotation angle ``2 * acos(real)`` in radians.

        Because the real part is kept non-negative the result lies in
        ``[0, pi]``.  Rotations by more than half a turn are reported as the
        equivalent shorter rotation about the opposite axis.
        """
        return quaternion_magnitude(self._data)

    def axis(self) -> Vector3:
        """Return the rotation axis scaled by the rotation angle.

        This is the inverse of :meth:`QuaternionSystem.from_axis`.
        """
        return Vector3._from_internal(quaternion_axis(self._data))

    # Operators

    def __mul__(self, other: QuaternionRotation) -> QuaternionRotation:
        """Alias for :meth:`compose`."""
        if not isinstance(other, QuaternionRotation):
            return NotImplemented
        return self.compose(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuaternionRotation):
            return NotImplemented
        eps = get_rotation_epsilon()
        # q and -q are the same rotation; only matters when real ~ 0
        same = jnp.all(jnp.abs(self._data - other._data) < eps)
        opposite = jnp.all(jnp.abs(self._data + other._data) < eps)
        return bool(same | opposite)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, QuaternionRotation):
            return NotImplemented
        return not self.__eq__(other)

    # String representations

    def __str__(self) -> str:
        return (
            f"QuaternionRotation(real={float(self._data[0]):.6f}, "
            f"i={float(self._data[1]):.6f}, "
            f"j={float(self._data[2]):.6f}, "
            f"k={float(self._data[3]):.6f})"
        )

    def __repr__(self) -> str:
        return (
            f"QuaternionRotation(real={float(self._data[0])}, "
            f"i={float(self._data[1])}, "
            f"j={float(self._data[2])}, "
            f"k={float(self._data[3])})"
        )


# Register as JAX pytree
jax.tree_util.register_pytree_node(
    QuaternionRotation,
    lambda r: ((r._data,), None),
    lambda _, children: QuaternionRotation._from_internal(children[0]),
)


class QuaternionSystem(RotationSystem[QuaternionRotation]):
    """Right-handed factory for :class:`QuaternionRotation`.

    With ``c = cos(m/2)`` and ``s = sin(m/2)`` the plane rotations are:

    ====  ================
    XY    ``(c, 0, 0, s)``
    XZ    ``(c, 0, -s, 0)``
    YZ    ``(c, s, 0, 0)``
    YX    ``(c, 0, 0, -s)``
    ZX    ``(c, 0, s, 0)``
    ZY    ``(c, -s, 0, 0)``
    ====  ================

    Use the shared :data:`QUATERNION_SYSTEM` rather than constructing new
    instances; the system holds no state.
    """

    def __init__(self) -> None:
        super().__init__(SpatialParity.RIGHT_HAND_XYZ)

    @staticmethod
    def _plane(magnitude: float, normal_index: int, sign: float) -> QuaternionRotation:
        m = jnp.asarray(magnitude, dtype=get_dtype())
        return QuaternionRotation._from_internal(plane_quaternion(m, normal_index, sign))

    def angle_xy(self, magnitude: float) -> QuaternionRotation:
        """Rotation turning +X towards +Y (about +Z)."""
        return self._plane(magnitude, 3, 1.0)

    def angle_xz(self, magnitude: float) -> QuaternionRotation:
        """Rotation turning +X towards +Z (about -Y)."""
        return self._plane(magnitude, 2, -1.0)

    def angle_yz(self, magnitude: float) -> QuaternionRotation:
        """Rotation turning +Y towards +Z (about +X)."""
        return self._plane(magnitude, 1, 1.0)

    def angle_yx(self, magnitude: float) -> QuaternionRotation:
        """Rotation turning +Y towards +X (about -Z)."""
        return self._plane(magnitude, 3, -1.0)

    def angle_zx(self, magnitude: float) -> QuaternionRotation:
        """Rotation turning +Z towards +X (about +Y)."""
        return self._plane(magnitude, 2, 1.0)

    def angle_zy(self, magnitude: float) -> QuaternionRotation:
        """Rotation turning +Z towards +Y (about -X)."""
        return self._plane(magnitude, 1, -1.0)

    def from_axis(self, axis: Vector3) -> QuaternionRotation:
        """Rotation about ``axis`` by ``|axis|`` radians.

        Args:
            axis (Vector3): Rotation vector; direction is the axis, length
                is the angle.  The zero vector gives the identity.

        Returns:
            QuaternionRotation: The rotation.
        """
        return QuaternionRotation._from_internal(axis_to_quaternion(axis.to_array()))

    def from_quaternion(self, q: Quaternion) -> QuaternionRotation:
        """Wrap ``q`` as a rotation after normalizing it."""
        return QuaternionRotation(q.normalize())

    def __repr__(self) -> str:
        return f"QuaternionSystem(parity={self.parity.name})"


QUATERNION_SYSTEM = QuaternionSystem()
"""Shared right-handed quaternion rotation system."""
