"""Immutable three-component vector.

Provides the ``Vector3`` class used for positions, angular momenta,
torques and rotation axes throughout spinjax.  Every operation returns a
new instance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from spinjax.config import get_dtype

if TYPE_CHECKING:
    from spinjax.position.axes import AviationMapping, DimensionMapping


class Vector3:
    """Real vector with components ``(x, y, z)``.

    Internal storage is a shape ``(3,)`` array in the configured float
    dtype.  This class is registered as a JAX pytree with the data array
    as the sole leaf and no auxiliary data.

    Args:
        x (float): First component.
        y (float): Second component.
        z (float): Third component.
    """

    __slots__ = ('_data',)

    def __init__(self, x: float, y: float, z: float) -> None:
        self._data = jnp.asarray([x, y, z], dtype=get_dtype())

    @classmethod
    def _from_internal(cls, data: jax.Array) -> Vector3:
        """Create from a raw JAX array without conversion.

        Used by pytree unflatten and kernel outputs.

        Args:
            data (jax.Array): Array of shape ``(3,)``.

        Returns:
            Vector3: New instance.
        """
        obj = object.__new__(cls)
        obj._data = data
        return obj

    # Properties

    @property
    def x(self) -> jax.Array:
        """First component."""
        return self._data[0]

    @property
    def y(self) -> jax.Array:
        """Second component."""
        return self._data[1]

    @property
    def z(self) -> jax.Array:
        """Third component."""
        return self._data[2]

    # Factory methods

    @classmethod
    def zero(cls) -> Vector3:
        """Return the zero vector."""
        return cls._from_internal(jnp.zeros(3, dtype=get_dtype()))

    @classmethod
    def from_array(cls, v: ArrayLike) -> Vector3:
        """Create from an array-like of shape ``(3,)``.

        Args:
            v (ArrayLike): Components ``[x, y, z]``.

        Returns:
            Vector3: New vector.
        """
        data = jnp.asarray(v, dtype=get_dtype())
        if data.shape != (3,):
            raise ValueError(f"Vector3 requires shape (3,), got {data.shape}")
        return cls._from_internal(data)

    def to_array(self) -> jax.Array:
        """Return the components as an array of shape ``(3,)``."""
        return self._data

    # Methods

    def scale(self, factor: ArrayLike) -> Vector3:
        """Multiply every component by ``factor``."""
        return Vector3._from_internal(self._data * factor)

    def sq_magnitude(self) -> jax.Array:
        """Return the squared Euclidean length."""
        return jnp.dot(self._data, self._data)

    def magnitude(self) -> jax.Array:
        """Return the Euclidean length."""
        return jnp.linalg.norm(self._data)

    def normalize(self) -> Vector3:
        """Return a unit vector in the same direction.

        The zero vector has no direction; ``(1, 0, 0)`` is returned for it.

        Returns:
            Vector3: Unit vector.
        """
        n = jnp.linalg.norm(self._data)
        unit_x = jnp.array([1.0, 0.0, 0.0], dtype=self._data.dtype)
        safe = jnp.where(n == 0.0, 1.0, n)
        return Vector3._from_internal(jnp.where(n == 0.0, unit_x, self._data / safe))

    def distance(self, other: Vector3) -> jax.Array:
        """Return the Euclidean distance to ``other``."""
        return jnp.linalg.norm(self._data - other._data)

    def dot(self, other: Vector3) -> jax.Array:
        """Return the dot product with ``other``."""
        return jnp.dot(self._data, other._data)

    def cross(self, other: Vector3) -> Vector3:
        """Return the cross product ``self x other``."""
        return Vector3._from_internal(jnp.cross(self._data, other._data))

    def elementwise_product(self, other: Vector3) -> Vector3:
        """Return the component-wise product."""
        return Vector3._from_internal(self._data * other._data)

    def elementwise_divide(self, other: Vector3) -> Vector3:
        """Return the component-wise quotient.

        Args:
            other (Vector3): Divisor.

        Returns:
            Vector3: ``(x/ox, y/oy, z/oz)``.

        Raises:
            ZeroDivisionError: If any component of ``other`` is zero.
        """
        if bool(jnp.any(other._data == 0.0)):
            raise ZeroDivisionError("Division by zero in element-wise division")
        return Vector3._from_internal(self._data / other._data)

    # Axis mapping

    def coordinate(self, axis: DimensionMapping) -> jax.Array:
        """Return the signed coordinate along a mapped axis.

        Args:
            axis (DimensionMapping): Selects the Cartesian component and
                whether it is inverted.

        Returns:
            jax.Array: ``sign * component``.
        """
        return axis.sign * self._data[int(axis.xyz)]

    def longitudinal(self, mapping: AviationMapping) -> jax.Array:
        """Forward component under ``mapping``."""
        return self.coordinate(mapping.longitudinal)

    def lateral(self, mapping: AviationMapping) -> jax.Array:
        """Rightward component under ``mapping``."""
        return self.coordinate(mapping.lateral)

    def vertical(self, mapping: AviationMapping) -> jax.Array:
        """Upward component under ``mapping``."""
        return self.coordinate(mapping.vertical)

    # Operators

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3._from_internal(self._data + other._data)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3._from_internal(self._data - other._data)

    def __neg__(self) -> Vector3:
        return Vector3._from_internal(-self._data)

    def __mul__(self, factor) -> Vector3:
        if isinstance(factor, Vector3):
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor) -> Vector3:
        if isinstance(divisor, Vector3):
            return NotImplemented
        return Vector3._from_internal(self._data / divisor)

    def __getitem__(self, idx: int) -> jax.Array:
        return self._data[idx]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        from spinjax.rotations._tolerance import get_rotation_epsilon

        scale = jnp.maximum(1.0, jnp.max(jnp.abs(self._data)))
        return bool(jnp.all(jnp.abs(self._data - other._data) < get_rotation_epsilon() * scale))

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return not self.__eq__(other)

    # String representations

    def __str__(self) -> str:
        return (
            f"Vector3(x={float(self._data[0]):.6f}, "
            f"y={float(self._data[1]):.6f}, "
            f"z={float(self._data[2]):.6f})"
        )

    def __repr__(self) -> str:
        return (
            f"Vector3(x={float(self._data[0])}, "
            f"y={float(self._data[1])}, "
            f"z={float(self._data[2])})"
        )


# Register as JAX pytree
jax.tree_util.register_pytree_node(
    Vector3,
    lambda v: ((v._data,), None),
    lambda _, children: Vector3._from_internal(children[0]),
)
