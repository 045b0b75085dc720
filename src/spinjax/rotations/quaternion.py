"""General (non-normalized) quaternion.

Provides the ``Quaternion`` class, the algebraic building block behind
:class:`~spinjax.rotations.quaternion_rotation.QuaternionRotation`.  Unlike
a rotation, a ``Quaternion`` is never normalized implicitly: sums,
differences and scalings are kept exactly as computed.

Layout is scalar-first ``[real, i, j, k]``.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from spinjax.config import get_dtype
from spinjax.position.vector import Vector3
from spinjax.rotations._kernels import (
    quaternion_conjugate,
    quaternion_multiply,
    quaternion_normalize,
    quaternion_normalize_vector,
    quaternion_rotate_vector,
)
from spinjax.rotations._tolerance import get_rotation_epsilon


class Quaternion:
    """Quaternion ``real + i*I + j*J + k*K``.

    Internal storage is a shape ``(4,)`` array in the configured float
    dtype.  This class is registered as a JAX pytree with the data array
    as the sole leaf and no auxiliary data.

    Args:
        real (float): Scalar (real) component.
        i (float): First imaginary component.
        j (float): Second imaginary component.
        k (float): Third imaginary component.

    Examples:
        ```python
        from spinjax.rotations import Quaternion
        q = Quaternion(0.0, 1.0, 0.0, 0.0)
        (q * q).real
        ```
    """

    __slots__ = ('_data',)

    def __init__(self, real: float, i: float, j: float, k: float) -> None:
        self._data = jnp.asarray([real, i, j, k], dtype=get_dtype())

    @classmethod
    def _from_internal(cls, data: jax.Array) -> Quaternion:
        """Create from a raw JAX array without conversion.

        Args:
            data (jax.Array): Array of shape ``(4,)`` in scalar-first order.

        Returns:
            Quaternion: New instance.
        """
        obj = object.__new__(cls)
        obj._data = data
        return obj

    # Properties

    @property
    def real(self) -> jax.Array:
        """Scalar component."""
        return self._data[0]

    @property
    def i(self) -> jax.Array:
        """First imaginary component."""
        return self._data[1]

    @property
    def j(self) -> jax.Array:
        """Second imaginary component."""
        return self._data[2]

    @property
    def k(self) -> jax.Array:
        """Third imaginary component."""
        return self._data[3]

    # Factory methods

    @classmethod
    def identity(cls) -> Quaternion:
        """Return ``1 + 0i + 0j + 0k``."""
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_vector(cls, v: Vector3) -> Quaternion:
        """Create the pure-imaginary quaternion ``(0, v)``.

        Args:
            v (Vector3): Imaginary part.

        Returns:
            Quaternion: ``0 + v.x*I + v.y*J + v.z*K``.
        """
        data = v.to_array()
        return cls._from_internal(jnp.concatenate([jnp.zeros(1, dtype=data.dtype), data]))

    @classmethod
    def from_array(cls, q: ArrayLike) -> Quaternion:
        """Create from an array-like ``[real, i, j, k]``."""
        data = jnp.asarray(q, dtype=get_dtype())
        if data.shape != (4,):
            raise ValueError(f"Quaternion requires shape (4,), got {data.shape}")
        return cls._from_internal(data)

    def to_array(self) -> jax.Array:
        """Return ``[real, i, j, k]`` as an array of shape ``(4,)``."""
        return self._data

    def vector_part(self) -> Vector3:
        """Return the imaginary part as a ``Vector3``."""
        return Vector3._from_internal(self._data[1:])

    # Methods

    def scale(self, factor: ArrayLike) -> Quaternion:
        """Multiply every component by ``factor``."""
        return Quaternion._from_internal(self._data * factor)

    def sq_norm(self) -> jax.Array:
        """Return the squared norm."""
        return jnp.dot(self._data, self._data)

    def norm(self) -> jax.Array:
        """Return the Euclidean norm."""
        return jnp.linalg.norm(self._data)

    def dot(self, other: Quaternion) -> jax.Array:
        """Return the four-component dot product with ``other``."""
        return jnp.dot(self._data, other._data)

    def conjugate(self) -> Quaternion:
        """Return ``[real, -i, -j, -k]``."""
        return Quaternion._from_internal(quaternion_conjugate(self._data))

    def inverse(self) -> Quaternion:
        """Return the multiplicative inverse ``conj(q) / |q|^2``.

        Returns:
            Quaternion: Inverse quaternion.

        Raises:
            ZeroDivisionError: If the quaternion is zero.
        """
        sq = self.sq_norm()
        if float(sq) == 0.0:
            raise ZeroDivisionError("Cannot invert a zero quaternion")
        return Quaternion._from_internal(quaternion_conjugate(self._data) / sq)

    def normalize(self) -> Quaternion:
        """Return the unit quaternion with a non-negative real part.

        Multiplying by ``-1`` does not change the rotation a quaternion
        describes, so the sign is chosen to keep the real part non-negative.
        A zero quaternion normalizes to the identity.

        Returns:
            Quaternion: Unit quaternion.
        """
        return Quaternion._from_internal(quaternion_normalize(self._data))

    def normalize_vector(self) -> Quaternion:
        """Return the pure-imaginary unit quaternion along the vector part.

        A zero vector part normalizes to ``(0, 1, 0, 0)``.
        """
        return Quaternion._from_internal(quaternion_normalize_vector(self._data))

    def rotate_vector(self, v: Vector3) -> Vector3:
        """Return the vector part of ``q * (0, v) * conj(q)``.

        For a unit quaternion this is the rotation of ``v``.

        Args:
            v (Vector3): Vector to rotate.

        Returns:
            Vector3: Rotated vector.
        """
        return Vector3._from_internal(quaternion_rotate_vector(self._data, v.to_array()))

    # Operators

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion._from_internal(self._data + other._data)

    def __sub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion._from_internal(self._data - other._data)

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Hamilton product (quaternion * quaternion)."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion._from_internal(quaternion_multiply(self._data, other._data))

    def __neg__(self) -> Quaternion:
        return Quaternion._from_internal(-self._data)

    def __getitem__(self, idx: int) -> jax.Array:
        return self._data[idx]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        eps = get_rotation_epsilon()
        return bool(jnp.all(jnp.abs(self._data - other._data) < eps))

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return not self.__eq__(other)

    # String representations

    def __str__(self) -> str:
        return (
            f"Quaternion(real={float(self._data[0]):.6f}, "
            f"i={float(self._data[1]):.6f}, "
            f"j={float(self._data[2]):.6f}, "
            f"k={float(self._data[3]):.6f})"
        )

    def __repr__(self) -> str:
        return (
            f"Quaternion(real={float(self._data[0])}, "
            f"i={float(self._data[1])}, "
            f"j={float(self._data[2])}, "
            f"k={float(self._data[3])})"
        )


# Register as JAX pytree
jax.tree_util.register_pytree_node(
    Quaternion,
    lambda q: ((q._data,), None),
    lambda _, children: Quaternion._from_internal(children[0]),
)
