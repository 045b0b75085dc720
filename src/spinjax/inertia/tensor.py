"""Second-moment inertia tensor.

Provides :class:`InertiaTensor`, a symmetric tensor stored as its six
independent components:

- ``xx``, ``yy``, ``zz`` -- the mass-weighted variance along each axis,
- ``yz``, ``zx``, ``xy`` -- the mass-weighted products between axes.

This is the second-moment form ``sum(m * r r^T)`` rather than the classical
moment-of-inertia matrix.  The moment of inertia about an axis is the
variance in the other two dimensions, so the principal moments of an
axis-aligned tensor are ``(yy + zz, xx + zz, xx + yy)``.

Any tensor can be reproduced by exactly six point masses (see
:meth:`InertiaTensor.equivalent_point_masses`), which is how rotation of a
tensor is carried out.
"""

from __future__ import annotations

from collections.abc import Sequence

import jax
import jax.numpy as jnp

from spinjax.config import get_dtype
from spinjax.inertia.point_mass import (
    PointMass,
    center_point_masses,
    distribute_rotation,
    stack_point_masses,
)
from spinjax.position.vector import Vector3
from spinjax.rotations._tolerance import get_rotation_epsilon
from spinjax.rotations.rotation import Rotation


@jax.jit
def _second_moments(m: jax.Array, r: jax.Array) -> jax.Array:
    """``[xx, yy, zz, yz, zx, xy]`` of masses ``m`` at positions ``r``."""
    x, y, z = r[:, 0], r[:, 1], r[:, 2]
    return jnp.array([
        jnp.sum(m * x * x),
        jnp.sum(m * y * y),
        jnp.sum(m * z * z),
        jnp.sum(m * y * z),
        jnp.sum(m * z * x),
        jnp.sum(m * x * y),
    ])


_EQUIVALENT_POSITIONS = (
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
    (0.0, 1.0, 1.0),
    (1.0, 0.0, 1.0),
    (1.0, 1.0, 0.0),
)


class InertiaTensor:
    """Symmetric second-moment tensor of a mass distribution.

    This class is registered as a JAX pytree with the component array as
    the sole leaf and no auxiliary data.

    Args:
        xx (float): Variance along x.
        yy (float): Variance along y.
        zz (float): Variance along z.
        yz (float): Product between y and z.
        zx (float): Product between z and x.
        xy (float): Product between x and y.

    Examples:
        ```python
        from spinjax.inertia import InertiaTensor, PointMass
        from spinjax.position import Vector3
        t = InertiaTensor.from_point_masses([PointMass(2.0, Vector3(1.0, 0.0, 0.0))])
        t.xx, t.principal_moments()
        ```
    """

    __slots__ = ('_data',)

    def __init__(
        self,
        xx: float = 0.0,
        yy: float = 0.0,
        zz: float = 0.0,
        yz: float = 0.0,
        zx: float = 0.0,
        xy: float = 0.0,
    ) -> None:
        self._data = jnp.asarray([xx, yy, zz, yz, zx, xy], dtype=get_dtype())

    @classmethod
    def _from_internal(cls, data: jax.Array) -> InertiaTensor:
        """Create from a raw ``[xx, yy, zz, yz, zx, xy]`` array."""
        obj = object.__new__(cls)
        obj._data = data
        return obj

    # Properties

    @property
    def xx(self) -> jax.Array:
        """Variance along x."""
        return self._data[0]

    @property
    def yy(self) -> jax.Array:
        """Variance along y."""
        return self._data[1]

    @property
    def zz(self) -> jax.Array:
        """Variance along z."""
        return self._data[2]

    @property
    def yz(self) -> jax.Array:
        """Product between y and z."""
        return self._data[3]

    @property
    def zx(self) -> jax.Array:
        """Product between z and x."""
        return self._data[4]

    @property
    def xy(self) -> jax.Array:
        """Product between x and y."""
        return self._data[5]

    # Factory methods

    @classmethod
    def from_point_masses(cls, masses: Sequence[PointMass]) -> InertiaTensor:
        """Tensor of point masses about the origin.

        Args:
            masses: Point masses.

        Returns:
            InertiaTensor: ``sum(m * r r^T)`` over the masses.
        """
        m, r = stack_point_masses(masses)
        return cls._from_internal(_second_moments(m, r))

    @classmethod
    def centered(cls, masses: Sequence[PointMass]) -> InertiaTensor:
        """Tensor of point masses about their own center of mass."""
        return cls.from_point_masses(center_point_masses(masses))

    @classmethod
    def from_arrays(cls, m: jax.Array, r: jax.Array) -> InertiaTensor:
        """Tensor of masses ``m`` (shape ``(n,)``) at positions ``r`` (shape ``(n, 3)``)."""
        dtype = get_dtype()
        return cls._from_internal(
            _second_moments(jnp.asarray(m, dtype=dtype), jnp.asarray(r, dtype=dtype))
        )

    def to_array(self) -> jax.Array:
        """Return ``[xx, yy, zz, yz, zx, xy]``."""
        return self._data

    # Methods

    def equivalent_point_masses(self) -> list[PointMass]:
        """Six point masses that reproduce this tensor about the origin.

        The masses sit at the three unit axes and the three face diagonals
        ``(0,1,1)``, ``(1,0,1)``, ``(1,1,0)``.  Individual masses may be
        negative.

        Returns:
            list[PointMass]: The equivalent masses.
        """
        xx, yy, zz, yz, zx, xy = (self._data[i] for i in range(6))
        weights = (xx - xy - zx, yy - xy - yz, zz - zx - yz, yz, zx, xy)
        return [
            PointMass(w, Vector3(*p)) for w, p in zip(weights, _EQUIVALENT_POSITIONS)
        ]

    def rotated(self, rotation: Rotation) -> InertiaTensor:
        """Tensor of the same body after applying ``rotation`` to it.

        Args:
            rotation: Rotation applied to the mass distribution.

        Returns:
            InertiaTensor: Tensor in the rotated frame.
        """
        return InertiaTensor.from_point_masses(
            distribute_rotation(self.equivalent_point_masses(), rotation)
        )

    def scaled(self, sx: float, sy: float, sz: float) -> InertiaTensor:
        """Tensor of the same body stretched by ``(sx, sy, sz)`` along the axes."""
        factors = jnp.asarray(
            [sx * sx, sy * sy, sz * sz, sy * sz, sz * sx, sx * sy], dtype=self._data.dtype
        )
        return InertiaTensor._from_internal(self._data * factors)

    def cross_inertia(self) -> jax.Array:
        """Sum of the squared products ``yz^2 + zx^2 + xy^2``.

        Zero exactly when the tensor is diagonal.
        """
        return jnp.sum(self._data[3:] ** 2)

    def principal_moments(self) -> Vector3:
        """Moments of inertia about each axis, ``(yy+zz, xx+zz, xx+yy)``.

        These are the principal moments when :meth:`cross_inertia` is zero.
        """
        xx, yy, zz = self._data[0], self._data[1], self._data[2]
        return Vector3._from_internal(jnp.stack([yy + zz, xx + zz, xx + yy]))

    def to_matrix(self) -> jax.Array:
        """Return the 3x3 second-moment matrix."""
        xx, yy, zz, yz, zx, xy = (self._data[i] for i in range(6))
        return jnp.array([
            [xx, xy, zx],
            [xy, yy, yz],
            [zx, yz, zz],
        ])

    def inertia_matrix(self) -> jax.Array:
        """Return the classical moment-of-inertia matrix ``tr(S) * 1 - S``."""
        s = self.to_matrix()
        return jnp.trace(s) * jnp.eye(3, dtype=s.dtype) - s

    # Operators

    def __add__(self, other: InertiaTensor) -> InertiaTensor:
        if not isinstance(other, InertiaTensor):
            return NotImplemented
        return InertiaTensor._from_internal(self._data + other._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InertiaTensor):
            return NotImplemented
        scale = jnp.maximum(1.0, jnp.max(jnp.abs(self._data)))
        return bool(jnp.all(jnp.abs(self._data - other._data) < get_rotation_epsilon() * scale))

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, InertiaTensor):
            return NotImplemented
        return not self.__eq__(other)

    def __repr__(self) -> str:
        names = ("xx", "yy", "zz", "yz", "zx", "xy")
        parts = ", ".join(f"{n}={float(v)}" for n, v in zip(names, self._data))
        return f"InertiaTensor({parts})"


# Register as JAX pytree
jax.tree_util.register_pytree_node(
    InertiaTensor,
    lambda t: ((t._data,), None),
    lambda _, children: InertiaTensor._from_internal(children[0]),
)
