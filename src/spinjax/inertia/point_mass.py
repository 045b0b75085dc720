"""Point masses and mass-distribution helpers.

A :class:`PointMass` is a mass concentrated at a single position.  Lists of
point masses are the common currency between solids, rigid-body assembly
and the inertia tensor: the tensor is computed from them and decomposed
back into them for rotation.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

import jax
import jax.numpy as jnp

from spinjax.config import get_dtype
from spinjax.position.vector import Vector3
from spinjax.rotations.rotation import Rotation


class PointMass(NamedTuple):
    """A mass located at a fixed position.

    Attributes:
        mass: Mass of the point.  May be negative when the point is one of
            the equivalent masses of an inertia tensor.
        position: Location of the point.
    """

    mass: float
    position: Vector3


def stack_point_masses(masses: Sequence[PointMass]) -> tuple[jax.Array, jax.Array]:
    """Split point masses into a mass array and a position array.

    Args:
        masses: Point masses.

    Returns:
        tuple: ``(m, r)`` with ``m`` of shape ``(n,)`` and ``r`` of shape
        ``(n, 3)``.
    """
    dtype = get_dtype()
    if len(masses) == 0:
        return jnp.zeros(0, dtype=dtype), jnp.zeros((0, 3), dtype=dtype)
    m = jnp.asarray([pm.mass for pm in masses], dtype=dtype)
    r = jnp.stack([pm.position.to_array() for pm in masses]).astype(dtype)
    return m, r


def center_of_mass(masses: Sequence[PointMass]) -> PointMass:
    """Combine point masses into one located at their barycenter.

    Args:
        masses: Point masses.  Their total mass must be non-zero.

    Returns:
        PointMass: Total mass at the mass-weighted mean position.
    """
    m, r = stack_point_masses(masses)
    total = jnp.sum(m)
    barycenter = jnp.sum(m[:, None] * r, axis=0) / total
    return PointMass(total, Vector3._from_internal(barycenter))


def center_point_masses(masses: Sequence[PointMass]) -> list[PointMass]:
    """Shift point masses so their barycenter is at the origin."""
    center = center_of_mass(masses).position
    return [PointMass(pm.mass, pm.position - center) for pm in masses]


def distribute_rotation(masses: Sequence[PointMass], rotation: Rotation) -> list[PointMass]:
    """Rotate the position of every point mass about the origin.

    Args:
        masses: Point masses.
        rotation: Rotation to apply.

    Returns:
        list[PointMass]: Rotated point masses, in the same order.
    """
    return [PointMass(pm.mass, rotation.rotate_vector(pm.position)) for pm in masses]
