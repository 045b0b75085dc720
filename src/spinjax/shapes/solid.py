"""Abstract solid of uniform density.

Provides :class:`Solid`, the interface implemented by every closed-form
shape in :mod:`spinjax.shapes.solids`.  A solid is centered on its
centroid: its inertia tensor is taken about the origin and
``contains_points`` tests positions relative to the centroid.
"""

from __future__ import annotations

import abc
import copy

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from spinjax.config import get_dtype
from spinjax.inertia.tensor import InertiaTensor
from spinjax.position.vector import Vector3


class Solid(abc.ABC):
    """Uniform solid with a mass, a volume and a closed-form tensor.

    The mass defaults to ``1``.  :meth:`with_mass` and :meth:`with_density`
    return a copy with the mass replaced, so calls can be chained off the
    constructor.

    Examples:
        ```python
        from spinjax.shapes import Sphere
        ball = Sphere(0.5).with_density(1000.0)
        ball.inertia_tensor().xx
        ```
    """

    _mass: float = 1.0

    @property
    def mass(self) -> float:
        """Total mass."""
        return self._mass

    @property
    def density(self) -> float:
        """Mass per unit volume."""
        return self._mass / self.volume()

    def with_mass(self, mass: float) -> Solid:
        """Return a copy with the given total mass."""
        out = copy.copy(self)
        out._mass = float(mass)
        return out

    def with_density(self, density: float) -> Solid:
        """Return a copy whose mass is ``volume * density``."""
        return self.with_mass(self.volume() * density)

    @abc.abstractmethod
    def volume(self) -> float:
        """Volume of the solid."""

    @abc.abstractmethod
    def inertia_tensor(self) -> InertiaTensor:
        """Second-moment tensor about the centroid, in the solid's own axes."""

    @abc.abstractmethod
    def _contains(self, x: Array, y: Array, z: Array) -> Array:
        """Element-wise membership of coordinates relative to the centroid."""

    def contains_points(self, points: ArrayLike) -> Array:
        """Test which points lie inside the solid.

        Args:
            points: Positions relative to the centroid, shape ``(n, 3)``.

        Returns:
            jax.Array: Boolean array of shape ``(n,)``.
        """
        p = jnp.asarray(points, dtype=get_dtype())
        return self._contains(p[..., 0], p[..., 1], p[..., 2])

    def contains_point(self, position: Vector3) -> bool:
        """Return ``True`` if ``position`` lies inside the solid."""
        return bool(self.contains_points(position.to_array()))

    @staticmethod
    def _require_positive(**sizes: float) -> None:
        for name, value in sizes.items():
            if value <= 0.0:
                raise ValueError(f"{name} must be positive, got {value}")
