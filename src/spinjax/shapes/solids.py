"""Closed-form uniform solids.

Every solid is centered on its centroid.  Solids with a symmetry axis use
``z`` as that axis.

==================  ==============================  ===========================
Solid               Volume                          Second moments (xx, yy, zz)
==================  ==============================  ===========================
Sphere(r)           4/3 pi r^3                      m r^2 / 5 (all)
Cylinder(r, h)      pi r^2 h                        m r^2 / 4, m r^2 / 4, m h^2 / 12
Cone(r, h)          pi r^2 h / 3                    3/20 m r^2, 3/20 m r^2, 3/80 m h^2
RectangularPrism    a b c                           m a^2 / 12, m b^2 / 12, m c^2 / 12
Octahedron(a)       sqrt(2) / 3 a^3                 m a^2 / 20 (all)
Tetrahedron(a)      a^3 / (6 sqrt(2))               m a^2 / 40 (all)
==================  ==============================  ===========================

The products of inertia of every solid here are zero in its own axes.
"""

from __future__ import annotations

import math

import jax.numpy as jnp
from jax import Array

from spinjax.inertia.tensor import InertiaTensor
from spinjax.shapes.solid import Solid


class Sphere(Solid):
    """Ball of radius ``radius``.

    Args:
        radius: Radius of the ball.

    Raises:
        ValueError: If ``radius`` is not positive.
    """

    def __init__(self, radius: float) -> None:
        self._require_positive(radius=radius)
        self.radius = float(radius)

    def volume(self) -> float:
        return 4.0 / 3.0 * math.pi * self.radius ** 3

    def inertia_tensor(self) -> InertiaTensor:
        moment = self.mass * self.radius ** 2 / 5.0
        return InertiaTensor(moment, moment, moment)

    def _contains(self, x: Array, y: Array, z: Array) -> Array:
        return x * x + y * y + z * z < self.radius ** 2

    def __repr__(self) -> str:
        return f"Sphere(radius={self.radius}, mass={self.mass})"


class Cylinder(Solid):
    """Solid circular cylinder with its axis along ``z``.

    Args:
        radius: Radius of the circular faces.
        height: Distance between the faces.

    Raises:
        ValueError: If a size is not positive.
    """

    def __init__(self, radius: float, height: float) -> None:
        self._require_positive(radius=radius, height=height)
        self.radius = float(radius)
        self.height = float(height)

    def volume(self) -> float:
        return math.pi * self.radius ** 2 * self.height

    def inertia_tensor(self) -> InertiaTensor:
        radial = 0.25 * self.mass * self.radius ** 2
        axial = self.mass * self.height ** 2 / 12.0
        return InertiaTensor(radial, radial, axial)

    def _contains(self, x: Array, y: Array, z: Array) -> Array:
        return (jnp.abs(z) <= self.height / 2.0) & (x * x + y * y <= self.radius ** 2)

    def __repr__(self) -> str:
        return f"Cylinder(radius={self.radius}, height={self.height}, mass={self.mass})"


class Cone(Solid):
    """Solid right circular cone with its axis along ``z``.

    The centroid lies a quarter of the height above the base, so the base
    is at ``z = -height / 4`` and the apex at ``z = 3 * height / 4``.

    Args:
        radius: Radius of the base.
        height: Distance from base to apex.

    Raises:
        ValueError: If a size is not positive.
    """

    def __init__(self, radius: float, height: float) -> None:
        self._require_positive(radius=radius, height=height)
        self.radius = float(radius)
        self.height = float(height)

    def volume(self) -> float:
        return math.pi * self.radius ** 2 * self.height / 3.0

    def inertia_tensor(self) -> InertiaTensor:
        radial = 3.0 / 20.0 * self.mass * self.radius ** 2
        axial = 3.0 / 80.0 * self.mass * self.height ** 2
        return InertiaTensor(radial, radial, axial)

    def _contains(self, x: Array, y: Array, z: Array) -> Array:
        in_height = (z <= 0.75 * self.height) & (z >= -0.25 * self.height)
        # fraction of the base radius left at this height
        proportion = 0.75 - z / self.height
        return in_height & (proportion * proportion * self.radius ** 2 >= x * x + y * y)

    def __repr__(self) -> str:
        return f"Cone(radius={self.radius}, height={self.height}, mass={self.mass})"


class RectangularPrism(Solid):
    """Box with edges ``a``, ``b``, ``c`` along ``x``, ``y``, ``z``.

    Args:
        a: Edge length along x.
        b: Edge length along y.
        c: Edge length along z.

    Raises:
        ValueError: If an edge length is not positive.
    """

    def __init__(self, a: float, b: float, c: float) -> None:
        self._require_positive(a=a, b=b, c=c)
        self.a = float(a)
        self.b = float(b)
        self.c = float(c)

    def volume(self) -> float:
        return self.a * self.b * self.c

    def inertia_tensor(self) -> InertiaTensor:
        m = self.mass
        return InertiaTensor(m * self.a ** 2 / 12.0, m * self.b ** 2 / 12.0, m * self.c ** 2 / 12.0)

    def _contains(self, x: Array, y: Array, z: Array) -> Array:
        return (
            (jnp.abs(x) <= self.a / 2.0)
            & (jnp.abs(y) <= self.b / 2.0)
            & (jnp.abs(z) <= self.c / 2.0)
        )

    def __repr__(self) -> str:
        return f"RectangularPrism(a={self.a}, b={self.b}, c={self.c}, mass={self.mass})"


class Octahedron(Solid):
    """Regular octahedron with edge ``side``, vertices on the axes.

    Args:
        side: Edge length.

    Raises:
        ValueError: If ``side`` is not positive.
    """

    def __init__(self, side: float) -> None:
        self._require_positive(side=side)
        self.side = float(side)

    def volume(self) -> float:
        return math.sqrt(2.0) / 3.0 * self.side ** 3

    def inertia_tensor(self) -> InertiaTensor:
        moment = self.mass * self.side ** 2 / 20.0
        return InertiaTensor(moment, moment, moment)

    def _contains(self, x: Array, y: Array, z: Array) -> Array:
        return jnp.abs(x) + jnp.abs(y) + jnp.abs(z) <= self.side / math.sqrt(2.0)

    def __repr__(self) -> str:
        return f"Octahedron(side={self.side}, mass={self.mass})"


_BASE_DEPTH = 1.0 / (2.0 * math.sqrt(6.0))
_TRIANGLE_BASE_DEPTH = 1.0 / (2.0 * math.sqrt(3.0))


class Tetrahedron(Solid):
    """Regular tetrahedron with edge ``side``.

    One face lies flat at ``z = -side / (2 sqrt(6))`` with an edge parallel
    to ``x``; the opposite vertex is on the positive ``z`` axis.  The
    second moments are isotropic despite the missing reflective symmetry.

    Args:
        side: Edge length.

    Raises:
        ValueError: If ``side`` is not positive.
    """

    def __init__(self, side: float) -> None:
        self._require_positive(side=side)
        self.side = float(side)

    def volume(self) -> float:
        return self.side ** 3 / (6.0 * math.sqrt(2.0))

    def inertia_tensor(self) -> InertiaTensor:
        moment = self.mass * self.side ** 2 / 40.0
        return InertiaTensor(moment, moment, moment)

    def _contains(self, x: Array, y: Array, z: Array) -> Array:
        x, y, z = x / self.side, y / self.side, z / self.side
        height = z / (4.0 * _BASE_DEPTH)
        slant = y / (2.0 * _TRIANGLE_BASE_DEPTH)
        return (
            (z >= -_BASE_DEPTH)
            & (height - y / _TRIANGLE_BASE_DEPTH <= 0.75)
            & (height + slant + 3.0 * x <= 0.75)
            & (height + slant - 3.0 * x <= 0.75)
        )

    def __repr__(self) -> str:
        return f"Tetrahedron(side={self.side}, mass={self.mass})"
