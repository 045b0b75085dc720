"""Uniform solids with closed-form volume and inertia.

Provides the abstract :class:`Solid` and the concrete :class:`Sphere`,
:class:`Cylinder`, :class:`Cone`, :class:`RectangularPrism`,
:class:`Octahedron` and :class:`Tetrahedron`.
"""

from .solid import Solid
from .solids import Cone, Cylinder, Octahedron, RectangularPrism, Sphere, Tetrahedron

__all__ = [
    "Cone",
    "Cylinder",
    "Octahedron",
    "RectangularPrism",
    "Solid",
    "Sphere",
    "Tetrahedron",
]
