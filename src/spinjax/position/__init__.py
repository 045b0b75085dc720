"""Cartesian vectors and axis conventions.

Provides:

- :class:`Vector3` -- immutable ``(x, y, z)`` vector
- :class:`CartesianAxis`, :class:`AviationAxis`, :class:`SpatialParity` enums
- :class:`DimensionMapping` and :class:`AviationMapping` -- bindings between
  Cartesian and aviation axes
- :class:`AviationVector` -- a vector given by forward/right/up components
"""

from .axes import (
    AviationAxis,
    AviationMapping,
    CartesianAxis,
    DimensionMapping,
    SpatialParity,
)
from .vector import Vector3
from .aviation_vector import AviationVector

__all__ = [
    "AviationAxis",
    "AviationMapping",
    "AviationVector",
    "CartesianAxis",
    "DimensionMapping",
    "SpatialParity",
    "Vector3",
]
