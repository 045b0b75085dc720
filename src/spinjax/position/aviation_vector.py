"""Vectors expressed in aviation axes.

Provides :class:`AviationVector`, a ``(longitudinal, lateral, vertical)``
triple that converts to a Cartesian :class:`~spinjax.position.vector.Vector3`
under any :class:`~spinjax.position.axes.AviationMapping`, and back.
"""

from __future__ import annotations

from typing import NamedTuple

from spinjax.position.axes import AviationAxis, AviationMapping, DimensionMapping
from spinjax.position.vector import Vector3


class AviationVector(NamedTuple):
    """Vector given by its forward, rightward and upward components.

    Attributes:
        longitudinal: Forward component.
        lateral: Rightward component.
        vertical: Upward component.

    Examples:
        ```python
        forward = AviationVector(longitudinal=1.0)
        forward.to_vector(mapping)
        ```
    """

    longitudinal: float = 0.0
    lateral: float = 0.0
    vertical: float = 0.0

    @classmethod
    def unit(cls, axis: AviationAxis) -> AviationVector:
        """Return the unit vector along one aviation axis."""
        values = [0.0, 0.0, 0.0]
        values[int(axis)] = 1.0
        return cls(*values)

    @classmethod
    def from_vector(cls, vector: Vector3, mapping: AviationMapping) -> AviationVector:
        """Read the aviation components of a Cartesian vector.

        Args:
            vector (Vector3): Cartesian vector.
            mapping (AviationMapping): Axis mapping.

        Returns:
            AviationVector: Components along each aviation axis.
        """
        return cls(
            vector.longitudinal(mapping),
            vector.lateral(mapping),
            vector.vertical(mapping),
        )

    def get(self, axis: AviationAxis) -> float:
        """Return the component along ``axis``."""
        return self[int(axis)]

    def signed(self, axis: DimensionMapping) -> float:
        """Return the Cartesian coordinate contributed through ``axis``.

        This is the aviation component named by the mapping, negated for an
        inverse mapping.
        """
        return axis.sign * self.get(axis.aviation)

    def to_vector(self, mapping: AviationMapping) -> Vector3:
        """Convert to a Cartesian vector.

        Args:
            mapping (AviationMapping): Axis mapping.

        Returns:
            Vector3: The same vector in ``(x, y, z)`` coordinates.
        """
        return Vector3(
            self.signed(mapping.x),
            self.signed(mapping.y),
            self.signed(mapping.z),
        )
