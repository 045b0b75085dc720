"""Axis conventions for Cartesian and aviation coordinate systems.

Provides the enums naming Cartesian axes, aviation axes and spatial
parity, plus the two mapping types that tie them together:

- :class:`DimensionMapping` -- one Cartesian axis bound to one aviation
  axis, either directly or inverted.
- :class:`AviationMapping` -- a complete, validated set of three
  ``DimensionMapping`` objects covering every axis of both systems.

Mappings let the rest of the library read "forward", "right" and "up"
out of plain ``(x, y, z)`` vectors without fixing which Cartesian axis
plays which role.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass


class CartesianAxis(enum.IntEnum):
    """The three Cartesian axes.

    Values are the component indices of the axis in an ``(x, y, z)`` array.
    """

    X = 0
    Y = 1
    Z = 2


class AviationAxis(enum.IntEnum):
    """The three principal aviation axes.

    Attributes:
        LONGITUDINAL: Forward, from tail to nose.
        LATERAL: Rightward, from wing to wing.
        VERTICAL: Upward, from belly to top.
    """

    LONGITUDINAL = 0
    LATERAL = 1
    VERTICAL = 2


class SpatialParity(enum.Enum):
    """Handedness of a Cartesian coordinate system.

    Curl the hand in the plane of the first two axes, fingers going from the
    first axis to the second.  The thumb points along the third axis and
    also gives the vector direction of a rotation.
    """

    RIGHT_HAND_XYZ = "right"
    LEFT_HAND_XYZ = "left"


@dataclass(frozen=True)
class DimensionMapping:
    """Binding between one Cartesian axis and one aviation axis.

    Args:
        aviation: The aviation axis.
        xyz: The Cartesian axis it is measured along.
        inverse: If ``True`` an increase in the Cartesian coordinate is a
            decrease in the aviation coordinate.

    Examples:
        ```python
        from spinjax.position.axes import AviationAxis, CartesianAxis, DimensionMapping
        up = DimensionMapping(AviationAxis.VERTICAL, CartesianAxis.Z)
        up.sign
        ```
    """

    aviation: AviationAxis
    xyz: CartesianAxis
    inverse: bool = False

    @staticmethod
    def from_sign(aviation: AviationAxis, sign: float, xyz: CartesianAxis) -> DimensionMapping:
        """Create a mapping from a sign multiplier.

        Args:
            aviation: The aviation axis.
            sign: Negative values produce an inverse mapping.
            xyz: The Cartesian axis.

        Returns:
            DimensionMapping: New mapping.
        """
        return DimensionMapping(aviation, xyz, inverse=sign < 0)

    @property
    def sign(self) -> float:
        """``1.0`` for a direct mapping, ``-1.0`` for an inverse one."""
        return -1.0 if self.inverse else 1.0


class AviationMapping:
    """Complete mapping between Cartesian and aviation axes.

    Exactly three :class:`DimensionMapping` objects must be given, and
    together they must name each Cartesian axis and each aviation axis.

    Args:
        mappings: The three dimension mappings, in any order.

    Raises:
        ValueError: If there are not exactly three mappings, or an axis of
            either system is left unassigned.

    Examples:
        ```python
        from spinjax.position.axes import (
            AviationAxis, AviationMapping, CartesianAxis, DimensionMapping,
        )
        classic = AviationMapping([
            DimensionMapping(AviationAxis.VERTICAL, CartesianAxis.Z),
            DimensionMapping(AviationAxis.LATERAL, CartesianAxis.X),
            DimensionMapping(AviationAxis.LONGITUDINAL, CartesianAxis.Y),
        ])
        classic.vertical.xyz
        ```
    """

    __slots__ = ('_by_xyz', '_by_aviation')

    def __init__(self, mappings: Sequence[DimensionMapping]) -> None:
        if len(mappings) != 3:
            raise ValueError(f"Mappings must have a length of 3. Value = {len(mappings)}")

        by_xyz = {m.xyz: m for m in mappings}
        by_aviation = {m.aviation: m for m in mappings}

        for axis in CartesianAxis:
            if axis not in by_xyz:
                raise ValueError(f"{axis.name} not specified")
        for axis in AviationAxis:
            if axis not in by_aviation:
                raise ValueError(f"{axis.name.capitalize()} not specified")

        self._by_xyz = by_xyz
        self._by_aviation = by_aviation

    # Properties

    @property
    def x(self) -> DimensionMapping:
        """Mapping for the X axis."""
        return self._by_xyz[CartesianAxis.X]

    @property
    def y(self) -> DimensionMapping:
        """Mapping for the Y axis."""
        return self._by_xyz[CartesianAxis.Y]

    @property
    def z(self) -> DimensionMapping:
        """Mapping for the Z axis."""
        return self._by_xyz[CartesianAxis.Z]

    @property
    def longitudinal(self) -> DimensionMapping:
        """Mapping for the forward axis."""
        return self._by_aviation[AviationAxis.LONGITUDINAL]

    @property
    def lateral(self) -> DimensionMapping:
        """Mapping for the rightward axis."""
        return self._by_aviation[AviationAxis.LATERAL]

    @property
    def vertical(self) -> DimensionMapping:
        """Mapping for the upward axis."""
        return self._by_aviation[AviationAxis.VERTICAL]

    def for_cartesian(self, axis: CartesianAxis) -> DimensionMapping:
        """Return the mapping that uses the given Cartesian axis."""
        return self._by_xyz[axis]

    def for_aviation(self, axis: AviationAxis) -> DimensionMapping:
        """Return the mapping that defines the given aviation axis."""
        return self._by_aviation[axis]

    def __repr__(self) -> str:
        parts = ", ".join(
            f"{'-' if m.inverse else ''}{m.xyz.name}={m.aviation.name}"
            for m in (self.x, self.y, self.z)
        )
        return f"AviationMapping({parts})"
