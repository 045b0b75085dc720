"""Rotation capability and the rotation-system factory.

Two seams are defined here:

- :class:`Rotation` -- the structural protocol every rotation value
  satisfies (composition, inversion, vector rotation, scaling, magnitude
  and axis queries).
- :class:`RotationSystem` -- an abstract factory producing rotations of one
  concrete representation under one spatial parity.

Code that only needs to manipulate rotations depends on these two types,
never on the quaternion realization directly.
"""

from __future__ import annotations

import abc
from typing import Generic, Protocol, TypeVar, runtime_checkable

from jax import Array

from spinjax.position.axes import CartesianAxis, DimensionMapping, SpatialParity
from spinjax.position.vector import Vector3


@runtime_checkable
class Rotation(Protocol):
    """A rotation of three-dimensional space.

    Instances are immutable; every operation returns a new rotation.
    """

    def compose(self, other: Rotation) -> Rotation:
        """Return the rotation that applies ``other`` first, then ``self``."""
        ...

    def inverse(self) -> Rotation:
        """Return the rotation that undoes ``self``."""
        ...

    def rotate_vector(self, v: Vector3) -> Vector3:
        """Apply the rotation to ``v``."""
        ...

    def scale(self, factor: float) -> Rotation:
        """Return a rotation about the same axis by ``factor`` times the angle."""
        ...

    def scale_to_size(self, magnitude: float) -> Rotation:
        """Return a rotation about the same axis by exactly ``magnitude`` radians."""
        ...

    def magnitude(self) -> Array:
        """Return the rotation angle in radians, in ``[0, pi]``."""
        ...

    def axis(self) -> Vector3:
        """Return the rotation axis scaled by the rotation angle."""
        ...

    @property
    def system(self) -> RotationSystem:
        """The system that produces rotations of this type."""
        ...

    def __mul__(self, other: Rotation) -> Rotation: ...


R = TypeVar("R", bound=Rotation)


class RotationSystem(abc.ABC, Generic[R]):
    """Factory for rotations of one representation and one parity.

    Concrete systems implement the six single-plane rotations and
    :meth:`from_axis`; everything else is built from those.

    A rotation "from A to B" turns the positive A axis towards the
    positive B axis by the given magnitude.  ``angle_xy(m)`` and
    ``angle_yx(-m)`` therefore describe the same rotation.

    Args:
        parity: Handedness of the coordinate system the rotations act in.
    """

    def __init__(self, parity: SpatialParity) -> None:
        self._parity = parity

    @property
    def parity(self) -> SpatialParity:
        """Handedness of this system."""
        return self._parity

    @abc.abstractmethod
    def angle_xy(self, magnitude: float) -> R:
        """Rotation turning +X towards +Y."""

    @abc.abstractmethod
    def angle_xz(self, magnitude: float) -> R:
        """Rotation turning +X towards +Z."""

    @abc.abstractmethod
    def angle_yz(self, magnitude: float) -> R:
        """Rotation turning +Y towards +Z."""

    @abc.abstractmethod
    def angle_yx(self, magnitude: float) -> R:
        """Rotation turning +Y towards +X."""

    @abc.abstractmethod
    def angle_zx(self, magnitude: float) -> R:
        """Rotation turning +Z towards +X."""

    @abc.abstractmethod
    def angle_zy(self, magnitude: float) -> R:
        """Rotation turning +Z towards +Y."""

    @abc.abstractmethod
    def from_axis(self, axis: Vector3) -> R:
        """Rotation about ``axis`` by ``|axis|`` radians.

        The zero vector produces the identity.
        """

    def identity(self) -> R:
        """Return the rotation that leaves every vector unchanged."""
        return self.angle_xy(0.0)

    def elementary_rotation(
        self, axis_from: CartesianAxis, axis_to: CartesianAxis, magnitude: float
    ) -> R:
        """Rotation inside the plane of two Cartesian axes.

        Args:
            axis_from: Axis the rotation turns away from.
            axis_to: Axis the rotation turns towards.
            magnitude: Rotation angle in radians.

        Returns:
            Rotation: The plane rotation.

        Raises:
            ValueError: If both axes are the same.
        """
        if axis_from == axis_to:
            raise ValueError("Axes are the same")
        builders = {
            (CartesianAxis.X, CartesianAxis.Y): self.angle_xy,
            (CartesianAxis.X, CartesianAxis.Z): self.angle_xz,
            (CartesianAxis.Y, CartesianAxis.Z): self.angle_yz,
            (CartesianAxis.Y, CartesianAxis.X): self.angle_yx,
            (CartesianAxis.Z, CartesianAxis.X): self.angle_zx,
            (CartesianAxis.Z, CartesianAxis.Y): self.angle_zy,
        }
        return builders[(axis_from, axis_to)](magnitude)

    def plane_rotation(
        self, axis_from: DimensionMapping, axis_to: DimensionMapping, magnitude: float
    ) -> R:
        """Rotation between two mapped axes.

        The magnitude is multiplied by the sign of both mappings, so turning
        from an inverted axis rotates the other way round.

        Args:
            axis_from: Mapped axis the rotation turns away from.
            axis_to: Mapped axis the rotation turns towards.
            magnitude: Rotation angle in radians.

        Returns:
            Rotation: The plane rotation.

        Raises:
            ValueError: If both mappings use the same Cartesian axis.

        Examples:
            ```python
            from spinjax.position import AviationAxis, CartesianAxis, DimensionMapping
            from spinjax.rotations import QUATERNION_SYSTEM
            fwd = DimensionMapping(AviationAxis.LONGITUDINAL, CartesianAxis.Y)
            up = DimensionMapping(AviationAxis.VERTICAL, CartesianAxis.Z)
            nose_up = QUATERNION_SYSTEM.plane_rotation(fwd, up, 0.1)
            ```
        """
        signed = axis_from.sign * axis_to.sign * magnitude
        return self.elementary_rotation(axis_from.xyz, axis_to.xyz, signed)
