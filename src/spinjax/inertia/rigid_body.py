"""Rigid bodies assembled from point masses, solids and other bodies.

A :class:`RigidBody` records where its mass is centered and its inertia
tensor about that center.  Bodies combine through the parallel-axis rule:
the tensor of an assembly is the tensor of the component centers (taken
as point masses about the common center) plus the sum of the component
tensors.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, NamedTuple

from spinjax.inertia.point_mass import PointMass, center_of_mass
from spinjax.inertia.tensor import InertiaTensor
from spinjax.position.vector import Vector3

if TYPE_CHECKING:
    from spinjax.shapes.solid import Solid


class RigidBody(NamedTuple):
    """Mass distribution summarized by its center and second moments.

    Attributes:
        center: Total mass located at the center of mass.
        tensor: Inertia tensor about ``center.position``.
    """

    center: PointMass
    tensor: InertiaTensor

    @classmethod
    def from_point_masses(cls, masses: Sequence[PointMass]) -> RigidBody:
        """Body made of the given point masses.

        Args:
            masses: Point masses with non-zero total mass.

        Returns:
            RigidBody: Body centered on the barycenter of ``masses``.
        """
        return cls(center_of_mass(masses), InertiaTensor.centered(masses))

    @classmethod
    def from_solid(cls, solid: Solid, position: Vector3 | None = None) -> RigidBody:
        """Body made of one solid whose centroid sits at ``position``.

        Args:
            solid: The solid.
            position: Location of the solid's centroid.  Defaults to the
                origin.

        Returns:
            RigidBody: The solid as a rigid body.
        """
        if position is None:
            position = Vector3.zero()
        return cls(PointMass(solid.mass, position), solid.inertia_tensor())

    @classmethod
    def combine(cls, components: Sequence[RigidBody]) -> RigidBody:
        """Assemble several bodies into one.

        Args:
            components: Bodies to join rigidly.

        Returns:
            RigidBody: Body centered on the common center of mass, with the
            combined tensor about that center.

        Examples:
            ```python
            left = RigidBody.from_solid(Sphere(0.5), Vector3(-1.0, 0.0, 0.0))
            right = RigidBody.from_solid(Sphere(0.5), Vector3(1.0, 0.0, 0.0))
            dumbbell = RigidBody.combine([left, right])
            ```
        """
        centers = [c.center for c in components]
        tensor = InertiaTensor.centered(centers)
        for component in components:
            tensor = tensor + component.tensor
        return cls(center_of_mass(centers), tensor)

    @property
    def mass(self) -> float:
        """Total mass."""
        return self.center.mass

    @property
    def position(self) -> Vector3:
        """Center of mass."""
        return self.center.position
