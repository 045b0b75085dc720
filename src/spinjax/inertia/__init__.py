"""Mass distributions and principal axes.

Provides:

- :class:`PointMass` and the helpers :func:`center_of_mass`,
  :func:`center_point_masses`, :func:`distribute_rotation`
- :class:`InertiaTensor` -- six-component second-moment tensor
- :class:`RigidBody` -- center of mass plus tensor, with assembly
- :func:`find_principal_rotation`, :func:`principal_tensor`,
  :func:`principal_moments`, :func:`build_aligned_body`
- :class:`PrincipalAxisConfig`
"""

from .point_mass import (
    PointMass,
    center_of_mass,
    center_point_masses,
    distribute_rotation,
    stack_point_masses,
)
from .tensor import InertiaTensor
from .rigid_body import RigidBody
from .config import PrincipalAxisConfig
from .principal_axes import (
    build_aligned_body,
    find_principal_rotation,
    principal_moments,
    principal_tensor,
)

__all__ = [
    "InertiaTensor",
    "PointMass",
    "PrincipalAxisConfig",
    "RigidBody",
    "build_aligned_body",
    "center_of_mass",
    "center_point_masses",
    "distribute_rotation",
    "find_principal_rotation",
    "principal_moments",
    "principal_tensor",
    "stack_point_masses",
]
