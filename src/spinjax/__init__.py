"""
spinjax is a small rotation-algebra and rigid-body rotational dynamics library implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    PI,
)

from .config import set_dtype, get_dtype

from .position import (
    AviationAxis,
    AviationMapping,
    AviationVector,
    CartesianAxis,
    DimensionMapping,
    SpatialParity,
    Vector3,
)

from .rotations import (
    QUATERNION_SYSTEM,
    AviationAngles,
    Quaternion,
    QuaternionRotation,
    QuaternionSystem,
    Rotation,
    RotationSystem,
    aviation_rotation,
    rotation_pitch,
    rotation_roll,
    rotation_yaw,
)

from .dynamics import (
    AdvanceResult,
    CrossRotatableBody,
    IntegratorConfig,
    RotatableBody,
    RotatingBody,
    body_fixed_torque,
    constant_torque,
    zero_torque,
)

from .inertia import (
    InertiaTensor,
    PointMass,
    PrincipalAxisConfig,
    RigidBody,
    build_aligned_body,
    center_of_mass,
    find_principal_rotation,
    principal_tensor,
)

from .shapes import (
    Cone,
    Cylinder,
    Octahedron,
    RectangularPrism,
    Solid,
    Sphere,
    Tetrahedron,
)

__all__ = [
    "DEG2RAD",
    "RAD2DEG",
    "PI",
    "set_dtype",
    "get_dtype",
    "AviationAxis",
    "AviationMapping",
    "AviationVector",
    "CartesianAxis",
    "DimensionMapping",
    "SpatialParity",
    "Vector3",
    "QUATERNION_SYSTEM",
    "AviationAngles",
    "Quaternion",
    "QuaternionRotation",
    "QuaternionSystem",
    "Rotation",
    "RotationSystem",
    "aviation_rotation",
    "rotation_pitch",
    "rotation_roll",
    "rotation_yaw",
    "AdvanceResult",
    "CrossRotatableBody",
    "IntegratorConfig",
    "RotatableBody",
    "RotatingBody",
    "body_fixed_torque",
    "constant_torque",
    "zero_torque",
    "InertiaTensor",
    "PointMass",
    "PrincipalAxisConfig",
    "RigidBody",
    "build_aligned_body",
    "center_of_mass",
    "find_principal_rotation",
    "principal_tensor",
    "Cone",
    "Cylinder",
    "Octahedron",
    "RectangularPrism",
    "Solid",
    "Sphere",
    "Tetrahedron",
]
