"""Rotation algebra.

Provides:

- :class:`Quaternion` -- general quaternion arithmetic
- :class:`Rotation` protocol and :class:`RotationSystem` factory
- :class:`QuaternionRotation`, :class:`QuaternionSystem` and the shared
  :data:`QUATERNION_SYSTEM`
- Aviation angles: :class:`AviationAngles`, :func:`aviation_rotation`,
  :func:`rotation_pitch`, :func:`rotation_yaw`, :func:`rotation_roll`
"""

from .quaternion import Quaternion
from .rotation import Rotation, RotationSystem
from .quaternion_rotation import QUATERNION_SYSTEM, QuaternionRotation, QuaternionSystem
from .aviation import (
    AviationAngles,
    aviation_rotation,
    rotation_pitch,
    rotation_roll,
    rotation_yaw,
)

__all__ = [
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
]
