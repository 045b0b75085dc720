"""Pitch, yaw and roll.

Converts between rotations and aviation angles under an arbitrary
:class:`~spinjax.position.axes.AviationMapping`.  A rotation is built as
``yaw * pitch * roll``: roll is applied first, then pitch, then yaw.

- pitch turns the longitudinal axis towards the vertical axis (nose up),
- yaw turns the lateral axis towards the longitudinal axis (nose left),
- roll turns the vertical axis towards the lateral axis (right wing down).

Extraction clips the ``asin`` arguments to ``[-1, 1]`` and floors
``cos(pitch)`` at a small positive value, so rotations at or near gimbal
lock yield finite angles.  Roll is only recoverable within
``[-pi/2, pi/2]``.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from spinjax.constants import ROLL_COS_PITCH_FLOOR
from spinjax.position.axes import AviationAxis, AviationMapping
from spinjax.position.aviation_vector import AviationVector
from spinjax.rotations.quaternion_rotation import QUATERNION_SYSTEM
from spinjax.rotations.rotation import Rotation, RotationSystem
from spinjax.utils import from_radians, to_radians


def _clip_unit(x: ArrayLike) -> Array:
    return jnp.clip(x, -1.0, 1.0)


def rotation_pitch(
    rotation: Rotation, mapping: AviationMapping, use_degrees: bool = False
) -> Array:
    """Pitch of a rotation: elevation of the rotated forward axis.

    Args:
        rotation (Rotation): Orientation to inspect.
        mapping (AviationMapping): Axis mapping.
        use_degrees (bool): If ``True``, return degrees.

    Returns:
        jax.Array: Pitch in ``[-pi/2, pi/2]``.
    """
    fwd = rotation.rotate_vector(AviationVector.unit(AviationAxis.LONGITUDINAL).to_vector(mapping))
    pitch = jnp.arcsin(_clip_unit(fwd.vertical(mapping)))
    return from_radians(pitch, use_degrees)


def rotation_yaw(
    rotation: Rotation, mapping: AviationMapping, use_degrees: bool = False
) -> Array:
    """Yaw of a rotation: heading of the rotated forward axis.

    Args:
        rotation (Rotation): Orientation to inspect.
        mapping (AviationMapping): Axis mapping.
        use_degrees (bool): If ``True``, return degrees.

    Returns:
        jax.Array: Yaw in ``(-pi, pi]``, positive to the left.
    """
    fwd = rotation.rotate_vector(AviationVector.unit(AviationAxis.LONGITUDINAL).to_vector(mapping))
    yaw = jnp.arctan2(-fwd.lateral(mapping), fwd.longitudinal(mapping))
    return from_radians(yaw, use_degrees)


def rotation_roll(
    rotation: Rotation, mapping: AviationMapping, use_degrees: bool = False
) -> Array:
    """Roll of a rotation: drop of the rotated lateral axis.

    Args:
        rotation (Rotation): Orientation to inspect.
        mapping (AviationMapping): Axis mapping.
        use_degrees (bool): If ``True``, return degrees.

    Returns:
        jax.Array: Roll in ``[-pi/2, pi/2]``.
    """
    pitch = rotation_pitch(rotation, mapping)
    lat = rotation.rotate_vector(AviationVector.unit(AviationAxis.LATERAL).to_vector(mapping))
    cos_pitch = jnp.maximum(ROLL_COS_PITCH_FLOOR, jnp.cos(pitch))
    roll = jnp.arcsin(_clip_unit(-lat.vertical(mapping) / cos_pitch))
    return from_radians(roll, use_degrees)


def aviation_rotation(
    pitch: ArrayLike,
    yaw: ArrayLike,
    roll: ArrayLike,
    mapping: AviationMapping,
    system: RotationSystem = QUATERNION_SYSTEM,
    use_degrees: bool = False,
) -> Rotation:
    """Build the rotation ``yaw * pitch * roll``.

    Args:
        pitch (ArrayLike): Nose-up angle.
        yaw (ArrayLike): Nose-left angle.
        roll (ArrayLike): Right-wing-down angle.
        mapping (AviationMapping): Axis mapping.
        system (RotationSystem): Factory for the plane rotations.
        use_degrees (bool): If ``True``, the angles are in degrees.

    Returns:
        Rotation: The combined orientation.

    Examples:
        ```python
        r = aviation_rotation(0.1, 0.0, 0.0, mapping)
        rotation_pitch(r, mapping)  # ~ 0.1
        ```
    """
    pitch = to_radians(pitch, use_degrees)
    yaw = to_radians(yaw, use_degrees)
    roll = to_radians(roll, use_degrees)

    r_pitch = system.plane_rotation(mapping.longitudinal, mapping.vertical, pitch)
    r_yaw = system.plane_rotation(mapping.lateral, mapping.longitudinal, yaw)
    r_roll = system.plane_rotation(mapping.vertical, mapping.lateral, roll)
    return r_yaw.compose(r_pitch.compose(r_roll))


class AviationAngles(NamedTuple):
    """Orientation expressed as pitch, yaw and roll in radians.

    Attributes:
        pitch: Nose-up angle.
        yaw: Nose-left angle.
        roll: Right-wing-down angle.
    """

    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0

    @classmethod
    def from_rotation(cls, rotation: Rotation, mapping: AviationMapping) -> AviationAngles:
        """Extract the angles of ``rotation``.

        Args:
            rotation (Rotation): Orientation to inspect.
            mapping (AviationMapping): Axis mapping.

        Returns:
            AviationAngles: The extracted angles.
        """
        return cls(
            rotation_pitch(rotation, mapping),
            rotation_yaw(rotation, mapping),
            rotation_roll(rotation, mapping),
        )

    def to_rotation(
        self, mapping: AviationMapping, system: RotationSystem = QUATERNION_SYSTEM
    ) -> Rotation:
        """Build the rotation ``yaw * pitch * roll``."""
        return aviation_rotation(self.pitch, self.yaw, self.roll, mapping, system)
