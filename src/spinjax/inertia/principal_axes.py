"""Principal-axis search.

Finds the rotation that brings an inertia tensor to diagonal form by
coordinate descent over the six single-plane rotations:

1. Decompose the tensor into its six equivalent point masses.
2. Starting from the identity, try ``trial * current`` for each plane
   rotation by the current step, in the fixed order XY, ZX, YZ, YX, XZ, ZY.
3. Accept the first trial that strictly lowers the cross inertia (sum of
   squared products) and start over at the same step.
4. When no trial improves, halve the step; stop once the step reaches the
   configured floor.

The search is deterministic and never fails.  For tensors with repeated
principal moments any rotation within the degenerate subspace is an
equally valid answer.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import jax

from spinjax.dynamics.cross_body import CrossRotatableBody
from spinjax.inertia.config import PrincipalAxisConfig
from spinjax.inertia.point_mass import PointMass, distribute_rotation
from spinjax.inertia.tensor import InertiaTensor
from spinjax.rotations.rotation import Rotation, RotationSystem

logger = logging.getLogger(__name__)


def _cross_inertia(masses: Sequence[PointMass]) -> float:
    return float(InertiaTensor.from_point_masses(masses).cross_inertia())


def find_principal_rotation(
    system: RotationSystem,
    tensor: InertiaTensor,
    config: PrincipalAxisConfig | None = None,
) -> Rotation:
    """Rotation that diagonalizes ``tensor``.

    Applying the returned rotation to the body (``tensor.rotated(r)``)
    yields a tensor whose products are zero to within the search's
    resolution.

    Args:
        system: Factory for the trial rotations.
        tensor: Tensor to diagonalize.
        config: Step schedule.  Defaults to :class:`PrincipalAxisConfig()`.

    Returns:
        Rotation: The accumulated rotation.

    Examples:
        ```python
        from spinjax.rotations import QUATERNION_SYSTEM
        r = find_principal_rotation(QUATERNION_SYSTEM, tensor)
        float(tensor.rotated(r).cross_inertia())  # ~ 0
        ```
    """
    if config is None:
        config = PrincipalAxisConfig()

    trials = (
        system.angle_xy,
        system.angle_zx,
        system.angle_yz,
        system.angle_yx,
        system.angle_xz,
        system.angle_zy,
    )

    masses = tensor.equivalent_point_masses()
    rotation = system.identity()
    cross = _cross_inertia(masses)
    initial_cross = cross

    frac = config.initial_step
    accepted = 0
    halvings = 0
    while frac > config.min_step:
        for trial in trials:
            candidate = trial(frac).compose(rotation)
            candidate_cross = _cross_inertia(distribute_rotation(masses, candidate))
            if candidate_cross < cross:
                rotation = candidate
                cross = candidate_cross
                accepted += 1
                break
        else:
            frac /= 2.0
            halvings += 1

    logger.debug(
        "Principal-axis search: %d accepted moves, %d halvings, cross inertia %.3e -> %.3e",
        accepted,
        halvings,
        initial_cross,
        cross,
    )
    return rotation


def principal_tensor(
    system: RotationSystem,
    tensor: InertiaTensor,
    config: PrincipalAxisConfig | None = None,
) -> tuple[Rotation, InertiaTensor]:
    """Find the principal rotation and the tensor it produces.

    Args:
        system: Factory for the trial rotations.
        tensor: Tensor to diagonalize.
        config: Step schedule.

    Returns:
        tuple: ``(rotation, tensor.rotated(rotation))``.
    """
    rotation = find_principal_rotation(system, tensor, config)
    return rotation, tensor.rotated(rotation)


def principal_moments(
    system: RotationSystem,
    tensor: InertiaTensor,
    config: PrincipalAxisConfig | None = None,
) -> jax.Array:
    """Principal moments of inertia of ``tensor`` as an array of shape ``(3,)``."""
    _, aligned = principal_tensor(system, tensor, config)
    return aligned.principal_moments().to_array()


def build_aligned_body(
    system: RotationSystem,
    tensor: InertiaTensor,
    config: PrincipalAxisConfig | None = None,
) -> CrossRotatableBody:
    """Rotatable body for an arbitrary (non-diagonal) tensor.

    The tensor is diagonalized and the resulting principal moments become
    the body's inertia.  The principal rotation becomes the body's
    correction, so the body's orientation is still expressed in the frame
    ``tensor`` was given in.

    Args:
        system: Factory for rotations.
        tensor: Tensor of the body in its own frame, about its center of mass.
        config: Step schedule of the principal-axis search.

    Returns:
        CrossRotatableBody: Body at the identity orientation with zero
        momentum.

    Raises:
        ValueError: If a principal moment is zero (a point or a rod).
    """
    rotation, aligned = principal_tensor(system, tensor, config)
    return CrossRotatableBody(aligned.principal_moments(), rotation)
