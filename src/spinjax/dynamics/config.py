"""Configuration for the rotational-dynamics integrator.

Provides :class:`IntegratorConfig`, the sub-stepping controls of
:class:`~spinjax.dynamics.rotatable_body.RotatableBody`.
"""

from __future__ import annotations

from dataclasses import dataclass

from spinjax.constants import (
    ACCELERATION_FLOOR,
    COARSE_STEP_THRESHOLD,
    DEFAULT_STEP_THRESHOLD,
    FINE_STEP_THRESHOLD,
    VELOCITY_FLOOR,
)


@dataclass(frozen=True)
class IntegratorConfig:
    """Sub-stepping controls for :meth:`RotatableBody.advance`.

    A sub-step is limited so that neither the rotation it produces nor the
    rotation caused by angular acceleration exceeds ``step_threshold``.
    Each sub-step is accurate to roughly the third power of the threshold.

    Args:
        step_threshold: Largest rotation a single sub-step may produce [rad].
        velocity_floor: Angular speeds below this leave the sub-step
            unconstrained by velocity.
        acceleration_floor: Angular accelerations below this leave the
            sub-step unconstrained by acceleration.

    Raises:
        ValueError: If ``step_threshold`` is not positive or a floor is
            negative.

    Examples:
        ```python
        from spinjax.dynamics.config import IntegratorConfig
        config = IntegratorConfig.fine()
        config.step_threshold
        ```
    """

    step_threshold: float = DEFAULT_STEP_THRESHOLD
    velocity_floor: float = VELOCITY_FLOOR
    acceleration_floor: float = ACCELERATION_FLOOR

    def __post_init__(self) -> None:
        if self.step_threshold <= 0.0:
            raise ValueError(f"step_threshold must be positive, got {self.step_threshold}")
        if self.velocity_floor < 0.0 or self.acceleration_floor < 0.0:
            raise ValueError(
                f"Floors must be non-negative, got velocity_floor={self.velocity_floor}, "
                f"acceleration_floor={self.acceleration_floor}"
            )

    @staticmethod
    def fine() -> IntegratorConfig:
        """Preset: ten times smaller sub-steps than the default.

        Returns:
            IntegratorConfig: Configuration with a 0.001 rad threshold.

        Examples:
            ```python
            IntegratorConfig.fine().step_threshold
            ```
        """
        return IntegratorConfig(step_threshold=FINE_STEP_THRESHOLD)

    @staticmethod
    def coarse() -> IntegratorConfig:
        """Preset: ten times larger sub-steps than the default.

        Returns:
            IntegratorConfig: Configuration with a 0.1 rad threshold.
        """
        return IntegratorConfig(step_threshold=COARSE_STEP_THRESHOLD)
