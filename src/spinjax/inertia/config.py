"""Configuration for the principal-axis search.

Provides :class:`PrincipalAxisConfig`, the step schedule of the
coordinate-descent search in :mod:`spinjax.inertia.principal_axes`.
"""

from __future__ import annotations

from dataclasses import dataclass

from spinjax.constants import PRINCIPAL_SEARCH_INITIAL_STEP, PRINCIPAL_SEARCH_MIN_STEP


@dataclass(frozen=True)
class PrincipalAxisConfig:
    """Step schedule for :func:`~spinjax.inertia.principal_axes.find_principal_rotation`.

    The search starts with trial rotations of ``initial_step`` radians and
    halves the step every time no trial improves the cross inertia.  It
    stops once the step is no longer greater than ``min_step``.

    Args:
        initial_step: First trial rotation angle [rad].
        min_step: Step size at which the search ends [rad].

    Raises:
        ValueError: If either step is not positive, or ``min_step`` exceeds
            ``initial_step``.

    Examples:
        ```python
        from spinjax.inertia.config import PrincipalAxisConfig
        config = PrincipalAxisConfig.coarse()
        config.min_step
        ```
    """

    initial_step: float = PRINCIPAL_SEARCH_INITIAL_STEP
    min_step: float = PRINCIPAL_SEARCH_MIN_STEP

    def __post_init__(self) -> None:
        if self.initial_step <= 0.0 or self.min_step <= 0.0:
            raise ValueError(
                f"Search steps must be positive, got initial_step={self.initial_step}, "
                f"min_step={self.min_step}"
            )
        if self.min_step > self.initial_step:
            raise ValueError(
                f"min_step ({self.min_step}) must not exceed initial_step ({self.initial_step})"
            )

    @staticmethod
    def coarse() -> PrincipalAxisConfig:
        """Preset: stop at a step of ``1e-6`` rad.

        Roughly halves the work of the default search, at the price of a
        residual misalignment around ``1e-6`` rad.

        Returns:
            PrincipalAxisConfig: Coarse search schedule.
        """
        return PrincipalAxisConfig(min_step=1e-6)
