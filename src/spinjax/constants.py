"""Numerical defaults shared across spinjax.

All angles are in radians and all times in the caller's time unit; the
library is unit-agnostic beyond requiring consistency.
"""

import math

PI = math.pi
"""Archimedes' constant."""

DEG2RAD = math.pi / 180.0
"""Degrees to radians."""

RAD2DEG = 180.0 / math.pi
"""Radians to degrees."""

DEFAULT_STEP_THRESHOLD = 0.01
"""Maximum angle change [rad] a single integrator sub-step may produce."""

FINE_STEP_THRESHOLD = 0.001
"""Sub-step threshold used by the ``fine`` integrator preset [rad]."""

COARSE_STEP_THRESHOLD = 0.1
"""Sub-step threshold used by the ``coarse`` integrator preset [rad]."""

VELOCITY_FLOOR = 1e-6
"""Angular speeds below this do not constrain the sub-step length [rad/t]."""

ACCELERATION_FLOOR = 1e-6
"""Angular accelerations below this do not constrain the sub-step length [rad/t^2]."""

PRINCIPAL_SEARCH_INITIAL_STEP = 0.5
"""Initial trial rotation magnitude of the principal-axis search [rad]."""

PRINCIPAL_SEARCH_MIN_STEP = 1e-12
"""The principal-axis search stops once its trial step falls below this [rad]."""

ROLL_COS_PITCH_FLOOR = 1e-10
"""Lower bound on cos(pitch) when extracting roll near gimbal lock."""
