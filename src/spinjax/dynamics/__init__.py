"""Rotational dynamics of rigid bodies.

Provides:

- :class:`RotatableBody` -- adaptive integrator in the principal frame
- :class:`CrossRotatableBody` -- body whose principal axes are offset from
  its reference frame
- :class:`IntegratorConfig` -- sub-stepping controls
- :class:`AdvanceResult`, :class:`RotatingBody`, :data:`TorqueSupplier`
- Torque suppliers: :func:`zero_torque`, :func:`constant_torque`,
  :func:`body_fixed_torque`
"""

from ._types import AdvanceResult, RotatingBody, TorqueSupplier
from .config import IntegratorConfig
from .torques import body_fixed_torque, constant_torque, zero_torque
from .rotatable_body import RotatableBody
from .cross_body import CrossRotatableBody

__all__ = [
    "AdvanceResult",
    "CrossRotatableBody",
    "IntegratorConfig",
    "RotatableBody",
    "RotatingBody",
    "TorqueSupplier",
    "body_fixed_torque",
    "constant_torque",
    "zero_torque",
]
