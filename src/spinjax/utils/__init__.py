"""Shared utility functions for spinjax.

Provides angle conversion helpers.
"""

from spinjax.utils._angle import from_radians, to_radians

__all__ = [
    "from_radians",
    "to_radians",
]
