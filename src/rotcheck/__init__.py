"""
rotcheck: String Rotation Checker

Decides whether one sequence is a cyclic rotation of another, in linear time,
by searching for the second inside the first concatenated with itself.
"""

__version__ = "0.1.0"

from .kernel import (
    is_rotation,
    rotation_offset,
    rotation_offsets,
    rotate_left,
    minimal_period,
    SearchError
)

__all__ = [
    "is_rotation",
    "rotation_offset",
    "rotation_offsets",
    "rotate_left",
    "minimal_period",
    "SearchError",
]
