"""Runtime helpers: rotation styles, numeric and async utilities, slots."""

from spritefx.core.rotation import RotationStyle, parse_rotation_style
from spritefx.core.signals import Slot
from spritefx.core.utils import clamp, settled

__all__ = [
    "RotationStyle",
    "parse_rotation_style",
    "Slot",
    "clamp",
    "settled",
]
