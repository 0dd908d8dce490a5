"""
Color value types.

Each representation is a named 3-tuple so results unpack and compare
like plain tuples while still naming the unit of every field.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class ColorSpace(str, Enum):
    """Supported color spaces."""

    RGB = "RGB"
    HSL = "HSL"
    HSV = "HSV"


class RGB(NamedTuple):
    """Red, green and blue, each in [0, 255]."""

    r: float
    g: float
    b: float


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in [0, 1]."""

    h: float
    s: float
    l: float


class HSV(NamedTuple):
    """Hue in degrees [0, 360), saturation and value in [0, 1]."""

    h: float
    s: float
    v: float
