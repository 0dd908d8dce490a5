"""
Scalar color space conversions between RGB, HSL and HSV.

RGB channels are in [0, 255]. Hue is in degrees [0, 360) everywhere
except the input of hsv_to_rgb, which takes hue as a fraction of a full
turn in [0, 1]. Use hsv_degrees_to_rgb to pass degrees instead.

None of these functions validate their input: out-of-range values give
out-of-range results. Achromatic colors get hue 0 and saturation 0.
"""

from __future__ import annotations

import math

from spritefx.color.types import HSL, HSV, RGB

RGB_MAX = 255.0
HUE_DEGREES = 360.0
HUE_SECTORS = 6


# =============================================================================
# RGB -> HSL / HSV
# =============================================================================

def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """
    Convert RGB to HSL.

    Args:
        r: Red in [0, 255]
        g: Green in [0, 255]
        b: Blue in [0, 255]

    Returns:
        HSL with hue in [0, 360), saturation and lightness in [0, 1]
    """
    r /= RGB_MAX
    g /= RGB_MAX
    b /= RGB_MAX

    _min = min(r, g, b)
    _max = max(r, g, b)

    if _min == _max:
        return HSL(0.0, 0.0, r)

    c = _max - _min
    l = (_min + _max) / 2
    # Rounding can push s a hair above 1
    s = min(c / (1 - abs(2 * l - 1)), 1.0)

    # First match wins on ties: red, then green, then blue
    if _max == r:
        h = ((g - b) / c + 6) % 6
    elif _max == g:
        h = (b - r) / c + 2
    else:
        h = (r - g) / c + 4

    return HSL((h * 60) % HUE_DEGREES, s, l)


def rgb_to_hsv(r: float, g: float, b: float) -> HSV:
    """
    Convert RGB to HSV.

    Args:
        r: Red in [0, 255]
        g: Green in [0, 255]
        b: Blue in [0, 255]

    Returns:
        HSV with hue in [0, 360), saturation and value in [0, 1]
    """
    r /= RGB_MAX
    g /= RGB_MAX
    b /= RGB_MAX

    _max = max(r, g, b)
    _min = min(r, g, b)
    v = _max

    d = _max - _min
    s = 0.0 if _max == 0 else d / _max

    if _max == _min:
        h = 0.0
    else:
        if _max == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif _max == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= HUE_SECTORS

    # (g - b)/d + 6 can round to exactly 6
    return HSV((h * HUE_DEGREES) % HUE_DEGREES, s, v)


# =============================================================================
# HSV -> RGB
# =============================================================================

def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """
    Convert HSV to RGB.

    Note the hue unit: ``h`` is a fraction of a turn, not degrees. Divide
    a hue from rgb_to_hsv by 360 before passing it here.

    Args:
        h: Hue in [0, 1], wrapping
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        RGB with each channel in [0, 255]
    """
    i = math.floor(h * HUE_SECTORS)
    f = h * HUE_SECTORS - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = i % HUE_SECTORS
    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return RGB(r * RGB_MAX, g * RGB_MAX, b * RGB_MAX)


def hsv_degrees_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert HSV to RGB with hue given in degrees."""
    return hsv_to_rgb(h / HUE_DEGREES, s, v)


# =============================================================================
# HSL <-> HSV
# =============================================================================

def hsl_to_hsv(h: float, s: float, l: float) -> HSV:
    """
    Convert HSL to HSV. Hue passes through unchanged.

    Args:
        h: Hue in [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        HSV with hue in [0, 360), saturation and value in [0, 1]
    """
    v = l + s * min(l, 1 - l)
    s_v = 0.0 if v == 0 else 2 - 2 * l / v
    return HSV(h, s_v, v)


def hsv_to_hsl(h: float, s: float, v: float) -> HSL:
    """
    Convert HSV to HSL. Hue passes through unchanged.

    Saturation is ``(v - l) / min(l, 1 - l)`` and is forced to 0 when
    that denominator is 0 (black and white). This is the exact inverse of
    hsl_to_hsv; the runtime this was ported from divided by
    ``2 - 2 * l / v`` instead, which gives v / 2 for every chromatic color.

    Args:
        h: Hue in [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        HSL with hue in [0, 360), saturation and lightness in [0, 1]
    """
    l = v - v * s / 2
    m = min(l, 1 - l)
    s_l = 0.0 if m == 0 else (v - l) / m
    return HSL(h, s_l, l)


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL (hue in degrees) to RGB via HSV."""
    return hsv_degrees_to_rgb(*hsl_to_hsv(h, s, l))
