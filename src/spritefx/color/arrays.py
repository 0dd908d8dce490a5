"""
Vectorized color space conversions.

Array counterparts of spritefx.color.conversions. All functions take and
return float arrays in channel-first layout, shape (3, ...), using the
same units as the scalar functions: RGB in [0, 255], hue in degrees,
except hsv_to_rgb_array which takes hue in turns.
"""

from __future__ import annotations

from typing import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from spritefx.color.conversions import HUE_DEGREES, HUE_SECTORS, RGB_MAX
from spritefx.color.types import ColorSpace


def _channels(data: ArrayLike) -> NDArray[np.float64]:
    """Coerce input to a float64 array and check it has 3 leading channels."""
    arr = np.asarray(data, dtype=np.float64)
    if arr.ndim == 0 or arr.shape[0] != 3:
        raise ValueError(f"Expected channel-first data with 3 channels, got shape {arr.shape}")
    return arr


def _hue_sector(
    r: NDArray, g: NDArray, b: NDArray, _max: NDArray, chromatic: NDArray
) -> tuple[NDArray, NDArray, NDArray]:
    """Masks selecting the max channel, first match wins (red, green, blue)."""
    r_max = chromatic & (r == _max)
    g_max = chromatic & (g == _max) & ~r_max
    b_max = chromatic & ~r_max & ~g_max
    return r_max, g_max, b_max


# =============================================================================
# RGB -> HSL / HSV
# =============================================================================

def rgb_to_hsl_array(rgb: ArrayLike) -> NDArray[np.float64]:
    """Convert RGB to HSL."""
    rgb = _channels(rgb) / RGB_MAX
    r, g, b = rgb[0], rgb[1], rgb[2]

    _min = np.minimum(np.minimum(r, g), b)
    _max = np.maximum(np.maximum(r, g), b)
    chromatic = _min != _max

    c = _max - _min
    safe_c = np.where(chromatic, c, 1.0)
    lightness = np.where(chromatic, (_min + _max) / 2, r)

    denom = 1 - np.abs(2 * lightness - 1)
    saturation = np.where(chromatic, c / np.where(chromatic, denom, 1.0), 0.0)
    saturation = np.minimum(saturation, 1.0)

    r_max, g_max, b_max = _hue_sector(r, g, b, _max, chromatic)
    hue = np.zeros_like(r)
    hue = np.where(r_max, np.mod((g - b) / safe_c + 6, 6), hue)
    hue = np.where(g_max, (b - r) / safe_c + 2, hue)
    hue = np.where(b_max, (r - g) / safe_c + 4, hue)

    return np.stack([np.mod(hue * 60, HUE_DEGREES), saturation, lightness], axis=0)


def rgb_to_hsv_array(rgb: ArrayLike) -> NDArray[np.float64]:
    """Convert RGB to HSV."""
    rgb = _channels(rgb) / RGB_MAX
    r, g, b = rgb[0], rgb[1], rgb[2]

    _max = np.maximum(np.maximum(r, g), b)
    _min = np.minimum(np.minimum(r, g), b)
    d = _max - _min

    saturation = np.where(_max == 0, 0.0, d / np.where(_max == 0, 1.0, _max))

    chromatic = _max != _min
    safe_d = np.where(chromatic, d, 1.0)

    r_max, g_max, b_max = _hue_sector(r, g, b, _max, chromatic)
    hue = np.zeros_like(r)
    hue = np.where(r_max, (g - b) / safe_d + np.where(g < b, 6.0, 0.0), hue)
    hue = np.where(g_max, (b - r) / safe_d + 2, hue)
    hue = np.where(b_max, (r - g) / safe_d + 4, hue)
    hue = hue / HUE_SECTORS

    return np.stack([np.mod(hue * HUE_DEGREES, HUE_DEGREES), saturation, _max], axis=0)


# =============================================================================
# HSV -> RGB
# =============================================================================

def hsv_to_rgb_array(hsv: ArrayLike) -> NDArray[np.float64]:
    """Convert HSV to RGB. Hue is in turns [0, 1], as in hsv_to_rgb."""
    hsv = _channels(hsv)
    h, s, v = hsv[0], hsv[1], hsv[2]

    h6 = h * HUE_SECTORS
    i = np.floor(h6)
    f = h6 - i
    sector = np.mod(i, HUE_SECTORS).astype(np.int64)

    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    conditions = [sector == k for k in range(HUE_SECTORS)]
    r = np.select(conditions, [v, q, p, p, t, v])
    g = np.select(conditions, [t, v, v, q, p, p])
    b = np.select(conditions, [p, p, t, v, v, q])

    return np.stack([r, g, b], axis=0) * RGB_MAX


def _hsv_degrees_to_rgb_array(hsv: ArrayLike) -> NDArray[np.float64]:
    hsv = _channels(hsv).copy()
    hsv[0] = hsv[0] / HUE_DEGREES
    return hsv_to_rgb_array(hsv)


# =============================================================================
# HSL <-> HSV
# =============================================================================

def hsl_to_hsv_array(hsl: ArrayLike) -> NDArray[np.float64]:
    """Convert HSL to HSV. Hue passes through unchanged."""
    hsl = _channels(hsl)
    h, s, l = hsl[0], hsl[1], hsl[2]

    v = l + s * np.minimum(l, 1 - l)
    dark = v == 0
    s_v = np.where(dark, 0.0, 2 - 2 * l / np.where(dark, 1.0, v))

    return np.stack([h, s_v, v], axis=0)


def hsv_to_hsl_array(hsv: ArrayLike) -> NDArray[np.float64]:
    """Convert HSV to HSL. Hue passes through unchanged."""
    hsv = _channels(hsv)
    h, s, v = hsv[0], hsv[1], hsv[2]

    l = v - v * s / 2
    m = np.minimum(l, 1 - l)
    degenerate = m == 0
    s_l = np.where(degenerate, 0.0, (v - l) / np.where(degenerate, 1.0, m))

    return np.stack([h, s_l, l], axis=0)


def hsl_to_rgb_array(hsl: ArrayLike) -> NDArray[np.float64]:
    """Convert HSL (hue in degrees) to RGB."""
    return _hsv_degrees_to_rgb_array(hsl_to_hsv_array(hsl))


# =============================================================================
# Conversion dispatch
# =============================================================================

_Converter = Callable[[ArrayLike], NDArray[np.float64]]

# Direct conversions, hue in degrees on both sides. Same-space pairs copy.
_CONVERTERS: dict[tuple[ColorSpace, ColorSpace], _Converter] = {
    (ColorSpace.RGB, ColorSpace.HSL): rgb_to_hsl_array,
    (ColorSpace.RGB, ColorSpace.HSV): rgb_to_hsv_array,
    (ColorSpace.HSL, ColorSpace.RGB): hsl_to_rgb_array,
    (ColorSpace.HSL, ColorSpace.HSV): hsl_to_hsv_array,
    (ColorSpace.HSV, ColorSpace.RGB): _hsv_degrees_to_rgb_array,
    (ColorSpace.HSV, ColorSpace.HSL): hsv_to_hsl_array,
}


def _resolve_space(name: ColorSpace | str, role: str) -> ColorSpace:
    try:
        return ColorSpace(name.upper())
    except (AttributeError, ValueError):
        raise ValueError(f"Unknown {role} colorspace: {name}") from None


def convert_color(
    data: ArrayLike,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> NDArray[np.float64]:
    """
    Convert color data between RGB, HSL and HSV.

    Unlike hsv_to_rgb, HSV hue is in degrees here, the same as HSL, so
    output of one call can be fed straight into another.

    Args:
        data: Channel-first color data, shape (3, ...)
        from_space: Source color space name (case-insensitive)
        to_space: Target color space name (case-insensitive)

    Returns:
        Converted color data as a new float64 array

    Raises:
        ValueError: If a color space is unknown or data is not 3-channel
    """
    source = _resolve_space(from_space, "source")
    target = _resolve_space(to_space, "target")

    if source is target:
        return _channels(data).copy()

    return _CONVERTERS[(source, target)](data)


def list_colorspaces() -> list[str]:
    """Get list of supported color spaces."""
    return sorted(space.value for space in ColorSpace)
