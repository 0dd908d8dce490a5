"""Color space conversions: RGB, HSL and HSV."""

from spritefx.color.types import ColorSpace, RGB, HSL, HSV
from spritefx.color.conversions import (
    rgb_to_hsl,
    rgb_to_hsv,
    hsv_to_rgb,
    hsv_degrees_to_rgb,
    hsl_to_hsv,
    hsv_to_hsl,
    hsl_to_rgb,
)
from spritefx.color.arrays import (
    rgb_to_hsl_array,
    rgb_to_hsv_array,
    hsv_to_rgb_array,
    hsl_to_hsv_array,
    hsv_to_hsl_array,
    hsl_to_rgb_array,
    convert_color,
    list_colorspaces,
)

__all__ = [
    "ColorSpace",
    "RGB",
    "HSL",
    "HSV",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "hsv_degrees_to_rgb",
    "hsl_to_hsv",
    "hsv_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsl_array",
    "rgb_to_hsv_array",
    "hsv_to_rgb_array",
    "hsl_to_hsv_array",
    "hsv_to_hsl_array",
    "hsl_to_rgb_array",
    "convert_color",
    "list_colorspaces",
]
