"""
Sprite rotation styles.

Maps the free-form rotation style names found in project files to a
RotationStyle value.
"""

from __future__ import annotations

import logging
from enum import Enum, auto

logger = logging.getLogger(__name__)


class RotationStyle(Enum):
    """How a sprite is oriented when its direction changes."""

    NORMAL = auto()  # Rotates freely
    LEFT_RIGHT = auto()  # Flips horizontally only
    NONE = auto()  # Never rotates


_STYLE_NAMES: dict[str, RotationStyle] = {
    "leftRight": RotationStyle.LEFT_RIGHT,
    "left-right": RotationStyle.LEFT_RIGHT,
    "none": RotationStyle.NONE,
    "don't rotate": RotationStyle.NONE,
    "normal": RotationStyle.NORMAL,
    "all around": RotationStyle.NORMAL,
}


def parse_rotation_style(style: str) -> RotationStyle:
    """
    Parse a rotation style name.

    Matching is exact. Unknown names log a warning and fall back to
    RotationStyle.NORMAL.

    Args:
        style: Rotation style name, e.g. "left-right" or "don't rotate"

    Returns:
        The matching RotationStyle
    """
    try:
        return _STYLE_NAMES[style]
    except (KeyError, TypeError):
        logger.warning("unknown rotation style %r", style)
        return RotationStyle.NORMAL
