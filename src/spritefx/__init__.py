"""Color space conversion and runtime helpers for sprite effects."""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
