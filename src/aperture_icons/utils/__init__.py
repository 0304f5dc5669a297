"""Utility modules for icon resolution."""

from .resources import PACKAGE_PREFIX, exists, load
from .types import shortform

__all__ = [
    "PACKAGE_PREFIX",
    "exists",
    "load",
    "shortform",
]
