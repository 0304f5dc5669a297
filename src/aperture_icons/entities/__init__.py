"""Domain entities for internal representation.

These are frozen dataclasses used internally by services. They are NOT
used for API contracts - use DTOs from the dto package for that.
"""

from .icon_resource import IconResourceEntity

__all__ = ["IconResourceEntity"]
