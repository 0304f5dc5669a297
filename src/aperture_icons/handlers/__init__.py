"""Handler layer for HTTP endpoints.

Handlers depend on services, not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Resources)
"""

from .icon_handler import SVG_MEDIA_TYPE, IconHandler

__all__ = [
    "IconHandler",
    "SVG_MEDIA_TYPE",
]
