"""Service layer for icon resolution.

Services depend on the TypeHandler protocol, not on concrete handlers.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Resources)

Usage:
    ```python
    from aperture_icons.services import IconService

    icons = IconService.create()
    svg = icons.read_icon("Person-Node")
    ```
"""

from .icon_service import IconService

__all__ = [
    "IconService",
]
