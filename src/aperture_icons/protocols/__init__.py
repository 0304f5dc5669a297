"""Protocol interfaces for swappable icon type handlers.

Protocols enable:
- Interchangeable handler variants selected by configuration
- Unit testing with stub implementations
- Clear separation of concerns

Usage:
    ```python
    from aperture_icons.protocols import TypeHandler

    handler: TypeHandler = BasicTypeHandler("icons/basic")
    ```
"""

from .type_handler import TypeHandler

__all__ = [
    "TypeHandler",
]
