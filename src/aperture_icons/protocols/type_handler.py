"""Icon type handler protocol.

Defines the interface for anything that can turn an icon type name and a
set of attributes into a readable SVG stream.

Implementations can include:
- BasicTypeHandler: one SVG per type, attributes ignored (default)
- Variants that pick color or size versions from the attributes
"""

from collections.abc import Mapping
from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class TypeHandler(Protocol):
    """Protocol for icon type handlers.

    Any type that implements ``get_stream`` satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        from aperture_icons.protocols import TypeHandler

        handler: TypeHandler = BasicTypeHandler("icons/basic")
        stream = handler.get_stream("Person-Node", {"color": "red"})
        ```
    """

    def get_stream(
        self,
        type_name: str,
        attributes: Mapping[str, str] | None = None,
    ) -> BinaryIO | None:
        """Open the icon resource for a type.

        Args:
            type_name: Logical icon type name (not normalized)
            attributes: Attribute name to value mapping

        Returns:
            A binary stream positioned at the start of the resource, which the
            caller must close, or None if no resource exists
        """
        ...
