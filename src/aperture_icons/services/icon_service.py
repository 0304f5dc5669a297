"""Icon service for resolving icon types to SVG content.

This service wraps a TypeHandler. It never substitutes a default icon:
a missing resource is reported to the caller as None.
"""

import logging
from collections.abc import Mapping
from typing import BinaryIO

from aperture_icons.entities import IconResourceEntity
from aperture_icons.protocols import TypeHandler
from aperture_icons.repositories import create_type_handler
from aperture_icons.utils import exists, shortform

logger = logging.getLogger(__name__)


class IconService:
    """Icon resolution service.

    Example:
        ```python
        from aperture_icons.repositories import BasicTypeHandler
        from aperture_icons.services import IconService

        icons = IconService(handler=BasicTypeHandler("/icons/basic"))
        with icons.open_icon("Person-Node") as stream:
            ...
        ```
    """

    def __init__(self, handler: TypeHandler) -> None:
        """Initialize the icon service.

        Args:
            handler: The type handler resources are resolved with (required).
        """
        self._handler = handler

    @classmethod
    def create(
        cls,
        handler: TypeHandler | None = None,
        kind: str | None = None,
        base_path: str | None = None,
    ) -> "IconService":
        """Factory method to create IconService with the configured handler.

        Args:
            handler: Handler to use. If None, one is built from settings.
            kind: Handler kind when building from settings.
            base_path: Base path when building from settings.

        Returns:
            Configured IconService instance
        """
        return cls(handler=handler or create_type_handler(kind=kind, base_path=base_path))

    @property
    def handler(self) -> TypeHandler:
        """Get the underlying type handler."""
        return self._handler

    def describe(self, type_name: str) -> IconResourceEntity:
        """Describe the resource a type name resolves to.

        Raises:
            ValueError: If type_name is empty
        """
        stem = shortform(type_name)
        return IconResourceEntity(type_name=type_name, shortform=stem, filename=f"{stem}.svg")

    def open_icon(
        self,
        type_name: str,
        attributes: Mapping[str, str] | None = None,
    ) -> BinaryIO | None:
        """Open the icon stream for a type.

        Args:
            type_name: Logical icon type name
            attributes: Attributes passed through to the handler

        Returns:
            An open binary stream the caller must close, or None if missing

        Raises:
            ValueError: If type_name is empty
        """
        stream = self._handler.get_stream(type_name, attributes or {})
        if stream is None:
            logger.debug("No icon for type %r (attributes=%s)", type_name, attributes)
        return stream

    def read_icon(
        self,
        type_name: str,
        attributes: Mapping[str, str] | None = None,
    ) -> bytes | None:
        """Read the full icon content for a type.

        Returns:
            The SVG bytes, or None if missing
        """
        stream = self.open_icon(type_name, attributes)
        if stream is None:
            return None
        with stream:
            return stream.read()

    def is_healthy(self) -> bool:
        """Check if the handler's base path can be read.

        Handlers without a base path are assumed healthy.
        """
        base_path = getattr(self._handler, "base_path", None)
        if base_path is None:
            return True
        return exists(base_path)
