"""Basic icon type handler.

Handles a single attribute, the type itself, by loading
``<shortform>.svg`` from one base directory.
"""

from collections.abc import Mapping
from typing import BinaryIO

from aperture_icons.config import settings
from aperture_icons.utils import load, shortform

SVG_SUFFIX = ".svg"


class BasicTypeHandler:
    """Simple TypeHandler which ignores attributes.

    This class satisfies the TypeHandler protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        handler = BasicTypeHandler("/icons/basic")
        stream = handler.get_stream("Person-Node")  # /icons/basic/personnode.svg
        ```
    """

    def __init__(self, base_path: str) -> None:
        """Initialize the handler.

        Args:
            base_path: Directory or package reference holding the SVG files.
        """
        self._base_path = base_path

    @classmethod
    def create(cls, base_path: str | None = None) -> "BasicTypeHandler":
        """Factory method to create BasicTypeHandler with defaults.

        Args:
            base_path: Base path. If None, uses settings.

        Returns:
            Configured BasicTypeHandler
        """
        return cls(base_path=base_path or settings.icon_base_path)

    @property
    def base_path(self) -> str:
        """Get the base path resources are loaded from."""
        return self._base_path

    def filename(self, type_name: str) -> str:
        """Get the resource file name for a type."""
        return shortform(type_name) + SVG_SUFFIX

    def get_stream(
        self,
        type_name: str,
        attributes: Mapping[str, str] | None = None,
    ) -> BinaryIO | None:
        """Open the SVG for a type, ignoring attributes.

        Args:
            type_name: Logical icon type name
            attributes: Unused by this handler

        Returns:
            An open binary stream, or None if there is no such icon
        """
        return load(self._base_path, self.filename(type_name))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_path={self._base_path!r})"
