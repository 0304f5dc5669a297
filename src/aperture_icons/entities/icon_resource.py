"""Icon resource domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IconResourceEntity:
    """Domain entity describing where an icon type resolves to.

    Attributes:
        type_name: The requested type name, as given by the caller
        shortform: The normalized type name used as the file stem
        filename: The resource file name (shortform plus ".svg")
    """

    type_name: str
    shortform: str
    filename: str
