"""Type name normalization."""

import re

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]")


def shortform(type_name: str) -> str:
    """Normalize an icon type name to its canonical short form.

    The short form is lower case with everything except ASCII letters and
    digits removed, e.g. ``"Person-Node"`` becomes ``"personnode"``.

    Args:
        type_name: The logical type name

    Returns:
        The short form, used as a resource file stem

    Raises:
        ValueError: If type_name is None, empty, or has no letters or digits
    """
    if not type_name:
        raise ValueError("type name must be a non-empty string")
    stem = _NON_ALPHANUMERIC.sub("", type_name.lower())
    if not stem:
        raise ValueError(f"type name {type_name!r} has no ASCII letters or digits")
    return stem
