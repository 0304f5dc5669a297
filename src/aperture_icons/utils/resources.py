"""Resource loading from the filesystem or from installed packages.

A base path is either a directory on disk or a package reference of the
form ``package:<dotted.package>[/<sub/dir>]`` read through
``importlib.resources``. Every call opens a new stream; nothing is cached.
"""

import logging
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path, PurePosixPath
from typing import BinaryIO

logger = logging.getLogger(__name__)

PACKAGE_PREFIX = "package:"


def _is_contained(filename: str) -> bool:
    """Check that a resource name stays inside its base directory."""
    name = PurePosixPath(filename.replace("\\", "/"))
    return bool(filename) and not name.is_absolute() and ".." not in name.parts


def _package_root(reference: str) -> Traversable | None:
    """Resolve a package reference to a traversable directory."""
    package, _, subdir = reference.partition("/")
    if not package:
        logger.warning("Icon package reference has no package name: %r", reference)
        return None
    try:
        root = resources.files(package)
    except ModuleNotFoundError:
        logger.warning("Icon package not found: %s", package)
        return None
    for part in PurePosixPath(subdir).parts:
        root = root.joinpath(part)
    return root


def exists(base_path: str) -> bool:
    """Check whether a base path points at an existing directory.

    Args:
        base_path: Directory path or package reference

    Returns:
        True if the base directory can be read, False otherwise
    """
    if base_path.startswith(PACKAGE_PREFIX):
        root = _package_root(base_path[len(PACKAGE_PREFIX):])
        return root is not None and root.is_dir()
    return Path(base_path).is_dir()


def load(base_path: str, filename: str) -> BinaryIO | None:
    """Open a resource below a base path.

    Args:
        base_path: Directory path or package reference
        filename: Resource name relative to the base path

    Returns:
        A freshly opened binary stream, or None if the resource does not exist

    Raises:
        OSError: If the resource exists but cannot be opened
    """
    if not _is_contained(filename):
        logger.warning("Refusing resource outside base path %s: %r", base_path, filename)
        return None

    if base_path.startswith(PACKAGE_PREFIX):
        root = _package_root(base_path[len(PACKAGE_PREFIX):])
        if root is None:
            return None
        resource = root.joinpath(filename)
    else:
        resource = Path(base_path) / filename

    if not resource.is_file():
        return None
    try:
        return resource.open("rb")
    except (FileNotFoundError, IsADirectoryError):
        return None
