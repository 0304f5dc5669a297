"""
Tests for resource loading.
"""

from pathlib import Path
from unittest.mock import patch

from aperture_icons.utils import exists, load

from .conftest import PERSON_SVG


def test_load_existing_file(icon_dir):
    """Test that an existing file is opened at offset 0."""
    stream = load(str(icon_dir), "personnode.svg")
    assert stream is not None
    with stream:
        assert stream.tell() == 0
        assert stream.read() == PERSON_SVG


def test_load_missing_file(icon_dir):
    """Test that a missing file is reported as None."""
    assert load(str(icon_dir), "nothing.svg") is None


def test_load_directory_is_missing(icon_dir):
    """Test that a directory is not treated as a resource."""
    (icon_dir / "sub.svg").mkdir()
    assert load(str(icon_dir), "sub.svg") is None


def test_load_refuses_traversal(icon_dir):
    """Test that names escaping the base path are refused."""
    (icon_dir.parent / "secret.svg").write_bytes(b"secret")
    assert load(str(icon_dir), "../secret.svg") is None
    assert load(str(icon_dir), str(icon_dir.parent / "secret.svg")) is None


def test_load_package_resource():
    """Test loading from an installed package."""
    stream = load("package:aperture_icons", "__init__.py")
    assert stream is not None
    with stream:
        assert b"__version__" in stream.read()


def test_load_package_missing():
    """Test that unknown packages and files are reported as None."""
    assert load("package:aperture_icons", "nothing.svg") is None
    assert load("package:no_such_icon_package", "personnode.svg") is None


def test_exists(icon_dir):
    """Test base path existence checks."""
    assert exists(str(icon_dir))
    assert not exists(str(icon_dir / "missing"))
    assert exists("package:aperture_icons/utils")
    assert not exists("package:no_such_icon_package")


def test_load_file_removed_after_check(icon_dir):
    """Test that a file vanishing between check and open is reported as None."""
    with patch.object(Path, "is_file", return_value=True):
        assert load(str(icon_dir), "vanished.svg") is None


def test_empty_package_reference():
    """Test that a package reference without a package name is absent."""
    assert load("package:", "personnode.svg") is None
    assert load("package:/icons", "personnode.svg") is None
    assert not exists("package:")
