"""
Shared fixtures for the icon tests.
"""

import pytest

PERSON_SVG = b'<svg xmlns="http://www.w3.org/2000/svg"><circle r="4"/></svg>'
ACCOUNT_SVG = b'<svg xmlns="http://www.w3.org/2000/svg"><rect width="4" height="4"/></svg>'


@pytest.fixture
def icon_dir(tmp_path):
    """Create a base directory holding a couple of SVG icons."""
    base = tmp_path / "icons" / "basic"
    base.mkdir(parents=True)
    (base / "personnode.svg").write_bytes(PERSON_SVG)
    (base / "bankaccount.svg").write_bytes(ACCOUNT_SVG)
    return base
