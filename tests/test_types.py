"""
Tests for type name normalization.
"""

import pytest

from aperture_icons.utils import shortform


@pytest.mark.parametrize(
    ("type_name", "expected"),
    [
        ("Person-Node", "personnode"),
        ("Bank Account", "bankaccount"),
        ("person_node", "personnode"),
        ("Type42", "type42"),
        ("already", "already"),
    ],
)
def test_shortform(type_name, expected):
    """Test normalization examples."""
    assert shortform(type_name) == expected


@pytest.mark.parametrize("type_name", ["", None, "---", " _ ", "\u00c4\u00e9"])
def test_shortform_rejects_empty(type_name):
    """Test that a missing type name is an error."""
    with pytest.raises(ValueError):
        shortform(type_name)
