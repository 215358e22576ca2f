"""
Unit tests for string helpers.
"""

import pytest

from api_contract_builder.utils import capitalize


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("user", "User"),
        ("User", "User"),
        ("userProfile", "UserProfile"),
        ("x", "X"),
        ("", ""),
        ("1st", "1st"),
        ("_private", "_private"),
        ("éclair", "éclair"),
        ("ßtring", "ßtring"),
    ],
)
def test_capitalize(value: str, expected: str) -> None:
    """Test that only an ASCII first character is upper-cased."""
    assert capitalize(value) == expected


def test_capitalize_keeps_rest() -> None:
    assert capitalize("hTTP") == "HTTP"
