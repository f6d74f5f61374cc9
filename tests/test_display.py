"""Test display formatting and the keyboard mapping."""
import pytest

from arithmetic_calculator.client.display import format_entry, format_number, needs_exponent
from arithmetic_calculator.client.keypad import key_to_symbol


@pytest.mark.parametrize("value,expected", [
    (42.0, "42"),
    (-15.0, "-15"),
    (3.14159, "3.14159"),
    (0.1 + 0.2, "0.3"),
    (99_999_999.0, "99999999"),
    (0.0000001, "0.0000001"),
    (999_999_999.0, "9.99999999e+8"),
    (0.00000001, "1e-8"),
    (-1.5e12, "-1.5e+12"),
    (0.0, "0"),
    (-0.0, "0"),
])
def test_format_number(value: float, expected: str) -> None:
    assert format_number(value) == expected


@pytest.mark.parametrize("value,expected", [
    (100_000_000, True),
    (99_999_999, False),
    (0.00000009, True),
    (0.0000001, False),
    (0, False),
])
def test_needs_exponent(value: float, expected: bool) -> None:
    assert needs_exponent(value) is expected


def test_format_entry_keeps_typed_text() -> None:
    assert format_entry("3.", typing=True) == "3."
    assert format_entry("0.10", typing=True) == "0.10"
    assert format_entry("0.10", typing=False) == "0.1"
    assert format_entry("123456789", typing=True) == "1.23456789e+8"


@pytest.mark.parametrize("key,expected", [
    ("7", "7"),
    (".", "."),
    ("*", "*"),
    ("=", "="),
    ("Enter", "="),
    ("#", None),
    ("^", None),
    ("Escape", None),
])
def test_key_to_symbol(key: str, expected: str) -> None:
    assert key_to_symbol(key) == expected
