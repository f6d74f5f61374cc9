"""Test class OperandParser."""

import pytest

from arithmetic_calculator.common.parser import OperandParser


@pytest.mark.parametrize("token", [
    "123",
    "-10",
    "+7",
    "007",
    "45.67",
    ".5",
    "3.",
    "1e2",
    "1.2e-5",
    "-1.2E+5",
])
def test_is_number_accepts_valid_formats(token):
    """is_number accepts signed decimals and exponential notation."""
    assert OperandParser.is_number(token)


@pytest.mark.parametrize("token", [
    "3.14.159",   # Multiple decimal points
    "3.14-2",     # Sign embedded mid-string
    "abc",
    "",
    ".",
    "-",
    "1e",
    "e5",
    "inf",
    "nan",
    "1_000",
    " 5",
    "5\n",
])
def test_is_number_rejects_malformed(token):
    """is_number rejects anything but a single number."""
    assert not OperandParser.is_number(token)


@pytest.mark.parametrize("token,expected", [
    ("007", 7.0),
    (".5", 0.5),
    ("-21", -21.0),
    ("1e2", 100.0),
    ("1.2e-5", 0.000012),
])
def test_parse_valid(token, expected):
    """parse converts valid strings to float."""
    assert OperandParser.parse(token) == expected


def test_parse_invalid_raises():
    """parse raises ValueError for malformed strings."""
    with pytest.raises(ValueError):
        OperandParser.parse("3.14.159")


@pytest.mark.parametrize("token", [
    "٣",          # Arabic-Indic digit three
    "１",          # Fullwidth digit one
    "1.٥",
    "1e٢",
])
def test_is_number_rejects_non_ascii_digits(token):
    """Only ASCII digits are accepted."""
    assert not OperandParser.is_number(token)
