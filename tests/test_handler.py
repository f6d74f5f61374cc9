"""Unit tests for validate_and_compute."""
import pytest

from arithmetic_calculator.common.errors import (
    ArithmeticRequestError,
    InvalidOperationError,
    MalformedOperandError,
    MissingParameterError,
)
from arithmetic_calculator.server.handler import validate_and_compute


@pytest.mark.parametrize(
    "params,expected",
    [
        ({"operation": "add", "operand1": "5", "operand2": "3"}, 8.0),
        ({"operation": "subtract", "operand1": "10", "operand2": "-5"}, 15.0),
        ({"operation": "multiply", "operand1": ".5", "operand2": "0.5"}, 0.25),
        ({"operation": "divide", "operand1": "-42", "operand2": "2"}, -21.0),
        ({"operation": "add", "operand1": "1e2", "operand2": "5e1"}, 150.0),
        ({"operation": "add", "operand1": "007", "operand2": "5"}, 12.0),
    ],
)
def test_valid_request_returns_result(params: dict, expected: float) -> None:
    """Valid parameters produce the floating-point result."""
    assert validate_and_compute(params).result == expected


def test_division_by_zero_returns_none() -> None:
    """Division by zero is not an error."""
    outcome = validate_and_compute({"operation": "divide", "operand1": "21", "operand2": "0"})
    assert outcome.result is None


@pytest.mark.parametrize(
    "params,field",
    [
        ({"operand1": "5", "operand2": "3"}, "operation"),
        ({"operation": "add", "operand2": "3"}, "operand1"),
        ({"operation": "add", "operand1": "5"}, "operand2"),
        ({}, "operation"),
    ],
)
def test_missing_parameter(params: dict, field: str) -> None:
    """The first missing parameter is named in the error."""
    with pytest.raises(MissingParameterError) as exc_info:
        validate_and_compute(params)
    assert exc_info.value.field == field
    assert field in exc_info.value.message


@pytest.mark.parametrize("operation", ["modulo", "ADD", "", "power"])
def test_invalid_operation(operation: str) -> None:
    """Operations outside the fixed set are rejected."""
    with pytest.raises(InvalidOperationError) as exc_info:
        validate_and_compute({"operation": operation, "operand1": "5", "operand2": "3"})
    assert "Invalid operation" in exc_info.value.message


@pytest.mark.parametrize(
    "params,field",
    [
        ({"operation": "add", "operand1": "3.14.159", "operand2": "2"}, "operand1"),
        ({"operation": "add", "operand1": "3.14-2", "operand2": "5"}, "operand1"),
        ({"operation": "add", "operand1": "abc", "operand2": "def"}, "operand1"),
        ({"operation": "add", "operand1": "5", "operand2": "1e"}, "operand2"),
        ({"operation": "add", "operand1": "5", "operand2": ""}, "operand2"),
    ],
)
def test_malformed_operand(params: dict, field: str) -> None:
    """Malformed operands are rejected with the offending field named."""
    with pytest.raises(MalformedOperandError) as exc_info:
        validate_and_compute(params)
    assert exc_info.value.field == field
    assert field in str(exc_info.value)


def test_errors_are_value_errors() -> None:
    """Request errors can be handled as plain ValueError."""
    with pytest.raises(ValueError):
        validate_and_compute({"operation": "add", "operand1": "x", "operand2": "1"})
    assert issubclass(MissingParameterError, ArithmeticRequestError)
