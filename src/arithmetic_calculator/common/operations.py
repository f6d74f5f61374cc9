"""Arithmetic operations and the pydantic models describing a request and its result."""
from collections.abc import Callable
from enum import Enum
import math
import operator
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from arithmetic_calculator.common.errors import InvalidOperationError, MalformedOperandError
from arithmetic_calculator.common.parser import OperandParser

# Type alias for operator functions (taking two floats, returning a float or None)
OperatorFn = Callable[[float, float], Optional[float]]


class Operation(str, Enum):
    """Operations accepted by the arithmetic endpoint."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]


def _divide(a: float, b: float) -> Optional[float]:
    """Divide, returning None instead of raising on a zero divisor."""
    if b == 0:
        return None
    return a / b


def _power(a: float, b: float) -> Optional[float]:
    """Raise to a power, returning None when there is no finite real result."""
    try:
        return math.pow(a, b)
    except (ValueError, OverflowError):
        return None


# Mapping of endpoint operations to their implementation
OPERATIONS: dict[Operation, OperatorFn] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: _divide,
}

# Keypad symbols; "^" only exists on the client side
SYMBOLS: dict[str, OperatorFn] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "^": _power,
}

SYMBOL_TO_OPERATION: dict[str, Operation] = {
    "+": Operation.ADD,
    "-": Operation.SUBTRACT,
    "*": Operation.MULTIPLY,
    "/": Operation.DIVIDE,
}


def _finite_or_none(value: Optional[float]) -> Optional[float]:
    if value is None or not math.isfinite(value):
        return None
    return float(value)


def compute(operation: Operation, operand1: float, operand2: float) -> Optional[float]:
    """
    Apply an endpoint operation to two operands.

    :param Operation operation: Operation to apply
    :param float operand1: Left operand
    :param float operand2: Right operand

    :return: Result, or None for division by zero and other non-finite results
    :rtype: Optional[float]
    """
    return _finite_or_none(OPERATIONS[operation](operand1, operand2))


def evaluate_symbol(symbol: str, operand1: float, operand2: float) -> Optional[float]:
    """
    Apply a keypad operator symbol to two operands.

    :param str symbol: One of ``+ - * / ^``
    :param float operand1: Left operand
    :param float operand2: Right operand

    :return: Result, or None when the operation has no finite result
    :rtype: Optional[float]
    :raises KeyError: If the symbol is not a known operator
    """
    return _finite_or_none(SYMBOLS[symbol](operand1, operand2))


class OperationRequest(BaseModel):
    """Represents a single validated arithmetic request sent to the server."""

    model_config = ConfigDict(frozen=True)

    operation: Operation = Field(..., description="Operation to apply")
    operand1: float = Field(..., description="Left operand")
    operand2: float = Field(..., description="Right operand")

    @field_validator("operation", mode="before")
    @classmethod
    def operation_must_be_supported(cls, v: object) -> object:
        """Reject anything outside the fixed set of operations."""
        if isinstance(v, Operation):
            return v
        if not isinstance(v, str) or v not in Operation.names():
            raise InvalidOperationError(str(v), Operation.names())
        return v

    @field_validator("operand1", "operand2", mode="before")
    @classmethod
    def operand_must_be_number(cls, v: object, info: ValidationInfo) -> object:
        """Apply strict numeric-format validation to string operands."""
        if isinstance(v, str):
            if not OperandParser.is_number(v):
                raise MalformedOperandError(info.field_name, v)
            return OperandParser.parse(v)
        return v

    def compute(self) -> "OperationResult":
        """Evaluate the request."""
        return OperationResult(result=compute(self.operation, self.operand1, self.operand2))


class OperationResult(BaseModel):
    """Represents the result of an evaluated arithmetic operation."""

    result: Optional[float] = Field(
        ..., description="Numeric result, or None when the result is not finite (e.g. division by zero)"
    )
