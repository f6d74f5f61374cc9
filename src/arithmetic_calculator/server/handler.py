"""Request validation and arithmetic dispatch for the /arithmetic endpoint."""
from collections.abc import Mapping
from typing import Optional

from pydantic import ValidationError

from arithmetic_calculator.common.errors import ArithmeticRequestError, MissingParameterError
from arithmetic_calculator.common.operations import OperationRequest, OperationResult

# Missing parameters are reported in this order
REQUIRED_PARAMETERS: tuple[str, ...] = ("operation", "operand1", "operand2")


def _to_request_error(exc: ValidationError) -> ArithmeticRequestError:
    """
    Translate the first pydantic validation error into a domain error.

    Validators raise :class:`ArithmeticRequestError` subclasses; pydantic keeps
    the original exception in the error context.

    :param ValidationError exc: Error raised while building the request model

    :return: Domain error naming the offending field
    :rtype: ArithmeticRequestError
    """
    error = exc.errors()[0]
    cause = error.get("ctx", {}).get("error")
    if isinstance(cause, ArithmeticRequestError):
        return cause
    field = str(error["loc"][0]) if error["loc"] else "request"
    return ArithmeticRequestError(field, f"Invalid {field}: {error['msg']}")


def validate_and_compute(params: Mapping[str, Optional[str]]) -> OperationResult:
    """
    Validate raw request parameters and evaluate the requested operation.

    :param Mapping params: Raw parameters (e.g. a query string mapping)

    :return: Computed result; ``result`` is None for division by zero
    :rtype: OperationResult
    :raises ArithmeticRequestError: If a parameter is missing or invalid
    """
    for name in REQUIRED_PARAMETERS:
        if params.get(name) is None:
            raise MissingParameterError(name)

    try:
        request = OperationRequest(**{name: params[name] for name in REQUIRED_PARAMETERS})
    except ValidationError as exc:
        raise _to_request_error(exc) from exc

    return request.compute()
