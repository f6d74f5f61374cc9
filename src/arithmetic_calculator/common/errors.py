"""Exceptions raised while validating arithmetic requests."""


class ArithmeticRequestError(ValueError):
    """Base class for client-input errors reported as HTTP 400."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class MissingParameterError(ArithmeticRequestError):
    """A required query parameter was not supplied."""

    def __init__(self, field: str) -> None:
        super().__init__(field, f"Missing required parameter: {field}")


class InvalidOperationError(ArithmeticRequestError):
    """The requested operation is not supported."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        super().__init__(
            "operation",
            f"Invalid operation: {value!r}. Expected one of: {', '.join(allowed)}",
        )


class MalformedOperandError(ArithmeticRequestError):
    """An operand is not a single signed decimal or exponential number."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(field, f"Invalid number format for {field}: {value!r}")


class ArithmeticClientError(RuntimeError):
    """The server rejected a request sent by the HTTP client."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message
