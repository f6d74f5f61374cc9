"""Strict parsing of numeric operand strings."""
import re
from typing import Pattern

# Optional sign, ASCII digits with at most one decimal point, optional exponent
NUMBER_PATTERN: Pattern[str] = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class OperandParser:
    """
    Validate and convert operand strings.

    ``float()`` alone is too lenient for request parameters: it accepts
    ``"inf"``, ``"nan"``, underscores and surrounding whitespace. Operands are
    matched against :data:`NUMBER_PATTERN` first.

    Examples:
        - Accepted: ``42``, ``-10``, ``007``, ``.5``, ``3.``, ``1.2e-5``
        - Rejected: ``3.14.159``, ``3.14-2``, ``abc``, ``1e``, ``""``
    """

    @staticmethod
    def is_number(token: str) -> bool:
        """
        Determine if a token is a single optionally-signed decimal or exponential number.

        :param str token: Candidate operand

        :return: True if the token matches the strict numeric format
        :rtype: bool
        """
        return NUMBER_PATTERN.fullmatch(token) is not None

    @staticmethod
    def parse(token: str) -> float:
        """
        Convert a strictly formatted numeric string to float.

        :param str token: Operand string

        :return: Operand value
        :rtype: float
        :raises ValueError: If the token is not a valid number
        """
        if not OperandParser.is_number(token):
            raise ValueError(f"Invalid number format: {token!r}")
        return float(token)
