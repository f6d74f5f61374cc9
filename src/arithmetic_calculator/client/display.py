"""Display formatting for the calculator screen."""
import math

# Magnitudes outside [EXPONENT_MIN, EXPONENT_MAX] switch to exponential form
EXPONENT_MAX: float = 99_999_999
EXPONENT_MIN: float = 0.0000001
SIGNIFICANT_DIGITS: int = 12


def needs_exponent(value: float) -> bool:
    magnitude = abs(value)
    return magnitude > EXPONENT_MAX or (magnitude != 0 and magnitude < EXPONENT_MIN)


def format_exponential(value: float) -> str:
    """Render e.g. 1234567890 as ``1.23456789e+9``."""
    mantissa, exponent = f"{value:.{SIGNIFICANT_DIGITS - 1}e}".split("e")
    if "." in mantissa:
        mantissa = mantissa.rstrip("0").rstrip(".")
    return f"{mantissa}e{int(exponent):+d}"


def format_number(value: float) -> str:
    """
    Render a computed value for the screen.

    Integers lose their trailing ``.0``; other values are rounded to
    :data:`SIGNIFICANT_DIGITS` significant digits so that floating-point
    artifacts such as ``0.30000000000000004`` display as ``0.3``.

    :param float value: Value to render

    :return: Display text
    :rtype: str
    """
    if needs_exponent(value):
        return format_exponential(value)
    if value.is_integer():
        return str(int(value))
    decimals = max(0, SIGNIFICANT_DIGITS - 1 - math.floor(math.log10(abs(value))))
    return f"{value:.{decimals}f}".rstrip("0").rstrip(".")


def format_entry(entry: str, typing: bool) -> str:
    """
    Render an operand buffer.

    While an operand is being typed the buffer is shown as-is (so ``3.`` and
    ``0.10`` stay visible) unless its magnitude calls for exponential form.
    """
    value = float(entry)
    if needs_exponent(value):
        return format_exponential(value)
    return entry if typing else format_number(value)
