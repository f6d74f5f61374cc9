"""Keypad symbols and keyboard mapping."""
from typing import Optional

DIGITS: frozenset[str] = frozenset("0123456789")
OPERATORS: frozenset[str] = frozenset({"+", "-", "*", "/", "^"})

DECIMAL = "."
SIGN = "+/-"
EQUALS = "="
CLEAR = "C"
CLEAR_ENTRY = "CE"
MEMORY_CLEAR = "MC"
MEMORY_RECALL = "MR"
MEMORY_ADD = "M+"
MEMORY_SUBTRACT = "M-"

MEMORY_KEYS: frozenset[str] = frozenset({MEMORY_CLEAR, MEMORY_RECALL, MEMORY_ADD, MEMORY_SUBTRACT})

SYMBOLS: frozenset[str] = (
    DIGITS | OPERATORS | MEMORY_KEYS | {DECIMAL, SIGN, EQUALS, CLEAR, CLEAR_ENTRY}
)

# Physical keys accepted from a keyboard; "^" and the memory keys are button-only
KEYBOARD_MAP: dict[str, str] = {
    **{digit: digit for digit in DIGITS},
    ".": DECIMAL,
    "+": "+",
    "-": "-",
    "*": "*",
    "/": "/",
    "=": EQUALS,
    "Enter": EQUALS,
}


def key_to_symbol(key: str) -> Optional[str]:
    """
    Translate a keyboard key into a keypad symbol.

    :param str key: Key name as reported by the keyboard (e.g. ``"7"``, ``"Enter"``)

    :return: Keypad symbol, or None when the key is not supported
    :rtype: Optional[str]
    """
    return KEYBOARD_MAP.get(key)
