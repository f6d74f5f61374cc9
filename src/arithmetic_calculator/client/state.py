"""Finite-state machine turning keypad input into calculator state."""
from collections.abc import Callable
from decimal import Decimal
from enum import Enum
import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_calculator.client import keypad
from arithmetic_calculator.client.display import format_entry
from arithmetic_calculator.common.operations import evaluate_symbol

# (operator symbol, operand1, operand2) -> result, or None when there is no finite result
Evaluator = Callable[[str, float, float], Optional[float]]


class CalculatorState(str, Enum):
    START = "start"
    OPERAND1 = "operand1-entry"
    OPERATOR = "operator-selected"
    OPERAND2 = "operand2-entry"
    COMPLETE = "complete"


TYPING_STATES: frozenset[CalculatorState] = frozenset({CalculatorState.OPERAND1, CalculatorState.OPERAND2})


class Snapshot(BaseModel):
    """
    Immutable calculator state.

    ``entry`` is the operand buffer shown on screen. ``last_operator`` and
    ``last_operand`` remember the last evaluation so that pressing ``=`` again
    repeats it.
    """

    model_config = ConfigDict(frozen=True)

    state: CalculatorState = Field(default=CalculatorState.START)
    entry: str = Field(default="0", description="Operand buffer as typed")
    operand1: float = Field(default=0.0)
    operand2: Optional[float] = Field(default=None)
    operator: Optional[str] = Field(default=None, description="Pending operator symbol")
    last_operator: Optional[str] = Field(default=None)
    last_operand: Optional[float] = Field(default=None)
    memory: float = Field(default=0.0, description="Memory register")
    error: bool = Field(default=False, description="Last evaluation had no finite result")

    @property
    def value(self) -> float:
        return float(self.entry)

    @property
    def display(self) -> str:
        if self.error or not math.isfinite(self.value):
            return "Error"
        return format_entry(self.entry, typing=self.state in TYPING_STATES)

    @property
    def memory_indicator(self) -> bool:
        return self.memory != 0


def _to_entry(value: float) -> str:
    """Plain positional form, so digits typed after a recall extend the mantissa."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _error(snap: Snapshot) -> Snapshot:
    return Snapshot(memory=snap.memory, error=True)


def _digit(snap: Snapshot, digit: str) -> Snapshot:
    if snap.state in (CalculatorState.START, CalculatorState.COMPLETE):
        return snap.model_copy(update={
            "state": CalculatorState.OPERAND1,
            "entry": digit,
            "operand2": None,
            "last_operator": None,
            "last_operand": None,
        })
    if snap.state is CalculatorState.OPERATOR:
        return snap.model_copy(update={"state": CalculatorState.OPERAND2, "entry": digit})

    # Leading zero is replaced, not prefixed
    if snap.entry == "0":
        entry = digit
    elif snap.entry == "-0":
        entry = "-" + digit
    else:
        entry = snap.entry + digit
    if not math.isfinite(float(entry)):
        # Past float range
        return snap
    return snap.model_copy(update={"entry": entry})


def _decimal(snap: Snapshot) -> Snapshot:
    if snap.state not in TYPING_STATES:
        snap = _digit(snap, "0")
    if "." in snap.entry or "e" in snap.entry.lower():
        return snap
    return snap.model_copy(update={"entry": snap.entry + "."})


def _sign(snap: Snapshot) -> Snapshot:
    if snap.entry.startswith("-"):
        entry = snap.entry[1:]
    elif snap.entry == "0":
        entry = snap.entry
    else:
        entry = "-" + snap.entry
    return snap.model_copy(update={"entry": entry})


def _complete(snap: Snapshot, symbol: str, operand1: float, operand2: float, evaluator: Evaluator) -> Snapshot:
    result = evaluator(symbol, operand1, operand2)
    if result is None or not math.isfinite(result):
        return _error(snap)
    return snap.model_copy(update={
        "state": CalculatorState.COMPLETE,
        "entry": _to_entry(result),
        "operand1": result,
        "operand2": operand2,
        "operator": None,
        "last_operator": symbol,
        "last_operand": operand2,
    })


def _operator(snap: Snapshot, symbol: str, evaluator: Evaluator) -> Snapshot:
    if snap.state is CalculatorState.OPERATOR:
        # No second operand yet: the new operator replaces the pending one
        return snap.model_copy(update={"operator": symbol})

    if snap.state is CalculatorState.OPERAND2:
        snap = _complete(snap, snap.operator, snap.operand1, snap.value, evaluator)
        if snap.error:
            return snap

    return snap.model_copy(update={
        "state": CalculatorState.OPERATOR,
        "operand1": snap.value,
        "operand2": None,
        "operator": symbol,
        "last_operator": None,
        "last_operand": None,
    })


def _equals(snap: Snapshot, evaluator: Evaluator) -> Snapshot:
    if snap.state in (CalculatorState.OPERATOR, CalculatorState.OPERAND2):
        return _complete(snap, snap.operator, snap.operand1, snap.value, evaluator)
    if snap.state is CalculatorState.COMPLETE:
        if snap.last_operator is None:
            return snap
        return _complete(snap, snap.last_operator, snap.value, snap.last_operand, evaluator)
    return snap.model_copy(update={"state": CalculatorState.COMPLETE, "operand1": snap.value})


def _clear_entry(snap: Snapshot) -> Snapshot:
    if snap.state is CalculatorState.OPERATOR:
        return snap.model_copy(update={"state": CalculatorState.OPERAND2, "entry": "0"})
    if snap.state is CalculatorState.COMPLETE:
        return snap.model_copy(update={
            "state": CalculatorState.OPERAND1,
            "entry": "0",
            "last_operator": None,
            "last_operand": None,
        })
    return snap.model_copy(update={"entry": "0"})


def _memory(snap: Snapshot, symbol: str) -> Snapshot:
    if symbol == keypad.MEMORY_CLEAR:
        return snap.model_copy(update={"memory": 0.0})
    if symbol == keypad.MEMORY_RECALL:
        return snap.model_copy(update={"entry": _to_entry(snap.memory)})

    delta = snap.value if symbol == keypad.MEMORY_ADD else -snap.value
    memory = snap.memory + delta
    if not math.isfinite(memory):
        return _error(snap)
    return snap.model_copy(update={"memory": memory})


def transition(snap: Snapshot, symbol: str, evaluator: Evaluator = evaluate_symbol) -> Snapshot:
    """
    Apply one keypad symbol to a snapshot.

    Unknown symbols and keystrokes that make no sense in the current state
    (such as a second decimal point) leave the snapshot unchanged. After an
    evaluation error the next symbol starts from a cleared state; memory is
    kept.

    :param Snapshot snap: Current state
    :param str symbol: Keypad symbol (see :mod:`arithmetic_calculator.client.keypad`)
    :param Evaluator evaluator: Computes one binary operation

    :return: New state
    :rtype: Snapshot
    """
    if symbol not in keypad.SYMBOLS:
        return snap

    if snap.error:
        snap = Snapshot(memory=snap.memory)

    if symbol in keypad.DIGITS:
        return _digit(snap, symbol)
    if symbol in keypad.OPERATORS:
        return _operator(snap, symbol, evaluator)
    if symbol in keypad.MEMORY_KEYS:
        return _memory(snap, symbol)
    if symbol == keypad.DECIMAL:
        return _decimal(snap)
    if symbol == keypad.SIGN:
        return _sign(snap)
    if symbol == keypad.EQUALS:
        return _equals(snap, evaluator)
    if symbol == keypad.CLEAR_ENTRY:
        return _clear_entry(snap)
    # keypad.CLEAR
    return Snapshot(memory=snap.memory)


class InputTracker:
    """
    Stateful wrapper around :func:`transition` for one calculator session.

    The snapshot is replaced on every keystroke; the memory register lives
    as long as the tracker unless explicitly cleared with ``MC``.
    """

    def __init__(self, evaluator: Evaluator = evaluate_symbol) -> None:
        self.evaluator = evaluator
        self.snapshot = Snapshot()

    def press(self, symbol: str) -> str:
        """
        Handle one keypad symbol.

        :param str symbol: Keypad symbol
        :return: Display text after the keystroke
        :rtype: str
        """
        self.snapshot = transition(self.snapshot, symbol, self.evaluator)
        return self.display

    def press_key(self, key: str) -> str:
        """Handle a keyboard key; unsupported keys are ignored."""
        symbol = keypad.key_to_symbol(key)
        if symbol is not None:
            self.snapshot = transition(self.snapshot, symbol, self.evaluator)
        return self.display

    def press_all(self, symbols: list[str]) -> str:
        for symbol in symbols:
            self.press(symbol)
        return self.display

    @property
    def state(self) -> CalculatorState:
        return self.snapshot.state

    @property
    def display(self) -> str:
        return self.snapshot.display

    @property
    def memory(self) -> float:
        return self.snapshot.memory

    @property
    def memory_indicator(self) -> bool:
        return self.snapshot.memory_indicator
