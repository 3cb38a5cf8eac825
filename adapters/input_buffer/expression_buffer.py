"""
Adapter: ExpressionBuffer
Implements the InputBuffer port — the calculator screen state held by the caller.

The buffer owns the editable expression and the "fresh input" flag; it never
evaluates anything itself, it only forwards the expression to an Evaluator.

  digit / '.'      -> starts a new expression right after a result, otherwise appends
  + - * / ( )      -> always appends (a previous result can be continued)
  delete_last      -> drops one character
  clear            -> empty expression, placeholder on the display
  compute          -> one evaluation; result replaces the expression

press() maps keypad labels (C, AC, =) onto these operations.
"""
from __future__ import annotations

import logging
import math
from decimal import Decimal

from contracts import BufferState, EvalFailure, EvalOutcome
from ports.evaluator import Evaluator

logger = logging.getLogger("stack_calc.input_buffer")

DIGIT_KEYS = frozenset("0123456789.")
OPERATOR_KEYS = frozenset("+-*/()")
CLEAR_ENTRY_KEY = "C"
ALL_CLEAR_KEY = "AC"
EQUALS_KEY = "="
CONTROL_KEYS = frozenset({CLEAR_ENTRY_KEY, ALL_CLEAR_KEY, EQUALS_KEY})


def is_valid_key(key: str) -> bool:
    return key in DIGIT_KEYS or key in OPERATOR_KEYS or key in CONTROL_KEYS


def format_result(value: float) -> str:
    """
    Positional notation with at least one fractional digit: 14.0, 0.5, 1e16 -> 10000000000000000.0.
    The text parses back to exactly the same float.
    """
    if not math.isfinite(value):
        return repr(value)
    text = format(Decimal(repr(value)), "f")
    if "." not in text:
        text += ".0"
    return text


class ExpressionBuffer:
    """Editable expression plus display text, separate from the stateless evaluator."""

    def __init__(self, placeholder_text: str = "0", error_message: str = "Error") -> None:
        self._placeholder = placeholder_text
        self._error_message = error_message
        self._expression = ""
        self._display = placeholder_text
        self._fresh_input = True
        self._last_outcome: EvalOutcome | None = None

    @property
    def expression(self) -> str:
        return self._expression

    @property
    def display(self) -> str:
        return self._display

    @property
    def fresh_input(self) -> bool:
        return self._fresh_input

    # -- InputBuffer protocol ----------------------------------------------

    def append(self, token: str) -> None:
        if token in DIGIT_KEYS:
            self.append_digit(token)
        elif token in OPERATOR_KEYS:
            self.append_operator(token)
        else:
            raise ValueError(f"Unsupported key: {token!r}")

    def append_digit(self, digit: str) -> None:
        if digit not in DIGIT_KEYS:
            raise ValueError(f"Not a digit key: {digit!r}")
        if self._fresh_input:
            self._expression = ""
            self._fresh_input = False
        self._expression += digit
        self._display = self._expression

    def append_operator(self, op: str) -> None:
        if op not in OPERATOR_KEYS:
            raise ValueError(f"Not an operator key: {op!r}")
        self._expression += op
        self._display = self._expression
        self._fresh_input = False

    def delete_last(self) -> None:
        if not self._expression:
            return
        self._expression = self._expression[:-1]
        self._display = self._expression

    def clear(self) -> None:
        self._expression = ""
        self._display = self._placeholder
        self._fresh_input = True
        self._last_outcome = None

    def compute(self, evaluator: Evaluator) -> EvalOutcome:
        outcome = evaluator.evaluate(self._expression)
        if isinstance(outcome, EvalFailure):
            logger.info("Compute failed for %r: %s", self._expression, outcome.error.kind.value)
            self._display = self._error_message
        else:
            self._expression = format_result(outcome.value)
            self._display = self._expression
        self._fresh_input = True
        self._last_outcome = outcome
        return outcome

    # -- Keypad --------------------------------------------------------------

    def press(self, key: str, evaluator: Evaluator) -> None:
        """One calculator key: C = delete last, AC = clear, '=' = compute, else append."""
        if key == CLEAR_ENTRY_KEY:
            self.delete_last()
        elif key == ALL_CLEAR_KEY:
            self.clear()
        elif key == EQUALS_KEY:
            self.compute(evaluator)
        else:
            self.append(key)

    def snapshot(self) -> BufferState:
        return BufferState(
            expression=self._expression,
            display=self._display,
            fresh_input=self._fresh_input,
            last_outcome=self._last_outcome,
        )
