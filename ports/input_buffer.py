"""
Port: InputBuffer
Odpowiedzialność: edytowalne wyrażenie po stronie wywołującego (klawisze, kasowanie, wynik).
"""
from typing import Protocol, runtime_checkable

from contracts import BufferState, EvalOutcome
from ports.evaluator import Evaluator


@runtime_checkable
class InputBuffer(Protocol):
    def append(self, token: str) -> None:
        """
        Appends one key: a digit or '.' (starts a fresh expression after a result),
        or one of + - * / ( ) (continues the current expression).
        Raises ValueError for any other key.
        """
        ...

    def delete_last(self) -> None:
        """Removes the last character of the expression. No-op when empty."""
        ...

    def clear(self) -> None:
        """Empties the expression and shows the placeholder text."""
        ...

    def compute(self, evaluator: Evaluator) -> EvalOutcome:
        """
        Evaluates the expression exactly once.
        On success the expression is replaced by the formatted result;
        on failure the display shows the generic error text and the expression is kept.
        """
        ...

    def snapshot(self) -> BufferState:
        ...
