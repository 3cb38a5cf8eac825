"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie wyrażeń tekstowych bez stanu między wywołaniami.
"""
from typing import Protocol, runtime_checkable

from contracts import EvalOutcome


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, expression: str) -> EvalOutcome:
        """
        Evaluates an infix arithmetic expression (digits, '.', + - * /, parentheses).
        Returns EvalSuccess with the float value, or EvalFailure with one of:
          - division_by_zero: right operand of '/' is exactly 0.0
          - malformed_expression: stack underflow, unbalanced parentheses, empty input
          - numeric_parse_failure: a digit run is not a valid number (e.g. "1.2.3", 400 digits)
          - unexpected_character: unknown symbol, strict scanning only
          - numeric_overflow: an intermediate or final result is inf or nan
        Never raises for bad input; failures are encoded in the returned object.
        """
        ...
