"""
Adapter: ShuntingYardEvaluator
Implementuje port Evaluator — ewaluacja infiksowa na dwóch stosach (shunting-yard).

  operandy  — stos float
  operatory — stos symboli "+", "-", "*", "/" oraz bariery "("

Operator przychodzący najpierw redukuje wszystkie operatory na szczycie stosu
o priorytecie >= swojemu (stąd lewostronna łączność: 8-3-2 = (8-3)-2).
")" redukuje do najbliższej bariery "(" i ją zdejmuje.

Ewaluator jest bezstanowy: oba stosy żyją tylko w jednym wywołaniu evaluate().
"""
from __future__ import annotations

import logging

from contracts import ErrorKind, EvalFailure, EvalOutcome, EvalSuccess, TokenKind
from adapters.evaluator.operators import apply_operator, precedence
from adapters.evaluator.scanner import scan

logger = logging.getLogger("stack_calc.evaluator")

_BARRIER = "("


class ShuntingYardEvaluator:
    """Ewaluator wyrażeń arytmetycznych z priorytetami i nawiasami."""

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, expression: str) -> EvalOutcome:
        outcome = self._evaluate(expression)
        if isinstance(outcome, EvalFailure):
            logger.debug(
                "Evaluation of %r failed: %s (%s)",
                expression, outcome.error.message, outcome.error.kind.value,
            )
        return outcome

    # -- Prywatne ----------------------------------------------------------

    def _evaluate(self, expression: str) -> EvalOutcome:
        tokens = scan(expression, strict=self._strict)
        if isinstance(tokens, EvalFailure):
            return tokens

        operands: list[float] = []
        operators: list[str] = []

        for token in tokens:
            if token.kind == TokenKind.NUMBER:
                operands.append(token.value)  # type: ignore[arg-type]

            elif token.kind == TokenKind.LPAREN:
                operators.append(_BARRIER)

            elif token.kind == TokenKind.RPAREN:
                while operators and operators[-1] != _BARRIER:
                    failure = _reduce_top(operands, operators)
                    if failure is not None:
                        return failure
                if not operators:
                    return EvalFailure.of(
                        ErrorKind.MALFORMED_EXPRESSION,
                        f"Nawias ')' bez pary na pozycji {token.position}",
                        position=token.position,
                    )
                operators.pop()  # zdejmij barierę "("

            else:
                incoming = precedence(token.symbol)  # type: ignore[arg-type]
                while (
                    operators
                    and operators[-1] != _BARRIER
                    and precedence(operators[-1]) >= incoming
                ):
                    failure = _reduce_top(operands, operators)
                    if failure is not None:
                        return failure
                operators.append(token.symbol)  # type: ignore[arg-type]

        # Koniec wejścia — zredukuj resztę
        while operators:
            if operators[-1] == _BARRIER:
                return EvalFailure.of(
                    ErrorKind.MALFORMED_EXPRESSION,
                    "Niezamknięty nawias '('",
                )
            failure = _reduce_top(operands, operators)
            if failure is not None:
                return failure

        if len(operands) != 1:
            return EvalFailure.of(
                ErrorKind.MALFORMED_EXPRESSION,
                "Puste wyrażenie" if not operands
                else f"Brak operatora między {len(operands)} liczbami",
            )
        return EvalSuccess(value=operands[0])


def _reduce_top(operands: list[float], operators: list[str]) -> EvalFailure | None:
    """Zdejmuje operator i dwa operandy, odkłada wynik. Zwraca błąd lub None."""
    op = operators.pop()
    if len(operands) < 2:
        return EvalFailure.of(
            ErrorKind.MALFORMED_EXPRESSION,
            f"Brak operandu dla operatora {op!r}",
        )
    right = operands.pop()
    left = operands.pop()
    result = apply_operator(op, left, right)
    if isinstance(result, EvalFailure):
        return result
    operands.append(result.value)
    return None


def evaluate_expression(text: str, strict: bool = False) -> EvalOutcome:
    """Skrót: jednorazowa ewaluacja bez tworzenia ewaluatora po stronie wywołującego."""
    return ShuntingYardEvaluator(strict=strict).evaluate(text)
