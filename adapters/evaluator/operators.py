"""
Operatory binarne: tabela priorytetów i aplikator.

apply_operator() nie rzuca przy dzieleniu przez zero — zwraca EvalFailure,
które ewaluator propaguje dalej bez odwijania stosu. To samo dotyczy
wyniku inf/nan (numeric_overflow).
"""
from __future__ import annotations

import math

from contracts import EvalFailure, EvalOutcome, EvalSuccess, ErrorKind

# Wyższa wartość = silniejsze wiązanie. "(" celowo nie ma wpisu (bariera).
PRECEDENCE: dict[str, int] = {"+": 1, "-": 1, "*": 2, "/": 2}

_OP_FUNCS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
}


def is_operator(symbol: str) -> bool:
    return symbol in PRECEDENCE


def precedence(symbol: str) -> int:
    return PRECEDENCE[symbol]


def apply_operator(op: str, left: float, right: float) -> EvalOutcome:
    """Zwraca EvalSuccess(left op right) albo EvalFailure(division_by_zero | numeric_overflow)."""
    if op == "/":
        if right == 0.0:
            return EvalFailure.of(
                ErrorKind.DIVISION_BY_ZERO,
                f"Dzielenie przez zero: {_fmt(left)} / {_fmt(right)}",
            )
        return _checked(op, left, right, left / right)

    fn = _OP_FUNCS.get(op)
    if fn is None:
        raise ValueError(f"Nieznany operator: {op!r}")
    return _checked(op, left, right, fn(left, right))


def _checked(op: str, left: float, right: float, result: float) -> EvalOutcome:
    # inf/nan nigdy nie jest poprawnym wynikiem
    if not math.isfinite(result):
        return EvalFailure.of(
            ErrorKind.NUMERIC_OVERFLOW,
            f"Wynik poza zakresem: {_fmt(left)} {op} {_fmt(right)}",
        )
    return EvalSuccess(value=result)


def _fmt(v: float) -> str:
    return str(int(v)) if v.is_integer() else repr(v)
