"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych w StackCalc.
Wszystkie moduły importują typy WYŁĄCZNIE stąd.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Tokeny ──────────────────────────────────────

class TokenKind(str, Enum):
    NUMBER = "number"      # np. "12.5"
    OPERATOR = "operator"  # "+", "-", "*", "/"
    LPAREN = "lparen"      # "(" — bariera na stosie operatorów
    RPAREN = "rparen"      # ")"


OperatorSymbol = Literal["+", "-", "*", "/"]


class Token(BaseModel):
    kind: TokenKind
    position: int                        # indeks pierwszego znaku w tekście
    value: Optional[float] = None        # tylko dla NUMBER
    symbol: Optional[OperatorSymbol] = None  # tylko dla OPERATOR

    @classmethod
    def number(cls, value: float, position: int) -> Token:
        return cls(kind=TokenKind.NUMBER, value=value, position=position)

    @classmethod
    def operator(cls, symbol: str, position: int) -> Token:
        return cls(kind=TokenKind.OPERATOR, symbol=symbol, position=position)


# ─────────────────────────── Błędy ewaluacji ─────────────────────────────

class ErrorKind(str, Enum):
    DIVISION_BY_ZERO = "division_by_zero"
    MALFORMED_EXPRESSION = "malformed_expression"
    NUMERIC_PARSE_FAILURE = "numeric_parse_failure"
    UNEXPECTED_CHARACTER = "unexpected_character"  # tylko w trybie strict
    NUMERIC_OVERFLOW = "numeric_overflow"          # wynik poza zakresem float (inf/nan)


class EvaluationError(BaseModel):
    kind: ErrorKind
    message: str
    position: Optional[int] = None


# ─────────────────────────── Wynik ewaluacji ─────────────────────────────

class EvalSuccess(BaseModel):
    status: Literal["ok"] = "ok"
    value: float

    @property
    def ok(self) -> bool:
        return True


class EvalFailure(BaseModel):
    status: Literal["error"] = "error"
    error: EvaluationError

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def of(
        cls,
        kind: ErrorKind,
        message: str,
        position: Optional[int] = None,
    ) -> EvalFailure:
        return cls(error=EvaluationError(kind=kind, message=message, position=position))


EvalOutcome = Union[EvalSuccess, EvalFailure]


# ─────────────────────────── Bufor wejścia ───────────────────────────────

class BufferState(BaseModel):
    expression: str = ""
    display: str
    fresh_input: bool = True   # następna cyfra zaczyna nowe wyrażenie
    last_outcome: Optional[EvalOutcome] = None
