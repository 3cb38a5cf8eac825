"""
Scanner: tekst → lista tokenów (jedno przejście od lewej, bez cofania).

  liczba   = [0-9.]+   (maksymalny ciąg; co najwyżej jedna kropka)
  operator = + - * /
  nawias   = ( )

Pozostałe znaki: pomijane (tryb lenient) albo błąd unexpected_character (strict).
Białe znaki są pomijane w obu trybach.
"""
from __future__ import annotations

import math

from contracts import ErrorKind, EvalFailure, Token, TokenKind
from adapters.evaluator.operators import is_operator

_DIGITS = frozenset("0123456789")
_NUMBER_CHARS = _DIGITS | {"."}


def scan(text: str, strict: bool = False) -> list[Token] | EvalFailure:
    """Tokenizuje wyrażenie. Zwraca listę tokenów albo EvalFailure."""
    tokens: list[Token] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch in _NUMBER_CHARS:
            start = i
            while i < n and text[i] in _NUMBER_CHARS:
                i += 1
            literal = text[start:i]
            parsed = _parse_number(literal, start)
            if isinstance(parsed, EvalFailure):
                return parsed
            tokens.append(Token.number(parsed, start))
            continue

        if ch == "(":
            tokens.append(Token(kind=TokenKind.LPAREN, position=i))
        elif ch == ")":
            tokens.append(Token(kind=TokenKind.RPAREN, position=i))
        elif is_operator(ch):
            tokens.append(Token.operator(ch, i))
        elif strict and not ch.isspace():
            return EvalFailure.of(
                ErrorKind.UNEXPECTED_CHARACTER,
                f"Nieoczekiwany znak {ch!r} na pozycji {i}",
                position=i,
            )
        i += 1

    return tokens


def _parse_number(literal: str, position: int) -> float | EvalFailure:
    # "1.2.3" odrzucamy już tutaj, zamiast polegać na float()
    if literal.count(".") > 1 or not any(c in _DIGITS for c in literal):
        return EvalFailure.of(
            ErrorKind.NUMERIC_PARSE_FAILURE,
            f"Niepoprawna liczba {literal!r} na pozycji {position}",
            position=position,
        )
    value = float(literal)
    if math.isinf(value):
        return EvalFailure.of(
            ErrorKind.NUMERIC_PARSE_FAILURE,
            f"Liczba poza zakresem na pozycji {position} ({len(literal)} znaków)",
            position=position,
        )
    return value
