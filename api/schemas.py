"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from contracts import BufferState, EvaluationError


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: str


class EvaluateResponse(BaseModel):
    expression: str
    ok: bool
    value: Optional[float] = None
    display: str                            # sformatowany wynik albo ogólny komunikat błędu
    error: Optional[EvaluationError] = None


# ─────────────────────────── /calculator ─────────────────────────

class KeysRequest(BaseModel):
    keys: list[str] = Field(min_length=1)   # "0"-"9", ".", "+", "-", "*", "/", "(", ")", "C", "AC", "="


class SessionResponse(BaseModel):
    session_id: str
    state: BufferState


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
