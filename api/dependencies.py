"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.evaluator.shunting_yard_evaluator import ShuntingYardEvaluator
from adapters.session_store.in_memory_session_store import InMemorySessionStore
from config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_evaluator(request: Request) -> ShuntingYardEvaluator:
    return request.app.state.evaluator


def get_session_store(request: Request) -> InMemorySessionStore:
    return request.app.state.session_store
