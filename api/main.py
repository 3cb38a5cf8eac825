"""
api/main.py — punkt wejścia FastAPI.

Ewaluator jest bezstanowy — tworzony raz i współdzielony przez wszystkie żądania.
Bufory kalkulatora żyją w InMemorySessionStore (per proces).

Uruchomienie:
    uvicorn api.main:app --reload
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.evaluator.shunting_yard_evaluator import ShuntingYardEvaluator
from adapters.session_store.in_memory_session_store import InMemorySessionStore
from api.routers import calculator, evaluate
from api.schemas import HealthResponse
from config import Settings

logger = logging.getLogger("stack_calc")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
    )
    app.state.settings = settings
    app.state.evaluator = ShuntingYardEvaluator(strict=settings.strict_scanner)
    app.state.session_store = InMemorySessionStore(
        placeholder_text=settings.placeholder_text,
        error_message=settings.error_message,
    )
    logger.info("StackCalc API ready (strict_scanner=%s).", settings.strict_scanner)

    # Routers
    app.include_router(evaluate.router)
    app.include_router(calculator.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Globalny handler błędów
    @app.exception_handler(KeyError)
    async def key_error_handler(request: Request, exc: KeyError):
        return JSONResponse(status_code=404, content={"detail": str(exc.args[0]) if exc.args else str(exc)})

    return app


app = create_app()
