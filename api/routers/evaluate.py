"""
Router: POST /evaluate
Jednorazowa ewaluacja wyrażenia. Błąd ewaluacji to wynik (HTTP 200, ok=false),
a nie błąd transportu.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from adapters.input_buffer.expression_buffer import format_result
from api.dependencies import get_evaluator, get_settings
from api.schemas import EvaluateRequest, EvaluateResponse
from contracts import EvalFailure

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("", response_model=EvaluateResponse)
async def evaluate(
    body: EvaluateRequest,
    evaluator=Depends(get_evaluator),
    settings=Depends(get_settings),
) -> EvaluateResponse:
    outcome = evaluator.evaluate(body.expression)
    if isinstance(outcome, EvalFailure):
        return EvaluateResponse(
            expression=body.expression,
            ok=False,
            display=settings.error_message,
            error=outcome.error,
        )
    return EvaluateResponse(
        expression=body.expression,
        ok=True,
        value=outcome.value,
        display=format_result(outcome.value),
    )
