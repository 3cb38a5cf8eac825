"""
Router: /calculator/sessions
Bufor kalkulatora per sesja — klawisze jak na ekranie kalkulatora:
cyfry, ".", operatory, nawiasy, "C" (usuń ostatni znak), "AC" (wyczyść), "=" (oblicz).

Nieznana sesja → KeyError → 404 (globalny handler w api/main.py).
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from adapters.input_buffer.expression_buffer import is_valid_key
from api.dependencies import get_evaluator, get_session_store
from api.schemas import KeysRequest, SessionResponse

router = APIRouter(prefix="/calculator/sessions", tags=["calculator"])


@router.post("", response_model=SessionResponse, status_code=201)
async def create_session(store=Depends(get_session_store)) -> SessionResponse:
    session_id, buffer = store.create()
    return SessionResponse(session_id=session_id, state=buffer.snapshot())


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str, store=Depends(get_session_store)) -> SessionResponse:
    buffer = store.get(session_id)
    return SessionResponse(session_id=session_id, state=buffer.snapshot())


@router.post("/{session_id}/keys", response_model=SessionResponse)
async def press_keys(
    session_id: str,
    body: KeysRequest,
    store=Depends(get_session_store),
    evaluator=Depends(get_evaluator),
) -> SessionResponse:
    # Walidacja przed zastosowaniem — albo wszystkie klawisze, albo żaden
    invalid = [k for k in body.keys if not is_valid_key(k)]
    if invalid:
        raise HTTPException(status_code=422, detail=f"Unsupported keys: {invalid}")

    buffer = store.get(session_id)
    for key in body.keys:
        buffer.press(key, evaluator)
    return SessionResponse(session_id=session_id, state=buffer.snapshot())


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str, store=Depends(get_session_store)) -> Response:
    store.delete(session_id)
    return Response(status_code=204)
