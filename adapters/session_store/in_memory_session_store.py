"""
Adapter: InMemorySessionStore
Implementuje port SessionStore — słownik session_id → ExpressionBuffer w pamięci procesu.

Rejestr sesji jest chroniony blokadą. Pojedynczego bufora nie blokujemy:
routery są async i nie robią await w trakcie obsługi klawiszy, więc żądania
jednej sesji wykonują się kolejno w pętli zdarzeń.

Sesje nie wygasają — słownik rośnie, dopóki klient nie wywoła DELETE.
Dane giną przy restarcie procesu i nie są współdzielone między workerami.
"""
from __future__ import annotations

import threading
import uuid

from adapters.input_buffer.expression_buffer import ExpressionBuffer


def _new_id() -> str:
    return str(uuid.uuid4())


class InMemorySessionStore:
    def __init__(self, placeholder_text: str = "0", error_message: str = "Error") -> None:
        self._placeholder = placeholder_text
        self._error_message = error_message
        self._buffers: dict[str, ExpressionBuffer] = {}
        self._lock = threading.Lock()

    def create(self) -> tuple[str, ExpressionBuffer]:
        session_id = _new_id()
        buffer = ExpressionBuffer(
            placeholder_text=self._placeholder,
            error_message=self._error_message,
        )
        with self._lock:
            self._buffers[session_id] = buffer
        return session_id, buffer

    def get(self, session_id: str) -> ExpressionBuffer:
        """Rzuca KeyError jeśli nie znaleziono."""
        with self._lock:
            try:
                return self._buffers[session_id]
            except KeyError:
                raise KeyError(f"Session not found: {session_id}") from None

    def delete(self, session_id: str) -> None:
        """Rzuca KeyError jeśli nie znaleziono."""
        with self._lock:
            if session_id not in self._buffers:
                raise KeyError(f"Session not found: {session_id}")
            del self._buffers[session_id]

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffers)
