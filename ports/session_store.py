"""
Port: SessionStore
Odpowiedzialność: przechowywanie buforów kalkulatora per sesja (API HTTP).
"""
from typing import Protocol, runtime_checkable

from ports.input_buffer import InputBuffer


@runtime_checkable
class SessionStore(Protocol):
    def create(self) -> tuple[str, InputBuffer]:
        """Creates a fresh buffer and returns (session_id, buffer)."""
        ...

    def get(self, session_id: str) -> InputBuffer:
        """Returns the buffer. Raises KeyError if the session does not exist."""
        ...

    def delete(self, session_id: str) -> None:
        """Drops the session. Raises KeyError if the session does not exist."""
        ...
