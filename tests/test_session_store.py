import pytest

from adapters.session_store.in_memory_session_store import InMemorySessionStore
from ports.session_store import SessionStore


def test_store_satisfies_port():
    assert isinstance(InMemorySessionStore(), SessionStore)


def test_create_uses_configured_texts():
    store = InMemorySessionStore(placeholder_text="READY", error_message="ERR")

    session_id, buffer = store.create()

    assert store.get(session_id) is buffer
    assert buffer.display == "READY"
    assert len(store) == 1


def test_sessions_are_independent():
    store = InMemorySessionStore()
    a_id, a = store.create()
    b_id, b = store.create()

    a.append("1")

    assert a_id != b_id
    assert b.expression == ""


def test_unknown_session_raises_key_error():
    store = InMemorySessionStore()

    with pytest.raises(KeyError):
        store.get("missing")
    with pytest.raises(KeyError):
        store.delete("missing")


def test_delete_removes_session():
    store = InMemorySessionStore()
    session_id, _ = store.create()

    store.delete(session_id)

    assert len(store) == 0
    with pytest.raises(KeyError):
        store.get(session_id)


def test_port_is_typed_against_buffer_port():
    import ports.session_store
    from ports.input_buffer import InputBuffer

    assert ports.session_store.InputBuffer is InputBuffer
    assert ports.session_store.SessionStore.get.__annotations__["return"] is InputBuffer
