from __future__ import annotations

from fastapi.testclient import TestClient

from api.main import create_app
from config import Settings


def _client(**overrides) -> TestClient:
    return TestClient(create_app(Settings(**overrides)))


def test_evaluate_returns_value_and_display():
    resp = _client().post("/evaluate", json={"expression": "(2+3)*4"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    assert body["value"] == 20.0
    assert body["display"] == "20.0"
    assert body["error"] is None


def test_evaluate_failure_is_a_result_not_http_error():
    resp = _client(error_message="Error").post("/evaluate", json={"expression": "5/0"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is False
    assert body["value"] is None
    assert body["display"] == "Error"
    assert body["error"]["kind"] == "division_by_zero"


def test_evaluate_strict_scanner_from_settings():
    resp = _client(strict_scanner=True).post("/evaluate", json={"expression": "2+a"})

    assert resp.json()["error"]["kind"] == "unexpected_character"


def test_calculator_session_flow():
    client = _client(placeholder_text="0")

    created = client.post("/calculator/sessions")
    assert created.status_code == 201
    session_id = created.json()["session_id"]
    assert created.json()["state"]["display"] == "0"

    resp = client.post(
        f"/calculator/sessions/{session_id}/keys",
        json={"keys": ["2", "+", "2", "=", "*", "3", "="]},
    )
    assert resp.status_code == 200
    state = resp.json()["state"]
    assert state["display"] == "12.0"
    assert state["fresh_input"] is True
    assert state["last_outcome"]["status"] == "ok"

    fetched = client.get(f"/calculator/sessions/{session_id}")
    assert fetched.json()["state"]["expression"] == "12.0"


def test_calculator_invalid_key_is_rejected_without_side_effects():
    client = _client()
    session_id = client.post("/calculator/sessions").json()["session_id"]

    resp = client.post(f"/calculator/sessions/{session_id}/keys", json={"keys": ["1", "sqrt"]})

    assert resp.status_code == 422
    assert client.get(f"/calculator/sessions/{session_id}").json()["state"]["expression"] == ""


def test_calculator_unknown_session_is_404():
    client = _client()

    assert client.get("/calculator/sessions/nope").status_code == 404
    assert client.post("/calculator/sessions/nope/keys", json={"keys": ["1"]}).status_code == 404
    assert client.delete("/calculator/sessions/nope").status_code == 404


def test_calculator_delete_session():
    client = _client()
    session_id = client.post("/calculator/sessions").json()["session_id"]

    assert client.delete(f"/calculator/sessions/{session_id}").status_code == 204
    assert client.get(f"/calculator/sessions/{session_id}").status_code == 404


def test_health():
    resp = _client(app_version="9.9.9").get("/health")

    assert resp.json() == {"status": "ok", "version": "9.9.9"}


def test_evaluate_huge_literal_is_a_failure_result():
    big = "9" * 400
    client = _client(error_message="Error")

    single = client.post("/evaluate", json={"expression": big}).json()
    diff = client.post("/evaluate", json={"expression": f"{big}-{big}"}).json()

    for body in (single, diff):
        assert body["ok"] is False
        assert body["value"] is None
        assert body["display"] == "Error"
        assert body["error"]["kind"] == "numeric_parse_failure"


def test_evaluate_overflowing_result_is_a_failure_result():
    big = "9" * 300

    body = _client().post("/evaluate", json={"expression": f"{big}*{big}"}).json()

    assert body["ok"] is False
    assert body["error"]["kind"] == "numeric_overflow"


def test_calculator_key_batches_apply_in_order_per_session():
    client = _client()
    first = client.post("/calculator/sessions").json()["session_id"]
    second = client.post("/calculator/sessions").json()["session_id"]

    client.post(f"/calculator/sessions/{first}/keys", json={"keys": ["1", "+"]})
    client.post(f"/calculator/sessions/{second}/keys", json={"keys": ["9"]})
    resp = client.post(f"/calculator/sessions/{first}/keys", json={"keys": ["2", "="]})

    assert resp.json()["state"]["display"] == "3.0"
    assert client.get(f"/calculator/sessions/{second}").json()["state"]["expression"] == "9"
