from __future__ import annotations

import io

import pytest

import stackcalc


@pytest.fixture(autouse=True)
def _plain_settings(monkeypatch):
    monkeypatch.delenv("STACK_CALC_STRICT_SCANNER", raising=False)
    monkeypatch.setenv("STACK_CALC_ERROR_MESSAGE", "Error")


def test_eval_prints_formatted_result(capsys):
    code = stackcalc.main(["eval", "--expr", "2+3*4"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "14.0"


def test_eval_failure_prints_generic_error(capsys):
    code = stackcalc.main(["eval", "-e", "5/0"])

    assert code == 1
    assert capsys.readouterr().out.strip() == "Error"


def test_eval_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(2+3)*4\n"))

    code = stackcalc.main(["eval"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "20.0"


def test_eval_without_input_exits(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    with pytest.raises(SystemExit) as exc:
        stackcalc.main(["eval"])

    assert exc.value.code == 1


def test_eval_strict_flag(capsys):
    assert stackcalc.main(["eval", "-e", "2 + 3"]) == 0
    assert stackcalc.main(["--strict", "eval", "-e", "2+x"]) == 1


def test_keys_replays_calculator_session(capsys):
    code = stackcalc.main(["keys", "2", "+", "2", "=", "+", "1", "="])

    assert code == 0
    assert "5.0" in capsys.readouterr().out


def test_keys_rejects_unknown_key(capsys):
    code = stackcalc.main(["keys", "2", "^", "2"])

    assert code == 1
    assert "^" in capsys.readouterr().err


def _feed_console(monkeypatch, lines):
    answers = iter(lines)

    def _fake_input(self, prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("rich.console.Console.input", _fake_input)


def test_repl_prints_results_and_generic_error(monkeypatch, capsys):
    _feed_console(monkeypatch, ["2+3*4", "", "5/0", "quit", "1+1"])

    code = stackcalc.main(["repl"])

    out_lines = [line.strip() for line in capsys.readouterr().out.splitlines()]
    assert code == 0
    assert "14.0" in out_lines
    assert "Error" in out_lines
    assert "2.0" not in out_lines


def test_repl_stops_on_eof(monkeypatch, capsys):
    _feed_console(monkeypatch, ["(1+2)"])

    code = stackcalc.main(["repl"])

    assert code == 0
    assert "3.0" in capsys.readouterr().out
