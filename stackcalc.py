#!/usr/bin/env python3
"""
stackcalc.py — CLI narzędzie StackCalc.

Działa całkowicie lokalnie, nie wymaga uruchomionego serwera API.

Konfiguracja: zmienne środowiskowe z prefiksem STACK_CALC_
lub plik .env (np. STACK_CALC_STRICT_SCANNER=true).

Podkomendy:
    eval  — oblicz wyrażenie i wypisz wynik
    keys  — odtwórz sekwencję klawiszy kalkulatora (C, AC, = oraz znaki wyrażenia)
    repl  — interaktywna pętla: jedna linia = jedno wyrażenie

Użycie:
    python stackcalc.py eval --expr "2+3*4"
    echo "(2+3)*4" | python stackcalc.py eval --verbose
    python stackcalc.py keys 2 + 2 = + 1 =
    python stackcalc.py repl
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), "-" if value is None else str(value))
    _console().print(table)


def _settings():
    from config import Settings
    return Settings()


def _evaluator(args: argparse.Namespace, settings):
    from adapters.evaluator.shunting_yard_evaluator import ShuntingYardEvaluator
    return ShuntingYardEvaluator(strict=args.strict or settings.strict_scanner)


def _read_expression(args: argparse.Namespace) -> str:
    text = args.expr if args.expr is not None else sys.stdin.read().strip()
    if not text:
        print("Błąd: podaj wyrażenie przez --expr lub stdin", file=sys.stderr)
        sys.exit(1)
    return text


# -- podkomendy ------------------------------------------------------------

def _eval(args: argparse.Namespace) -> int:
    from adapters.input_buffer.expression_buffer import format_result
    from contracts import EvalFailure

    settings = _settings()
    expression = _read_expression(args)
    outcome = _evaluator(args, settings).evaluate(expression)

    if isinstance(outcome, EvalFailure):
        if args.verbose:
            _print_kv_table("Evaluation failed", [
                ("Expression", expression),
                ("Kind", outcome.error.kind.value),
                ("Message", outcome.error.message),
                ("Position", outcome.error.position),
            ])
        else:
            print(settings.error_message)
        return 1

    result = format_result(outcome.value)
    if args.verbose:
        _print_kv_table("Evaluation", [("Expression", expression), ("Result", result)])
    else:
        print(result)
    return 0


def _keys(args: argparse.Namespace) -> int:
    from adapters.input_buffer.expression_buffer import ExpressionBuffer, is_valid_key

    invalid = [k for k in args.keys if not is_valid_key(k)]
    if invalid:
        print(f"Błąd: nieobsługiwane klawisze: {' '.join(invalid)}", file=sys.stderr)
        return 1

    settings = _settings()
    evaluator = _evaluator(args, settings)
    buffer = ExpressionBuffer(
        placeholder_text=settings.placeholder_text,
        error_message=settings.error_message,
    )

    table = Table(title=f"Keys [{len(args.keys)}]", box=box.ASCII, show_lines=False)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Key", no_wrap=True, style="cyan")
    table.add_column("Display")
    table.add_column("Expression")
    for idx, key in enumerate(args.keys, 1):
        buffer.press(key, evaluator)
        table.add_row(str(idx), key, buffer.display, buffer.expression or "EMPTY")
    _console().print(table)

    last = buffer.snapshot().last_outcome
    return 0 if last is None or last.ok else 1


def _repl(args: argparse.Namespace) -> int:
    from adapters.input_buffer.expression_buffer import format_result
    from contracts import EvalFailure

    settings = _settings()
    evaluator = _evaluator(args, settings)
    console = _console()
    console.print("StackCalc — wpisz wyrażenie, 'quit' kończy.")

    while True:
        try:
            line = console.input("> ")
        except EOFError:
            break
        line = line.strip()
        if line in {"quit", "exit"}:
            break
        if not line:
            continue
        outcome = evaluator.evaluate(line)
        if isinstance(outcome, EvalFailure):
            console.print(f"[red]{settings.error_message}[/red]")
        else:
            console.print(format_result(outcome.value))
    return 0


# -- main ------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stackcalc",
        description="StackCalc — CLI (lokalny, bez serwera API)",
    )
    parser.add_argument("--strict", action="store_true",
                        help="Nieznane znaki w wyrażeniu są błędem (zamiast pomijania)")
    sub = parser.add_subparsers(dest="command", required=True)

    # eval
    p = sub.add_parser("eval", help="Oblicz wyrażenie")
    p.add_argument("--expr", "-e", help="Wyrażenie (lub stdin)")
    p.add_argument("--verbose", "-v", action="store_true",
                   help="Tabela z wynikiem lub rodzajem błędu")

    # keys
    p = sub.add_parser("keys", help="Odtwórz sekwencję klawiszy kalkulatora")
    p.add_argument("keys", nargs="+", metavar="KEY",
                   help="0-9 . + - * / ( ) C AC =")

    # repl
    sub.add_parser("repl", help="Interaktywna pętla obliczeń")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=_settings().log_level.upper())

    cmds = {
        "eval": _eval,
        "keys": _keys,
        "repl": _repl,
    }
    return cmds[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
