#!/usr/bin/env python3
"""
Calculator entry point.

Usage:
  calcengine "10 + 20 * 30" "(10 + 20) * 30"
  calcengine --repl --config calc.yaml
  echo "-(10 + 20) * 30" | calcengine
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import Settings, load_settings, parse_precision
from .errors import CalcError
from .parser import Parser
from .scanner import tokenize


def calculate(expression: str) -> float:
    parser = Parser()
    parser.parse(expression)
    return parser.answer


def format_result(value: float, precision: Optional[int] = None) -> str:
    if precision is None:
        return repr(float(value))
    return format(value, f".{precision}g")


def _log(msg: str) -> None:
    print(f"[calc] {msg}", file=sys.stderr)


def run_one(parser: Parser, expression: str, settings: Settings, verbose: bool = False) -> bool:
    """Evaluate one expression on ``parser`` and print the outcome. Returns True on success."""
    if verbose:
        _log(f"expression: {expression!r}")
    try:
        if settings.show_tokens:
            print("Tokens: " + " ".join(t.describe() for t in tokenize(expression)))
        tree = parser.parse(expression)
    except CalcError as e:
        print(f"Error: {e}")
        if verbose:
            _log(f"{type(e).__name__} at position {getattr(e, 'position', None)}")
        return False
    if settings.show_tree:
        print(f"Tree: {tree}")
    print(f"Result: {format_result(parser.answer, settings.precision)}")
    return True


def _precision_arg(raw: str) -> int:
    try:
        precision = parse_precision(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    if precision is None:
        raise argparse.ArgumentTypeError("precision must be > 0")
    return precision


def _read_lines(prompt: str, repl: bool):
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return
        line = line.strip()
        if not repl:
            yield line
            return
        if line:
            yield line


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="calcengine", description="Evaluate arithmetic expressions.")
    ap.add_argument("expressions", nargs="*", help="expressions to evaluate; read from stdin when omitted")
    ap.add_argument("--config", default=None, help="YAML or JSON settings file")
    ap.add_argument("--precision", type=_precision_arg, default=None, help="significant digits in printed results")
    ap.add_argument("--show-tree", action="store_true", help="print the parsed tree")
    ap.add_argument("--show-tokens", action="store_true", help="print the token stream")
    ap.add_argument("--repl", action="store_true", help="keep reading expressions until end of input")
    ap.add_argument("--verbose", action="store_true", help="diagnostics on stderr")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    settings = load_settings(args.config)
    if args.precision is not None:
        settings.precision = args.precision
    if args.show_tree:
        settings.show_tree = True
    if args.show_tokens:
        settings.show_tokens = True
    if args.verbose:
        _log(f"settings: {settings}")

    if args.expressions:
        expressions = iter(args.expressions)
    else:
        expressions = _read_lines(settings.prompt, args.repl)

    # one parser for the whole session; parse() resets its scanner per expression
    parser = Parser()
    ok = True
    for expression in expressions:
        ok = run_one(parser, expression, settings, verbose=args.verbose) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
