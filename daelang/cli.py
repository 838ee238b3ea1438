"""Command line entry point for running Dae programs."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Optional, Union

from .errors import DaeError, InterpreterError, ParserError
from .interpreter import Interpreter
from .lexer import tokenize
from .parser import parse

PROG = "dae"


def interpret(source: str) -> Union[int, bool, str]:
    """Run the Dae program in *source* and return the value ``main`` returned.

    Raises :class:`InterpreterError` if ``main`` finishes without a value.
    """
    parser = parse(tokenize(source))
    interpreter = Interpreter(parser.functions, parser.natives)
    result = interpreter.run()
    if result.data is None:
        raise InterpreterError("main finished without returning a value")
    return result.data


def _read_source(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise DaeError(f"Failed to open {path}") from exc


def _usage_text(prog: str) -> str:
    return f"Usage: {prog} <action> <file>\nUse {prog} help for more info."


def _help_text(prog: str) -> str:
    return (
        f"{prog} help        : prints help\n"
        f"{prog} run <files> : executes an dae file."
    )


def run(argv: Sequence[str]) -> bool:
    """Carry out the action named by *argv*; return whether it succeeded.

    Errors met while running a program are raised as :class:`DaeError`.
    """
    if not argv:
        print(_usage_text(PROG))
        return False

    action, *rest = argv
    if action == "run":
        if not rest:
            raise DaeError("Please provide at least 1 file!")
        interpret(_read_source(rest[0]))
        return True
    if action == "help":
        print(_help_text(PROG))
        return True
    return False


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line tool and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        succeeded = run(args)
    except ParserError as exc:
        print(f"[Parsing Error] {exc}", file=sys.stderr)
        return 1
    except DaeError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    return 0 if succeeded else 1


if __name__ == "__main__":
    sys.exit(main())