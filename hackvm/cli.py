"""Command line entry point: translate a VM file to assembly."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from .translator import VMError, generate, parse

_STDIO = "-"


class CliError(Exception):
    """A failure reported to the user by the command line tool."""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hackvm", description="Translate stack VM code to Hack assembly."
    )
    parser.add_argument("-i", "--input", default=_STDIO, help="input file, - for stdin")
    parser.add_argument(
        "-o", "--output", default=_STDIO, help="output file, - for stdout"
    )
    return parser


def _read_input(name: str) -> tuple[str, str]:
    if name == _STDIO:
        try:
            return sys.stdin.read(), "IO"
        except OSError as exc:
            raise CliError(f"io error: {exc}") from exc
    path = Path(name)
    try:
        text = path.read_text()
    except FileNotFoundError as exc:
        raise CliError(f"no such file: {name}") from exc
    except OSError as exc:
        raise CliError(f"io error: {exc}") from exc
    if not path.name:
        raise CliError("input is not a file")
    return text, path.name


def _write_output(name: str, text: str) -> None:
    try:
        if name == _STDIO:
            sys.stdout.write(text)
            sys.stdout.flush()
        else:
            Path(name).write_bytes(text.encode())
    except OSError as exc:
        raise CliError(f"io error: {exc}") from exc


def _run(args: argparse.Namespace) -> None:
    text, scope = _read_input(args.input)
    try:
        generated = generate(parse(text), scope)
    except VMError as exc:
        raise CliError(f"vm error: {exc}") from exc
    _write_output(args.output, generated)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the translator; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        _run(args)
    except CliError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())