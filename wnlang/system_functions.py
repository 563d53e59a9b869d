"""Built-in functions available to every program."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import NoReturn, TextIO

from .nodes import Type
from .objects import Value


def print_values(values: Iterable[Value], stream: TextIO | None = None) -> None:
    """Write each value followed by a space."""
    out = sys.stdout if stream is None else stream
    out.write("".join(f"{value} " for value in values))


def print_line(values: Iterable[Value], stream: TextIO | None = None) -> None:
    """Write each value followed by a space, then end the line."""
    out = sys.stdout if stream is None else stream
    print_values(values, out)
    out.write("\n")


def scan(stream: TextIO | None = None) -> Value:
    """Read one line and return it as a string without trailing whitespace."""
    source = sys.stdin if stream is None else stream
    return Value(Type.STRING, source.readline().rstrip())


def quit() -> NoReturn:
    """Stop the program successfully."""
    raise SystemExit(0)