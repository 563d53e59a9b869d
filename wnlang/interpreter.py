"""Tree-walking interpreter that executes parsed programs."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from . import system_functions
from .lexer import LexError, Lexer
from .nodes import (
    Arg,
    Assignment,
    BinOp,
    BoolLiteral,
    CharLiteral,
    DefaultValue,
    Expression,
    FloatLiteral,
    FunctionCall,
    FunctionDef,
    LongLiteral,
    Node,
    Number,
    Return,
    Scope,
    StringLiteral,
    Type,
    Variable,
)
from .objects import VOID, Value
from .parser import ParseError, Parser

DEFAULT_SCRIPT = "examples/hello_world.wn"

_DEFAULTS = {
    Type.INT: 0,
    Type.STRING: "",
    Type.BOOL: False,
    Type.FLOAT: 0.0,
    Type.CHAR: "\0",
    Type.LONG: 0,
    Type.SHORT: 0,
    Type.VOID: None,
}


class InterpreterError(Exception):
    """Raised when a program fails while it runs."""


@dataclass(frozen=True)
class Function:
    """A user function known to the interpreter."""

    name: str
    scope: Scope
    args: tuple[Arg, ...]
    return_type: Type

    @classmethod
    def from_definition(cls, definition: FunctionDef) -> Function:
        return cls(
            definition.name,
            definition.scope,
            tuple(definition.args),
            definition.return_type,
        )

    def fresh_scope(self) -> Scope:
        """Return a copy of the body scope for one call."""
        return Scope(list(self.scope.nodes), dict(self.scope.variables))


@dataclass(frozen=True)
class Returned:
    """Signals that a ``return`` statement produced a value."""

    value: Value


def _truncating_divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


class Interpreter:
    """Executes statements, keeping global variables and user functions."""

    def __init__(
        self, stdout: TextIO | None = None, stdin: TextIO | None = None
    ) -> None:
        self.variables: dict[str, Value] = {}
        self.functions: dict[str, Function] = {}
        self._stdout = stdout
        self._stdin = stdin
        self._parser = Parser()

    def run(self, source: str) -> None:
        """Tokenize, parse and execute ``source``."""
        tokens = Lexer().tokenize(source)
        if not tokens:
            return
        for node in self._parser.parse(tokens):
            self.execute(node)

    def execute(self, node: Node) -> Returned | None:
        """Execute one statement; a ``return`` yields :class:`Returned`."""
        if isinstance(node, Assignment):
            self.variables[node.variable.name] = self.evaluate(node.expression)
            return None
        if isinstance(node, FunctionDef):
            self.functions[node.name] = Function.from_definition(node)
            return None
        if isinstance(node, Return):
            return Returned(self.evaluate(node.value))
        self.evaluate(node)
        return None

    def evaluate(self, expr: Expression) -> Value:
        """Return the value of ``expr``."""
        if isinstance(expr, DefaultValue):
            return Value(expr.type, _DEFAULTS[expr.type])
        if isinstance(expr, Number):
            return Value(Type.INT, expr.value)
        if isinstance(expr, LongLiteral):
            return Value(Type.LONG, expr.value)
        if isinstance(expr, FloatLiteral):
            return Value(Type.FLOAT, expr.value)
        if isinstance(expr, CharLiteral):
            return Value(Type.CHAR, expr.value)
        if isinstance(expr, StringLiteral):
            return Value(Type.STRING, expr.value)
        if isinstance(expr, BoolLiteral):
            return Value(Type.BOOL, expr.value)
        if isinstance(expr, Variable):
            try:
                return self.variables[expr.name]
            except KeyError:
                raise InterpreterError(
                    f"variable '{expr.name}' does not exist"
                ) from None
        if isinstance(expr, BinOp):
            return self._binary(expr)
        if isinstance(expr, FunctionCall):
            return self._call(expr)
        raise InterpreterError(f"cannot evaluate {expr!r}")

    def _binary(self, expr: BinOp) -> Value:
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        op = expr.op
        kinds = (left.kind, right.kind)

        if kinds == (Type.INT, Type.INT):
            a, b = left.data, right.data
            if op == "+":
                result = a + b
            elif op == "-":
                result = a - b
            elif op == "*":
                result = a * b
            elif op == "/":
                if b == 0:
                    raise InterpreterError("division by zero")
                result = _truncating_divide(a, b)
            else:
                raise InterpreterError(f"unsupported operator '{op}'")
            try:
                return Value(Type.INT, result)
            except OverflowError:
                raise InterpreterError(
                    f"integer overflow in {a} {op} {b}"
                ) from None

        if kinds == (Type.STRING, Type.STRING):
            if op != "+":
                raise InterpreterError(f"strings cannot be combined with '{op}'")
            return Value(Type.STRING, left.data + right.data)

        if kinds == (Type.STRING, Type.INT):
            if op != "*":
                raise InterpreterError(
                    f"a string and an int cannot be combined with '{op}'"
                )
            return Value(Type.STRING, left.data * right.data)

        raise InterpreterError(
            f"unsupported operand types {left.kind} and {right.kind} for '{op}'"
        )

    def _call(self, call: FunctionCall) -> Value:
        name = call.name
        if name == "println":
            system_functions.print_line(
                [self.evaluate(arg) for arg in call.args], self._stdout
            )
            return VOID
        if name == "print":
            system_functions.print_values(
                [self.evaluate(arg) for arg in call.args], self._stdout
            )
            return VOID
        if name == "scan":
            return system_functions.scan(self._stdin)
        if name == "quit":
            system_functions.quit()

        values = [self.evaluate(arg) for arg in call.args]
        function = self.functions.get(name)
        if function is None:
            return VOID

        if len(values) > len(function.args):
            raise InterpreterError(
                f"function '{name}' takes {len(function.args)} arguments,"
                f" got {len(values)}"
            )
        scope = function.fresh_scope()
        for param, expr, value in zip(function.args, call.args, values):
            scope.add_variable(param.name, self._bind_argument(param, expr, value))

        saved = self.variables
        self.variables = dict(scope.variables)
        result = VOID
        try:
            for node in scope.nodes:
                state = self.execute(node)
                if isinstance(state, Returned):
                    result = state.value
                    break
        finally:
            self.variables = saved

        if result.kind is not function.return_type:
            raise InterpreterError(
                f"function '{name}' must return {function.return_type},"
                f" got {result.kind}"
            )
        return result

    @staticmethod
    def _bind_argument(param: Arg, expr: Expression, value: Value) -> Value:
        if isinstance(expr, StringLiteral):
            expected = Type.STRING
        elif isinstance(expr, Number):
            expected = Type.INT
        elif isinstance(expr, BinOp):
            if value.kind not in (Type.INT, Type.STRING):
                raise InterpreterError(
                    f"operation result must be Int or String, got {value.kind}"
                )
            expected = value.kind
        elif isinstance(expr, Variable):
            if param.type is not expr.type:
                raise InterpreterError(
                    f"type mismatch in argument '{param.name}':"
                    f" expected {param.type}, got {expr.type}"
                )
            if expr.type is Type.VOID:
                raise InterpreterError("cannot pass a variable of type Void")
            try:
                value.expect(expr.type)
            except TypeError as error:
                raise InterpreterError(str(error)) from None
            return value
        else:
            raise InterpreterError(
                f"unsupported argument expression for '{param.name}'"
            )

        if param.type is not expected:
            raise InterpreterError(
                f"type mismatch in argument '{param.name}':"
                f" expected {param.type}, got {expected}"
            )
        return value


def main(argv: list[str] | None = None) -> int:
    """Run a script file and return the exit status."""
    parser = argparse.ArgumentParser(prog="wnlang", description="Run a script.")
    parser.add_argument("path", nargs="?", default=DEFAULT_SCRIPT)
    args = parser.parse_args(argv)

    try:
        text = Path(args.path).read_text(encoding="utf-8")
    except OSError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    source = "".join(f"{line}\n" for line in text.splitlines())
    try:
        Interpreter().run(source)
    except (LexError, ParseError, InterpreterError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())