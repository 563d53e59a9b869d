"""Syntax tree nodes produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .objects import Value


class Type(Enum):
    """Static types a variable, argument or function result can have."""

    INT = "Int"
    FLOAT = "Float"
    STRING = "String"
    BOOL = "Bool"
    CHAR = "Char"
    LONG = "Long"
    SHORT = "Short"
    VOID = "Void"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Arg:
    """A declared parameter of a user function."""

    name: str
    type: Type


@dataclass(frozen=True)
class Number:
    """An integer literal small enough to be an ``int``."""

    value: int


@dataclass(frozen=True)
class LongLiteral:
    """An integer literal stored as a ``long``."""

    value: int


@dataclass(frozen=True)
class FloatLiteral:
    """A floating point literal."""

    value: float


@dataclass(frozen=True)
class Variable:
    """A reference to a named variable of a known type."""

    name: str
    type: Type


@dataclass(frozen=True)
class BinOp:
    """A binary operation such as ``a + b``."""

    left: Expression
    right: Expression
    op: str


@dataclass(frozen=True)
class StringLiteral:
    """A string literal."""

    value: str


@dataclass(frozen=True)
class DefaultValue:
    """The zero value of a type, used by declarations without an initialiser."""

    type: Type


@dataclass(frozen=True)
class FunctionCall:
    """A call of a built-in or user function."""

    name: str
    args: tuple[Expression, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True)
class CharLiteral:
    """A single character literal."""

    value: str


@dataclass(frozen=True)
class BoolLiteral:
    """``true`` or ``false``."""

    value: bool


Expression = Union[
    Number,
    LongLiteral,
    FloatLiteral,
    Variable,
    BinOp,
    StringLiteral,
    DefaultValue,
    FunctionCall,
    CharLiteral,
    BoolLiteral,
]


@dataclass(frozen=True)
class Assignment:
    """Stores the value of an expression in a variable."""

    variable: Variable
    expression: Expression


@dataclass(frozen=True)
class Return:
    """Leaves the current function with a value."""

    value: Expression


class UndefinedVariableError(LookupError):
    """Raised when a variable is looked up that was never defined."""


@dataclass
class Scope:
    """A block of statements together with the variables bound in it."""

    nodes: list[Node] = field(default_factory=list)
    variables: dict[str, Value] = field(default_factory=dict)

    def add_variable(self, name: str, value: Value) -> None:
        """Bind ``name`` to ``value``, replacing any earlier binding."""
        self.variables[name] = value

    def lookup(self, name: str) -> Value:
        """Return the value bound to ``name``."""
        try:
            return self.variables[name]
        except KeyError:
            raise UndefinedVariableError(f"variable '{name}' is not defined") from None


@dataclass(frozen=True)
class FunctionDef:
    """Definition of a user function."""

    name: str
    args: tuple[Arg, ...]
    scope: Scope
    return_type: Type

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


Node = Union[Assignment, FunctionDef, Return, Expression]