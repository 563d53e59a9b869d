"""Builds a syntax tree from a list of tokens."""

from __future__ import annotations

from collections.abc import Iterable

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
from .tokens import Token, TokenType

# Integer literals above this value become ``long`` literals.
LONG_THRESHOLD = 3600
_LITERAL_MAX = 2**127 - 1

_DECLARABLE_TYPES = {
    TokenType.INT_TYPE: Type.INT,
    TokenType.STRING_TYPE: Type.STRING,
    TokenType.BOOL_TYPE: Type.BOOL,
    TokenType.CHAR_TYPE: Type.CHAR,
    TokenType.LONG_TYPE: Type.LONG,
    TokenType.SHORT_TYPE: Type.SHORT,
    TokenType.FLOAT_TYPE: Type.FLOAT,
}

_SIGNATURE_TYPES = {
    TokenType.INT_TYPE: Type.INT,
    TokenType.STRING_TYPE: Type.STRING,
    TokenType.BOOL_TYPE: Type.BOOL,
    TokenType.VOID_TYPE: Type.VOID,
}

# Operand shapes a binary initialiser of a declaration may have.
_DECLARABLE_OPERANDS = {
    (Number, Number),
    (StringLiteral, StringLiteral),
    (StringLiteral, Number),
}


class ParseError(Exception):
    """Raised when the tokens do not form a valid program."""


class Parser:
    """Recursive-descent parser.

    The types of declared variables and function arguments are remembered
    across calls to :meth:`parse`.
    """

    def __init__(self) -> None:
        self._tokens: list[Token] = []
        self._pos = 0
        self._variable_types: dict[str, Type] = {}

    def parse(self, tokens: Iterable[Token]) -> list[Node]:
        """Return the top-level statements formed by ``tokens``."""
        self._tokens = list(tokens)
        self._pos = 0
        return self._statement_list()

    # Token access

    def _has_more(self) -> bool:
        return self._pos < len(self._tokens)

    def _current(self) -> Token:
        if not self._has_more():
            raise ParseError("unexpected end of input")
        return self._tokens[self._pos]

    def _next_kind(self) -> TokenType | None:
        index = self._pos + 1
        return self._tokens[index].kind if index < len(self._tokens) else None

    def _check(self, kind: TokenType) -> bool:
        return self._current().kind is kind

    def _eat(self, kind: TokenType) -> Token:
        token = self._current()
        if token.kind is not kind:
            raise ParseError(f"expected {kind.name}, got {token.kind.name}")
        self._pos += 1
        return token

    # Statements

    def _statement_list(self) -> list[Node]:
        nodes: list[Node] = []
        while self._has_more() and not self._check(TokenType.RBRACKET):
            nodes.append(self._statement())
        return nodes

    def _statement(self) -> Node:
        kind = self._current().kind
        if kind is TokenType.ID:
            following = self._next_kind()
            if following is TokenType.COLON:
                return self._declaration()
            if following is TokenType.ASSIGNMENT:
                return self._reassignment()
            if following is TokenType.LPAREN:
                name = self._eat(TokenType.ID).value
                self._eat(TokenType.LPAREN)
                return FunctionCall(name, self._call_arguments(trailing_comma=True))
            raise ParseError(
                f"invalid statement starting with '{self._current().value}'"
            )
        if kind is TokenType.FN:
            return self._function_definition()
        if kind is TokenType.RETURN:
            self._eat(TokenType.RETURN)
            return Return(self._expression())
        return self._expression()

    def _reassignment(self) -> Assignment:
        name = self._eat(TokenType.ID).value
        self._eat(TokenType.ASSIGNMENT)
        expression = self._expression()
        try:
            var_type = self._variable_types[name]
        except KeyError:
            raise ParseError(f"no type found for variable '{name}'") from None
        return Assignment(Variable(name, var_type), expression)

    def _declaration(self) -> Assignment:
        name = self._eat(TokenType.ID).value
        self._eat(TokenType.COLON)

        type_token = self._current()
        try:
            var_type = _DECLARABLE_TYPES[type_token.kind]
        except KeyError:
            raise ParseError(f"unexpected type '{type_token.value}'") from None
        self._variable_types[name] = var_type
        self._eat(type_token.kind)

        if self._check(TokenType.ASSIGNMENT):
            self._eat(TokenType.ASSIGNMENT)
            expression = self._expression()
            _check_initialiser(expression)
            return Assignment(Variable(name, var_type), expression)

        return Assignment(Variable(name, var_type), DefaultValue(var_type))

    def _function_definition(self) -> FunctionDef:
        self._eat(TokenType.FN)

        if not self._check(TokenType.ID):
            raise ParseError(
                f"expected function name, got '{self._current().value}'"
            )
        name = self._eat(TokenType.ID).value
        self._eat(TokenType.LPAREN)

        args: list[Arg] = []
        while not self._check(TokenType.RPAREN):
            if not self._check(TokenType.ID):
                raise ParseError("expected argument identifier")
            arg_name = self._eat(TokenType.ID).value
            self._eat(TokenType.COLON)
            args.append(Arg(arg_name, self._signature_type("argument")))
            if self._check(TokenType.COMMA):
                self._eat(TokenType.COMMA)
            else:
                break
        self._eat(TokenType.RPAREN)

        for arg in args:
            self._variable_types[arg.name] = arg.type

        self._eat(TokenType.COLON)
        return_type = self._signature_type("return")

        self._eat(TokenType.LBRACKET)
        body = self._statement_list()
        self._eat(TokenType.RBRACKET)

        return FunctionDef(name, tuple(args), Scope(body), return_type)

    def _signature_type(self, role: str) -> Type:
        token = self._current()
        try:
            result = _SIGNATURE_TYPES[token.kind]
        except KeyError:
            raise ParseError(f"unknown {role} type '{token.value}'") from None
        self._eat(token.kind)
        return result

    # Expressions

    def _expression(self) -> Expression:
        return self._binary_tail(self._term(), "+-", self._term)

    def _term(self) -> Expression:
        return self._binary_tail(self._factor(), "*/", self._factor)

    def _binary_tail(self, left, operators, operand) -> Expression:
        while self._has_more():
            token = self._current()
            if token.kind is not TokenType.OPERATOR or token.value not in operators:
                break
            self._eat(TokenType.OPERATOR)
            left = BinOp(left, operand(), token.value)
        return left

    def _call_arguments(self, *, trailing_comma: bool) -> tuple[Expression, ...]:
        args: list[Expression] = []
        if not self._check(TokenType.RPAREN):
            while True:
                args.append(self._expression())
                if not self._check(TokenType.COMMA):
                    break
                self._eat(TokenType.COMMA)
                if trailing_comma and self._check(TokenType.RPAREN):
                    break
        self._eat(TokenType.RPAREN)
        return tuple(args)

    def _factor(self) -> Expression:
        token = self._current()
        kind = token.kind

        if kind is TokenType.INT_LITERAL:
            value = int(token.value)
            if value > _LITERAL_MAX:
                raise ParseError(f"integer literal out of range: {token.value}")
            self._eat(kind)
            return LongLiteral(value) if value > LONG_THRESHOLD else Number(value)
        if kind is TokenType.FLOAT_LITERAL:
            self._eat(kind)
            return FloatLiteral(float(token.value))
        if kind is TokenType.STRING_LITERAL:
            self._eat(kind)
            return StringLiteral(token.value)
        if kind is TokenType.CHAR_LITERAL:
            self._eat(kind)
            if not token.value:
                raise ParseError("empty char literal")
            return CharLiteral(token.value[0])
        if kind is TokenType.TRUE:
            self._eat(kind)
            return BoolLiteral(True)
        if kind is TokenType.FALSE:
            self._eat(kind)
            return BoolLiteral(False)
        if kind is TokenType.ID:
            name = token.value
            if self._next_kind() is TokenType.LPAREN:
                self._eat(TokenType.ID)
                self._eat(TokenType.LPAREN)
                return FunctionCall(name, self._call_arguments(trailing_comma=False))
            self._eat(TokenType.ID)
            try:
                var_type = self._variable_types[name]
            except KeyError:
                raise ParseError(f"variable '{name}' is not declared") from None
            return Variable(name, var_type)
        if kind is TokenType.LPAREN:
            self._eat(TokenType.LPAREN)
            inner = self._expression()
            self._eat(TokenType.RPAREN)
            return inner
        raise ParseError(f"unexpected token {kind.name} '{token.value}'")


def _check_initialiser(expression: Expression) -> None:
    if isinstance(expression, BinOp):
        shape = (type(expression.left), type(expression.right))
        if shape not in _DECLARABLE_OPERANDS:
            raise ParseError("unexpected operand types in declaration")


def parse(tokens: Iterable[Token]) -> list[Node]:
    """Return the statements formed by ``tokens`` using a fresh parser."""
    return Parser().parse(tokens)