"""Token kinds and tokens produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every kind of token the language knows."""

    OPERATOR = auto()

    LPAREN = auto()
    RPAREN = auto()

    INT_LITERAL = auto()
    STRING_LITERAL = auto()
    CHAR_LITERAL = auto()
    FLOAT_LITERAL = auto()

    FN = auto()
    IF = auto()
    FOR = auto()
    WHILE = auto()
    RETURN = auto()
    BREAK = auto()
    CONTINUE = auto()

    ID = auto()

    INT_TYPE = auto()
    STRING_TYPE = auto()
    FLOAT_TYPE = auto()
    BOOL_TYPE = auto()
    VOID_TYPE = auto()
    CHAR_TYPE = auto()
    SHORT_TYPE = auto()
    LONG_TYPE = auto()

    TRUE = auto()
    FALSE = auto()

    LBRACKET = auto()
    RBRACKET = auto()

    ASSIGNMENT = auto()
    COLON = auto()
    SEMICOLON = auto()
    COMMA = auto()


_DISPLAY_NAMES = {
    TokenType.OPERATOR: "operator",
    TokenType.INT_LITERAL: "int_literal",
    TokenType.ASSIGNMENT: "assignment",
    TokenType.ID: "ID",
    TokenType.SEMICOLON: "semicolon",
    TokenType.COLON: "colon",
    TokenType.FN: "fn",
    TokenType.FALSE: "false",
    TokenType.TRUE: "true",
    TokenType.FOR: "for",
    TokenType.IF: "if",
    TokenType.LPAREN: "LParen",
    TokenType.RPAREN: "RParen",
    TokenType.WHILE: "while",
    TokenType.CHAR_LITERAL: "charLiteral",
    TokenType.CHAR_TYPE: "char",
}


@dataclass(frozen=True)
class Token:
    """A single lexical token: its kind and the text it stands for."""

    kind: TokenType
    value: str

    def name(self) -> str:
        """Human-readable name of the token kind, or ``"error"`` if it has none."""
        return _DISPLAY_NAMES.get(self.kind, "error")