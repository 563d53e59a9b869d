"""Turns source text into a list of tokens."""

from __future__ import annotations

import string

from .tokens import Token, TokenType

KEYWORDS = {
    "fn": TokenType.FN,
    "for": TokenType.FOR,
    "while": TokenType.WHILE,
    "if": TokenType.IF,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "string": TokenType.STRING_TYPE,
    "int": TokenType.INT_TYPE,
    "bool": TokenType.BOOL_TYPE,
    "short": TokenType.SHORT_TYPE,
    "char": TokenType.CHAR_TYPE,
    "float": TokenType.FLOAT_TYPE,
    "long": TokenType.LONG_TYPE,
    "void": TokenType.VOID_TYPE,
    "return": TokenType.RETURN,
}

_PUNCTUATION = {
    "+": TokenType.OPERATOR,
    "-": TokenType.OPERATOR,
    "*": TokenType.OPERATOR,
    "/": TokenType.OPERATOR,
    "=": TokenType.ASSIGNMENT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACKET,
    "}": TokenType.RBRACKET,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
}

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\", "'": "'"}

_WHITESPACE = frozenset(" \t\n")


class LexError(Exception):
    """Raised when the source text holds a malformed literal."""


class Lexer:
    """Scans source text into tokens."""

    def __init__(self) -> None:
        self._text = ""
        self._pos = 0

    def _peek(self) -> str | None:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def tokenize(self, text: str) -> list[Token]:
        """Return the tokens of ``text``.

        Unknown characters are reported on standard output and skipped.
        """
        self._text = text
        self._pos = 0
        tokens: list[Token] = []

        while (char := self._peek()) is not None:
            if char == "#":
                self._skip_comment()
            elif char in _PUNCTUATION:
                tokens.append(Token(_PUNCTUATION[char], char))
                self._pos += 1
            elif char in "\"'":
                tokens.append(self._quoted())
            elif char.isalpha():
                tokens.append(self._word())
            elif char in string.digits:
                tokens.append(self._number())
            elif char in _WHITESPACE:
                self._pos += 1
            else:
                print(f"error: unexpected character '{char}'")
                self._pos += 1

        return tokens

    def _skip_comment(self) -> None:
        end = self._text.find("\n", self._pos)
        self._pos = len(self._text) if end == -1 else end

    def _number(self) -> Token:
        start = self._pos
        dot_seen = False
        while (char := self._peek()) is not None:
            if char in string.digits:
                pass
            elif char == "." and not dot_seen:
                dot_seen = True
            else:
                break
            self._pos += 1

        value = self._text[start:self._pos]
        if not dot_seen:
            return Token(TokenType.INT_LITERAL, value)
        whole, _, fraction = value.partition(".")
        if not whole or not fraction:
            raise LexError(f"invalid float literal: '{value}'")
        return Token(TokenType.FLOAT_LITERAL, value)

    def _word(self) -> Token:
        start = self._pos
        while (char := self._peek()) is not None and (
            char.isalpha() or char in string.digits
        ):
            self._pos += 1
        word = self._text[start:self._pos]
        return Token(KEYWORDS.get(word, TokenType.ID), word)

    def _quoted(self) -> Token:
        quote = self._text[self._pos]
        self._pos += 1
        if quote == "'":
            return self._char_literal()

        end = self._text.find(quote, self._pos)
        if end == -1:
            raise LexError("unterminated string literal")
        value = self._text[self._pos:end]
        self._pos = end + 1
        return Token(TokenType.STRING_LITERAL, value)

    def _take(self) -> str | None:
        char = self._peek()
        if char is not None:
            self._pos += 1
        return char

    def _char_literal(self) -> Token:
        char = self._take()
        if char is None:
            raise LexError("unterminated char literal")

        if char == "\\":
            escape = self._take()
            if escape is None or self._take() != "'":
                raise LexError("unterminated char literal")
            try:
                value = _ESCAPES[escape]
            except KeyError:
                raise LexError(f"unknown escape sequence '\\{escape}'") from None
            return Token(TokenType.CHAR_LITERAL, value)

        if self._take() != "'":
            raise LexError("unterminated char literal")
        return Token(TokenType.CHAR_LITERAL, char)


def tokenize(text: str) -> list[Token]:
    """Return the tokens of ``text`` using a fresh lexer."""
    return Lexer().tokenize(text)