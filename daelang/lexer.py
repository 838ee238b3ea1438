"""Tokenizer for Dae source text."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum

from .errors import LexerError

_WHITESPACE = frozenset(string.whitespace)
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)

_KEYWORDS = frozenset({"work", "return"})
_BOOLEANS = frozenset({"true", "false"})
_TYPES = frozenset({"bool", "int", "string"})


class TokenType(Enum):
    """Kinds of token produced by :func:`tokenize`."""

    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    STRING = "String"
    LPAREN = "Left Parenthesis"
    RPAREN = "Right Parenthesis"
    LBRACE = "Left Brace"
    RBRACE = "Right Brace"
    ARROW = "Arrow"
    COLON = "Colon"
    TYPE = "Type"
    BOOLEAN = "Boolean"
    NUMBER = "Number"
    COMMA = "Comma"
    EOF = "End of File"

    def display_name(self) -> str:
        """Human readable name used in diagnostics."""
        return self.value


@dataclass(frozen=True)
class Token:
    """A single lexical token."""

    type: TokenType
    text: str


_PUNCTUATION = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
}


def _classify_word(word: str) -> TokenType:
    if word in _KEYWORDS:
        return TokenType.KEYWORD
    if word in _BOOLEANS:
        return TokenType.BOOLEAN
    if word in _TYPES:
        return TokenType.TYPE
    return TokenType.IDENTIFIER


def tokenize(source: str) -> list[Token]:
    """Split *source* into tokens, always ending with an EOF token.

    Raises :class:`LexerError` on an unterminated string literal or a
    character that starts no token.
    """
    tokens: list[Token] = []
    pos = 0
    length = len(source)

    while pos < length:
        char = source[pos]

        if char in _WHITESPACE:
            pos += 1
            continue

        kind = _PUNCTUATION.get(char)
        if kind is not None:
            tokens.append(Token(kind, char))
            pos += 1
            continue

        if source.startswith("->", pos):
            tokens.append(Token(TokenType.ARROW, "->"))
            pos += 2
            continue

        if char == '"':
            end = source.find('"', pos + 1)
            if end == -1:
                raise LexerError("Unclosed string")
            tokens.append(Token(TokenType.STRING, source[pos + 1 : end]))
            pos = end + 1
            continue

        if char in _DIGITS:
            start = pos
            while pos < length and source[pos] in _DIGITS:
                pos += 1
            tokens.append(Token(TokenType.NUMBER, source[start:pos]))
            continue

        if char in _LETTERS:
            start = pos
            while pos < length and (source[pos] in _LETTERS or source[pos] in _DIGITS):
                pos += 1
            word = source[start:pos]
            tokens.append(Token(_classify_word(word), word))
            continue

        raise LexerError(f"Unexpected character {char}")

    tokens.append(Token(TokenType.EOF, ""))
    return tokens