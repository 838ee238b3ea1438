"""Parser turning a Dae token stream into function definitions."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Optional

from .errors import ParserError
from .lexer import Token, TokenType
from .natives import native_print
from .nodes import (
    CallNode,
    FunctionNode,
    FunctionParam,
    ReturnKind,
    ReturnNode,
    Statement,
)

NativeFunction = Callable[[Optional[list[str]]], object]

_LITERAL_TYPES = frozenset({TokenType.STRING, TokenType.BOOLEAN, TokenType.NUMBER})

_TYPE_NAMES = {
    TokenType.STRING: "string",
    TokenType.BOOLEAN: "bool",
    TokenType.NUMBER: "number",
}


def type_from_token(token_type: TokenType) -> str:
    """Name of the value type a literal token stands for."""
    return _TYPE_NAMES.get(token_type, "unknownType")


def _leading_int(text: str) -> int:
    digits = []
    for char in text:
        if not char.isdigit():
            break
        digits.append(char)
    return int("".join(digits)) if digits else 0


class Parser:
    """Recursive-descent parser over a list of tokens."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = list(tokens)
        self.functions: list[FunctionNode] = []
        self.natives: dict[str, NativeFunction] = {}
        self.pos = 0

    def _peek(self) -> Token:
        try:
            return self.tokens[self.pos]
        except IndexError:
            raise ParserError("Unexpected end of token stream") from None

    def consume(self, expected: TokenType) -> Token:
        """Take the current token, which must be of type *expected*."""
        token = self._peek()
        if token.type is not expected:
            raise ParserError(
                f"Expected {expected.display_name()}, "
                f"but got {token.type.display_name()}"
            )
        self.pos += 1
        return token

    def find_function(self, name: str) -> Optional[FunctionNode]:
        """Return the already parsed function called *name*, if any."""
        return next((fn for fn in self.functions if fn.name == name), None)

    def register_native(self, name: str, function: NativeFunction) -> None:
        """Make *function* callable from Dae code as *name*."""
        self.natives[name] = function

    def find_native(self, name: str) -> Optional[NativeFunction]:
        """Return the native function registered as *name*, if any."""
        return self.natives.get(name)

    def _parse_return(self) -> ReturnNode:
        self.consume(TokenType.KEYWORD)
        self.consume(TokenType.ARROW)
        value_token = self._peek()
        if value_token.type is TokenType.BOOLEAN:
            text = self.consume(TokenType.BOOLEAN).text
            return ReturnNode(ReturnKind.BOOL, text == "true")
        if value_token.type is TokenType.NUMBER:
            text = self.consume(TokenType.NUMBER).text
            return ReturnNode(ReturnKind.NUMBER, _leading_int(text))
        if value_token.type is TokenType.STRING:
            return ReturnNode(ReturnKind.STRING, self.consume(TokenType.STRING).text)
        raise ParserError(f"Expected a literal after return, got {value_token.text}")

    def _parse_arrow_args(self) -> list[str]:
        args: list[str] = []
        while True:
            arg = self._peek()
            if arg.type not in _LITERAL_TYPES:
                break
            args.append(arg.text)
            self.consume(arg.type)
            if self._peek().type is TokenType.COMMA:
                self.consume(TokenType.COMMA)
            else:
                break
        return args

    def _check_call(self, function: FunctionNode, args: list[str]) -> None:
        expected = len(function.params)
        if len(args) != expected:
            raise ParserError(
                f"Function '{function.name}' expects {expected} arguments "
                f"but got {len(args)}."
            )
        arg_tokens = self.tokens[self.pos - len(args) : self.pos]
        for number, (param, token) in enumerate(zip(function.params, arg_tokens), 1):
            actual = type_from_token(token.type)
            if param.type != actual:
                raise ParserError(
                    f"Argument {number} to '{function.name}' must be of type "
                    f"{param.type}, got {actual}"
                )

    def parse_statement(self) -> Statement:
        """Parse one statement inside a function body."""
        token = self._peek()
        if token.text == "return":
            return self._parse_return()

        if token.type is not TokenType.IDENTIFIER:
            raise ParserError(f"Unknown statement: {token.text}")

        name = self.consume(TokenType.IDENTIFIER).text
        following = self._peek()

        if following.type is TokenType.LPAREN:
            self.consume(TokenType.LPAREN)
            self.consume(TokenType.RPAREN)
            return CallNode(name, None)

        if following.type is TokenType.ARROW:
            self.consume(TokenType.ARROW)
            args = self._parse_arrow_args()
            function = self.find_function(name)
            if function is not None:
                self._check_call(function, args)
                return CallNode(name, args)
            if self.find_native(name) is not None:
                return CallNode(name, args)
            raise ParserError(
                f"Function '{name}' is not declared and is not a native function."
            )

        raise ParserError(f"Unexpected token after identifier: {following.text}")

    def parse_function(self) -> FunctionNode:
        """Parse a ``work name(params): type { ... }`` definition."""
        self.consume(TokenType.KEYWORD)
        name = self.consume(TokenType.IDENTIFIER).text
        self.consume(TokenType.LPAREN)

        params: list[FunctionParam] = []
        while self._peek().type is not TokenType.RPAREN:
            param_type = self.consume(TokenType.TYPE).text
            self.consume(TokenType.COLON)
            param_name = self.consume(TokenType.IDENTIFIER).text
            params.append(FunctionParam(param_name, param_type))
            if self._peek().type is TokenType.COMMA:
                self.consume(TokenType.COMMA)
        self.consume(TokenType.RPAREN)

        return_type = None
        if self._peek().type is TokenType.COLON:
            self.consume(TokenType.COLON)
            return_type = self.consume(TokenType.TYPE).text

        self.consume(TokenType.LBRACE)
        body: list[Statement] = []
        while self._peek().type is not TokenType.RBRACE:
            body.append(self.parse_statement())
        self.consume(TokenType.RBRACE)

        return FunctionNode(name, return_type, body, params)

    def parse_program(self) -> list[FunctionNode]:
        """Register the built-ins and parse every function up to EOF."""
        self.register_native("print", native_print)
        while True:
            self.functions.append(self.parse_function())
            if self._peek().type is TokenType.EOF:
                break
        return self.functions


def parse(tokens: Sequence[Token]) -> Parser:
    """Parse a whole program and return the parser holding its results."""
    parser = Parser(tokens)
    parser.parse_program()
    return parser