# json_parser.py
# Hand-rolled JSON lexer and parser producing a typed AST
#
# =============================================================================
#  PARSER IMPLEMENTATION: RECURSIVE DESCENT OVER A TOKEN LIST
# =============================================================================
#
# The lexer (lexer.py) turns the whole source into a token list first. The
# parser then walks that list with a single index, one method per grammar
# rule:
#
#   document   := object | array
#   expression := object | array | number | string
#   object     := '{' '}' | '{' member (',' member)* '}'
#   member     := string ':' expression
#   array      := '[' ']' | '[' expression (',' expression)* ']'
#
# Every token access goes through _peek(), which raises UnexpectedEndOfInput
# once the list is exhausted. The first malformed construct raises and the
# error propagates to the caller unchanged; no partial tree is returned.
# Tokens after the root value are left unread.
#
# Nesting is unbounded by default (DEPTH_LIMIT_DEFAULT). Input nested deeper
# than the interpreter can recurse fails with DepthLimitExceeded, never with
# a bare RecursionError.
# =============================================================================

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Tuple

from json_ast import JsonArray, JsonNumber, JsonObject, JsonString, JsonValue, node_kind
from json_errors import (
    DepthLimitExceeded,
    JsonError,
    NumberFormatError,
    UnexpectedEndOfInput,
    UnexpectedToken,
    UnterminatedString,
)
from lexer import Token, TokenKind, lex

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
DEPTH_LIMIT_DEFAULT: Optional[int] = None   # No cap beyond the recursion limit


# ---------------------------------------------------------------------------
# PARSER
# ---------------------------------------------------------------------------
class Parser:
    """
    Recursive-descent parser over an immutable token list.

    `current` is the only mutable state: the index of the next unread token.
    Each parse_* method consumes exactly the tokens of its construct.
    """

    def __init__(self, tokens: Sequence[Token], max_depth: Optional[int] = DEPTH_LIMIT_DEFAULT):
        self.tokens = tuple(tokens)
        self.current = 0
        self.max_depth = max_depth
        self._depth = 0

    # -- token access -------------------------------------------------------
    def _peek(self, expected: str) -> Token:
        if self.current >= len(self.tokens):
            raise UnexpectedEndOfInput(expected)
        return self.tokens[self.current]

    def _at(self, kind: TokenKind) -> bool:
        return self.current < len(self.tokens) and self.tokens[self.current].kind is kind

    def _expect(self, kind: TokenKind, expected: str) -> Token:
        """Consume the next token, which must be of `kind`."""
        token = self._peek(expected)
        if token.kind is not kind:
            raise UnexpectedToken(expected, token.describe(), token.offset)
        self.current += 1
        return token

    @contextmanager
    def _nested(self, opening: Token) -> Iterator[None]:
        """Track one level of array/object nesting for the duration of the block."""
        self._depth += 1
        try:
            if self.max_depth is not None and self._depth > self.max_depth:
                raise DepthLimitExceeded(self.max_depth, opening.offset)
            yield
        finally:
            self._depth -= 1

    # -- grammar rules ------------------------------------------------------
    def parse(self) -> JsonValue:
        """
        Parse a whole document.

        The root must be an object or an array; bare scalars are only valid
        nested inside one. Parsing stops after the root value and any
        remaining tokens are ignored.
        """
        token = self._peek("expected '{' or '['")
        if token.kind not in (TokenKind.LEFT_BRACE, TokenKind.LEFT_BRACKET):
            raise UnexpectedToken("document must start with object or array",
                                  token.describe(), token.offset)
        try:
            if token.kind is TokenKind.LEFT_BRACE:
                return self.parse_object()
            return self.parse_array()
        except RecursionError:
            offset = self.tokens[self.current].offset if self.current < len(self.tokens) else None
            raise DepthLimitExceeded(self.max_depth, offset) from None

    def parse_expression(self) -> JsonValue:
        token = self._peek("expected a value")
        if token.kind is TokenKind.LEFT_BRACE:
            return self.parse_object()
        if token.kind is TokenKind.LEFT_BRACKET:
            return self.parse_array()
        if token.kind is TokenKind.NUMBER:
            self.current += 1
            return JsonNumber(token.value)
        if token.kind is TokenKind.STRING:
            self.current += 1
            return JsonString(token.value)
        raise UnexpectedToken("Unexpected token at start of expression",
                              token.describe(), token.offset)

    def parse_array(self) -> JsonArray:
        opening = self._expect(TokenKind.LEFT_BRACKET, "Expected left bracket")
        with self._nested(opening):
            elements: List[JsonValue] = []

            if self._at(TokenKind.RIGHT_BRACKET):
                self.current += 1
                return JsonArray(())

            while True:
                elements.append(self.parse_expression())
                if not self._at(TokenKind.COMMA):
                    break
                self.current += 1

            self._expect(TokenKind.RIGHT_BRACKET, "Expected right bracket")
            return JsonArray(tuple(elements))

    def parse_object(self) -> JsonObject:
        opening = self._expect(TokenKind.LEFT_BRACE, "Expected left brace")
        with self._nested(opening):
            members: List[Tuple[str, JsonValue]] = []

            if self._at(TokenKind.RIGHT_BRACE):
                self.current += 1
                return JsonObject(())

            while True:
                key = self._expect(TokenKind.STRING, "Expected string literal")
                self._expect(TokenKind.COLON, "Expected colon")
                members.append((key.value, self.parse_expression()))
                if not self._at(TokenKind.COMMA):
                    break
                self.current += 1

            self._expect(TokenKind.RIGHT_BRACE, "Expected right brace")
            return JsonObject(tuple(members))


# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def parse_json(text: str, *, max_depth: Optional[int] = DEPTH_LIMIT_DEFAULT) -> JsonValue:
    """
    Parse JSON text into an AST.

    Raises a JsonError subclass describing the first failure found in
    left-to-right order. Pass max_depth to cap array/object nesting.
    """
    tokens = lex(text)
    root = Parser(tokens, max_depth=max_depth).parse()
    log.debug("parsed %d tokens into a root %s", len(tokens), node_kind(root))
    return root


parse = parse_json

__all__ = [
    "DEPTH_LIMIT_DEFAULT",
    "Parser",
    "parse",
    "parse_json",
    "lex",
    "Token",
    "TokenKind",
    "JsonArray",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "JsonError",
    "UnexpectedToken",
    "NumberFormatError",
    "UnterminatedString",
    "UnexpectedEndOfInput",
    "DepthLimitExceeded",
]
