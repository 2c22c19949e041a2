# lexer.py
# Character-level scanner: JSON source text -> flat list of tokens.
#
# =============================================================================
#  LEXER IMPLEMENTATION: INDEX-BASED SINGLE PASS
# =============================================================================
#
# The scan walks the source once, left to right, by index. Structural
# characters map one-to-one onto tokens. Strings and barewords are handed to
# a scanning helper that returns the token plus the position of the next
# unread character, and the main loop jumps straight there.
#
# String payloads are kept verbatim: a backslash only skips the character that
# follows it, nothing is decoded. Barewords are numbers or nothing; anything
# that is not a float literal (including true/false/null) is rejected.
# =============================================================================

import logging
import re
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple, Union

from json_errors import NumberFormatError, UnterminatedString

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CHARACTER CLASSES
# ---------------------------------------------------------------------------
WHITESPACE = frozenset(" \t\n\r")
DELIMITERS = frozenset(",{}[]:") | WHITESPACE

# Float syntax accepted for barewords: sign, digits with an optional fraction
# on either side of the point, optional exponent, or inf/infinity/nan.
_FLOAT_RE = re.compile(
    r"[+-]?(?:"
    r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?|nan"
    r")",
    re.IGNORECASE | re.ASCII,
)


# ---------------------------------------------------------------------------
# TOKEN RECORD
# ---------------------------------------------------------------------------
class TokenKind(Enum):
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    COMMA = ","
    COLON = ":"
    NUMBER = "number"
    STRING = "string"


_STRUCTURAL = {kind.value: kind for kind in TokenKind if len(kind.value) == 1}


class Token(NamedTuple):
    """
    Immutable token record: (kind, value, offset).

    `value` is None for structural tokens, a float for NUMBER and the raw
    literal text for STRING. `offset` is where the token starts in the source.
    """
    kind: TokenKind
    value: Optional[Union[float, str]]
    offset: int

    def describe(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return f"number {self.value!r}"
        if self.kind is TokenKind.STRING:
            return f'string "{self.value}"'
        return f"'{self.kind.value}'"


# ---------------------------------------------------------------------------
# SCANNERS
# ---------------------------------------------------------------------------
def _scan_string(text: str, start: int) -> Tuple[Token, int]:
    """Scan a string literal whose opening quote sits at `start`."""
    pos = start + 1
    end = len(text)
    while pos < end and text[pos] != '"':
        if text[pos] == "\\":
            pos += 1
        pos += 1
    if pos >= end:
        raise UnterminatedString(start)
    return Token(TokenKind.STRING, text[start + 1:pos], start), pos + 1


def _scan_bareword(text: str, start: int) -> Tuple[Token, int]:
    """Scan the longest run of non-delimiters and read it as a float."""
    pos = start
    end = len(text)
    while pos < end and text[pos] not in DELIMITERS:
        pos += 1
    word = text[start:pos]
    if not _FLOAT_RE.fullmatch(word):
        raise NumberFormatError(word, start)
    return Token(TokenKind.NUMBER, float(word), start), pos


def lex(text: str) -> List[Token]:
    """
    Turn JSON source into a list of tokens.

    Raises UnterminatedString or NumberFormatError on the first malformed
    literal; nothing after it is scanned.
    """
    tokens: List[Token] = []
    pos = 0
    end = len(text)
    while pos < end:
        ch = text[pos]
        if ch in WHITESPACE:
            pos += 1
        elif ch in _STRUCTURAL:
            tokens.append(Token(_STRUCTURAL[ch], None, pos))
            pos += 1
        elif ch == '"':
            token, pos = _scan_string(text, pos)
            tokens.append(token)
        else:
            token, pos = _scan_bareword(text, pos)
            tokens.append(token)

    log.debug("lexed %d characters into %d tokens", end, len(tokens))
    return tokens


__all__ = ["Token", "TokenKind", "lex", "DELIMITERS", "WHITESPACE"]
