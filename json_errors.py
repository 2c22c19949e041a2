# json_errors.py
# Error taxonomy shared by the lexer and the parser.
#
# Every error is a SyntaxError so callers that catch the builtin keep working.
# Offsets are absolute character positions in the source text.

from typing import Optional


class JsonError(SyntaxError):
    """Base class for every failure raised while lexing or parsing."""

    def __init__(self, message: str, offset: Optional[int] = None):
        if offset is not None:
            message = f"{message} at offset {offset}"
        super().__init__(message)
        self.offset = offset


class UnexpectedToken(JsonError):
    """
    A token of the wrong kind sits in a required position.

    Covers missing braces, brackets, colons and keys, bare top-level
    scalars and data left over after the root value.
    """

    def __init__(self, expected: str, found: str, offset: Optional[int] = None):
        super().__init__(f"{expected} - got {found}", offset)
        self.expected = expected
        self.found = found


class NumberFormatError(JsonError):
    def __init__(self, text: str, offset: Optional[int] = None):
        super().__init__(f"invalid number literal '{text}'", offset)
        self.text = text


class UnterminatedString(JsonError):
    def __init__(self, offset: Optional[int] = None):
        super().__init__("unterminated string starting", offset)


class UnexpectedEndOfInput(JsonError):
    def __init__(self, expected: str):
        super().__init__(f"unexpected end of input - {expected}")
        self.expected = expected


class DepthLimitExceeded(JsonError):
    """
    Nesting went past `max_depth`, or past the interpreter's recursion
    limit when no cap was set (`max_depth` is then None).
    """

    def __init__(self, max_depth: Optional[int], offset: Optional[int] = None):
        if max_depth is None:
            message = "nesting exceeds the recursion limit"
        else:
            message = f"depth limit of {max_depth} exceeded"
        super().__init__(message, offset)
        self.max_depth = max_depth
