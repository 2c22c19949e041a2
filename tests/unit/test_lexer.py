import math

import pytest

from json_errors import NumberFormatError, UnterminatedString
from lexer import Token, TokenKind, lex


def kinds(tokens):
    return [t.kind for t in tokens]


def test_structural_characters_map_one_to_one():
    assert kinds(lex("{}[],:")) == [
        TokenKind.LEFT_BRACE,
        TokenKind.RIGHT_BRACE,
        TokenKind.LEFT_BRACKET,
        TokenKind.RIGHT_BRACKET,
        TokenKind.COMMA,
        TokenKind.COLON,
    ]


def test_whitespace_produces_no_tokens():
    assert lex(" \t\r\n ") == []
    assert lex("") == []


def test_offsets_point_at_token_start():
    tokens = lex('{ "ab" : 12 }')
    assert [t.offset for t in tokens] == [0, 2, 7, 9, 12]


def test_number_payload_is_float():
    (tok,) = lex("12")
    assert tok == Token(TokenKind.NUMBER, 12.0, 0)
    assert isinstance(tok.value, float)


@pytest.mark.parametrize("text, expected", [
    ("0", 0.0),
    ("-3", -3.0),
    ("+3", 3.0),
    ("2.5", 2.5),
    (".5", 0.5),
    ("5.", 5.0),
    ("1e3", 1000.0),
    ("2.5E-1", 0.25),
    ("inf", math.inf),
    ("Infinity", math.inf),
    ("-INF", -math.inf),
    ("+infinity", math.inf),
])
def test_number_forms(text, expected):
    assert lex(text)[0].value == expected


@pytest.mark.parametrize("text", ["nan", "NaN", "-NAN"])
def test_nan_forms(text):
    (tok,) = lex(text)
    assert tok.kind is TokenKind.NUMBER
    assert math.isnan(tok.value)


def test_bareword_runs_until_delimiter():
    tokens = lex("[1,2]")
    assert [t.value for t in tokens if t.kind is TokenKind.NUMBER] == [1.0, 2.0]
    assert kinds(lex("1 2")) == [TokenKind.NUMBER, TokenKind.NUMBER]


@pytest.mark.parametrize("word", ["true", "false", "null", "1.2.3", "1e", "-", "1_000", "0x10", "abc",
                                  "infinit", "nana", "infinityy", "in"])
def test_non_numeric_bareword_rejected(word):
    with pytest.raises(NumberFormatError) as ei:
        lex(f"[{word}]")
    assert ei.value.text == word
    assert ei.value.offset == 1


def test_string_payload_is_verbatim():
    (tok,) = lex(r'"a\"b\\c\n"')
    assert tok.kind is TokenKind.STRING
    assert tok.value == r'a\"b\\c\n'


def test_empty_string():
    assert lex('""') == [Token(TokenKind.STRING, "", 0)]


def test_string_may_contain_delimiters():
    (tok,) = lex('"{a: [1, 2]}"')
    assert tok.value == "{a: [1, 2]}"


def test_scan_resumes_right_after_string():
    tokens = lex('"a":1')
    assert kinds(tokens) == [TokenKind.STRING, TokenKind.COLON, TokenKind.NUMBER]


@pytest.mark.parametrize("text", ['"abc', '"abc\\"', '"\\', '["x'])
def test_unterminated_string(text):
    with pytest.raises(UnterminatedString) as ei:
        lex(text)
    assert ei.value.offset == text.index('"')
    assert "unterminated string" in str(ei.value)


def test_first_lexing_error_wins():
    with pytest.raises(NumberFormatError):
        lex('[nope, "unterminated')
