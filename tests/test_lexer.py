import pytest

from daelang.errors import DaeError, LexerError
from daelang.lexer import Token, TokenType, tokenize


def _types(source):
    return [token.type for token in tokenize(source)]


def test_empty_source_yields_only_eof():
    assert tokenize("") == [Token(TokenType.EOF, "")]


def test_whitespace_only_yields_only_eof():
    assert tokenize(" \t\n\r\x0b\x0c ") == [Token(TokenType.EOF, "")]


def test_last_token_is_always_eof():
    tokens = tokenize("work main() { }")
    assert tokens[-1] == Token(TokenType.EOF, "")
    assert sum(1 for t in tokens if t.type is TokenType.EOF) == 1


def test_punctuation_tokens():
    tokens = tokenize("(){}:,->")
    assert [(t.type, t.text) for t in tokens] == [
        (TokenType.LPAREN, "("),
        (TokenType.RPAREN, ")"),
        (TokenType.LBRACE, "{"),
        (TokenType.RBRACE, "}"),
        (TokenType.COLON, ":"),
        (TokenType.COMMA, ","),
        (TokenType.ARROW, "->"),
        (TokenType.EOF, ""),
    ]


@pytest.mark.parametrize(
    "word, expected",
    [
        ("work", TokenType.KEYWORD),
        ("return", TokenType.KEYWORD),
        ("true", TokenType.BOOLEAN),
        ("false", TokenType.BOOLEAN),
        ("bool", TokenType.TYPE),
        ("int", TokenType.TYPE),
        ("string", TokenType.TYPE),
        ("main", TokenType.IDENTIFIER),
        ("hello2", TokenType.IDENTIFIER),
    ],
)
def test_word_classification(word, expected):
    assert tokenize(word) == [Token(expected, word), Token(TokenType.EOF, "")]


def test_string_literal_drops_quotes_and_keeps_spaces():
    tokens = tokenize('"Hello,  world!"')
    assert tokens[0] == Token(TokenType.STRING, "Hello,  world!")


def test_string_literal_keeps_backslashes_raw():
    tokens = tokenize('"a\\nb"')
    assert tokens[0].text == "a\\nb"


def test_number_then_word_are_split():
    tokens = tokenize("123abc")
    assert tokens[:2] == [
        Token(TokenType.NUMBER, "123"),
        Token(TokenType.IDENTIFIER, "abc"),
    ]


def test_whole_program():
    source = 'work main(string: name, int: n): bool {\n  print -> "hi", 3\n  return -> true\n}'
    assert _types(source) == [
        TokenType.KEYWORD,
        TokenType.IDENTIFIER,
        TokenType.LPAREN,
        TokenType.TYPE,
        TokenType.COLON,
        TokenType.IDENTIFIER,
        TokenType.COMMA,
        TokenType.TYPE,
        TokenType.COLON,
        TokenType.IDENTIFIER,
        TokenType.RPAREN,
        TokenType.COLON,
        TokenType.TYPE,
        TokenType.LBRACE,
        TokenType.IDENTIFIER,
        TokenType.ARROW,
        TokenType.STRING,
        TokenType.COMMA,
        TokenType.NUMBER,
        TokenType.KEYWORD,
        TokenType.ARROW,
        TokenType.BOOLEAN,
        TokenType.RBRACE,
        TokenType.EOF,
    ]


def test_unclosed_string_raises():
    with pytest.raises(LexerError, match="Unclosed string"):
        tokenize('print -> "oops')


@pytest.mark.parametrize("source", ["@", "a - b", "x;"])
def test_unexpected_character_raises(source):
    with pytest.raises(LexerError, match="Unexpected character"):
        tokenize(source)


def test_lexer_error_is_dae_error():
    with pytest.raises(DaeError):
        tokenize("#")


@pytest.mark.parametrize(
    "kind, name",
    [
        (TokenType.LPAREN, "Left Parenthesis"),
        (TokenType.EOF, "End of File"),
        (TokenType.KEYWORD, "Keyword"),
        (TokenType.NUMBER, "Number"),
    ],
)
def test_display_names(kind, name):
    assert kind.display_name() == name