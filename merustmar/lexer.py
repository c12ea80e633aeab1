"""Turns source text into tokens."""

from __future__ import annotations

from collections.abc import Iterator

from merustmar.token import Token, TokenType, lookup_ident

_SENTENCE_END = "။"

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    _SENTENCE_END: TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "-": TokenType.MINUS,
    "/": TokenType.SLASH,
    "*": TokenType.ASTERISK,
    ">": TokenType.GT,
    "<": TokenType.LT,
}

# Characters that may be followed by '=' to form a two-character operator.
_WITH_EQUALS: dict[str, tuple[TokenType, TokenType]] = {
    "=": (TokenType.ASSIGN, TokenType.EQ),
    "!": (TokenType.BANG, TokenType.NOT_EQ),
}


def is_letter(ch: str) -> bool:
    """Whether ``ch`` may appear in an identifier or keyword."""
    if ch == _SENTENCE_END:
        return False
    if ch.isascii():
        return ch.isalpha() or ch == "_"
    if "\u1000" <= ch <= "\u109f":
        return True
    return ch.isalpha() or ch == "_"


def is_digit(ch: str) -> bool:
    """Whether ``ch`` is an ASCII digit."""
    return ch.isascii() and ch.isdigit()


class Lexer:
    """Reads tokens one at a time from a source string."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0

    def _current(self) -> str | None:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return None

    def _peek(self) -> str | None:
        nxt = self._pos + 1
        if nxt < len(self._source):
            return self._source[nxt]
        return None

    def _skip_whitespace(self) -> None:
        while (ch := self._current()) is not None and ch.isspace():
            self._pos += 1

    def _read_while(self, predicate) -> str:
        start = self._pos
        while (ch := self._current()) is not None and predicate(ch):
            self._pos += 1
        return self._source[start:self._pos]

    def next_token(self) -> Token:
        """Return the next token; EOF is returned once the input is used up."""
        self._skip_whitespace()
        ch = self._current()

        if ch is None:
            return Token(TokenType.EOF, "")

        if ch in _WITH_EQUALS:
            single, double = _WITH_EQUALS[ch]
            if self._peek() == "=":
                self._pos += 2
                return Token(double, ch + "=")
            self._pos += 1
            return Token(single, ch)

        if ch in _SINGLE_CHAR_TOKENS:
            self._pos += 1
            return Token(_SINGLE_CHAR_TOKENS[ch], ch)

        if is_letter(ch):
            literal = self._read_while(is_letter)
            return Token(lookup_ident(literal), literal)

        if is_digit(ch):
            return Token(TokenType.INT, self._read_while(is_digit))

        self._pos += 1
        return Token(TokenType.ILLEGAL, ch)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the EOF token."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.token_type is TokenType.EOF:
                return