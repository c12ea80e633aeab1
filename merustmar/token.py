"""Token kinds and keyword lookup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Kinds of tokens produced by the lexer."""

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    IDENT = "IDENT"
    INT = "INT"

    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"

    LT = "<"
    GT = ">"

    EQ = "=="
    NOT_EQ = "!="

    COMMA = ","
    SEMICOLON = "။"

    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"


@dataclass(frozen=True)
class Token:
    """A token: its kind and the text it was read from."""

    token_type: TokenType
    literal: str


KEYWORDS: dict[str, TokenType] = {
    "ထား": TokenType.LET,
    "ဖန်ရှင်": TokenType.FUNCTION,
    "တကယ်လို့": TokenType.IF,
    "မဟုတ်ရင်": TokenType.ELSE,
    "ဒါယူ": TokenType.RETURN,
    "မှန်": TokenType.TRUE,
    "မှား": TokenType.FALSE,
}


def lookup_ident(ident: str) -> TokenType:
    """Return the keyword type for ``ident``, or IDENT if it is not a keyword."""
    return KEYWORDS.get(ident, TokenType.IDENT)