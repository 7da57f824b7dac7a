"""Token kinds, the token value type and the keyword table for Monkey."""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class TokenKind(Enum):
    ILLEGAL = auto()
    EOF = auto()

    # Identifiers / literals
    IDENT = auto()
    INT = auto()

    # Operators
    ASSIGN = auto()
    PLUS = auto()
    MINUS = auto()
    BANG = auto()
    ASTERISK = auto()
    SLASH = auto()
    LT = auto()
    GT = auto()
    EQ = auto()
    NOT_EQ = auto()

    # Delimiters
    COMMA = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Keywords
    FUNCTION = auto()
    LET = auto()
    TRUE = auto()
    FALSE = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()


KEYWORDS = MappingProxyType(
    {
        "fn": TokenKind.FUNCTION,
        "let": TokenKind.LET,
        "true": TokenKind.TRUE,
        "false": TokenKind.FALSE,
        "if": TokenKind.IF,
        "else": TokenKind.ELSE,
        "return": TokenKind.RETURN,
    }
)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    literal: str

    def __str__(self) -> str:
        return f"{self.kind.name}({self.literal!r})"


def lookup_ident(word: str) -> TokenKind:
    """Return the keyword kind for ``word``, or IDENT if it is not reserved."""
    return KEYWORDS.get(word, TokenKind.IDENT)


__all__ = ["Token", "TokenKind", "KEYWORDS", "lookup_ident"]
