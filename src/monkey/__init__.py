from .tokens import KEYWORDS, Token, TokenKind, lookup_ident
from .lexer import Lexer, tokenize

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "lookup_ident",
    "tokenize",
]
