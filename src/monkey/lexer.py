"""
Monkey language lexer.

Scans one line of source into tokens, one token per ``next_token()`` call.
Unrecognised characters come back as ILLEGAL tokens; nothing is raised.
"""

from typing import Iterator, List, Optional

from .tokens import Token, TokenKind, lookup_ident

WHITESPACE = " \t\n\r"

SINGLE_CHAR_TOKENS = {
    "=": TokenKind.ASSIGN,
    "!": TokenKind.BANG,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "/": TokenKind.SLASH,
    "*": TokenKind.ASTERISK,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}

# (first, second) -> kind; checked before the single-char table
TWO_CHAR_TOKENS = {
    ("=", "="): TokenKind.EQ,
    ("!", "="): TokenKind.NOT_EQ,
}


def is_letter(ch: Optional[str]) -> bool:
    return ch is not None and ("a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_")


def is_digit(ch: Optional[str]) -> bool:
    return ch is not None and "0" <= ch <= "9"


class Lexer:
    def __init__(self, source: str):
        self.input = source
        self.length = len(source)
        self.position = 0
        self.read_position = 0
        self.ch: Optional[str] = None
        self._read_char()

    def next_token(self) -> Token:
        self._skip_whitespace()

        if self.ch is None:
            return Token(TokenKind.EOF, "")

        if is_letter(self.ch):
            text = self._read_identifier()
            return Token(lookup_ident(text), text)

        if is_digit(self.ch):
            return Token(TokenKind.INT, self._read_number())

        pair = TWO_CHAR_TOKENS.get((self.ch, self._peek_char()))
        if pair is not None:
            text = self.ch + self._peek_char()
            self._read_char()
            self._read_char()
            return Token(pair, text)

        kind = SINGLE_CHAR_TOKENS.get(self.ch, TokenKind.ILLEGAL)
        token = Token(kind, self.ch)
        self._read_char()
        return token

    def scan(self) -> List[Token]:
        """Drain the lexer; the returned list always ends with EOF."""
        tokens: List[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind is TokenKind.EOF:
                return tokens

    def __iter__(self) -> Iterator[Token]:
        token = self.next_token()
        while token.kind is not TokenKind.EOF:
            yield token
            token = self.next_token()

    def _read_char(self) -> None:
        # EOF is absorbing: once past the end the cursor stays put
        if self.ch is None and self.read_position > 0:
            return
        if self.read_position >= self.length:
            self.ch = None
        else:
            self.ch = self.input[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def _peek_char(self) -> Optional[str]:
        if self.read_position >= self.length:
            return None
        return self.input[self.read_position]

    def _skip_whitespace(self) -> None:
        while self.ch is not None and self.ch in WHITESPACE:
            self._read_char()

    def _read_identifier(self) -> str:
        start = self.position
        while is_letter(self.ch) or is_digit(self.ch):
            self._read_char()
        return self.input[start : self.position]

    def _read_number(self) -> str:
        start = self.position
        while is_digit(self.ch):
            self._read_char()
        return self.input[start : self.position]


def tokenize(source: str) -> List[Token]:
    return Lexer(source).scan()


__all__ = ["Lexer", "tokenize", "is_letter", "is_digit"]
