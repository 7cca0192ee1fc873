"""Well-Known Text tokenizer.

The whole input is scanned once, up front, into an immutable token tuple.
Characters that belong to no token class are kept as UNKNOWN tokens so
that grammar errors can quote them verbatim instead of skipping them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

from wkgeo.exceptions import UnexpectedTokenError


class TokenKind(Enum):
    WORD = auto()  # [A-Za-z]+ : kind keywords, Z/M/ZM, EMPTY
    NUMBER = auto()  # signed decimal with optional exponent
    PUNCTUATION = auto()  # ( ) ,
    UNKNOWN = auto()  # any other single character


@dataclass(frozen=True, slots=True)
class Token:
    """A single WKT token and its character offset in the source."""

    kind: TokenKind
    text: str
    position: int


_TOKEN_PATTERN = re.compile(
    r"""
    (?P<WORD>[A-Za-z]+)
    | (?P<NUMBER>[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)
    | (?P<PUNCTUATION>[(),])
    | (?P<SPACE>\s+)
    | (?P<UNKNOWN>.)
    """,
    re.VERBOSE | re.DOTALL,
)

OPENER = "("
CLOSER = ")"
COMMA = ","


def tokenize(text: str) -> tuple[Token, ...]:
    """Split WKT into tokens in a single forward pass."""
    tokens: list[Token] = []
    for match in _TOKEN_PATTERN.finditer(text):
        group = match.lastgroup
        if group == "SPACE" or group is None:
            continue
        tokens.append(Token(TokenKind[group], match.group(), match.start()))
    return tuple(tokens)


class WKTTokenStream:
    """Cursor over a token tuple, with one token of lookahead.

    The cursor is an explicit index; consuming primitives advance it by one,
    peeking primitives never move it.
    """

    __slots__ = ("_index", "_tokens")

    def __init__(self, tokens: tuple[Token, ...]) -> None:
        self._tokens = tokens
        self._index = 0

    @classmethod
    def from_text(cls, text: str) -> WKTTokenStream:
        """Tokenize text and return a stream positioned at its first token."""
        return cls(tokenize(text))

    @property
    def index(self) -> int:
        """Return the index of the next unconsumed token."""
        return self._index

    def peek(self) -> Token | None:
        """Return the next token without consuming it, or None at the end."""
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def _next(self) -> Token | None:
        token = self.peek()
        if token is not None:
            self._index += 1
        return token

    def _unexpected(self, expected: str, token: Token | None) -> UnexpectedTokenError:
        if token is None:
            return UnexpectedTokenError(expected, None)
        return UnexpectedTokenError(expected, token.text, position=token.position)

    def at_end(self) -> bool:
        """Return whether every token has been consumed."""
        return self._index >= len(self._tokens)

    def expect_opener(self) -> None:
        """Consume an opening parenthesis."""
        token = self._next()
        if token is None or token.text != OPENER:
            raise self._unexpected(f"'{OPENER}'", token)

    def expect_closer(self) -> None:
        """Consume a closing parenthesis."""
        token = self._next()
        if token is None or token.text != CLOSER:
            raise self._unexpected(f"'{CLOSER}'", token)

    def next_word(self) -> str:
        """Consume a word and return its text."""
        token = self._next()
        if token is None or token.kind is not TokenKind.WORD:
            raise self._unexpected("word", token)
        return token.text

    def peek_word(self) -> str | None:
        """Return the next token's text if it is a word, without consuming it."""
        token = self.peek()
        if token is None or token.kind is not TokenKind.WORD:
            return None
        return token.text

    def peek_is_opener_or_word(self) -> bool:
        """Return True if the next token is '(', False if it is a word.

        Raises:
            UnexpectedTokenError: If the next token is neither, or there is none.
        """
        token = self.peek()
        if token is not None:
            if token.text == OPENER:
                return True
            if token.kind is TokenKind.WORD:
                return False
        raise self._unexpected(f"'{OPENER}' or word", token)

    def next_number(self) -> float:
        """Consume a number and return its value."""
        token = self._next()
        if token is None or token.kind is not TokenKind.NUMBER:
            raise self._unexpected("number", token)
        return float(token.text)

    def next_closer_or_comma(self) -> str:
        """Consume and return ')' or ','."""
        token = self._next()
        if token is None or token.text not in (CLOSER, COMMA):
            raise self._unexpected(f"'{CLOSER}' or '{COMMA}'", token)
        return token.text
