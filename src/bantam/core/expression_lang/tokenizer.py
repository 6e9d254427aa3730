"""
Tokenizer for the Bantam expression language.

Converts an expression string into a lazy sequence of tokens. Only the
thirteen single-character punctuators and runs of ASCII letters are
significant; every other character is skipped without error.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Iterator
from enum import StrEnum

logger = logging.getLogger(__name__)


class Punctuator(StrEnum):
    """Single-character operator and structural symbols."""

    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    COMMA = ","
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"
    CARET = "^"
    TILDE = "~"
    BANG = "!"
    QUESTION = "?"
    COLON = ":"


class TokenKind(StrEnum):
    """Token types for the expression language."""

    PUNCTUATOR = "punctuator"
    NAME = "name"


_PUNCTUATORS: dict[str, Punctuator] = {p.value: p for p in Punctuator}

_ZERO_WIDTH_JOINER = "\u200d"
_MARK_CATEGORIES = frozenset({"Mn", "Mc", "Me"})


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value")

    def __init__(self, kind: TokenKind, value: str) -> None:
        self.kind = kind
        self.value = value

    @classmethod
    def from_punctuator(cls, punctuator: Punctuator) -> Token:
        return cls(TokenKind.PUNCTUATOR, punctuator.value)

    @classmethod
    def from_name(cls, text: str) -> Token:
        return cls(TokenKind.NAME, text)

    @property
    def punct(self) -> Punctuator | None:
        """The punctuator this token carries, or None for a name."""
        if self.kind == TokenKind.PUNCTUATOR:
            return Punctuator(self.value)
        return None

    def __setattr__(self, attr: str, value: object) -> None:
        if hasattr(self, attr):
            raise AttributeError(f"Token is immutable; cannot reassign {attr!r}")
        super().__setattr__(attr, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r})"


def is_letter(c: str) -> bool:
    """True for a single ASCII letter. Digits, underscores and non-ASCII letters are not letters."""
    return len(c) == 1 and (("A" <= c <= "Z") or ("a" <= c <= "z"))


def _extends_cluster(c: str) -> bool:
    """True for code points that attach to the preceding character (combining marks, ZWJ)."""
    return c == _ZERO_WIDTH_JOINER or unicodedata.category(c) in _MARK_CATEGORIES


def _cluster_end(text: str, pos: int) -> int:
    """Index just past the user-perceived character starting at ``pos``.

    A base code point plus any combining marks that follow it form one
    character, so ``"e\\u0301"`` is a single character that is neither a
    letter nor a punctuator.
    """
    end = pos + 1
    while end < len(text) and _extends_cluster(text[end]):
        end += 1
    return end


class Lexer:
    """
    Cursor over a source string that hands out one token at a time.

    ``next_token()`` returns ``None`` once the input is exhausted and keeps
    returning ``None`` on every later call. The lexer is also an iterator,
    so ``list(Lexer(text))`` collects the whole stream.

    A lexer cannot be rewound; scan again with a new instance.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def next_token(self) -> Token | None:
        text = self.text
        n = len(text)

        while self.pos < n:
            start = self.pos
            self.pos = _cluster_end(text, start)
            c = text[start : self.pos]

            punct = _PUNCTUATORS.get(c)
            if punct is not None:
                return Token.from_punctuator(punct)

            if is_letter(c):
                while self.pos < n:
                    end = _cluster_end(text, self.pos)
                    if not is_letter(text[self.pos : end]):
                        break
                    self.pos = end
                return Token.from_name(text[start : self.pos])

            logger.debug("Skipping character %r at %d", c, start)

        return None

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens."""
    tokens = list(Lexer(source))
    logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))
    return tokens
