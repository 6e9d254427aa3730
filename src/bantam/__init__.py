"""
Bantam - a small expression language front end.

A character-level tokenizer, immutable expression trees with a canonical
fully parenthesized rendering, and the operator precedence table a parser
must follow.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import BantamError, ConfigError, ExpressionLoadError, ParseError
from .core.expression_lang import Lexer, Precedence, Punctuator, Token, TokenKind, tokenize

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "BantamError",
    "ConfigError",
    "ExpressionLoadError",
    "ParseError",
    "Lexer",
    "Precedence",
    "Punctuator",
    "Token",
    "TokenKind",
    "tokenize",
]
