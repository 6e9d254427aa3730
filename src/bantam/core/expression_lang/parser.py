"""
Parser seam for the Bantam expression language.

No parser ships with this package. An implementation consumes the token
stream from ``Lexer`` and builds ``Expr`` trees, grouping operators by the
levels in ``bantam.core.expression_lang.precedence`` and reporting syntax
errors as ``ParseError``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from bantam.core.errors import ParseError
from bantam.core.expression_lang.tokenizer import Token

if TYPE_CHECKING:
    from bantam.core.ir.expressions import Expr

__all__ = ["ExpressionParser", "ParseError"]


@runtime_checkable
class ExpressionParser(Protocol):
    """Builds one expression tree from a token stream."""

    def parse(self, tokens: Iterable[Token]) -> Expr:
        """Parse ``tokens`` into an expression, raising ParseError on invalid input."""
        ...
