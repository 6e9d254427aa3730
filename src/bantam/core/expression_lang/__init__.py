"""
Bantam expression language front end.

Tokenizer and precedence table, plus the protocol a parser implements.

Usage:
    from bantam.core.expression_lang import Lexer

    lexer = Lexer("b + a")
    lexer.next_token()  # Token(name, 'b')
"""

from bantam.core.expression_lang.parser import ExpressionParser
from bantam.core.expression_lang.precedence import (
    Associativity,
    OperatorPosition,
    OperatorRule,
    Precedence,
    binding_power,
    lookup,
)
from bantam.core.expression_lang.tokenizer import (
    Lexer,
    Punctuator,
    Token,
    TokenKind,
    is_letter,
    tokenize,
)

__all__ = [
    "Associativity",
    "ExpressionParser",
    "Lexer",
    "OperatorPosition",
    "OperatorRule",
    "Precedence",
    "Punctuator",
    "Token",
    "TokenKind",
    "binding_power",
    "is_letter",
    "lookup",
    "tokenize",
]
