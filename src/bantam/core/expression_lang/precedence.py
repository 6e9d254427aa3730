"""
Operator precedence table for the Bantam expression language.

Binding levels (low to high):
    ASSIGNMENT   a = b            right-associative
    CONDITIONAL  a ? b : c        right-associative
    SUM          a + b, a - b     left-associative
    PRODUCT      a * b, a / b     left-associative
    EXPONENT     a ^ b            right-associative
    PREFIX       +a -a ~a !a
    POSTFIX      a!
    CALL         f(a, b)

A precedence-climbing parser looks up the punctuator it is holding in the
table for its grammatical position: PREFIX where an operand is expected,
INFIX or POSTFIX after a completed operand. That position is what tells
``-a`` from ``a - b`` and ``!a`` from ``a!``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum

from bantam.core.expression_lang.tokenizer import Punctuator


class Precedence(IntEnum):
    """Binding strength; higher binds tighter."""

    ASSIGNMENT = 1
    CONDITIONAL = 2
    SUM = 3
    PRODUCT = 4
    EXPONENT = 5
    PREFIX = 6
    POSTFIX = 7
    CALL = 8


class Associativity(StrEnum):
    LEFT = "left"
    RIGHT = "right"


class OperatorPosition(StrEnum):
    """Where an operator punctuator sits relative to its operands."""

    PREFIX = "prefix"
    INFIX = "infix"
    POSTFIX = "postfix"


@dataclass(frozen=True)
class OperatorRule:
    """How one punctuator binds in one position."""

    punctuator: Punctuator
    position: OperatorPosition
    precedence: Precedence
    associativity: Associativity = Associativity.LEFT

    @property
    def right_binding_power(self) -> int:
        """Operators to the right join the right operand only above this value.

        Right-associative operators let their own level through, so
        ``a = b = c`` groups as ``a = (b = c)``.
        """
        if self.associativity == Associativity.RIGHT:
            return self.precedence - 1
        return int(self.precedence)


def _rule(
    punctuator: Punctuator,
    position: OperatorPosition,
    precedence: Precedence,
    associativity: Associativity = Associativity.LEFT,
) -> tuple[tuple[Punctuator, OperatorPosition], OperatorRule]:
    return (punctuator, position), OperatorRule(punctuator, position, precedence, associativity)


OPERATOR_TABLE: dict[tuple[Punctuator, OperatorPosition], OperatorRule] = dict(
    [
        # Prefix operators
        _rule(Punctuator.PLUS, OperatorPosition.PREFIX, Precedence.PREFIX),
        _rule(Punctuator.MINUS, OperatorPosition.PREFIX, Precedence.PREFIX),
        _rule(Punctuator.TILDE, OperatorPosition.PREFIX, Precedence.PREFIX),
        _rule(Punctuator.BANG, OperatorPosition.PREFIX, Precedence.PREFIX),
        # Infix operators
        _rule(
            Punctuator.ASSIGN, OperatorPosition.INFIX, Precedence.ASSIGNMENT, Associativity.RIGHT
        ),
        _rule(
            Punctuator.QUESTION,
            OperatorPosition.INFIX,
            Precedence.CONDITIONAL,
            Associativity.RIGHT,
        ),
        _rule(Punctuator.PLUS, OperatorPosition.INFIX, Precedence.SUM),
        _rule(Punctuator.MINUS, OperatorPosition.INFIX, Precedence.SUM),
        _rule(Punctuator.ASTERISK, OperatorPosition.INFIX, Precedence.PRODUCT),
        _rule(Punctuator.SLASH, OperatorPosition.INFIX, Precedence.PRODUCT),
        _rule(Punctuator.CARET, OperatorPosition.INFIX, Precedence.EXPONENT, Associativity.RIGHT),
        _rule(Punctuator.LEFT_PAREN, OperatorPosition.INFIX, Precedence.CALL),
        # Postfix operators
        _rule(Punctuator.BANG, OperatorPosition.POSTFIX, Precedence.POSTFIX),
    ]
)

# Punctuators that delimit expressions and never act as operators.
STRUCTURAL_PUNCTUATORS: frozenset[Punctuator] = frozenset(
    {Punctuator.RIGHT_PAREN, Punctuator.COMMA, Punctuator.COLON}
)


def lookup(punctuator: Punctuator, position: OperatorPosition) -> OperatorRule | None:
    """Return the rule for ``punctuator`` in ``position``, or None if it is not an operator there."""
    return OPERATOR_TABLE.get((punctuator, position))


def binding_power(punctuator: Punctuator, position: OperatorPosition) -> int:
    """Precedence of ``punctuator`` in ``position``; 0 ends a climbing loop."""
    rule = lookup(punctuator, position)
    if rule is None:
        return 0
    return int(rule.precedence)


def operators_at(precedence: Precedence) -> list[OperatorRule]:
    """All rules bound at one level, in table order."""
    return [rule for rule in OPERATOR_TABLE.values() if rule.precedence == precedence]
