"""
Expression tree types for the Bantam IR.

Supports:
- Names: a, total
- Assignment: x = a + b
- Binary operators: a + b, a ^ b
- Prefix and postfix operators: -a, ~a, a!
- Conditionals: a ? b : c
- Calls: f(a, b), f()

Every node renders to a canonical, fully parenthesized string through
``__str__``. Calls are the one variant not wrapped in parentheses.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from bantam.core.errors import ExpressionLoadError
from bantam.core.expression_lang.tokenizer import Punctuator

# Same grammar the tokenizer uses for names.
NAME_PATTERN = r"^[A-Za-z]+$"

# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class NameExpr(BaseModel):
    """A bare identifier reference."""

    kind: Literal["name"] = "name"
    name: str = Field(min_length=1, pattern=NAME_PATTERN, description="Identifier text")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class AssignExpr(BaseModel):
    """Assignment: name = right."""

    kind: Literal["assign"] = "assign"
    name: str = Field(min_length=1, pattern=NAME_PATTERN, description="Name being bound")
    right: Expr = Field(description="Bound value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.name} = {self.right})"


class OperatorExpr(BaseModel):
    """Binary infix operation: left op right."""

    kind: Literal["op"] = "op"
    left: Expr
    op: Punctuator
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


class PrefixExpr(BaseModel):
    """Unary prefix operation: op right."""

    kind: Literal["prefix"] = "prefix"
    op: Punctuator
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.op.value}{self.right})"


class PostfixExpr(BaseModel):
    """Unary postfix operation: left op."""

    kind: Literal["postfix"] = "postfix"
    left: Expr
    op: Punctuator

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left}{self.op.value})"


class ConditionalExpr(BaseModel):
    """
    Ternary conditional: condition ? then_arm : else_arm.
    """

    kind: Literal["conditional"] = "conditional"
    condition: Expr = Field(description="Condition")
    then_arm: Expr = Field(description="Value when the condition holds")
    else_arm: Expr = Field(description="Value otherwise")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.condition} ? {self.then_arm} : {self.else_arm})"


class CallExpr(BaseModel):
    """
    Function application: function(arg1, arg2, ...).

    The callee is any expression, so ``f(a)(b)`` nests one call inside
    another.
    """

    kind: Literal["call"] = "call"
    function: Expr = Field(description="Callee")
    args: tuple[Expr, ...] = Field(default=(), description="Arguments in source order")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        args_str = ", ".join(str(a) for a in self.args)
        return f"{self.function}({args_str})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Annotated[
    NameExpr | AssignExpr | OperatorExpr | PrefixExpr | PostfixExpr | ConditionalExpr | CallExpr,
    Field(discriminator="kind"),
]

# Rebuild models for recursive forward references
AssignExpr.model_rebuild()
OperatorExpr.model_rebuild()
PrefixExpr.model_rebuild()
PostfixExpr.model_rebuild()
ConditionalExpr.model_rebuild()
CallExpr.model_rebuild()

_EXPR_ADAPTER: TypeAdapter[Expr] = TypeAdapter(Expr)


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def dump_expr(expr: Expr, indent: int | None = None) -> str:
    """Serialize an expression tree to JSON."""
    return _EXPR_ADAPTER.dump_json(expr, indent=indent).decode("utf-8")


def load_expr(data: str | bytes | dict[str, Any]) -> Expr:
    """Load an expression tree from JSON text or an already-decoded mapping.

    Raises:
        ExpressionLoadError: If the document does not describe a valid tree.
    """
    try:
        if isinstance(data, dict):
            return _EXPR_ADAPTER.validate_python(data)
        return _EXPR_ADAPTER.validate_json(data)
    except ValidationError as e:
        raise ExpressionLoadError(f"Invalid expression tree: {e}") from e
