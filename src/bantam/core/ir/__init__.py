"""
Bantam Intermediate Representation (IR) types.

Expression tree nodes and their JSON serialization.
"""

from .expressions import (
    AssignExpr,
    CallExpr,
    ConditionalExpr,
    Expr,
    NameExpr,
    OperatorExpr,
    PostfixExpr,
    PrefixExpr,
    dump_expr,
    load_expr,
)

__all__ = [
    "AssignExpr",
    "CallExpr",
    "ConditionalExpr",
    "Expr",
    "NameExpr",
    "OperatorExpr",
    "PostfixExpr",
    "PrefixExpr",
    "dump_expr",
    "load_expr",
]
