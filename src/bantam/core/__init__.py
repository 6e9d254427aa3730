"""Core Bantam functionality: tokenizer, precedence table, expression IR, configuration."""

from . import ir
from .config import BantamConfig, load_config
from .errors import (
    BantamError,
    ConfigError,
    ErrorContext,
    ExpressionLoadError,
    ParseError,
)

__all__ = [
    "ir",
    "BantamConfig",
    "load_config",
    "BantamError",
    "ConfigError",
    "ErrorContext",
    "ExpressionLoadError",
    "ParseError",
]
