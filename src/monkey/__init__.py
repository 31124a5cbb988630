"""Monkey - a tree-walking interpreter for a small dynamically-typed language."""

from .config import config
from .environment import Environment, new_enclosed_environment
from .errors import MonkeyError, MonkeySyntaxError
from .evaluator import Evaluator, evaluate, default_builtins
from .lexer import Lexer
from .parser import Parser, parse
from .object import (
    NULL,
    TRUE,
    FALSE,
    Object,
    Integer,
    Boolean,
    String,
    Null,
    Array,
    Hash,
    HashKey,
    HashPair,
    Function,
    Builtin,
    ReturnValue,
    EvaluationError,
)

__version__ = "0.1.0"

__all__ = [
    "config",
    "Environment",
    "new_enclosed_environment",
    "MonkeyError",
    "MonkeySyntaxError",
    "Evaluator",
    "evaluate",
    "default_builtins",
    "Lexer",
    "Parser",
    "parse",
    "NULL",
    "TRUE",
    "FALSE",
    "Object",
    "Integer",
    "Boolean",
    "String",
    "Null",
    "Array",
    "Hash",
    "HashKey",
    "HashPair",
    "Function",
    "Builtin",
    "ReturnValue",
    "EvaluationError",
    "__version__",
]
