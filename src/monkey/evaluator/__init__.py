# src/monkey/evaluator/__init__.py
from .core import Evaluator, evaluate
from .builtins import default_builtins

__all__ = ['Evaluator', 'evaluate', 'default_builtins']
