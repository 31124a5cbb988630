"""Shared helpers for evaluating Monkey snippets in tests."""

from monkey.environment import Environment
from monkey.evaluator.core import Evaluator
from monkey.lexer import Lexer
from monkey.object import EvaluationError, Integer, Boolean
from monkey.parser import Parser


def parse_program(code_str):
    parser = Parser(Lexer(code_str))
    program = parser.parse_program()
    assert parser.errors == [], f"parser errors: {parser.errors}"
    return program


def run(code_str, env=None, evaluator=None):
    """Parse and evaluate a snippet in a fresh root environment."""
    program = parse_program(code_str)
    evaluator = evaluator or Evaluator()
    return evaluator.eval_node(program, env if env is not None else Environment())


def assert_integer(obj, expected):
    assert isinstance(obj, Integer), f"expected Integer, got {obj!r}"
    assert obj.value == expected


def assert_boolean(obj, expected):
    assert isinstance(obj, Boolean), f"expected Boolean, got {obj!r}"
    assert obj.value is expected


def assert_error(obj, message):
    assert isinstance(obj, EvaluationError), f"expected Error, got {obj!r}"
    assert obj.message == message
