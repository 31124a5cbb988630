# src/monkey/evaluator/builtins.py
"""Native functions callable from Monkey code.

Every native receives already-evaluated arguments, validates them itself and
returns either a runtime value or an ``EvaluationError``.
"""
import sys

from ..object import Integer, Array, Builtin, ARRAY_OBJ, STRING_OBJ
from .utils import new_error, wrong_arg_count, NULL


def _len(*a):
    if len(a) != 1:
        return wrong_arg_count(len(a), 1)
    arg = a[0]
    if arg.type() == STRING_OBJ:
        return Integer(len(arg.value))
    return new_error(f"argument to `len` not supported: {arg.type()}")


def _check_array_arg(name, a, take):
    if len(a) != take:
        return wrong_arg_count(len(a), take)
    if a[0].type() != ARRAY_OBJ:
        return new_error(f"argument to `{name}` must be ARRAY, got {a[0].type()}")
    return None


def _first(*a):
    error = _check_array_arg("first", a, 1)
    if error is not None:
        return error
    return a[0].elements[0] if a[0].elements else NULL


def _last(*a):
    error = _check_array_arg("last", a, 1)
    if error is not None:
        return error
    return a[0].elements[-1] if a[0].elements else NULL


def _rest(*a):
    error = _check_array_arg("rest", a, 1)
    if error is not None:
        return error
    if not a[0].elements:
        return NULL
    return Array(a[0].elements[1:])


def _push(*a):
    error = _check_array_arg("push", a, 2)
    if error is not None:
        return error
    return Array(a[0].elements + [a[1]])


def make_puts(output=None):
    def _puts(*a):
        stream = output if output is not None else sys.stdout
        for arg in a:
            stream.write(arg.inspect() + "\n")
        return NULL
    return _puts


def default_builtins(output=None):
    """Build a fresh name -> Builtin table; ``puts`` writes to ``output``."""
    return {
        "len": Builtin(_len, "len"),
        "first": Builtin(_first, "first"),
        "last": Builtin(_last, "last"),
        "rest": Builtin(_rest, "rest"),
        "push": Builtin(_push, "push"),
        "puts": Builtin(make_puts(output), "puts"),
    }
