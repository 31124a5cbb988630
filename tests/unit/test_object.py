"""Runtime value model: type tags, inspect forms and hash keys."""

import pytest

from monkey.environment import Environment
from monkey.monkey_ast import BlockStatement, ExpressionStatement, Identifier, InfixExpression
from monkey.object import (
    NULL, TRUE, FALSE, Integer, Boolean, String, Array, Hash, HashPair, HashKey,
    ReturnValue, EvaluationError, Function, Builtin, is_hashable, is_error,
    native_bool_to_boolean,
)


def test_string_hash_keys_follow_content():
    hello1 = String("Hello World")
    hello2 = String("Hello World")
    diff1 = String("My name is johnny")
    diff2 = String("My name is johnny")

    assert hello1.hash_key() == hello2.hash_key()
    assert diff1.hash_key() == diff2.hash_key()
    assert hello1.hash_key() != diff1.hash_key()


def test_hash_keys_are_distinct_across_types():
    assert Integer(1).hash_key() != TRUE.hash_key()
    assert Integer(1).hash_key() != String("1").hash_key()
    assert Integer(0).hash_key() != FALSE.hash_key()


def test_boolean_hash_keys():
    assert TRUE.hash_key() == Boolean(True).hash_key() == HashKey("BOOLEAN", 1)
    assert FALSE.hash_key() == HashKey("BOOLEAN", 0)


def test_hash_key_is_usable_as_dict_key():
    table = {Integer(7).hash_key(): "seven"}
    assert table[Integer(7).hash_key()] == "seven"


def test_hashable_values():
    assert is_hashable(Integer(1))
    assert is_hashable(String("a"))
    assert is_hashable(TRUE)
    assert not is_hashable(NULL)
    assert not is_hashable(Array([]))
    assert not is_hashable(Hash())


@pytest.mark.parametrize("obj,type_tag,inspected", [
    (Integer(-3), "INTEGER", "-3"),
    (TRUE, "BOOLEAN", "true"),
    (FALSE, "BOOLEAN", "false"),
    (NULL, "NULL", "null"),
    (String("hi there"), "STRING", "hi there"),
    (Array([Integer(1), String("a"), NULL]), "ARRAY", "[1, a, null]"),
    (Array([]), "ARRAY", "[]"),
    (ReturnValue(Integer(5)), "RETURN_VALUE", "5"),
    (EvaluationError("boom"), "ERROR", "ERROR: boom"),
    (Builtin(lambda: NULL, "len"), "BUILTIN", "builtin function: len"),
])
def test_type_tags_and_inspect(obj, type_tag, inspected):
    assert obj.type() == type_tag
    assert obj.inspect() == inspected


def test_hash_inspect_keeps_insertion_order():
    one, two = String("one"), String("two")
    obj = Hash({
        one.hash_key(): HashPair(one, Integer(1)),
        two.hash_key(): HashPair(two, Integer(2)),
    })
    assert obj.type() == "HASH"
    assert obj.inspect() == "{one: 1, two: 2}"


def test_function_inspect_renders_parameters_and_body():
    body = BlockStatement([ExpressionStatement(
        InfixExpression(Identifier("x"), "+", Identifier("y"))
    )])
    fn = Function([Identifier("x"), Identifier("y")], body, Environment())
    assert fn.type() == "FUNCTION"
    assert fn.inspect() == "fn(x, y) {\n(x + y)\n}"


def test_native_bool_to_boolean_returns_singletons():
    assert native_bool_to_boolean(1 == 1) is TRUE
    assert native_bool_to_boolean([]) is FALSE


def test_is_error():
    assert is_error(EvaluationError("x"))
    assert not is_error(NULL)
    assert not is_error(None)
