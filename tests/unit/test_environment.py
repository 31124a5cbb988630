"""Environment scoping: local writes, outward reads, shared outer scopes."""

from monkey.environment import Environment, new_enclosed_environment
from monkey.object import Integer


def test_get_unbound_returns_default():
    env = Environment()
    assert env.get("missing") is None
    assert env.get("missing", 42) == 42
    assert env.lookup("missing") == (None, False)


def test_set_returns_value_and_binds_locally():
    env = Environment()
    value = Integer(5)
    assert env.set("x", value) is value
    assert env.get("x") is value
    assert env.lookup("x") == (value, True)


def test_enclosed_lookup_walks_outward():
    outer = Environment()
    outer.set("a", Integer(1))
    inner = new_enclosed_environment(outer)
    innermost = new_enclosed_environment(inner)

    assert innermost.get("a") is outer.get("a")
    assert innermost.depth() == 2
    assert outer.depth() == 0


def test_inner_binding_shadows_without_touching_outer():
    outer = Environment()
    outer.set("x", Integer(1))
    inner = new_enclosed_environment(outer)
    inner.set("x", Integer(2))

    assert inner.get("x").value == 2
    assert outer.get("x").value == 1


def test_outer_is_shared_not_copied():
    outer = Environment()
    inner = new_enclosed_environment(outer)
    outer.set("late", Integer(9))
    assert inner.get("late").value == 9


def test_set_never_writes_outer_scope():
    outer = Environment()
    outer.set("a", Integer(1))
    inner = Environment(outer=outer)
    inner.set("b", Integer(2))

    assert inner.lookup("a")[1] and inner.lookup("b")[1]
    assert outer.lookup("b") == (None, False)
    assert list(inner.store) == ["b"]


def test_falsy_values_are_found():
    env = Environment()
    env.set("zero", Integer(0))
    value, found = env.lookup("zero")
    assert found and value.value == 0


def test_repr_lists_local_names():
    env = new_enclosed_environment(Environment())
    env.set("b", Integer(1))
    env.set("a", Integer(2))
    assert repr(env) == "Environment(names=['a', 'b'], depth=1)"
