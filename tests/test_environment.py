import pytest

from mlisp.errors import MLispMalformedForm, MLispUnboundSymbol
from mlisp.types.environment import Environment
from mlisp.types.symbol import Keyword, Symbol


def test_set_and_get(env):
    env.set(Symbol("x"), 42)
    assert env.get(Symbol("x")) == 42
    assert env.lookup(Symbol("x")) == 42


def test_get_unbound_returns_none(env):
    assert env.get(Symbol("missing")) is None


def test_lookup_unbound_raises_with_name(env):
    with pytest.raises(MLispUnboundSymbol) as exc:
        env.lookup(Symbol("missing"))
    assert exc.value.name == Symbol("missing")
    assert "missing" in str(exc.value)


def test_lookup_walks_to_root(env):
    env.set(Symbol("x"), 1)
    child = Environment.extend(env)
    grandchild = Environment.extend(child)
    assert grandchild.outer is child
    assert child.outer is env
    assert grandchild.lookup(Symbol("x")) == 1
    assert grandchild.find(Symbol("x")) is env


def test_set_shadows_without_mutating_outer(env):
    env.set(Symbol("x"), 1)
    child = Environment.extend(env)
    child.set(Symbol("x"), 2)
    assert child.lookup(Symbol("x")) == 2
    assert env.lookup(Symbol("x")) == 1


def test_set_overwrites_local(env):
    env.set(Symbol("x"), 1)
    env.set(Symbol("x"), "two")
    assert env.lookup(Symbol("x")) == "two"


def test_outer_binding_added_later_is_visible(env):
    child = Environment.extend(env)
    env.set(Symbol("late"), 7)
    assert child.lookup(Symbol("late")) == 7


def test_siblings_share_parent_but_not_locals(env):
    a = Environment.extend(env)
    b = Environment.extend(env)
    a.set(Symbol("only-a"), 1)
    assert b.get(Symbol("only-a")) is None
    env.set(Symbol("shared"), 3)
    assert a.lookup(Symbol("shared")) == b.lookup(Symbol("shared")) == 3


def test_define_requires_symbol(env):
    with pytest.raises(MLispMalformedForm):
        env.define(Keyword("map"), 1)
    with pytest.raises(MLispMalformedForm):
        env.define("x", 1)
    env.define(Symbol("x"), 1)
    assert env.lookup(Symbol("x")) == 1


def test_str_and_repr(env):
    env.set(Symbol("x"), 1)
    child = Environment.extend(env)
    child.set(Symbol("y"), 2)
    assert str(child) == "{y: 2} -> ..."
    assert repr(child) == "<Environment chain: {y: 2} -> {x: 1}>"
