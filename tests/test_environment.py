import pytest

from minim.types.environment import Environment
from minim.types.expression import Number
from minim.types.symbol import Symbol
from minim.types.errors import MinimTypeError


@pytest.fixture
def root():
    env = Environment()
    env.define(Symbol("a"), Number(1))
    return env


def test_define_and_lookup(root):
    assert root.lookup(Symbol("a")) == Number(1)
    assert root.lookup(Symbol("missing")) is None


def test_define_overwrites_in_same_frame(root):
    root.define(Symbol("a"), Number(2))
    assert root.lookup(Symbol("a")) == Number(2)
    assert len(root.vars) == 1


def test_child_sees_parent_bindings(root):
    child = Environment(outer=root)
    grandchild = Environment(outer=child)
    assert grandchild.lookup(Symbol("a")) == Number(1)
    assert grandchild.find(Symbol("a")) is root
    assert Symbol("a") in grandchild


def test_shadowing_never_mutates_the_parent(root):
    child = Environment(outer=root)
    child.define(Symbol("a"), Number(99))
    assert child.lookup(Symbol("a")) == Number(99)
    assert root.lookup(Symbol("a")) == Number(1)
    assert child.find(Symbol("a")) is child


def test_child_bindings_are_invisible_to_parent(root):
    child = Environment(outer=root)
    child.define(Symbol("b"), Number(2))
    assert root.lookup(Symbol("b")) is None
    assert Symbol("b") not in root


def test_define_requires_symbol(root):
    with pytest.raises(MinimTypeError):
        root.define("a", Number(1))


def test_update_defines_in_current_frame():
    env = Environment()
    env.update({Symbol("x"): Number(1), Symbol("y"): Number(2)})
    assert env.lookup(Symbol("x")) == Number(1)
    assert env.lookup(Symbol("y")) == Number(2)


def test_symbols_are_interned_and_immutable():
    assert Symbol("abc") == Symbol("abc")
    assert hash(Symbol("abc")) == hash(Symbol("abc"))
    assert Symbol("abc") != "abc"
    with pytest.raises(AttributeError):
        Symbol("abc").name = "xyz"


def test_str_and_repr(root):
    child = Environment(outer=root)
    child.define(Symbol("b"), Number(2.5))
    assert str(root) == "{a: 1}"
    assert str(child) == "{b: 2.5} -> ..."
    assert repr(child) == "<Environment chain: {b: 2.5} -> {a: 1}>"
