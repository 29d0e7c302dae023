import pytest

from rtlisp.reader.parser import read_one
from rtlisp.reader.reader_macros import ReaderMacros, deep_reverse, make_quote, reader_macros
from rtlisp.types.symbol import Symbol

q = Symbol("quote")
a, b, c, d = Symbol("a"), Symbol("b"), Symbol("c"), Symbol("d")


# ----------------------------------------
# 1. Deep reversal
# ----------------------------------------
@pytest.mark.parametrize(
    "expr, expected",
    [
        ([], []),
        ([1], [1]),
        ([1, 2, 3], [3, 2, 1]),
        ([1, [2, 3], 4], [4, [3, 2], 1]),
        ([[1, [2, 3]], [4]], [[4], [[3, 2], 1]]),
        (a, a),
        (7, 7),
    ]
)
def test_deep_reverse(expr, expected):
    assert deep_reverse(expr) == expected


def test_deep_reverse_does_not_mutate():
    expr = [1, [2, 3]]
    deep_reverse(expr)
    assert expr == [1, [2, 3]]


# ----------------------------------------
# 2. Reversal marker in source
# ----------------------------------------
@pytest.mark.parametrize(
    "source, expected",
    [
        ("$(a b c)", [c, b, a]),
        ("$(a (b c) d)", [d, [c, b], a]),
        ("$((6 5 +) (4 3 +) *)", [Symbol("*"), [Symbol("+"), 3, 4], [Symbol("+"), 5, 6]]),
        ("(* (+ 3 4) $(6 5 +))", [Symbol("*"), [Symbol("+"), 3, 4], [Symbol("+"), 5, 6]]),
        ("$[a {b c}]", [[c, b], a]),
        ("$a", a),
        ("$()", []),
        ("$$(a (b c))", [a, [b, c]]),
        ("(a $(b c) d)", [a, [c, b], d]),
    ]
)
def test_reversal_macro(source, expected):
    assert read_one(source) == expected


def test_reversal_is_not_applied_to_atom_text():
    assert read_one("$(abc 123)") == [123, Symbol("abc")]


# ----------------------------------------
# 3. Quote marker in source
# ----------------------------------------
@pytest.mark.parametrize(
    "source, expected",
    [
        ("'a", [q, a]),
        ("'(a b)", [q, [a, b]]),
        ("''a", [q, [q, a]]),
        ("(f 'a 'b)", [Symbol("f"), [q, a], [q, b]]),
        ("'$(a b)", [q, [b, a]]),
        ("(list '(1 2) 3)", [Symbol("list"), [q, [1, 2]], 3]),
    ]
)
def test_quote_macro(source, expected):
    assert read_one(source) == expected


def test_reversal_applies_to_quote_form():
    # $ deep-reverses whatever follows, including the quote wrapper
    assert read_one("$'(a b)") == [[b, a], q]


# ----------------------------------------
# 4. Registry
# ----------------------------------------
def test_builtin_macros_registered():
    assert reader_macros.is_macro("reverse")
    assert reader_macros.is_macro("quote")
    assert not reader_macros.is_macro("literal")


def test_registry_dispatch():
    macros = ReaderMacros()
    macros.define("quote", make_quote)
    assert macros.dispatch("quote", a) == [q, a]
    with pytest.raises(ValueError):
        macros.dispatch("reverse", a)
