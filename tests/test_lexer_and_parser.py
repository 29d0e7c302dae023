import pytest
from hypothesis import given, strategies as st

from rtlisp.errors import RtlSyntaxError
from rtlisp.reader.parser import TokenStream, make_atom, read, read_one, sublist_end
from rtlisp.reader.reader_macros import deep_reverse
from rtlisp.reader.tokenizer import lex, tokenize
from rtlisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("literal", "a")]),
        ("'a", [("quote", "'"), ("literal", "a")]),
        ("$(a b)", [("reverse", "$"), ("open", "("), ("literal", "a"), ("literal", "b"), ("close", ")")]),
        ("(a b c)", [("open", "("), ("literal", "a"), ("literal", "b"), ("literal", "c"), ("close", ")")]),
        ("[a]", [("open", "("), ("literal", "a"), ("close", ")")]),
        ("{a}", [("open", "("), ("literal", "a"), ("close", ")")]),
        ("(a]", [("open", "("), ("literal", "a"), ("close", ")")]),
        ("(+ 1 2)", [("open", "("), ("literal", "+"), ("literal", "1"), ("literal", "2"), ("close", ")")]),
        ("a$b'c", [("literal", "a"), ("reverse", "$"), ("literal", "b"), ("quote", "'"), ("literal", "c")]),
        ("set! #t -3.5", [("literal", "set!"), ("literal", "#t"), ("literal", "-3.5")]),
        ("((x))", [("open", "("), ("open", "("), ("literal", "x"), ("close", ")"), ("close", ")")]),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize("source", ["", "    ", "\n\t  \r\n"])
def test_lexer_whitespace_only(source):
    assert tokenize(source) == []


def test_lexer_leaves_nesting_errors_to_the_reader():
    assert tokenize(")(") == [("close", ")"), ("open", "(")]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("3.14", 3.14),
        ("1e3", 1000.0),
        ("x", Symbol("x")),
        ("+", Symbol("+")),
        ("set!", Symbol("set!")),
        ("#t", Symbol("#t")),
        ("nan", Symbol("nan")),
        ("1+", Symbol("1+")),
    ]
)
def test_make_atom(text, expected):
    result = make_atom(text)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("'a", [Symbol("quote"), Symbol("a")]),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("()", []),
        ("(+ 1 2)", [Symbol("+"), 1, 2]),
        ("((a b) (c d))", [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]),
        ("(a (b (c (d))))", [Symbol("a"), [Symbol("b"), [Symbol("c"), [Symbol("d")]]]]),
    ]
)
def test_parser(source, expected):
    result = read(source)
    assert result[0] == expected


@pytest.mark.parametrize(
    "source",
    ["(+ 1 2)", "[+ 1 2]", "{+ 1 2}", "(+ 1 2]", "[+ 1 2}", "{+ 1 2)"],
)
def test_bracket_families_are_interchangeable(source):
    assert read_one(source) == [Symbol("+"), 1, 2]


def test_mixed_families_nested():
    assert read_one("{+ 1 [2]}") == read_one("(+ 1 (2))")
    assert read_one("[* {+ 3 4) (+ 5 6]]") == read_one("(* (+ 3 4) (+ 5 6))")


def test_read_sequence_of_top_level_expressions():
    assert read("(def a 1) a (+ a 2)") == [
        [Symbol("def"), Symbol("a"), 1],
        Symbol("a"),
        [Symbol("+"), Symbol("a"), 2],
    ]


def test_read_empty_source():
    assert read("") == []
    assert read("   ") == []


def test_sublist_end_counts_any_closer():
    tokens = tokenize("(a [b {c]) d)")
    # ( a ( b ( c ) ) d )  -> outer closer at index 9
    assert sublist_end(tokens, 0) == 9
    assert sublist_end(tokens, 2) == 7


@pytest.mark.parametrize("source", ["(a b", "((a)", "'(a", "$(a (b)"])
def test_unterminated_list_is_a_syntax_error(source):
    with pytest.raises(RtlSyntaxError):
        read(source)


@pytest.mark.parametrize("source", [")", "a )", "(a))"])
def test_stray_closer_is_a_syntax_error(source):
    with pytest.raises(RtlSyntaxError):
        read(source)


@pytest.mark.parametrize("source", ["'", "$", "(a ')", "(a $)"])
def test_dangling_reader_macro_is_a_syntax_error(source):
    with pytest.raises(RtlSyntaxError):
        read(source)


def test_read_one_requires_single_expression():
    with pytest.raises(RtlSyntaxError):
        read_one("a b")
    with pytest.raises(RtlSyntaxError):
        read_one("")


def test_token_stream_peek_and_advance():
    stream = TokenStream(tokenize("a (b)"))
    assert stream.peek() == ("literal", "a")
    assert stream.parse_expr() == Symbol("a")
    assert stream.parse_expr() == [Symbol("b")]
    assert stream.at_end()
    assert stream.peek() == (None, None)


# -------------------------------
# Property tests
# -------------------------------
def _is_number(text: str) -> bool:
    return not isinstance(make_atom(text), Symbol)


symbol_strat = st.from_regex(r"[a-z][a-z0-9_!?*<>=-]{0,6}", fullmatch=True).filter(
    lambda s: not _is_number(s)
)
number_strat = st.integers(min_value=-10_000, max_value=10_000)
atom_strat = st.one_of(symbol_strat, number_strat)
expr_strat = st.recursive(atom_strat, lambda children: st.lists(children, max_size=4), max_leaves=20)
list_strat = st.lists(expr_strat, max_size=4)


def _to_source(expr, depth: int = 0, mixed: bool = False) -> str:
    if isinstance(expr, list):
        opener = "([{"[depth % 3] if mixed else "("
        closer = ")]}"[(depth + 1) % 3] if mixed else ")"
        inner = " ".join(_to_source(e, depth + 1, mixed) for e in expr)
        return f"{opener}{inner}{closer}"
    return str(expr)


def _as_tree(expr):
    if isinstance(expr, list):
        return [_as_tree(e) for e in expr]
    if isinstance(expr, str):
        return Symbol(expr)
    return expr


@given(list_strat)
def test_parse_preserves_order(expr):
    assert read_one(_to_source(expr)) == _as_tree(expr)


@given(list_strat)
def test_parse_is_bracket_family_agnostic(expr):
    assert read_one(_to_source(expr, mixed=True)) == read_one(_to_source(expr))


@given(list_strat)
def test_reversal_composed_with_deep_reverse_is_identity(expr):
    src = _to_source(expr)
    reversed_tree = read_one("$" + src)
    assert reversed_tree == deep_reverse(read_one(src))
    assert deep_reverse(reversed_tree) == read_one(src)


@given(list_strat)
def test_double_reversal_reads_original(expr):
    src = _to_source(expr)
    assert read_one("$$" + src) == read_one(src)
