from hypothesis import given
from hypothesis import strategies as st

from minparsec.Char import (
    alphanum,
    char,
    digit,
    hex_digit,
    letter,
    lower,
    one_of,
    satisfy,
    string,
    symbol,
    token,
    upper,
    whitespace,
    whitespaces,
)
from minparsec.Parsec import Failure, SourcePos, Success
from minparsec.Prim import item, make_input, run_parser


def run(parser, input_str):
    return run_parser(parser, input_str)


# --- item ---


def test_item_fails_on_empty_input():
    res = item.parse(make_input(""))
    assert isinstance(res, Failure)
    assert res.message == "Unexpected end of input"
    assert res.pos == SourcePos(1, 1)


def test_item_consumes_one_character():
    res = item.parse(make_input("a"))
    assert isinstance(res, Success)
    assert res.value == "a"
    assert res.state.pos == SourcePos(1, 2)
    assert res.state.remaining == ""


def test_item_does_not_touch_input_state(initial_state):
    state = initial_state("xy")
    item.parse(state)
    assert state.remaining == "xy"
    assert state.pos == SourcePos(1, 1, "test")


# --- Basic Character Parsers ---


@given(st.characters())
def test_char_parser(c):
    # Should match the character
    res, err = run(char(c), c)
    assert res == c
    assert err is None

    # Should fail on different character
    diff = chr(ord(c) + 1) if ord(c) < 0x10FFFF else chr(0)
    res_fail, err_fail = run(char(c), diff)
    assert res_fail is None
    assert err_fail.message == f"Expected {c}, but got {diff}"


def test_char_at_end_of_input():
    _, err = run(char('a'), "")
    assert err.message == "Expected a, but reached the end of input"


@given(st.characters(), st.text())
def test_satisfy(c, text):
    # Predicate: matches specific char
    p = satisfy(lambda x: x == c, repr(c))

    res, err = run(p, text)
    if text.startswith(c):
        assert res == c
    else:
        assert res is None
        assert err is not None


def test_one_of():
    p = one_of("+-")
    assert run(p, "+")[0] == "+"
    assert run(p, "-")[0] == "-"
    _, err = run(p, "*")
    assert err.message == "Expected one of +-, but got *"


# --- Classification Parsers ---


@given(st.sampled_from("0123456789"))
def test_digit(c):
    res, _ = run(digit, c)
    assert res == c


@given(st.sampled_from("abcdefghijklmnopqrstuvwxyz"))
def test_lower(c):
    assert run(lower, c)[0] == c
    assert run(upper, c)[0] is None


@given(st.sampled_from("ABCDEFGHIJKLMNOPQRSTUVWXYZ"))
def test_upper(c):
    assert run(upper, c)[0] == c
    assert run(lower, c)[0] is None


def test_digit_is_ascii_only():
    # Arabic-Indic digit three
    _, err = run(digit, "٣")
    assert err.message == "Expected a digit, but got ٣"


def test_letter_reports_last_alternative():
    assert run(letter, "q")[0] == "q"
    assert run(letter, "Q")[0] == "Q"
    _, err = run(letter, "1")
    assert err.message == "Expected an upper case letter, but got 1"


def test_alphanum():
    assert run(alphanum, "z")[0] == "z"
    assert run(alphanum, "7")[0] == "7"
    _, err = run(alphanum, "_")
    assert err.message == "Expected a digit, but got _"


def test_hex_digit():
    assert run(hex_digit, "a")[0] == "a"
    assert run(hex_digit, "F")[0] == "F"
    assert run(hex_digit, "9")[0] == "9"
    assert run(hex_digit, "g")[0] is None


def test_whitespace():
    for c in " \t\n\r":
        assert run(whitespace, c)[0] == c
    _, err = run(whitespace, "x")
    assert err.message == "Expected a whitespace, but got x"


# --- String Parsers ---


@given(st.text())
def test_string_parser(s):
    res, err = run(string(s), s + "suffix")
    assert res == s
    assert err is None


def test_string_empty_consumes_nothing():
    res = string("").parse(make_input("abc"))
    assert res.value == ""
    assert res.state.remaining == "abc"
    assert res.state.pos == SourcePos(1, 1)


def test_string_fails_at_first_mismatch():
    _, err = run(string("hello"), "help")
    assert err.pos == SourcePos(1, 4)
    assert err.message == "Expected l, but got p"


def test_string_partial_input():
    _, err = run(string("null"), "nu")
    assert err.pos == SourcePos(1, 3)
    assert err.message == "Expected l, but reached the end of input"


# --- Tokens ---


def test_whitespaces_never_fails():
    res = whitespaces.parse(make_input("abc"))
    assert res.value == []
    assert res.state.remaining == "abc"


def test_token_skips_trailing_whitespace():
    res = token(digit).parse(make_input("1 \n\t 2"))
    assert res.value == "1"
    assert res.state.remaining == "2"
    assert res.state.pos == SourcePos(2, 3)


def test_token_keeps_leading_whitespace_significant():
    _, err = run(token(digit), " 1")
    assert err.message == "Expected a digit, but got  "


def test_symbol():
    p = symbol("let") > symbol("x")
    assert run(p, "let   x  ")[0] == "x"
    assert run(p, "letx")[0] == "x"
