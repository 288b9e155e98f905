"""
A JSON parser producing plain Python values.

    value   = ws ( null | bool | string | number | array | object ) ws
    string  = '"' ( valid_char | '\\' escape )* '"'
    escape  = '"' | '\\' | '/' | 'b' | 'f' | 'n' | 'r' | 't' | 'u' hex hex hex hex
    number  = '-'? ( '0' | [1-9] [0-9]* ) ( '.' [0-9]+ )? ( [eE] [+-]? [0-9]+ )?
    array   = '[' ( value ( ',' value )* | ws ) ']'
    object  = '{' ( member ( ',' member )* | ws ) '}'
    member  = ws string ws ':' value
"""
from typing import Any, Dict, List, Tuple

from minparsec.Parsec import Parser
from minparsec.Prim import item, lazy, pure, run_parser
from minparsec.Char import char, digit, hex_digit, string, whitespaces
from minparsec.Combinators import (
    between, choice, many, multiple_choice, multiple_lazy_choice, option, sep_by_some, some
)

# 1. Literals
json_null: Parser[None] = string("null").map(lambda _: None)

json_bool: Parser[bool] = choice(
    string("true").map(lambda _: True),
    string("false").map(lambda _: False),
)

# 2. Strings
_ESCAPES = {
    '"': '"',
    '\\': '\\',
    '/': '/',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
}


def _is_valid_char(c: str) -> bool:
    return 0x20 <= ord(c) <= 0x10FFFF and c != '"' and c != '\\'


valid_char = item.parse_if(_is_valid_char, 'a valid character')

hex_quad: Parser[int] = hex_digit.bind(
    lambda a: hex_digit.bind(
        lambda b: hex_digit.bind(
            lambda c: hex_digit.map(
                lambda d: int(a + b + c + d, 16)))))


def _code_point(high: int) -> Parser[str]:
    # A high surrogate directly followed by an escaped low surrogate is one character
    if 0xD800 <= high <= 0xDBFF:
        low_escape = (string("\\u") > hex_quad).parse_if(
            lambda low: 0xDC00 <= low <= 0xDFFF, 'a low surrogate')
        pair = low_escape.map(lambda low: chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00)))
        return choice(pair, pure(chr(high)))
    return pure(chr(high))


unicode_escape = char('u') > hex_quad.bind(_code_point)

simple_escape = multiple_choice(*[char(c).map(lambda _, v=v: v) for c, v in _ESCAPES.items()])

escaped_char = char('\\') > choice(unicode_escape, simple_escape)

string_literal: Parser[str] = between(
    char('"'), char('"'), many(choice(valid_char, escaped_char))
).map(lambda cs: "".join(cs))

json_string: Parser[str] = string_literal

# 3. Numbers
_none = pure("")
_digits = some(digit).map(lambda ds: "".join(ds))

non_zero = digit.parse_if(lambda c: c != '0', 'a non-zero digit')
integer_part = choice(char('0'), non_zero.bind(lambda c: many(digit).map(lambda cs: c + "".join(cs))))
fraction = char('.') > _digits.map(lambda ds: "." + ds)
exponent = choice(char('e'), char('E')) > multiple_choice(char('+'), char('-'), _none).bind(
    lambda sign: _digits.map(lambda ds: "e" + sign + ds))


def _to_number(parts: Tuple[str, str, str, str]):
    sign, integer, frac, exp = parts
    if frac or exp:
        return float(sign + integer + frac + exp)
    return int(sign + integer)


json_number: Parser[Any] = option("", char('-')).bind(
    lambda sign: integer_part.bind(
        lambda integer: option("", fraction).bind(
            lambda frac: option("", exponent).map(
                lambda exp: _to_number((sign, integer, frac, exp))))))


# 4. Recursive JSON Parser
def json_element() -> Parser[Any]:
    return between(whitespaces, whitespaces, json_value())


def json_value() -> Parser[Any]:
    return multiple_lazy_choice(
        lambda: json_null,
        lambda: json_bool,
        lambda: json_string,
        lambda: json_number,
        json_array,
        json_object,
    )


def json_array() -> Parser[List[Any]]:
    # [ value, value, ... ] or [ ]
    elements = sep_by_some(lazy(json_element), char(','))
    return between(char('['), char(']'), choice(elements, whitespaces.map(lambda _: [])))


def json_object() -> Parser[Dict[str, Any]]:
    # { "key": value, ... } or { }
    key = between(whitespaces, whitespaces, string_literal)
    member = key.bind(lambda k: char(':') > lazy(json_element).map(lambda v: (k, v)))
    members = sep_by_some(member, char(','))
    return between(char('{'), char('}'), choice(members, whitespaces.map(lambda _: []))).map(dict)


parser: Parser[Any] = json_element()

if __name__ == "__main__":
    import json
    import sys

    text = sys.stdin.read() if len(sys.argv) < 2 else sys.argv[1]
    result, err = run_parser(parser, text, source_name="<stdin>" if len(sys.argv) < 2 else "<argv>")

    if err:
        print("Parsing Failed:", err)
    else:
        print("Successfully Parsed:")
        print(json.dumps(result, indent=4))
