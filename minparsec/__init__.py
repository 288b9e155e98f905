# Core
from .Parsec import Parser, State, SourcePos, Success, Failure, ParseResult
from .Errors import ParseException
from .Prim import make_input, item, pure, empty, fail, lazy, trace, run_parser, parse_string

# Characters
from .Char import (
    satisfy, digit, lower, upper, letter, alphanum, hex_digit,
    whitespace, whitespaces, one_of, char, string, token, symbol
)

# Combinators
from .Combinators import (
    choice, multiple_choice, lazy_choice, multiple_lazy_choice,
    many, some, sep_by, sep_by_some, chain_left, between, option, eof
)
