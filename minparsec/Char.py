from typing import Callable

from .Parsec import Parser, T
from .Prim import item, pure
from .Combinators import choice, many

# Characters skipped by token() and whitespaces
WHITESPACE = " \t\n\r"


# Core function: Succeeds if the character satisfies a predicate
def satisfy(f: Callable[[str], bool], description: str) -> Parser[str]:
    """Succeeds for any character where f returns True. Returns the parsed character."""
    return item.parse_if(f, description)


# 1. Character classes
digit = satisfy(lambda c: '0' <= c <= '9', 'a digit')
lower = satisfy(lambda c: 'a' <= c <= 'z', 'a lower case letter')
upper = satisfy(lambda c: 'A' <= c <= 'Z', 'an upper case letter')
whitespace = satisfy(lambda c: c in WHITESPACE, 'a whitespace')
hex_digit = satisfy(lambda c: '0' <= c <= '9' or c in 'abcdefABCDEF', 'a hex digit')
letter = choice(lower, upper)
alphanum = choice(letter, digit)
whitespaces = many(whitespace)


# 2. one_of: Parses any character in the provided list
def one_of(cs: str) -> Parser[str]:
    """Succeeds if the current character is in cs. Returns the parsed character."""
    return satisfy(lambda c: c in cs, f"one of {cs}")


# 3. char: Parses a single character
def char(c: str) -> Parser[str]:
    """Parses a single character c and returns it."""
    return satisfy(lambda x: x == c, c)


# 4. string: Parses a specific string
def string(s: str) -> Parser[str]:
    """
    Parses the exact string s and returns it.
    A mismatch is reported at the first differing character.

    Each character costs a few stack frames while parsing, so literals of
    several hundred characters can exceed the recursion limit; run_parser
    reports that as a failure.
    """
    chars = [char(c) for c in s]

    def from_index(i: int) -> Parser[str]:
        if i == len(chars):
            return pure("")
        return chars[i].bind(lambda c: from_index(i + 1).map(lambda cs: c + cs))

    return from_index(0)


# 5. token: p followed by any trailing whitespace
def token(p: Parser[T]) -> Parser[T]:
    return p < whitespaces


# 6. symbol: a literal string as a token
def symbol(s: str) -> Parser[str]:
    return token(string(s))
