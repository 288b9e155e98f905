import logging
from typing import Any, Callable, Optional, Tuple

from .Errors import ParseException
from .Parsec import Failure, ParseResult, Parser, SourcePos, State, Success, T

log = logging.getLogger("minparsec")


def make_input(text: str, source_name: str = "") -> State:
    """Initial state for text, positioned at line 1, column 1."""
    return State(text, 0, SourcePos(1, 1, source_name))


def pure(value: T) -> Parser[T]:
    """Return a parser that succeeds with a value without consuming input."""
    return Parser.pure(value)


def empty() -> Parser[Any]:
    """A parser that always fails with the generic empty-parser message."""
    return Parser.empty()


def fail(msg: str) -> Parser[Any]:
    """A parser that always fails with a message."""
    return Parser.fail(msg)


def _item(state: State) -> ParseResult[str]:
    if state.at_end():
        return Failure(state.pos, "Unexpected end of input")
    return Success(state.text[state.offset], state.advance())


# Parse any single character
item: Parser[str] = Parser(_item)


def lazy(thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until parse time, for self-referential grammars."""
    return Parser(lambda state: thunk().parse(state))


def trace(name: str, p: Parser[T]) -> Parser[T]:
    """Log every attempt of p and its outcome at DEBUG level."""
    def parse(state: State) -> ParseResult[T]:
        debug = log.isEnabledFor(logging.DEBUG)
        if debug:
            log.debug("trying %s at %s", name, state.pos)
        result = p.parse(state)
        if debug:
            if isinstance(result, Failure):
                log.debug("%s failed: %s", name, result)
            else:
                log.debug("%s matched %r, now at %s", name, result.value, result.state.pos)
        return result
    return Parser(parse)


def _run(parser: Parser[T], state: State) -> ParseResult[T]:
    # Deeply nested input can outgrow the interpreter stack; report it as a failure
    try:
        return parser.parse(state)
    except RecursionError:
        log.debug("recursion limit hit while parsing from %s", state.pos)
        return Failure(state.pos, "Input nested too deeply")


def run_parser(parser: Parser[T],
               input_str: str,
               source_name: str = "") -> Tuple[Optional[T], Optional[Failure]]:
    result = _run(parser, make_input(input_str, source_name))
    if isinstance(result, Failure):
        return None, result
    return result.value, None


def parse_string(parser: Parser[T],
                 input_str: str,
                 source_name: str = "",
                 consume_all: bool = False) -> T:
    """Run parser on input_str, raising ParseException on failure.

    With consume_all, trailing unconsumed input is also an error.
    """
    result = _run(parser, make_input(input_str, source_name))
    if isinstance(result, Success) and consume_all and not result.state.at_end():
        leftover = result.state.text[result.state.offset]
        result = Failure(result.state.pos, f"Expected end of input, but got {leftover}")
    if isinstance(result, Failure):
        log.debug("parse of %r failed: %s", source_name or input_str[:30], result)
        raise ParseException(result)
    return result.value
