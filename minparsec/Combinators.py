from typing import Any, Callable, List

from .Parsec import EMPTY_MESSAGE, Failure, ParseResult, Parser, State, Success, T, U
from .Prim import pure

LazyParser = Callable[[], Parser[T]]


# 1. choice: Ordered choice between two parsers
def choice(p1: Parser[T], p2: Parser[T]) -> Parser[T]:
    """
    Runs p1; if it fails, runs p2 from the same starting state.
    When both fail, p2's failure is reported.
    """
    return p1 | p2

# 2. multiple_choice: Tries parsers in order until one succeeds
def multiple_choice(*parsers: Parser[T]) -> Parser[T]:
    """
    Applies parsers left to right from the same state until one succeeds.
    Reports the last failure, or an empty-parser failure if there are no parsers.
    """
    def parse(state: State) -> ParseResult[T]:
        result: ParseResult[T] = Failure(state.pos, EMPTY_MESSAGE)
        for p in parsers:
            result = p.parse(state)
            if isinstance(result, Success):
                break
        return result
    return Parser(parse)

# 3. lazy_choice: choice over thunks, built at parse time
def lazy_choice(t1: LazyParser[T], t2: LazyParser[T]) -> Parser[T]:
    def parse(state: State) -> ParseResult[T]:
        result = t1().parse(state)
        if isinstance(result, Failure):
            return t2().parse(state)
        return result
    return Parser(parse)

# 4. multiple_lazy_choice: multiple_choice over thunks
def multiple_lazy_choice(*thunks: LazyParser[T]) -> Parser[T]:
    def parse(state: State) -> ParseResult[T]:
        result: ParseResult[T] = Failure(state.pos, EMPTY_MESSAGE)
        for thunk in thunks:
            result = thunk().parse(state)
            if isinstance(result, Success):
                break
        return result
    return Parser(parse)

# 5. many: Zero or more occurrences
def many(p: Parser[T]) -> Parser[List[T]]:
    """
    Parses zero or more occurrences of p. Never fails.

    Equivalent to choice(some(p), pure([])) but runs as a loop, so long inputs
    do not exhaust the recursion limit. p must consume input whenever it
    succeeds, otherwise this never terminates.
    """
    def parse(state: State) -> ParseResult[List[T]]:
        values: List[T] = []
        current = state
        while True:
            result = p.parse(current)
            if isinstance(result, Failure):
                return Success(values, current)
            values.append(result.value)
            current = result.state
    return Parser(parse)

# 6. some: One or more occurrences
def some(p: Parser[T]) -> Parser[List[T]]:
    """
    Applies parser p one or more times, returning a list of results.
    """
    return p.bind(lambda x: many(p).map(lambda xs: [x] + xs))

# 7. sep_by: Zero or more occurrences separated by a separator
def sep_by(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    """
    Parses zero or more occurrences of p separated by sep, returning a list of p's results.
    """
    return choice(sep_by_some(p, sep), pure([]))

# 8. sep_by_some: One or more occurrences separated by a separator
def sep_by_some(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    """
    Parses one or more occurrences of p separated by sep, returning a list of p's results.
    """
    return p.bind(lambda x: many(sep > p).map(lambda xs: [x] + xs))

# 9. chain_left: Left-associative operator chain
def chain_left(p: Parser[T], op: Parser[Callable[[T, T], T]]) -> Parser[T]:
    """
    Parses p (op p)*, folding the operator functions from the left,
    so that a - b - c yields f(f(a, b), c).

    An op whose right operand fails to parse is not consumed; the chain
    ends with the value built so far.
    """
    def parse(state: State) -> ParseResult[T]:
        first = p.parse(state)
        if isinstance(first, Failure):
            return first
        acc = first.value
        current = first.state
        while True:
            op_result = op.parse(current)
            if isinstance(op_result, Failure):
                break
            rhs = p.parse(op_result.state)
            if isinstance(rhs, Failure):
                break
            acc = op_result.value(acc, rhs.value)
            current = rhs.state
        return Success(acc, current)
    return Parser(parse)

# 10. between: open, p, close, keeping p's value
def between(open: Parser[Any], close: Parser[Any], p: Parser[T]) -> Parser[T]:
    return open.bind(lambda _: p.bind(lambda x: close.bind(lambda _: pure(x))))

# 11. option: A parser with a default value
def option(x: U, p: Parser[T]) -> Parser[Any]:
    """
    Tries parser p; returns its result if successful, else x without consuming input.
    """
    return choice(p, pure(x))

# 12. eof: Succeeds only at the end of input
def _eof(state: State) -> ParseResult[None]:
    if state.at_end():
        return Success(None, state)
    return Failure(state.pos, f"Expected end of input, but got {state.text[state.offset]}")


eof: Parser[None] = Parser(_eof)
