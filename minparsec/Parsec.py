from dataclasses import dataclass
from typing import Any, Callable, Generic, Tuple, TypeVar, Union

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')

EMPTY_MESSAGE = "Empty parser"


@dataclass(frozen=True)
class SourcePos:
    """Represents the current position in the input stream."""
    line: int = 1
    column: int = 1
    name: str = ""

    def update(self, char: str) -> 'SourcePos':
        """Position after consuming a single character."""
        if char == '\n':
            return SourcePos(self.line + 1, 1, self.name)
        return SourcePos(self.line, self.column + 1, self.name)

    def __str__(self) -> str:
        where = f"line {self.line}, column {self.column}"
        return f"{self.name} {where}" if self.name else where


@dataclass(frozen=True)
class State:
    """Parser state: the whole input, how much of it is consumed, and where we are."""
    text: str
    offset: int
    pos: SourcePos

    @property
    def remaining(self) -> str:
        return self.text[self.offset:]

    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def advance(self) -> 'State':
        # Callers check at_end() first
        char = self.text[self.offset]
        return State(self.text, self.offset + 1, self.pos.update(char))


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    state: State


@dataclass(frozen=True)
class Failure:
    """A parse error anchored at the position where the mismatch was found."""
    pos: SourcePos
    message: str

    def __str__(self) -> str:
        return f"Parse error at {self.pos}: {self.message}"


ParseResult = Union[Success[T], Failure]


class Parser(Generic[T]):
    """A parser: a function from State to ParseResult."""

    def __init__(self, parse_fn: Callable[[State], ParseResult[T]]):
        self.parse_fn = parse_fn

    def parse(self, state: State) -> ParseResult[T]:
        return self.parse_fn(state)

    def __call__(self, state: State) -> ParseResult[T]:
        return self.parse_fn(state)

    # Monadic bind (>>=)
    def bind(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        def parse(state: State) -> ParseResult[U]:
            result = self.parse_fn(state)
            if isinstance(result, Failure):
                return result
            return f(result.value).parse_fn(result.state)
        return Parser(parse)

    # Functor map (<$>)
    def map(self, f: Callable[[T], U]) -> 'Parser[U]':
        def parse(state: State) -> ParseResult[U]:
            result = self.parse_fn(state)
            if isinstance(result, Failure):
                return result
            return Success(f(result.value), result.state)
        return Parser(parse)

    # Applicative apply (<*>), the function parser runs first
    def apply(self, pf: 'Parser[Callable[[T], U]]') -> 'Parser[U]':
        return pf.bind(lambda f: self.map(f))

    def parse_if(self, predicate: Callable[[T], bool], description: str) -> 'Parser[T]':
        """Accept the parsed value only if predicate holds."""
        def parse(state: State) -> ParseResult[T]:
            result = self.parse_fn(state)
            if isinstance(result, Failure):
                return Failure(result.pos, f"Expected {description}, but reached the end of input")
            if predicate(result.value):
                return result
            return Failure(state.pos, f"Expected {description}, but got {result.value}")
        return Parser(parse)

    # Label (<?>)
    def label(self, description: str) -> 'Parser[T]':
        """Replace the message of a failure that did not get past the start position."""
        def parse(state: State) -> ParseResult[T]:
            result = self.parse_fn(state)
            if isinstance(result, Failure) and result.pos == state.pos:
                return Failure(state.pos, f"Expected {description}")
            return result
        return Parser(parse)

    @staticmethod
    def pure(value: U) -> 'Parser[U]':
        """Succeed with value without consuming input."""
        return Parser(lambda state: Success(value, state))

    @staticmethod
    def empty() -> 'Parser[Any]':
        """Always fail at the current position. Identity for choice."""
        return Parser(lambda state: Failure(state.pos, EMPTY_MESSAGE))

    @staticmethod
    def fail(message: str) -> 'Parser[Any]':
        return Parser(lambda state: Failure(state.pos, message))

    # Alternative (<|>)
    def __or__(self, other: 'Parser[T]') -> 'Parser[T]':
        def parse(state: State) -> ParseResult[T]:
            result = self.parse_fn(state)
            if isinstance(result, Failure):
                return other.parse_fn(state)
            return result
        return Parser(parse)

    # Sequence, keeping both values
    def __and__(self, other: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
        return self.bind(lambda a: other.map(lambda b: (a, b)))

    # Sequence (*>)
    def __gt__(self, other: 'Parser[U]') -> 'Parser[U]':
        return self.bind(lambda _: other)

    # Sequence (<*)
    def __lt__(self, other: 'Parser[Any]') -> 'Parser[T]':
        return self.bind(lambda a: other.map(lambda _: a))

    # Monadic bind also available as >>
    def __rshift__(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        return self.bind(f)
