# tests/conftest.py
import pytest

from minparsec.Parsec import Failure, ParseResult, SourcePos, State, Success


def assert_result_eq(res1: ParseResult, res2: ParseResult):
    """
    Deep comparison of two ParseResults.
    """
    if isinstance(res1, Success):
        assert isinstance(res2, Success), "Result mismatch: Success vs Failure"
        assert res1.value == res2.value
        assert res1.state.pos == res2.state.pos
        assert res1.state.remaining == res2.state.remaining
    else:
        assert isinstance(res2, Failure), "Result mismatch: Failure vs Success"
        assert res1.message == res2.message
        assert res1.pos == res2.pos


@pytest.fixture
def initial_state():
    def _make(input_data):
        return State(input_data, 0, SourcePos(1, 1, "test"))

    return _make
