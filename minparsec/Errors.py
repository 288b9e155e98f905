from .Parsec import Failure, SourcePos


class ParseException(ValueError):
    """Raised by parse_string when the input does not match the grammar."""

    def __init__(self, failure: Failure):
        super().__init__(str(failure))
        self.failure = failure

    @property
    def pos(self) -> SourcePos:
        return self.failure.pos

    @property
    def message(self) -> str:
        return self.failure.message
