"""Parser error types."""


class ParseError(Exception):
    """Raised when document markup cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class ConditionError(ParseError):
    """Raised when ``@media`` or ``@supports`` condition text is malformed."""

    def __init__(self, message: str, condition: str, column: int | None = None):
        self.condition = condition
        super().__init__(message, line=1 if column is not None else None, column=column)
