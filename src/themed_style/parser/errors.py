"""Parser error types."""


class ParseError(Exception):
    """Raised when SFC source cannot be split into blocks."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
