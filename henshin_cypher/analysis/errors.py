"""Exception classes for analysis matrices."""


class MatrixParseError(Exception):
    """Raised when a conflict or dependency matrix cannot be read."""

    def __init__(self, message: str, line: int | None = None, path: str | None = None):
        self.line = line
        self.path = path
        super().__init__(message)
