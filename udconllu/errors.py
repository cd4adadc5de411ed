"""Parse errors.

Each kind of malformed input has its own subclass so that callers can tell,
e.g., an unknown UPOS tag apart from a line with the wrong number of
columns."""

from typing import Optional


class Error(Exception):
    """Base class for CoNLL-U parse errors.

    Args:
        message: description of the problem.
        lineno: optional 1-based line number within the input stream.
    """

    message: str
    lineno: Optional[int]

    def __init__(self, message: str, lineno: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.lineno = lineno

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        return f"line {self.lineno}: {self.message}"


class TokenIDError(Error):
    pass


class FieldCountError(Error):
    pass


class UPOSError(Error):
    pass


class FeatureError(Error):
    pass


class DepsError(Error):
    pass
