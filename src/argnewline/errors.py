"""Error kinds raised by the reformatter.

Only :class:`PathAccessError` and :class:`TraversalError` abort a run; every
other error is caught at the file boundary and turned into a ``FileReport``.
"""


class ArgnewlineError(Exception):
    """Base class for all reformatter errors."""


class PathAccessError(ArgnewlineError):
    """The input path does not exist or cannot be accessed."""


class TraversalError(ArgnewlineError):
    """Walking the input directory failed."""


class ReadError(ArgnewlineError):
    """A source file could not be read."""


class ParseError(ArgnewlineError):
    """A source file is not syntactically valid."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class FormatError(ArgnewlineError):
    """The canonical formatter rejected the rewritten source."""


class FormatterUnavailableError(FormatError):
    """The canonical formatter executable could not be found."""


class WriteError(ArgnewlineError):
    """The formatted source could not be written back."""


class OverlappingEditsError(ArgnewlineError, ValueError):
    """Two edits passed to the splice engine cover overlapping ranges."""
