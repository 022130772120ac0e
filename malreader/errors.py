"""
Reader errors.

Every failure aborts the current read with no partial result. All errors
derive from ReaderError, which is a SyntaxError so callers can treat them
like any other parse failure.
"""

from typing import Optional


class ReaderError(SyntaxError):
    """Base class for all errors raised while reading a form."""

    def __init__(self, message: str, lexeme: Optional[str] = None,
                 column: Optional[int] = None):
        if column is not None:
            message = f"{message} (column {column})"
        super().__init__(message)
        self.lexeme = lexeme
        self.column = column


class LexingFailure(ReaderError):
    """The scanning pattern could not be compiled."""


class IllegalToken(ReaderError):
    """Malformed keyword-shaped token, e.g. ::bad"""


class IllegalString(ReaderError):
    """Unterminated or too-short string literal."""


class IllegalSymbol(ReaderError):
    """Symbol containing a quote character or starting with a digit."""


class IllegalNumber(ReaderError):
    """Integer literal that does not fit the integer width."""


class UnterminatedList(ReaderError):
    """Token stream ran out while a form was still being read."""


class MismatchedDelimiter(ReaderError):
    """A closing bracket does not match the innermost open container."""


class UnexpectedToken(ReaderError):
    """A closing bracket appeared where a form was expected."""


class EmptyInput(ReaderError):
    """The input contained no form at all."""


class NestingTooDeep(ReaderError):
    """Forms are nested deeper than the reader accepts."""
