"""Exception taxonomy for ``transaction_analysis``.

All errors raised by the package derive from :class:`TransactionAnalysisError`
so entrypoints can report them uniformly. Queries never catch these; they
propagate to the caller with no partial result.
"""

from __future__ import annotations


class TransactionAnalysisError(Exception):
    """Base class for all package errors."""


class TransactionFileError(TransactionAnalysisError):
    """The transactions file is missing, unreadable, or not a JSON array."""


class TransactionDataError(TransactionAnalysisError):
    """A transaction record carries content the queries cannot use.

    ``index`` is the 0-based position of the offending record in the input
    collection when known.
    """

    def __init__(self, message: str, *, index: int | None = None, field: str | None = None):
        self.index = index
        self.field = field
        if index is not None:
            message = f"transaction #{index}: {message}"
        super().__init__(message)


class MissingFieldError(TransactionDataError, ValueError):
    """A required field (e.g. ``amount``) is absent or has the wrong type."""


class InvalidIssueIdType(TransactionDataError, TypeError):
    """``issueId`` is neither an integral nor a floating-point number."""


__all__ = [
    "TransactionAnalysisError",
    "TransactionFileError",
    "TransactionDataError",
    "MissingFieldError",
    "InvalidIssueIdType",
]
