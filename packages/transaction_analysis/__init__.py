"""Public interface for the ``transaction_analysis`` package.

Re-exports the query engine, the record model, the loader and the error types
as the stable import surface. There is no runtime logic here.
"""

from .errors import (
    InvalidIssueIdType,
    MissingFieldError,
    TransactionAnalysisError,
    TransactionDataError,
    TransactionFileError,
)
from .ingest.loader import load_transactions, parse_transactions
from .models import TransactionRecord, Transactions, TransactionsByBeneficiary
from .query import TransactionQueryEngine

__all__ = [
    # Core
    "TransactionQueryEngine",
    "load_transactions",
    "parse_transactions",
    # Models / types
    "TransactionRecord",
    "Transactions",
    "TransactionsByBeneficiary",
    # Errors
    "TransactionAnalysisError",
    "TransactionFileError",
    "TransactionDataError",
    "MissingFieldError",
    "InvalidIssueIdType",
]
