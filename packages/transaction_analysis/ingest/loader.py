"""Load transaction records from a JSON export.

The file holds a single JSON array of transaction objects keyed by the
camelCase field names of :class:`~transaction_analysis.models.TransactionRecord`.
Records are validated once here; the query engine relies on that.
"""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any

from ..errors import TransactionFileError
from ..logging_setup import get_logger
from ..models import TransactionRecord

_logger = get_logger("transaction_analysis.ingest.loader")


def parse_transactions(payload: Any) -> list[TransactionRecord]:
    """Validate a decoded JSON value into records, preserving order.

    Raises :class:`TransactionFileError` when ``payload`` is not an array and
    the record-level errors of :meth:`TransactionRecord.from_mapping`
    otherwise.
    """

    if not isinstance(payload, list):
        raise TransactionFileError(
            f"expected a JSON array of transactions, got {type(payload).__name__}"
        )
    return [TransactionRecord.from_mapping(item, index=i) for i, item in enumerate(payload)]


def load_transactions(path: str | PathLike[str]) -> list[TransactionRecord]:
    """Read ``path`` and return its transactions in file order."""

    p = Path(path)
    _logger.debug("loading transactions from %s", p)
    try:
        with p.open(encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as e:
        raise TransactionFileError(f"File not found: {p}") from e
    except PermissionError as e:
        raise TransactionFileError(f"Permission denied: {p}") from e
    except IsADirectoryError as e:
        raise TransactionFileError(f"Not a file: {p}") from e
    except UnicodeDecodeError as e:
        raise TransactionFileError(f"File is not valid UTF-8: {p}") from e
    except json.JSONDecodeError as e:
        raise TransactionFileError(
            f"Failed to parse JSON in {p} (line {e.lineno}, column {e.colno}): {e.msg}"
        ) from e

    records = parse_transactions(payload)
    _logger.info("loaded %d transactions from %s", len(records), p.name)
    return records


__all__ = ["load_transactions", "parse_transactions"]
