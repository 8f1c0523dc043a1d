"""Read-only queries over a fixed collection of transactions.

:class:`TransactionQueryEngine` takes the records once at construction and
answers aggregate questions about them: totals, maxima, distinct clients,
compliance state, grouping and top-N. Every query is a single pass (or a single
sort) over the stored tuple and never mutates it.
"""

from __future__ import annotations

from collections.abc import Iterator

from .errors import InvalidIssueIdType
from .logging_setup import get_logger
from .models import (
    TransactionRecord,
    Transactions,
    TransactionsByBeneficiary,
    validate_records,
)

_logger = get_logger("transaction_analysis.query")


class TransactionQueryEngine:
    """Answer fixed aggregate queries over an immutable set of transactions.

    ``transactions`` may hold :class:`TransactionRecord` instances or raw
    mappings keyed by the JSON field names; mappings are validated here once.
    """

    def __init__(self, transactions: Transactions) -> None:
        self._records: tuple[TransactionRecord, ...] = validate_records(transactions)
        _logger.debug("query engine ready with %d transactions", len(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TransactionRecord]:
        return iter(self._records)

    @property
    def transactions(self) -> tuple[TransactionRecord, ...]:
        return self._records

    # ------------------ Amounts ------------------

    def total_amount(self) -> float:
        """Sum of all transaction amounts (``0.0`` when empty)."""
        return float(sum(r.amount for r in self._records))

    def total_amount_sent_by(self, sender_name: str) -> float:
        """Sum of amounts sent by ``sender_name`` (exact match)."""
        return float(sum(r.amount for r in self._records if r.sender_full_name == sender_name))

    def max_amount(self) -> float:
        """Highest transaction amount, ``0.0`` for an empty collection."""
        return max((r.amount for r in self._records), default=0.0)

    # ------------------ Clients & compliance ------------------

    def count_unique_clients(self) -> int:
        """Number of distinct names seen as sender or beneficiary."""
        senders = {r.sender_full_name for r in self._records if r.sender_full_name is not None}
        beneficiaries = {
            r.beneficiary_full_name for r in self._records if r.beneficiary_full_name is not None
        }
        return len(senders | beneficiaries)

    def has_open_compliance_issue(self, client_name: str) -> bool:
        """Whether ``client_name`` (as sender or beneficiary) has an unsolved issue."""
        return any(r.issue_open for r in self._records if r.involves(client_name))

    def unsolved_issue_ids(self) -> set[int]:
        """Distinct issue ids of every transaction whose issue is not solved.

        Raises :class:`InvalidIssueIdType` when an unsolved transaction has an
        issue id that is missing or not a number; the whole call fails rather
        than dropping the record.
        """

        ids: set[int] = set()
        for pos, r in enumerate(self._records):
            if r.issue_solved:
                continue
            if not r.has_integer_issue_id:
                raise InvalidIssueIdType(
                    f"Invalid issueId type: {type(r.issue_id).__name__}",
                    index=pos,
                    field="issueId",
                )
            ids.add(r.issue_id)
        return ids

    def all_solved_issue_messages(self) -> list[str | None]:
        """Messages of solved issues in input order, duplicates kept."""
        return [r.issue_message for r in self._records if r.issue_solved]

    # ------------------ Grouping & ranking ------------------

    def transactions_by_beneficiary(self) -> TransactionsByBeneficiary:
        """Group transactions by beneficiary name.

        Records keep their input order inside each group. Transactions without
        a beneficiary are left out.
        """

        groups: TransactionsByBeneficiary = {}
        for r in self._records:
            if r.beneficiary_full_name is None:
                continue
            groups.setdefault(r.beneficiary_full_name, []).append(r)
        return groups

    def top_transactions_by_amount(self, n: int) -> list[TransactionRecord]:
        """The ``n`` largest transactions by amount, descending.

        The sort is stable, so equal amounts keep their input order.
        """

        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        return sorted(self._records, key=lambda r: r.amount, reverse=True)[:n]

    def top3_by_amount(self) -> list[TransactionRecord]:
        return self.top_transactions_by_amount(3)

    def sender_totals(self) -> dict[str, float]:
        """Total amount sent per sender, keyed in order of first appearance."""
        totals: dict[str, float] = {}
        for r in self._records:
            if r.sender_full_name is None:
                continue
            totals[r.sender_full_name] = totals.get(r.sender_full_name, 0.0) + r.amount
        return totals

    def top_sender(self) -> str | None:
        """Sender with the largest total sent amount, ``None`` without senders.

        On equal totals the sender that appears first in the input wins.
        """

        totals = self.sender_totals()
        if not totals:
            return None
        # max() keeps the first maximal key in insertion order.
        return max(totals, key=totals.__getitem__)


__all__ = ["TransactionQueryEngine"]
