"""Build and render the transaction report.

The report runs every query of :class:`~transaction_analysis.query.TransactionQueryEngine`
exactly once, in a fixed order, and keeps the raw return values. Rendering is
separate so the same report can be printed as labeled text lines or as JSON.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .models import TransactionRecord
from .query import TransactionQueryEngine

NO_TOP_SENDER = "No top sender found."


@dataclass(frozen=True, slots=True)
class ReportEntry:
    """One line of the report: a stable key, a display label and the value."""

    key: str
    label: str
    value: Any


def build_report(
    engine: TransactionQueryEngine, *, sender: str, client: str
) -> list[ReportEntry]:
    """Run each query once and collect the results in report order."""

    return [
        ReportEntry("total_amount", "Total Transaction Amount", engine.total_amount()),
        ReportEntry(
            "total_amount_sent_by",
            f"Total Transaction Amount Sent by {sender}",
            engine.total_amount_sent_by(sender),
        ),
        ReportEntry("max_amount", "Max Transaction Amount", engine.max_amount()),
        ReportEntry("unique_clients", "Count Unique Clients", engine.count_unique_clients()),
        ReportEntry(
            "has_open_compliance_issue",
            f"Has Open Compliance Issues for {client}",
            engine.has_open_compliance_issue(client),
        ),
        ReportEntry(
            "transactions_by_beneficiary",
            "Transactions by Beneficiary Name",
            engine.transactions_by_beneficiary(),
        ),
        ReportEntry("unsolved_issue_ids", "Unsolved Issue IDs", engine.unsolved_issue_ids()),
        ReportEntry(
            "solved_issue_messages",
            "All Solved Issue Messages",
            engine.all_solved_issue_messages(),
        ),
        ReportEntry("top3_by_amount", "Top 3 Transactions by Amount", engine.top3_by_amount()),
        ReportEntry("top_sender", "Top Sender", engine.top_sender()),
    ]


def _jsonable(value: Any) -> Any:
    if isinstance(value, TransactionRecord):
        return value.to_json_dict()
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    if isinstance(value, Mapping):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def _format_text_value(entry: ReportEntry) -> str:
    value = entry.value
    if entry.key == "top_sender" and value is None:
        return NO_TOP_SENDER
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    return json.dumps(_jsonable(value), ensure_ascii=False)


def render_text(report: Sequence[ReportEntry]) -> str:
    """One ``"<label>: <value>"`` line per entry."""
    return "\n".join(f"{e.label}: {_format_text_value(e)}" for e in report)


def render_json(report: Sequence[ReportEntry]) -> str:
    """A JSON object keyed by each entry's ``key``."""
    return json.dumps({e.key: _jsonable(e.value) for e in report}, indent=2, ensure_ascii=False)


__all__ = ["NO_TOP_SENDER", "ReportEntry", "build_report", "render_json", "render_text"]
