"""Data models and type aliases for ``transaction_analysis``.

Transactions arrive as JSON objects keyed by camelCase field names
(``senderFullName``, ``issueId`` ...). They are validated once into a frozen
:class:`TransactionRecord` so the query layer can rely on plain Python types
instead of re-checking raw values on every query.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .errors import MissingFieldError


class TransactionRecord(BaseModel):
    """A single transaction as found in the transactions file.

    Attributes
    ----------
    amount:
        Transferred amount. Required; integers are accepted and widened to
        ``float``, anything else is rejected.
    sender_full_name / beneficiary_full_name:
        Paying and receiving party. Either may be absent.
    issue_id:
        Compliance issue identifier. Integral numbers are used as-is, finite
        floats are truncated toward zero. Any other value is kept untouched;
        only queries over unsolved issues require an integer here.
    issue_solved:
        ``True`` only when the source value is literally ``true``. Absent or
        any other value means the issue is open.
    issue_message:
        Human readable description of the compliance issue.

    Unknown keys (``mtn``, ``senderAge`` ...) are kept as extra fields,
    unvalidated, so a record dumps back to the shape it was loaded from.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    amount: float = Field(strict=True)
    sender_full_name: str | None = None
    beneficiary_full_name: str | None = None
    issue_id: Any = None
    issue_solved: bool = False
    issue_message: str | None = None

    @field_validator("amount")
    @classmethod
    def _widen_amount(cls, v: float) -> float:
        return float(v)

    @field_validator("issue_id", mode="before")
    @classmethod
    def _coerce_issue_id(cls, v: Any) -> Any:
        # Booleans are ints; leave them (and non-numbers) as given.
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return v
        if isinstance(v, float) and not math.isfinite(v):
            return v
        return int(v)

    @field_validator("issue_solved", mode="before")
    @classmethod
    def _strict_true(cls, v: Any) -> bool:
        return v is True

    @property
    def issue_open(self) -> bool:
        """Whether this record carries an unsolved compliance issue."""
        return not self.issue_solved

    @property
    def has_integer_issue_id(self) -> bool:
        return isinstance(self.issue_id, int) and not isinstance(self.issue_id, bool)

    def involves(self, name: str) -> bool:
        """Return whether ``name`` is the sender or the beneficiary."""
        return name == self.sender_full_name or name == self.beneficiary_full_name

    def to_json_dict(self) -> dict[str, Any]:
        """Dump using the original JSON keys, extras included."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_mapping(cls, raw: Any, *, index: int | None = None) -> TransactionRecord:
        """Validate ``raw`` into a record, translating pydantic errors.

        Raises :class:`MissingFieldError` for any unusable field.
        """

        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, Mapping):
            raise MissingFieldError(
                f"expected a transaction object, got {type(raw).__name__}", index=index
            )
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise _translate_validation_error(exc, index=index) from exc


def _translate_validation_error(exc: ValidationError, *, index: int | None) -> MissingFieldError:
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = first.get("loc") or ()
    field = str(loc[0]) if loc else None
    if first.get("type") == "missing":
        message = f"missing required field {field!r}"
    else:
        message = f"invalid value for {field!r}: {first.get('msg', 'validation failed')}"
    return MissingFieldError(message, index=index, field=field)


def validate_records(items: Iterable[Any]) -> tuple[TransactionRecord, ...]:
    """Validate an iterable of records or raw mappings into an immutable tuple."""

    return tuple(TransactionRecord.from_mapping(item, index=i) for i, item in enumerate(items))


# Generic collections
Transactions: TypeAlias = Iterable[TransactionRecord | Mapping[str, Any]]
"""Anything the query engine accepts: records or raw JSON objects."""

TransactionsByBeneficiary: TypeAlias = dict[str, list[TransactionRecord]]
"""Records grouped by beneficiary name, input order kept within each group."""


__all__ = [
    "TransactionRecord",
    "Transactions",
    "TransactionsByBeneficiary",
    "validate_records",
]
