from __future__ import annotations

from pathlib import Path

import pytest

from transaction_analysis import (
    InvalidIssueIdType,
    MissingFieldError,
    TransactionFileError,
    TransactionQueryEngine,
    TransactionRecord,
    load_transactions,
    parse_transactions,
)


def test_load_transactions_preserves_file_order(write_json, example_rows):
    path = write_json(example_rows)

    records = load_transactions(path)

    assert [r.sender_full_name for r in records] == ["A", "B"]
    assert all(isinstance(r, TransactionRecord) for r in records)
    assert records[1].issue_id == 2


def test_load_transactions_accepts_str_path(write_json):
    path = write_json([{"amount": 1.0}])

    assert len(load_transactions(str(path))) == 1


def test_empty_array_loads_no_records(write_json):
    assert load_transactions(write_json([])) == []


def test_missing_file(tmp_path: Path):
    with pytest.raises(TransactionFileError, match="File not found"):
        load_transactions(tmp_path / "nope.json")


def test_directory_is_not_a_file(tmp_path: Path):
    with pytest.raises(TransactionFileError):
        load_transactions(tmp_path)


def test_malformed_json(tmp_path: Path):
    path = tmp_path / "broken.json"
    path.write_text('[{"amount": 1.0,', encoding="utf-8")

    with pytest.raises(TransactionFileError, match="Failed to parse JSON"):
        load_transactions(path)


def test_top_level_must_be_an_array(write_json):
    path = write_json({"transactions": []})

    with pytest.raises(TransactionFileError, match="expected a JSON array"):
        load_transactions(path)


def test_record_errors_carry_their_index(write_json):
    path = write_json([{"amount": 1.0}, {"senderFullName": "A"}])

    with pytest.raises(MissingFieldError) as exc:
        load_transactions(path)
    assert exc.value.index == 1
    assert exc.value.field == "amount"


def test_text_issue_id_loads_and_fails_only_the_unsolved_query():
    records = parse_transactions(
        [
            {"amount": 1.0, "issueSolved": True, "issueId": "X-1"},
            {"amount": 2.0, "issueSolved": False, "issueId": "X-2"},
        ]
    )
    engine = TransactionQueryEngine(records)

    assert [r.issue_id for r in records] == ["X-1", "X-2"]
    assert engine.total_amount() == 3.0
    with pytest.raises(InvalidIssueIdType) as exc:
        engine.unsolved_issue_ids()
    assert exc.value.index == 1


def test_sample_file_shape(write_json):
    rows = [
        {
            "mtn": 1284564,
            "amount": 150.2,
            "senderFullName": "Tom Shelby",
            "senderAge": 22,
            "beneficiaryFullName": "Arthur Shelby",
            "beneficiaryAge": 60,
            "issueId": 2,
            "issueSolved": True,
            "issueMessage": "Never gonna give you up",
        },
        {
            "mtn": 96132456,
            "amount": 67.0,
            "senderFullName": "Aunt Polly",
            "senderAge": 34,
            "beneficiaryFullName": "Aberama Gold",
            "beneficiaryAge": 58,
            "issueId": None,
            "issueSolved": True,
            "issueMessage": None,
        },
    ]

    records = load_transactions(write_json(rows))

    assert [r.to_json_dict() for r in records] == rows
