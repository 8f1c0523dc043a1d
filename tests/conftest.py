"""Pytest configuration for test isolation.

The CLI reads ``TRANSACTION_ANALYSIS_*`` variables and loads a ``.env`` from
the working directory. A developer's shell or a stray ``.env`` in the checkout
would otherwise change defaults under the tests, so every test runs from its
own temporary directory with those variables cleared.
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest


_ENV_PREFIX = "TRANSACTION_ANALYSIS_"


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in list(os.environ):
        if name.startswith(_ENV_PREFIX):
            monkeypatch.delenv(name)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    yield
    # load_dotenv writes os.environ directly, bypassing monkeypatch.
    for name in list(os.environ):
        if name.startswith(_ENV_PREFIX):
            del os.environ[name]


@pytest.fixture
def example_rows() -> list[dict[str, Any]]:
    """Two transactions: one solved issue sent by A, one open issue sent by B to A."""

    return [
        {
            "senderFullName": "A",
            "beneficiaryFullName": "X",
            "amount": 10,
            "issueSolved": True,
            "issueId": 1,
            "issueMessage": "ok",
        },
        {
            "senderFullName": "B",
            "beneficiaryFullName": "A",
            "amount": 20,
            "issueSolved": False,
            "issueId": 2.0,
        },
    ]


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[Any, str], Path]:
    """Return a helper that dumps ``payload`` to ``tmp_path/<name>``."""

    def _write(payload: Any, name: str = "transactions.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
