"""Environment-driven settings for ``transaction_analysis``.

Values are read lazily on every call so a ``.env`` loaded by the CLI (or a
test's ``monkeypatch.setenv``) takes effect without re-importing anything.
"""

from __future__ import annotations

import os
from pathlib import Path

ENV_PREFIX = "TRANSACTION_ANALYSIS_"

DEFAULT_DATA_FILE = "transactions.json"
# Names queried by the report when none are given on the command line.
DEFAULT_REPORT_SENDER = "Aunt Polly"
DEFAULT_REPORT_CLIENT = "Tom Shelby"


def get_env(name: str, default: str | None = None) -> str | None:
    """Return ``TRANSACTION_ANALYSIS_<name>``; blank values count as unset."""

    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def data_path() -> Path:
    """Path of the transactions file (relative paths resolve against CWD)."""
    return Path(get_env("DATA_PATH", DEFAULT_DATA_FILE) or DEFAULT_DATA_FILE)


def report_sender() -> str:
    return get_env("REPORT_SENDER", DEFAULT_REPORT_SENDER) or DEFAULT_REPORT_SENDER


def report_client() -> str:
    return get_env("REPORT_CLIENT", DEFAULT_REPORT_CLIENT) or DEFAULT_REPORT_CLIENT


def log_level_setting() -> str | None:
    return get_env("LOG_LEVEL")


__all__ = [
    "DEFAULT_DATA_FILE",
    "DEFAULT_REPORT_CLIENT",
    "DEFAULT_REPORT_SENDER",
    "data_path",
    "get_env",
    "log_level_setting",
    "report_client",
    "report_sender",
]
