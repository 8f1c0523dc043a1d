"""CLI for the ``transaction_analysis`` package.

Exposes a plain command handler (:func:`cmd_report`) and a Typer-based console
interface around it. The root callback loads a local ``.env`` with
``python-dotenv`` and configures logging before any command runs. Query logic
lives in ``transaction_analysis.query``; this module only wires input, output
and exit codes.
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from . import config
from .errors import TransactionAnalysisError
from .logging_setup import configure_logging, get_logger

_logger = get_logger("transaction_analysis.cli")


def cmd_report(
    transactions_path: str | Path,
    *,
    sender: str,
    client: str,
    as_json: bool = False,
) -> int:
    """Load ``transactions_path``, run every query and print the report.

    Writes the report to stdout; errors go to stderr and yield a non-zero
    exit status. No partial report is printed when a query fails.
    """

    from .ingest.loader import load_transactions
    from .query import TransactionQueryEngine
    from .report import build_report, render_json, render_text

    try:
        records = load_transactions(transactions_path)
    except TransactionAnalysisError as e:
        print(f"Error: failed to load transactions: {e}", file=sys.stderr)
        return 1

    engine = TransactionQueryEngine(records)
    try:
        report = build_report(engine, sender=sender, client=client)
    except TransactionAnalysisError as e:
        _logger.debug("report aborted", exc_info=True)
        print(f"Error: report failed: {e}", file=sys.stderr)
        return 1

    print(render_json(report) if as_json else render_text(report))
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Aggregate reports over a JSON export of transactions. "
        "Loads TRANSACTION_ANALYSIS_* settings from a local .env before running."
    ),
)


# Module-level option object so the default is not a call in the signature.
TRANSACTIONS_PATH_OPTION: OptionInfo = typer.Option(
    None,
    "--transactions-path",
    "-f",
    help=(
        "JSON file holding an array of transactions "
        "(default: $TRANSACTION_ANALYSIS_DATA_PATH or ./transactions.json)."
    ),
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)


@app.command("report")
def report_cmd(
    transactions_path: Path | None = TRANSACTIONS_PATH_OPTION,
    *,
    sender: str | None = typer.Option(
        None, help="Sender whose total sent amount is reported (default: Aunt Polly)."
    ),
    client: str | None = typer.Option(
        None, help="Client checked for open compliance issues (default: Tom Shelby)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
) -> None:
    """Print every aggregate query result for the transactions file."""

    code = cmd_report(
        transactions_path if transactions_path is not None else config.data_path(),
        sender=sender if sender is not None else config.report_sender(),
        client=client if client is not None else config.report_client(),
        as_json=as_json,
    )
    if code:
        raise typer.Exit(code)


@app.callback()
def _root(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (falls back to TRANSACTION_ANALYSIS_LOG_LEVEL, then WARNING).",
    ),
) -> None:
    """Root command.

    Loads ``.env`` from the working directory without overriding variables
    that are already set, then configures the package logger.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    try:
        configure_logging(log_level, force=True)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover - exercised via the console script
    main()
