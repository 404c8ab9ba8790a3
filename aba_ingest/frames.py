"""
Tabular views of parsed batches for aba-ingest.

Reconciling a batch file against a ledger is easier on tables than on
nested records, so ``batches_to_frames()`` flattens a list of batches into
four DataFrames:

- ``headers``: one row per batch that has a header.
- ``transactions``: one row per transaction, with its ``position`` within
  the batch.
- ``footers``: one row per batch.
- ``summary``: one row per batch with the transaction count, the credit and
  debit totals recomputed from the transactions, the totals declared by
  the footer, and the ``validate_batch`` verdict.

Every table carries ``batch_index`` (0-based, file order) as its key
column. Record columns follow the schema that decoded them, so custom
schemas produce custom columns.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

import pandas as pd

from aba_ingest.assembler import Batch
from aba_ingest.validator import totals_in_cents, validate_batch

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    "batch_index", "transactions", "credit_total", "debit_total",
    "footer_credit_total", "footer_debit_total", "footer_net_total",
    "footer_transactions", "valid", "code", "message",
]


def _frame(rows: list[dict[str, Any]], key_columns: list[str]) -> pd.DataFrame:
    # An empty list would otherwise produce a frame with no columns at all
    if not rows:
        return pd.DataFrame(columns=key_columns)
    return pd.DataFrame(rows)


def summarize_batch(index: int, batch: Batch) -> dict[str, Any]:
    """Recompute a batch's totals and pair them with its footer's."""
    credit, debit = totals_in_cents(batch.transactions)
    result = validate_batch(batch)
    footer = batch.footer
    return {
        "batch_index": index,
        "transactions": len(batch.transactions),
        "credit_total": credit / 100,
        "debit_total": debit / 100,
        "footer_credit_total": footer.get("creditTotal"),
        "footer_debit_total": footer.get("debitTotal"),
        "footer_net_total": footer.get("netTotal"),
        "footer_transactions": footer.get("numberOfTransactions"),
        "valid": result.success,
        "code": result.code,
        "message": result.message,
    }


def batches_to_frames(batches: Iterable[Batch]) -> dict[str, pd.DataFrame]:
    """Flatten *batches* into ``headers``/``transactions``/``footers``/``summary``."""
    header_rows: list[dict[str, Any]] = []
    transaction_rows: list[dict[str, Any]] = []
    footer_rows: list[dict[str, Any]] = []
    summary_rows: list[dict[str, Any]] = []

    for index, batch in enumerate(batches):
        if batch.header is not None:
            header_rows.append({"batch_index": index, **batch.header})
        for position, transaction in enumerate(batch.transactions):
            transaction_rows.append(
                {"batch_index": index, "position": position, **transaction}
            )
        footer_rows.append({"batch_index": index, **batch.footer})
        summary_rows.append(summarize_batch(index, batch))

    frames = {
        "headers": _frame(header_rows, ["batch_index"]),
        "transactions": _frame(transaction_rows, ["batch_index", "position"]),
        "footers": _frame(footer_rows, ["batch_index"]),
        "summary": pd.DataFrame(summary_rows, columns=SUMMARY_COLUMNS),
    }
    logger.info(
        "Built frames: %d batch(es), %d transaction row(s)",
        len(summary_rows), len(transaction_rows),
    )
    return frames
