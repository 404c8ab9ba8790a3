"""
Batch validation for aba-ingest.

Cross-checks a closed batch against the totals its footer (the ABA "file
total record") declares. Checks run in this order and stop at the first
failure:

1. The footer BSB is the ``999999`` sentinel.
2. The footer's ``numberOfTransactions`` equals the number of transactions.
3. The credit total matches. Every transaction whose ``transactionCode``
   is not 13 is a credit.
4. The debit total matches. Transaction code 13 is a debit.

Missing or non-numeric amounts count as 0. Totals are compared in whole
cents so that summing many amounts cannot drift from the footer by a
float rounding error. ``netTotal`` is not checked.

``validate_batch`` never raises; the caller decides what a failed result
means.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from aba_ingest.assembler import Batch
from aba_ingest.decoder import Record

VALID_BATCH = "VALID_BATCH"
INVALID_BATCH = "INVALID_BATCH"

FOOTER_BSB = "999999"
DEBIT_TRANSACTION_CODE = 13


@dataclass(frozen=True)
class ValidationResult:
    success: bool
    code: str
    message: str


def _fail(message: str) -> ValidationResult:
    return ValidationResult(success=False, code=INVALID_BATCH, message=message)


def _as_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


def _to_cents(amount: Any) -> int:
    return round(_as_number(amount) * 100)


def totals_in_cents(transactions: Iterable[Record]) -> tuple[int, int]:
    """Sum transaction amounts into ``(credit_cents, debit_cents)``."""
    credit_cents = 0
    debit_cents = 0
    for transaction in transactions:
        cents = _to_cents(transaction.get("amount"))
        if transaction.get("transactionCode") == DEBIT_TRANSACTION_CODE:
            debit_cents += cents
        else:
            credit_cents += cents
    return credit_cents, debit_cents


def validate_batch(batch: Batch) -> ValidationResult:
    """Check *batch* against its footer totals."""
    footer = batch.footer or {}
    transactions = batch.transactions or []

    if footer.get("bsb") != FOOTER_BSB:
        return _fail("Footer bsb must be always 999999")

    if len(transactions) != footer.get("numberOfTransactions"):
        return _fail("Total transactions count mismatch")

    credit_cents, debit_cents = totals_in_cents(transactions)

    if "creditTotal" not in footer or credit_cents != _to_cents(footer["creditTotal"]):
        return _fail("Batch creditTotal mismatch")

    if "debitTotal" not in footer or debit_cents != _to_cents(footer["debitTotal"]):
        return _fail("Batch debitTotal mismatch")

    return ValidationResult(success=True, code=VALID_BATCH, message="Batch looks valid")
