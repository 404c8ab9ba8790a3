"""
Batch assembly for aba-ingest.

Groups decoded records into batches. A batch is one header record, the
transaction records that follow it, and the footer record that closes it.

The assembler is a reducer: ``reduce_record(state, kind, record)`` returns
the next ``AssemblerState`` plus the batch the record closed, if any. The
state has two parts:

- ``pending_header``: the most recent header not yet closed by a footer.
  ``None`` means no header is pending (awaiting header); anything else
  means a batch is open.
- ``pending_transactions``: transactions seen since the last footer, in
  file order. Transactions are buffered even when no header is pending.

Transitions:

- header: replaces ``pending_header``. A previous unclosed header is
  dropped without error; buffered transactions are kept.
- transaction: appended to ``pending_transactions``.
- footer: closes a ``Batch`` from the pending header (possibly ``None``),
  a copy of the pending transactions and the footer, and resets the state.

Whatever is still pending when input ends never becomes a batch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from aba_ingest.decoder import Record
from aba_ingest.schema_registry import RecordKind

logger = logging.getLogger(__name__)


@dataclass
class Batch:
    """One header...footer group.

    Attributes:
        header: The header record, or ``None`` when the footer closed
            transactions that had no header.
        transactions: Transaction records in file order.
        footer: The footer record that closed the batch.
    """

    header: Record | None
    transactions: list[Record] = field(default_factory=list)
    footer: Record = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "header": dict(self.header) if self.header is not None else None,
            "transactions": [dict(t) for t in self.transactions],
            "footer": dict(self.footer),
        }


@dataclass
class AssemblerState:
    """Pending records of the batch being assembled. Owned by one parse."""

    pending_header: Record | None = None
    pending_transactions: list[Record] = field(default_factory=list)

    @property
    def in_batch(self) -> bool:
        return self.pending_header is not None

    @property
    def has_pending(self) -> bool:
        return self.pending_header is not None or bool(self.pending_transactions)


def reduce_record(
    state: AssemblerState,
    kind: RecordKind,
    record: Record,
) -> tuple[AssemblerState, Batch | None]:
    """Fold one decoded record into *state*.

    Header and transaction records update *state* in place. A footer hands
    the pending records over to the returned batch and starts a fresh state.

    Returns:
        ``(next_state, batch)`` where *batch* is the batch closed by a
        footer record and ``None`` otherwise.
    """
    if kind is RecordKind.HEADER:
        if state.pending_header is not None:
            logger.debug("Unclosed header superseded by a new header")
        state.pending_header = record
        return state, None

    if kind is RecordKind.TRANSACTION:
        state.pending_transactions.append(record)
        return state, None

    batch = Batch(
        header=state.pending_header,
        transactions=list(state.pending_transactions),
        footer=record,
    )
    if batch.header is None:
        logger.debug("Footer closed a batch with no header")
    return AssemblerState(), batch
