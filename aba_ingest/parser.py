"""
ABA parser for aba-ingest.

``AbaParser`` runs the whole decode:

1. Split the text into lines on ``\\n`` or ``\\r\\n``.
2. Resolve each line's schema from its first character. Lines with no
   schema (blank lines, record types nobody bound) are skipped.
3. Decode the line into a record.
4. Fold the record into the batch assembler.
5. When a footer closes a batch and validation is enabled, validate it and
   raise ``InvalidBatchError`` on the first failure.

The parser holds no per-parse state; ``parse()`` may be called any number
of times. Its schema registry is read-only after construction, so parses
may run concurrently on one instance.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Mapping

from aba_ingest.assembler import AssemblerState, Batch, reduce_record
from aba_ingest.config import ParserOptions, load_options
from aba_ingest.decoder import decode_line
from aba_ingest.exceptions import InvalidBatchError
from aba_ingest.schema_registry import RecordSchema, SchemaRegistry
from aba_ingest.validator import ValidationResult, validate_batch

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(content: str) -> list[str]:
    """Split on ``\\n`` / ``\\r\\n`` only. A lone ``\\r`` stays in the line."""
    return _LINE_BREAK.split(content)


class AbaParser:
    """Schema-driven ABA file parser.

    Args:
        validation: If True, ``parse()`` validates each batch as its footer
            is read and aborts on the first invalid batch.
        schemas: ``{discriminant: RecordSchema}`` (or equivalent dicts)
            overlaid onto the built-in layouts. An entry replaces the
            built-in schema for that discriminant entirely.
    """

    def __init__(
        self,
        validation: bool = False,
        schemas: Mapping[str, RecordSchema | dict] | None = None,
    ) -> None:
        self.options = ParserOptions(validation=validation, schemas=dict(schemas or {}))
        self.registry = SchemaRegistry.with_overrides(self.options.schemas)

    @classmethod
    def from_options(cls, options: ParserOptions) -> AbaParser:
        return cls(validation=options.validation, schemas=options.schemas)

    @classmethod
    def from_config(cls, path: str | Path) -> AbaParser:
        """Build a parser from a parser options YAML file."""
        return cls.from_options(load_options(path))

    @property
    def validation(self) -> bool:
        return self.options.validation

    def parse(self, content: str) -> list[Batch]:
        """Decode *content* into batches, in file order.

        Raises:
            InvalidBatchError: Only when validation is enabled, for the
                first batch that fails ``validate_batch``. Lines after
                that footer are not read.
        """
        batches: list[Batch] = []
        state = AssemblerState()
        skipped = 0
        lines = split_lines(content)

        for line_number, line in enumerate(lines, start=1):
            schema = self.registry.resolve(line[:1])
            if schema is None:
                skipped += 1
                continue

            record = decode_line(line, schema)
            state, batch = reduce_record(state, schema.kind, record)
            if batch is None:
                continue

            if self.validation:
                result = validate_batch(batch)
                if not result.success:
                    raise InvalidBatchError(line_number, result, batch)

            batches.append(batch)
            logger.debug(
                "Batch %d closed on line %d (%d transaction(s))",
                len(batches), line_number, len(batch.transactions),
            )

        if state.has_pending:
            logger.debug(
                "Dropped unterminated batch at end of input "
                "(header=%s, %d transaction(s))",
                "yes" if state.in_batch else "no",
                len(state.pending_transactions),
            )

        logger.info(
            "Parsed %d batch(es) from %d line(s), %d line(s) skipped",
            len(batches), len(lines), skipped,
        )
        return batches

    def validate_batch(self, batch: Batch) -> ValidationResult:
        """Validate one batch. Never raises."""
        return validate_batch(batch)

    def validate_all(self, batches: Iterable[Batch]) -> list[ValidationResult]:
        """Validate every batch without stopping at failures."""
        results = [validate_batch(batch) for batch in batches]
        failed = sum(1 for r in results if not r.success)
        if failed:
            logger.warning("%d of %d batch(es) failed validation", failed, len(results))
        return results
