"""
Custom exception hierarchy for aba-ingest.

Only one condition is fatal while decoding an ABA file: a batch that fails
validation while the parser was built with ``validation=True``. Everything
else (unknown record types, malformed numeric columns, unterminated
batches) degrades silently. The remaining exceptions cover configuration
and export, which sit outside the decoding loop.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aba_ingest.assembler import Batch
    from aba_ingest.validator import ValidationResult


class AbaIngestError(Exception):
    """Base exception for all aba-ingest errors."""


class InvalidBatchError(AbaIngestError):
    """Raised by ``AbaParser.parse()`` when a batch fails validation.

    Attributes:
        line_number: 1-based line number of the footer that closed the
            offending batch.
        result: The failing ``ValidationResult``.
        batch: The batch that failed.
    """

    def __init__(
        self,
        line_number: int,
        result: ValidationResult,
        batch: Batch | None = None,
    ) -> None:
        self.line_number = line_number
        self.result = result
        self.batch = batch
        super().__init__(
            f"Invalid batch, batch ended on line: {line_number}, "
            f"message: {result.message}"
        )


class SchemaConfigError(AbaIngestError):
    """Raised when a schema or parser options file cannot be used.

    This can happen if:
    - A discriminant key is not exactly one character.
    - The YAML file is empty or not a mapping.
    """


class ExportError(AbaIngestError):
    """Raised when the exporter fails to write output files.

    For example, permission errors, disk full, or unsupported format.
    """
