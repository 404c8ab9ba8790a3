"""
aba-ingest: Python library for decoding and validating ABA bank payment files.

An ABA file is fixed-width text. The first character of each line says what
the line is: ``0`` a header (descriptive record), ``1`` a transaction
(detail record), ``7`` a footer (file total record). A header, its
transactions and the footer that follows make up one batch.

Public API surface:

- ``AbaParser(validation=False, schemas=None)`` -- the parser. ``parse()``
  returns the batches in file order; ``validate_batch()`` checks one batch
  against its footer totals and never raises.

- ``parse(content, ...)`` -- one-shot parse of an in-memory string.

- ``parse_file(path, ...)`` -- read a file from disk and parse it.

- ``batches_to_frames()`` / ``export_batches()`` -- tabular views of the
  parsed batches (pandas), optionally written to CSV or Parquet.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from aba_ingest.assembler import Batch
from aba_ingest.coerce import FieldType
from aba_ingest.config import ParserOptions, load_options, save_options
from aba_ingest.exceptions import (
    AbaIngestError,
    ExportError,
    InvalidBatchError,
    SchemaConfigError,
)
from aba_ingest.export import export_batches
from aba_ingest.frames import batches_to_frames
from aba_ingest.parser import AbaParser
from aba_ingest.schema_registry import FieldSpec, RecordKind, RecordSchema
from aba_ingest.validator import ValidationResult
from aba_ingest.validator import validate_batch as _validate_batch

__all__ = [
    "AbaParser",
    "Batch",
    "FieldSpec",
    "FieldType",
    "ParserOptions",
    "RecordKind",
    "RecordSchema",
    "ValidationResult",
    "AbaIngestError",
    "ExportError",
    "InvalidBatchError",
    "SchemaConfigError",
    "parse",
    "parse_file",
    "validate_batch",
    "batches_to_frames",
    "export_batches",
    "load_options",
    "save_options",
]

logger = logging.getLogger(__name__)


def parse(
    content: str,
    validation: bool = False,
    schemas: Mapping[str, RecordSchema | dict] | None = None,
) -> list[Batch]:
    """Parse an ABA string with a throwaway ``AbaParser``.

    Raises:
        InvalidBatchError: If *validation* is True and a batch fails.
    """
    return AbaParser(validation=validation, schemas=schemas).parse(content)


def parse_file(
    path: str | Path,
    validation: bool = False,
    schemas: Mapping[str, RecordSchema | dict] | None = None,
    encoding: str = "latin-1",
) -> list[Batch]:
    """Read an ABA file and parse it.

    ABA is single-byte text; ``latin-1`` decodes any byte, one character per
    column, so column offsets stay aligned even on stray non-ASCII bytes.

    Raises:
        FileNotFoundError: If *path* does not exist.
        InvalidBatchError: If *validation* is True and a batch fails.
    """
    path = Path(path)
    logger.info("parse_file() -- path=%s, validation=%s", path, validation)
    # newline="" keeps \r\n intact; the parser splits on both line endings
    with open(path, "r", encoding=encoding, newline="") as f:
        content = f.read()
    return parse(content, validation=validation, schemas=schemas)


def validate_batch(batch: Batch) -> ValidationResult:
    """Validate one batch against its footer totals. Never raises."""
    return _validate_batch(batch)
