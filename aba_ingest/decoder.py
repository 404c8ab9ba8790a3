"""
Line decoder for aba-ingest.

Turns one raw line into a record (``{field name: value}``) using the
columns of its resolved ``RecordSchema``. Decoding cannot fail: columns
past the end of the line come back empty, and malformed numbers become 0.
"""

from __future__ import annotations

from aba_ingest.coerce import FieldValue, coerce, extract_field
from aba_ingest.schema_registry import RecordSchema

Record = dict[str, FieldValue]


def decode_line(line: str, schema: RecordSchema) -> Record:
    """Decode *line* with *schema*.

    Fields are populated in schema order. A field name repeated in the
    schema keeps the value of its last occurrence.
    """
    record: Record = {}
    for field in schema.fields:
        raw = extract_field(line, field.start, field.end)
        record[field.name] = coerce(raw, field.type)
    return record
