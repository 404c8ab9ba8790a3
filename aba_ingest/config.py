"""
Parser options and YAML I/O for aba-ingest.

``ParserOptions`` is the whole configuration surface of a parser:

- ``validation``: when True, ``parse()`` validates every batch as it is
  closed and aborts on the first invalid one.
- ``schemas``: ``{discriminant: RecordSchema}`` entries overlaid onto the
  built-in ABA layouts. An entry replaces the built-in schema for the same
  discriminant as a whole.

Options are fixed when a parser is constructed. They can be written by hand
in YAML, for example::

    validation: true
    schemas:
      "7":
        kind: footer
        fields:
          - {name: bsb, range: [1, 8], type: bsb}
          - {name: numberOfTransactions, range: [74, 80], type: integer}
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from aba_ingest.exceptions import SchemaConfigError
from aba_ingest.schema_registry import RecordSchema, check_discriminant

logger = logging.getLogger(__name__)


class ParserOptions(BaseModel):
    """Construction-time options for ``AbaParser``."""

    model_config = ConfigDict(frozen=True)

    validation: bool = Field(
        False, description="Abort parse() on the first batch that fails validation"
    )
    schemas: dict[str, RecordSchema] = Field(
        default_factory=dict,
        description="Schemas overlaid onto the built-in layouts, keyed by discriminant",
    )

    @field_validator("schemas", mode="before")
    @classmethod
    def _single_char_keys(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        normalised: dict[str, Any] = {}
        for key, spec in value.items():
            try:
                normalised[check_discriminant(key)] = spec
            except SchemaConfigError as exc:
                raise ValueError(str(exc)) from exc
        return normalised


def load_options(path: str | Path) -> ParserOptions:
    """Load and validate a parser options YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        SchemaConfigError: If the file is empty.
        pydantic.ValidationError: If the content fails model validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Options file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise SchemaConfigError(f"Options file is empty: {path}")
    logger.info("Loaded parser options from %s", path)
    return ParserOptions.model_validate(raw)


def save_options(options: ParserOptions, path: str | Path) -> None:
    """Serialize ParserOptions to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = options.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# aba-ingest parser options\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved parser options to %s", path)
