"""
Record schema registry for aba-ingest.

Loads record schema YAML files from aba_ingest/schemas/ and provides
structured access via Pydantic models. Each schema defines:
- kind: which role the record plays in a batch (header | transaction | footer)
- fields: ordered column definitions (name, [start, end) range, type)

Schemas are keyed by a single discriminant character, the first character
of every line they apply to. The built-in ABA layouts bind ``'0'`` (header),
``'1'`` (transaction) and ``'7'`` (footer).

A ``SchemaRegistry`` is built once per parser by overlaying user-supplied
schemas onto the built-in defaults. A user entry replaces the default for
its discriminant as a whole; field lists are never merged. Registries are
read-only after construction, so one parser can serve concurrent parses
as long as nobody rebuilds its schema map mid-flight.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from aba_ingest.coerce import FieldType
from aba_ingest.exceptions import SchemaConfigError

logger = logging.getLogger(__name__)

# Directory containing schema YAML files (sibling package)
_SCHEMAS_DIR = Path(__file__).parent / "schemas"

DEFAULT_SCHEMA_FILE = _SCHEMAS_DIR / "aba.yaml"


class RecordKind(str, Enum):
    """Role of a record within a batch."""

    HEADER = "header"
    TRANSACTION = "transaction"
    FOOTER = "footer"


class FieldSpec(BaseModel):
    """A single fixed-width column: where it sits and how to read it.

    ``boundaries`` is a half-open ``[start, end)`` character range and may
    be given as ``range`` in YAML. Ranges of different fields may overlap.
    An unknown ``type`` falls back to ``raw`` rather than failing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    boundaries: tuple[int, int] = Field(..., alias="range")
    type: FieldType = FieldType.STRING

    @field_validator("type", mode="before")
    @classmethod
    def _unknown_type_is_raw(cls, value: Any) -> Any:
        if isinstance(value, FieldType):
            return value
        try:
            return FieldType(value)
        except ValueError:
            logger.warning("Unknown field type %r, reading column as raw", value)
            return FieldType.RAW

    @property
    def start(self) -> int:
        return self.boundaries[0]

    @property
    def end(self) -> int:
        return self.boundaries[1]


class RecordSchema(BaseModel):
    """Layout of one record type."""

    model_config = ConfigDict(frozen=True)

    kind: RecordKind
    fields: tuple[FieldSpec, ...] = ()
    description: str = ""

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]


def check_discriminant(key: Any) -> str:
    """Normalise a schema map key to a single discriminant character.

    YAML reads an unquoted ``0`` as an integer, so integer keys are
    accepted and converted.

    Raises:
        SchemaConfigError: If the key is not exactly one character.
    """
    if isinstance(key, int) and not isinstance(key, bool):
        key = str(key)
    if not isinstance(key, str) or len(key) != 1:
        raise SchemaConfigError(
            f"Schema discriminant must be a single character, got {key!r}"
        )
    return key


def parse_schemas(raw: Mapping[Any, Any]) -> dict[str, RecordSchema]:
    """Convert a raw ``{discriminant: schema}`` mapping into RecordSchema models."""
    result: dict[str, RecordSchema] = {}
    for key, spec in raw.items():
        discriminant = check_discriminant(key)
        if isinstance(spec, RecordSchema):
            result[discriminant] = spec
        elif isinstance(spec, dict):
            result[discriminant] = RecordSchema.model_validate(spec)
        else:
            raise SchemaConfigError(f"Invalid schema spec for '{discriminant}': {spec}")
    return result


def load_schema_file(path: str | Path) -> dict[str, RecordSchema]:
    """Load a ``{discriminant: schema}`` YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        SchemaConfigError: If the file is empty, not a mapping, or has a
            bad discriminant key.
        pydantic.ValidationError: If a schema entry is malformed.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise SchemaConfigError(f"Schema file is empty: {path}")
    if not isinstance(raw, dict):
        raise SchemaConfigError(f"Schema file must contain a mapping: {path}")
    schemas = parse_schemas(raw)
    logger.debug("Loaded %d schema(s) from %s", len(schemas), path)
    return schemas


@lru_cache(maxsize=1)
def default_schemas() -> Mapping[str, RecordSchema]:
    """The built-in ABA schemas, loaded once and never mutated."""
    schemas = load_schema_file(DEFAULT_SCHEMA_FILE)
    logger.info("Loaded %d built-in ABA schemas", len(schemas))
    return MappingProxyType(schemas)


class SchemaRegistry:
    """Immutable ``discriminant -> RecordSchema`` lookup."""

    def __init__(self, schemas: Mapping[str, RecordSchema]) -> None:
        self._schemas: Mapping[str, RecordSchema] = MappingProxyType(dict(schemas))

    @classmethod
    def with_overrides(
        cls, overrides: Mapping[str, RecordSchema] | None = None
    ) -> SchemaRegistry:
        """Overlay *overrides* onto the built-in schemas.

        An override replaces the default entry for its discriminant;
        other defaults are kept.
        """
        merged = dict(default_schemas())
        if overrides:
            for key, schema in parse_schemas(overrides).items():
                if key in merged:
                    logger.debug("Schema for '%s' replaces the built-in %s layout",
                                 key, merged[key].kind.value)
                merged[key] = schema
        return cls(merged)

    def resolve(self, discriminant: str) -> RecordSchema | None:
        """Schema bound to *discriminant*, or ``None`` if there is none."""
        return self._schemas.get(discriminant)

    @property
    def schemas(self) -> Mapping[str, RecordSchema]:
        return self._schemas

    def __contains__(self, discriminant: object) -> bool:
        return discriminant in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def __repr__(self) -> str:
        bound = ", ".join(
            f"{k!r}: {s.kind.value}" for k, s in sorted(self._schemas.items())
        )
        return f"SchemaRegistry({{{bound}}})"
