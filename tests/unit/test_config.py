"""
Unit tests for parser options and YAML I/O (aba_ingest.config).
"""

import pytest
from pydantic import ValidationError

from aba_ingest.config import ParserOptions, load_options, save_options
from aba_ingest.exceptions import SchemaConfigError
from aba_ingest.parser import AbaParser
from aba_ingest.schema_registry import RecordKind, RecordSchema

OPTIONS_YAML = """\
validation: true
schemas:
  "7":
    kind: footer
    fields:
      - {name: bsb, range: [1, 8], type: bsb}
      - {name: numberOfTransactions, range: [74, 80], type: integer}
"""


class TestParserOptions:
    def test_defaults(self):
        options = ParserOptions()
        assert options.validation is False
        assert options.schemas == {}

    def test_schema_dicts_become_models(self):
        options = ParserOptions(schemas={"5": {"kind": "header"}})
        assert isinstance(options.schemas["5"], RecordSchema)

    def test_int_discriminant_normalised(self):
        options = ParserOptions.model_validate({"schemas": {7: {"kind": "footer"}}})
        assert "7" in options.schemas

    def test_multi_char_discriminant_rejected(self):
        with pytest.raises(ValidationError, match="single character"):
            ParserOptions(schemas={"70": {"kind": "footer"}})

    def test_invalid_kind_rejected(self):
        with pytest.raises(ValidationError):
            ParserOptions(schemas={"7": {"kind": "total"}})

    def test_frozen(self):
        options = ParserOptions()
        with pytest.raises(ValidationError):
            options.validation = True


class TestLoadSaveOptions:
    def test_load(self, tmp_path):
        f = tmp_path / "options.yaml"
        f.write_text(OPTIONS_YAML, encoding="utf-8")
        options = load_options(f)
        assert options.validation is True
        assert options.schemas["7"].kind is RecordKind.FOOTER
        assert options.schemas["7"].fields[1].boundaries == (74, 80)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_options(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        f = tmp_path / "options.yaml"
        f.write_text("", encoding="utf-8")
        with pytest.raises(SchemaConfigError, match="empty"):
            load_options(f)

    def test_round_trip(self, tmp_path):
        f = tmp_path / "options.yaml"
        f.write_text(OPTIONS_YAML, encoding="utf-8")
        original = load_options(f)

        out = tmp_path / "nested" / "saved.yaml"
        save_options(original, out)
        assert out.read_text(encoding="utf-8").startswith("# aba-ingest parser options")
        assert load_options(out) == original

    def test_parser_from_config(self, tmp_path):
        f = tmp_path / "options.yaml"
        f.write_text(OPTIONS_YAML, encoding="utf-8")
        parser = AbaParser.from_config(f)
        assert parser.validation is True
        assert parser.registry.resolve("7").field_names == ["bsb", "numberOfTransactions"]
        assert parser.registry.resolve("0") is not None
