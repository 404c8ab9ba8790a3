"""
Unit tests for the line decoder (aba_ingest.decoder).
"""

from __future__ import annotations

from aba_ingest.decoder import decode_line
from aba_ingest.schema_registry import RecordSchema, default_schemas
from tests.aba_samples import detail_line, header_line, total_line


class TestDecodeBuiltIn:
    """Decoding with the built-in ABA layouts."""

    def test_header(self):
        record = decode_line(header_line(), default_schemas()["0"])
        assert record == {
            "bsb": "123456",
            "account": "12341234",
            "sequenceNumber": 1,
            "bank": "BQL",
            "user": "MY NAME",
            "userNumber": "111111",
            "description": "1004231633",
            "date": "230410",
            "time": "    ",
        }

    def test_transaction(self):
        line = detail_line(1234, indicator="Y", tax_cents=1200)
        record = decode_line(line, default_schemas()["1"])
        assert record == {
            "transactionType": "1",
            "bsb": "123456",
            "account": "157108231",
            "tax": "Y",
            "transactionCode": 53,
            "amount": 12.34,
            "accountTitle": "S R SMITH",
            "reference": "TEST BATCH",
            "traceBsb": "062000",
            "traceAccount": "12223123",
            "remitter": "MY ACCOUNT",
            "taxAmount": 12,
        }

    def test_footer(self):
        record = decode_line(total_line(3129247, 0, 4), default_schemas()["7"])
        assert record == {
            "bsb": "999999",
            "netTotal": 31292.47,
            "creditTotal": 31292.47,
            "debitTotal": 0,
            "numberOfTransactions": 4,
        }


class TestDecodeLenient:
    """Short and malformed lines still decode."""

    def test_short_line(self):
        record = decode_line("7999-999", default_schemas()["7"])
        assert record["bsb"] == "999999"
        assert record["netTotal"] == 0
        assert record["numberOfTransactions"] == 0

    def test_single_character_line(self):
        record = decode_line("0", default_schemas()["0"])
        assert record["bsb"] == ""
        assert record["time"] == ""
        assert record["sequenceNumber"] == 0

    def test_non_numeric_amount(self):
        line = detail_line(0)
        line = line[:20] + "ABCDEFGHIJ" + line[30:]
        assert decode_line(line, default_schemas()["1"])["amount"] == 0


class TestDecodeCustom:
    def test_only_schema_fields_present(self):
        schema = RecordSchema.model_validate({
            "kind": "transaction",
            "fields": [{"name": "code", "range": [18, 20], "type": "integer"}],
        })
        assert decode_line(detail_line(1, code=13), schema) == {"code": 13}

    def test_overlapping_fields(self):
        schema = RecordSchema.model_validate({
            "kind": "header",
            "fields": [
                {"name": "whole", "range": [0, 6], "type": "raw"},
                {"name": "part", "range": [2, 4], "type": "raw"},
            ],
        })
        assert decode_line("abcdefgh", schema) == {"whole": "abcdef", "part": "cd"}

    def test_empty_schema(self):
        schema = RecordSchema.model_validate({"kind": "footer"})
        assert decode_line("7 anything", schema) == {}
