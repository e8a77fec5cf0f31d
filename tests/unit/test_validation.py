"""Unit tests for extraction response validation."""

import json

import pytest

from invoice_renamer.adapters.llm.validation import (
    InvoiceFields,
    json_schema,
    parse_extraction,
    strip_code_fence,
    validate_fields,
)
from invoice_renamer.domain.models import ExtractionResult
from invoice_renamer.ports.extraction import ExtractionError


class TestParseExtraction:
    """Tests for parse_extraction."""

    def test_valid_reply(self) -> None:
        result = parse_extraction('{"issueDate": "250615", "issuerName": "Shell Mazda"}')
        assert result == ExtractionResult(issue_date="250615", issuer_name="Shell Mazda")

    def test_fenced_reply(self) -> None:
        text = '```json\n{"issueDate": "240301", "issuerName": "Orlen"}\n```'
        assert parse_extraction(text).issuer_name == "Orlen"

    def test_text_before_fenced_block(self) -> None:
        text = (
            "Oto wynik:\n```json\n"
            '{"issueDate": "250615", "issuerName": "Shell"}\n```\nPozdrawiam'
        )
        assert parse_extraction(text) == ExtractionResult("250615", "Shell")

    def test_whitespace_trimmed(self) -> None:
        result = parse_extraction('{"issueDate": "240301", "issuerName": "  Orlen  "}')
        assert result.issuer_name == "Orlen"

    @pytest.mark.parametrize("date", ["2506150", "25061", "25-06-15", "", "２５０６１５"])
    def test_rejects_bad_date(self, date: str) -> None:
        with pytest.raises(ExtractionError):
            parse_extraction(json.dumps({"issueDate": date, "issuerName": "Shell"}))

    @pytest.mark.parametrize("name", ["", "   "])
    def test_rejects_empty_issuer(self, name: str) -> None:
        with pytest.raises(ExtractionError):
            parse_extraction(json.dumps({"issueDate": "250615", "issuerName": name}))

    def test_rejects_missing_field(self) -> None:
        with pytest.raises(ExtractionError):
            parse_extraction('{"issueDate": "250615"}')

    def test_rejects_non_json(self) -> None:
        with pytest.raises(ExtractionError, match="Invalid extraction response"):
            parse_extraction("Sorry, I cannot read this invoice.")


class TestStripCodeFence:
    """Tests for strip_code_fence."""

    def test_plain_text_unchanged(self) -> None:
        assert strip_code_fence('{"a": 1}') == '{"a": 1}'

    def test_bare_fence(self) -> None:
        assert strip_code_fence('```\n{"a": 1}\n```') == '{"a": 1}'


class TestValidateFields:
    """Tests for validate_fields."""

    def test_valid_input(self) -> None:
        result = validate_fields({"issueDate": "250615", "issuerName": "Orlen"})
        assert result == ExtractionResult("250615", "Orlen")

    def test_rejects_extra_fields(self) -> None:
        with pytest.raises(ExtractionError):
            validate_fields({"issueDate": "250615", "issuerName": "Orlen", "total": 12})

    def test_rejects_non_mapping(self) -> None:
        with pytest.raises(ExtractionError):
            validate_fields("250615 Orlen")


class TestJsonSchema:
    """Tests for json_schema."""

    def test_generated_from_model(self) -> None:
        assert json_schema() == InvoiceFields.model_json_schema(by_alias=True)

    def test_strict_mode_shape(self) -> None:
        schema = json_schema()
        assert sorted(schema["required"]) == ["issueDate", "issuerName"]
        assert schema["additionalProperties"] is False

    def test_field_constraints_carried(self) -> None:
        properties = json_schema()["properties"]
        assert properties["issueDate"]["pattern"] == "^[0-9]{6}$"
        assert properties["issuerName"]["pattern"] == r"\S"
