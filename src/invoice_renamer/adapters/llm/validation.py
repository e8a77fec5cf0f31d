"""LLM response validation."""

import logging
import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...domain.models import ExtractionResult
from ...ports.extraction import ExtractionError

logger = logging.getLogger(__name__)

# Models sometimes wrap JSON in a markdown fence despite instructions
_FENCE_PATTERN = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL)


class InvoiceFields(BaseModel):
    """Schema the extraction reply must satisfy."""

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="forbid",
    )

    issue_date: str = Field(
        alias="issueDate",
        pattern=r"^[0-9]{6}$",
        description="Data wystawienia faktury w formacie RRMMDD",
    )
    issuer_name: str = Field(
        alias="issuerName",
        pattern=r"\S",
        description="Przekształcona nazwa wystawcy zgodnie z instrukcjami",
    )


def json_schema() -> dict:
    """JSON schema for structured-output APIs, generated from InvoiceFields."""
    return InvoiceFields.model_json_schema(by_alias=True)


def strip_code_fence(text: str) -> str:
    """Return the first fenced block's body, or the text itself."""
    text = text.strip()
    match = _FENCE_PATTERN.search(text)
    return match.group(1) if match else text


def _to_result(fields: InvoiceFields) -> ExtractionResult:
    return ExtractionResult(issue_date=fields.issue_date, issuer_name=fields.issuer_name)


def parse_extraction(text: str) -> ExtractionResult:
    """Validate a raw JSON reply into an ExtractionResult.

    Raises ExtractionError if the reply is not JSON or violates the schema.
    """
    try:
        fields = InvoiceFields.model_validate_json(strip_code_fence(text))
    except ValidationError as e:
        logger.warning(f"Invalid extraction response: {text[:200]}")
        raise ExtractionError(f"Invalid extraction response: {e}") from e

    return _to_result(fields)


def validate_fields(data: object) -> ExtractionResult:
    """Validate already-decoded structured output (e.g. tool input).

    Raises ExtractionError if the data violates the schema.
    """
    try:
        fields = InvoiceFields.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Invalid extraction response: {str(data)[:200]}")
        raise ExtractionError(f"Invalid extraction response: {e}") from e

    return _to_result(fields)
