"""Extraction adapter using Claude API."""

import base64
import logging

from ...domain.models import ExtractionResult
from ...ports.extraction import ExtractionError, ExtractionPort
from .prompts import SYSTEM_PROMPT, build_instructions
from .validation import json_schema, validate_fields

logger = logging.getLogger(__name__)

TOOL_NAME = "invoice_fields"


class ClaudeAPIAdapter(ExtractionPort):
    """Extraction implementation using Claude API with native PDF input.

    The reply is forced through a tool call so its input follows the schema.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-20250514",
        max_retries: int = 2,
        max_tokens: int = 1024,
        examples: str | None = None,
    ) -> None:
        import anthropic

        self.client = anthropic.Anthropic(api_key=api_key, max_retries=max_retries)
        self.model = model
        self.max_tokens = max_tokens
        self.instructions = build_instructions(examples)

    def extract(self, content: bytes, filename: str) -> ExtractionResult:
        logger.debug(f"Extracting {filename} with Claude API ({self.model})")

        response = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            system=SYSTEM_PROMPT,
            tools=[
                {
                    "name": TOOL_NAME,
                    "description": "Zapisz datę wystawienia i nazwę wystawcy faktury.",
                    "input_schema": json_schema(),
                }
            ],
            tool_choice={"type": "tool", "name": TOOL_NAME},
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "document",
                            "source": {
                                "type": "base64",
                                "media_type": "application/pdf",
                                "data": base64.standard_b64encode(content).decode("ascii"),
                            },
                        },
                        {"type": "text", "text": self.instructions},
                    ],
                },
            ],
        )

        for block in response.content:
            if getattr(block, "type", None) == "tool_use" and block.name == TOOL_NAME:
                return validate_fields(block.input)

        raise ExtractionError(f"No {TOOL_NAME} tool call in response for {filename}")
