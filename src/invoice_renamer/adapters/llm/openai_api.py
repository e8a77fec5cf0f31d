"""Extraction adapter using OpenAI API."""

import base64
import logging

from ...domain.models import ExtractionResult
from ...ports.extraction import ExtractionError, ExtractionPort
from .prompts import SYSTEM_PROMPT, build_instructions
from .validation import json_schema, parse_extraction

logger = logging.getLogger(__name__)


class OpenAIAdapter(ExtractionPort):
    """Extraction implementation using OpenAI chat completions with a file part."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4.1-mini",
        max_retries: int = 2,
        max_tokens: int = 1024,
        examples: str | None = None,
    ) -> None:
        from openai import OpenAI

        self.client = OpenAI(api_key=api_key, max_retries=max_retries)
        self.model = model
        self.max_tokens = max_tokens
        self.instructions = build_instructions(examples)

    def extract(self, content: bytes, filename: str) -> ExtractionResult:
        logger.debug(f"Extracting {filename} with OpenAI ({self.model})")

        encoded = base64.b64encode(content).decode("ascii")
        response = self.client.chat.completions.create(
            model=self.model,
            max_completion_tokens=self.max_tokens,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "file",
                            "file": {
                                "filename": filename,
                                "file_data": f"data:application/pdf;base64,{encoded}",
                            },
                        },
                        {"type": "text", "text": self.instructions},
                    ],
                },
            ],
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": "invoice_fields",
                    "strict": True,
                    "schema": json_schema(),
                },
            },
        )

        text = response.choices[0].message.content
        if not text:
            raise ExtractionError(f"Empty response for {filename}")
        return parse_extraction(text)
