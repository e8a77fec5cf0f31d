"""Extraction port - interface for LLM-based invoice field extraction."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import ExtractionResult


class ExtractionError(Exception):
    """Raised when the extraction service returns unusable data."""


class ExtractionPort(ABC):
    """Interface for reading issue date and issuer from an invoice PDF."""

    @abstractmethod
    def extract(self, content: bytes, filename: str) -> "ExtractionResult":
        """Extract invoice fields from raw PDF bytes.

        Must either return a valid result or raise; never malformed data.
        """
        pass
