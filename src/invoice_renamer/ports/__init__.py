"""Ports - interfaces for external dependencies."""

from .extraction import ExtractionError, ExtractionPort
from .storage import StoragePort

__all__ = ["ExtractionError", "ExtractionPort", "StoragePort"]
