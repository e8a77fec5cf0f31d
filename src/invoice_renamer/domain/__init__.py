"""Domain layer - core business logic."""

from .models import BatchReport, ExtractionResult, InvoiceFile, ProcessingResult

__all__ = ["BatchReport", "ExtractionResult", "InvoiceFile", "ProcessingResult"]
