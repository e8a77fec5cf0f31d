"""Domain models."""

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_EXTENSION = ".pdf"


@dataclass(frozen=True)
class ExtractionResult:
    """Fields extracted from an invoice by the LLM."""

    issue_date: str  # YYMMDD
    issuer_name: str


@dataclass
class InvoiceFile:
    """An input file loaded for processing."""

    path: Path
    content: bytes

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def extension(self) -> str:
        return self.path.suffix or DEFAULT_EXTENSION


@dataclass
class ProcessingResult:
    """Result of processing a single invoice."""

    source_path: Path
    extraction: ExtractionResult | None = None
    output_path: Path | None = None
    processed_path: Path | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return len(self.errors) == 0 and self.extraction is not None


@dataclass
class BatchReport:
    """Outcome of one batch run, in processing order."""

    results: list[ProcessingResult] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.results

    @property
    def succeeded(self) -> list[ProcessingResult]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[ProcessingResult]:
        return [r for r in self.results if not r.success]
