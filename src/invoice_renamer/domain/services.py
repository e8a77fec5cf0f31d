"""Domain services - orchestrate business logic."""

import logging
from pathlib import Path

from ..ports.extraction import ExtractionPort
from ..ports.storage import StoragePort
from .models import BatchReport, InvoiceFile, ProcessingResult
from .naming import build_target_filename, resolve_unique_path

logger = logging.getLogger(__name__)


def is_eligible(path: Path) -> bool:
    return path.name.lower().endswith(".pdf")


class InvoiceProcessor:
    """Renames a single invoice based on extracted fields."""

    def __init__(
        self,
        extractor: ExtractionPort,
        storage: StoragePort,
        output_dir: Path,
        processed_dir: Path,
    ) -> None:
        self.extractor = extractor
        self.storage = storage
        self.output_dir = output_dir
        self.processed_dir = processed_dir

    def process(self, path: Path) -> ProcessingResult:
        """Process an invoice through the full pipeline.

        Pipeline:
            1. Read file
            2. LLM extraction (date + issuer)
            3. Build target filename
            4. Write renamed copy to output
            5. Move original to processed

        Errors propagate; the original stays where it was unless step 5 ran.
        """
        result = ProcessingResult(source_path=path)
        logger.debug(f"Processing: {path.name}")

        invoice = InvoiceFile(path=path, content=self.storage.read_bytes(path))

        extraction = self.extractor.extract(invoice.content, invoice.name)
        result.extraction = extraction

        target_name = build_target_filename(
            extraction.issue_date, extraction.issuer_name, invoice.extension
        )
        output_path = resolve_unique_path(self.storage, self.output_dir / target_name)
        self.storage.write_bytes(output_path, invoice.content)
        result.output_path = output_path

        processed_path = resolve_unique_path(self.storage, self.processed_dir / invoice.name)
        result.processed_path = self.storage.move(path, processed_path)

        logger.info(
            f"Processed {invoice.name} -> {output_path.name} "
            f"(date: {extraction.issue_date}, issuer: {extraction.issuer_name})"
        )
        return result


class BatchService:
    """Runs the processor over every invoice in the input directory."""

    def __init__(
        self,
        processor: InvoiceProcessor,
        storage: StoragePort,
        input_dir: Path,
    ) -> None:
        self.processor = processor
        self.storage = storage
        self.input_dir = input_dir

    def ensure_dirs(self) -> None:
        for directory in (self.input_dir, self.processor.output_dir, self.processor.processed_dir):
            self.storage.ensure_dir(directory)

    def collect_invoices(self) -> list[Path]:
        """Collect PDF files directly inside the input directory."""
        return sorted(p for p in self.storage.list_files(self.input_dir) if is_eligible(p))

    def run(self) -> BatchReport:
        """Process all pending invoices one at a time.

        A failing file is logged and left in the input directory.
        """
        self.ensure_dirs()
        report = BatchReport()

        invoices = self.collect_invoices()
        if not invoices:
            logger.info(f"No PDF files in {self.input_dir}, nothing to do")
            return report

        logger.debug(f"Found {len(invoices)} invoice(s) in {self.input_dir}")

        for path in invoices:
            try:
                result = self.processor.process(path)
            except Exception as e:
                logger.error(
                    f"Failed to process {path.name}: {e}",
                    exc_info=logger.isEnabledFor(logging.DEBUG),
                )
                result = ProcessingResult(source_path=path, errors=[str(e) or type(e).__name__])
            report.results.append(result)

        logger.debug(
            f"Batch complete: {len(report.succeeded)} processed, {len(report.failed)} failed"
        )
        return report
