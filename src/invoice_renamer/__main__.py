"""CLI entry point for invoice-renamer."""

import logging
import sys
from pathlib import Path

import click

from .adapters.llm import create_extractor
from .adapters.llm.prompts import build_instructions
from .adapters.storage import FilesystemAdapter
from .config import ConfigurationError, Settings, load_settings
from .domain.models import ProcessingResult
from .domain.services import BatchService, InvoiceProcessor

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_batch_service(settings: Settings) -> BatchService:
    """Wire up adapters for a batch run.

    Raises ConfigurationError before touching the filesystem.
    """
    extractor = create_extractor(settings)
    storage = FilesystemAdapter()
    processor = InvoiceProcessor(
        extractor=extractor,
        storage=storage,
        output_dir=settings.paths.output,
        processed_dir=settings.paths.processed,
    )
    return BatchService(processor=processor, storage=storage, input_dir=settings.paths.input)


def format_result(result: ProcessingResult) -> str:
    name = result.source_path.name
    if result.success and result.extraction and result.output_path:
        return (
            f"✓ {name} -> {result.output_path.name} "
            f"(date: {result.extraction.issue_date}, issuer: {result.extraction.issuer_name})"
        )
    return f"✗ {name}: {'; '.join(result.errors)}"


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("-c", "--config", type=click.Path(exists=True), help="Config file path")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: str | None) -> None:
    """Invoice Renamer - name PDF invoices by issue date and issuer."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config) if config else None


@cli.command()
@click.option("--dry-run", is_flag=True, help="Show what would be processed")
@click.pass_context
def run(ctx: click.Context, dry_run: bool) -> None:
    """Process every PDF in the input directory."""
    settings = load_settings(ctx.obj["config_path"])

    try:
        service = create_batch_service(settings)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    if dry_run:
        service.ensure_dirs()
        invoices = service.collect_invoices()
        click.echo(f"Would process {len(invoices)} files:")
        for p in invoices:
            click.echo(f"  {p.name}")
        return

    # per-file lines come from the service log
    report = service.run()

    if not report.is_empty:
        click.echo(f"Processed: {len(report.succeeded)} success, {len(report.failed)} errors")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def process(ctx: click.Context, file: Path) -> None:
    """Process a single invoice file."""
    settings = load_settings(ctx.obj["config_path"])

    try:
        service = create_batch_service(settings)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    service.ensure_dirs()
    try:
        result = service.processor.process(file)
    except Exception as e:
        logger.exception(f"Failed to process {file.name}: {e}")
        click.echo(f"✗ {file.name}: {e}", err=True)
        sys.exit(1)

    click.echo(format_result(result))


@cli.command()
@click.pass_context
def prompt(ctx: click.Context) -> None:
    """Print the instructions sent with each invoice."""
    settings = load_settings(ctx.obj["config_path"])
    click.echo(build_instructions(settings.prompt_examples))


def main() -> None:
    try:
        cli()
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
