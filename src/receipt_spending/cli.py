"""CLI entry point for receipt-spending."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from receipt_spending.config import get_max_workers, get_output_dir, get_receipts_dir
from receipt_spending.extraction import PdfPlumberExtractor
from receipt_spending.pipeline import run_report
from receipt_spending.processor import ReceiptDirectoryError, process_receipt
from receipt_spending.report import ReportWriteError


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Monthly spending totals from receipt PDFs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@cli.command()
@click.option(
    "--receipts-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory of receipt PDFs (default: $RECEIPTS_DIR or ./receipts).",
)
@click.option(
    "--output-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Where results.json and the chart go (default: $OUTPUT_PATH or ./results).",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Documents processed concurrently (default: $RECEIPT_WORKERS or 1).",
)
def report(
    receipts_dir: Path | None, output_dir: Path | None, workers: int | None
) -> None:
    """Process receipts and write the report and chart."""
    try:
        receipts_dir = receipts_dir or get_receipts_dir()
        output_dir = output_dir or get_output_dir()
        workers = workers or get_max_workers()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    try:
        summary = run_report(receipts_dir, output_dir, max_workers=workers)
    except (ReceiptDirectoryError, ReportWriteError) as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Results written to {summary.report_path}")
    if summary.chart_path is not None:
        click.echo(f"Graph saved as {summary.chart_path.name}")
    else:
        click.echo("Graph could not be created, see log for details.")
    click.echo(f"Total: {summary.grand_total}")


@cli.command()
@click.argument("file", type=click.Path(path_type=Path, exists=True, dir_okay=False))
def inspect(file: Path) -> None:
    """Show the record extracted from a single receipt."""
    record = process_receipt(file, PdfPlumberExtractor())
    click.echo(record.model_dump_json(indent=2))
