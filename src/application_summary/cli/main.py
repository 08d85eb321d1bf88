"""CLI for application-summary: render / classify / declaration commands."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from application_summary.classifier import classify
from application_summary.core.config import AppSettings, SummaryPDFConfig
from application_summary.core.logging_config import setup_logging
from application_summary.core.startup_checks import validate_settings
from application_summary.declaration import Heading, ListItem, Paragraph, extract
from application_summary.exceptions import SummaryError
from application_summary.formatters.pdf_formatter import PDFFormatter
from application_summary.models import ApplicationRecord
from application_summary.services.summary_service import SummaryService

_BLOCK_KINDS = {Paragraph: "paragraph", Heading: "heading", ListItem: "list item"}

app = typer.Typer(name="application-summary", help="Render submitted applications as summary PDFs")
console = Console()


def _load_record(record_file: Path) -> ApplicationRecord:
    """Load an application record from a JSON file."""
    try:
        raw = json.loads(record_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"{record_file} is not valid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise typer.BadParameter(f"Expected a JSON object in {record_file}")
    try:
        return ApplicationRecord.from_dict(raw)
    except SummaryError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _settings(verbose: bool, logo: Optional[Path], page_size: Optional[str]) -> AppSettings:
    settings = AppSettings()
    if verbose:
        settings.observability.log_level = "DEBUG"
    pdf_overrides: dict = {}
    if logo is not None:
        pdf_overrides["logo_path"] = logo
    if page_size is not None:
        pdf_overrides["page_size"] = page_size
    if pdf_overrides:
        settings.pdf = SummaryPDFConfig(**{**settings.pdf.model_dump(), **pdf_overrides})
    return settings


@app.command()
def render(
    record_file: Path = typer.Argument(..., help="JSON file with the application record"),
    output: Path = typer.Option(..., "--output", "-o", help="Where to write the PDF"),
    logo: Optional[Path] = typer.Option(None, help="Logo image for the header"),
    page_size: Optional[str] = typer.Option(None, "--page-size", help="letter or a4"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render an application record to a summary PDF."""
    settings = _settings(verbose, logo, page_size)
    setup_logging(settings.observability)
    try:
        validate_settings(settings)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc

    record = _load_record(record_file)
    service = SummaryService(PDFFormatter(settings.pdf))
    result = asyncio.run(service.build(record, output))

    if not result.ok:
        console.print(f"[red]Failed:[/red] {result.error}")
        raise typer.Exit(code=1)

    console.print(f"[green]Summary saved to {output}[/green]")
    console.print(
        f"Pages: {result.page_count}, Type: {result.application_type.value}, "
        f"Size: {result.bytes_written} bytes"
    )


@app.command("classify")
def classify_command(
    record_file: Path = typer.Argument(..., help="JSON file with the application record"),
) -> None:
    """Print the application type."""
    console.print(classify(_load_record(record_file)).value)


@app.command()
def declaration(
    record_file: Path = typer.Argument(..., help="JSON file with the application record"),
) -> None:
    """Show the declaration blocks extracted from the record."""
    record = _load_record(record_file)
    try:
        blocks = extract(record.declaration.label)
    except SummaryError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    table = Table(title="Declaration")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Depth")
    table.add_column("Text", max_width=80)
    for block in blocks:
        depth = str(block.depth) if isinstance(block, ListItem) else ""
        table.add_row(_BLOCK_KINDS[type(block)], depth, block.text)
    console.print(table)


if __name__ == "__main__":
    app()
