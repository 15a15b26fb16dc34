from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from .config import IngestSettings
from .dataset import Dataset
from .errors import InsufficientDataError, UploadRejectedError
from .intents import extract_analysis_intents
from .models import Delimiter
from .profile.summarize import build_summary, write_summary
from .upload import parse_upload
from .utils import dumps_json

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Tabular ingest: adaptive CSV/TSV parsing and profiling")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parsing details to stderr"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load(data: Path, row_limit: Optional[int], delimiter: Optional[str]) -> Dataset:
    settings = IngestSettings.from_env()
    chosen = Delimiter.from_name(delimiter) if delimiter else None
    dataset = parse_upload(
        data.name,
        data.read_bytes(),
        settings=settings,
        row_limit=row_limit,
        delimiter=chosen,
    )
    for issue in dataset.quality.issues:
        logger.info("%s: %s", data.name, issue)
    return dataset


@app.command()
def profile(
    data: Path = typer.Argument(..., exists=True, dir_okay=False, help="Path to a CSV or TSV file"),
    row_limit: Optional[int] = typer.Option(None, "--row-limit", min=1, help="Maximum rows to read"),
    delimiter: Optional[str] = typer.Option(None, "--delimiter", help="comma|semicolon|tab|pipe (default: detect)"),
    out: Optional[Path] = typer.Option(None, "--out", help="Write the summary JSON here instead of stdout"),
    sample_size: int = typer.Option(5, "--samples", min=0, help="Sample records to include"),
):
    """
    Parse a file and print its summary: columns, column profiles, quality
    score and sample records.
    """
    code = 0
    try:
        dataset = _load(data, row_limit, delimiter)
        if out is not None:
            write_summary(dataset, out, sample_size=sample_size)
            typer.echo(f"Summary written: {out}")
        else:
            typer.echo(dumps_json(build_summary(dataset, sample_size=sample_size)))
    except InsufficientDataError as e:
        typer.echo(f"ERROR: {e}", err=True)
        code = 2
    except (UploadRejectedError, ValueError, OSError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        code = 1
    if code:
        raise typer.Exit(code=code)


@app.command()
def export(
    data: Path = typer.Argument(..., exists=True, dir_okay=False, help="Path to a CSV or TSV file"),
    out: Path = typer.Option(..., "--out", help="Destination CSV path"),
    row_limit: Optional[int] = typer.Option(None, "--row-limit", min=1, help="Maximum rows to read"),
    delimiter: Optional[str] = typer.Option(None, "--delimiter", help="comma|semicolon|tab|pipe (default: detect)"),
):
    """
    Parse a file and write the cleaned records as comma-separated CSV with
    the cleaned, de-duplicated header.
    """
    code = 0
    try:
        dataset = _load(data, row_limit, delimiter)
        out.parent.mkdir(parents=True, exist_ok=True)
        dataset.to_frame().to_csv(out, index=False)
        typer.echo(f"Exported {dataset.row_count} row(s) x {len(dataset.columns)} column(s): {out}")
        if dataset.quality.issues:
            typer.echo(f"Quality score: {dataset.quality.score}")
            for issue in dataset.quality.issues:
                typer.echo(f"- {issue}")
    except InsufficientDataError as e:
        typer.echo(f"ERROR: {e}", err=True)
        code = 2
    except (UploadRejectedError, ValueError, OSError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        code = 1
    if code:
        raise typer.Exit(code=code)


@app.command()
def intents(text: str = typer.Argument(..., help="A request such as 'show the sales trend'")):
    """Print the analysis intents detected in a request, one per line."""
    for intent in extract_analysis_intents(text):
        typer.echo(intent)
