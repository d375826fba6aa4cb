"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer

from mdindex.config import Settings, load_config
from mdindex.core.batch import run_batch
from mdindex.core.errors import ProcessingError
from mdindex.core.export import output_name, record_to_json, write_archive, write_batch, write_record
from mdindex.core.files import discover_files, read_source
from mdindex.core.models import SourceFile
from mdindex.core.parse import check_document, parse_document
from mdindex.log import setup_logging


logger = logging.getLogger(__name__)

LogLevel = Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, or ERROR")]


def _fail(msg: str, cause: Exception = None) -> NoReturn:
    """Echo `Error: msg[: cause]` on stderr and exit 1; the traceback goes to the debug log."""
    if cause is not None:
        logger.debug("%s", msg, exc_info=cause)
        msg = f"{msg}: {cause}"
    typer.echo(f"Error: {msg}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def _collect(paths: list[Path]) -> list[SourceFile]:
    """Read every .md/.mdx file under paths; directory members are named relative to it."""
    sources = []
    for path in paths:
        if not path.exists():
            _fail(f"No such file or directory: {path}")
        for p in discover_files(path):
            name = p.relative_to(path).as_posix() if path.is_dir() else p.name
            try:
                sources.append(read_source(p, name))
            except (OSError, UnicodeDecodeError) as e:
                _fail(f"Cannot read {p}", e)
    return sources


def convert_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown/MDX file to convert")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    indent: Annotated[Optional[int], typer.Option("--indent", help="JSON indent; 0 = compact")] = None,
    stdout: Annotated[bool, typer.Option("--stdout", help="Print JSON instead of writing a file")] = False,
    log_level: LogLevel = None,
    ):
    """Convert a single document to a JSON record."""
    settings = _settings(overrides={"output_dir": out, "indent": indent, "log_level": log_level})
    try:
        src = read_source(path)
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)

    try:
        record = parse_document(src.text)
    except ProcessingError as e:
        _fail(str(e))

    if stdout:
        typer.echo(record_to_json(record, settings.indent))
        return
    out_path = write_record(record, Path(settings.output_dir) / output_name(src.name), settings.indent)
    typer.echo(f"  {path} -> {out_path}")


def batch_cmd(
    paths: Annotated[list[Path], typer.Argument(help="Files or directories to convert")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="json (one file per record) or zip")] = None,
    archive: Annotated[Optional[str], typer.Option("--archive-name", help="Zip file name for --format zip")] = None,
    log_level: LogLevel = None,
    ):
    """Convert many documents; failures are reported per file without stopping the batch."""
    settings = _settings(overrides={
        "output_dir": out, "output_format": fmt, "archive_name": archive, "log_level": log_level,
    })
    sources = _collect(paths)
    if not sources:
        typer.echo("No .md/.mdx files found.")
        raise typer.Exit(1)

    with typer.progressbar(length=len(sources), label="Converting") as bar:
        result = run_batch(sources, on_progress=lambda done, total: bar.update(1))

    for item in result.items:
        if item.status == "success":
            typer.echo(f"  ok: {item.filename}")
        else:
            typer.echo(f"  error: {item.filename}: {item.error}")

    output_dir = Path(settings.output_dir)
    try:
        if settings.output_format == "zip":
            archive_path = output_dir / settings.archive_name
            members = write_archive(result, archive_path, settings.indent)
            typer.echo(f"Wrote {len(members)} record(s) to {archive_path}")
        else:
            written = write_batch(result, output_dir, settings.indent)
            typer.echo(f"Wrote {len(written)} record(s) to {output_dir}/")
    except OSError as e:
        _fail("Write failed", e)

    typer.echo(f"Batch complete - {result.summary()}")
    if result.succeeded == 0:
        raise typer.Exit(1)


def check_cmd(
    paths: Annotated[list[Path], typer.Argument(help="Files or directories to check")],
    log_level: LogLevel = None,
    ):
    """Validate frontmatter only, reporting every file with problems."""
    _settings(overrides={"log_level": log_level})
    sources = _collect(paths)
    if not sources:
        typer.echo("No .md/.mdx files found.")
        raise typer.Exit(1)

    failures = 0
    for src in sources:
        try:
            check_document(src.text)
        except ProcessingError as e:
            failures += 1
            typer.echo(f"  error: {src.name}: {e}")
        else:
            typer.echo(f"  ok: {src.name}")
    typer.echo(f"Checked {len(sources)} document(s) - {failures} with errors")
    if failures:
        raise typer.Exit(1)
