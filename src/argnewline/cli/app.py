import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from argnewline.config import get_log_level, get_worker_count
from argnewline.core.batch import run_batch
from argnewline.core.files import collect_source_files
from argnewline.core.gofmt import Formatter, GofmtFormatter
from argnewline.errors import FormatterUnavailableError, PathAccessError, TraversalError
from argnewline.models import FileReport, FileStatus, RunSummary

app = typer.Typer(
    name="argnewline",
    help="Split single-line Go parameter and argument lists into one element per line.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console(highlight=False, soft_wrap=True)

_ERROR_VERBS = {
    FileStatus.READ_ERROR: "reading",
    FileStatus.PARSE_ERROR: "parsing",
    FileStatus.FORMAT_ERROR: "formatting",
    FileStatus.WRITE_ERROR: "writing",
}


def _get_formatter() -> Formatter:
    formatter = GofmtFormatter()
    formatter.ensure_available()
    return formatter


def _announce(path: Path) -> None:
    console.print(f"processing file: {escape(str(path))}")


def _report(report: FileReport) -> None:
    verb = _ERROR_VERBS.get(report.status)
    if verb is None:
        return
    console.print(f"[red]Error {verb} file {escape(report.path)}:[/red] {escape(report.message or '')}")


def _print_summary(summary: RunSummary) -> None:
    console.print(
        f"{summary.total} file(s): {summary.count(FileStatus.REWRITTEN)} rewritten, "
        f"{summary.count(FileStatus.UNCHANGED)} unchanged, {summary.failed} failed"
    )


@app.command()
def reformat(
    path: Annotated[Path, typer.Argument(help="Go file or directory to rewrite in place.")],
) -> None:
    """Rewrite single-line parameter lists, call arguments and interface methods."""
    logging.basicConfig(level=get_log_level())
    try:
        formatter = _get_formatter()
    except FormatterUnavailableError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    try:
        files = collect_source_files(path)
    except (PathAccessError, TraversalError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    summary = run_batch(
        files,
        formatter,
        workers=get_worker_count(),
        on_start=_announce,
        on_result=_report,
    )
    _print_summary(summary)


def main() -> None:
    app()
