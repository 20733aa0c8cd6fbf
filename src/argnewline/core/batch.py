from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from argnewline.core.files import process_file
from argnewline.core.gofmt import Formatter
from argnewline.models import FileReport, RunSummary


def run_batch(
    files: Sequence[Path],
    formatter: Formatter,
    workers: int = 1,
    on_start: Callable[[Path], None] | None = None,
    on_result: Callable[[FileReport], None] | None = None,
) -> RunSummary:
    """Process every file independently and collect one report per file.

    With ``workers > 1`` files are processed on a thread pool; reports are
    still delivered to ``on_result`` in the order of ``files``.
    """
    summary = RunSummary()

    def _process(path: Path) -> FileReport:
        if on_start is not None:
            on_start(path)
        return process_file(path, formatter)

    def _collect(reports: Iterable[FileReport]) -> None:
        for report in reports:
            summary.add(report)
            if on_result is not None:
                on_result(report)

    if workers <= 1 or len(files) <= 1:
        _collect(map(_process, files))
        return summary

    with ThreadPoolExecutor(max_workers=workers) as executor:
        _collect(executor.map(_process, files))
    return summary
