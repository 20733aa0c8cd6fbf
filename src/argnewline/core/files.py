import logging
import os
import stat
from pathlib import Path

from argnewline.core.gofmt import Formatter
from argnewline.core.rewrite import rewrite_source
from argnewline.errors import (
    FormatError,
    ParseError,
    PathAccessError,
    ReadError,
    TraversalError,
    WriteError,
)
from argnewline.models import FileReport, FileStatus

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".go"
VENDOR_DIR = "vendor"


def _is_source_file(path: Path) -> bool:
    return path.suffix == SOURCE_SUFFIX


def _raise_traversal_error(exc: OSError) -> None:
    raise TraversalError(f"Error walking directory: {exc}") from exc


def collect_source_files(path: str | Path) -> list[Path]:
    """Resolve the input path into the list of files to process.

    A file is returned as-is. A directory is walked recursively, skipping any
    ``vendor`` subtree, and yields its ``.go`` files in sorted order.
    """
    root = Path(path)
    try:
        info = root.stat()
    except OSError as exc:
        raise PathAccessError(f"Error accessing path: {exc}") from exc
    if not stat.S_ISDIR(info.st_mode):
        return [root]
    if root.name == VENDOR_DIR:
        logger.debug("Skipping vendored tree %s", root)
        return []

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_traversal_error):
        skipped = [name for name in dirnames if name == VENDOR_DIR]
        for name in skipped:
            logger.debug("Skipping vendored tree %s", Path(dirpath) / name)
        dirnames[:] = sorted(name for name in dirnames if name != VENDOR_DIR)
        files.extend(Path(dirpath) / name for name in filenames if _is_source_file(Path(name)))
    return sorted(files)


def read_source(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise ReadError(str(exc)) from exc


def write_source(path: Path, content: bytes) -> None:
    try:
        path.write_bytes(content)
    except OSError as exc:
        raise WriteError(str(exc)) from exc


def process_file(path: Path, formatter: Formatter) -> FileReport:
    """Read, rewrite and write back one file; never raises for per-file errors."""
    report_path = str(path)
    try:
        source = read_source(path)
        result = rewrite_source(source, formatter)
        if result.output is None:
            logger.debug("No single-line lists in %s", path)
            return FileReport(path=report_path, status=FileStatus.UNCHANGED, edits=result.edit_count)
        write_source(path, result.output)
    except ReadError as exc:
        return FileReport(path=report_path, status=FileStatus.READ_ERROR, message=str(exc))
    except ParseError as exc:
        return FileReport(path=report_path, status=FileStatus.PARSE_ERROR, message=str(exc))
    except FormatError as exc:
        return FileReport(path=report_path, status=FileStatus.FORMAT_ERROR, message=str(exc))
    except WriteError as exc:
        return FileReport(path=report_path, status=FileStatus.WRITE_ERROR, message=str(exc))
    return FileReport(path=report_path, status=FileStatus.REWRITTEN, edits=result.edit_count)
