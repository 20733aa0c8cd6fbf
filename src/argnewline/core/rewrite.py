import logging
from dataclasses import dataclass

from argnewline.core.finder import find_candidates
from argnewline.core.gofmt import Formatter
from argnewline.core.render import build_edits
from argnewline.core.splice import outermost, splice
from argnewline.core.syntax import CompilationUnit, parse_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RewriteResult:
    output: bytes | None
    edit_count: int

    @property
    def changed(self) -> bool:
        return self.output is not None


def expand_unit(unit: CompilationUnit) -> tuple[bytes, int]:
    """Splice every single-line list of ``unit`` open, without formatting.

    Returns the rewritten text and the number of lists that were expanded.
    """
    edits = build_edits(unit, find_candidates(unit))
    logger.debug("Found %d single-line list(s)", len(edits))
    if not edits:
        return unit.source, 0
    return splice(unit.source, outermost(edits)), len(edits)


def rewrite_source(source: bytes, formatter: Formatter) -> RewriteResult:
    """Run the full in-memory pipeline for one file.

    Raises ``ParseError`` for invalid input and ``FormatError`` when the
    formatter rejects the spliced text. ``output`` is ``None`` when nothing
    needs to be written.
    """
    unit = parse_source(source)
    expanded, edit_count = expand_unit(unit)
    if edit_count == 0:
        return RewriteResult(output=None, edit_count=0)
    formatted = formatter(expanded)
    if formatted == source:
        return RewriteResult(output=None, edit_count=edit_count)
    return RewriteResult(output=formatted, edit_count=edit_count)
