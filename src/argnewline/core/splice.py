"""Apply offset-addressed replacements to an immutable source text.

Every :class:`Edit` addresses byte offsets of the *original* text. Edits are
applied right-to-left, so a replacement that changes the text length never
shifts the offsets of an edit that is still pending to its left.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import pairwise

from argnewline.errors import OverlappingEditsError


@dataclass(frozen=True)
class Edit:
    start: int
    end: int
    replacement: str

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid edit range [{self.start}, {self.end})")

    def contains(self, other: "Edit") -> bool:
        return self.start <= other.start and other.end <= self.end

    def shifted(self, delta: int) -> "Edit":
        return Edit(self.start + delta, self.end + delta, self.replacement)


def _sorted(edits: Iterable[Edit]) -> list[Edit]:
    return sorted(edits, key=lambda edit: (edit.start, edit.end))


def splice(source: bytes, edits: Iterable[Edit]) -> bytes:
    """Return ``source`` with every edit applied.

    Raises :class:`OverlappingEditsError` when two edits share any byte;
    adjacent edits (one ending where the next starts) are fine.
    """
    ordered = _sorted(edits)
    if not ordered:
        return source
    for previous, current in pairwise(ordered):
        if current.start < previous.end:
            raise OverlappingEditsError(
                f"Edit [{current.start}, {current.end}) overlaps [{previous.start}, {previous.end})"
            )
    if ordered[-1].end > len(source):
        raise ValueError(f"Edit end {ordered[-1].end} is past the end of the source ({len(source)} bytes)")

    result = bytearray(source)
    for edit in reversed(ordered):
        result[edit.start : edit.end] = edit.replacement.encode("utf-8")
    return bytes(result)


def outermost(edits: Iterable[Edit]) -> list[Edit]:
    """Drop every edit that lies inside another one, keeping start order."""
    kept: list[Edit] = []
    for edit in sorted(edits, key=lambda edit: (edit.start, -edit.end)):
        if kept and kept[-1].contains(edit):
            continue
        kept.append(edit)
    return kept
