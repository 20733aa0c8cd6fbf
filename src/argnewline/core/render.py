from collections.abc import Callable, Iterable

from argnewline.core.finder import Candidate, Element
from argnewline.core.splice import Edit, outermost, splice
from argnewline.core.syntax import CompilationUnit

INDENT = "\t"

# (start, end) byte range of the original text -> text to emit for it
TextSource = Callable[[int, int], str]


def render_element(element: Element, text_of: TextSource) -> str:
    if not element.names or element.type is None:
        return text_of(element.start, element.end)
    names = ", ".join(text_of(name.start_byte, name.end_byte) for name in element.names)
    type_text = text_of(element.type.start_byte, element.type.end_byte)
    if element.variadic:
        return f"{names} ...{type_text}"
    return f"{names} {type_text}"


def render_candidate(candidate: Candidate, text_of: TextSource) -> str:
    """Render ``candidate`` as a parenthesised list with one element per line.

    The result starts with ``(`` and ends with ``)``; every element line ends
    with a trailing comma so the list stays valid Go after the split.
    """
    parts = ["(\n"]
    for element in candidate.elements:
        text = render_element(element, text_of)
        if element.is_comment:
            parts.append(f"{INDENT}{text}\n")
        else:
            parts.append(f"{INDENT}{text},\n")
    parts.append(")")
    return "".join(parts)


def build_edits(unit: CompilationUnit, candidates: Iterable[Candidate]) -> list[Edit]:
    """Render every candidate into an edit against the original text of ``unit``.

    Candidates are rendered innermost first. When an element of an outer list
    contains an inner candidate, its text is the original slice with the inner
    edit already spliced in, so the outer edit carries both expansions.
    """
    edits: list[Edit] = []

    def text_of(start: int, end: int) -> str:
        inner = outermost(edit for edit in edits if start <= edit.start and edit.end <= end)
        if not inner:
            return unit.slice(start, end)
        rebased = [edit.shifted(-start) for edit in inner]
        return splice(unit.source[start:end], rebased).decode("utf-8")

    for candidate in sorted(candidates, key=lambda c: (c.end - c.start, c.start)):
        edits.append(Edit(candidate.start, candidate.end, render_candidate(candidate, text_of)))
    return sorted(edits, key=lambda edit: edit.start)
