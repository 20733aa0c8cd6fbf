"""Locate parenthesised lists that are written on a single source line.

Three shapes are recognised in Go sources:

* the parameter list of a function or method declaration,
* the argument list of a call (including type conversions such as ``[]byte(s)``),
* the parameter list of a method declared inside an interface type.

Receiver and result lists are never candidates.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from tree_sitter import Node

from argnewline.core.syntax import CompilationUnit

_INTERFACE_METHODS = frozenset({"method_elem", "method_spec"})
_PARAMETER_GROUPS = frozenset({"parameter_declaration", "variadic_parameter_declaration"})


class CandidateKind(StrEnum):
    DECLARATION = "declaration"
    CALL = "call"
    INTERFACE_METHOD = "interface_method"


@dataclass(frozen=True)
class Element:
    """One entry of a list.

    ``names`` is non-empty for a parameter group such as ``a, b int``; ``type``
    is then the shared type node. A bare element (argument expression, unnamed
    parameter type, comment) only uses ``node``.
    """

    node: Node
    names: tuple[Node, ...] = ()
    type: Node | None = None
    variadic: bool = False

    @property
    def is_comment(self) -> bool:
        return self.node.type == "comment"

    @property
    def start(self) -> int:
        return self.node.start_byte

    @property
    def end(self) -> int:
        return self.node.end_byte


@dataclass(frozen=True)
class Candidate:
    kind: CandidateKind
    open_offset: int
    close_offset: int
    elements: tuple[Element, ...]

    @property
    def start(self) -> int:
        return self.open_offset

    @property
    def end(self) -> int:
        """Exclusive end offset, covering the closing delimiter."""
        return self.close_offset + 1


def _delimiters(node: Node) -> tuple[Node, Node] | None:
    opening = closing = None
    for child in node.children:
        if child.type == "(" and opening is None:
            opening = child
        elif child.type == ")":
            closing = child
    if opening is None or closing is None or opening.is_missing or closing.is_missing:
        return None
    return opening, closing


def _element(node: Node) -> Element:
    if node.type not in _PARAMETER_GROUPS:
        return Element(node)
    names = tuple(node.children_by_field_name("name"))
    variadic = node.type == "variadic_parameter_declaration"
    has_comment = any(child.type == "comment" for child in node.children)
    type_node = node.child_by_field_name("type")
    if has_comment or type_node is None:
        return Element(node)
    return Element(node, names=names, type=type_node, variadic=variadic)


def _candidate(unit: CompilationUnit, kind: CandidateKind, owner: Node, elements: list[Node]) -> Candidate | None:
    delimiters = _delimiters(owner)
    if delimiters is None:
        return None
    opening, closing = delimiters
    if not any(child.type != "comment" for child in elements):
        return None
    if unit.line_of(opening.start_byte) != unit.line_of(closing.start_byte):
        return None
    return Candidate(
        kind=kind,
        open_offset=opening.start_byte,
        close_offset=closing.start_byte,
        elements=tuple(_element(child) for child in elements),
    )


def _list_candidate(unit: CompilationUnit, kind: CandidateKind, list_node: Node | None) -> Candidate | None:
    if list_node is None:
        return None
    return _candidate(unit, kind, list_node, list_node.named_children)


def _conversion_candidate(unit: CompilationUnit, node: Node) -> Candidate | None:
    operand = node.child_by_field_name("operand")
    if operand is None:
        return None
    delimiters = _delimiters(node)
    if delimiters is None:
        return None
    opening, closing = delimiters
    inside = [
        child
        for child in node.named_children
        if child.start_byte > opening.start_byte and child.end_byte <= closing.start_byte
    ]
    return _candidate(unit, CandidateKind.CALL, node, inside)


def candidates_for(unit: CompilationUnit, node: Node) -> Iterator[Candidate]:
    """Yield the candidates owned directly by ``node``."""
    found: Candidate | None = None
    match node.type:
        case "function_declaration" | "method_declaration":
            found = _list_candidate(unit, CandidateKind.DECLARATION, node.child_by_field_name("parameters"))
        case "call_expression":
            found = _list_candidate(unit, CandidateKind.CALL, node.child_by_field_name("arguments"))
        case "type_conversion_expression":
            found = _conversion_candidate(unit, node)
        case "interface_type":
            for method in node.named_children:
                if method.type not in _INTERFACE_METHODS:
                    continue
                candidate = _list_candidate(
                    unit, CandidateKind.INTERFACE_METHOD, method.child_by_field_name("parameters")
                )
                if candidate is not None:
                    yield candidate
    if found is not None:
        yield found


def find_candidates(unit: CompilationUnit) -> Iterator[Candidate]:
    """Walk the whole tree and lazily yield every single-line list candidate."""
    for node in unit.walk():
        yield from candidates_for(unit, node)
