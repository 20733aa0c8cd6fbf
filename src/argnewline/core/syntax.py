from bisect import bisect_right
from collections.abc import Iterator

from tree_sitter import Node, Tree
from tree_sitter_language_pack import get_parser

from argnewline.errors import ParseError

LANGUAGE = "go"


def _iter_nodes(root: Node) -> Iterator[Node]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _first_error(root: Node) -> Node | None:
    for node in _iter_nodes(root):
        if node.type == "ERROR" or node.is_missing:
            return node
    return None


class CompilationUnit:
    """One Go source file, its syntax tree and a byte-offset -> line index."""

    def __init__(self, source: bytes, tree: Tree) -> None:
        self.source = source
        self.tree = tree
        self._line_starts = [0]
        offset = source.find(b"\n")
        while offset != -1:
            self._line_starts.append(offset + 1)
            offset = source.find(b"\n", offset + 1)

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def line_of(self, offset: int) -> int:
        """Return the 0-based line number containing byte ``offset``."""
        return bisect_right(self._line_starts, offset) - 1

    def slice(self, start: int, end: int) -> str:
        return self.source[start:end].decode("utf-8")

    def text(self, node: Node) -> str:
        return self.slice(node.start_byte, node.end_byte)

    def walk(self) -> Iterator[Node]:
        """Pre-order, outside-in traversal of every node in the tree."""
        return _iter_nodes(self.root)


def parse_source(source: bytes) -> CompilationUnit:
    try:
        source.decode("utf-8")
    except UnicodeDecodeError as exc:
        line = source.count(b"\n", 0, exc.start) + 1
        column = exc.start - source.rfind(b"\n", 0, exc.start)
        raise ParseError(f"illegal UTF-8 encoding at {line}:{column}", line=line, column=column) from exc

    parser = get_parser(LANGUAGE)
    tree = parser.parse(source)
    root = tree.root_node
    if root.has_error:
        bad = _first_error(root) or root
        row, column = bad.start_point
        what = f"missing {bad.type}" if bad.is_missing else "syntax error"
        raise ParseError(f"{what} at {row + 1}:{column + 1}", line=row + 1, column=column + 1)
    return CompilationUnit(source, tree)
