"""Detection of mutual recursion between HVM definitions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from .hvm_ast import Book, Con, Ref, Tree, tree_children

_INDENT = " " * 2
_MAX_SHOWN = 5


class Graph:
    """Directed graph of references between definitions, in insertion order."""

    def __init__(self) -> None:
        self._edges: dict[str, dict[str, None]] = {}

    def add(self, ref: str, dependency: str) -> None:
        """Add an edge from ``ref`` to ``dependency``."""
        self._edges.setdefault(ref, {})[dependency] = None
        self._edges.setdefault(dependency, {})

    def get(self, ref: str) -> list[str] | None:
        """The dependencies of ``ref``, or None if it is not in the graph."""
        deps = self._edges.get(ref)
        return None if deps is None else list(deps)

    def cycles(self) -> list[list[str]]:
        """Find the cycles reachable by depth-first search from every node."""
        found: list[list[str]] = []
        visited: set[str] = set()
        stack: list[str] = []
        iters: list[Iterator[str]] = []

        def visit(ref: str) -> None:
            if ref in stack:
                found.append(stack[stack.index(ref) :])
                return
            if ref in visited:
                return
            visited.add(ref)
            stack.append(ref)
            iters.append(iter(list(self._edges.get(ref, ()))))

        for start in self._edges:
            if start in visited:
                continue
            visit(start)
            while iters:
                dep = next(iters[-1], None)
                if dep is None:
                    iters.pop()
                    stack.pop()
                else:
                    visit(dep)
        return found

    @classmethod
    def from_book(cls, book: Book) -> Graph:
        """Build the graph of active references of every definition."""
        graph = cls()
        for ref, net in book.defs.items():
            _collect_refs(ref, net.root, graph)
            for redex in net.rbag:
                if isinstance(redex.a, Ref):
                    graph.add(ref, redex.a.nam)
                if isinstance(redex.b, Ref):
                    graph.add(ref, redex.b.nam)
        return graph

    def __repr__(self) -> str:
        return f"Graph{ {k: list(v) for k, v in self._edges.items()} }"


def _collect_refs(current: str, tree: Tree, graph: Graph) -> None:
    pending: list[Tree] = [tree]
    while pending:
        node = pending.pop()
        if isinstance(node, Ref):
            graph.add(current, node.nam)
        elif isinstance(node, Con):
            pending.append(node.snd)
        else:
            pending.extend(reversed(tree_children(node)))


def combinations_from_merges(cycle: Iterable[str], separator: str) -> list[list[str]]:
    """Expand merged names into every combination of their original names."""
    combinations: list[list[str]] = [[]]
    for ref in cycle:
        left, sep, right = ref.partition(separator)
        if sep:
            combinations = [comb + [part] for comb in combinations for part in (left, right)]
        else:
            for comb in combinations:
                comb.append(ref)
    return combinations


def show_cycles(cycles: Sequence[Sequence[str]], separator: str) -> str:
    """Render at most five cycles, one per line."""
    tail = ""
    if len(cycles) > _MAX_SHOWN:
        tail = f"\n{_INDENT}and {len(cycles) - _MAX_SHOWN} other cycles..."

    expanded = [comb for cycle in cycles for comb in combinations_from_merges(cycle, separator)]
    lines = []
    for cycle in expanded[:_MAX_SHOWN]:
        names = [nam for nam in cycle if "__C" not in nam]
        names.extend(cycle[:1])
        lines.append(f"{_INDENT}* {' -> '.join(names)}")
    return "\n".join(lines) + tail