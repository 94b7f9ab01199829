"""Priority marking of recursive redexes."""

from __future__ import annotations

from collections.abc import Mapping, Set

from .hvm_ast import Book, Net, Ref, Tree, net_trees, tree_children


def dependencies(net: Net) -> set[str]:
    """Names of all definitions referenced anywhere in a net."""
    deps: set[str] = set()
    visit: list[Tree] = list(net_trees(net))
    while visit:
        tree = visit.pop()
        if isinstance(tree, Ref):
            deps.add(tree.nam)
        else:
            visit.extend(tree_children(tree))
    return deps


def cycles(deps: Mapping[str, Set[str]]) -> list[list[str]]:
    """Find the recursion cycles in a dependency graph."""
    found: list[list[str]] = []
    stack: list[str] = []
    visited: set[str] = set()

    def find(nam: str) -> None:
        if nam in stack:
            found.append(stack[stack.index(nam) :])
            return
        if nam in visited:
            return
        visited.add(nam)
        stack.append(nam)
        for dep in sorted(deps.get(nam, ())):
            find(dep)
        stack.pop()

    for nam in deps:
        if nam not in visited:
            find(nam)
    return found


def _prioritise_next(net: Net, nxt: str) -> None:
    def is_next(tree: Tree) -> bool:
        return isinstance(tree, Ref) and tree.nam == nxt

    count = sum(is_next(r.a) + is_next(r.b) for r in net.rbag)
    if count > 1:
        for redex in net.rbag:
            if is_next(redex.a) or is_next(redex.b):
                redex.pri = True


def add_recursive_priority(book: Book) -> None:
    """Mark redexes in recursive cycles with priority, in place."""
    deps = {nam: dependencies(net) for nam, net in book.defs.items()}
    for cycle in cycles(deps):
        for i, nam in enumerate(cycle):
            _prioritise_next(book.defs[nam], cycle[(i + 1) % len(cycle)])