"""Removal of definitions unreachable from the entry points."""

from __future__ import annotations

from collections.abc import Iterable

from .hvm_ast import Book, Ref, net_trees, tree_children


def prune_hvm_book(book: Book, entrypoints: Iterable[str]) -> None:
    """Delete, in place, every definition not reachable from the entry points."""
    unvisited = set(book.defs)
    pending = list(entrypoints)
    while pending:
        name = pending.pop()
        if name not in unvisited:
            continue
        unvisited.discard(name)
        trees = list(net_trees(book.defs[name]))
        while trees:
            tree = trees.pop()
            if isinstance(tree, Ref):
                pending.append(tree.nam)
            else:
                trees.extend(tree_children(tree))
    for name in unvisited:
        del book.defs[name]