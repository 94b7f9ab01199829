"""Inlining of definitions whose net is a single leaf."""

from __future__ import annotations

import copy

from .hvm_ast import BINARY_NODES, Book, Net, Ref, Tree, tree_children


class InlineError(Exception):
    """Raised when inlinable definitions reference each other in a cycle."""


def should_inline(net: Net) -> bool:
    """A net is inlined when it has no redexes and its root is a leaf."""
    return not net.rbag and not tree_children(net.root)


def _collect_inlinees(book: Book) -> dict[str, Tree]:
    inlinees: dict[str, Tree] = {}
    for name, net in book.defs.items():
        if not should_inline(net):
            continue
        hare: Tree = net.root
        tortoise: Tree = net.root
        parity = False
        while isinstance(hare, Ref):
            nam = hare.nam
            target = book.defs.get(nam)
            if target is None or not should_inline(target):
                break
            hare = target.root
            if parity:
                if tortoise.nam == nam:
                    raise InlineError(f"infinite reference cycle in `@{nam}`")
                tortoise = book.defs[tortoise.nam].root
            parity = not parity
        inlinees[name] = copy.deepcopy(hare)
    return inlinees


def _inline_into(tree: Tree, inlinees: dict[str, Tree]) -> tuple[Tree, bool]:
    if isinstance(tree, Ref):
        inlined = inlinees.get(tree.nam)
        if inlined is None:
            return tree, False
        return copy.deepcopy(inlined), True
    if isinstance(tree, BINARY_NODES):
        tree.fst, fst_changed = _inline_into(tree.fst, inlinees)
        tree.snd, snd_changed = _inline_into(tree.snd, inlinees)
        return tree, fst_changed or snd_changed
    return tree, False


def inline_hvm_book(book: Book) -> set[str]:
    """Inline leaf definitions in place; return the names of changed definitions."""
    inlinees = _collect_inlinees(book)
    changed: set[str] = set()
    for name, net in book.defs.items():
        net.root, inlined = _inline_into(net.root, inlinees)
        for redex in net.rbag:
            redex.a, a_changed = _inline_into(redex.a, inlinees)
            redex.b, b_changed = _inline_into(redex.b, inlinees)
            inlined = inlined or a_changed or b_changed
        if inlined:
            changed.add(name)
    return changed