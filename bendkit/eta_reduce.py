"""Eta-reduction of HVM nets.

Two occurrences of the same combinator whose ports are wired to each other,
``{lab x y} ... {lab x y}``, are replaced by a single wire, and ``(* *)``
collapses to ``*``.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator

from .hvm_ast import Con, Dup, Era, Net, Tree, Var, tree_children

NodeType = tuple

_ERA: NodeType = ("era", 0)
_OTHER: NodeType = ("other", 0)
_HOLE: NodeType = ("hole", 0)


def _walk(tree: Tree, wires: dict[str, int], nodes: list[NodeType]) -> None:
    if isinstance(tree, (Con, Dup)):
        nodes.append(("ctr", 0 if isinstance(tree, Con) else 1))
        _walk(tree.fst, wires, nodes)
        _walk(tree.snd, wires, nodes)
    elif isinstance(tree, Var):
        first = wires.get(tree.nam)
        if first is not None:
            here = len(nodes)
            nodes.append(("var", first - here))
            nodes[first] = ("var", here - first)
        else:
            wires[tree.nam] = len(nodes)
            nodes.append(_HOLE)
    elif isinstance(tree, Era):
        nodes.append(_ERA)
    else:
        nodes.append(_OTHER)
        for child in tree_children(tree):
            _walk(child, wires, nodes)


class _Reducer:
    def __init__(self, nodes: list[NodeType]) -> None:
        self.nodes = nodes
        self.index: Iterator[int] = itertools.count()

    def reduce(self, tree: Tree) -> tuple[Tree, NodeType]:
        idx = next(self.index)
        if isinstance(tree, (Con, Dup)):
            return self._reduce_ctr(tree, idx)
        if tree_children(tree):
            tree.fst, _ = self.reduce(tree.fst)
            tree.snd, _ = self.reduce(tree.snd)
        return tree, self.nodes[idx]

    def _reduce_ctr(self, tree: Con | Dup, idx: int) -> tuple[Tree, NodeType]:
        tree.fst, fst_typ = self.reduce(tree.fst)
        tree.snd, snd_typ = self.reduce(tree.snd)
        if fst_typ[0] == "var" and snd_typ[0] == "var":
            offset = fst_typ[1]
            if offset == snd_typ[1] and self.nodes[idx] == self.nodes[idx + offset]:
                return Var(tree.fst.nam), fst_typ
        elif fst_typ == _ERA and snd_typ == _ERA:
            return Era(), _ERA
        return tree, self.nodes[idx]


def eta_reduce_hvm_net(net: Net) -> None:
    """Eta-reduce a net in place."""
    wires: dict[str, int] = {}
    nodes: list[NodeType] = []
    _walk(net.root, wires, nodes)
    for redex in net.rbag:
        _walk(redex.a, wires, nodes)
        _walk(redex.b, wires, nodes)

    reducer = _Reducer(nodes)
    net.root, _ = reducer.reduce(net.root)
    for redex in net.rbag:
        redex.a, _ = reducer.reduce(redex.a)
        redex.b, _ = reducer.reduce(redex.b)