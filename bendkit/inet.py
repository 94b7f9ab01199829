"""Intermediate interaction-net representation and conversion from HVM nets."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Literal, NamedTuple

from .hvm_ast import Con, Dup, Era, Net, Num, Opr, Ref, Swi, Tree, Var


class Port(NamedTuple):
    """A slot of a node: 0 is the main port, 1 and 2 the auxiliary ones."""

    node: int
    slot: int


ROOT = Port(0, 1)
TAG_WIDTH = 4
TAG = 64 - TAG_WIDTH
LABEL_MASK = (1 << TAG) - 1
TAG_MASK = ~LABEL_MASK & ((1 << 64) - 1)


@dataclass(frozen=True, slots=True)
class CtrKind:
    """Kind of a binary combinator, with its optional label."""

    kind: Literal["con", "tup", "dup"]
    lab: int | None = None

    def to_lab(self) -> int:
        """The HVM label of this combinator."""
        if self.kind == "con":
            if self.lab is not None:
                raise ValueError("Tagged lambdas/applications are not supported for hvm32")
            return 0
        if self.kind == "tup":
            if self.lab is not None:
                raise ValueError("Tagged tuples are not supported for hvm32")
            return 0
        if self.lab == 0:
            return 1
        raise ValueError("Tagged dups/sups are not supported for hvm32")


class NodeTag(enum.Enum):
    """The sort of a node."""

    ROT = "rot"
    ERA = "era"
    CTR = "ctr"
    REF = "ref"
    NUM = "num"
    OPR = "opr"
    MAT = "mat"


@dataclass(frozen=True, slots=True)
class NodeKind:
    """A node's sort with its payload: combinator kind, definition name or number."""

    tag: NodeTag
    ctr: CtrKind | None = None
    def_name: str | None = None
    val: int | None = None


@dataclass(slots=True)
class Node:
    """A node with its three ports."""

    main: Port
    aux1: Port
    aux2: Port
    kind: NodeKind

    def port(self, slot: int) -> Port:
        """The port stored at a slot."""
        if slot == 0:
            return self.main
        if slot == 1:
            return self.aux1
        if slot == 2:
            return self.aux2
        raise ValueError(f"invalid slot {slot}")

    def set_port(self, slot: int, port: Port) -> None:
        """Store a port at a slot."""
        if slot == 0:
            self.main = port
        elif slot == 1:
            self.aux1 = port
        elif slot == 2:
            self.aux2 = port
        else:
            raise ValueError(f"invalid slot {slot}")


def _root_node() -> list[Node]:
    return [Node(Port(0, 2), Port(0, 1), Port(0, 0), NodeKind(NodeTag.ROT))]


@dataclass
class INet:
    """A net of nodes with a deadlocked root node at address 0."""

    nodes: list[Node] = field(default_factory=_root_node)

    def new_node(self, kind: NodeKind) -> int:
        """Allocate a node whose ports point to themselves; return its address."""
        idx = len(self.nodes)
        self.nodes.append(Node(Port(idx, 0), Port(idx, 1), Port(idx, 2), kind))
        return idx

    def node(self, node: int) -> Node:
        """The node at an address."""
        return self.nodes[node]

    def enter_port(self, port: Port) -> Port:
        """The port on the other side of the given one."""
        return self.node(port.node).port(port.slot)

    def link(self, a: Port, b: Port) -> None:
        """Connect two ports to each other."""
        self.set(a, b)
        self.set(b, a)

    def set(self, src: Port, dst: Port) -> None:
        """Make ``src`` point to ``dst``."""
        self.nodes[src.node].set_port(src.slot, dst)


@dataclass(slots=True)
class INode:
    """A node whose ports are wire names; equal names are linked."""

    kind: NodeKind
    ports: tuple[str, str, str]


class _Namer:
    def __init__(self) -> None:
        self.count = 0

    def fresh(self) -> str:
        name = f"x{self.count}"
        self.count += 1
        return name


_BINARY_KINDS = {
    Con: NodeKind(NodeTag.CTR, ctr=CtrKind("con")),
    Dup: NodeKind(NodeTag.CTR, ctr=CtrKind("dup", 0)),
    Opr: NodeKind(NodeTag.OPR),
    Swi: NodeKind(NodeTag.MAT),
}


def _tree_to_inodes(tree: Tree, tree_root: str, net_root: str, namer: _Namer) -> list[INode]:
    inodes: list[INode] = []
    subtrees: list[tuple[str, Tree]] = [(tree_root, tree)]

    def subtree_wire(sub: Tree) -> str:
        if isinstance(sub, Var):
            return "_" if sub.nam == net_root else sub.nam
        wire = namer.fresh()
        subtrees.append((wire, sub))
        return wire

    while subtrees:
        root, sub = subtrees.pop()
        if isinstance(sub, (Con, Dup, Opr, Swi)):
            fst = subtree_wire(sub.fst)
            snd = subtree_wire(sub.snd)
            inodes.append(INode(_BINARY_KINDS[type(sub)], (root, fst, snd)))
            continue
        if isinstance(sub, Era):
            kind = NodeKind(NodeTag.ERA)
        elif isinstance(sub, Ref):
            kind = NodeKind(NodeTag.REF, def_name=sub.nam)
        elif isinstance(sub, Num):
            kind = NodeKind(NodeTag.NUM, val=sub.val)
        else:
            raise ValueError(f"unexpected wire at tree position: {sub!r}")
        wire = namer.fresh()
        inodes.append(INode(kind, (root, wire, wire)))
    return inodes


def _hvm_to_inodes(net: Net) -> list[INode]:
    namer = _Namer()
    net_root = net.root.nam if isinstance(net.root, Var) else ""
    inodes: list[INode] = []
    if not isinstance(net.root, Var):
        inodes.extend(_tree_to_inodes(net.root, "_", net_root, namer))
    for i, redex in enumerate(net.rbag):
        tree_root = f"a{i}"
        inodes.extend(_tree_to_inodes(redex.a, tree_root, net_root, namer))
        inodes.extend(_tree_to_inodes(redex.b, tree_root, net_root, namer))
    return inodes


def _inodes_to_inet(inodes: list[INode]) -> INet:
    inet = INet()
    pending: dict[str, Port] = {}
    for inode in inodes:
        node = inet.new_node(inode.kind)
        for slot, name in enumerate(inode.ports):
            port = Port(node, slot)
            if name == "_":
                inet.link(port, ROOT)
            elif name in pending:
                inet.link(port, pending.pop(name))
            else:
                pending[name] = port
    return inet


def hvm_to_net(net: Net) -> INet:
    """Convert an HVM net into an interaction net."""
    return _inodes_to_inet(_hvm_to_inodes(net))