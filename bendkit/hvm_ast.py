"""Interaction-net AST for HVM books, with traversal and display helpers."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

# Number type tags.
_TY_SYM = 0x00
_TY_U24 = 0x01
_TY_I24 = 0x02
_TY_F24 = 0x03

# Operator tags, shared by symbols and partially applied numbers.
_OP_SYMBOLS = {
    0x04: "+",
    0x05: "-",
    0x06: ":-",
    0x07: "*",
    0x08: "/",
    0x09: ":/",
    0x0A: "%",
    0x0B: ":%",
    0x0C: "=",
    0x0D: "!",
    0x0E: "<",
    0x0F: ">",
    0x10: "&",
    0x11: "|",
    0x12: "^",
    0x13: "<<",
    0x14: ":<<",
    0x15: ">>",
    0x16: ":>>",
}


@dataclass(slots=True)
class Var:
    """A named wire."""

    nam: str


@dataclass(slots=True)
class Ref:
    """A reference to a definition."""

    nam: str


@dataclass(slots=True)
class Era:
    """An eraser."""


@dataclass(slots=True)
class Num:
    """A number, holding its raw 32-bit encoding."""

    val: int


@dataclass(slots=True)
class Con:
    """A constructor node."""

    fst: Tree
    snd: Tree


@dataclass(slots=True)
class Dup:
    """A duplicator node."""

    fst: Tree
    snd: Tree


@dataclass(slots=True)
class Opr:
    """A numeric operation node."""

    fst: Tree
    snd: Tree


@dataclass(slots=True)
class Swi:
    """A numeric switch node."""

    fst: Tree
    snd: Tree


Tree = Union[Var, Ref, Era, Num, Con, Dup, Opr, Swi]
BINARY_NODES = (Con, Dup, Opr, Swi)


@dataclass(slots=True)
class Redex:
    """An active pair, with a priority flag."""

    pri: bool
    a: Tree
    b: Tree


@dataclass(slots=True)
class Net:
    """A net: a root tree and a bag of redexes."""

    root: Tree
    rbag: list[Redex] = field(default_factory=list)


@dataclass(slots=True)
class Book:
    """A collection of named nets, in definition order."""

    defs: dict[str, Net] = field(default_factory=dict)


def tree_children(tree: Tree) -> tuple[Tree, ...]:
    """Return the direct subtrees of a tree."""
    if isinstance(tree, BINARY_NODES):
        return (tree.fst, tree.snd)
    return ()


def net_trees(net: Net) -> Iterator[Tree]:
    """Yield the root of a net, then both sides of every redex."""
    yield net.root
    for redex in net.rbag:
        yield redex.a
        yield redex.b


def _typ(numb: int) -> int:
    return numb & 0x1F


def _u24(numb: int) -> int:
    return (numb & 0xFFFFFFFF) >> 5


def _i24(numb: int) -> int:
    shifted = (numb << 3) & 0xFFFFFFFF
    if shifted >= 1 << 31:
        shifted -= 1 << 32
    return shifted >> 8


def _f24(numb: int) -> float:
    bits = (numb << 3) & 0xFFFFFF00
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def _to_f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _format_f32(val: float) -> str:
    """Shortest round-tripping single-precision representation."""
    if val == 0.0:
        return "-0.0" if math.copysign(1.0, val) < 0 else "0.0"
    text = f"{val:.8e}"
    for precision in range(1, 10):
        candidate = f"{val:.{precision - 1}e}"
        try:
            if _to_f32(float(candidate)) == val:
                text = candidate
                break
        except OverflowError:
            continue
    mantissa, exp_text = text.split("e")
    exp = int(exp_text)
    digits = mantissa.replace(".", "").lstrip("-").rstrip("0") or "0"
    sign = "-" if val < 0 else ""
    if -4 <= exp < 16:
        if exp >= 0:
            int_part = digits[: exp + 1].ljust(exp + 1, "0")
            frac_part = digits[exp + 1 :] or "0"
        else:
            int_part = "0"
            frac_part = "0" * (-exp - 1) + digits
        return f"{sign}{int_part}.{frac_part}"
    head = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    return f"{sign}{head}e{exp}"


def display_hvm_numb(numb: int) -> str:
    """Render a raw number, including symbols and partially applied operators."""
    typ = _typ(numb)
    if typ == _TY_SYM:
        sym = (_u24(numb)) & 0xFF
        return f"[{_OP_SYMBOLS.get(sym, '?')}]"
    if typ == _TY_U24:
        return str(_u24(numb))
    if typ == _TY_I24:
        return f"{_i24(numb):+d}"
    if typ == _TY_F24:
        val = _f24(numb)
        if math.isinf(val):
            return "+inf" if val > 0 else "-inf"
        if math.isnan(val):
            return "+NaN"
        return _format_f32(val)
    return f"[{_OP_SYMBOLS.get(typ, '?')}{_u24(numb)}]"


def display_hvm_tree(tree: Tree) -> str:
    """Render a tree in HVM syntax."""
    match tree:
        case Var(nam=nam):
            return nam
        case Ref(nam=nam):
            return f"@{nam}"
        case Era():
            return "*"
        case Num(val=val):
            return display_hvm_numb(val)
        case Con(fst=fst, snd=snd):
            return f"({display_hvm_tree(fst)} {display_hvm_tree(snd)})"
        case Dup(fst=fst, snd=snd):
            return f"{{{display_hvm_tree(fst)} {display_hvm_tree(snd)}}}"
        case Opr(fst=fst, snd=snd):
            return f"$({display_hvm_tree(fst)} {display_hvm_tree(snd)})"
        case Swi(fst=fst, snd=snd):
            return f"?({display_hvm_tree(fst)} {display_hvm_tree(snd)})"
    raise TypeError(f"not an HVM tree: {tree!r}")


def display_hvm_net(net: Net) -> str:
    """Render a net on one line."""
    parts = [display_hvm_tree(net.root)]
    for redex in net.rbag:
        mark = "!" if redex.pri else ""
        parts.append(f" & {mark}{display_hvm_tree(redex.a)} ~ {display_hvm_tree(redex.b)}")
    return "".join(parts)


def display_hvm_book(book: Book) -> str:
    """Render a whole book, one definition per block."""
    lines: list[str] = []
    for nam, net in book.defs.items():
        lines.append(f"@{nam} = {display_hvm_tree(net.root)}\n")
        for redex in net.rbag:
            mark = "!" if redex.pri else " "
            lines.append(f"  &{mark}{display_hvm_tree(redex.a)} ~ {display_hvm_tree(redex.b)}\n")
        lines.append("\n")
    return "".join(lines)