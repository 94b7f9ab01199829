"""Syntax tree of the imperative surface language."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union


class Op(enum.Enum):
    """Binary numeric operators."""

    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"
    REM = "REM"
    EQ = "EQ"
    NEQ = "NEQ"
    LT = "LT"
    GT = "GT"
    AND = "AND"
    OR = "OR"
    XOR = "XOR"
    SHL = "SHL"
    SHR = "SHR"
    POW = "POW"
    ATN = "ATN"
    LOG = "LOG"


@dataclass
class CtrField:
    """A constructor field; ``rec`` marks a recursive field."""

    nam: str
    rec: bool = False


# Expressions


@dataclass
class Eraser:
    """``*``"""


@dataclass
class Var:
    """A variable."""

    nam: str


@dataclass
class Chn:
    """An unscoped variable, ``$name``."""

    nam: str


@dataclass
class Num:
    """A numeric literal."""

    val: Union[int, float]


@dataclass
class Call:
    """``fun(args, kwargs)``"""

    fun: Expr
    args: list[Expr] = field(default_factory=list)
    kwargs: list[tuple[str, Expr]] = field(default_factory=list)


@dataclass
class Lam:
    """``lambda names: bod``; each name carries whether it is unscoped."""

    names: list[tuple[str, bool]]
    bod: Expr


@dataclass
class Bin:
    """``lhs op rhs``"""

    op: Op
    lhs: Expr
    rhs: Expr


@dataclass
class Str:
    """A string literal."""

    val: str


@dataclass
class Lst:
    """``[els]``"""

    els: list[Expr] = field(default_factory=list)


@dataclass
class Tup:
    """``(els)``"""

    els: list[Expr] = field(default_factory=list)


@dataclass
class Sup:
    """``{els}``"""

    els: list[Expr] = field(default_factory=list)


@dataclass
class Constructor:
    """``Name { kwargs }``"""

    name: str
    args: list[Expr] = field(default_factory=list)
    kwargs: list[tuple[str, Expr]] = field(default_factory=list)


@dataclass
class Comprehension:
    """``[term for bind in iter if cond]``"""

    term: Expr
    bind: str
    iter: Expr
    cond: Optional[Expr] = None


@dataclass
class MapInit:
    """``{key: value, ...}``"""

    entries: list[tuple[Expr, Expr]] = field(default_factory=list)


@dataclass
class MapGet:
    """``map[key]``"""

    nam: str
    key: Expr


Expr = Union[
    Eraser, Var, Chn, Num, Call, Lam, Bin, Str, Lst, Tup, Sup,
    Constructor, Comprehension, MapInit, MapGet,
]


# Assignment patterns


@dataclass
class PatEraser:
    """``*``"""


@dataclass
class PatVar:
    """A variable binding."""

    nam: str


@dataclass
class PatChn:
    """An unscoped binding, ``$name``."""

    nam: str


@dataclass
class PatTup:
    """``(pats)``"""

    pats: list[AssignPattern] = field(default_factory=list)


@dataclass
class PatSup:
    """``{pats}``"""

    pats: list[AssignPattern] = field(default_factory=list)


@dataclass
class MapSet:
    """``map[key]`` on the left of an assignment."""

    nam: str
    key: Expr


AssignPattern = Union[PatEraser, PatVar, PatChn, PatTup, PatSup, MapSet]


class InPlaceOp(enum.Enum):
    """Operators of in-place assignments such as ``+=``."""

    ADD = "+="
    SUB = "-="
    MUL = "*="
    DIV = "/="
    AND = "&="
    OR = "|="
    XOR = "^="

    def to_lang_op(self) -> Op:
        """The binary operator this in-place operator applies."""
        return Op[self.name]


# Statements


@dataclass
class MatchArm:
    """``case lft: rgt``; ``lft`` is None for ``_``."""

    lft: Optional[str]
    rgt: Stmt


@dataclass
class Assign:
    """``pat = val``"""

    pat: AssignPattern
    val: Expr
    nxt: Optional[Stmt] = None


@dataclass
class InPlace:
    """``var op= val``"""

    op: InPlaceOp
    var: str
    val: Expr
    nxt: Stmt


@dataclass
class If:
    """``if cond: then else: otherwise``"""

    cond: Expr
    then: Stmt
    otherwise: Stmt
    nxt: Optional[Stmt] = None


@dataclass
class Match:
    """``match arg: case ...``"""

    arg: Expr
    bind: Optional[str]
    arms: list[MatchArm]
    nxt: Optional[Stmt] = None


@dataclass
class Switch:
    """``switch arg: case 0 ... case _``"""

    arg: Expr
    bind: Optional[str]
    arms: list[Stmt]
    nxt: Optional[Stmt] = None


@dataclass
class Bend:
    """``bend binds: when cond: step else: base``"""

    bind: list[Optional[str]]
    init: list[Expr]
    cond: Expr
    step: Stmt
    base: Stmt
    nxt: Optional[Stmt] = None


@dataclass
class Fold:
    """``fold arg with ...: case ...``"""

    arg: Expr
    bind: Optional[str]
    with_: list[str]
    arms: list[MatchArm]
    nxt: Optional[Stmt] = None


@dataclass
class Do:
    """``do typ: bod``"""

    typ: str
    bod: Stmt
    nxt: Optional[Stmt] = None


@dataclass
class Ask:
    """``pat <- val``"""

    pat: AssignPattern
    val: Expr
    nxt: Stmt


@dataclass
class Return:
    """``return term``"""

    term: Expr


@dataclass
class Open:
    """``open typ: var``"""

    typ: str
    var: str
    nxt: Stmt


@dataclass
class Use:
    """``use nam = val``"""

    nam: str
    val: Expr
    nxt: Stmt


@dataclass
class ErrStmt:
    """Placeholder for a statement that failed to parse."""


Stmt = Union[Assign, InPlace, If, Match, Switch, Bend, Fold, Do, Ask, Return, Open, Use, ErrStmt]


# Top-level items


@dataclass
class Variant:
    """A constructor with its fields."""

    name: str
    fields: list[CtrField] = field(default_factory=list)


@dataclass
class Definition:
    """``def name(params): body``"""

    name: str
    params: list[str]
    body: Stmt


@dataclass
class EnumDef:
    """``type name: variants``"""

    name: str
    variants: list[Variant] = field(default_factory=list)