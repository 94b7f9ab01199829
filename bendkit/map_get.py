"""Lowering of map reads (``map[key]``) into explicit ``Map/get`` calls."""

from __future__ import annotations

import itertools
from collections.abc import Iterator

from .imp_ast import (
    Ask,
    Assign,
    Bend,
    Bin,
    Call,
    Chn,
    Comprehension,
    Constructor,
    Definition,
    Do,
    Eraser,
    ErrStmt,
    Expr,
    Fold,
    If,
    InPlace,
    Lam,
    Lst,
    MapGet,
    MapInit,
    MapSet,
    Match,
    Num,
    Open,
    PatTup,
    PatVar,
    Return,
    Stmt,
    Str,
    Sup,
    Switch,
    Tup,
    Use,
    Var,
)

# (fresh variable, map variable, key expression)
Substitution = tuple[str, str, Expr]

_MAP_GET_FN = "Map/get"


def _fresh_name(ids: Iterator[int]) -> str:
    return f"map/get%{next(ids)}"


def substitute_map_gets(expr: Expr, ids: Iterator[int]) -> tuple[Expr, list[Substitution]]:
    """Replace every map read in ``expr`` with a fresh variable.

    Returns the rewritten expression and, in order, the reads that were replaced.
    """
    substitutions: list[Substitution] = []

    def go(e: Expr) -> Expr:
        match e:
            case MapGet(nam=nam, key=key):
                key = go(key)
                new_var = _fresh_name(ids)
                substitutions.append((new_var, nam, key))
                return Var(new_var)
            case Call():
                e.fun = go(e.fun)
                e.args = [go(arg) for arg in e.args]
                e.kwargs = [(name, go(arg)) for name, arg in e.kwargs]
            case Lam():
                e.bod = go(e.bod)
            case Bin():
                e.lhs = go(e.lhs)
                e.rhs = go(e.rhs)
            case Lst() | Tup() | Sup():
                e.els = [go(el) for el in e.els]
            case Constructor():
                e.kwargs = [(name, go(arg)) for name, arg in e.kwargs]
            case Comprehension():
                e.term = go(e.term)
                e.iter = go(e.iter)
                if e.cond is not None:
                    e.cond = go(e.cond)
            case MapInit():
                e.entries = [(key, go(value)) for key, value in e.entries]
            case Eraser() | Str() | Var() | Chn() | Num():
                pass
        return e

    return go(expr), substitutions


def _wrap_gets(stmt: Stmt, substitutions: list[Substitution]) -> Stmt:
    """Precede ``stmt`` with one ``Map/get`` assignment per substitution."""
    for var, map_var, key in reversed(substitutions):
        call = Call(Var(_MAP_GET_FN), [Var(map_var), key], [])
        pat = PatTup([PatVar(var), PatVar(map_var)])
        stmt = Assign(pat, call, stmt)
    return stmt


def _gen_stmt(stmt: Stmt, ids: Iterator[int]) -> Stmt:
    match stmt:
        case Assign():
            key_subs: list[Substitution] = []
            if isinstance(stmt.pat, MapSet):
                stmt.pat.key, key_subs = substitute_map_gets(stmt.pat.key, ids)
            if stmt.nxt is not None:
                stmt.nxt = _gen_stmt(stmt.nxt, ids)
            stmt.val, subs = substitute_map_gets(stmt.val, ids)
            result: Stmt = _wrap_gets(stmt, subs)
            return _wrap_gets(result, key_subs)
        case Ask() | InPlace():
            stmt.nxt = _gen_stmt(stmt.nxt, ids)
            stmt.val, subs = substitute_map_gets(stmt.val, ids)
            return _wrap_gets(stmt, subs)
        case If():
            stmt.then = _gen_stmt(stmt.then, ids)
            stmt.otherwise = _gen_stmt(stmt.otherwise, ids)
            if stmt.nxt is not None:
                stmt.nxt = _gen_stmt(stmt.nxt, ids)
            stmt.cond, subs = substitute_map_gets(stmt.cond, ids)
            return _wrap_gets(stmt, subs)
        case Match() | Fold():
            for arm in stmt.arms:
                arm.rgt = _gen_stmt(arm.rgt, ids)
            if stmt.nxt is not None:
                stmt.nxt = _gen_stmt(stmt.nxt, ids)
            stmt.arg, subs = substitute_map_gets(stmt.arg, ids)
            return _wrap_gets(stmt, subs)
        case Switch():
            stmt.arms = [_gen_stmt(arm, ids) for arm in stmt.arms]
            if stmt.nxt is not None:
                stmt.nxt = _gen_stmt(stmt.nxt, ids)
            stmt.arg, subs = substitute_map_gets(stmt.arg, ids)
            return _wrap_gets(stmt, subs)
        case Bend():
            stmt.step = _gen_stmt(stmt.step, ids)
            stmt.base = _gen_stmt(stmt.base, ids)
            if stmt.nxt is not None:
                stmt.nxt = _gen_stmt(stmt.nxt, ids)
            stmt.cond, subs = substitute_map_gets(stmt.cond, ids)
            new_init = []
            for init in stmt.init:
                init, init_subs = substitute_map_gets(init, ids)
                new_init.append(init)
                subs.extend(init_subs)
            stmt.init = new_init
            return _wrap_gets(stmt, subs)
        case Do():
            stmt.bod = _gen_stmt(stmt.bod, ids)
            if stmt.nxt is not None:
                stmt.nxt = _gen_stmt(stmt.nxt, ids)
            return stmt
        case Return():
            stmt.term, subs = substitute_map_gets(stmt.term, ids)
            return _wrap_gets(stmt, subs)
        case Open():
            stmt.nxt = _gen_stmt(stmt.nxt, ids)
            return stmt
        case Use():
            stmt.nxt = _gen_stmt(stmt.nxt, ids)
            stmt.val, subs = substitute_map_gets(stmt.val, ids)
            return _wrap_gets(stmt, subs)
        case ErrStmt():
            return stmt
    raise TypeError(f"not a statement: {stmt!r}")


def gen_map_get(definition: Definition) -> None:
    """Rewrite, in place, every map read in a definition's body into a ``Map/get`` call."""
    definition.body = _gen_stmt(definition.body, itertools.count())