"""Reordering of keyword arguments into the positional order of their callee."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

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
    Match,
    Num,
    Open,
    Return,
    Stmt,
    Str,
    Sup,
    Switch,
    Tup,
    Use,
    Var,
)

Signatures = Mapping[str, Sequence[str]]


class KwargsError(Exception):
    """Raised when named arguments cannot be matched to a callee's parameters."""


def _order(names: Sequence[str], args: list[Expr], kwargs: list[tuple[str, Expr]]) -> None:
    if len(args) + len(kwargs) != len(names):
        raise KwargsError(
            "Named args are only allowed when calling a function with the exact number of arguments."
        )
    named = dict(kwargs)
    kwargs.clear()
    for name in names[len(args):]:
        if name not in named:
            raise KwargsError(f"Named arg '{name}' is missing.")
        args.append(named.pop(name))
    if named:
        raise KwargsError(f"Unexpected named arg in function call {next(iter(named))}.")


def _expr(expr: Expr, signatures: Signatures) -> None:
    match expr:
        case Call(fun=fun, args=args, kwargs=kwargs):
            if kwargs:
                if not isinstance(fun, Var):
                    raise KwargsError(
                        "Named args are only allowed when calling a named function, "
                        "not when calling an expression."
                    )
                names = signatures.get(fun.nam)
                if names is None:
                    raise KwargsError(
                        "Named args are only allowed when calling a named function, "
                        f"not when calling variable '{fun.nam}'."
                    )
                _order(names, args, kwargs)
            _expr(fun, signatures)
            for arg in args:
                _expr(arg, signatures)
            for _, arg in kwargs:
                _expr(arg, signatures)
        case Lam(bod=bod):
            _expr(bod, signatures)
        case Bin(lhs=lhs, rhs=rhs):
            _expr(lhs, signatures)
            _expr(rhs, signatures)
        case Lst(els=els) | Tup(els=els) | Sup(els=els):
            for el in els:
                _expr(el, signatures)
        case Comprehension(term=term, iter=iterable, cond=cond):
            _expr(term, signatures)
            _expr(iterable, signatures)
            if cond is not None:
                _expr(cond, signatures)
        case Constructor(name=name, args=args, kwargs=kwargs):
            names = signatures.get(name)
            if names is None:
                raise KwargsError(f"Constructor '{name}' not found.")
            _order(names, args, kwargs)
            for arg in args:
                _expr(arg, signatures)
        case MapInit(entries=entries):
            for _, value in entries:
                _expr(value, signatures)
        case MapGet() | Eraser() | Var() | Chn() | Num() | Str():
            pass


def _stmt(stmt: Stmt | None, signatures: Signatures) -> None:
    match stmt:
        case None | ErrStmt():
            pass
        case Assign() | Ask() | InPlace() | Use():
            _expr(stmt.val, signatures)
            _stmt(stmt.nxt, signatures)
        case If():
            _expr(stmt.cond, signatures)
            _stmt(stmt.then, signatures)
            _stmt(stmt.otherwise, signatures)
            _stmt(stmt.nxt, signatures)
        case Match() | Fold():
            _expr(stmt.arg, signatures)
            for arm in stmt.arms:
                _stmt(arm.rgt, signatures)
            _stmt(stmt.nxt, signatures)
        case Switch():
            _expr(stmt.arg, signatures)
            for arm in stmt.arms:
                _stmt(arm, signatures)
            _stmt(stmt.nxt, signatures)
        case Bend():
            for init in stmt.init:
                _expr(init, signatures)
            _expr(stmt.cond, signatures)
            _stmt(stmt.step, signatures)
            _stmt(stmt.base, signatures)
            _stmt(stmt.nxt, signatures)
        case Do():
            _stmt(stmt.bod, signatures)
            _stmt(stmt.nxt, signatures)
        case Open():
            _stmt(stmt.nxt, signatures)
        case Return():
            _expr(stmt.term, signatures)


def order_kwargs(definition: Definition, signatures: Signatures) -> None:
    """Turn named arguments in a definition into positional ones, in place.

    ``signatures`` maps each named function and constructor to its parameter names.
    """
    try:
        _stmt(definition.body, signatures)
    except KwargsError as e:
        raise KwargsError(f"In function '{definition.name}':\n  {e}") from e