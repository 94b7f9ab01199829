"""Command-line optimization flags and their translation to compile options."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import replace

from .options import AdtEncoding, CompileOpts, OptLevel


class OptArg(enum.Enum):
    """A value accepted by the ``-O`` option."""

    ALL = "all"
    NO_ALL = "no-all"
    ETA = "eta"
    NO_ETA = "no-eta"
    PRUNE = "prune"
    NO_PRUNE = "no-prune"
    LINEARIZE_MATCHES = "linearize-matches"
    LINEARIZE_MATCHES_ALT = "linearize-matches-alt"
    NO_LINEARIZE_MATCHES = "no-linearize-matches"
    FLOAT_COMBINATORS = "float-combinators"
    NO_FLOAT_COMBINATORS = "no-float-combinators"
    MERGE = "merge"
    NO_MERGE = "no-merge"
    INLINE = "inline"
    NO_INLINE = "no-inline"
    CHECK_NET_SIZE = "check-net-size"
    NO_CHECK_NET_SIZE = "no-check-net-size"
    ADT_SCOTT = "adt-scott"
    ADT_NUM_SCOTT = "adt-num-scott"


_FIELD_CHANGES: dict[OptArg, dict[str, object]] = {
    OptArg.ETA: {"eta": True},
    OptArg.NO_ETA: {"eta": False},
    OptArg.PRUNE: {"prune": True},
    OptArg.NO_PRUNE: {"prune": False},
    OptArg.FLOAT_COMBINATORS: {"float_combinators": True},
    OptArg.NO_FLOAT_COMBINATORS: {"float_combinators": False},
    OptArg.MERGE: {"merge": True},
    OptArg.NO_MERGE: {"merge": False},
    OptArg.INLINE: {"inline": True},
    OptArg.NO_INLINE: {"inline": False},
    OptArg.CHECK_NET_SIZE: {"check_net_size": True},
    OptArg.NO_CHECK_NET_SIZE: {"check_net_size": False},
    OptArg.LINEARIZE_MATCHES: {"linearize_matches": OptLevel.ENABLED},
    OptArg.LINEARIZE_MATCHES_ALT: {"linearize_matches": OptLevel.ALT},
    OptArg.NO_LINEARIZE_MATCHES: {"linearize_matches": OptLevel.DISABLED},
    OptArg.ADT_SCOTT: {"adt_encoding": AdtEncoding.SCOTT},
    OptArg.ADT_NUM_SCOTT: {"adt_encoding": AdtEncoding.NUM_SCOTT},
}


def parse_opt_args(values: Iterable[str]) -> list[OptArg]:
    """Parse ``-O`` values, each of which may hold several space-separated flags."""
    parsed: list[OptArg] = []
    for value in values:
        for word in value.split(" "):
            if not word:
                continue
            try:
                parsed.append(OptArg(word))
            except ValueError:
                valid = ", ".join(arg.value for arg in OptArg)
                raise ValueError(
                    f"invalid value '{word}' for optimization option [possible values: {valid}]"
                ) from None
    return parsed


def compile_opts_from_cli(args: Iterable[OptArg]) -> CompileOpts:
    """Apply the flags, in order, on top of the default compile options."""
    opts = CompileOpts()
    for arg in args:
        if arg is OptArg.ALL:
            opts = opts.set_all()
        elif arg is OptArg.NO_ALL:
            opts = opts.set_no_all()
        else:
            opts = replace(opts, **_FIELD_CHANGES[arg])
    return opts