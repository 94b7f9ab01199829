"""Compilation and run options."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

ENTRY_POINT = "main"
HVM1_ENTRY_POINT = "Main"

_STRICT_FLOAT_WARNING = (
    "Warning: Running in strict mode without enabling the float_combinators pass "
    "can lead to some functions expanding infinitely."
)
_STRICT_LINEARIZE_WARNING = (
    "Warning: Running in strict mode without enabling the linearize_matches pass "
    "can lead to some functions expanding infinitely."
)


class OptLevel(enum.Enum):
    """How far an optional pass is applied."""

    DISABLED = "disabled"
    ENABLED = "enabled"
    ALT = "alt"

    def enabled(self) -> bool:
        """Whether the pass runs at all."""
        return self is not OptLevel.DISABLED

    def is_extra(self) -> bool:
        """Whether the pass runs at its full level."""
        return self is OptLevel.ENABLED


class AdtEncoding(enum.Enum):
    """Encoding of constructors and matches."""

    SCOTT = "Scott"
    NUM_SCOTT = "NumScott"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RunOpts:
    """Options controlling how a program's result is read back and shown."""

    linear_readback: bool = False
    pretty: bool = False


@dataclass(frozen=True)
class CompileOpts:
    """Which compilation passes are enabled."""

    eta: bool = True
    prune: bool = False
    linearize_matches: OptLevel = OptLevel.ENABLED
    float_combinators: bool = True
    merge: bool = False
    inline: bool = False
    check_net_size: bool = False
    adt_encoding: AdtEncoding = AdtEncoding.NUM_SCOTT

    def set_all(self) -> CompileOpts:
        """A copy with every optimizing pass enabled."""
        return replace(
            self,
            eta=True,
            prune=True,
            float_combinators=True,
            merge=True,
            inline=True,
            linearize_matches=OptLevel.ENABLED,
        )

    def set_no_all(self) -> CompileOpts:
        """A copy with every optimizing pass disabled."""
        return replace(
            self,
            eta=False,
            prune=False,
            linearize_matches=OptLevel.DISABLED,
            float_combinators=False,
            merge=False,
            inline=False,
        )

    def strict_warnings(self) -> list[str]:
        """Warnings about passes whose absence is risky in strict mode."""
        warnings = []
        if not self.float_combinators:
            warnings.append(_STRICT_FLOAT_WARNING)
        if not self.linearize_matches.enabled():
            warnings.append(_STRICT_LINEARIZE_WARNING)
        return warnings