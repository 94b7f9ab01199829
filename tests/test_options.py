import dataclasses

import pytest

from bendkit.options import AdtEncoding, CompileOpts, OptLevel, RunOpts


def test_opt_level_enabled():
    assert OptLevel.ENABLED.enabled()
    assert OptLevel.ALT.enabled()
    assert not OptLevel.DISABLED.enabled()


def test_opt_level_is_extra():
    assert OptLevel.ENABLED.is_extra()
    assert not OptLevel.ALT.is_extra()
    assert not OptLevel.DISABLED.is_extra()


def test_adt_encoding_display():
    scott = CompileOpts(adt_encoding=AdtEncoding.SCOTT)
    default = CompileOpts()
    assert str(scott.adt_encoding) == "Scott"
    assert str(default.adt_encoding) == "NumScott"


def test_run_opts_defaults():
    opts = RunOpts()
    assert opts.linear_readback is False
    assert opts.pretty is False


def test_compile_opts_defaults():
    opts = CompileOpts()
    assert opts.eta is True
    assert opts.prune is False
    assert opts.linearize_matches is OptLevel.ENABLED
    assert opts.float_combinators is True
    assert opts.merge is False
    assert opts.inline is False
    assert opts.check_net_size is False
    assert opts.adt_encoding is AdtEncoding.NUM_SCOTT


def test_set_all_enables_passes_and_keeps_others():
    base = CompileOpts(check_net_size=True, adt_encoding=AdtEncoding.SCOTT).set_no_all()
    opts = base.set_all()
    assert opts.eta and opts.prune and opts.float_combinators and opts.merge and opts.inline
    assert opts.linearize_matches is OptLevel.ENABLED
    assert opts.check_net_size is True
    assert opts.adt_encoding is AdtEncoding.SCOTT


def test_set_no_all_disables_passes_and_keeps_others():
    opts = CompileOpts(check_net_size=True, adt_encoding=AdtEncoding.SCOTT).set_no_all()
    assert not (opts.eta or opts.prune or opts.float_combinators or opts.merge or opts.inline)
    assert opts.linearize_matches is OptLevel.DISABLED
    assert opts.check_net_size is True
    assert opts.adt_encoding is AdtEncoding.SCOTT


def test_set_all_returns_new_object():
    original = CompileOpts()
    changed = original.set_all()
    assert original.prune is False
    assert changed.prune is True


def test_compile_opts_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        CompileOpts().eta = False


def test_strict_warnings_default_is_empty():
    assert CompileOpts().strict_warnings() == []


def test_strict_warnings_all_disabled():
    warnings = CompileOpts().set_no_all().strict_warnings()
    assert len(warnings) == 2
    assert "float_combinators" in warnings[0]
    assert "linearize_matches" in warnings[1]


def test_strict_warnings_alt_linearize_is_fine():
    opts = dataclasses.replace(CompileOpts(), linearize_matches=OptLevel.ALT)
    assert opts.strict_warnings() == []