import pytest

from bendkit.imp_ast import (
    Assign,
    Call,
    CtrField,
    Definition,
    EnumDef,
    Fold,
    If,
    InPlaceOp,
    Lst,
    MatchArm,
    Op,
    PatTup,
    PatVar,
    Return,
    Var,
    Variant,
)


@pytest.mark.parametrize(
    "in_place, op",
    [
        (InPlaceOp.ADD, Op.ADD),
        (InPlaceOp.SUB, Op.SUB),
        (InPlaceOp.MUL, Op.MUL),
        (InPlaceOp.DIV, Op.DIV),
        (InPlaceOp.AND, Op.AND),
        (InPlaceOp.OR, Op.OR),
        (InPlaceOp.XOR, Op.XOR),
    ],
)
def test_in_place_to_lang_op(in_place, op):
    assert in_place.to_lang_op() is op


def test_in_place_ops_map_to_distinct_ops():
    ops = [InPlaceOp.to_lang_op(member) for member in InPlaceOp]
    assert len(set(ops)) == len(ops)
    assert InPlaceOp.XOR.to_lang_op() is Op.XOR


def test_patterns_compare_structurally():
    a = PatTup([PatVar("x"), PatVar("y")])
    b = PatTup([PatVar("x"), PatVar("y")])
    c = PatTup([PatVar("y"), PatVar("x")])
    assert a == b
    assert a != c


def test_optional_next_defaults_to_none():
    stmt = Assign(PatVar("x"), Var("y"))
    assert stmt.nxt is None
    cond = If(Var("c"), Return(Var("a")), Return(Var("b")))
    assert cond.nxt is None


def test_collection_defaults_are_independent():
    first = Call(Var("f"))
    second = Call(Var("g"))
    first.args.append(Var("x"))
    assert second.args == []
    assert Lst().els == []


def test_ctr_field_default_not_recursive():
    assert CtrField("head").rec is False
    assert CtrField("tail", True).rec is True


def test_definition_holds_nested_statements():
    body = Fold(
        Var("xs"),
        "xs",
        [],
        [MatchArm("List/Nil", Return(Var("acc")))],
    )
    definition = Definition("sum", ["xs"], body)
    assert definition.body.arms[0].rgt == Return(Var("acc"))
    assert definition.body.nxt is None


def test_enum_variants():
    variant = Variant("List/Cons", [CtrField("head"), CtrField("tail", True)])
    enum_def = EnumDef("List", [variant])
    assert [f.nam for f in enum_def.variants[0].fields] == ["head", "tail"]
    assert EnumDef("Empty").variants == []