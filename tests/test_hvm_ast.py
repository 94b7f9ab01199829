import struct

from bendkit.hvm_ast import (
    Book,
    Con,
    Dup,
    Era,
    Net,
    Num,
    Opr,
    Redex,
    Ref,
    Swi,
    Var,
    display_hvm_book,
    display_hvm_net,
    display_hvm_numb,
    display_hvm_tree,
    net_trees,
    tree_children,
)


def _num(typ, payload):
    return ((payload & 0xFFFFFF) << 5) | typ


def _f24(value):
    bits = struct.unpack("<I", struct.pack("<f", value))[0]
    return ((bits >> 8) << 5) | 0x03


def test_tree_children_binary_and_leaf():
    a, b = Var("a"), Ref("f")
    assert tree_children(Con(a, b)) == (a, b)
    assert tree_children(Swi(a, b)) == (a, b)
    assert tree_children(Var("x")) == ()
    assert tree_children(Num(0)) == ()


def test_net_trees_order():
    root = Var("r")
    redex = Redex(False, Ref("f"), Era())
    net = Net(root, [redex])
    assert list(net_trees(net)) == [root, redex.a, redex.b]


def test_display_leaves():
    assert display_hvm_tree(Era()) == "*"
    assert display_hvm_tree(Var("abc")) == "abc"


def test_display_nested_tree():
    tree = Con(Var("a"), Dup(Ref("f"), Era()))
    assert display_hvm_tree(tree) == "(a {@f *})"


def test_display_opr_and_swi_prefixes():
    assert display_hvm_tree(Opr(Era(), Era())).startswith("$(")
    assert display_hvm_tree(Swi(Era(), Era())).startswith("?(")


def test_display_symbols():
    assert display_hvm_numb(_num(0x00, 0x04)) == "[+]"
    assert display_hvm_numb(_num(0x00, 0x15)) == "[>>]"
    assert display_hvm_numb(_num(0x00, 0x1F)) == "[?]"


def test_display_u24():
    assert display_hvm_numb(_num(0x01, 7)) == str(7)


def test_display_i24_signs():
    assert display_hvm_numb(_num(0x02, -3)) == "-3"
    assert display_hvm_numb(_num(0x02, 3)).startswith("+")


def test_display_f24():
    assert display_hvm_numb(_f24(1.5)) == "1.5"
    assert display_hvm_numb(_f24(float("inf"))) == "+inf"
    assert display_hvm_numb(_f24(float("-inf"))) == "-inf"
    assert display_hvm_numb(_f24(float("nan"))) == "+NaN"


def test_display_partial_operator():
    text = display_hvm_numb(_num(0x04, 5))
    assert text.startswith("[+") and text.endswith("5]")


def test_display_num_tree_matches_numb():
    raw = _num(0x01, 42)
    assert display_hvm_tree(Num(raw)) == display_hvm_numb(raw)


def test_display_net_without_rbag_is_root():
    root = Con(Var("a"), Var("a"))
    assert display_hvm_net(Net(root)) == display_hvm_tree(root)


def test_display_net_marks_priority():
    net = Net(Var("a"), [Redex(True, Ref("f"), Var("a")), Redex(False, Era(), Era())])
    text = display_hvm_net(net)
    assert " & !@f ~ a" in text
    assert text.endswith(" & * ~ *")


def test_display_book_layout():
    book = Book({"main": Net(Ref("f"), [Redex(True, Ref("g"), Era())]), "f": Net(Era())})
    lines = display_hvm_book(book).split("\n")
    assert lines[0] == "@main = @f"
    assert lines[1].startswith("  &!")
    assert lines[2] == ""
    assert lines[3] == "@f = *"