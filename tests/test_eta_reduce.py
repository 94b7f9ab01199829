import copy

from bendkit.eta_reduce import eta_reduce_hvm_net
from bendkit.hvm_ast import Con, Dup, Era, Net, Opr, Redex, Ref, Var


def test_matching_constructors_become_wire():
    net = Net(Con(Con(Var("x"), Var("y")), Con(Var("x"), Var("y"))))
    eta_reduce_hvm_net(net)
    assert net.root == Con(Var("x"), Var("x"))


def test_matching_duplicators_become_wire():
    net = Net(Dup(Dup(Var("x"), Var("y")), Dup(Var("x"), Var("y"))))
    eta_reduce_hvm_net(net)
    assert net.root == Dup(Var("x"), Var("x"))


def test_eraser_pair_collapses():
    net = Net(Con(Con(Era(), Era()), Var("r")), [Redex(False, Ref("f"), Var("r"))])
    eta_reduce_hvm_net(net)
    assert net.root == Con(Era(), Var("r"))


def test_nested_eraser_pairs_collapse_fully():
    net = Net(Con(Con(Era(), Era()), Con(Era(), Era())))
    eta_reduce_hvm_net(net)
    assert net.root == Era()


def test_different_labels_are_kept():
    net = Net(Con(Con(Var("x"), Var("y")), Dup(Var("x"), Var("y"))))
    before = copy.deepcopy(net)
    eta_reduce_hvm_net(net)
    assert net == before


def test_crossed_wires_are_kept():
    net = Net(Con(Con(Var("x"), Var("y")), Con(Var("y"), Var("x"))))
    before = copy.deepcopy(net)
    eta_reduce_hvm_net(net)
    assert net == before


def test_reduces_across_root_and_redexes():
    net = Net(Con(Var("x"), Var("y")), [Redex(False, Ref("f"), Con(Var("x"), Var("y")))])
    eta_reduce_hvm_net(net)
    assert net.root == Var("x")
    assert net.rbag[0].a == Ref("f")
    assert net.rbag[0].b == Var("x")


def test_reduction_inside_other_nodes():
    inner = Con(Var("x"), Var("y"))
    net = Net(Opr(copy.deepcopy(inner), copy.deepcopy(inner)))
    eta_reduce_hvm_net(net)
    assert net.root == Opr(Var("x"), Var("x"))