from bendkit.hvm_ast import Book, Con, Dup, Era, Net, Redex, Ref, Var
from bendkit.mutual_recursion import Graph, combinations_from_merges, show_cycles


def test_add_and_get():
    graph = Graph()
    graph.add("A", "B")
    graph.add("A", "C")
    graph.add("A", "B")
    assert graph.get("A") == ["B", "C"]
    assert graph.get("B") == []
    assert graph.get("Z") is None


def test_two_node_cycle():
    graph = Graph()
    graph.add("A", "B")
    graph.add("B", "A")
    assert graph.cycles() == [["A", "B"]]


def test_acyclic_graph_has_no_cycles():
    graph = Graph()
    graph.add("A", "B")
    graph.add("B", "C")
    graph.add("A", "C")
    assert graph.cycles() == []


def test_self_loop():
    graph = Graph()
    graph.add("A", "A")
    assert graph.cycles() == [["A"]]


def test_every_cycle_is_closed_in_graph():
    graph = Graph()
    for a, b in [("A", "B"), ("B", "C"), ("C", "A"), ("C", "D"), ("D", "D")]:
        graph.add(a, b)
    found = graph.cycles()
    assert found
    for cycle in found:
        for i, nam in enumerate(cycle):
            assert cycle[(i + 1) % len(cycle)] in graph.get(nam)


def test_from_book_ignores_con_first_child():
    book = Book({"A": Net(Con(Ref("B"), Var("x")))})
    graph = Graph.from_book(book)
    assert graph.get("A") is None


def test_from_book_collects_con_second_child_and_dup():
    book = Book({
        "A": Net(Con(Var("x"), Dup(Ref("B"), Era()))),
        "B": Net(Var("r"), [Redex(False, Ref("A"), Var("r"))]),
    })
    graph = Graph.from_book(book)
    assert graph.get("A") == ["B"]
    assert graph.get("B") == ["A"]
    assert graph.cycles() == [["A", "B"]]


def test_combinations_without_merges():
    assert combinations_from_merges(["a", "b"], "$") == [["a", "b"]]


def test_combinations_with_merge():
    result = combinations_from_merges(["a$b", "c"], "$")
    assert result == [["a", "c"], ["b", "c"]]


def test_combinations_count_doubles_per_merge():
    result = combinations_from_merges(["a$b", "c$d", "e$f"], "$")
    assert len(result) == 2 ** 3
    assert all(len(comb) == 3 for comb in result)


def test_show_cycles_format():
    text = show_cycles([["A", "B"]], "$")
    assert text == "  * A -> B -> A"


def test_show_cycles_filters_generated_names():
    text = show_cycles([["A", "A__C0", "B"]], "$")
    assert "__C" not in text
    assert text.endswith("A -> B -> A")


def test_show_cycles_limits_output():
    cycles = [[f"F{i}"] for i in range(7)]
    text = show_cycles(cycles, "$")
    lines = text.split("\n")
    assert len([line for line in lines if line.strip().startswith("*")]) == 5
    assert lines[-1].strip() == "and 2 other cycles..."