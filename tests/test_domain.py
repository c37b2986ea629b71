from fintree.domain import Node, attach, create, example_tree


def test_create_leaf():
    node = create("Aluguel", -1200.0)
    assert node.name == "Aluguel"
    assert node.amount == -1200.0
    assert node.children == []
    assert node.is_leaf


def test_create_accepts_empty_name():
    node = create("", 0.0)
    assert node.name == ""


def test_attach_appends_in_order():
    parent = create("Despesas", 0.0)
    a = create("Aluguel", -1200.0)
    b = create("Supermercado", -800.0)
    attach(parent, a)
    attach(parent, b)
    assert parent.children[0] is a
    assert parent.children[1] is b
    assert not parent.is_leaf


def test_attach_returns_parent():
    parent = create("Receitas", 0.0)
    assert attach(parent, create("Salário", 5000.0)) is parent


def test_new_nodes_do_not_share_children():
    a = create("a", 1.0)
    b = create("b", 2.0)
    attach(a, create("c", 3.0))
    assert b.children == []


def test_node_equality_is_structural():
    left = Node("x", 1.0, [Node("y", 2.0)])
    right = Node("x", 1.0, [Node("y", 2.0)])
    assert left == right
    assert left != Node("x", 1.0)


def test_example_tree_shape():
    root = example_tree()
    assert root.name == "Financeiro"
    assert [c.name for c in root.children] == ["Receitas", "Despesas"]
    assert [c.name for c in root.children[1].children] == ["Aluguel", "Supermercado"]
