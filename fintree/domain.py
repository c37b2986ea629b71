from dataclasses import dataclass, field
from typing import List


@dataclass
class Node:
    name: str        # lookup key, not unique
    amount: float    # + for income, - for expense
    children: List["Node"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children


def create(name: str, amount: float) -> Node:
    return Node(name=name, amount=amount)


def attach(parent: Node, child: Node) -> Node:
    """Append child to parent's children. No cycle check is done."""
    parent.children.append(child)
    return parent


def example_tree() -> Node:
    root = create("Financeiro", 0.0)

    receitas = create("Receitas", 0.0)
    attach(receitas, create("Salário", 5000.0))
    attach(receitas, create("Investimentos", 2000.0))

    despesas = create("Despesas", 0.0)
    attach(despesas, create("Aluguel", -1200.0))
    attach(despesas, create("Supermercado", -800.0))

    attach(root, receitas)
    attach(root, despesas)
    return root
