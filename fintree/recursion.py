from typing import Callable, Optional

from fintree.domain import Node, attach, create


def total(node: Node) -> float:
    result = node.amount
    for child in node.children:
        result += total(child)
    return result


def find(node: Node, target_name: str) -> Optional[Node]:
    if node.name == target_name:
        return node
    for child in node.children:
        found = find(child, target_name)
        if found is not None:
            return found
    return None


def find_node(node: Node, pred: Callable[[Node], bool]) -> Optional[Node]:
    if pred(node):
        return node
    for child in node.children:
        found = find_node(child, pred)
        if found is not None:
            return found
    return None


def by_name(name: str):
    def _filter(n: Node) -> bool:
        return n.name == name

    return _filter


def by_amount_range(min: float, max: float):
    def _filter(n: Node) -> bool:
        return min <= n.amount <= max

    return _filter


def is_leaf():
    def _filter(n: Node) -> bool:
        return not n.children

    return _filter


def depth(node: Node) -> int:
    if not node.children:
        return 1
    return 1 + max(depth(child) for child in node.children)


def size(node: Node) -> int:
    return 1 + sum(size(child) for child in node.children)


def flatten(node: Node) -> tuple[Node, ...]:
    result = (node,)
    for child in node.children:
        result += flatten(child)
    return result


def map_amounts(node: Node, f: Callable[[float], float]) -> Node:
    """Return a copy of the tree with every amount passed through f."""
    copy = create(node.name, f(node.amount))
    for child in node.children:
        attach(copy, map_amounts(child, f))
    return copy
