from collections import deque
from typing import Iterator

from fintree.domain import Node


def iter_preorder(node: Node) -> Iterator[Node]:
    yield node
    for child in node.children:
        yield from iter_preorder(child)


def iter_postorder(node: Node) -> Iterator[Node]:
    for child in node.children:
        yield from iter_postorder(child)
    yield node


def iter_breadth_first(node: Node) -> Iterator[Node]:
    queue: deque[Node] = deque([node])
    while queue:
        current = queue.popleft()
        yield current
        queue.extend(current.children)


def lazy_top_nodes(node: Node, k: int) -> Iterator[tuple[str, float]]:
    # sorted() is stable, so equal amounts keep pre-order
    ordered: list[tuple[str, float]] = sorted(
        ((n.name, n.amount) for n in iter_preorder(node)),
        key=lambda item: abs(item[1]),
        reverse=True,
    )

    for name, amount in ordered[: max(0, k)]:
        yield name, amount
