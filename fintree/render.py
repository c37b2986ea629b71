"""Textual dumps of nodes and trees.

``format_node`` keeps everything on one line; ``format_tree`` spreads the
same fields over several lines with nested children indented.
"""
import json

from fintree.domain import Node


def format_total(value: float, precision: int = 2) -> str:
    return f"{value:.{precision}f}"


def _name(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _amount(value: float) -> str:
    # repr keeps the trailing ".0" on whole amounts and shows nan/inf as-is
    return repr(float(value))


def format_node(node: Node) -> str:
    children = ", ".join(format_node(child) for child in node.children)
    return (
        f"Node {{ name: {_name(node.name)}, amount: {_amount(node.amount)}, "
        f"children: [{children}] }}"
    )


def format_tree(node: Node, indent: int = 4) -> str:
    return "\n".join(_tree_lines(node, 0, indent))


def _tree_lines(node: Node, level: int, indent: int) -> list[str]:
    pad = " " * (level * indent)
    inner = " " * ((level + 1) * indent)
    lines = [
        f"{pad}Node {{",
        f"{inner}name: {_name(node.name)},",
        f"{inner}amount: {_amount(node.amount)},",
    ]
    if not node.children:
        lines.append(f"{inner}children: [],")
    else:
        lines.append(f"{inner}children: [")
        for child in node.children:
            child_lines = _tree_lines(child, level + 2, indent)
            child_lines[-1] += ","
            lines.extend(child_lines)
        lines.append(f"{inner}],")
    lines.append(f"{pad}}}")
    return lines
