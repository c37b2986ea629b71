import json
import logging
from typing import Any, Dict, List, Optional

from fintree.domain import Node, attach, create
from fintree.exceptions import TreeFormatError
from fintree.functional import validate_node_data
from fintree.recursion import total

logger = logging.getLogger(__name__)


def _build(data: Dict[str, Any]) -> Node:
    node = create(data["name"], float(data.get("amount", 0.0)))
    for child in data.get("children", []):
        attach(node, _build(child))
    return node


def tree_from_dict(data: Any) -> Node:
    result = validate_node_data(data).map(_build)
    if result.is_left():
        error = result.get_error()
        raise TreeFormatError(error["message"], path=error["path"], error=error["error"])
    return result.get_or_else(None)


def tree_to_dict(node: Node) -> Dict[str, Any]:
    return {
        "name": node.name,
        "amount": node.amount,
        "children": [tree_to_dict(child) for child in node.children],
    }


def tree_to_rows(node: Node) -> List[Dict[str, Any]]:
    """Flatten a tree into one row per node, in pre-order.

    ``id`` is built from child indexes (``"0"``, ``"0/1"``, ``"0/1/0"``) and is
    unique even when siblings share a name; ``parent_id`` points at the
    parent's ``id``. ``path`` is the slash-joined names, for display only.
    ``depth`` is 0 for the root.
    """
    rows: List[Dict[str, Any]] = []

    def _walk(n: Node, node_id: str, parent_id: Optional[str], parent_path: Optional[str], level: int) -> None:
        path = n.name if parent_path is None else f"{parent_path}/{n.name}"
        rows.append({
            "id": node_id,
            "parent_id": parent_id,
            "path": path,
            "name": n.name,
            "depth": level,
            "amount": n.amount,
            "total": total(n),
        })
        for idx, child in enumerate(n.children):
            _walk(child, f"{node_id}/{idx}", node_id, path, level + 1)

    _walk(node, "0", None, None, 0)
    return rows


def load_tree(path: str) -> Node:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except UnicodeDecodeError as e:
            raise TreeFormatError(f"Seed file {path} is not valid UTF-8: {e}", error="invalid_encoding") from e
        except json.JSONDecodeError as e:
            raise TreeFormatError(f"Seed file {path} is not valid JSON: {e}", error="invalid_json") from e

    root = tree_from_dict(data)
    logger.debug("Loaded tree %r from %s", root.name, path)
    return root
