import inspect
import logging
import time
from typing import Any, Callable, Dict, Sequence

from fintree.domain import Node
from fintree.recursion import depth, find, size, total

logger = logging.getLogger(__name__)


def aggregate_total(root: Node, target: str, acc: Dict[str, Any]) -> Dict[str, Any]:
    return {"total": total(root)}


def aggregate_shape(root: Node, target: str, acc: Dict[str, Any]) -> Dict[str, Any]:
    return {"size": size(root), "depth": depth(root)}


def aggregate_lookup(root: Node, target: str, acc: Dict[str, Any]) -> Dict[str, Any]:
    return {"found": find(root, target)}


DEFAULT_AGGREGATORS = (aggregate_total, aggregate_shape, aggregate_lookup)


def _accepts_acc(agg: Callable[..., Any]) -> bool:
    try:
        params = inspect.signature(agg).parameters.values()
    except (TypeError, ValueError):
        # builtins without a signature get the full call
        return True
    positional = [
        p for p in params
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return True
    return len(positional) >= 3


class ReportService:
    """Facade for generating reports about a tree using injected aggregators.

    aggregators: sequence of functions taking (root, target, acc) -> dict (partial results).
    Two-argument aggregators (root, target) are accepted as well.
    """

    def __init__(self, aggregators: Sequence[Callable[..., Dict[str, Any]]] = DEFAULT_AGGREGATORS):
        self.aggregators = aggregators

    def tree_report(self, root: Node, target: str) -> Dict[str, Any]:
        """Run aggregators in order and return the merged result with intermediate steps."""
        started = time.perf_counter()
        report: Dict[str, Any] = {"target": target, "steps": [], "result": {}}
        acc: Dict[str, Any] = {}
        for agg in self.aggregators:
            if _accepts_acc(agg):
                out = agg(root, target, acc)
            else:
                out = agg(root, target)
            name = getattr(agg, "__name__", str(agg))
            logger.debug("aggregator %s -> %r", name, out)
            report["steps"].append({"aggregator": name, "output": out})
            if isinstance(out, dict):
                acc.update(out)

        report["result"] = acc
        report["elapsed_ms"] = (time.perf_counter() - started) * 1000
        return report
