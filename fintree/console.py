import logging
import time
from typing import Optional

import click

from fintree.config import Settings, configure_logging
from fintree.domain import example_tree
from fintree.exceptions import FintreeError, TreeFormatError
from fintree.render import format_node, format_total, format_tree
from fintree.services import ReportService
from fintree.transforms import load_tree

logger = logging.getLogger(__name__)


@click.command()
@click.argument("seed", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--find", "lookup_name", default=None, help="Name of the node to look up.")
def main(seed: Optional[str], lookup_name: Optional[str]) -> None:
    """Print the total, a dump of the tree and the node found by name.

    Without SEED the built-in Financeiro example tree is used.
    """
    try:
        settings = Settings.from_env()
    except FintreeError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(2)
    configure_logging(settings)
    target = lookup_name if lookup_name is not None else settings.lookup_name

    started = time.perf_counter()
    if seed is None:
        root = example_tree()
    else:
        try:
            root = load_tree(seed)
        except TreeFormatError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(2)

    logger.debug("Looking up %r in tree %r", target, root.name)
    report = ReportService().tree_report(root, target)
    result = report["result"]

    click.echo(f"Total {root.name}: {format_total(result['total'], settings.amount_precision)}")
    click.echo(format_tree(root))

    found = result["found"]
    if found is None:
        click.echo(f"{target!r} not found")
    else:
        click.echo(format_node(found))

    elapsed_ms = int((time.perf_counter() - started) * 1000)
    click.echo(f"Tempo de execução: {elapsed_ms}ms")

    if found is None:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
