"""Presentation of forest state as Rich tables.

Debug aid only; nothing in the forest depends on it.
"""

from rich.console import Console
from rich.table import Table

from disjoint_forest.forest.union_find import UnionFind


def build_forest_table(forest: UnionFind, title: str = "Union Find") -> Table:
    """Build a table with one row per set.

    Args:
        forest: Forest to describe
        title: Table title

    Returns:
        Table with set id, size, and members in join order
    """
    table = Table(title=title)
    table.add_column("Set", style="cyan", justify="right")
    table.add_column("Size", style="green", justify="right")
    table.add_column("Members", style="white")

    for rep in forest.iter_sets():
        table.add_row(str(rep.id), str(rep.size), ", ".join(str(m) for m in rep.members))

    return table


def render_forest(forest: UnionFind, console: Console) -> None:
    """Print every set of the forest followed by the totals."""
    console.print(build_forest_table(forest))
    console.print(
        f"[dim]Sets: {forest.get_sets_amount()}, Items: {forest.get_items_amount()}, "
        f"Policy: {forest.policy.value}[/dim]"
    )
