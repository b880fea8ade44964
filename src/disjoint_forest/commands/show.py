"""Build a forest from command-line operations and display it."""

import click
from rich.console import Console

from disjoint_forest.commands.context import POLICY_CHOICES, build_forest, resolve_config
from disjoint_forest.error.cmd import handle_command_errors
from disjoint_forest.forest.render import render_forest

console = Console()


def _parse_pairs(ctx, param, values: tuple[str, ...]) -> list[tuple[int, int]]:
    pairs = []
    for value in values:
        left, sep, right = value.partition(":")
        if not sep or not left.isdigit() or not right.isdigit():
            raise click.BadParameter(f"expected P:Q, got '{value}'")
        pairs.append((int(left), int(right)))
    return pairs


@click.command()
@click.option("--items", "-n", type=click.IntRange(min=0), default=0, help="Items to create")
@click.option(
    "--join",
    "-j",
    "joins",
    multiple=True,
    callback=_parse_pairs,
    help="Join two sets, given as P:Q (repeatable)",
)
@click.option("--remove", "-r", "removals", multiple=True, type=int, help="Remove a set")
@click.option("--find", "-f", "finds", multiple=True, type=int, help="Find an item's set")
@click.option("--policy", "-p", type=click.Choice(POLICY_CHOICES), help="Forest policy")
@click.pass_context
@handle_command_errors
def show(
    ctx: click.Context,
    items: int,
    joins: list[tuple[int, int]],
    removals: tuple[int, ...],
    finds: tuple[int, ...],
    policy: str | None,
):
    """Create items, apply joins and removals, then display every set.

    Operations run in the order: create, join, remove, find.
    """
    uf = build_forest(resolve_config(ctx), policy)

    for _ in range(items):
        uf.make_set()
    for p, q in joins:
        uf.join(p, q)
    for set_id in removals:
        freed = uf.remove_set(set_id)
        console.print(f"[yellow]Removed set {set_id}:[/yellow] freed {freed}")

    render_forest(uf, console)

    for item_id in finds:
        console.print(f"Item {item_id} -> set {uf.find_set(item_id).id}")
