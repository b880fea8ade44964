"""Smoke tests exercising the forest API end to end."""

import click
from rich.console import Console

from disjoint_forest.commands.context import POLICY_CHOICES, build_forest, resolve_config
from disjoint_forest.error.cmd import handle_command_errors
from disjoint_forest.forest.union_find import UnionFind

console = Console()


class SmokeTestError(ValueError):
    """A smoke-test expectation did not hold."""

    pass


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise SmokeTestError(message)


def run_make_sets(uf: UnionFind, count: int) -> None:
    """Create count items on an empty forest and check ids are 1..count."""
    for i in range(count):
        item_id = uf.make_set()
        _check(item_id == i + 1, f"make_set returned {item_id}, expected {i + 1}")
    _check(uf.get_sets_amount() == count, f"expected {count} sets, got {uf.get_sets_amount()}")


def run_join(uf: UnionFind, count: int) -> None:
    """Join even ids into set 2 and odd ids into set 1."""
    for _ in range(count):
        uf.make_set()

    for i in range(1, count + 1):
        if i % 2 == 0:
            uf.join(2, i)
        else:
            uf.join(1, i)

    _check(uf.get_sets_amount() == 2, f"expected 2 sets, got {uf.get_sets_amount()}")
    odd, even = uf.get_set(1), uf.get_set(2)
    _check(odd.size == (count + 1) // 2, f"set 1 has size {odd.size}")
    _check(even.size == count // 2, f"set 2 has size {even.size}")


def run_remove(uf: UnionFind) -> None:
    """Remove a joined pair and check its ids are recycled."""
    a, b, c = uf.make_set(), uf.make_set(), uf.make_set()
    uf.join(a, b)
    uf.remove_set(uf.find_set(a).id)

    _check(not uf.item_exists(a), f"item {a} still exists")
    _check(not uf.item_exists(b), f"item {b} still exists")
    _check(uf.item_exists(c), f"item {c} was removed")

    recycled = uf.make_set()
    _check(recycled in (a, b), f"make_set returned {recycled}, expected {a} or {b}")


@click.group()
def smoke():
    """Run smoke tests against the disjoint-set forest.

    This command group provides subcommands for:
    - make-sets: sequential id allocation
    - join: weighted union of even and odd ids
    - remove: set removal and id recycling
    - all: every test above
    """
    pass


@smoke.command("make-sets")
@click.option("--count", "-n", type=int, help="Number of items to create")
@click.option("--policy", "-p", type=click.Choice(POLICY_CHOICES), help="Forest policy")
@click.pass_context
@handle_command_errors
def make_sets(ctx: click.Context, count: int | None, policy: str | None):
    """Check that make_set issues ids 1..N in order."""
    config = resolve_config(ctx)
    count = count or config.smoke.make_sets_count
    console.print(f"[bold blue]Make Set Test[/bold blue] ({count} items)")

    run_make_sets(build_forest(config, policy), count)

    console.print("[bold green]✓[/bold green] Make Set Test: SUCCESS")


@smoke.command()
@click.option("--count", "-n", type=int, help="Number of items to create")
@click.option("--policy", "-p", type=click.Choice(POLICY_CHOICES), help="Forest policy")
@click.pass_context
@handle_command_errors
def join(ctx: click.Context, count: int | None, policy: str | None):
    """Check weighted union of even ids into 2 and odd ids into 1."""
    config = resolve_config(ctx)
    count = count or config.smoke.join_count
    if count < 2:
        raise ValueError("join needs at least 2 items")
    console.print(f"[bold blue]Join Test[/bold blue] ({count} items)")

    run_join(build_forest(config, policy), count)

    console.print("[bold green]✓[/bold green] Join Test: SUCCESS")


@smoke.command()
@click.option("--policy", "-p", type=click.Choice(POLICY_CHOICES), help="Forest policy")
@click.pass_context
@handle_command_errors
def remove(ctx: click.Context, policy: str | None):
    """Check set removal and identifier recycling."""
    config = resolve_config(ctx)
    console.print("[bold blue]Remove Set Test[/bold blue]")

    run_remove(build_forest(config, policy))

    console.print("[bold green]✓[/bold green] Remove Set Test: SUCCESS")


@smoke.command("all")
@click.option("--policy", "-p", type=click.Choice(POLICY_CHOICES), help="Forest policy")
@click.pass_context
@handle_command_errors
def run_all(ctx: click.Context, policy: str | None):
    """Run every smoke test."""
    config = resolve_config(ctx)

    run_make_sets(build_forest(config, policy), config.smoke.make_sets_count)
    console.print("[green]✓[/green] Make Set Test")
    run_join(build_forest(config, policy), config.smoke.join_count)
    console.print("[green]✓[/green] Join Test")
    run_remove(build_forest(config, policy))
    console.print("[green]✓[/green] Remove Set Test")

    console.print("[bold green]✓[/bold green] All smoke tests passed!")
