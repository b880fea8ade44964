"""CLI entry point for disjoint-forest tool."""

import logging
from pathlib import Path

import click
from rich.console import Console

from disjoint_forest.commands import show, smoke
from disjoint_forest.core.config import load_config

console = Console()


@click.group()
@click.version_option(version="0.1.0", prog_name="disjoint-forest")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    help="JSON configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config_path: Path | None, verbose: bool):
    """Disjoint-Set Forest Tool.

    Smoke tests and inspection for the union-find engine.
    """
    ctx.ensure_object(dict)
    config = load_config(config_path)
    ctx.obj["config"] = config

    if verbose or config.forest.verbose:
        logging.basicConfig(level=logging.DEBUG)


# Register commands
main.add_command(show.show)
main.add_command(smoke.smoke)


if __name__ == "__main__":
    main()
