"""Shared helpers for commands: config lookup and forest construction."""

import click

from disjoint_forest.core.config import Config, load_config
from disjoint_forest.forest.policy import Policy
from disjoint_forest.forest.union_find import UnionFind

POLICY_CHOICES = [policy.value for policy in Policy]


def resolve_config(ctx: click.Context) -> Config:
    """Return the config stored by the main group, loading it if absent."""
    ctx.ensure_object(dict)
    config = ctx.obj.get("config")
    if config is None:
        config = load_config()
        ctx.obj["config"] = config
    return config


def build_forest(config: Config, policy: str | None = None) -> UnionFind:
    """Create a forest, letting a --policy option override the config."""
    if policy is not None:
        return UnionFind(Policy(policy))
    return config.forest.build()
