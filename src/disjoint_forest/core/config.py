"""Configuration management for disjoint-forest."""

from pathlib import Path
import json

from pydantic import BaseModel, Field

from disjoint_forest.forest.policy import Policy
from disjoint_forest.forest.union_find import UnionFind


class ForestConfig(BaseModel):
    """Configuration for forest construction."""

    policy: Policy = Field(default=Policy.NONE, description="Compression and join-order policy")
    verbose: bool = Field(default=False, description="Enable verbose logging")

    def build(self) -> UnionFind:
        """Create an empty forest with the configured policy."""
        return UnionFind(self.policy)


class SmokeConfig(BaseModel):
    """Configuration for the smoke-test commands."""

    make_sets_count: int = Field(default=1000, ge=1, description="Items created by make-sets")
    join_count: int = Field(default=22, ge=2, description="Items created by join")


class Config(BaseModel):
    """Main configuration for disjoint-forest."""

    forest: ForestConfig = Field(default_factory=ForestConfig)
    smoke: SmokeConfig = Field(default_factory=SmokeConfig)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            data = json.load(f)

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a JSON file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)

    @classmethod
    def get_default(cls) -> "Config":
        """Get default configuration."""
        return cls()


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file or return default.

    Args:
        config_path: Path to configuration file. If None, the default
            locations are searched and the defaults used when none exists.

    Returns:
        Config object
    """
    if config_path is None:
        default_locations = [
            Path.home() / ".config" / "disjoint-forest" / "config.json",
            Path.cwd() / "disjoint-forest.json",
        ]

        for location in default_locations:
            if location.exists():
                return Config.load_from_file(location)

        return Config.get_default()

    return Config.load_from_file(config_path)
