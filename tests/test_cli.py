"""Tests for CLI commands."""

import json

from click.testing import CliRunner
import pytest

from disjoint_forest.cli import main


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


def test_main_help(runner):
    """Test main help command."""
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Disjoint-Set Forest Tool" in result.output


def test_version(runner):
    """Test version command."""
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_smoke_help(runner):
    """Test smoke help command."""
    result = runner.invoke(main, ["smoke", "--help"])
    assert result.exit_code == 0
    assert "Run smoke tests" in result.output


def test_smoke_all_with_config(runner, tmp_path):
    """Test config file values reach the smoke tests."""
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps({"forest": {"policy": "both"}, "smoke": {"make_sets_count": 10}})
    )

    result = runner.invoke(main, ["--config", str(config_path), "smoke", "all"])
    assert result.exit_code == 0
    assert "All smoke tests passed!" in result.output


def test_show_through_main(runner, tmp_path):
    """Test show registered on the main group."""
    config_path = tmp_path / "config.json"
    config_path.write_text("{}")

    result = runner.invoke(main, ["-c", str(config_path), "show", "-n", "2", "-j", "1:2"])
    assert result.exit_code == 0
    assert "Sets: 1, Items: 2" in result.output
