"""Shared test fixtures for Quick Pick."""

import pytest
from pathlib import Path

from quick_pick.services.command_registry import Command, CommandCategory, CommandRegistry
from quick_pick.services.config import ConfigManager


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    """Create a ConfigManager with temp directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return ConfigManager(config_dir=config_dir)


@pytest.fixture
def items() -> list[tuple[str, str]]:
    """Searchable (id, label) pairs."""
    return [
        ("a", "Open Type"),
        ("b", "Open Resource"),
        ("c", "Toggle Breakpoint"),
        ("d", "Quit"),
    ]


@pytest.fixture
def registry(items: list[tuple[str, str]]) -> CommandRegistry:
    """Create a small registry from the items fixture."""
    registry = CommandRegistry()
    registry.register_all([
        Command(id=id_, label=label, category=CommandCategory.FILE)
        for id_, label in items
    ])
    return registry
