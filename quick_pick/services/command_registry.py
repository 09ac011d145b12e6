"""Command registry for the command palette.

Centralized command definitions with metadata for searchable access.
Commands with an action name are dispatched to the screen that opened the
palette; commands without one are only recorded in the history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CommandCategory(Enum):
    """Categories for organizing commands."""

    FILE = "file"
    EDIT = "edit"
    NAVIGATE = "navigate"
    RUN = "run"
    APP = "app"


@dataclass
class Command:
    """A command that can be executed from the palette."""

    id: str                              # Unique identifier (e.g., "open_resource")
    label: str                           # Display label, the text that gets scored
    action: str | None = None            # Screen method name (e.g., "action_quit")
    category: CommandCategory = CommandCategory.APP
    keybinding: str | None = None        # Keyboard shortcut shown in the palette
    description: str | None = None
    hidden: bool = False                 # Hide from palette


@dataclass
class CommandRegistry:
    """Registry of all available commands."""

    _commands: dict[str, Command] = field(default_factory=dict)

    def register(self, command: Command) -> None:
        """Register a command, replacing any with the same id."""
        self._commands[command.id] = command

    def register_all(self, commands: list[Command]) -> None:
        for command in commands:
            self.register(command)

    def get(self, command_id: str) -> Command | None:
        return self._commands.get(command_id)

    def get_all(self) -> list[Command]:
        """Get all non-hidden commands, in registration order."""
        return [c for c in self._commands.values() if not c.hidden]

    def search(self) -> list[tuple[str, str]]:
        """Get searchable (id, label) tuples for all visible commands."""
        return [(c.id, c.label) for c in self.get_all()]

    def __len__(self) -> int:
        return len(self._commands)


def create_default_registry() -> CommandRegistry:
    """Create registry with all built-in commands."""
    registry = CommandRegistry()

    registry.register_all([
        Command(
            id="open_resource",
            label="Open Resource",
            category=CommandCategory.FILE,
            keybinding="ctrl+shift+r",
            description="Open any file in the workspace",
        ),
        Command(
            id="open_type",
            label="Open Type",
            category=CommandCategory.FILE,
            keybinding="ctrl+shift+t",
            description="Open a class or interface by name",
        ),
        Command(
            id="save_all",
            label="Save All",
            category=CommandCategory.FILE,
            keybinding="ctrl+shift+s",
        ),
        Command(
            id="close_all_editors",
            label="Close All Editors",
            category=CommandCategory.FILE,
        ),
    ])

    registry.register_all([
        Command(
            id="format",
            label="Format Source",
            category=CommandCategory.EDIT,
            keybinding="ctrl+shift+f",
        ),
        Command(
            id="organize_imports",
            label="Organize Imports",
            category=CommandCategory.EDIT,
            keybinding="ctrl+shift+o",
        ),
        Command(
            id="toggle_comment",
            label="Toggle Comment",
            category=CommandCategory.EDIT,
            keybinding="ctrl+/",
        ),
        Command(
            id="rename_in_file",
            label="Rename in File",
            category=CommandCategory.EDIT,
        ),
    ])

    registry.register_all([
        Command(
            id="quick_outline",
            label="Quick Outline",
            category=CommandCategory.NAVIGATE,
            keybinding="ctrl+o",
        ),
        Command(
            id="open_call_hierarchy",
            label="Open Call Hierarchy",
            category=CommandCategory.NAVIGATE,
        ),
        Command(
            id="go_to_line",
            label="Go to Line",
            category=CommandCategory.NAVIGATE,
            keybinding="ctrl+l",
        ),
    ])

    registry.register_all([
        Command(
            id="run_last",
            label="Run Last Launched",
            category=CommandCategory.RUN,
            keybinding="ctrl+f11",
        ),
        Command(
            id="debug_last",
            label="Debug Last Launched",
            category=CommandCategory.RUN,
            keybinding="f11",
        ),
        Command(
            id="toggle_breakpoint",
            label="Toggle Breakpoint",
            category=CommandCategory.RUN,
            keybinding="ctrl+shift+b",
        ),
    ])

    # Commands the main screen actually performs
    registry.register_all([
        Command(
            id="clear_history",
            label="Clear Command History",
            action="action_clear_history",
            description="Forget previously executed commands",
        ),
        Command(
            id="toggle_dark",
            label="Toggle Dark Mode",
            action="action_toggle_dark",
        ),
        Command(
            id="quit",
            label="Quit",
            action="action_quit",
            keybinding="q",
        ),
        Command(
            id="command_palette",
            label="Show Command Palette",
            action="action_command_palette",
            keybinding="ctrl+p",
            hidden=True,  # Already open when it could be chosen
        ),
    ])

    return registry
