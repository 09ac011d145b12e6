"""MainScreen: hosts the command palette and shows what was run."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ..models.exceptions import ConfigValidationError
from ..services.command_registry import CommandRegistry
from ..services.config import ConfigManager
from ..services.ranking import Scorer, get_scorer
from ..services.stringscore import score_query

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 10


class MainScreen(Screen):
    """Landing screen with command history."""

    BINDINGS = [
        Binding("ctrl+p", "command_palette", "Commands"),
        Binding(":", "command_palette", "Commands", show=False),
        ("q", "quit", "Quit"),
    ]

    DEFAULT_CSS = """
    MainScreen #body {
        padding: 1 2;
    }

    MainScreen #history {
        margin-top: 1;
        color: $text-muted;
    }
    """

    def __init__(self, registry: CommandRegistry, config_manager: ConfigManager) -> None:
        super().__init__()
        self._command_registry = registry
        self._config_manager = config_manager
        self._history: list[str] = []
        self._ready = False  # History widget exists

    @property
    def history(self) -> list[str]:
        """Labels of executed commands, most recent first."""
        return self._history

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="body"):
            yield Static("press ctrl+p to open the command palette", classes="dialog-hint")
            yield Static("", id="history")
        yield Footer()

    def on_mount(self) -> None:
        self._ready = True
        self._refresh_history()

    def _build_scorer(self) -> Scorer:
        """Scorer from config, or the default one if the config is invalid."""
        try:
            return get_scorer(self._config_manager.config.scoring)
        except ConfigValidationError as e:
            logger.warning("Falling back to default scoring: %s", e)
            self.notify(str(e), severity="warning")
            return score_query

    def action_command_palette(self) -> None:
        """Open the command palette for searchable command execution."""
        from .command_palette import CommandPalette

        palette_settings = self._config_manager.config.palette
        self.app.push_screen(
            CommandPalette(
                self._command_registry,
                scorer=self._build_scorer(),
                max_results=palette_settings.max_results,
                highlight=palette_settings.highlight_matches,
            ),
            self.run_command,
        )

    def run_command(self, command_id: str | None) -> None:
        """Record the chosen command and run its action, if it has one."""
        if not command_id:
            return
        command = self._command_registry.get(command_id)
        if command is None:
            logger.warning("Palette returned unknown command %r", command_id)
            return

        self._record(command.label)
        if command.action:
            action_method = getattr(self, command.action, None)
            if action_method:
                action_method()
            else:
                logger.warning("Command %s has no handler %s", command.id, command.action)

    def _record(self, label: str) -> None:
        self._history.insert(0, label)
        del self._history[HISTORY_LIMIT:]
        self._refresh_history()

    def _refresh_history(self) -> None:
        if not self._ready:
            return
        history = self.query_one("#history", Static)
        history.update("\n".join(self._history))

    def action_clear_history(self) -> None:
        self._history.clear()
        self._refresh_history()

    def action_toggle_dark(self) -> None:
        self.app.theme = "textual-light" if self.app.theme == "textual-dark" else "textual-dark"

    def action_quit(self) -> None:
        self.app.exit()
