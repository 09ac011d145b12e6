"""Command palette for searchable command execution.

A modal overlay that re-ranks every command on each keystroke and
highlights the characters each label matched on.
"""

from __future__ import annotations

from typing import Iterable

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Input, Static

from .base import PickModalScreen
from ..services.command_registry import Command, CommandRegistry
from ..services.ranking import RankedItem, Scorer, rank_items
from ..services.stringscore import score_query

MATCH_STYLE = "bold underline"
LABEL_WIDTH = 30


def highlight_label(label: str, matches: Iterable[int], style: str = MATCH_STYLE) -> Text:
    """Render label with the matched character positions styled."""
    text = Text(label)
    for index in matches:
        if 0 <= index < len(label):
            text.stylize(style, index, index + 1)
    return text


class CommandItem(Static):
    """A single command entry in the palette list."""

    DEFAULT_CSS = """
    CommandItem {
        width: 100%;
        height: 1;
        padding: 0 1;
    }

    CommandItem:hover {
        background: $surface-lighten-1;
    }

    CommandItem.selected {
        background: $surface-lighten-1;
    }
    """

    class Selected(Message):
        """Posted when an item is clicked."""

        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(
        self,
        command: Command,
        index: int,
        matches: tuple[int, ...] = (),
        **kwargs,
    ) -> None:
        line = highlight_label(command.label, matches)
        # Pad to align keybindings
        line.append(" " * max(LABEL_WIDTH - len(command.label), 1))
        line.append(command.keybinding or "", style="dim")
        super().__init__(line, **kwargs)
        self.command = command
        self.index = index

    def on_click(self) -> None:
        self.post_message(self.Selected(self.index))


class CommandPalette(PickModalScreen[str | None]):
    """Searchable command palette modal."""

    BINDINGS = [
        Binding("escape", "dismiss_modal", "Cancel"),
        Binding("enter", "execute", "Run"),
        Binding("up", "move_up", "Up", show=False),
        Binding("down", "move_down", "Down", show=False),
        Binding("ctrl+p", "move_up", "Up", show=False),
        Binding("ctrl+n", "move_down", "Down", show=False),
    ]

    DEFAULT_CSS = """
    CommandPalette #dialog {
        border: round $primary;
    }

    CommandPalette #palette-input {
        width: 100%;
        margin-bottom: 1;
    }

    CommandPalette #results {
        height: auto;
        max-height: 50vh;
        min-height: 5;
        overflow-y: auto;
    }
    """

    selected_index: reactive[int] = reactive(0)

    def __init__(
        self,
        registry: CommandRegistry,
        scorer: Scorer = score_query,
        max_results: int | None = None,
        highlight: bool = True,
    ) -> None:
        super().__init__()
        self._registry = registry
        self._scorer = scorer
        self._max_results = max_results
        self._highlight = highlight
        self._ranked: list[RankedItem] = []
        self._updating = False  # Guard flag for DOM updates
        self._ready = False  # Results container exists

    @property
    def ranked(self) -> list[RankedItem]:
        """Current results, best first."""
        return self._ranked

    def compose(self) -> ComposeResult:
        self.add_class("modal-base", "modal-md")

        with Vertical(id="dialog"):
            yield Static("commands", classes="dialog-title")
            yield Input(placeholder="type to search...", id="palette-input")
            yield Vertical(id="results")
            yield Static("↑↓ navigate  enter execute  esc cancel", classes="dialog-hint")

    def on_mount(self) -> None:
        super().on_mount()
        self._ready = True
        self.update_filter("")
        self.query_one("#palette-input", Input).focus()

    def update_filter(self, query: str) -> list[RankedItem]:
        """Re-rank commands for query and return the new results."""
        self._ranked = rank_items(
            query.strip(),
            self._registry.search(),
            scorer=self._scorer,
            limit=self._max_results,
        )
        if self._ready:
            self.selected_index = 0
            self._update_results()
        return self._ranked

    def on_input_changed(self, event: Input.Changed) -> None:
        """Filter commands as user types."""
        self.update_filter(event.value)

    def _update_results(self) -> None:
        """Rebuild the results list."""
        self._updating = True
        try:
            results = self.query_one("#results", Vertical)
            results.remove_children()

            if not self._ranked:
                results.mount(Static("no matching commands", classes="empty-list"))
                return

            for i, item in enumerate(self._ranked):
                command = self._registry.get(item.id)
                if command is None:
                    continue
                matches = item.matches if self._highlight else ()
                widget = CommandItem(command, i, matches)
                if i == self.selected_index:
                    widget.add_class("selected")
                results.mount(widget)
        finally:
            self._updating = False

    def watch_selected_index(self, new_index: int) -> None:
        """Update visual selection."""
        if self._updating or not self._ready:
            return
        try:
            results = self.query_one("#results", Vertical)
        except NoMatches:
            return
        for child in results.children:
            if isinstance(child, CommandItem):
                child.set_class(child.index == new_index, "selected")

    def action_move_down(self) -> None:
        if self._ranked:
            self.selected_index = min(self.selected_index + 1, len(self._ranked) - 1)

    def action_move_up(self) -> None:
        if self._ranked:
            self.selected_index = max(self.selected_index - 1, 0)

    def action_execute(self) -> None:
        """Dismiss with the selected command id."""
        if self._ranked and 0 <= self.selected_index < len(self._ranked):
            self.dismiss(self._ranked[self.selected_index].id)
        else:
            self.dismiss(None)

    def on_command_item_selected(self, event: CommandItem.Selected) -> None:
        self.selected_index = event.index
        self.action_execute()
