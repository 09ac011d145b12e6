"""Quick Pick: a command palette with acronym-aware ranking.

Main Textual application.
"""

from textual.app import App
from textual.binding import Binding

from quick_pick.screens.main import MainScreen
from quick_pick.services.command_registry import CommandRegistry, create_default_registry
from quick_pick.services.config import ConfigManager
from quick_pick.styles import BASE_CSS


class QuickPickApp(App):
    """The main Quick Pick application."""

    TITLE = "Quick Pick"
    CSS = BASE_CSS + """
    Screen {
        background: $background;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "screenshot", "Screenshot", show=False),
    ]

    def __init__(
        self,
        config_manager: ConfigManager | None = None,
        registry: CommandRegistry | None = None,
        **kwargs,
    ):
        """Initialize the app.

        Args:
            config_manager: Config source (defaults to ~/.config/quick-pick)
            registry: Commands to offer (defaults to the built-in set)
            **kwargs: Additional Textual app arguments
        """
        super().__init__(**kwargs)
        self.config_manager = config_manager or ConfigManager()
        self.registry = registry or create_default_registry()

    def on_mount(self) -> None:
        self.push_screen(MainScreen(self.registry, self.config_manager))


def main():
    """Run the Quick Pick application."""
    QuickPickApp().run()


if __name__ == "__main__":
    main()
