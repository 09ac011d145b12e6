"""Exception hierarchy for quick-pick.

Non-matches are never exceptions: they are sentinel scores. Exceptions here
mark programming errors (cursor misuse) or bad configuration.
"""


class QuickPickError(Exception):
    """Base exception for all quick-pick errors.

    Carries an optional suggestion shown next to the message.
    """

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class ScoringError(QuickPickError):
    """Scoring machinery was driven incorrectly."""

    pass


class CursorBoundsError(ScoringError, IndexError):
    """A marker index or range falls outside the cursor's text."""

    pass


class ConfigError(QuickPickError):
    """Configuration is invalid or missing."""

    pass


class ConfigValidationError(ConfigError):
    """Configuration value failed validation."""

    pass
