"""Configuration management for quick-pick.

Single JSON file at ~/.config/quick-pick/config.json:
- scoring: which strategy ranks candidates and the rank each match earns
- palette: how many results to show and whether to highlight matches

Missing keys fall back to defaults. A malformed file is logged and ignored.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..models.exceptions import ConfigValidationError
from ..models.score import DEFAULT_WEIGHTS, ScoreWeights

logger = logging.getLogger(__name__)


def _write_json(path: Path, data: dict) -> None:
    """Write JSON via a temp file and rename so readers never see half a file."""
    content = json.dumps(data, indent=2)
    temp_path = path.with_suffix(".tmp")
    try:
        temp_path.write_text(content)
        os.replace(temp_path, path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise


def _as_bool(value, default: bool) -> bool:
    """Read a JSON flag, accepting "true"/"false" strings from hand edits."""
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


class ScoringStrategy(Enum):
    """Which scorer ranks palette candidates."""

    ELABORATE = "elaborate"  # Word, multi-word and acronym matching
    SIMPLE = "simple"  # Earliest substring position only


@dataclass
class ScoringSettings:
    """Settings for candidate scoring.

    The rank constants are tunable, but a whole-word match must always
    outrank a partial one.
    """

    strategy: ScoringStrategy = ScoringStrategy.ELABORATE
    whole_word_rank: int = DEFAULT_WEIGHTS.whole_word
    partial_rank: int = DEFAULT_WEIGHTS.partial
    acronym_rank: int = DEFAULT_WEIGHTS.acronym
    # Legacy behaviour: an empty query counts as an acronym match
    empty_query_acronym_match: bool = False

    @property
    def weights(self) -> ScoreWeights:
        """Validated weights for the scorer."""
        self.validate()
        return self._weights()

    def _weights(self) -> ScoreWeights:
        return ScoreWeights(
            whole_word=self.whole_word_rank,
            partial=self.partial_rank,
            acronym=self.acronym_rank,
        )

    def validate(self) -> None:
        """Check the rank ordering.

        Raises:
            ConfigValidationError: If the ranks break whole > partial > 0
        """
        if not self._weights().is_ordered:
            raise ConfigValidationError(
                f"Invalid scoring ranks: whole_word={self.whole_word_rank}, "
                f"partial={self.partial_rank}, acronym={self.acronym_rank}",
                suggestion="whole_word_rank must exceed partial_rank and every rank must be positive",
            )

    def to_dict(self) -> dict:
        result: dict = {"strategy": self.strategy.value}
        if self.whole_word_rank != DEFAULT_WEIGHTS.whole_word:
            result["whole_word_rank"] = self.whole_word_rank
        if self.partial_rank != DEFAULT_WEIGHTS.partial:
            result["partial_rank"] = self.partial_rank
        if self.acronym_rank != DEFAULT_WEIGHTS.acronym:
            result["acronym_rank"] = self.acronym_rank
        if self.empty_query_acronym_match:
            result["empty_query_acronym_match"] = True
        return result

    @classmethod
    def from_dict(cls, data: dict) -> "ScoringSettings":
        strategy = ScoringStrategy.ELABORATE
        if data.get("strategy"):
            try:
                strategy = ScoringStrategy(data["strategy"])
            except ValueError:
                logger.warning("Unknown scoring strategy %r, using elaborate", data["strategy"])

        return cls(
            strategy=strategy,
            whole_word_rank=int(data.get("whole_word_rank", DEFAULT_WEIGHTS.whole_word)),
            partial_rank=int(data.get("partial_rank", DEFAULT_WEIGHTS.partial)),
            acronym_rank=int(data.get("acronym_rank", DEFAULT_WEIGHTS.acronym)),
            empty_query_acronym_match=_as_bool(data.get("empty_query_acronym_match"), False),
        )


@dataclass
class PaletteSettings:
    """Settings for the command palette."""

    max_results: int | None = None  # None shows every match
    highlight_matches: bool = True

    def to_dict(self) -> dict:
        result: dict = {"highlight_matches": self.highlight_matches}
        if self.max_results is not None:
            result["max_results"] = self.max_results
        return result

    @classmethod
    def from_dict(cls, data: dict) -> "PaletteSettings":
        max_results = data.get("max_results")
        return cls(
            max_results=int(max_results) if max_results is not None else None,
            highlight_matches=_as_bool(data.get("highlight_matches"), True),
        )

    def merge_with(self, override: "PaletteSettings") -> "PaletteSettings":
        """Return new settings with override values taking precedence."""
        return PaletteSettings(
            max_results=override.max_results if override.max_results is not None else self.max_results,
            highlight_matches=override.highlight_matches,
        )


@dataclass
class Config:
    """Unified quick-pick configuration."""

    scoring: ScoringSettings = field(default_factory=ScoringSettings)
    palette: PaletteSettings = field(default_factory=PaletteSettings)

    def to_dict(self) -> dict:
        return {
            "scoring": self.scoring.to_dict(),
            "palette": self.palette.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        return cls(
            scoring=ScoringSettings.from_dict(data.get("scoring", {})),
            palette=PaletteSettings.from_dict(data.get("palette", {})),
        )


class ConfigManager:
    """Loads and saves the quick-pick config file."""

    def __init__(self, config_dir: Path | None = None):
        if config_dir is None:
            config_dir = Path.home() / ".config" / "quick-pick"
        self._config_dir = config_dir
        self._config_file = config_dir / "config.json"
        self._config: Config | None = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    @property
    def config(self) -> Config:
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def _load_config(self) -> Config:
        """Load config from disk."""
        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                return Config.from_dict(data)
            except (json.JSONDecodeError, AttributeError, TypeError, ValueError) as e:
                logger.warning("Ignoring unreadable config %s: %s", self._config_file, e)
        return Config()

    def save_config(self, config: Config) -> None:
        """Save config to disk."""
        self._config_dir.mkdir(parents=True, exist_ok=True)
        _write_json(self._config_file, config.to_dict())
        self._config = config

    def update_scoring(self, scoring: ScoringSettings) -> None:
        """Validate and persist scoring settings.

        Raises:
            ConfigValidationError: If the ranks are out of order
        """
        scoring.validate()
        config = self.config
        config.scoring = scoring
        self.save_config(config)

    def update_palette(self, palette: PaletteSettings) -> None:
        config = self.config
        config.palette = config.palette.merge_with(palette)
        self.save_config(config)
