"""Game settings for Rock Paper Chain.

Settings live in a small YAML file (``rockpaper/inputs/settings.yaml`` by
default). A missing file falls back to the built-in defaults so the game
always starts; a file with bad values is an error.
"""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = Path(__file__).parent / "inputs" / "settings.yaml"


@dataclass(frozen=True)
class GameSettings:
    """Tunable rules for a session."""
    start_word: str = "rock"
    min_difficulty: int = 1
    max_difficulty: int = 10
    chain_separator: str = " 🤜 "

    def __post_init__(self):
        if not isinstance(self.start_word, str) or not self.start_word.strip():
            raise ValueError("start_word must be a non-empty string")
        if not isinstance(self.chain_separator, str):
            raise ValueError(f"chain_separator must be a string, got {self.chain_separator!r}")
        for field_name in ("min_difficulty", "max_difficulty"):
            value = getattr(self, field_name)
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{field_name} must be an integer, got {value!r}")
        if self.min_difficulty < 1:
            raise ValueError(f"min_difficulty must be at least 1, got {self.min_difficulty}")
        if self.min_difficulty > self.max_difficulty:
            raise ValueError(
                f"min_difficulty ({self.min_difficulty}) cannot exceed "
                f"max_difficulty ({self.max_difficulty})"
            )

    def threshold_for(self, difficulty: int) -> int:
        """Map a difficulty level to the maximum allowed edit distance.

        Harder levels give smaller thresholds. With the default 1-10 range
        this is ``11 - difficulty``.
        """
        return self.max_difficulty + 1 - difficulty

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameSettings":
        """Create settings from a dictionary, ignoring unknown keys."""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        unknown = sorted(set(data) - set(known))
        if unknown:
            logger.warning(f"Ignoring unknown settings keys: {', '.join(unknown)}")
        return cls(**known)


def load_settings(settings_file: Optional[Union[str, Path]] = None) -> GameSettings:
    """Load game settings from YAML.

    Args:
        settings_file: Path to a YAML file. Defaults to the bundled
            ``inputs/settings.yaml``.

    Returns:
        GameSettings built from the file, or defaults if the file is missing.

    Raises:
        ValueError: If the file is not a mapping or holds invalid values.
    """
    file_path = Path(settings_file) if settings_file else DEFAULT_SETTINGS_FILE

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.warning(f"Settings file not found: {file_path}, using defaults")
        return GameSettings()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing settings file {file_path}: {e}")
        raise ValueError(f"Invalid YAML in {file_path}: {e}") from e

    if data is None:
        return GameSettings()
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {file_path} must contain a mapping")

    game_data = data.get("game", data)
    if not isinstance(game_data, dict):
        raise ValueError(f"'game' section in {file_path} must be a mapping")

    settings = GameSettings.from_dict(game_data)
    logger.debug(f"Loaded settings from {file_path}: {settings.to_dict()}")
    return settings
