"""Tests for game settings loading."""

import pytest

from rockpaper.config import DEFAULT_SETTINGS_FILE, GameSettings, load_settings


class TestGameSettings:
    """Test cases for the GameSettings dataclass."""

    def test_defaults(self):
        """Test the built-in defaults."""
        settings = GameSettings()
        assert settings.start_word == "rock"
        assert settings.min_difficulty == 1
        assert settings.max_difficulty == 10

    @pytest.mark.parametrize("difficulty,threshold", [(1, 10), (5, 6), (10, 1)])
    def test_threshold_is_eleven_minus_difficulty(self, difficulty, threshold):
        """Test the default difficulty -> threshold mapping."""
        assert GameSettings().threshold_for(difficulty) == threshold

    def test_threshold_follows_max_difficulty(self):
        """Test that the hardest level always allows exactly one edit."""
        settings = GameSettings(max_difficulty=5)
        assert settings.threshold_for(5) == 1
        assert settings.threshold_for(1) == 5

    @pytest.mark.parametrize("kwargs", [
        {"start_word": ""},
        {"start_word": "   "},
        {"min_difficulty": 0},
        {"min_difficulty": 6, "max_difficulty": 5},
        {"max_difficulty": "ten"},
        {"min_difficulty": True},
        {"chain_separator": 5},
    ])
    def test_invalid_values_rejected(self, kwargs):
        """Test that bad settings raise ValueError."""
        with pytest.raises(ValueError):
            GameSettings(**kwargs)


class TestLoadSettings:
    """Test cases for load_settings."""

    def test_bundled_settings_file(self):
        """Test that the bundled YAML file loads with default values."""
        assert DEFAULT_SETTINGS_FILE.exists()
        assert load_settings() == GameSettings()

    def test_missing_file_falls_back_to_defaults(self, tmp_path):
        """Test that a missing file gives defaults instead of failing."""
        assert load_settings(tmp_path / "nope.yaml") == GameSettings()

    def test_custom_file(self, tmp_path):
        """Test loading values nested under a 'game' key."""
        path = tmp_path / "settings.yaml"
        path.write_text("game:\n  start_word: paper\n  max_difficulty: 5\n", encoding="utf-8")

        settings = load_settings(path)
        assert settings.start_word == "paper"
        assert settings.max_difficulty == 5
        assert settings.min_difficulty == 1

    def test_flat_file_and_unknown_keys(self, tmp_path):
        """Test a top-level mapping; unknown keys are ignored."""
        path = tmp_path / "settings.yaml"
        path.write_text("start_word: stone\ncolour: blue\n", encoding="utf-8")

        assert load_settings(str(path)).start_word == "stone"

    def test_empty_file(self, tmp_path):
        """Test that an empty file gives defaults."""
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path) == GameSettings()

    def test_non_mapping_rejected(self, tmp_path):
        """Test that a YAML list is an error."""
        path = tmp_path / "settings.yaml"
        path.write_text("- rock\n- paper\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_settings(path)

    def test_invalid_values_rejected(self, tmp_path):
        """Test that invalid values in the file raise ValueError."""
        path = tmp_path / "settings.yaml"
        path.write_text("game:\n  min_difficulty: 0\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_settings(path)

    def test_empty_game_section_rejected(self, tmp_path):
        """Test that a 'game' key with no value raises ValueError."""
        path = tmp_path / "settings.yaml"
        path.write_text("game:\n", encoding="utf-8")
        with pytest.raises(ValueError, match="must be a mapping"):
            load_settings(path)

    def test_malformed_yaml_rejected(self, tmp_path):
        """Test that unparseable YAML raises ValueError."""
        path = tmp_path / "settings.yaml"
        path.write_text("game: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_settings(path)

    def test_non_string_separator_rejected(self, tmp_path):
        """Test that a numeric chain_separator in the file is an error."""
        path = tmp_path / "settings.yaml"
        path.write_text("game:\n  chain_separator: 5\n", encoding="utf-8")
        with pytest.raises(ValueError, match="chain_separator"):
            load_settings(path)
