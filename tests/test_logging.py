"""Tests for the shared logging utilities."""

import json
import logging

from shared.utils.logging import (
    GAME_LOGGER_NAME,
    JSONFormatter,
    log_game_end,
    log_game_start,
    setup_logging,
)


class TestJSONFormatter:
    """Test cases for JSONFormatter."""

    def test_basic_fields(self):
        """Test that standard fields are present."""
        record = logging.makeLogRecord({
            "name": "rockpaper.test",
            "levelname": "INFO",
            "levelno": logging.INFO,
            "msg": "hello %s",
            "args": ("world",),
        })
        data = json.loads(JSONFormatter().format(record))

        assert data["message"] == "hello world"
        assert data["level"] == "INFO"
        assert data["logger"] == "rockpaper.test"
        assert "timestamp" in data

    def test_extra_fields_included(self):
        """Test that values passed via extra are serialized."""
        record = logging.makeLogRecord({
            "msg": "move",
            "event": "move",
            "word": "sock",
            "accepted": True,
        })
        data = json.loads(JSONFormatter().format(record))

        assert data["event"] == "move"
        assert data["word"] == "sock"
        assert data["accepted"] is True


class TestSetupLogging:
    """Test cases for setup_logging."""

    def teardown_method(self):
        """Detach the handlers added by the test."""
        root = logging.getLogger()
        for handler in list(root.handlers):
            if getattr(handler, "_rockpaper_handler", False):
                root.removeHandler(handler)
                handler.close()

    def test_writes_jsonl_events(self, tmp_path):
        """Test that game events land in the JSONL file."""
        log_file = setup_logging(tmp_path / "logs")

        log_game_start("abc123", {"start_word": "rock"})
        log_game_end("abc123", "quit", 2, ["sack", "sock", "rock"], 7, 1.23456)

        lines = log_file.read_text(encoding="utf-8").splitlines()
        events = [json.loads(line) for line in lines]
        game_events = [e for e in events if e["logger"] == GAME_LOGGER_NAME]

        assert [e["event"] for e in game_events] == ["game_start", "game_end"]
        assert game_events[0]["settings"] == {"start_word": "rock"}
        assert game_events[1]["chain"] == ["sack", "sock", "rock"]
        assert game_events[1]["duration_sec"] == 1.235

    def test_repeated_setup_does_not_stack_handlers(self, tmp_path):
        """Test that calling setup twice keeps one pair of handlers."""
        setup_logging(tmp_path)
        setup_logging(tmp_path, verbose=True)

        ours = [h for h in logging.getLogger().handlers if getattr(h, "_rockpaper_handler", False)]
        assert len(ours) == 2
