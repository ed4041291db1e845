"""Logging setup shared by the game CLIs.

Two sinks:
- A JSON-lines file in the log directory with every record (DEBUG and up)
- A rich console handler that stays quiet (WARNING) unless --verbose

Game events are ordinary log records carrying an ``event`` field in
``extra`` so they can be filtered out of the JSONL file later.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.logging import RichHandler

GAME_LOGGER_NAME = "rockpaper.events"

# Attributes every LogRecord has; anything else came in through ``extra``
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                entry[key] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


def setup_logging(log_dir: Path, verbose: bool = False, filename: str = "rockpaper.jsonl") -> Path:
    """Configure root logging for a CLI run.

    Returns:
        Path of the JSONL log file.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / filename

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Re-running setup (tests, repeated commands) must not stack handlers
    for handler in list(root.handlers):
        if getattr(handler, "_rockpaper_handler", False):
            root.removeHandler(handler)
            handler.close()

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(JSONFormatter())
    file_handler._rockpaper_handler = True

    console_handler = RichHandler(show_path=False, rich_tracebacks=True)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler._rockpaper_handler = True

    root.addHandler(file_handler)
    root.addHandler(console_handler)

    logging.getLogger(__name__).debug(f"Logging to {log_file}")
    return log_file


def log_game_start(game_id: str, settings: Dict[str, Any]) -> None:
    """Record the start of a game."""
    logging.getLogger(GAME_LOGGER_NAME).info(
        f"Game {game_id} started",
        extra={"event": "game_start", "game_id": game_id, "settings": settings},
    )


def log_move(
    game_id: str,
    word: str,
    previous: str,
    distance: int,
    threshold: int,
    accepted: bool,
    score: int,
) -> None:
    """Record a single move attempt."""
    logging.getLogger(GAME_LOGGER_NAME).info(
        f"Move {word!r} after {previous!r}: {'accepted' if accepted else 'rejected'}",
        extra={
            "event": "move",
            "game_id": game_id,
            "word": word,
            "previous": previous,
            "distance": distance,
            "threshold": threshold,
            "accepted": accepted,
            "score": score,
        },
    )


def log_game_end(
    game_id: str,
    end_reason: str,
    score: int,
    chain: List[str],
    difficulty: Optional[int],
    duration: float,
) -> None:
    """Record the end of a game with its box score."""
    logging.getLogger(GAME_LOGGER_NAME).info(
        f"Game {game_id} ended ({end_reason}) with score {score}",
        extra={
            "event": "game_end",
            "game_id": game_id,
            "end_reason": end_reason,
            "score": score,
            "chain": chain,
            "difficulty": difficulty,
            "duration_sec": round(duration, 3),
        },
    )
