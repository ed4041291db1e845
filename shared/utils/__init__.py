"""Shared utility modules for the game CLIs.

- logging: JSON-lines logging setup and structured game-event helpers
"""

from .logging import JSONFormatter, setup_logging, log_game_start, log_move, log_game_end

__all__ = [
    "JSONFormatter",
    "setup_logging",
    "log_game_start",
    "log_move",
    "log_game_end",
]
