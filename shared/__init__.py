"""Shared infrastructure for the game CLIs.

- utils: logging setup and structured game-event helpers
"""

__version__ = "0.1.0"
