"""Interactive console loop for Rock Paper Chain."""

import logging
import time
import uuid
from typing import Any, Dict, List, Optional

from rich.console import Console

from rockpaper.config import GameSettings
from rockpaper.game_engine import GameSession, Mode, MoveResult, Outcome
from shared.utils.logging import log_game_end, log_game_start, log_move

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"q", "quit"}


class RockPaperGame:
    """Runs one game against a human at the console.

    The game reads whole lines from the console and hands them to a
    GameSession. Line editing is left to the terminal. Typing ``q``
    (or sending EOF / Ctrl+C) quits at any point; a rejected move ends
    the game.
    """

    def __init__(self, settings: Optional[GameSettings] = None, console: Optional[Console] = None):
        self.settings = settings or GameSettings()
        self.console = console or Console()
        self.session = GameSession(self.settings)

        self.game_id = str(uuid.uuid4())[:8]
        self.moves_log: List[Dict[str, Any]] = []
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    def _read_line(self, prompt: str) -> Optional[str]:
        """Read a line from the console; None means the player left."""
        try:
            return self.console.input(prompt)
        except (EOFError, KeyboardInterrupt):
            return None

    def display(self) -> str:
        """Print the current view and return the input prompt to use."""
        *body, prompt = self.session.render().rstrip("\n").split("\n")
        self.console.print("\n".join(body), markup=False)
        return prompt

    def record_move(self, result: MoveResult, previous: str, word: str) -> None:
        """Keep a log entry for a scored move attempt."""
        accepted = result.accepted
        self.moves_log.append({
            "word": word,
            "previous": previous,
            "distance": result.distance,
            "accepted": accepted,
            "score": result.score,
        })
        log_move(
            self.game_id,
            word=word,
            previous=previous,
            distance=result.distance,
            threshold=self.session.threshold,
            accepted=accepted,
            score=result.score,
        )

    def handle_line(self, line: str) -> Optional[Outcome]:
        """Route a submitted line to the session according to its mode."""
        if self.session.mode == Mode.SELECTING_DIFFICULTY:
            return self.session.submit_difficulty(line).outcome

        previous = self.session.head
        result = self.session.submit_move(line)
        if result.outcome in (Outcome.ACCEPTED, Outcome.REJECTED):
            self.record_move(result, previous, line.strip().lower())
        return result.outcome

    def play(self, difficulty: Optional[int] = None) -> Dict[str, Any]:
        """Play a game until the player quits or a move is rejected.

        Args:
            difficulty: Optional level to apply before the first prompt.

        Returns:
            Summary dict with the final chain, score and move log.
        """
        self.start_time = time.time()
        logger.info(f"Starting Rock Paper Chain game {self.game_id}")
        log_game_start(self.game_id, self.settings.to_dict())

        if difficulty is not None:
            outcome = self.session.submit_difficulty(str(difficulty)).outcome
            if outcome != Outcome.DIFFICULTY_SET:
                logger.warning(f"Ignoring invalid difficulty option: {difficulty}")

        end_reason = "quit"
        while True:
            prompt = self.display()
            line = self._read_line(prompt)
            if line is None or line.strip().lower() in QUIT_COMMANDS:
                break

            if self.handle_line(line) == Outcome.REJECTED:
                end_reason = "rejected"
                self.display()
                break

        self.end_time = time.time()
        duration = self.end_time - self.start_time

        result = {
            "game_id": self.game_id,
            "difficulty": self.session.difficulty,
            "threshold": self.session.threshold,
            "score": self.session.score,
            "chain": list(self.session.chain),
            "moves": self.moves_log,
            "duration": duration,
            "end_reason": end_reason,
        }

        log_game_end(
            self.game_id,
            end_reason=end_reason,
            score=self.session.score,
            chain=result["chain"],
            difficulty=self.session.difficulty,
            duration=duration,
        )
        logger.info(f"Game {self.game_id} completed. Score: {self.session.score}, reason: {end_reason}")
        return result
