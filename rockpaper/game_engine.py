"""Move-validation engine for Rock Paper Chain.

This module holds the rules of the game and nothing else:
- Difficulty selection and the difficulty -> threshold mapping
- The chain of accepted words and the score
- Acceptance of a move: 0 < edit distance(previous, candidate) <= threshold

The console loop (game.py) and the CLI only feed completed input lines into
GameSession and render what it reports back.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from rockpaper.config import GameSettings
from rockpaper.distance import levenshtein_distance

logger = logging.getLogger(__name__)

# Plain optionally-signed decimal; int() alone would also take "1_0"
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class Mode(Enum):
    """Which interpretation of player input is active."""
    SELECTING_DIFFICULTY = "selecting_difficulty"
    PLAYING = "playing"


class Outcome(Enum):
    """Outcome of a single submission."""
    DIFFICULTY_SET = "difficulty_set"
    INVALID_DIFFICULTY_FORMAT = "invalid_difficulty_format"
    DIFFICULTY_OUT_OF_RANGE = "difficulty_out_of_range"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    EMPTY_INPUT = "empty_input"
    GAME_OVER = "game_over"


class SessionStateError(RuntimeError):
    """Raised when an operation is called in the wrong mode."""


@dataclass
class DifficultyResult:
    """Result of submitting a difficulty level."""
    outcome: Outcome
    message: str
    mode: Mode

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.DIFFICULTY_SET


@dataclass
class MoveResult:
    """Result of submitting a word."""
    outcome: Outcome
    message: str
    chain: List[str] = field(default_factory=list)
    score: int = 0
    distance: Optional[int] = None

    @property
    def accepted(self) -> bool:
        return self.outcome == Outcome.ACCEPTED


class GameSession:
    """State of one game: difficulty, threshold, chain, score and message.

    The session starts in SELECTING_DIFFICULTY with the chain set to the
    start word. A valid difficulty moves it to PLAYING for good. The first
    rejected move locks the session: later moves are reported as GAME_OVER
    and never touch the chain or the score.
    """

    def __init__(self, settings: Optional[GameSettings] = None):
        self.settings = settings or GameSettings()

        self.mode = Mode.SELECTING_DIFFICULTY
        self.difficulty: Optional[int] = None
        self.threshold: Optional[int] = None
        self.chain: List[str] = [self.settings.start_word]
        self.score = 0
        self.game_over = False
        self.message = (
            "🪨 📜 ✂️  Welcome to Rock Paper Chain!\n\n"
            f"Select a difficulty level ({self.settings.min_difficulty}-{self.settings.max_difficulty}), "
            f"with {self.settings.min_difficulty} being easiest and "
            f"{self.settings.max_difficulty} hardest:"
        )

    @property
    def head(self) -> str:
        """The most recently accepted word."""
        return self.chain[0]

    def _require_mode(self, mode: Mode) -> None:
        if self.mode != mode:
            raise SessionStateError(
                f"Operation requires mode {mode.value}, session is in {self.mode.value}"
            )

    def submit_difficulty(self, text: str) -> DifficultyResult:
        """Parse and apply a difficulty level.

        Invalid input leaves the session selecting a difficulty and sets a
        retry prompt; it is never raised as an error.
        """
        self._require_mode(Mode.SELECTING_DIFFICULTY)

        low, high = self.settings.min_difficulty, self.settings.max_difficulty
        retry_prompt = f"Please enter a valid number between {low} and {high}:"

        stripped = text.strip()
        if not _INTEGER_RE.fullmatch(stripped):
            logger.debug(f"Difficulty input not a number: {text!r}")
            self.message = retry_prompt
            return DifficultyResult(Outcome.INVALID_DIFFICULTY_FORMAT, self.message, self.mode)

        level = int(stripped)

        if level < low or level > high:
            logger.debug(f"Difficulty {level} outside {low}-{high}")
            self.message = retry_prompt
            return DifficultyResult(Outcome.DIFFICULTY_OUT_OF_RANGE, self.message, self.mode)

        self.difficulty = level
        self.threshold = self.settings.threshold_for(level)
        self.mode = Mode.PLAYING
        self.message = f"What beats {self.head}?"

        logger.info(f"Difficulty set to {level} (threshold {self.threshold})")
        return DifficultyResult(Outcome.DIFFICULTY_SET, self.message, self.mode)

    def submit_move(self, text: str) -> MoveResult:
        """Try to extend the chain with a word."""
        self._require_mode(Mode.PLAYING)

        candidate = text.strip().lower()
        if not candidate:
            return MoveResult(Outcome.EMPTY_INPUT, self.message, list(self.chain), self.score)

        if self.game_over:
            logger.debug(f"Ignoring move {candidate!r}: game is over")
            return MoveResult(Outcome.GAME_OVER, self.message, list(self.chain), self.score)

        previous = self.head.lower()
        dist = levenshtein_distance(previous, candidate)

        if 0 < dist <= self.threshold:
            self.chain.insert(0, candidate)
            self.score += 1
            self.message = (
                f'Good! "{candidate}" beats "{previous}". What beats "{candidate}"?'
            )
            logger.info(f"Accepted {candidate!r} after {previous!r} (distance {dist}), score {self.score}")
            outcome = Outcome.ACCEPTED
        else:
            self.game_over = True
            self.message = (
                f'Invalid answer! "{candidate}" doesn\'t meet the closeness requirement '
                f'to "{previous}". Final score: {self.score}. Press q to quit.'
            )
            logger.info(
                f"Rejected {candidate!r} after {previous!r} "
                f"(distance {dist}, threshold {self.threshold}), final score {self.score}"
            )
            outcome = Outcome.REJECTED

        return MoveResult(outcome, self.message, list(self.chain), self.score, dist)

    def render(self, pending_input: str = "") -> str:
        """Build the display string for the current state.

        Args:
            pending_input: Text the player has typed but not yet submitted.
        """
        if self.mode == Mode.SELECTING_DIFFICULTY:
            return f"{self.message}\n\nYour difficulty level: {pending_input}\n"

        chain_display = ""
        if len(self.chain) > 1:
            chain_display = f"Guessed so far: {self.settings.chain_separator.join(self.chain)}\n"

        return (
            f"{self.message}\n\n"
            f"Difficulty: {self.difficulty}\n"
            f"Score: {self.score}\n"
            f"{chain_display}"
            f"Your answer: {pending_input}\n"
        )
