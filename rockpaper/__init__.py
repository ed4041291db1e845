"""Rock Paper Chain: a word chain game scored by edit distance.

The game starts from "rock". Each new word must differ from the previous
one by at least one and at most ``threshold`` single-character edits,
where the threshold shrinks as the chosen difficulty (1-10) grows:
- Difficulty 1: up to 10 edits
- Difficulty 10: exactly 1 edit
- Repeating the previous word is never allowed
- The first rejected word ends the game
"""

from rockpaper.distance import levenshtein_distance
from rockpaper.game_engine import GameSession, Mode, Outcome

__version__ = "0.1.0"

__all__ = ["GameSession", "Mode", "Outcome", "levenshtein_distance"]
