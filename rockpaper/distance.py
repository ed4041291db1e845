"""Edit distance between words.

The game only cares about how many single-character edits separate two
words, so this is the classic Levenshtein metric computed with a full
dynamic-programming table.
"""

from typing import List


def levenshtein_distance(a: str, b: str) -> int:
    """Return the minimum number of insertions, deletions or substitutions
    needed to turn ``a`` into ``b``.

    Comparison is exact (case-sensitive); use ``case_insensitive_distance``
    for player input.

    Examples:
        levenshtein_distance("rock", "sock") -> 1
        levenshtein_distance("rock", "rocket") -> 2
        levenshtein_distance("", "paper") -> 5
    """
    m, n = len(a), len(b)

    # dp[i][j] = distance between a[:i] and b[:j]
    dp: List[List[int]] = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,         # deletion
                dp[i][j - 1] + 1,         # insertion
                dp[i - 1][j - 1] + cost,  # substitution or match
            )

    return dp[m][n]


def case_insensitive_distance(a: str, b: str) -> int:
    """Edit distance after lower-casing both words."""
    return levenshtein_distance(a.lower(), b.lower())
