"""
fzy scoring for single-term queries.

Same scoring as the fzy fuzzy finder: a case-insensitive subsequence test
followed by a dynamic-programming pass that rewards matches right after a
path separator, a word separator, a lowercase->uppercase transition or a dot,
rewards consecutive runs and charges a small penalty per skipped character.
"""
from __future__ import annotations
import math
from typing import Callable, Dict, List, Optional

from . import config as CFG
from .models import MatchResult
from .normalize import chars_to_bytes

SCORE_MAX = math.inf
SCORE_MIN = -math.inf

SCORE_GAP_LEADING = -0.005
SCORE_GAP_TRAILING = -0.005
SCORE_GAP_INNER = -0.01
SCORE_MATCH_CONSECUTIVE = 1.0
SCORE_MATCH_SLASH = 0.9
SCORE_MATCH_WORD = 0.8
SCORE_MATCH_CAPITAL = 0.7
SCORE_MATCH_DOT = 0.6

Scorer = Callable[[str, str], Optional[MatchResult]]


def _bonus(last_ch: str, ch: str) -> float:
    if ch.islower() or ch.isdigit():
        if last_ch == "/":
            return SCORE_MATCH_SLASH
        if last_ch in "-_ ":
            return SCORE_MATCH_WORD
        if last_ch == ".":
            return SCORE_MATCH_DOT
        return 0.0
    if ch.isupper():
        if last_ch == "/":
            return SCORE_MATCH_SLASH
        if last_ch in "-_ ":
            return SCORE_MATCH_WORD
        if last_ch == ".":
            return SCORE_MATCH_DOT
        if last_ch.islower():
            return SCORE_MATCH_CAPITAL
    return 0.0


def _precompute_bonus(haystack: str) -> List[float]:
    last_ch = "/"
    out: List[float] = []
    for ch in haystack:
        out.append(_bonus(last_ch, ch))
        last_ch = ch
    return out


def has_match(needle: List[str], haystack: List[str]) -> bool:
    """True if every needle char appears in haystack, in order."""
    j = 0
    m = len(haystack)
    for ch in needle:
        while j < m and haystack[j] != ch:
            j += 1
        if j == m:
            return False
        j += 1
    return True


def match_positions(needle: List[str], haystack: str, lower_haystack: List[str]) -> tuple[float, List[int]]:
    """Score a known match and return the char index matched by each needle char."""
    n = len(needle)
    m = len(haystack)

    if n == m:
        # same length + has_match => equal ignoring case
        return SCORE_MAX, list(range(n))
    if m > CFG.MATCH_MAX_LEN:
        return SCORE_MIN, []

    bonus = _precompute_bonus(haystack)
    D = [[SCORE_MIN] * m for _ in range(n)]   # best score ending with a match at j
    M = [[SCORE_MIN] * m for _ in range(n)]   # best score up to j

    for i in range(n):
        prev_score = SCORE_MIN
        gap_score = SCORE_GAP_TRAILING if i == n - 1 else SCORE_GAP_INNER
        for j in range(m):
            if needle[i] == lower_haystack[j]:
                score = SCORE_MIN
                if i == 0:
                    score = j * SCORE_GAP_LEADING + bonus[j]
                elif j:
                    score = max(M[i - 1][j - 1] + bonus[j],
                                D[i - 1][j - 1] + SCORE_MATCH_CONSECUTIVE)
                D[i][j] = score
                prev_score = max(score, prev_score + gap_score)
            else:
                prev_score = prev_score + gap_score
            M[i][j] = prev_score

    # backtrack: prefer the match that produced the best score at each row
    positions = [0] * n
    match_required = False
    j = m - 1
    for i in range(n - 1, -1, -1):
        while j >= 0:
            if D[i][j] != SCORE_MIN and (match_required or D[i][j] == M[i][j]):
                match_required = bool(
                    i and j and M[i][j] == D[i - 1][j - 1] + SCORE_MATCH_CONSECUTIVE
                )
                positions[i] = j
                j -= 1
                break
            j -= 1

    return M[n - 1][m - 1], positions


def fuzzy_score(line: str, query: str) -> Optional[MatchResult]:
    """
    Score one query term against a line with fzy.
    Returns (score, byte offsets of matched characters) or None when the
    query is not a subsequence of the line.
    """
    if not query:
        return 0.0, []
    needle = [ch.lower() for ch in query]
    lower_haystack = [ch.lower() for ch in line]
    if not has_match(needle, lower_haystack):
        return None
    score, char_positions = match_positions(needle, line, lower_haystack)
    return score, chars_to_bytes(line, char_positions)


_ALGORITHMS: Dict[str, Scorer] = {
    "fzy": fuzzy_score,
}


def get_scorer(algo: str) -> Scorer:
    """Resolve a single-term scorer by algorithm name."""
    try:
        return _ALGORITHMS[algo.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown matching algorithm: {algo!r} (expected one of {sorted(_ALGORITHMS)})"
        ) from None
