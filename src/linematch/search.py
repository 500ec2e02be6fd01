from __future__ import annotations
from typing import Optional

from .models import MatchResult
from .normalize import lower_and_map, byte_starts


def _find_start_at(haystack: str, at: int, needle: str) -> Optional[int]:
    """Leftmost index of needle in haystack[at:], as an index into haystack."""
    idx = haystack.find(needle, at)
    return None if idx == -1 else idx


def substr_scorer(query: str, line: str) -> Optional[MatchResult]:
    """
    /* ~~~ Score a space-separated query against one line.
       Each term must be found, in order, after the end of the previous
       term's match; no backtracking. Returns None if any term is missing.
       score = 2/(first+1) + 1/(last+1) - span  (positions are byte offsets) ~~~ */
    """
    lowered, to_orig = lower_and_map(line)
    starts = byte_starts(line)

    offset = 0
    positions: list[int] = []
    for term in query.split():
        term = term.lower()
        idx = _find_start_at(lowered, offset, term)
        if idx is None:
            return None
        offset = idx + len(term)

        # lowered range -> original chars -> every byte those chars span
        first_char = to_orig[idx]
        last_char = to_orig[idx + len(term) - 1]
        lo = starts[first_char]
        if positions and positions[-1] >= lo:
            # previous term ended inside the same expanded character
            lo = positions[-1] + 1
        positions.extend(range(lo, starts[last_char + 1]))

    if not positions:
        return 0.0, positions

    first, last = positions[0], positions[-1]
    span = last - first + 1
    return 2.0 / (first + 1) + 1.0 / (last + 1) - span, positions
