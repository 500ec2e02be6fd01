from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from . import config as CFG
from .fzy import Scorer, fuzzy_score
from .models import MatchResult
from .search import substr_scorer
from .splitter import LineSplitter, split_line


def strip_icon(line: str) -> tuple[str, int]:
    """
    Drop the leading icon block and return (rest, bytes dropped).
    The block is ICON_BYTES long; if that cut falls inside a character the
    whole character goes, so the returned byte count always lands on a
    character boundary of the original line.
    """
    dropped = 0
    i = 0
    while i < len(line) and dropped < CFG.ICON_BYTES:
        dropped += len(line[i].encode("utf-8"))
        i += 1
    return line[i:], dropped


@dataclass(frozen=True)
class SubstringMatcher:
    """Multi-term queries: every whitespace-separated term, left to right, on the full line."""
    query: str

    def match(self, line: str) -> Optional[MatchResult]:
        return substr_scorer(self.query, line)


@dataclass(frozen=True)
class SingleTermMatcher:
    """Single-term queries: delegate to a fuzzy scorer, fixing up offsets for icons and splitters."""
    query: str
    scorer: Scorer = fuzzy_score
    enable_icon: bool = False
    line_splitter: LineSplitter = LineSplitter.FULL

    def match(self, line: str) -> Optional[MatchResult]:
        if self.enable_icon:
            text, shift = strip_icon(line)
        else:
            text, shift = line, 0

        part, char_offset = split_line(text, self.line_splitter)
        if char_offset:
            shift += len(text[:char_offset].encode("utf-8"))

        res = self.scorer(part, self.query)
        if res is None:
            return None
        score, positions = res
        if shift:
            positions = [p + shift for p in positions]
        return float(score), list(positions)


Matcher = Union[SubstringMatcher, SingleTermMatcher]


def select_matcher(
    query: str,
    *,
    scorer: Scorer = fuzzy_score,
    enable_icon: bool = False,
    line_splitter: Union[str, LineSplitter] = LineSplitter.FULL,
) -> Matcher:
    """Pick the scoring strategy once per query."""
    if " " in query:
        return SubstringMatcher(query)
    return SingleTermMatcher(
        query,
        scorer=scorer,
        enable_icon=enable_icon,
        line_splitter=LineSplitter.parse(line_splitter),
    )
