"""
linematch: rank candidate lines against a typed query and shape them for display.

The pipeline:
- query with a space -> substring multi-term scorer, otherwise fzy on one term
- score every candidate, drop non-matches, sort best first
- shorten wide rows for the window, keep matched byte positions valid

Example Usage:
    from linematch import fuzzy_match

    indices, lines, truncated = fuzzy_match(
        "su ou", ["substr_scorer_should_work", "unrelated line"],
        winwidth=62, enable_icon=False, line_splitter="Full",
    )
"""
from .engine import filter_candidates, present
from .host import fuzzy_match, to_host
from .matcher import select_matcher, SubstringMatcher, SingleTermMatcher
from .models import DisplayRow, FilterResult, MatchConfig, RankedRow, Selection
from .ranking import rank
from .search import substr_scorer
from .selection import original_line, resolve_selection
from .splitter import LineSplitter

__version__ = "1.0.0"
__all__ = [
    "filter_candidates",
    "present",
    "fuzzy_match",
    "to_host",
    "select_matcher",
    "SubstringMatcher",
    "SingleTermMatcher",
    "DisplayRow",
    "FilterResult",
    "MatchConfig",
    "RankedRow",
    "Selection",
    "rank",
    "substr_scorer",
    "original_line",
    "resolve_selection",
    "LineSplitter",
]
