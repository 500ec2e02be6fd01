"""
Boundary adapter for dynamically typed hosts.

Inside the package the truncation table is keyed by row index. Hosts that
receive results through a dynamic call (editor scripting bridges, JSON)
only keep string-keyed dicts intact, so the table is re-keyed here, and
only here, by the shortened display text.
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Tuple

from .engine import filter_candidates
from .models import FilterResult, MatchConfig

HostResult = Tuple[List[List[int]], List[str], Dict[str, str]]


def to_host(result: FilterResult) -> HostResult:
    """(indices, lines, {display text: original text}) for a FilterResult."""
    truncated_map = {result.lines[i]: original for i, original in result.truncated.items()}
    return result.indices, result.lines, truncated_map


def fuzzy_match(
    query: str,
    candidates: Iterable[str],
    winwidth: int,
    enable_icon: bool,
    line_splitter: str,
) -> HostResult:
    """Host-facing entry: rank candidates for query and return the three aligned outputs."""
    config = MatchConfig.from_env(
        winwidth=winwidth,
        enable_icon=enable_icon,
        line_splitter=line_splitter,
    )
    return to_host(filter_candidates(query, candidates, config))
