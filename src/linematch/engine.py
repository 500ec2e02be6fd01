from __future__ import annotations
import logging
from typing import Iterable, List, Optional

from . import config as CFG
from .fzy import get_scorer
from .matcher import select_matcher
from .models import FilterResult, MatchConfig, RankedRow
from .ranking import rank
from .truncate import truncate_long_matched_lines

log = logging.getLogger(__name__)


# /* ~~~ Shorten ranked rows for display and split them into aligned outputs ~~~ */
def present(rows: List[RankedRow], winwidth: int, enable_icon: bool) -> FilterResult:
    if enable_icon:
        # icon glyph + separator take ICON_CHARS columns of the window
        width = max(winwidth - CFG.ICON_CHARS, 0)
        skipped: Optional[int] = CFG.ICON_CHARS
    else:
        width = winwidth
        skipped = None

    display, truncated = truncate_long_matched_lines(rows, width, skipped)

    indices = [d.positions for d in display]
    lines = [d.text for d in display]
    return FilterResult(indices=indices, lines=lines, truncated=truncated)


# /* ~~~ Rank candidates for a query and shape them for display ~~~ */
def filter_candidates(
    query: str,
    candidates: Iterable[str],
    config: Optional[MatchConfig] = None,
    *,
    workers: Optional[int] = None,
) -> FilterResult:
    """
    Full pipeline for one query evaluation:
      select matcher -> score + sort all candidates -> truncate for display.
    Pure function of its arguments; `config` defaults to MatchConfig().
    """
    config = config or MatchConfig()
    matcher = select_matcher(
        query,
        scorer=get_scorer(config.algo),
        enable_icon=config.enable_icon,
        line_splitter=config.line_splitter,
    )

    ranked = rank(matcher, candidates, workers=workers)
    result = present(ranked, config.winwidth, config.enable_icon)

    log.debug(
        "query=%r matcher=%s matched=%d truncated=%d",
        query, type(matcher).__name__, len(result), len(result.truncated),
    )
    return result
