from __future__ import annotations
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from . import config as CFG
from .matcher import Matcher
from .models import MatchResult, RankedRow

log = logging.getLogger(__name__)


def _score_all(matcher: Matcher, lines: List[str], workers: Optional[int], parallel_threshold: int) -> List[Optional[MatchResult]]:
    if len(lines) < parallel_threshold:
        return [matcher.match(line) for line in lines]

    workers = workers or CFG.WORKERS
    log.debug("Scoring %d candidates on %d threads", len(lines), workers)
    with ThreadPoolExecutor(max_workers=workers) as ex:
        # map() yields in input order, so the sort below sees the same sequence either way
        return list(ex.map(matcher.match, lines, chunksize=CFG.CHUNKSIZE))


def _score_key(row: RankedRow) -> float:
    if math.isnan(row.score):
        # a scorer bug, not bad input: never rank around it
        raise AssertionError(f"scorer returned NaN for candidate {row.text!r}")
    return row.score


def rank(
    matcher: Matcher,
    candidates: Iterable[str],
    *,
    workers: Optional[int] = None,
    parallel_threshold: Optional[int] = None,
) -> List[RankedRow]:
    """
    Score every candidate, drop the ones that don't match and sort the rest
    by score, best first. The sort is stable: equal scores keep input order.
    """
    lines = list(candidates)
    threshold = CFG.PARALLEL_THRESHOLD if parallel_threshold is None else parallel_threshold
    results = _score_all(matcher, lines, workers, threshold)

    ranked = [
        RankedRow(text=line, score=res[0], positions=res[1])
        for line, res in zip(lines, results)
        if res is not None
    ]
    ranked.sort(key=_score_key, reverse=True)
    return ranked
