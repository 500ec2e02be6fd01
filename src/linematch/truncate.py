from __future__ import annotations
from typing import Dict, Iterable, List, Optional

from . import config as CFG
from .models import DisplayRow, RankedRow
from .normalize import bytes_to_chars, chars_to_bytes, display_width


def _fit_head(body: str, budget: int) -> int:
    """Largest k such that body[:k] fits in budget columns."""
    used = 0
    for k, ch in enumerate(body):
        used += display_width(ch)
        if used > budget:
            return k
    return len(body)


def _fit_tail(body: str, budget: int) -> int:
    """Smallest s such that body[s:] fits in budget columns."""
    used = 0
    for s in range(len(body) - 1, -1, -1):
        used += display_width(body[s])
        if used > budget:
            return s + 1
    return 0


def truncate_line(
    text: str,
    positions: List[int],
    winwidth: int,
    skipped: Optional[int] = None,
) -> tuple[str, List[int], bool]:
    """
    Shorten text to winwidth columns, keeping the matched region visible.

    The first `skipped` characters (icon) are always kept. The rest is cut
    with DOTS markers:
      - head kept   when every match fits at the front:  icon + head + ..
      - tail kept   when first match..end fits:          icon + .. + tail
      - otherwise a window from the first match:         icon + .. + mid + ..
    Returns (text, byte positions in that text, shortened?). Positions of
    characters that were cut away are dropped.
    """
    if display_width(text) <= winwidth:
        total = len(text.encode("utf-8"))
        return text, [p for p in positions if 0 <= p < total], False

    dots = CFG.DOTS
    dw = len(dots)
    n_icon = min(skipped or 0, len(text))
    icon, body = text[:n_icon], text[n_icon:]
    budget = max(winwidth - display_width(icon), 0)

    hit_chars = bytes_to_chars(text, positions)
    icon_hits = [c for c in hit_chars if c < n_icon]
    matched = [c - n_icon for c in hit_chars if c >= n_icon]

    if not matched or display_width(body[: matched[-1] + 1]) <= budget - dw:
        k = _fit_head(body, budget - dw)
        shown = icon + body[:k] + dots
        kept = [n_icon + c for c in matched if c < k]
    elif display_width(body[matched[0]:]) <= budget - dw:
        s = _fit_tail(body, budget - dw)
        shown = icon + dots + body[s:]
        kept = [n_icon + dw + c - s for c in matched]
    else:
        s = matched[0]
        e = s + _fit_head(body[s:], budget - 2 * dw)
        shown = icon + dots + body[s:e] + dots
        kept = [n_icon + dw + c - s for c in matched if c < e]

    return shown, chars_to_bytes(shown, icon_hits + kept), True


def truncate_long_matched_lines(
    rows: Iterable[RankedRow],
    winwidth: int,
    skipped: Optional[int] = None,
) -> tuple[List[DisplayRow], Dict[int, str]]:
    """
    Shorten every row wider than winwidth.
    Returns the display rows (same order) and {row index: original text}
    for the rows that were shortened.
    """
    out: List[DisplayRow] = []
    truncated: Dict[int, str] = {}
    for i, row in enumerate(rows):
        text, positions, cut = truncate_line(row.text, row.positions, winwidth, skipped)
        if cut:
            truncated[i] = row.text
        out.append(DisplayRow(text=text, score=row.score, positions=positions))
    return out, truncated
