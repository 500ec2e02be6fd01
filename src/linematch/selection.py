from __future__ import annotations
import logging
from pathlib import Path
from typing import Mapping, Optional

from .matcher import strip_icon
from .models import Selection
from .pattern import (
    extract_blines_lnum,
    extract_buf_tags_lnum,
    extract_grep_position,
    extract_proj_tags,
)

log = logging.getLogger(__name__)


def original_line(display_line: str, truncated_map: Mapping[str, str]) -> str:
    """Full candidate text behind a display line (itself if it was never shortened)."""
    return truncated_map.get(display_line, display_line)


def resolve_selection(
    curline: str,
    provider_id: str,
    cwd: str,
    *,
    start_buffer_path: Optional[str] = None,
    enable_icon: bool = False,
) -> Selection:
    """
    Turn the selected (original, untruncated) line into the file and line it
    points at. Only string and path arithmetic; nothing is read from disk.
    Raises ValueError when the provider is unknown or the line can't be parsed.
    """
    if enable_icon:
        curline, _ = strip_icon(curline)
    log.debug("curline: %s", curline)

    def rebuild_abs_path(rel: str) -> str:
        return str(Path(cwd) / rel)

    if provider_id in ("files", "git_files"):
        return Selection("files", rebuild_abs_path(curline))
    if provider_id == "filer":
        return Selection("filer", rebuild_abs_path(curline))
    if provider_id == "proj_tags":
        parsed = extract_proj_tags(curline)
        if parsed is None:
            raise ValueError(f"Couldn't extract proj tags: {curline!r}")
        lnum, path = parsed
        return Selection("proj_tags", rebuild_abs_path(path), lnum)
    if provider_id in ("grep", "grep2"):
        parsed = extract_grep_position(curline)
        if parsed is None:
            raise ValueError(f"Couldn't extract grep position: {curline!r}")
        path, lnum, _col = parsed
        return Selection("grep", rebuild_abs_path(path), lnum)
    if provider_id == "blines" and start_buffer_path is not None:
        lnum = extract_blines_lnum(curline)
        if lnum is None:
            raise ValueError(f"Couldn't extract buffer lnum: {curline!r}")
        return Selection("blines", start_buffer_path, lnum)
    if provider_id == "tags" and start_buffer_path is not None:
        lnum = extract_buf_tags_lnum(curline)
        if lnum is None:
            raise ValueError(f"Couldn't extract buffer tags: {curline!r}")
        return Selection("buffer_tags", start_buffer_path, lnum)

    raise ValueError(
        f"Couldn't resolve selection for provider {provider_id!r} "
        f"(cwd={cwd!r}, start_buffer_path={start_buffer_path!r})"
    )
