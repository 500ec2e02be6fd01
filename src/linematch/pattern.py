from __future__ import annotations
import re
from typing import Optional

# Line shapes produced by the providers:
#   grep:        path:lnum:col:content
#   proj_tags:   name:lnum [kind@path] pattern
#   tags:        name:lnum [kind] pattern
#   blines:      lnum content     (lnum may be right-aligned with spaces)
_GREP_RE = re.compile(r"^(.*?):(\d+):(\d+):")
_PROJ_TAGS_RE = re.compile(r"^(.*?):(\d+).*\[(.*?)@(.*?)\]")
_TAG_NAME_RE = re.compile(r"^(.*?):\d+")
_BUF_TAGS_RE = re.compile(r"^.*?:(\d+)")
_BLINES_RE = re.compile(r"^\s*(\d+)")


def extract_grep_position(line: str) -> Optional[tuple[str, int, int]]:
    """(path, lnum, col) of a grep line, or None."""
    m = _GREP_RE.match(line)
    if not m:
        return None
    return m.group(1), int(m.group(2)), int(m.group(3))


def strip_grep_filepath(line: str) -> Optional[tuple[str, int]]:
    """(content, char offset of content) of a grep line, or None."""
    m = _GREP_RE.match(line)
    if not m:
        return None
    return line[m.end():], m.end()


def extract_proj_tags(line: str) -> Optional[tuple[int, str]]:
    """(lnum, path) of a project tags line, or None."""
    m = _PROJ_TAGS_RE.match(line)
    if not m:
        return None
    return int(m.group(2)), m.group(4)


def tag_name_only(line: str) -> Optional[str]:
    m = _TAG_NAME_RE.match(line)
    if not m or not m.group(1):
        return None
    return m.group(1)


def extract_buf_tags_lnum(line: str) -> Optional[int]:
    m = _BUF_TAGS_RE.match(line)
    return int(m.group(1)) if m else None


def extract_blines_lnum(line: str) -> Optional[int]:
    m = _BLINES_RE.match(line)
    return int(m.group(1)) if m else None


def file_name_only(line: str) -> tuple[str, int]:
    """(file name, char offset of the file name) of a path-like line."""
    cut = max(line.rfind("/"), line.rfind("\\")) + 1
    return line[cut:], cut
