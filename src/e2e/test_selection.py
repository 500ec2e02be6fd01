from pathlib import Path

import pytest

from linematch.models import Selection
from linematch.pattern import extract_grep_position, extract_proj_tags
from linematch.selection import original_line, resolve_selection

CWD = "/work/project"


def _abs(rel: str) -> str:
    return str(Path(CWD) / rel)


def test_files_join_cwd():
    assert resolve_selection("src/main.rs", "files", CWD) == Selection("files", _abs("src/main.rs"))
    assert resolve_selection("src/main.rs", "git_files", CWD).kind == "files"


def test_filer():
    assert resolve_selection("docs", "filer", CWD) == Selection("filer", _abs("docs"))


def test_grep_line():
    sel = resolve_selection("src/lib.rs:10:4:fn main() {", "grep", CWD)
    assert sel == Selection("grep", _abs("src/lib.rs"), 10)
    assert resolve_selection("a.py:1:1:x", "grep2", CWD).lnum == 1


def test_proj_tags_line():
    sel = resolve_selection("main:7 [function@src/main.rs] fn main() {", "proj_tags", CWD)
    assert sel == Selection("proj_tags", _abs("src/main.rs"), 7)


def test_blines_and_buffer_tags_use_start_buffer():
    buf = "/tmp/notes.txt"
    assert resolve_selection("  12 some text", "blines", CWD, start_buffer_path=buf) == Selection("blines", buf, 12)
    assert resolve_selection("foo:33 [function] def foo", "tags", CWD, start_buffer_path=buf) == Selection(
        "buffer_tags", buf, 33
    )


def test_icon_is_stripped_before_parsing():
    sel = resolve_selection("\ue615 src/main.rs", "files", CWD, enable_icon=True)
    assert sel.path == _abs("src/main.rs")


@pytest.mark.parametrize("curline,provider,kwargs", [
    ("whatever", "unknown_provider", {}),
    ("  12 text", "blines", {}),                   # no start buffer
    ("not a grep line", "grep", {}),
    ("no tag shape", "proj_tags", {}),
    ("no number", "blines", {"start_buffer_path": "/tmp/x"}),
])
def test_unresolvable_selection_raises(curline, provider, kwargs):
    with pytest.raises(ValueError):
        resolve_selection(curline, provider, CWD, **kwargs)


def test_original_line_lookup():
    table = {"..tail of it": "a very long head and the tail of it"}
    assert original_line("..tail of it", table) == "a very long head and the tail of it"
    assert original_line("short", table) == "short"


def test_pattern_parsers():
    assert extract_grep_position("a/b.c:3:9:text:with:colons") == ("a/b.c", 3, 9)
    assert extract_grep_position("plain") is None
    assert extract_proj_tags("name:5 [kind@p/q.rs] x") == (5, "p/q.rs")
