import pytest

from linematch.fzy import fuzzy_score
from linematch.matcher import (
    SingleTermMatcher,
    SubstringMatcher,
    select_matcher,
    strip_icon,
)
from linematch.splitter import LineSplitter, split_line

ICON = "\ue615 "   # 3-byte glyph + space


def test_space_in_query_selects_substring_matcher():
    m = select_matcher("su ou", enable_icon=True)
    assert isinstance(m, SubstringMatcher)


def test_single_term_selects_fuzzy_matcher():
    m = select_matcher("con", enable_icon=True, line_splitter="FileNameOnly")
    assert isinstance(m, SingleTermMatcher)
    assert m.enable_icon is True
    assert m.line_splitter is LineSplitter.FILE_NAME_ONLY


def test_unknown_splitter_rejected():
    with pytest.raises(ValueError):
        select_matcher("con", line_splitter="Sideways")


def test_strip_icon_drops_four_bytes():
    assert len(ICON.encode("utf-8")) == 4
    assert strip_icon(ICON + ".editorconfig") == (".editorconfig", 4)


@pytest.mark.parametrize("line", [
    ICON + ".dependabot/config.yml",
    ICON + ".editorconfig",
])
def test_icon_positions_are_stripped_positions_plus_four(line):
    stripped = line.encode("utf-8")[4:].decode("utf-8")
    expected = fuzzy_score(stripped, "con")
    got = select_matcher("con", enable_icon=True).match(line)
    assert got is not None
    assert got[0] == expected[0]
    assert got[1] == [p + 4 for p in expected[1]]
    assert all(p >= 4 for p in got[1])


def test_positions_index_full_line_when_icons_disabled():
    line = ICON + "abc"
    got = select_matcher("abc", enable_icon=False).match(line)
    assert got[1] == [4, 5, 6]


def test_substring_matcher_uses_full_line_even_with_icons():
    line = ICON + "substr_scorer_should_work"
    score, pos = select_matcher("su ou", enable_icon=True).match(line)
    assert pos[0] >= 4
    raw = line.encode("utf-8")
    assert raw[pos[0]:pos[0] + 2] == b"su"


def test_file_name_only_ignores_directories():
    line = "lib/src/main.py"
    assert select_matcher("src").match(line) is not None
    assert select_matcher("src", line_splitter="FileNameOnly").match(line) is None
    _, pos = select_matcher("main", line_splitter="FileNameOnly").match(line)
    assert pos == [8, 9, 10, 11]


def test_grep_exclude_file_path_matches_content_only():
    line = "foo/bar.rs:12:5:let x = 1;"
    m = select_matcher("foo", line_splitter=LineSplitter.GREP_EXCLUDE_FILE_PATH)
    assert m.match(line) is None
    _, pos = select_matcher("let", line_splitter="GrepExcludeFilePath").match(line)
    assert pos == [16, 17, 18]


def test_tag_name_only_matches_name_only():
    line = "parse_args:42 [function@src/cli.py] def parse_args"
    assert select_matcher("cli", line_splitter="TagNameOnly").match(line) is None
    _, pos = select_matcher("args", line_splitter="TagNameOnly").match(line)
    assert all(p < len("parse_args") for p in pos)


def test_icon_and_splitter_offsets_add_up():
    line = ICON + "foo/bar.rs:3:1:hello"
    _, pos = select_matcher("hello", enable_icon=True, line_splitter="GrepExcludeFilePath").match(line)
    raw = line.encode("utf-8")
    assert raw[pos[0]:pos[-1] + 1] == b"hello"


@pytest.mark.parametrize("value,expected", [
    ("Full", LineSplitter.FULL),
    ("full", LineSplitter.FULL),
    ("grep_exclude_file_path", LineSplitter.GREP_EXCLUDE_FILE_PATH),
    (LineSplitter.TAG_NAME_ONLY, LineSplitter.TAG_NAME_ONLY),
])
def test_splitter_parse(value, expected):
    assert LineSplitter.parse(value) is expected


def test_splitter_falls_back_to_whole_line():
    assert split_line("no colons here", LineSplitter.GREP_EXCLUDE_FILE_PATH) == ("no colons here", 0)
    assert split_line("no tag here", LineSplitter.TAG_NAME_ONLY) == ("no tag here", 0)
