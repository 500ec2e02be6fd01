from linematch.engine import present
from linematch.models import RankedRow
from linematch.normalize import display_width
from linematch.truncate import truncate_line, truncate_long_matched_lines

ICON = "\ue615 "


def _bytes_at(text, positions):
    raw = text.encode("utf-8")
    return bytes(raw[p] for p in positions)


def test_short_line_untouched():
    text, pos, cut = truncate_line("hello", [0, 1], 20)
    assert (text, pos, cut) == ("hello", [0, 1], False)


def test_head_kept_when_no_matches():
    text, pos, cut = truncate_line("a" * 100, [], 20)
    assert cut is True
    assert text == "a" * 18 + ".."
    assert pos == []


def test_head_kept_when_matches_fit_in_front():
    line = "needle" + "x" * 100
    text, pos, _ = truncate_line(line, [0, 1, 2, 3, 4, 5], 30)
    assert text.endswith("..")
    assert display_width(text) <= 30
    assert _bytes_at(text, pos) == b"needle"


def test_tail_kept_when_match_near_end():
    line = "x" * 80 + "needle"
    text, pos, cut = truncate_line(line, list(range(80, 86)), 30)
    assert cut is True
    assert text.startswith("..")
    assert len(text) == 30
    assert pos == list(range(24, 30))
    assert _bytes_at(text, pos) == b"needle"


def test_window_around_first_match_drops_unreachable_positions():
    line = "x" * 50 + "ab" + "y" * 100 + "cd" + "z" * 50
    positions = [50, 51, 152, 153]
    text, pos, _ = truncate_line(line, positions, 30)
    assert text.startswith("..") and text.endswith("..")
    assert len(text) == 30
    assert pos == [2, 3]
    assert _bytes_at(text, pos) == b"ab"
    assert all(p < len(text.encode("utf-8")) for p in pos)


def test_icon_kept_and_positions_follow_bytes():
    line = ICON + "x" * 80 + "hit"
    raw = line.encode("utf-8")
    start = raw.index(b"hit")
    text, pos, _ = truncate_line(line, [start, start + 1, start + 2], 38, skipped=2)
    assert text.startswith(ICON + "..")
    assert display_width(text) <= 38
    assert _bytes_at(text, pos) == b"hit"


def test_wide_characters_count_two_columns():
    line = "漢" * 30
    text, _, cut = truncate_line(line, [], 20)
    assert cut is True
    assert display_width(text) <= 20


def test_map_covers_only_shortened_rows():
    rows = [
        RankedRow("short", 1.0, [0]),
        RankedRow("l" * 200, 0.5, [0]),
        RankedRow("also short", 0.1, []),
    ]
    display, truncated = truncate_long_matched_lines(rows, 40)
    assert len(display) == 3
    assert truncated == {1: "l" * 200}
    assert [d.score for d in display] == [1.0, 0.5, 0.1]


def test_present_reserves_icon_columns():
    line = ICON + "y" * 60
    rows = [RankedRow(line, 1.0, [4])]
    without = present(rows, 62, enable_icon=False)
    with_icon = present(rows, 62, enable_icon=True)
    assert without.truncated == {}
    assert with_icon.truncated == {0: line}
    assert display_width(with_icon.lines[0]) <= 60
    assert with_icon.lines[0].startswith(ICON)
    assert len(with_icon.indices) == len(with_icon.lines) == 1
