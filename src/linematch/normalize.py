from __future__ import annotations
import unicodedata
from typing import Iterable, List


def lower_and_map(text: str) -> tuple[str, List[int]]:
    """
    Lower-case text one character at a time and return:
      - the lowered string
      - mapping list: lowered index -> index of the ORIGINAL character
    Lower-casing may expand a character ('İ' -> 'i̇'); every produced char
    maps back to the character it came from, so matches found in the lowered
    string can always be expressed against the original.
    """
    out: list[str] = []
    mapping: List[int] = []
    for orig_i, ch in enumerate(text):
        low = ch.lower()
        out.append(low)
        mapping.extend([orig_i] * len(low))
    return "".join(out), mapping


def byte_starts(text: str) -> List[int]:
    """Byte offset where each character starts, plus the total byte length at the end."""
    starts = [0] * (len(text) + 1)
    acc = 0
    for i, ch in enumerate(text):
        starts[i] = acc
        acc += len(ch.encode("utf-8"))
    starts[len(text)] = acc
    return starts


def chars_to_bytes(text: str, char_indices: Iterable[int]) -> List[int]:
    """Every byte offset covered by the given characters, ascending, no duplicates."""
    starts = byte_starts(text)
    n = len(text)
    out: set[int] = set()
    for ci in char_indices:
        if 0 <= ci < n:
            out.update(range(starts[ci], starts[ci + 1]))
    return sorted(out)


def bytes_to_chars(text: str, byte_positions: Iterable[int]) -> List[int]:
    """Characters containing the given byte offsets; out-of-range offsets are dropped."""
    starts = byte_starts(text)
    total = starts[-1]
    owner = [0] * total
    for ci in range(len(text)):
        for b in range(starts[ci], starts[ci + 1]):
            owner[b] = ci
    return sorted({owner[b] for b in byte_positions if 0 <= b < total})


def char_width(ch: str) -> int:
    """Terminal columns taken by one character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)
