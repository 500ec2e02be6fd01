from __future__ import annotations
from enum import Enum
from typing import Union

from .pattern import tag_name_only, file_name_only, strip_grep_filepath


class LineSplitter(str, Enum):
    """Which part of a candidate line the single-term scorer looks at."""
    FULL = "Full"
    TAG_NAME_ONLY = "TagNameOnly"
    FILE_NAME_ONLY = "FileNameOnly"
    GREP_EXCLUDE_FILE_PATH = "GrepExcludeFilePath"

    @classmethod
    def parse(cls, value: Union[str, "LineSplitter"]) -> "LineSplitter":
        if isinstance(value, cls):
            return value
        key = str(value).strip()
        for member in cls:
            if key == member.value:
                return member
        folded = key.lower().replace("_", "")
        for member in cls:
            if folded in (member.value.lower(), member.name.lower().replace("_", "")):
                return member
        raise ValueError(
            f"Unknown line splitter: {value!r} (expected one of {[m.value for m in cls]})"
        )


def split_line(line: str, splitter: LineSplitter) -> tuple[str, int]:
    """
    Return (searchable slice, char offset of the slice in line).
    Lines that don't have the shape the splitter expects are searched whole.
    """
    if splitter is LineSplitter.TAG_NAME_ONLY:
        name = tag_name_only(line)
        if name is not None:
            return name, 0
    elif splitter is LineSplitter.FILE_NAME_ONLY:
        return file_name_only(line)
    elif splitter is LineSplitter.GREP_EXCLUDE_FILE_PATH:
        stripped = strip_grep_filepath(line)
        if stripped is not None:
            return stripped
    return line, 0
