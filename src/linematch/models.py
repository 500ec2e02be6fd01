from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from . import config as CFG
from .splitter import LineSplitter

# (score, ascending byte offsets into the scored line)
MatchResult = Tuple[float, List[int]]


@dataclass(frozen=True)
class RankedRow:
    text: str                 # candidate line exactly as given
    score: float
    positions: List[int]      # byte offsets into text


@dataclass(frozen=True)
class DisplayRow:
    text: str                 # possibly shortened text shown to the user
    score: float
    positions: List[int]      # byte offsets into the shown text


@dataclass(frozen=True)
class FilterResult:
    indices: List[List[int]]
    lines: List[str]
    truncated: Dict[int, str] = field(default_factory=dict)  # row index -> original text

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class MatchConfig:
    """Everything the pipeline needs besides the query and the candidates."""
    winwidth: int = CFG.WINWIDTH
    enable_icon: bool = CFG.ENABLE_ICON
    line_splitter: str = CFG.LINE_SPLITTER
    algo: str = CFG.ALGO

    def __post_init__(self) -> None:
        if self.winwidth < 0:
            raise ValueError(f"winwidth must be >= 0, got {self.winwidth}")
        LineSplitter.parse(self.line_splitter)

    @classmethod
    def from_env(cls, **overrides) -> "MatchConfig":
        """Defaults from linematch.config (env-overridable), then explicit overrides."""
        values = {
            "winwidth": CFG.WINWIDTH,
            "enable_icon": CFG.ENABLE_ICON,
            "line_splitter": CFG.LINE_SPLITTER,
            "algo": CFG.ALGO,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


@dataclass(frozen=True)
class Selection:
    kind: str                 # "files" | "filer" | "grep" | "blines" | "proj_tags" | "buffer_tags"
    path: str
    lnum: Optional[int] = None
