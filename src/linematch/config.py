from __future__ import annotations
import os


def _env_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


def _env_bool(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


# /* ~~~ display ~~~ */
WINWIDTH: int = _env_int("LINEMATCH_WINWIDTH", 62)
ENABLE_ICON: bool = _env_bool("LINEMATCH_ENABLE_ICON", False)

# Icon block = glyph (3 bytes in UTF-8) + one space separator
ICON_BYTES: int = 4
ICON_CHARS: int = 2

# marker inserted where a long line was cut
DOTS: str = ".."

# /* ~~~ matching ~~~ */
LINE_SPLITTER: str = os.getenv("LINEMATCH_LINE_SPLITTER", "Full")
ALGO: str = os.getenv("LINEMATCH_ALGO", "fzy")

# fzy gives up scoring (but still matches) past this many characters
MATCH_MAX_LEN: int = 1024

# /* ~~~ ranking: score on a thread pool once the input is this large ~~~ */
PARALLEL_THRESHOLD: int = _env_int("LINEMATCH_PARALLEL_THRESHOLD", 20_000)
_cpu = os.cpu_count() or 4
WORKERS: int = _cpu * 2
CHUNKSIZE: int = 256

# Progress logging (set LINEMATCH_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("LINEMATCH_VERBOSE") == "1"
