from __future__ import annotations
import argparse
import json
import logging
import sys

from linematch import filter_candidates, to_host, MatchConfig, LineSplitter
from linematch import config as CFG


def _read_candidates(path: str) -> list[str]:
    if path == "-":
        return sys.stdin.read().splitlines()
    with open(path, encoding="utf-8", errors="replace") as f:
        return f.read().splitlines()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Rank candidate lines against a query")
    p.add_argument("--q", required=True, help="Query to run")
    p.add_argument("--candidates", default="-", help="File with one candidate per line (default: stdin)")
    p.add_argument("--winwidth", type=int, default=CFG.WINWIDTH, help="Display width in columns")
    p.add_argument("--icon", action="store_true", default=CFG.ENABLE_ICON,
                   help="Candidates carry a leading icon block")
    p.add_argument("--splitter", default=CFG.LINE_SPLITTER,
                   choices=[m.value for m in LineSplitter], help="Part of the line to fuzzy match")
    p.add_argument("--algo", default=CFG.ALGO, help="Single-term matching algorithm")
    p.add_argument("--json", action="store_true", help="Emit [indices, lines, truncated_map] as JSON")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = MatchConfig(
            winwidth=args.winwidth,
            enable_icon=args.icon,
            line_splitter=args.splitter,
            algo=args.algo,
        )
        result = filter_candidates(args.q, _read_candidates(args.candidates), config)
    except ValueError as e:
        p.error(str(e))

    indices, lines, truncated_map = to_host(result)
    if args.json:
        print(json.dumps([indices, lines, truncated_map], ensure_ascii=False, indent=2))
        return 0

    if not lines:
        print("(no matches)")
        return 0
    for i, (line, pos) in enumerate(zip(lines, indices), 1):
        print(f"{i:<3} {line}    {pos}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
