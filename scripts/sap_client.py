#!/usr/bin/env python3
"""
Interactive SAP client: load a digraph and answer query pairs.

Each query line holds two sides separated by whitespace; a side is a vertex
or a comma-separated set of vertices. For every query the client prints the
length of the shortest ancestral path and a common ancestor on it (-1 when
there is none).

Example:
    python scripts/sap_client.py data/digraph1.txt <<EOF
    3 11
    9 12
    1,7 4
    EOF
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (ROOT, SRC):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from core.sap import SAP
from utils.digraph_loader import read_digraph, read_queries


def main() -> int:
    parser = argparse.ArgumentParser(description="Shortest ancestral path queries on a digraph.")
    parser.add_argument("digraph", help="Digraph file: V, E, then E pairs 'v w'")
    parser.add_argument("--queries", help="File with query lines (default: stdin)")
    parser.add_argument("--stats", action="store_true", help="Print engine stats at the end")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    sap = SAP(read_digraph(args.digraph))

    stream = open(args.queries, encoding="utf-8") if args.queries else sys.stdin
    try:
        for v, w in read_queries(stream):
            try:
                # length и ancestor подряд: второй вызов уходит в кэш
                length = sap.length(v, w)
                ancestor = sap.ancestor(v, w)
            except (IndexError, ValueError, TypeError) as exc:
                print(f"error: {exc}", file=sys.stderr)
                continue
            print(f"length = {length}, ancestor = {-1 if ancestor is None else ancestor}")
    finally:
        if stream is not sys.stdin:
            stream.close()

    if args.stats:
        print(sap.stats(), file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
