# Command-line directory search over a roster file.
# Prints ranked hits (rank, id, score, name, email, department / location),
# or the raw JSON array with --json.

from __future__ import annotations
import argparse
import json
import sys
from typing import List, Optional

from yellowpages.search import DirectoryEngine, FileRecordSource, RecordSourceError
from yellowpages.settings import settings


def _format_hit(rank: int, cand) -> str:
    c = cand.record
    where = " / ".join(x for x in (c.department, c.location) if x)
    return f"{rank}. {c.id}  score={cand.score:g}  {c.full_name}  <{c.email}>  {where}".rstrip()


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Search the yellow pages directory.")
    ap.add_argument("query", nargs="?", default="", help="Free-text query (empty lists everyone)")
    ap.add_argument("--department", default=None, help="Exact department filter")
    ap.add_argument("--location", default=None, help="Exact location filter")
    ap.add_argument("-k", "--limit", type=int, default=None, help="Maximum number of results")
    ap.add_argument("--data", default=str(settings.DATA_PATH), help="Roster file (.json/.yaml)")
    ap.add_argument("--json", action="store_true", help="Print results as a JSON array")
    args = ap.parse_args(argv)

    engine = DirectoryEngine(FileRecordSource(args.data))
    try:
        hits = engine.rank(args.query, args.department, args.location, args.limit)
    except RecordSourceError as e:
        print(f"ERROR: {e}", file=sys.stderr, flush=True)
        return 2

    if args.json:
        print(json.dumps([h.record.to_json() for h in hits], ensure_ascii=False, indent=2))
        return 0

    print(f"Query: {args.query!r}  Results: {len(hits)}\n")
    for rank, h in enumerate(hits, start=1):
        print(_format_hit(rank, h))
    return 0


if __name__ == "__main__":
    sys.exit(main())
