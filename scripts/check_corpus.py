from __future__ import annotations

import argparse
import hashlib

from linepos import BoundTracker, LineIndex
from linepos.testing import generate_cases


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="check_corpus")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=1000)
    args = ap.parse_args(argv)

    h = hashlib.sha256()
    for i, (buf, offsets) in enumerate(generate_cases(seed=args.seed, count=args.count)):
        index = LineIndex.build(buf)
        tracker = BoundTracker(buf)
        for off in offsets:
            tracker.advance(off)
            pos = tracker.snapshot()
            if index.lookup(off) != (pos.line, pos.column):
                raise SystemExit(f"tracker and index disagree at case {i}, offset {off}")
            h.update(f"{pos.offset}:{pos.line}:{pos.column}\n".encode("ascii"))
        h.update(b"---\n")

    print(h.hexdigest())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
