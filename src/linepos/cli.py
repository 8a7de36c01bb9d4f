from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict

import structlog
from pydantic import ValidationError

from .api import index_file
from .config import load_settings
from .logging import configure_logging
from .spans import Position


logger = structlog.get_logger(__name__)


def _offset(text: str) -> int:
    value = int(text, 0)
    if value < 0:
        raise argparse.ArgumentTypeError(f"offset must not be negative: {text}")
    return value


def _shifted(pos: Position, one_based: bool) -> Position:
    if not one_based:
        return pos
    return Position(offset=pos.offset, line=pos.line + 1, column=pos.column + 1)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="linepos", description="Translate byte offsets into line/column positions")
    ap.add_argument("file", help="File the offsets point into")
    ap.add_argument("offsets", nargs="+", type=_offset, help="Byte offsets (decimal, or 0x.. hex)")
    ap.add_argument("--one-based", action="store_true", default=None, help="Print 1-based lines and columns")
    ap.add_argument("--json", action="store_true", help="Print positions as JSON")
    ap.add_argument("--log-level", default=None, help="Logging level (default: $LINEPOS_LOG_LEVEL or warning)")
    args = ap.parse_args(argv)

    try:
        settings = load_settings(log_level=args.log_level, one_based=args.one_based)
    except ValidationError as e:
        ap.error(str(e))
    configure_logging(settings.log_level)

    try:
        index = index_file(args.file)
    except OSError as e:
        logger.error("file.unreadable", file=args.file, error=str(e))
        print(f"linepos: cannot read {args.file}: {e.strerror or e}", file=sys.stderr)
        return 1

    for o in args.offsets:
        if o > index.size:
            logger.warning("offset.past_end", file=args.file, offset=o, size=index.size)
    positions = [_shifted(index.position(o), settings.one_based) for o in args.offsets]
    if args.json:
        print(json.dumps([asdict(p) for p in positions], indent=2))
    else:
        for p in positions:
            print(f"{args.file}:{p.line}:{p.column}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
