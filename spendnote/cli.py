# -*- coding: utf-8 -*-
"""spendnote command line.

Parses one bookkeeping entry and prints the result as a single JSON object:

    spendnote parse "cafe 45k" --language vi --currency VND
    spendnote parse "hôm qua ăn trưa 60k" --no-llm

Exit status is 0 when a transaction was produced and 1 otherwise.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from typing import Any, Optional, Sequence

from spendnote import config
from spendnote.processor import process_input


def _print_json(payload: dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False))
    sys.stdout.write("\n")


def _iso_date(value: str) -> str:
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date (expected YYYY-MM-DD): {value}")


def cmd_parse(args: argparse.Namespace) -> int:
    result = process_input(
        args.text,
        input_mode=args.mode,
        language=args.language,
        fallback_currency=args.currency,
        preferred_type=args.type,
        skip_gpt=bool(args.no_llm),
        entry_date=args.date,
    )
    _print_json(result.to_dict())
    return 0 if result.status == "ok" else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spendnote", description="Free-text transaction parser")
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Parse one entry into a transaction")
    p_parse.add_argument("text", help="Entry text, e.g. 'cafe 45k'")
    p_parse.add_argument("--language", choices=["en", "vi"], default=config.DEFAULT_LANGUAGE)
    p_parse.add_argument("--currency", choices=["USD", "VND"], default=config.DEFAULT_CURRENCY,
                         help="Currency assumed when the text has no currency cue")
    p_parse.add_argument("--type", choices=["income", "expense"], default=None,
                         help="Force the transaction type")
    p_parse.add_argument("--mode", choices=["manual", "text", "voice", "image"], default="text",
                         help="Input provenance tag")
    p_parse.add_argument("--date", type=_iso_date, default=None,
                         help="Entry date that overrides the parsed date")
    p_parse.add_argument("--no-llm", action="store_true", help="Never call the remote normalizer")
    p_parse.set_defaults(func=cmd_parse)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
