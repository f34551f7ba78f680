#  analyze_journal_file.py
"""
Batch report over a journal export.

    python -m mood_engine.usecases.analyze_journal_file --input entries.xlsx --csv hourly.csv

Reads entries (.xlsx / .csv / .yaml), writes the report YAML into the
output directory and, with --csv, the hourly breakdown CSV.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from mood_engine.core.config import LOG_LEVEL
from mood_engine.domain.aggregation import hourly_breakdown
from mood_engine.exceptions import EntryDataError, InvalidArgument
from mood_engine.infra.entry_source import read_journal_entries
from mood_engine.infra.output_repo import save_report_yaml
from mood_engine.infra.report_export import save_hourly_csv
from mood_engine.services.analysis_service import get_engine
from mood_engine.services.report_service import build_report, resolve_moods

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Mood report for a journal export")
    ap.add_argument("--input", required=True, help="entry file (.xlsx, .csv or .yaml)")
    ap.add_argument("--sheet", default=None, help="sheet name or index (default: first sheet)")
    ap.add_argument("--content-col", default=None, help="text column (default: auto-detect)")
    ap.add_argument("--date-col", default=None, help="timestamp column (default: auto-detect)")
    ap.add_argument("--mood-col", default=None, help="stored mood column (default: auto-detect, optional)")
    ap.add_argument("--top-n", type=int, default=None, help="number of buzz words")
    ap.add_argument("--csv", default=None, help="also write the hourly breakdown CSV here")
    ap.add_argument("--name", default="journal", help="label used in the report file name")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        entries = read_journal_entries(
            Path(args.input),
            sheet=args.sheet,
            content_col=args.content_col,
            date_col=args.date_col,
            mood_col=args.mood_col,
        )
        engine = get_engine()
        moods = resolve_moods(entries, engine)
        report = build_report(entries, top_n=args.top_n, engine=engine, moods=moods)
    except (EntryDataError, InvalidArgument) as e:
        logger.error("%s", e)
        return 2

    path = save_report_yaml(args.name, report)
    print(f"[analyze_journal_file] report: {path}")
    print(f"[analyze_journal_file] {report['summary']}")

    if args.csv:
        buckets = hourly_breakdown([(e.date, m) for e, m in zip(entries, moods)])
        csv_path = save_hourly_csv(buckets, Path(args.csv))
        print(f"[analyze_journal_file] hourly csv: {csv_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
