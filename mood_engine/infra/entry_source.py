# mood_engine/infra/entry_source.py
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from mood_engine.domain.models import JournalEntry, MoodCategory
from mood_engine.exceptions import EntryDataError, InvalidArgument
from mood_engine.infra.yaml_io import load_entry_records

logger = logging.getLogger(__name__)

# header names tried in order when no column is given explicitly
CONTENT_COLUMNS = ["content", "text", "entry", "journal", "body"]
DATE_COLUMNS = ["date", "timestamp", "created_at", "time"]
MOOD_COLUMNS = ["mood", "label"]


def _detect_col(headers: Sequence[Any], candidates: Sequence[str]) -> Optional[str]:
    """Find a header by case-insensitive exact name, in ``candidates`` order."""
    lowered = {str(h).strip().lower(): h for h in headers if h is not None}
    for name in candidates:
        if name in lowered:
            return lowered[name]
    return None


def _resolve_col(headers: Sequence[Any], explicit: Optional[str], candidates: Sequence[str], what: str, required: bool) -> Optional[str]:
    if explicit:
        if explicit not in headers:
            raise EntryDataError(f"{what} column '{explicit}' not found. headers={list(headers)}")
        return explicit
    col = _detect_col(headers, candidates)
    if col is None and required:
        raise EntryDataError(f"could not auto-detect the {what} column. headers={list(headers)}")
    return col


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _parse_date(value: Any) -> Optional[datetime]:
    if _is_blank(value):
        return None
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, datetime):
        return value
    try:
        return pd.Timestamp(str(value).strip()).to_pydatetime()
    except (ValueError, TypeError):
        return None


def _read_records(path: Path, sheet: Optional[str]) -> List[Dict[str, Any]]:
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return load_entry_records(path)

    if not path.exists():
        raise EntryDataError(f"entry file not found: {path}")

    if suffix == ".csv":
        df = pd.read_csv(path)
    elif suffix == ".xlsx":
        # numeric sheet names select by position
        sheet_name: Any = 0 if sheet is None else (int(sheet) if str(sheet).isdigit() else sheet)
        df = pd.read_excel(path, sheet_name=sheet_name, engine="openpyxl")
    else:
        raise EntryDataError(f"unsupported entry file type: {path.suffix} (use .xlsx, .csv or .yaml)")

    return df.to_dict(orient="records")


def read_journal_entries(
    path: Path,
    *,
    sheet: Optional[str] = None,
    content_col: Optional[str] = None,
    date_col: Optional[str] = None,
    mood_col: Optional[str] = None,
) -> List[JournalEntry]:
    """
    Load journal entries from an .xlsx, .csv or .yaml file.

    - rows with empty content or an unreadable date are skipped (logged)
    - an unknown mood label stops the import (EntryDataError)
    """
    records = _read_records(path, sheet)
    if not records:
        return []

    headers = list(records[0].keys())
    c_col = _resolve_col(headers, content_col, CONTENT_COLUMNS, "content", required=True)
    d_col = _resolve_col(headers, date_col, DATE_COLUMNS, "date", required=True)
    m_col = _resolve_col(headers, mood_col, MOOD_COLUMNS, "mood", required=False)

    entries: List[JournalEntry] = []
    for row_no, rec in enumerate(records, start=1):
        content = rec.get(c_col)
        if _is_blank(content):
            logger.warning("row %d skipped: empty content", row_no)
            continue

        date = _parse_date(rec.get(d_col))
        if date is None:
            logger.warning("row %d skipped: unreadable date %r", row_no, rec.get(d_col))
            continue

        mood = None
        if m_col is not None and not _is_blank(rec.get(m_col)):
            try:
                mood = MoodCategory.parse(rec[m_col])
            except InvalidArgument as e:
                raise EntryDataError(f"row {row_no}: {e}") from e

        entries.append(JournalEntry(content=str(content).strip(), date=date, mood=mood))

    logger.info("read %d journal entries from %s (%d rows)", len(entries), path, len(records))
    return entries
