# mood_engine/infra/report_export.py
"""
Hourly breakdown export.

The CSV layout is consumed by the report exporter of the journaling app:
header ``Hour,Count,Dominant Mood``, one row per hour 0..23, and ``none``
as the dominant mood of an empty hour. Column order and names must not change.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

import pandas as pd

from mood_engine.domain.models import HourBucket

HOURLY_CSV_COLUMNS = ["Hour", "Count", "Dominant Mood"]
NO_DOMINANT_MOOD = "none"


def hourly_rows(buckets: Sequence[HourBucket]) -> List[Tuple[int, int, str]]:
    return [
        (
            b.hour,
            b.count,
            b.dominant_mood.value if b.dominant_mood is not None else NO_DOMINANT_MOOD,
        )
        for b in buckets
    ]


def hourly_frame(buckets: Sequence[HourBucket]) -> pd.DataFrame:
    return pd.DataFrame(hourly_rows(buckets), columns=HOURLY_CSV_COLUMNS)


def hourly_csv(buckets: Sequence[HourBucket]) -> str:
    return hourly_frame(buckets).to_csv(index=False, lineterminator="\n")


def save_hourly_csv(buckets: Sequence[HourBucket], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    hourly_frame(buckets).to_csv(path, index=False, lineterminator="\n", encoding="utf-8")
    return path
