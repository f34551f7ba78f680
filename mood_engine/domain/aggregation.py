from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from mood_engine.domain.models import HourBucket, MoodCategory, MoodDistribution
from mood_engine.exceptions import InvalidArgument

HOURS_PER_DAY = 24


def _dominant(counts: Dict[MoodCategory, int]) -> Optional[MoodCategory]:
    """Mood with the highest count, earlier mood on ties; None when nothing was counted."""
    best: Optional[MoodCategory] = None
    for mood in MoodCategory:
        n = counts.get(mood, 0)
        if n > 0 and (best is None or n > counts[best]):
            best = mood
    return best


def hourly_breakdown(entries: Iterable[Tuple[datetime, Any]]) -> List[HourBucket]:
    """24 hour-of-day buckets for (timestamp, mood) pairs.

    The hour is read from the timestamp as given; no timezone conversion.
    Hours without entries still get a bucket (count 0, no dominant mood),
    so the result always has exactly 24 items, hour ascending.
    """
    per_hour: List[Dict[MoodCategory, int]] = [
        {m: 0 for m in MoodCategory} for _ in range(HOURS_PER_DAY)
    ]

    for timestamp, mood in entries:
        if not isinstance(timestamp, datetime):
            raise InvalidArgument(f"timestamp must be a datetime, got {type(timestamp).__name__}")
        per_hour[timestamp.hour][MoodCategory.parse(mood)] += 1

    return [
        HourBucket(
            hour=hour,
            count=sum(counts.values()),
            dominant_mood=_dominant(counts),
            mood_counts=counts,
        )
        for hour, counts in enumerate(per_hour)
    ]


def mood_distribution(moods: Iterable[Any]) -> MoodDistribution:
    """Counts and percentage share (one decimal) of every mood, in category order."""
    counts: Dict[MoodCategory, int] = {m: 0 for m in MoodCategory}
    for mood in moods:
        counts[MoodCategory.parse(mood)] += 1

    total = sum(counts.values())
    if total > 0:
        percentages = {m: round(n / total * 100, 1) for m, n in counts.items()}
    else:
        percentages = {m: 0.0 for m in MoodCategory}

    return MoodDistribution(
        total=total,
        counts=counts,
        percentages=percentages,
        dominant_mood=_dominant(counts),
    )


def summarize_moods(moods: Iterable[Any]) -> str:
    """One-line mood summary for a therapist's client list.

    e.g. "Mostly anxious (3 of 5 entries); also calm, sad."
    """
    dist = mood_distribution(moods)
    if dist.dominant_mood is None:
        return "No journal entries yet."

    n = dist.counts[dist.dominant_mood]
    noun = "entry" if dist.total == 1 else "entries"
    summary = f"Mostly {dist.dominant_mood.value} ({n} of {dist.total} {noun})"

    others = sorted(
        (m for m, c in dist.counts.items() if c > 0 and m != dist.dominant_mood),
        key=lambda m: (-dist.counts[m], m.rank),
    )
    if others:
        summary += "; also " + ", ".join(m.value for m in others[:2])
    return summary + "."
