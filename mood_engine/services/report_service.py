from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from mood_engine.domain.aggregation import hourly_breakdown, mood_distribution, summarize_moods
from mood_engine.domain.models import BuzzWord, HourBucket, JournalEntry, MoodCategory
from mood_engine.exceptions import InvalidArgument
from mood_engine.services.analysis_service import MoodEngine, get_engine

logger = logging.getLogger(__name__)


def buzz_words_to_list(words: Sequence[BuzzWord]) -> List[Dict[str, Any]]:
    return [{"word": w.word, "count": w.count} for w in words]


def buckets_to_list(buckets: Sequence[HourBucket]) -> List[Dict[str, Any]]:
    return [
        {
            "hour": b.hour,
            "count": b.count,
            "dominant_mood": b.dominant_mood.value if b.dominant_mood else None,
            "mood_counts": {m.value: n for m, n in b.mood_counts.items() if n},
        }
        for b in buckets
    ]


def resolve_moods(entries: Sequence[JournalEntry], engine: MoodEngine) -> List[MoodCategory]:
    """Stored mood of each entry; entries saved without one are classified now."""
    moods: List[MoodCategory] = []
    classified = 0
    for e in entries:
        if e.mood is not None:
            moods.append(MoodCategory.parse(e.mood))
        else:
            moods.append(engine.classifier.classify(e.content).mood)
            classified += 1
    if classified:
        logger.debug("classified %d entries without a stored mood", classified)
    return moods


def build_report(
    entries: Sequence[JournalEntry],
    top_n: Optional[int] = None,
    engine: Optional[MoodEngine] = None,
    moods: Optional[Sequence[MoodCategory]] = None,
) -> Dict[str, Any]:
    """
    Retrospective report over many journal entries.

    ``moods`` (one per entry, from resolve_moods) skips re-classification
    when the caller already has them.

    Returns:
        {
          "generated_on": ISO date,
          "total_entries": int,
          "summary": one-line mood summary,
          "mood_distribution": {"counts", "percentages", "dominant_mood"},
          "buzz_words": [{"word", "count"}, ...],
          "hourly": 24 x {"hour", "count", "dominant_mood", "mood_counts"},
        }
    """
    engine = engine or get_engine()
    if moods is None:
        moods = resolve_moods(entries, engine)
    elif len(moods) != len(entries):
        raise InvalidArgument(f"got {len(moods)} moods for {len(entries)} entries")

    dist = mood_distribution(moods)
    words = engine.themes.extract_buzz_words([e.content for e in entries], top_n=top_n)
    buckets = hourly_breakdown([(e.date, m) for e, m in zip(entries, moods)])

    return {
        "generated_on": date.today().isoformat(),
        "total_entries": dist.total,
        "summary": summarize_moods(moods),
        "mood_distribution": {
            "counts": {m.value: n for m, n in dist.counts.items()},
            "percentages": {m.value: p for m, p in dist.percentages.items()},
            "dominant_mood": dist.dominant_mood.value if dist.dominant_mood else None,
        },
        "buzz_words": buzz_words_to_list(words),
        "hourly": buckets_to_list(buckets),
    }
