"""Rule-based mood inference and aggregation for journal entries.

The four operations below use the process-wide engine (lexicon loaded once).
Build a ``MoodEngine`` yourself to use a different lexicon or config.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Union

from mood_engine.domain.aggregation import hourly_breakdown
from mood_engine.domain.models import BuzzWord, ClassificationResult, HourBucket, MoodCategory
from mood_engine.services.analysis_service import MoodEngine, get_engine

__version__ = "0.1.0"


def classify(text: str) -> ClassificationResult:
    return get_engine().classifier.classify(text)


def explain(text: str, mood: Union[MoodCategory, str]) -> str:
    return get_engine().explainer.explain(text, mood)


def extract_buzz_words(texts: Iterable[str], top_n: Optional[int] = None) -> List[BuzzWord]:
    return get_engine().themes.extract_buzz_words(texts, top_n=top_n)


__all__ = [
    "BuzzWord",
    "ClassificationResult",
    "HourBucket",
    "MoodCategory",
    "MoodEngine",
    "classify",
    "explain",
    "extract_buzz_words",
    "hourly_breakdown",
    "get_engine",
]
