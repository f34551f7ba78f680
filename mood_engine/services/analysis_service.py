from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from typing import Any, Dict, Optional, Union

from mood_engine.core.config import EngineConfig, load_engine_config
from mood_engine.domain.classifier import MoodClassifier
from mood_engine.domain.explanation import ExplanationGenerator
from mood_engine.domain.lexicon import Lexicon, load_lexicon
from mood_engine.domain.models import ClassificationResult, JournalEntry, MoodCategory
from mood_engine.domain.text import ensure_text
from mood_engine.domain.themes import ThemeExtractor
from mood_engine.exceptions import InvalidArgument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoodEngine:
    """Lexicon plus the components built on it. Stateless after construction."""

    config: EngineConfig
    lexicon: Lexicon
    classifier: MoodClassifier
    explainer: ExplanationGenerator
    themes: ThemeExtractor

    @classmethod
    def build(cls, lexicon: Optional[Lexicon] = None, config: Optional[EngineConfig] = None) -> "MoodEngine":
        config = config or load_engine_config()
        lexicon = lexicon or load_lexicon()
        return cls(
            config=config,
            lexicon=lexicon,
            classifier=MoodClassifier(lexicon, config),
            explainer=ExplanationGenerator(lexicon, config),
            themes=ThemeExtractor(lexicon, config),
        )


# one engine per process (lexicon is read once)
@lru_cache(maxsize=1)
def get_engine() -> MoodEngine:
    engine = MoodEngine.build()
    logger.info("mood engine ready (config=%s)", engine.config)
    return engine


def result_to_dict(result: ClassificationResult) -> Dict[str, Any]:
    return {
        "mood": result.mood.value,
        "emoji": result.mood.emoji,
        "confidence": round(result.confidence, 4),
        "insufficient_signal": result.insufficient_signal,
        "signals": [
            {
                "phrase": s.phrase,
                "mood": s.mood.value,
                "weight": s.weight,
                "surface": s.surface,
                "negated": s.negated,
            }
            for s in result.matched_signals
        ],
    }


def analyze_entry(text: str, engine: Optional[MoodEngine] = None) -> Dict[str, Any]:
    """
    Final analysis of one journal text (classification + explanation).

    The live-preview and the submit-time call go through here alike;
    results differ only when the text did.
    """
    engine = engine or get_engine()
    result = engine.classifier.classify(text)
    payload = result_to_dict(result)
    payload["explanation"] = engine.explainer.explain(text, result.mood)
    return payload


def explain_mood(text: str, mood: Union[MoodCategory, str], engine: Optional[MoodEngine] = None) -> str:
    engine = engine or get_engine()
    return engine.explainer.explain(text, mood)


def submit_entry(
    content: str,
    date: Optional[datetime] = None,
    engine: Optional[MoodEngine] = None,
) -> JournalEntry:
    """Build the JournalEntry handed to persistence at submit time."""
    content = ensure_text(content)
    if not content.strip():
        raise InvalidArgument("journal entry is empty")

    engine = engine or get_engine()
    content = content.strip()
    result = engine.classifier.classify(content)
    return JournalEntry(
        content=content,
        date=date or datetime.now(),
        mood=result.mood,
        confidence=result.confidence,
        analysis=engine.explainer.explain(content, result.mood),
    )
