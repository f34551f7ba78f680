from mood_engine.core.config import MINIMUM_LENGTH, EngineConfig
from .models import (
    BuzzWord,
    ClassificationResult,
    HourBucket,
    JournalEntry,
    LexiconEntry,
    MatchedSignal,
    MoodCategory,
    MoodDistribution,
)
from .lexicon import Lexicon, load_lexicon
from .classifier import MoodClassifier
from .explanation import ExplanationGenerator
from .themes import ThemeExtractor
from .aggregation import hourly_breakdown, mood_distribution, summarize_moods

__all__ = [
    "BuzzWord",
    "ClassificationResult",
    "EngineConfig",
    "HourBucket",
    "JournalEntry",
    "LexiconEntry",
    "MatchedSignal",
    "MINIMUM_LENGTH",
    "MoodCategory",
    "MoodDistribution",
    "Lexicon",
    "load_lexicon",
    "MoodClassifier",
    "ExplanationGenerator",
    "ThemeExtractor",
    "hourly_breakdown",
    "mood_distribution",
    "summarize_moods",
]
