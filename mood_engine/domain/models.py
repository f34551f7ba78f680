from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from mood_engine.exceptions import InvalidArgument


class MoodCategory(str, Enum):
    """The ten mood labels, in tie-break order (earlier wins)."""

    HAPPY = "happy"
    EXCITED = "excited"
    ENERGETIC = "energetic"
    CONTENT = "content"
    CALM = "calm"
    SAD = "sad"
    ANXIOUS = "anxious"
    ANGRY = "angry"
    IRRITATED = "irritated"
    FRUSTRATED = "frustrated"

    @property
    def emoji(self) -> str:
        return _EMOJI[self]

    @property
    def rank(self) -> int:
        """Position in declaration order, used for deterministic tie-breaks."""
        return _RANK[self]

    @classmethod
    def parse(cls, value: Any) -> "MoodCategory":
        """Coerce a label (any case, surrounding blanks allowed) to a MoodCategory.

        Raises InvalidArgument for anything that is not one of the ten labels.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidArgument(f"unknown mood: {value!r}")


_EMOJI = {
    MoodCategory.HAPPY: "😊",
    MoodCategory.EXCITED: "🤗",
    MoodCategory.ENERGETIC: "⚡",
    MoodCategory.CONTENT: "😌",
    MoodCategory.CALM: "🕯️",
    MoodCategory.SAD: "😢",
    MoodCategory.ANXIOUS: "😰",
    MoodCategory.ANGRY: "😡",
    MoodCategory.IRRITATED: "😤",
    MoodCategory.FRUSTRATED: "😓",
}

_RANK = {mood: i for i, mood in enumerate(MoodCategory)}

# neutral default used when there is no evidence at all
DEFAULT_MOOD = MoodCategory.CONTENT


@dataclass(frozen=True)
class LexiconEntry:
    """One trigger phrase of a mood.

    - phrase: normalized lowercase text, words separated by single spaces
    - weight: positive evidence contributed per occurrence
    """

    mood: MoodCategory
    phrase: str
    weight: float

    @property
    def tokens(self) -> Tuple[str, ...]:
        return tuple(self.phrase.split(" "))


@dataclass(frozen=True)
class MatchedSignal:
    """A lexicon entry found in a text.

    - surface: the exact slice of the input that matched
    - start: char offset of ``surface`` in the (capped) input
    - negated: a negation marker preceded the phrase in the same clause
    """

    phrase: str
    mood: MoodCategory
    weight: float
    surface: str
    start: int
    negated: bool = False


@dataclass(frozen=True)
class ClassificationResult:
    mood: MoodCategory
    confidence: float
    matched_signals: Tuple[MatchedSignal, ...] = ()
    scores: Dict[MoodCategory, float] = field(default_factory=dict)
    insufficient_signal: bool = False

    @classmethod
    def insufficient(cls) -> "ClassificationResult":
        """Designated result for text too short to carry a signal."""
        return cls(
            mood=DEFAULT_MOOD,
            confidence=0.0,
            scores={m: 0.0 for m in MoodCategory},
            insufficient_signal=True,
        )


@dataclass(frozen=True)
class BuzzWord:
    word: str
    count: int


@dataclass(frozen=True)
class HourBucket:
    hour: int
    count: int
    dominant_mood: Optional[MoodCategory]
    mood_counts: Dict[MoodCategory, int] = field(default_factory=dict)


@dataclass(frozen=True)
class JournalEntry:
    """A journal entry as handed over by the persistence layer."""

    content: str
    date: datetime
    mood: Optional[MoodCategory] = None
    confidence: Optional[float] = None
    analysis: Optional[str] = None


@dataclass(frozen=True)
class MoodDistribution:
    total: int
    counts: Dict[MoodCategory, int]
    percentages: Dict[MoodCategory, float]
    dominant_mood: Optional[MoodCategory]
