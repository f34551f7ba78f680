from __future__ import annotations

import logging
from typing import Dict, Optional

from mood_engine.core.config import EngineConfig
from mood_engine.domain.lexicon import Lexicon
from mood_engine.domain.matcher import find_signals
from mood_engine.domain.models import DEFAULT_MOOD, ClassificationResult, MoodCategory
from mood_engine.domain.text import ensure_text, tokenize

logger = logging.getLogger(__name__)


def pick_dominant(scores: Dict[MoodCategory, float]) -> MoodCategory:
    """Highest score wins; ties go to the mood declared first."""
    best = DEFAULT_MOOD
    best_score = None
    for mood in MoodCategory:
        score = scores.get(mood, 0)
        if best_score is None or score > best_score:
            best, best_score = mood, score
    return best


class MoodClassifier:
    """Rule-based mood classifier.

    Scores every mood by the weights of the lexicon phrases found in the
    text, inverts negated cues, and picks the strongest mood. The same
    text always gives the same result.
    """

    def __init__(self, lexicon: Lexicon, config: Optional[EngineConfig] = None):
        self.lexicon = lexicon
        self.config = config or EngineConfig()

    def has_sufficient_signal(self, text: str) -> bool:
        """Caller-side guard: False means ``classify`` will decline."""
        return len(ensure_text(text).strip()) >= self.config.min_signal_length

    def classify(self, text: str) -> ClassificationResult:
        """
        Classify one journal text.

        Args:
            text: raw journal body

        Returns:
            ClassificationResult. Text below the minimum length (or None) gives the
            insufficient-signal result (content, confidence 0).

        Raises:
            InvalidArgument: ``text`` is neither a str nor None.
        """
        text = ensure_text(text)
        if not self.has_sufficient_signal(text):
            return ClassificationResult.insufficient()

        # longer input is cut to bound latency in interactive use
        text = text[: self.config.max_input_chars]

        tokens = tokenize(text)
        signals = find_signals(
            text, tokens, self.lexicon, negation_window=self.config.negation_window
        )

        raw: Dict[MoodCategory, float] = {m: 0.0 for m in MoodCategory}
        for s in signals:
            if s.negated:
                raw[s.mood] -= s.weight
                target = self.lexicon.negation_target(s.mood)
                raw[target] += s.weight * self.config.negation_transfer
            else:
                raw[s.mood] += s.weight

        scores = {m: max(0.0, v) for m, v in raw.items()}
        total = sum(scores.values())
        if total <= 0:
            return ClassificationResult(
                mood=DEFAULT_MOOD,
                confidence=0.0,
                matched_signals=tuple(signals),
                scores=scores,
            )

        mood = pick_dominant(scores)
        confidence = min(1.0, max(0.0, scores[mood] / total))

        logger.debug(
            "classified mood=%s confidence=%.3f signals=%d", mood.value, confidence, len(signals)
        )
        return ClassificationResult(
            mood=mood,
            confidence=confidence,
            matched_signals=tuple(signals),
            scores=scores,
        )
