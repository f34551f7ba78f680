from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from mood_engine.core.config import EngineConfig
from mood_engine.domain.lexicon import Lexicon
from mood_engine.domain.matcher import find_signals
from mood_engine.domain.models import DEFAULT_MOOD, MatchedSignal, MoodCategory
from mood_engine.domain.text import ensure_text, tokenize


@dataclass(frozen=True)
class Cue:
    """Evidence for a mood: a direct match, or a negated match of its opposite."""

    signal: MatchedSignal
    contribution: float

    @property
    def negated(self) -> bool:
        return self.signal.negated


def _render(cues: List[Cue]) -> str:
    if len(cues) == 1:
        c = cues[0]
        noun = "negated cue" if c.negated else "cue"
        return f'the {noun} "{c.signal.surface}" points'

    items = [f'negated "{c.signal.surface}"' if c.negated else f'"{c.signal.surface}"' for c in cues]
    return "the cues " + ", ".join(items[:-1]) + " and " + items[-1] + " point"


class ExplanationGenerator:
    """Turns (text, mood) into a short sentence citing the cues that were found."""

    def __init__(self, lexicon: Lexicon, config: Optional[EngineConfig] = None):
        self.lexicon = lexicon
        self.config = config or EngineConfig()

    def _signals(self, text: str) -> List[MatchedSignal]:
        return find_signals(
            text,
            tokenize(text),
            self.lexicon,
            negation_window=self.config.negation_window,
        )

    def _cues(self, signals: List[MatchedSignal], mood: MoodCategory) -> List[Cue]:
        transfer = self.config.negation_transfer
        seen = set()
        cues: List[Cue] = []
        for s in signals:
            if not s.negated and s.mood == mood:
                cue = Cue(s, s.weight)
            elif s.negated and transfer > 0 and self.lexicon.negation_target(s.mood) == mood:
                cue = Cue(s, s.weight * transfer)
            else:
                continue
            key = (s.phrase, s.negated)
            if key in seen:
                continue
            seen.add(key)
            cues.append(cue)

        cues.sort(key=lambda c: (-c.contribution, c.signal.start))
        return cues[: self.config.explanation_max_cues]

    def top_cues(self, text: str, mood: Union[MoodCategory, str]) -> List[Cue]:
        """
        Strongest evidence for ``mood``, one per phrase, at most max_cues.

        A negated cue counts for the mood its negation feeds (e.g. "not happy"
        for sad); a negated cue of ``mood`` itself is never evidence for it.
        """
        mood = MoodCategory.parse(mood)
        text = ensure_text(text)[: self.config.max_input_chars]
        return self._cues(self._signals(text), mood)

    def explain(self, text: str, mood: Union[MoodCategory, str]) -> str:
        mood = MoodCategory.parse(mood)
        text = ensure_text(text)

        if len(text.strip()) < self.config.min_signal_length:
            return f"There is not enough text yet to explain a {mood.value} reading."

        signals = self._signals(text[: self.config.max_input_chars])
        cues = self._cues(signals, mood)
        if not cues:
            if mood == DEFAULT_MOOD and not signals:
                return (
                    "No strong emotional cues were detected, "
                    f"so this entry is read as {mood.value}, the neutral default."
                )
            return f"No specific {mood.value} cues were detected in this entry."

        return f"This entry reads as {mood.value}: {_render(cues)} to {self.lexicon.describe(mood)}."
