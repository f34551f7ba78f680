from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Optional

from mood_engine.core.config import EngineConfig
from mood_engine.domain.lexicon import Lexicon
from mood_engine.domain.models import BuzzWord
from mood_engine.domain.text import ensure_text, words
from mood_engine.exceptions import InvalidArgument


class ThemeExtractor:
    """Recurring vocabulary across many journal entries."""

    def __init__(self, lexicon: Lexicon, config: Optional[EngineConfig] = None):
        self.lexicon = lexicon
        self.config = config or EngineConfig()

    def theme_tokens(self, text: str) -> List[str]:
        out: List[str] = []
        for w in words(ensure_text(text)[: self.config.max_input_chars]):
            if w.endswith("'s"):
                w = w[:-2]
            if w.isdigit() or self.lexicon.is_stopword(w):
                continue
            out.append(w)
        return out

    def extract_buzz_words(self, texts: Iterable[str], top_n: Optional[int] = None) -> List[BuzzWord]:
        """
        Most frequent non-stopword tokens across all texts.

        Args:
            texts: journal bodies; counted together, not per text
            top_n: how many to return (default: config.buzzword_top_n)

        Returns:
            BuzzWord list, count descending; equal counts keep first-seen order.
        """
        if top_n is None:
            top_n = self.config.buzzword_top_n
        if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n < 0:
            raise InvalidArgument(f"top_n must be a non-negative integer, got {top_n!r}")

        counts: Counter = Counter()
        for text in texts:
            counts.update(self.theme_tokens(text))

        # Counter keeps insertion (first-seen) order and sorted() is stable
        ranked = sorted(counts.items(), key=lambda kv: -kv[1])
        return [BuzzWord(word=w, count=c) for w, c in ranked[:top_n]]
