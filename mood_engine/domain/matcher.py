from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence, Set

from mood_engine.domain.lexicon import Lexicon
from mood_engine.domain.models import LexiconEntry, MatchedSignal, MoodCategory
from mood_engine.domain.text import Token


def _index_tokens(tokens: Sequence[Token]) -> Dict[str, List[int]]:
    index: Dict[str, List[int]] = defaultdict(list)
    for i, tok in enumerate(tokens):
        index[tok.text].append(i)
    return index


def _is_negated(tokens: Sequence[Token], i: int, lexicon: Lexicon, window: int) -> bool:
    clause = tokens[i].clause
    for j in range(i - 1, max(-1, i - window - 1), -1):
        if tokens[j].clause != clause:
            break
        if lexicon.is_negation(tokens[j].text):
            return True
    return False


def find_signals(
    text: str,
    tokens: Sequence[Token],
    lexicon: Lexicon,
    *,
    negation_window: int,
    moods: Optional[Iterable[MoodCategory]] = None,
) -> List[MatchedSignal]:
    """
    Match lexicon phrases against tokenized text.

    - whole-token matching only; a multi-word phrase must be a contiguous run
      inside one clause
    - inside one mood, longer phrases claim their tokens first, so "feel good"
      is not also counted as "good"; other moods may still use the same tokens
    - a match preceded by a negation marker within ``negation_window`` tokens
      of the same clause is flagged ``negated``

    Returns signals in text order (ties: mood order, then phrase).
    """
    index = _index_tokens(tokens)
    selected = list(MoodCategory) if moods is None else [MoodCategory.parse(m) for m in moods]

    signals: List[MatchedSignal] = []
    for mood in selected:
        used: Set[int] = set()
        entries: List[LexiconEntry] = sorted(
            lexicon.entries_for(mood), key=lambda e: -len(e.tokens)
        )
        for entry in entries:
            phrase_tokens = entry.tokens
            n = len(phrase_tokens)
            for i in index.get(phrase_tokens[0], ()):
                span = range(i, i + n)
                if i + n > len(tokens) or used.intersection(span):
                    continue
                run = tokens[i : i + n]
                if any(t.text != p for t, p in zip(run, phrase_tokens)):
                    continue
                if run[-1].clause != run[0].clause:
                    continue

                used.update(span)
                signals.append(
                    MatchedSignal(
                        phrase=entry.phrase,
                        mood=mood,
                        weight=entry.weight,
                        surface=text[run[0].start : run[-1].end],
                        start=run[0].start,
                        negated=_is_negated(tokens, i, lexicon, negation_window),
                    )
                )

    signals.sort(key=lambda s: (s.start, s.mood.rank, s.phrase))
    return signals
