from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

from mood_engine.domain.models import LexiconEntry, MoodCategory
from mood_engine.domain.text import normalize_phrase, normalize_token
from mood_engine.exceptions import LexiconLoadError
from mood_engine.infra.paths import lexicon_path
from mood_engine.infra.yaml_io import load_lexicon_document

logger = logging.getLogger(__name__)

# tokens shorter than this never count as themes
MIN_THEME_TOKEN_LENGTH = 3


class Lexicon:
    """Mood lexicon: trigger phrases per mood, stopwords and negation data.

    Built from the ``mood_lexicon`` YAML section and validated on load;
    nothing can be changed after construction.
    """

    def __init__(
        self,
        entries: Mapping[MoodCategory, Tuple[LexiconEntry, ...]],
        stopwords: FrozenSet[str],
        negation_markers: FrozenSet[str],
        negation_targets: Mapping[MoodCategory, MoodCategory],
        descriptions: Mapping[MoodCategory, str],
        version: str = "",
    ):
        self._entries = MappingProxyType(dict(entries))
        self._all_entries = tuple(e for mood in MoodCategory for e in self._entries[mood])
        self._stopwords = stopwords
        self._negation_markers = negation_markers
        self._negation_targets = MappingProxyType(dict(negation_targets))
        self._descriptions = MappingProxyType(dict(descriptions))
        self.version = version

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Lexicon":
        """Validate a parsed ``mood_lexicon`` mapping and build the lexicon."""
        moods_raw = doc.get("moods")
        if not isinstance(moods_raw, dict):
            raise LexiconLoadError("'moods' must be a mapping of mood -> definition")

        unknown = [k for k in moods_raw if str(k) not in {m.value for m in MoodCategory}]
        if unknown:
            raise LexiconLoadError(f"unknown mood keys in lexicon: {unknown}")
        missing = [m.value for m in MoodCategory if m.value not in moods_raw]
        if missing:
            raise LexiconLoadError(f"lexicon has no definition for moods: {missing}")

        entries: Dict[MoodCategory, Tuple[LexiconEntry, ...]] = {}
        descriptions: Dict[MoodCategory, str] = {}
        for mood in MoodCategory:
            definition = moods_raw[mood.value] or {}
            if not isinstance(definition, dict):
                raise LexiconLoadError(f"definition of '{mood.value}' must be a mapping")
            descriptions[mood] = str(definition.get("description") or f"{mood.value} language")
            entries[mood] = _build_entries(mood, definition.get("entries") or [])

        negation = doc.get("negation") or {}
        markers = frozenset(
            normalize_token(str(m).strip()) for m in (negation.get("markers") or []) if str(m).strip()
        )
        targets = _build_negation_targets(negation.get("targets") or {})

        stopwords = frozenset(
            normalize_token(str(w).strip()) for w in (doc.get("stopwords") or []) if str(w).strip()
        )

        return cls(
            entries=entries,
            stopwords=stopwords,
            negation_markers=markers,
            negation_targets=targets,
            descriptions=descriptions,
            version=str(doc.get("version", "")),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "Lexicon":
        lexicon = cls.from_document(load_lexicon_document(path))
        logger.info(
            "mood lexicon loaded: %s (version=%s, entries=%d, stopwords=%d)",
            path, lexicon.version or "-", len(lexicon.all_entries()), len(lexicon._stopwords),
        )
        return lexicon

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    def entries_for(self, mood: MoodCategory) -> Tuple[LexiconEntry, ...]:
        """Entries of one mood, highest weight first (then longer phrase first)."""
        return self._entries[MoodCategory.parse(mood)]

    def all_entries(self) -> Tuple[LexiconEntry, ...]:
        return self._all_entries

    def is_stopword(self, word: str) -> bool:
        w = normalize_token(word.strip())
        return len(w) < MIN_THEME_TOKEN_LENGTH or w in self._stopwords

    def is_negation(self, token: str) -> bool:
        t = normalize_token(token)
        return t in self._negation_markers or t.endswith("n't")

    def negation_target(self, mood: MoodCategory) -> MoodCategory:
        return self._negation_targets[MoodCategory.parse(mood)]

    def describe(self, mood: MoodCategory) -> str:
        return self._descriptions[MoodCategory.parse(mood)]


def _build_entries(mood: MoodCategory, raw_entries: Any) -> Tuple[LexiconEntry, ...]:
    if not isinstance(raw_entries, list):
        raise LexiconLoadError(f"entries of '{mood.value}' must be a list")

    seen = set()
    built: List[Tuple[int, LexiconEntry]] = []
    for i, raw in enumerate(raw_entries):
        if not isinstance(raw, dict) or "phrase" not in raw:
            raise LexiconLoadError(f"'{mood.value}' entry #{i} needs a 'phrase'")

        phrase = normalize_phrase(str(raw["phrase"]))
        if not phrase:
            raise LexiconLoadError(f"'{mood.value}' entry #{i} has an empty phrase")
        if phrase in seen:
            raise LexiconLoadError(f"duplicate phrase '{phrase}' under '{mood.value}'")

        weight = raw.get("weight", 1.0)
        if isinstance(weight, bool) or not isinstance(weight, (int, float)) or weight <= 0:
            raise LexiconLoadError(f"'{mood.value}' phrase '{phrase}' needs a positive weight, got {weight!r}")

        seen.add(phrase)
        built.append((i, LexiconEntry(mood=mood, phrase=phrase, weight=float(weight))))

    built.sort(key=lambda x: (-x[1].weight, -len(x[1].tokens), x[0]))
    return tuple(e for _, e in built)


def _build_negation_targets(raw: Any) -> Dict[MoodCategory, MoodCategory]:
    if not isinstance(raw, dict):
        raise LexiconLoadError("'negation.targets' must be a mapping of mood -> mood")

    targets: Dict[MoodCategory, MoodCategory] = {}
    for key, value in raw.items():
        try:
            targets[MoodCategory.parse(key)] = MoodCategory.parse(value)
        except ValueError as e:
            raise LexiconLoadError(f"bad negation target {key!r} -> {value!r}") from e

    missing = [m.value for m in MoodCategory if m not in targets]
    if missing:
        raise LexiconLoadError(f"negation targets missing for moods: {missing}")
    return targets


@lru_cache(maxsize=None)
def _load_cached(path: str) -> Lexicon:
    return Lexicon.from_yaml(Path(path))


def load_lexicon(path: Optional[Path] = None) -> Lexicon:
    """Load (once per path) the lexicon; defaults to MOOD_LEXICON_PATH or the packaged file."""
    return _load_cached(str(path or lexicon_path()))
