from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List
import re

from mood_engine.exceptions import InvalidArgument

# letters/digits with optional internal apostrophes (don't, i'm, o'clock)
_TOKEN_RE = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")

# punctuation that closes a clause; negation never reaches across it
_CLAUSE_BREAK_RE = re.compile(r"[.,;:!?\n]")
_CLAUSE_WORDS = {"but", "however", "although", "though", "yet"}


@dataclass(frozen=True)
class Token:
    """Normalized word with its char offsets in the original text.

    - text: lowercase, typographic apostrophes folded to "'"
    - start/end: text[start:end] is the original surface form
    - clause: running clause index, bumped by clause punctuation and contrast words
    """

    text: str
    start: int
    end: int
    clause: int


def normalize_token(raw: str) -> str:
    return raw.lower().replace("’", "'")


def tokenize(text: str) -> List[Token]:
    tokens: List[Token] = []
    clause = 0
    pos = 0
    for m in _TOKEN_RE.finditer(text):
        if _CLAUSE_BREAK_RE.search(text, pos, m.start()):
            clause += 1
        word = normalize_token(m.group())
        if word in _CLAUSE_WORDS:
            clause += 1
        tokens.append(Token(text=word, start=m.start(), end=m.end(), clause=clause))
        pos = m.end()
    return tokens


def normalize_phrase(phrase: str) -> str:
    """Lexicon phrase -> space separated normalized tokens ('' if no words)."""
    return " ".join(normalize_token(w) for w in _TOKEN_RE.findall(phrase))


def words(text: str) -> List[str]:
    return [t.text for t in tokenize(text)]


def ensure_text(text: Any) -> str:
    """None reads as empty text; anything else that is not a str is caller misuse."""
    if text is None:
        return ""
    if not isinstance(text, str):
        raise InvalidArgument(f"text must be a string, got {type(text).__name__}")
    return text
