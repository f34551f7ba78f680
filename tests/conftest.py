import os
import sys

import pytest

# Add project root to Python Path so modules can be imported
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mood_engine.core.config import EngineConfig
from mood_engine.domain.lexicon import Lexicon, load_lexicon
from mood_engine.domain.models import MoodCategory
from mood_engine.services.analysis_service import MoodEngine


def _lexicon_document(**mood_entries):
    """Smallest valid ``mood_lexicon`` mapping; keyword args fill in entries per mood."""
    doc = {
        "version": "test",
        "moods": {
            m.value: {"description": f"{m.value} cues", "entries": []} for m in MoodCategory
        },
        "negation": {
            "markers": ["not", "never", "no"],
            "targets": {m.value: "content" for m in MoodCategory},
        },
        "stopwords": ["the", "and", "was"],
    }
    for mood, entries in mood_entries.items():
        doc["moods"][mood]["entries"] = entries
    return doc


@pytest.fixture
def lexicon_document():
    """Builder for minimal lexicon mappings, e.g. lexicon_document(happy=[{"phrase": "cat"}])."""
    return _lexicon_document


@pytest.fixture(scope="session")
def lexicon() -> Lexicon:
    """The packaged lexicon."""
    return load_lexicon()


@pytest.fixture
def engine(lexicon) -> MoodEngine:
    """Engine on the packaged lexicon with default settings (environment ignored)."""
    return MoodEngine.build(lexicon=lexicon, config=EngineConfig())


@pytest.fixture
def output_dir(tmp_path, monkeypatch):
    """Redirect report output into a temporary directory."""
    out = tmp_path / "output"
    monkeypatch.setenv("REPORT_OUTPUT_DIR", str(out))
    return out
