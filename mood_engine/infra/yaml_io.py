# mood_engine/infra/yaml_io.py
from pathlib import Path
from typing import Any, Dict, List
import yaml

from mood_engine.exceptions import EntryDataError, LexiconLoadError


def load_lexicon_document(path: Path) -> Dict[str, Any]:
    """Read the lexicon YAML and return its ``mood_lexicon`` section."""
    if not path.exists():
        raise LexiconLoadError(f"lexicon file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LexiconLoadError(f"lexicon file is not valid YAML: {path} ({e})") from e

    if not isinstance(data, dict) or not isinstance(data.get("mood_lexicon"), dict):
        raise LexiconLoadError(f"'mood_lexicon' section missing in {path}")
    return data["mood_lexicon"]


def load_entry_records(path: Path) -> List[Dict[str, Any]]:
    """
    Read journal entries from a YAML file.

    Accepted shapes:
      - a list of mappings
      - a mapping with an ``entries`` list
    """
    if not path.exists():
        raise EntryDataError(f"entry file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise EntryDataError(f"entry file is not valid YAML: {path} ({e})") from e

    if isinstance(data, dict):
        data = data.get("entries")
    if not isinstance(data, list):
        raise EntryDataError(f"expected a list of entries in {path}")
    return [r for r in data if isinstance(r, dict)]


def save_yaml(path: Path, data: Any) -> None:
    """Write a Python object to a YAML file (parent directories are created)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, allow_unicode=True, sort_keys=False)
