# mood_engine/infra/paths.py
from pathlib import Path
import os

from mood_engine.core.config import PACKAGE_DIR
from mood_engine.exceptions import ConfigError

DATA_DIR = PACKAGE_DIR / "data"

DEFAULT_LEXICON_PATH = DATA_DIR / "mood_lexicon.yaml"


def lexicon_path() -> Path:
    """Lexicon YAML to load: MOOD_LEXICON_PATH when set, else the packaged one."""
    override = os.getenv("MOOD_LEXICON_PATH", "").strip()
    if not override:
        return DEFAULT_LEXICON_PATH

    path = Path(override)
    if not path.is_file():
        raise ConfigError(f"MOOD_LEXICON_PATH does not point to a file: {path}")
    return path


def output_dir() -> Path:
    # REPORT_OUTPUT_DIR may be absolute; relative paths hang off the working directory
    return Path.cwd() / os.getenv("REPORT_OUTPUT_DIR", "output")


def ensure_output_dir() -> Path:
    path = output_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path
