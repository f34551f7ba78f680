# mood_engine/core/config.py
from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import find_dotenv, load_dotenv

PACKAGE_DIR = Path(__file__).resolve().parent.parent

# .env loading: nearest .env from the working directory upwards
ENV_PATH = find_dotenv(usecwd=True)
if ENV_PATH:
    load_dotenv(ENV_PATH)

# log level (.env LOG_LEVEL, default INFO)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# CORS
# - CORS_ORIGINS="http://localhost:3000,http://127.0.0.1:8000" restricts origins
# - unset means allow everything (["*"])
_cors_raw = os.getenv("CORS_ORIGINS", "")
if _cors_raw:
    CORS_ORIGINS = [o.strip() for o in _cors_raw.split(",") if o.strip()]
else:
    CORS_ORIGINS = ["*"]

# trimmed texts shorter than this carry too little signal to classify
MINIMUM_LENGTH = 10


@dataclass(frozen=True)
class EngineConfig:
    """Tunable engine settings.

    - min_signal_length: trimmed texts shorter than this are not classified
    - max_input_chars: longer input is truncated before analysis
    - negation_window: tokens looked back for a negation marker
    - negation_transfer: share of a negated cue's weight moved to its negation target
    - explanation_max_cues: cues quoted in an explanation (1..3)
    - buzzword_top_n: default number of buzz words returned
    """

    min_signal_length: int = MINIMUM_LENGTH
    max_input_chars: int = 20000
    negation_window: int = 3
    negation_transfer: float = 0.5
    explanation_max_cues: int = 3
    buzzword_top_n: int = 10


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError:
        return default


def load_engine_config() -> EngineConfig:
    """
    Build the engine settings from environment variables.

    Variables
    - MOOD_MIN_SIGNAL_LENGTH (default: 10)
    - MOOD_MAX_INPUT_CHARS (default: 20000)
    - MOOD_NEGATION_WINDOW (default: 3)
    - MOOD_NEGATION_TRANSFER (default: 0.5)
    - MOOD_EXPLANATION_MAX_CUES (default: 3)
    - MOOD_BUZZWORD_TOP_N (default: 10)

    Values that do not parse, or fall outside their sensible range,
    fall back to the default.
    """
    defaults = EngineConfig()

    min_signal_length = _env_int("MOOD_MIN_SIGNAL_LENGTH", defaults.min_signal_length)
    if min_signal_length < 0:
        min_signal_length = defaults.min_signal_length

    max_input_chars = _env_int("MOOD_MAX_INPUT_CHARS", defaults.max_input_chars)
    if max_input_chars <= 0:
        max_input_chars = defaults.max_input_chars

    negation_window = _env_int("MOOD_NEGATION_WINDOW", defaults.negation_window)
    if negation_window < 0:
        negation_window = defaults.negation_window

    negation_transfer = _env_float("MOOD_NEGATION_TRANSFER", defaults.negation_transfer)
    if not 0.0 <= negation_transfer <= 1.0:
        negation_transfer = defaults.negation_transfer

    max_cues = _env_int("MOOD_EXPLANATION_MAX_CUES", defaults.explanation_max_cues)
    if not 1 <= max_cues <= 3:
        max_cues = defaults.explanation_max_cues

    top_n = _env_int("MOOD_BUZZWORD_TOP_N", defaults.buzzword_top_n)
    if top_n < 0:
        top_n = defaults.buzzword_top_n

    return EngineConfig(
        min_signal_length=min_signal_length,
        max_input_chars=max_input_chars,
        negation_window=negation_window,
        negation_transfer=negation_transfer,
        explanation_max_cues=max_cues,
        buzzword_top_n=top_n,
    )
