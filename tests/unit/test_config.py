import pytest

from mood_engine.core.config import EngineConfig, load_engine_config
from mood_engine.exceptions import ConfigError
from mood_engine.infra.paths import DEFAULT_LEXICON_PATH, lexicon_path, output_dir

ENV_VARS = [
    "MOOD_MIN_SIGNAL_LENGTH",
    "MOOD_MAX_INPUT_CHARS",
    "MOOD_NEGATION_WINDOW",
    "MOOD_NEGATION_TRANSFER",
    "MOOD_EXPLANATION_MAX_CUES",
    "MOOD_BUZZWORD_TOP_N",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS + ["MOOD_LEXICON_PATH", "REPORT_OUTPUT_DIR"]:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert load_engine_config() == EngineConfig()
    assert EngineConfig().min_signal_length == 10


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MOOD_MIN_SIGNAL_LENGTH", "5")
    monkeypatch.setenv("MOOD_MAX_INPUT_CHARS", "500")
    monkeypatch.setenv("MOOD_NEGATION_WINDOW", "0")
    monkeypatch.setenv("MOOD_NEGATION_TRANSFER", "0.25")
    monkeypatch.setenv("MOOD_EXPLANATION_MAX_CUES", "2")
    monkeypatch.setenv("MOOD_BUZZWORD_TOP_N", "20")

    cfg = load_engine_config()

    assert cfg == EngineConfig(
        min_signal_length=5,
        max_input_chars=500,
        negation_window=0,
        negation_transfer=0.25,
        explanation_max_cues=2,
        buzzword_top_n=20,
    )


@pytest.mark.parametrize(
    "name, value, field",
    [
        ("MOOD_MIN_SIGNAL_LENGTH", "ten", "min_signal_length"),
        ("MOOD_MIN_SIGNAL_LENGTH", "-1", "min_signal_length"),
        ("MOOD_MAX_INPUT_CHARS", "0", "max_input_chars"),
        ("MOOD_NEGATION_WINDOW", "-3", "negation_window"),
        ("MOOD_NEGATION_TRANSFER", "1.5", "negation_transfer"),
        ("MOOD_NEGATION_TRANSFER", "half", "negation_transfer"),
        ("MOOD_EXPLANATION_MAX_CUES", "0", "explanation_max_cues"),
        ("MOOD_EXPLANATION_MAX_CUES", "4", "explanation_max_cues"),
        ("MOOD_BUZZWORD_TOP_N", "-2", "buzzword_top_n"),
    ],
)
def test_bad_values_fall_back(monkeypatch, name, value, field):
    monkeypatch.setenv(name, value)

    assert getattr(load_engine_config(), field) == getattr(EngineConfig(), field)


def test_lexicon_path_default():
    assert lexicon_path() == DEFAULT_LEXICON_PATH
    assert DEFAULT_LEXICON_PATH.exists()


def test_lexicon_path_override(monkeypatch, tmp_path):
    custom = tmp_path / "custom.yaml"
    custom.write_text("mood_lexicon: {}\n", encoding="utf-8")
    monkeypatch.setenv("MOOD_LEXICON_PATH", str(custom))

    assert lexicon_path() == custom


def test_lexicon_path_override_missing(monkeypatch, tmp_path):
    monkeypatch.setenv("MOOD_LEXICON_PATH", str(tmp_path / "missing.yaml"))

    with pytest.raises(ConfigError, match="MOOD_LEXICON_PATH"):
        lexicon_path()


def test_output_dir_absolute(monkeypatch, tmp_path):
    monkeypatch.setenv("REPORT_OUTPUT_DIR", str(tmp_path / "reports"))

    assert output_dir() == tmp_path / "reports"


def test_output_dir_relative_to_working_directory(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("REPORT_OUTPUT_DIR", "reports")

    assert output_dir() == tmp_path / "reports"


def test_output_dir_default(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    assert output_dir() == tmp_path / "output"
