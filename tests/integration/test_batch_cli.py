import yaml

from mood_engine.domain.classifier import MoodClassifier
from mood_engine.usecases.analyze_journal_file import main

JOURNAL = """\
entries:
  - date: 2024-06-03 09:05:00
    content: Work was stressful today and I felt anxious.
    mood: anxious
  - date: 2024-06-03 22:30:00
    content: Work keeps piling up, I am so tired.
  - date: 2024-06-04 07:15:00
    content: Tried meditation and felt calmer afterwards.
    mood: calm
"""


def test_writes_report_and_csv(tmp_path, output_dir, capsys):
    src = tmp_path / "journal.yaml"
    src.write_text(JOURNAL, encoding="utf-8")
    csv_path = tmp_path / "hourly.csv"

    code = main(["--input", str(src), "--csv", str(csv_path), "--name", "sam"])

    assert code == 0
    reports = list(output_dir.glob("report_*_sam_mood_report.yaml"))
    assert len(reports) == 1
    report = yaml.safe_load(reports[0].read_text(encoding="utf-8"))
    assert report["total_entries"] == 3
    assert report["buzz_words"][0] == {"word": "work", "count": 2}

    lines = csv_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Hour,Count,Dominant Mood"
    assert lines[8] == "7,1,calm"
    assert "report:" in capsys.readouterr().out


def test_unlabeled_entries_classified_once(tmp_path, output_dir, monkeypatch):
    src = tmp_path / "journal.yaml"
    src.write_text(JOURNAL, encoding="utf-8")
    calls = []
    classify = MoodClassifier.classify

    def counting(self, text):
        calls.append(text)
        return classify(self, text)

    monkeypatch.setattr(MoodClassifier, "classify", counting)

    assert main(["--input", str(src), "--csv", str(tmp_path / "hourly.csv")]) == 0
    assert calls == ["Work keeps piling up, I am so tired."]


def test_missing_input(tmp_path, output_dir):
    assert main(["--input", str(tmp_path / "nope.yaml")]) == 2


def test_unknown_mood(tmp_path, output_dir):
    src = tmp_path / "journal.yaml"
    src.write_text("- {date: 2024-06-03 09:05:00, content: Long day at work, mood: sleepy}\n", encoding="utf-8")

    assert main(["--input", str(src)]) == 2
    assert not output_dir.exists() or not list(output_dir.iterdir())
