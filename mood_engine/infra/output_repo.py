# mood_engine/infra/output_repo.py
from pathlib import Path
from typing import Dict, Any, Optional
from datetime import datetime
import re

from mood_engine.infra.paths import ensure_output_dir
from mood_engine.infra.yaml_io import save_yaml


def _slugify_name(name: str) -> str:
    """Make a name safe to use inside a file name."""
    if not name:
        return "journal"
    s = re.sub(r"\s+", "_", name.strip())
    s = re.sub(r"[^\w\-]", "", s)
    return s or "journal"


def report_path(name: str, suffix: str, now: Optional[datetime] = None) -> Path:
    """
    Timestamped path inside the output directory.

    e.g. output/report_20240115_093000_sam_mood_report.yaml
    """
    output_dir = ensure_output_dir()
    ts = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return output_dir / f"report_{ts}_{_slugify_name(name)}_{suffix}"


def save_report_yaml(name: str, report: Dict[str, Any]) -> Path:
    """Write a journal report (see report_service.build_report) as YAML."""
    path = report_path(name, "mood_report.yaml")
    save_yaml(path, report)
    return path
