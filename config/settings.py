from dataclasses import dataclass, fields
from pathlib import Path

import yaml

DEFAULT_CONFIG = Path(__file__).parent / "recorder.yaml"


@dataclass
class RecorderSettings:
    output_dir: str = "resources"
    monitor: int = 1
    window_title: str = "Screen Recorder"
    player_title: str = "Video Player"
    log_level: str = "INFO"


def load_settings(path: Path | None = None) -> RecorderSettings:
    """
    Read settings from a YAML mapping. A missing file gives defaults;
    unknown keys are ignored.
    """
    path = Path(path) if path else DEFAULT_CONFIG
    if not path.exists():
        return RecorderSettings()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must contain a mapping")

    known = {f.name for f in fields(RecorderSettings)}
    settings = RecorderSettings(**{k: v for k, v in data.items() if k in known})
    settings.monitor = int(settings.monitor)
    settings.log_level = str(settings.log_level).upper()
    return settings
