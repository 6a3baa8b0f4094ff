# src/ride_share/io/config.py
from pathlib import Path

from ride_share.config.models import ScenarioModel


def load_scenario(path: str | Path) -> ScenarioModel:
    """Read a JSON scenario file; omitted sections fall back to the demo defaults."""
    return ScenarioModel.model_validate_json(Path(path).read_text(encoding="utf-8"))
