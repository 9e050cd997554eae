from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

from .clock import DEFAULT_TZ


@dataclass
class AppConfig:
    timezone: str = DEFAULT_TZ
    tick_seconds: float = 60.0
    schedule_path: str = "data/schedule.json"
    state_path: str = "state/mock_date.json"
    outputs_dir: str = "outputs"
    log_level: str = "INFO"


def _project_root() -> Path:
    # classgrid/config.py -> project root is parents[1]
    return Path(__file__).resolve().parents[1]


def load_config(project_root: Path | str | None = None) -> AppConfig:
    """Load configs/classgrid.toml if present, else defaults.

    Keys may sit at the top level or under [classgrid]. Unknown keys are
    ignored; a value of the wrong type falls back to the default.
    """
    base = AppConfig()
    root = _project_root() if project_root is None else Path(project_root)
    cfg = root / "configs" / "classgrid.toml"
    if not cfg.exists():
        return base
    try:
        data: Dict[str, Any] = tomllib.loads(cfg.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        logging.getLogger(__name__).warning(f"Ignoring unreadable config {cfg}: {e}")
        return base
    section = data.get("classgrid") if isinstance(data.get("classgrid"), dict) else data

    values: Dict[str, Any] = {}
    for f in fields(AppConfig):
        default = getattr(base, f.name)
        raw = section.get(f.name, default)
        try:
            values[f.name] = type(default)(raw)
        except (TypeError, ValueError):
            values[f.name] = default
    return AppConfig(**values)


def resolve_path(project_root: Path, value: str) -> Path:
    p = Path(value)
    return p if p.is_absolute() else project_root / p
