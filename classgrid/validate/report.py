from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

LIST_KEYS = [
    "malformed_ranges",
    "unanchored_sessions",
    "overrunning_sessions",
    "duplicate_dates",
    "day_name_mismatches",
]


def write_validation_report(report: Dict[str, object], outputs_dir: Path) -> Path:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    path = outputs_dir / "validation.json"
    with path.open("w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)
    return path


def format_validation_report(report: Dict[str, object]) -> str:
    lines: list[str] = []
    lines.append(f"day_count: {report.get('day_count')}")
    lines.append(f"session_count: {report.get('session_count')}")
    for key in LIST_KEYS:
        items = report.get(key, [])
        count = len(items) if isinstance(items, list) else 0
        lines.append(f"{key}: {count}")
        if isinstance(items, list):
            for item in items:
                lines.append(f"  - {item}")
    return "\n".join(lines)
