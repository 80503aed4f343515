from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import yaml

REQUIRED_KEYS = (
    "app_name",
    "dessert_sold",
    "total_revenue",
    "level",
    "share",
    "toggle_theme",
    "share_text",
    "sharing_not_available",
)


class StringRepository:
    """User-visible text, loaded from ``data/strings.yaml``."""

    def __init__(self, path: Optional[Path] = None) -> None:
        if path is None:
            path = Path(__file__).resolve().parent.parent / "data" / "strings.yaml"
        self._path = path
        self._strings = self._load_strings()

    def get(self, key: str) -> str:
        return self._strings[key]

    def format(self, key: str, **values: object) -> str:
        return self._strings[key].format(**values)

    def _load_strings(self) -> Dict[str, str]:
        if not self._path.exists():
            raise FileNotFoundError(f"String resources not found: {self._path}")

        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{self._path.name}: expected YAML mapping of string resources")

        strings: Dict[str, str] = {}
        for key in REQUIRED_KEYS:
            value = raw.get(key)
            if not value or not isinstance(value, str):
                raise ValueError(f"{self._path.name}: missing or invalid '{key}'")
        for key, value in raw.items():
            if isinstance(value, str):
                strings[str(key)] = value.strip()
        return strings
