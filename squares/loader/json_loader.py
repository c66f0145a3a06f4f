"""
JSON Level Loader
"""

import json
from pathlib import Path
from typing import Any

from ..solver import LevelFormatError
from .base import LevelLoader


class JsonLevelLoader(LevelLoader):
    """Reads levels stored as JSON documents."""

    @property
    def name(self) -> str:
        return "json"

    def read(self, path: Path) -> Any:
        with open(path, 'r', encoding='utf-8') as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise LevelFormatError(f"{path}: invalid JSON: {e}") from e
