"""
YAML Level Loader

Hand-written levels are usually YAML: a "blocks" list, optional "arrows"
and "walls", and an optional explicit size.
"""

from pathlib import Path
from typing import Any

import yaml

from ..solver import LevelFormatError
from .base import LevelLoader


class YamlLevelLoader(LevelLoader):
    """Reads levels stored as YAML documents."""

    @property
    def name(self) -> str:
        return "yaml"

    def read(self, path: Path) -> Any:
        with open(path, 'r', encoding='utf-8') as f:
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise LevelFormatError(f"{path}: invalid YAML: {e}") from e
