"""
Level Loading for the Squares Solver

Pluggable loaders turning level files into validated Level objects.

Usage:
    from squares.loader import load_level

    level = load_level("levels/tutorial.yaml")

Explicit loader:
    level = create_loader("json").load("levels/tutorial.json")
"""

from pathlib import Path
from typing import Union

from ..solver import Level

# Public API - Base class for custom loaders
from .base import LevelLoader, parse_level

# Public API - Factory functions
from .factory import (
    create_loader,
    loader_for_path,
    register_loader,
    available_loaders,
)


def load_level(path: Union[str, Path]) -> Level:
    """
    Load a level file, choosing the loader from its suffix.

    Args:
        path: Level file path (.json, .yaml or .yml)

    Returns:
        Level ready for solving
    """
    return loader_for_path(path).load(path)


__all__ = [
    "LevelLoader",
    "parse_level",
    "create_loader",
    "loader_for_path",
    "register_loader",
    "available_loaders",
    "load_level",
]
