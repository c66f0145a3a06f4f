"""
Level Loader Factory

Factory for creating level loader instances.
"""

import importlib
from pathlib import Path
from typing import Dict, List, Sequence, Type, Union

from .base import LevelLoader


# Registry of available loaders: name -> "module.Class" or class
_LOADER_REGISTRY: Dict[str, Union[str, Type[LevelLoader]]] = {
    "json": "json_loader.JsonLevelLoader",
    "yaml": "yaml_loader.YamlLevelLoader",
}

# File suffix -> loader name
_SUFFIXES: Dict[str, str] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}

# Cache for loaded loader classes
_LOADER_CACHE: Dict[str, Type[LevelLoader]] = {}


def _load_loader_class(loader_type: str) -> Type[LevelLoader]:
    """Lazily import a loader class by type."""
    if loader_type in _LOADER_CACHE:
        return _LOADER_CACHE[loader_type]

    entry = _LOADER_REGISTRY[loader_type]
    if isinstance(entry, str):
        module_name, class_name = entry.rsplit(".", 1)
        module = importlib.import_module(f".{module_name}", package=__package__)
        loader_class = getattr(module, class_name)
    else:
        loader_class = entry

    _LOADER_CACHE[loader_type] = loader_class
    return loader_class


def create_loader(loader_type: str = "json") -> LevelLoader:
    """
    Create a level loader by type.

    Args:
        loader_type: Loader type identifier. Available types:
            - "json" (default)
            - "yaml"

    Returns:
        LevelLoader instance

    Raises:
        ValueError: If loader_type is not recognized

    Example:
        level = create_loader("yaml").load("levels/01.yaml")
    """
    if loader_type not in _LOADER_REGISTRY:
        available = ", ".join(_LOADER_REGISTRY.keys())
        raise ValueError(f"Unknown loader type: {loader_type}. Available: {available}")
    return _load_loader_class(loader_type)()


def loader_for_path(path: Union[str, Path]) -> LevelLoader:
    """
    Pick a loader from a file's suffix.

    Args:
        path: Level file path

    Returns:
        LevelLoader instance

    Raises:
        ValueError: If the suffix is not recognized
    """
    suffix = Path(path).suffix.lower()
    if suffix not in _SUFFIXES:
        known = ", ".join(sorted(_SUFFIXES))
        raise ValueError(f"Unknown level file type '{suffix}'. Known: {known}")
    return create_loader(_SUFFIXES[suffix])


def register_loader(name: str, loader_class: type, suffixes: Sequence[str] = ()) -> None:
    """
    Register a custom level loader.

    Args:
        name: Loader type identifier
        loader_class: LevelLoader subclass
        suffixes: File suffixes (e.g., [".txt"]) routed to this loader

    Example:
        from squares.loader import register_loader, LevelLoader

        class TextGridLoader(LevelLoader):
            ...

        register_loader("text", TextGridLoader, [".txt"])
    """
    if not issubclass(loader_class, LevelLoader):
        raise TypeError(f"{loader_class} must be a subclass of LevelLoader")
    _LOADER_REGISTRY[name] = loader_class
    _LOADER_CACHE.pop(name, None)
    for suffix in suffixes:
        _SUFFIXES[suffix.lower()] = name


def available_loaders() -> List[str]:
    """
    List available loader types.

    Returns:
        List of registered loader type names
    """
    return list(_LOADER_REGISTRY.keys())
