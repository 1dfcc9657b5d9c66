"""Saving and loading objects as JSON files."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import Any, Union

StrPath = Union[str, "PathLike[str]"]


class Serializable(ABC):
    """An object that can be turned into a mapping and restored from one."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return the object's state as a JSON-compatible mapping."""

    @abstractmethod
    def load_dict(self, mapping: Mapping[str, Any]) -> None:
        """Restore the object's state from a mapping."""


def save(serializable: Serializable, filepath: StrPath) -> None:
    """Write the object to a file as indented JSON."""
    text = json.dumps(serializable.to_dict(), indent=4, ensure_ascii=False)
    Path(filepath).write_text(text + "\n", encoding="utf-8")


def load(serializable: Serializable, filepath: StrPath) -> None:
    """Restore the object from a JSON file.

    A missing file leaves the object untouched. A file that does not hold a
    JSON object restores the object from an empty mapping.
    """
    path = Path(filepath)
    if not path.exists():
        return
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError):
        document = {}
    if not isinstance(document, dict):
        document = {}
    serializable.load_dict(document)