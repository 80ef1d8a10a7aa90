"""Collect files that share a base name until every extension group is present."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _separators() -> str:
    return os.sep + (os.altsep or "")


def _ext(path: str) -> str:
    for index in range(len(path) - 1, -1, -1):
        char = path[index]
        if char in _separators():
            break
        if char == ".":
            return path[index:]
    return ""


def _base(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip(_separators())
    if not stripped:
        return os.sep
    for sep in _separators():
        stripped = stripped.rpartition(sep)[2]
    return stripped


def get_name(file_path: str) -> str:
    """Return the file name of ``file_path`` without its extension."""
    ext = _ext(file_path)
    name = _base(file_path)
    return name[: len(name) - len(ext)]


@dataclass
class PopFiles:
    """A complete group of files: extension group name -> file path."""

    name: str
    ext_group: dict[str, str]


@dataclass
class ExtPool:
    """Pool of files keyed by name, then by extension group."""

    pool: dict[str, dict[str, str]] = field(default_factory=dict)

    def push(self, file_path: str, ext: str, ext_list: list[str]) -> PopFiles | None:
        """Add a file; return its group once every extension is present."""
        name = get_name(file_path)
        group = self.pool.setdefault(name, {})
        group[ext] = file_path

        # Only the count is compared; valid extensions make this sufficient.
        if len(group) < len(ext_list):
            return None

        del self.pool[name]
        return PopFiles(name=name, ext_group=group)