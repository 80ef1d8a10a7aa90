"""State shared by the steps that process one group of files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from .temp import Temporary
from .variable import Variable


@dataclass
class Context:
    """The current name, scratch directories, extension groups and variables."""

    name: str
    temp: Temporary
    exts: dict[str, str]
    vari: Variable


def new_context(
    name: str,
    file_names: Iterable[str],
    temp_path: str,
    exts: Mapping[str, str],
    vari: Mapping[str, str],
) -> Context:
    """Move ``file_names`` into fresh scratch directories and build a context."""
    scratch = Temporary(temp_path, name, file_names, ["a", "b"])
    return Context(name=name, temp=scratch, exts=dict(exts), vari=Variable(vari))