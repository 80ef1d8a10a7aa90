"""Placeholder substitution of the form ``{@key}`` in command templates."""

from __future__ import annotations

from typing import Mapping

from .command import get_exec_dir


class Variable:
    """User values, file-group values and system values used in templates."""

    def __init__(
        self,
        values: Mapping[str, str] | None = None,
        exec_dir: str | None = None,
    ) -> None:
        edir = get_exec_dir() if exec_dir is None else exec_dir
        self.values: dict[str, str] = {
            key: val.replace("{@edr}", edir) for key, val in (values or {}).items()
        }
        self.group: dict[str, str] = {}
        self.system: dict[str, str] = {}

    def apply(self, text: str) -> str:
        """Replace every ``{@key}``: user values first, then group, then system."""
        for mapping in (self.values, self.group, self.system):
            for key, val in mapping.items():
                text = text.replace("{@" + key + "}", val)
        return text

    def update(
        self,
        system: Mapping[str, str] | None,
        group: Mapping[str, str] | None,
    ) -> None:
        """Replace the system and group values; None leaves a set unchanged."""
        if group is not None:
            self.group = dict(group)
        if system is not None:
            self.system = dict(system)