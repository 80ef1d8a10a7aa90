"""Choosing the profile processor from the profile file's extension."""

from __future__ import annotations

import os
from typing import Mapping, Protocol

from .waiter import Waiter
from .ymlproc import YamlProfProc


class ProfProc(Protocol):
    """What the pipeline needs from a profile processor."""

    def get_type(self) -> str: ...

    def select_ext(self, file_path: str) -> str: ...

    def create_ext_list(self) -> list[str]: ...

    def call(self, name: str, ext_group: Mapping[str, str], waiter: Waiter) -> None: ...


class UnsupportedProfileError(ValueError):
    """The profile file is not of a supported kind."""


def new_prof_proc(profile_path: str, out_path: str) -> ProfProc:
    """Return the processor for ``profile_path`` (``.yml`` or ``.yaml``)."""
    kind = os.path.splitext(profile_path)[1][1:].lower()
    if kind in ("yaml", "yml"):
        return YamlProfProc(profile_path, out_path)
    raise UnsupportedProfileError("please specify the correct profile")