"""Helpers for choosing names, matching patterns and picking files to move."""

from __future__ import annotations

import os
import re
from typing import Callable, Mapping, Sequence


def _ext(path: str) -> str:
    seps = os.sep + (os.altsep or "")
    for index in range(len(path) - 1, -1, -1):
        char = path[index]
        if char in seps:
            break
        if char == ".":
            return path[index:]
    return ""


def get_basis_value(ext_group: Mapping[str, str], basis: str) -> str:
    """Return the path of the ``basis`` group without its extension.

    With an empty ``basis`` any value of the group is returned as is.
    """
    if not basis:
        return next(iter(ext_group.values()), "")
    value = ext_group.get(basis)
    if value is None:
        return ""
    return value[: len(value) - len(_ext(value))]


def match(pattern: str, text: str, text_path: str = "", encoding: str = "") -> bool:
    """Search ``pattern`` in ``text``, or in the file ``text_path`` if given.

    ``encoding`` may be ``"shift-jis"``; anything else reads the file as UTF-8.
    """
    if not text_path:
        return re.search(pattern, text) is not None

    with open(text_path, "rb") as fh:
        data = fh.read()
    codec = "shift_jis" if encoding == "shift-jis" else "utf-8"
    content = data.decode(codec, errors="replace")
    return re.search(pattern, content) is not None


def create_get_move_list(
    select_ext: Callable[[str], str],
) -> Callable[[Sequence[str], Sequence[str]], list[str]]:
    """Build a function picking source files whose group is absent from dst."""

    def get_move_list(src_file_names: Sequence[str], dst_file_names: Sequence[str]) -> list[str]:
        present = {select_ext(name) for name in dst_file_names}
        return [name for name in src_file_names if select_ext(name) not in present]

    return get_move_list