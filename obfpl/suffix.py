"""Random name suffixes that avoid clashes with existing files."""

from __future__ import annotations

import os
import random
import string
from typing import Iterable

_LETTERS = string.ascii_lowercase + string.ascii_uppercase + string.digits
_random = random.Random()


def _ext(path: str) -> str:
    seps = os.sep + (os.altsep or "")
    for index in range(len(path) - 1, -1, -1):
        char = path[index]
        if char in seps:
            break
        if char == ".":
            return path[index:]
    return ""


def with_suffix(path: str, suffix: str) -> str:
    """Insert ``suffix`` between the stem and the extension of ``path``."""
    ext = _ext(path)
    return path[: len(path) - len(ext)] + suffix + ext


def try_with_files(base: str, files: Iterable[str], suffix: str) -> None:
    """Raise FileExistsError if any suffixed file already exists in ``base``."""
    for file in files:
        path = os.path.join(base, with_suffix(file, suffix))
        if os.path.lexists(path):
            raise FileExistsError("file already exists. : " + os.path.basename(path))


def random_suffix(length: int) -> str:
    """Return ``length`` random ASCII letters and digits."""
    return "".join(_random.choices(_LETTERS, k=length))