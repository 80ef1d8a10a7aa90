"""Scratch directories that files move through between processing steps."""

from __future__ import annotations

import os
import shutil
import time
from typing import Callable, Iterable, Sequence

from .retry import retry
from .suffix import random_suffix, try_with_files, with_suffix

MOVE_ATTEMPTS = 5
MOVE_RETRY_DELAY = 0.5
NAME_ATTEMPTS = 10
NAME_RETRY_DELAY = 0.1

_TARGETS = {"src": 0, "dst": 1}


def _move_in(file_name: str, dest_dir: str) -> None:
    if os.stat(file_name).st_size == 0:
        raise ValueError("file size is 0")
    os.replace(file_name, os.path.join(dest_dir, os.path.basename(file_name)))


def _make_unique_dir(base: str, name: str) -> str:
    def attempt(_: int) -> str:
        candidate = os.path.join(base, with_suffix(name, random_suffix(16)))
        os.makedirs(candidate)
        return candidate

    return retry(NAME_ATTEMPTS, attempt, lambda _: time.sleep(NAME_RETRY_DELAY))


def _free_suffix(base: str, files: Sequence[str]) -> str:
    def attempt(number: int) -> str:
        suffix = "" if number == 0 else random_suffix(8)
        try_with_files(base, files, suffix)
        return suffix

    return retry(NAME_ATTEMPTS, attempt, lambda _: time.sleep(NAME_RETRY_DELAY))


class Temporary:
    """Two or more directories that alternate as the source and destination.

    The given files are moved into the first directory on creation.
    """

    def __init__(
        self,
        base: str,
        name: str,
        file_names: Iterable[str],
        swaps: Sequence[str],
    ) -> None:
        swaps = list(swaps)
        if len(swaps) < 2:
            raise ValueError("2 or more 'swaps' are always required")

        self.base_dir = _make_unique_dir(base, name.strip())
        self.swaps = swaps
        self._index = 0

        for swap in swaps:
            os.makedirs(os.path.join(self.base_dir, swap), exist_ok=True)

        first = os.path.join(self.base_dir, swaps[0])
        for file_name in file_names:
            retry(
                MOVE_ATTEMPTS,
                lambda _, path=file_name: _move_in(path, first),
                lambda _: time.sleep(MOVE_RETRY_DELAY),
            )

        self.created_ns = time.time_ns()

    def get_paths(self) -> tuple[str, str]:
        """Return the current source and destination directories."""
        count = len(self.swaps)
        src = self.swaps[self._index % count]
        dst = self.swaps[(self._index + 1) % count]
        return os.path.join(self.base_dir, src), os.path.join(self.base_dir, dst)

    def load_file_names(self, target: str) -> list[str]:
        """List the file names in the ``"src"`` or ``"dst"`` directory."""
        if target not in _TARGETS:
            raise ValueError("'target' must be either 'src' or 'dst'")
        directory = self.swaps[(self._index + _TARGETS[target]) % len(self.swaps)]
        return sorted(os.listdir(os.path.join(self.base_dir, directory)))

    def exchange(
        self,
        get_move_list: Callable[[list[str], list[str]], Iterable[str]],
    ) -> None:
        """Move the chosen source files to the destination, empty the source, swap."""
        src_names = self.load_file_names("src")
        dst_names = self.load_file_names("dst")
        move_list = list(get_move_list(src_names, dst_names))

        src, dst = self.get_paths()
        for name in move_list:
            os.replace(os.path.join(src, name), os.path.join(dst, name))

        for name in os.listdir(src):
            path = os.path.join(src, name)
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)

        self._index += 1

    def output(self, outdir: str, files: Sequence[str]) -> list[str]:
        """Move ``files`` from the source directory to ``outdir``.

        A common random suffix is added when any name is taken already.
        The moved files are stamped with the time processing started.
        Returns the names written.
        """
        src_dir, _ = self.get_paths()
        suffix = _free_suffix(outdir, files)

        written = []
        for name in files:
            out_name = with_suffix(name, suffix)
            os.replace(os.path.join(src_dir, name), os.path.join(outdir, out_name))
            written.append(out_name)

        for out_name in written:
            os.utime(os.path.join(outdir, out_name), ns=(self.created_ns, self.created_ns))

        return written

    def cleanup(self) -> None:
        """Remove the whole scratch directory; a missing one is not an error."""
        try:
            shutil.rmtree(self.base_dir)
        except FileNotFoundError:
            pass