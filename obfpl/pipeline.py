"""Turning file creation events into processing of complete file groups."""

from __future__ import annotations

from typing import Any, Callable

from .extpool import ExtPool
from .profproc import ProfProc, new_prof_proc
from .waiter import new_closed_waiter


class Pipeline:
    """Holds the profile processor and feeds it complete file groups."""

    def __init__(self, profile_path: str, out_path: str) -> None:
        self.prof_proc: ProfProc = new_prof_proc(profile_path, out_path)

    def create_notify(self, messages: Any) -> Callable[[str], None]:
        """Return a callback for newly created files.

        ``messages`` is a queue-like object receiving log lines.
        """
        waiter = new_closed_waiter(messages)
        pool = ExtPool()

        def notify(file_path: str) -> None:
            nonlocal waiter
            try:
                ext = self.prof_proc.select_ext(file_path)
            except Exception as err:
                messages.put(str(err))
                return

            files = pool.push(file_path, ext, self.prof_proc.create_ext_list())
            if files is None:
                return

            waiter = waiter.next()
            self.prof_proc.call(files.name, files.ext_group, waiter)

        return notify