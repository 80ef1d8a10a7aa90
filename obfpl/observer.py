"""Watching a directory for newly created files."""

from __future__ import annotations

import os
import queue
import threading
from typing import Callable, Iterator

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

_CLOSED = None


class _CreatedHandler(FileSystemEventHandler):
    def __init__(self, created: Callable[[str], None], messages: queue.Queue) -> None:
        super().__init__()
        self._created = created
        self._messages = messages

    def on_created(self, event: FileSystemEvent) -> None:
        try:
            self._created(os.fsdecode(event.src_path))
        except Exception as err:
            self._messages.put(str(err))


class DirObserver:
    """Reports creations in one directory; messages are read by iterating."""

    def __init__(self, path: str) -> None:
        self.path = path
        self.messages: queue.Queue = queue.Queue()
        self._observer = Observer()
        self._lock = threading.Lock()
        self._destroyed = False

    def observe(self, created: Callable[[str], None]) -> None:
        """Call ``created(path)`` for each new entry; blocks until destroyed."""
        with self._lock:
            if self._destroyed:
                return
            if not os.path.isdir(self.path):
                self.messages.put(f"no such directory: {self.path}")
                return
            try:
                self._observer.schedule(
                    _CreatedHandler(created, self.messages), self.path, recursive=False
                )
                self._observer.start()
            except Exception as err:
                self.messages.put(str(err))
                return
        self._observer.join()

    def destroy(self) -> None:
        """Stop watching and end the message stream."""
        with self._lock:
            if self._destroyed:
                return
            self._destroyed = True
            running = self._observer.is_alive()
            if running:
                self._observer.stop()
        if running:
            self._observer.join()
        self.messages.put(_CLOSED)

    def __iter__(self) -> Iterator[str]:
        while True:
            msg = self.messages.get()
            if msg is _CLOSED:
                return
            yield msg