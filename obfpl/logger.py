"""A small logger that forwards messages to a sink function."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable


@dataclass
class Logger:
    """Sends messages, and indented sub-messages, to ``emit``."""

    emit: Callable[[str], object] = field(default=print)

    def log(self, msg: str) -> None:
        self.emit(msg)

    def log_submsg(self, msg: str, *args: str) -> None:
        """Log ``msg`` followed by each sub-message prefixed with ``" > "``."""
        self.emit(msg)
        for submsg in args:
            self.emit(" > " + submsg)