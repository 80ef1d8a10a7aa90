"""The watch loop: load the profile, then process files as they appear."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, field

from .logger import Logger
from .observer import DirObserver
from .pipeline import Pipeline


@dataclass
class Args:
    """Folders and profile given on the command line."""

    src: str
    dst: str
    profile: str


@dataclass
class App:
    """Watches ``args.src`` and sends finished files to ``args.dst``."""

    args: Args
    logger: Logger = field(default_factory=Logger)
    observer: DirObserver | None = field(default=None, init=False, repr=False)

    def run(self) -> None:
        """Watch the source folder until the observer is destroyed."""
        profile = os.path.abspath(self.args.profile)
        self.logger.log_submsg("プロファイル", profile)

        dst = get_valid_path(self.args.dst)
        self.logger.log_submsg("出力先", dst)

        src = get_valid_path(self.args.src)
        self.logger.log_submsg("監視先", src)

        try:
            pipe = Pipeline(profile, dst)
        except Exception:
            self.logger.log("プロファイルの読み込みに失敗しました")
            raise
        self.logger.log_submsg(
            "プロファイルを読み込みました",
            "プロファイルの形式 : " + pipe.prof_proc.get_type(),
        )

        observer = DirObserver(src)
        self.observer = observer

        self.logger.log("\nフォルダの監視を開始します...")
        threading.Thread(
            target=observer.observe,
            args=(pipe.create_notify(observer.messages),),
            daemon=True,
        ).start()
        for msg in observer:
            self.logger.log(msg)


def get_valid_path(path: str) -> str:
    """Return ``path`` made absolute, creating the directory if needed."""
    result = os.path.abspath(path)
    os.makedirs(result, exist_ok=True)
    return result