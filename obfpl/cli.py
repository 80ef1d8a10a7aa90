"""Command line entry point."""

from __future__ import annotations

import argparse
import os
import sys

from .app import App, Args
from .command import get_exec_dir
from .logger import Logger

VERSION = "---"

_DESCRIPTION = (
    "このアプリを起動すると指定したのフォルダーを監視します。\n"
    "監視中特定のファイルを発見すると、プロファイルに従ってアプリを起動して、生成物を出力します。"
)


def build_parser() -> argparse.ArgumentParser:
    """Return the parser for the command's options."""
    parser = argparse.ArgumentParser(
        prog="obfPL",
        usage="%(prog)s [options]",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-d", "--dst", default="dst", help="処理済みのファイル出力先"
    )
    parser.add_argument(
        "-s", "--src", default="src", help="監視するフォルダーのパス"
    )
    parser.add_argument(
        "-p",
        "--profile",
        default=os.path.join(get_exec_dir(), "profile.yml"),
        help="プロファイルのパス",
    )
    parser.add_argument("-v", "--version", action="version", version=VERSION)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the watcher; return the exit status."""
    options = build_parser().parse_args(argv)
    app = App(
        Args(src=options.src, dst=options.dst, profile=options.profile),
        Logger(print),
    )
    try:
        app.run()
    except KeyboardInterrupt:
        if app.observer is not None:
            app.observer.destroy()
        return 130
    except Exception as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())