"""Processing of file groups as described by a YAML profile."""

from __future__ import annotations

import contextlib
import os
import threading
from typing import Mapping

from .command import call as run_command
from .context import Context, new_context
from .matching import create_get_move_list, get_basis_value, match
from .profile import load_profile
from .waiter import PreviousStepFailed, Waiter


def _ext(path: str) -> str:
    seps = os.sep + (os.altsep or "")
    for index in range(len(path) - 1, -1, -1):
        char = path[index]
        if char in seps:
            break
        if char == ".":
            return path[index:]
    return ""


class YamlProfProc:
    """Runs the steps of a YAML profile over each complete group of files."""

    def __init__(self, profile_path: str, out_path: str) -> None:
        self.out_path = out_path
        self.profile = load_profile(profile_path)
        self.profile.env.temp = os.path.abspath(self.profile.env.temp)

    def get_type(self) -> str:
        return "Yaml"

    def select_ext(self, file_path: str) -> str:
        """Return the extension group that lists the file's extension, or ""."""
        ext = _ext(file_path)
        if len(ext) <= 1:
            return ""
        for group, sense in self.profile.ext.items():
            if ext[1:] in sense:
                return group
        return ""

    def create_ext_list(self) -> list[str]:
        return list(self.profile.ext)

    def call(self, name: str, ext_group: Mapping[str, str], waiter: Waiter) -> None:
        """Process one group, in the background if the profile asks for it."""
        if self.profile.env.exec_rule == "async":
            threading.Thread(
                target=self._call, args=(name, dict(ext_group), waiter), daemon=True
            ).start()
        else:
            self._call(name, ext_group, waiter)

    def _call(self, name: str, ext_group: Mapping[str, str], waiter: Waiter) -> None:
        try:
            try:
                ctx = new_context(
                    name,
                    list(ext_group.values()),
                    self.profile.env.temp,
                    self.profile.ext,
                    self.profile.var,
                )
            except Exception as err:
                waiter.error(err)
                return

            try:
                self._process(ctx, waiter)
            except Exception as err:
                waiter.error(err)
            finally:
                try:
                    ctx.temp.cleanup()
                except OSError as err:
                    waiter.error(err)
        finally:
            waiter.destroy()

    def _group(self, file_names: list[str], directory: str = "") -> dict[str, str]:
        return {
            self.select_ext(name): os.path.join(directory, name) if directory else name
            for name in file_names
        }

    def _process(self, ctx: Context, waiter: Waiter) -> None:
        for proc in self.profile.proc:
            if not match(proc.ptn, ctx.name, proc.trg, proc.enc):
                continue

            group = self._group(ctx.temp.load_file_names("src"))
            src, dst = ctx.temp.get_paths()
            ctx.name = get_basis_value(group, self.profile.name)
            ctx.vari.update(
                {"src": src, "dst": dst, "out": self.out_path, "name": ctx.name},
                group,
            )

            if proc.is_wait:
                with contextlib.suppress(PreviousStepFailed):
                    waiter.wait()

            run_command(ctx.vari.apply(proc.cmd))

            if proc.ext is not None:
                ctx.exts = dict(proc.ext)

            ctx.temp.exchange(create_get_move_list(self.select_ext))

        file_names = ctx.temp.load_file_names("src")
        ctx.temp.output(self.out_path, file_names)
        for name in file_names:
            waiter.log(name)

        ctx.vari.update({}, self._group(file_names, self.out_path))

        for cmd in self.profile.notify:
            run_command(ctx.vari.apply(cmd))

        waiter.close()