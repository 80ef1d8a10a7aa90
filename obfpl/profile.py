"""The YAML processing profile."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


@dataclass
class Env:
    """Where scratch files go and whether groups run in the background."""

    temp: str = ""
    exec_rule: str = ""


@dataclass
class Process:
    """One processing step.

    ``ext`` is None when the step does not replace the extension groups.
    """

    ptn: str = ""
    trg: str = ""
    enc: str = ""
    ext: dict[str, str] | None = None
    is_wait: bool = False
    cmd: str = ""


@dataclass
class Profile:
    env: Env = field(default_factory=Env)
    ext: dict[str, str] = field(default_factory=dict)
    name: str = ""
    var: dict[str, str] = field(default_factory=dict)
    proc: list[Process] = field(default_factory=list)
    notify: list[str] = field(default_factory=list)


def _scalar(value: Any, where: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ValueError(f"{where}: expected a string")


def _mapping(value: Any, where: str) -> dict[Any, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{where}: expected a mapping")
    return value


def _sequence(value: Any, where: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{where}: expected a list")
    return value


def _str_map(value: Any, where: str) -> dict[str, str]:
    return {
        _scalar(key, where): _scalar(val, f"{where}.{key}")
        for key, val in _mapping(value, where).items()
    }


def _process(value: Any, where: str) -> Process:
    data = _mapping(value, where)
    wait = data.get("wait")
    if wait is not None and not isinstance(wait, bool):
        raise ValueError(f"{where}.wait: expected a boolean")
    ext = data.get("ext")
    return Process(
        ptn=_scalar(data.get("ptn"), f"{where}.ptn"),
        trg=_scalar(data.get("trg"), f"{where}.trg"),
        enc=_scalar(data.get("enc"), f"{where}.enc"),
        ext=None if ext is None else _str_map(ext, f"{where}.ext"),
        is_wait=bool(wait),
        cmd=_scalar(data.get("cmd"), f"{where}.cmd"),
    )


def load_profile(path: str) -> Profile:
    """Read and validate the YAML profile at ``path``."""
    with open(path, encoding="utf-8") as fh:
        data = _mapping(yaml.safe_load(fh), "profile")

    env = _mapping(data.get("env"), "env")
    return Profile(
        env=Env(
            temp=_scalar(env.get("temp"), "env.temp"),
            exec_rule=_scalar(env.get("exec-rule"), "env.exec-rule"),
        ),
        ext=_str_map(data.get("ext"), "ext"),
        name=_scalar(data.get("name"), "name"),
        var=_str_map(data.get("var"), "var"),
        proc=[
            _process(item, f"process[{number}]")
            for number, item in enumerate(_sequence(data.get("process"), "process"))
        ],
        notify=[
            _scalar(item, f"notify[{number}]")
            for number, item in enumerate(_sequence(data.get("notify"), "notify"))
        ],
    )