import os
import threading
import time

import pytest
import yaml

from obfpl.app import App, Args, get_valid_path
from obfpl.logger import Logger
from obfpl.profproc import UnsupportedProfileError


def _wait_for(predicate, timeout=10.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.05)
    return predicate()


def test_get_valid_path_creates_nested_directory(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    result = get_valid_path(str(target))
    assert result == os.path.abspath(str(target))
    assert os.path.isdir(result)


def test_get_valid_path_accepts_existing_directory(tmp_path):
    result = get_valid_path(str(tmp_path))
    assert result == os.path.abspath(str(tmp_path))


def test_run_with_unsupported_profile_raises_and_logs(tmp_path):
    logs = []
    profile = tmp_path / "profile.txt"
    profile.write_text("nothing", encoding="utf-8")
    app = App(
        Args(src=str(tmp_path / "src"), dst=str(tmp_path / "dst"), profile=str(profile)),
        Logger(logs.append),
    )
    with pytest.raises(UnsupportedProfileError):
        app.run()
    assert (tmp_path / "src").is_dir()
    assert (tmp_path / "dst").is_dir()
    assert "プロファイルの読み込みに失敗しました" in logs
    assert logs[0] == "プロファイル"
    assert logs[1] == " > " + os.path.abspath(str(profile))


def test_run_with_missing_profile_raises(tmp_path):
    logs = []
    app = App(
        Args(
            src=str(tmp_path / "src"),
            dst=str(tmp_path / "dst"),
            profile=str(tmp_path / "missing.yml"),
        ),
        Logger(logs.append),
    )
    with pytest.raises(FileNotFoundError):
        app.run()
    assert app.observer is None


def test_run_processes_created_file_and_stops(tmp_path):
    profile = tmp_path / "profile.yml"
    profile.write_text(
        yaml.safe_dump({"env": {"temp": str(tmp_path / "work")}, "ext": {"img": "png"}}),
        encoding="utf-8",
    )
    src = tmp_path / "src"
    dst = tmp_path / "dst"
    logs = []
    errors = []
    app = App(Args(src=str(src), dst=str(dst), profile=str(profile)), Logger(logs.append))

    def target():
        try:
            app.run()
        except Exception as err:  # pragma: no cover - reported through assertion
            errors.append(err)

    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    try:
        assert _wait_for(
            lambda: app.observer is not None and "\nフォルダの監視を開始します..." in logs
        )
        assert " > プロファイルの形式 : Yaml" in logs
        time.sleep(0.5)

        (src / "photo.png").write_bytes(b"data")
        assert _wait_for(lambda: (dst / "photo.png").exists())
        assert (dst / "photo.png").read_bytes() == b"data"
        assert _wait_for(lambda: "photo.png" in logs)
        assert not (src / "photo.png").exists()
    finally:
        if app.observer is not None:
            app.observer.destroy()
        thread.join(10)
    assert not thread.is_alive()
    assert errors == []