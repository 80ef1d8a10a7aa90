import os
import re

import pytest

from obfpl import temp
from obfpl.matching import create_get_move_list
from obfpl.temp import Temporary


def _touch(path, text="data"):
    path.write_text(text)
    return path


@pytest.fixture
def inbox(tmp_path):
    folder = tmp_path / "in"
    folder.mkdir()
    return folder


def test_files_are_moved_into_first_swap(tmp_path, inbox):
    a = _touch(inbox / "doc.txt")
    b = _touch(inbox / "doc.png")
    t = Temporary(str(tmp_path / "tmp"), "  doc ", [str(a), str(b)], ["a", "b"])
    assert not a.exists()
    assert not b.exists()
    assert t.load_file_names("src") == ["doc.png", "doc.txt"]
    assert t.load_file_names("dst") == []
    dirname = os.path.basename(t.base_dir)
    assert dirname.startswith("doc")
    assert len(dirname) == len("doc") + 16


def test_get_paths_follow_swap_list(tmp_path):
    t = Temporary(str(tmp_path), "job", [], ["a", "b"])
    assert t.get_paths() == (
        os.path.join(t.base_dir, "a"),
        os.path.join(t.base_dir, "b"),
    )


def test_same_name_gives_distinct_directories(tmp_path):
    first = Temporary(str(tmp_path), "job", [], ["a", "b"])
    second = Temporary(str(tmp_path), "job", [], ["a", "b"])
    assert first.base_dir != second.base_dir
    assert os.path.isdir(first.base_dir) and os.path.isdir(second.base_dir)


def test_fewer_than_two_swaps_rejected(tmp_path):
    with pytest.raises(ValueError):
        Temporary(str(tmp_path), "job", [], ["a"])


def test_unknown_target_rejected(tmp_path):
    t = Temporary(str(tmp_path), "job", [], ["a", "b"])
    with pytest.raises(ValueError):
        t.load_file_names("other")


def test_empty_file_is_rejected(tmp_path, inbox, monkeypatch):
    monkeypatch.setattr(temp, "MOVE_RETRY_DELAY", 0)
    empty = _touch(inbox / "empty.txt", "")
    with pytest.raises(ValueError, match="file size is 0"):
        Temporary(str(tmp_path / "tmp"), "job", [str(empty)], ["a", "b"])
    assert empty.exists()


def test_missing_file_is_rejected(tmp_path, monkeypatch):
    monkeypatch.setattr(temp, "MOVE_RETRY_DELAY", 0)
    with pytest.raises(FileNotFoundError):
        Temporary(str(tmp_path / "tmp"), "job", [str(tmp_path / "nope.txt")], ["a", "b"])


def test_exchange_moves_missing_groups_and_swaps(tmp_path, inbox):
    files = [str(_touch(inbox / "x.txt")), str(_touch(inbox / "y.png"))]
    t = Temporary(str(tmp_path / "tmp"), "job", files, ["a", "b"])
    src, dst = t.get_paths()
    _touch(tmp_path / "z.txt").replace(os.path.join(dst, "z.txt"))

    t.exchange(create_get_move_list(lambda name: os.path.splitext(name)[1]))

    assert t.get_paths() == (dst, src)
    assert t.load_file_names("src") == ["y.png", "z.txt"]
    assert t.load_file_names("dst") == []


def test_output_moves_files(tmp_path, inbox):
    files = [str(_touch(inbox / "x.txt", "hello"))]
    out = tmp_path / "out"
    out.mkdir()
    t = Temporary(str(tmp_path / "tmp"), "job", files, ["a", "b"])
    written = t.output(str(out), ["x.txt"])
    assert written == ["x.txt"]
    assert (out / "x.txt").read_text() == "hello"
    assert t.load_file_names("src") == []
    assert abs(os.stat(out / "x.txt").st_mtime_ns - t.created_ns) < 2_000_000_000


def test_output_adds_suffix_on_clash(tmp_path, inbox):
    files = [str(_touch(inbox / "x.txt", "new"))]
    out = tmp_path / "out"
    out.mkdir()
    _touch(out / "x.txt", "old")
    t = Temporary(str(tmp_path / "tmp"), "job", files, ["a", "b"])
    written = t.output(str(out), ["x.txt"])
    assert len(written) == 1
    assert re.fullmatch(r"x[A-Za-z0-9]{8}\.txt", written[0])
    assert (out / written[0]).read_text() == "new"
    assert (out / "x.txt").read_text() == "old"


def test_cleanup_removes_everything(tmp_path, inbox):
    files = [str(_touch(inbox / "x.txt"))]
    t = Temporary(str(tmp_path / "tmp"), "job", files, ["a", "b"])
    t.cleanup()
    assert not os.path.exists(t.base_dir)
    t.cleanup()
    assert os.listdir(tmp_path / "tmp") == []