import os

from obfpl.command import get_exec_dir
from obfpl.context import new_context


def test_new_context_moves_files_and_holds_values(tmp_path):
    inbox = tmp_path / "in"
    inbox.mkdir()
    doc = inbox / "doc.txt"
    doc.write_text("data")

    ctx = new_context(
        "doc",
        [str(doc)],
        str(tmp_path / "tmp"),
        {"txt": "txt"},
        {"k": "v", "e": "{@edr}/x"},
    )

    assert ctx.name == "doc"
    assert ctx.exts == {"txt": "txt"}
    assert not doc.exists()
    assert ctx.temp.load_file_names("src") == ["doc.txt"]
    assert ctx.vari.apply("{@k}") == "v"
    assert ctx.vari.apply("{@e}") == get_exec_dir() + "/x"


def test_scratch_uses_two_swap_directories(tmp_path):
    ctx = new_context("job", [], str(tmp_path), {}, {})
    src, dst = ctx.temp.get_paths()
    assert sorted(os.listdir(ctx.temp.base_dir)) == sorted(
        [os.path.basename(src), os.path.basename(dst)]
    )
    assert src != dst