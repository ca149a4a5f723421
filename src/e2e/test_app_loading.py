from pathlib import Path
from types import SimpleNamespace
import pytest

app = pytest.importorskip("app", reason="customtkinter/tkinter not available")


def _fake_window():
    scheduled, errors, loaded = [], [], []
    win = SimpleNamespace(
        after=lambda _ms, fn, *args: scheduled.append((fn, args)),
        _on_load_error=errors.append,
        _on_load_ok=lambda which, paths, items: loaded.append((which, items)),
    )
    return win, scheduled, errors, loaded


def test_load_error_reaches_ui_thread_callback(tmp_path: Path):
    win, scheduled, errors, loaded = _fake_window()
    app.GhostTextApp._load_worker(win, "suggestions", [str(tmp_path / "missing.txt")])
    # the callback runs later on the Tk loop, after the worker has returned
    for fn, args in scheduled:
        fn(*args)
    assert len(errors) == 1 and isinstance(errors[0], FileNotFoundError)
    assert loaded == []


def test_load_ok_passes_items_to_ui_thread(tmp_path: Path):
    p = tmp_path / "s.txt"
    p.write_text("alpha\nbeta\n", encoding="utf-8")
    win, scheduled, errors, loaded = _fake_window()
    app.GhostTextApp._load_worker(win, "preferred", [str(p)])
    for fn, args in scheduled:
        fn(*args)
    assert loaded == [("preferred", ["alpha", "beta"])]
    assert errors == []


def test_blend_flips_black_and_floors_alpha():
    assert app.blend("#00000038", "#000000") == "#595959"
    assert app.blend("gray", "#343638") == "gray"
