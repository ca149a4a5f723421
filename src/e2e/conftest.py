from pathlib import Path
import pytest
import frontend as api

@pytest.fixture
def lists(tmp_path: Path) -> dict:
    root = tmp_path / "lists"; root.mkdir()
    (root / "suggestions.txt").write_text(
        "hello world wide web\nhelp desk\ncat\ncatalog\n", encoding="utf-8"
    )
    (root / "preferred.txt").write_text("helicopter\n", encoding="utf-8")
    return {
        "candidates": str(root / "suggestions.txt"),
        "priority": str(root / "preferred.txt"),
    }

@pytest.fixture
def ready(lists):
    api.initialize([lists["candidates"]], [lists["priority"]], mode="word")
    yield api.field()
    api.attach(None)
