from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest


@pytest.fixture(autouse=True)
def sketch_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    monkeypatch.setenv("SKETCHVIEW_HOME", str(home))
    return home


@pytest.fixture
def write_sketch(tmp_path: Path) -> Callable[[Iterable[int], str], Path]:
    def _write(data: Iterable[int], name: str = "test.sk") -> Path:
        path = tmp_path / name
        path.write_bytes(bytes(data))
        return path

    return _write
