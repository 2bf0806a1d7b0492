from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

import dep_installer.main as main_mod


@pytest.fixture(autouse=True)
def _no_logging_handlers(monkeypatch) -> None:
    # caplog captures records; keep main() from installing stdout handlers.
    monkeypatch.setattr(main_mod, "configure_logging", lambda **kwargs: None)


@pytest.fixture
def make_dist(tmp_path: Path) -> Callable[..., Path]:
    def _make(name: str, *, platform: str = "linux", include: bool = True, lib: bool = True) -> Path:
        dep = name.split("-")[0]
        dist = tmp_path / platform / "_dist" / name
        dist.mkdir(parents=True)
        if include:
            (dist / "include" / dep).mkdir(parents=True)
            (dist / "include" / dep / f"{dep}.h").write_text(f"// {name}\n", encoding="utf-8")
        if lib:
            (dist / "lib").mkdir()
            (dist / "lib" / f"lib{dep}.a").write_text(name, encoding="utf-8")
        return dist

    return _make


def tree(root: Path) -> list[str]:
    if not root.exists():
        return []
    return sorted(str(p.relative_to(root)) for p in root.rglob("*"))
