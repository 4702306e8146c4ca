from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_tree() -> Callable[[Path, dict[str, str]], Path]:
    def _write(root: Path, files: dict[str, str]) -> Path:
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def read_tree() -> Callable[[Path], dict[str, str]]:
    def _read(root: Path) -> dict[str, str]:
        return {
            path.relative_to(root).as_posix(): path.read_text(encoding="utf-8")
            for path in sorted(root.rglob("*"))
            if path.is_file()
        }

    return _read
