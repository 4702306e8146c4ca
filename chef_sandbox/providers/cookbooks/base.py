"""Cookbook resolver interface."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class CookbookResolver(Protocol):
    name: str

    def resolve(self, project_root: Path, destination: Path) -> None:
        ...
