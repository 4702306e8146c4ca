"""Cookbook marker files recognised at a project root."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class CookbookMarker(str, Enum):
    BERKSFILE = "Berksfile"
    CHEFFILE = "Cheffile"
    COOKBOOKS_DIR = "cookbooks"
    METADATA = "metadata.rb"

    def present_in(self, project_root: Path) -> bool:
        path = project_root / self.value
        if self is CookbookMarker.COOKBOOKS_DIR:
            return path.is_dir()
        return path.exists()


MARKER_PRECEDENCE = (
    CookbookMarker.BERKSFILE,
    CookbookMarker.CHEFFILE,
    CookbookMarker.COOKBOOKS_DIR,
    CookbookMarker.METADATA,
)
