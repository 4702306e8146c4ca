"""Sandbox builder interface."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from chef_sandbox.models.sandbox import RunMetadata, SandboxSources


class SandboxBuilder(Protocol):
    def create(
        self,
        metadata: RunMetadata,
        sources: SandboxSources,
        project_root: Path,
    ) -> Path:
        ...

    def destroy(self, sandbox_path: Path | None) -> None:
        ...
