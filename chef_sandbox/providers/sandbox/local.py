"""Local sandbox builder implementation."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import shutil
import tempfile
from typing import Callable

from chef_sandbox.models.errors import require_plain_name
from chef_sandbox.models.sandbox import (
    CACHE_DIR,
    COOKBOOKS_DIR,
    DNA_FILE,
    RunMetadata,
    SandboxSources,
)
from chef_sandbox.providers.cookbooks.base import CookbookResolver
from chef_sandbox.providers.cookbooks.selector import select_resolver
from chef_sandbox.providers.sandbox.base import SandboxBuilder
from chef_sandbox.providers.sandbox.ignore import remove_ignored_files
from chef_sandbox.providers.sandbox.sources import SourceMaterializer
from chef_sandbox.runtime import DEFAULT_RUNTIME, RuntimeContext

logger = logging.getLogger(__name__)

ResolverSelector = Callable[[Path, RuntimeContext], CookbookResolver]


class LocalSandboxBuilder(SandboxBuilder):
    def __init__(
        self,
        base_dir: str | None = None,
        runtime: RuntimeContext = DEFAULT_RUNTIME,
        selector: ResolverSelector = select_resolver,
        materializer: SourceMaterializer | None = None,
    ) -> None:
        self._base_dir = base_dir
        self._runtime = runtime
        self._selector = selector
        self._materializer = materializer or SourceMaterializer()

    def create(
        self,
        metadata: RunMetadata,
        sources: SandboxSources,
        project_root: Path,
    ) -> Path:
        name = require_plain_name(metadata.name, "run name")
        sandbox = Path(tempfile.mkdtemp(prefix=f"{name}-sandbox-", dir=self._base_dir))
        logger.debug("Creating local sandbox in %s", sandbox)
        try:
            self._write_dna(sandbox, metadata)
            for source in sources.optional_sources():
                self._materializer.materialize(source, sandbox)
            (sandbox / CACHE_DIR).mkdir(exist_ok=True)
            self._prepare_cookbooks(sandbox, Path(project_root))
        except BaseException:
            self._discard(sandbox)
            raise
        return sandbox

    def destroy(self, sandbox_path: Path | None) -> None:
        if sandbox_path is None:
            return
        logger.debug("Cleaning up local sandbox in %s", sandbox_path)
        try:
            shutil.rmtree(sandbox_path)
        except FileNotFoundError:
            pass

    def _discard(self, sandbox: Path) -> None:
        # the original failure must reach the caller, not the cleanup error
        try:
            self.destroy(sandbox)
        except OSError as exc:
            logger.warning("Could not clean up local sandbox in %s: %s", sandbox, exc)

    def _write_dna(self, sandbox: Path, metadata: RunMetadata) -> None:
        with (sandbox / DNA_FILE).open("w", encoding="utf-8") as handle:
            json.dump(metadata.to_dna(), handle)

    def _prepare_cookbooks(self, sandbox: Path, project_root: Path) -> None:
        resolver = self._selector(project_root, self._runtime)
        cookbooks = sandbox / COOKBOOKS_DIR
        resolver.resolve(project_root, cookbooks)

        if not cookbooks.is_dir():
            return
        for cookbook in sorted(cookbooks.iterdir()):
            if cookbook.is_dir():
                remove_ignored_files(cookbook)
