"""Copying optional data sources into a sandbox."""

from __future__ import annotations

import logging
from pathlib import Path
import shutil

from chef_sandbox.models.sandbox import OptionalSource

logger = logging.getLogger(__name__)

_LABELS = {
    "data_bags": "data bags",
    "secret": "encrypted data bag secret",
}


class SourceMaterializer:
    def materialize(self, source: OptionalSource, sandbox_root: Path) -> Path | None:
        origin = source.origin
        if origin is None or not origin.exists():
            return None

        label = _LABELS.get(source.kind, source.kind)
        logger.info("Preparing %s", label)
        logger.debug("Using %s from %s", label, origin)

        target = sandbox_root / source.destination
        if source.is_file:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(origin, target)
        else:
            target.mkdir(parents=True, exist_ok=True)
            shutil.copytree(origin, target, symlinks=True, dirs_exist_ok=True)
        return target
