"""Cookbook resolution with Berkshelf."""

from __future__ import annotations

import logging
from pathlib import Path
import shutil

from chef_sandbox.models.cookbooks import CookbookMarker
from chef_sandbox.models.errors import ResolutionError
from chef_sandbox.providers.cookbooks.commands import (
    CommandRunner,
    ExecutableLookup,
    require_executable,
    run_command,
)
from chef_sandbox.runtime import DEFAULT_RUNTIME, RuntimeContext

logger = logging.getLogger(__name__)

REMEDIATION = (
    "Install Chef Workstation, or run `gem install berkshelf` and make sure "
    "`berks' is on PATH"
)


class BerkshelfResolve:
    name = "berkshelf"

    def __init__(
        self,
        runtime: RuntimeContext = DEFAULT_RUNTIME,
        runner: CommandRunner = run_command,
        which: ExecutableLookup = shutil.which,
    ) -> None:
        self._runtime = runtime
        self._runner = runner
        self._which = which

    def resolve(self, project_root: Path, destination: Path) -> None:
        berksfile = project_root / CookbookMarker.BERKSFILE.value
        logger.info("Resolving cookbook dependencies with Berkshelf...")
        logger.debug("Using Berksfile from %s", berksfile)

        berks = require_executable("berks", REMEDIATION, self._which)
        command = [berks, "vendor", str(destination), "--berksfile", str(berksfile)]
        with self._runtime.berkshelf_lock:
            result = self._runner(command, project_root)
        if result.exit_code != 0:
            raise ResolutionError(
                f"Berkshelf failed to vendor cookbooks (exit {result.exit_code})",
                result,
            )
