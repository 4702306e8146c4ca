"""Cookbook resolution with Librarian-Chef."""

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
    "Run `gem install librarian-chef` or add `gem 'librarian-chef'` to your "
    "Gemfile, and make sure `librarian-chef' is on PATH"
)


class LibrarianResolve:
    name = "librarian"

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
        logger.info("Resolving cookbook dependencies with Librarian-Chef")
        logger.debug(
            "Using Cheffile from %s", project_root / CookbookMarker.CHEFFILE.value
        )

        librarian = require_executable("librarian-chef", REMEDIATION, self._which)
        with self._runtime.librarian_lock:
            resolved = self._runner([librarian, "resolve"], project_root)
            if resolved.exit_code != 0:
                raise ResolutionError(
                    f"Librarian-Chef failed to resolve the Cheffile (exit {resolved.exit_code})",
                    resolved,
                )
            installed = self._runner(
                [librarian, "install", "--path", str(destination)], project_root
            )
        if installed.exit_code != 0:
            raise ResolutionError(
                f"Librarian-Chef failed to install cookbooks (exit {installed.exit_code})",
                installed,
            )
