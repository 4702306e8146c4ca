"""Running delegated resolver executables."""

from __future__ import annotations

import logging
from pathlib import Path
import shutil
import subprocess
import time
from typing import Callable, Optional, Sequence

from chef_sandbox.models.errors import CapabilityUnavailable
from chef_sandbox.models.sandbox import ExecResult

logger = logging.getLogger(__name__)

CommandRunner = Callable[[Sequence[str], Path], ExecResult]
ExecutableLookup = Callable[[str], Optional[str]]


def run_command(command: Sequence[str], cwd: Path) -> ExecResult:
    logger.debug("Running %s in %s", " ".join(command), cwd)
    start = time.monotonic()
    process = subprocess.run(
        list(command),
        cwd=cwd,
        capture_output=True,
        text=True,
        check=False,
    )
    duration_ms = int((time.monotonic() - start) * 1000)
    return ExecResult(
        exit_code=process.returncode,
        stdout=process.stdout,
        stderr=process.stderr,
        duration_ms=duration_ms,
    )


def require_executable(
    executable: str,
    remediation: str,
    which: ExecutableLookup = shutil.which,
) -> str:
    path = which(executable)
    if path is None:
        raise CapabilityUnavailable(
            f"Could not find the `{executable}' executable on PATH", remediation
        )
    return path
