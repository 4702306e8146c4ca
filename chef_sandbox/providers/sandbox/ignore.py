"""Pruning files listed in a cookbook's chefignore."""

from __future__ import annotations

import logging
import os
from pathlib import Path
import re

from chef_sandbox.models.errors import ConfigurationError

logger = logging.getLogger(__name__)

CHEFIGNORE = "chefignore"


def _compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile one chefignore glob into a regex over cookbook-relative paths.

    - ``*`` and ``?`` stay inside one path segment
    - ``**`` crosses segments
    - ``[abc]`` character classes
    - ``\\x`` matches ``x`` literally
    - a pattern without ``/`` matches at any depth
    - a match on a directory covers everything below it
    """
    anchored = "/" in pattern.rstrip("/")
    pattern = pattern.strip("/")

    regex = ""
    i = 0
    while i < len(pattern):
        c = pattern[i]
        if c == "\\" and i + 1 < len(pattern):
            regex += re.escape(pattern[i + 1])
            i += 2
            continue
        if c == "*":
            if pattern.startswith("**", i):
                if pattern.startswith("**/", i):
                    regex += "(?:.*/)?"
                    i += 3
                else:
                    regex += ".*"
                    i += 2
                continue
            regex += "[^/]*"
        elif c == "?":
            regex += "[^/]"
        elif c == "[":
            j = i + 1
            if j < len(pattern) and pattern[j] in "!^":
                j += 1
            while j < len(pattern) and pattern[j] != "]":
                j += 1
            if j < len(pattern):
                body = pattern[i + 1 : j]
                if not body or body in "!^":
                    regex += re.escape(c)
                    i += 1
                    continue
                if body.startswith("!"):
                    body = "^" + body[1:]
                regex += f"[{body}]"
                i = j
            else:
                regex += re.escape(c)
        else:
            regex += re.escape(c)
        i += 1

    prefix = "^" if anchored else "(?:^|/)"
    try:
        return re.compile(f"{prefix}{regex}(?:/.*)?$")
    except re.error:
        # unbalanced classes such as [a\] match literally
        return re.compile(f"{prefix}{re.escape(pattern)}(?:/.*)?$")


class IgnoreSpec:
    """Ordered chefignore patterns; a path is ignored if any pattern matches."""

    def __init__(self, patterns: list[str] | None = None) -> None:
        self.patterns: list[str] = []
        self._compiled: list[re.Pattern[str]] = []
        self.add(patterns or [])

    @classmethod
    def from_file(cls, path: Path) -> "IgnoreSpec":
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ConfigurationError(f"Could not read {path}: {exc}") from exc
        return cls(text.splitlines())

    def add(self, patterns: list[str]) -> "IgnoreSpec":
        for pattern in patterns:
            pattern = pattern.strip()
            if not pattern or pattern.startswith("#"):
                continue
            self.patterns.append(pattern)
            self._compiled.append(_compile_pattern(pattern))
        return self

    def ignores(self, relative_path: str) -> bool:
        path = relative_path.replace("\\", "/").strip("/")
        return any(compiled.search(path) for compiled in self._compiled)


def remove_ignored_files(cookbook_dir: Path) -> list[Path]:
    """Delete every file under ``cookbook_dir`` matched by its chefignore.

    Returns the removed paths. Directories are left in place even when
    emptied.
    """
    chefignore = cookbook_dir / CHEFIGNORE
    if not chefignore.is_file():
        return []

    spec = IgnoreSpec.from_file(chefignore)
    logger.debug("Applying %s (%d patterns)", chefignore, len(spec.patterns))
    removed: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(cookbook_dir):
        for filename in filenames:
            path = Path(dirpath) / filename
            if not path.is_file():
                continue
            relative = path.relative_to(cookbook_dir).as_posix()
            if spec.ignores(relative):
                path.unlink()
                removed.append(path)
    return removed
