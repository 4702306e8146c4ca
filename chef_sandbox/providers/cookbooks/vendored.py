"""Cookbook resolution by copying cookbooks out of the project tree."""

from __future__ import annotations

import logging
from pathlib import Path
import re
import shutil

from chef_sandbox.models.cookbooks import CookbookMarker
from chef_sandbox.models.errors import ConfigurationError, require_plain_name

logger = logging.getLogger(__name__)

_NAME_LINE = re.compile(r"""^\s*name\s*\(?\s*(['"])(?P<name>[^'"]+)\1""")


def read_cookbook_name(metadata_rb: Path) -> str:
    """Return the ``name`` declared in a cookbook's metadata.rb."""
    try:
        text = metadata_rb.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Could not read {metadata_rb}: {exc}") from exc

    for line in text.splitlines():
        match = _NAME_LINE.match(line)
        if match:
            return require_plain_name(match.group("name").strip(), "cookbook name")
    raise ConfigurationError(
        "The metadata.rb does not define the 'name' key."
        " Please add: `name '<cookbook_name>'` to metadata.rb and retry"
    )


class SingleCookbookWrap:
    name = "metadata"

    def resolve(self, project_root: Path, destination: Path) -> None:
        metadata_rb = project_root / CookbookMarker.METADATA.value
        logger.info("Preparing current project directory as a cookbook")
        logger.debug("Using metadata.rb from %s", metadata_rb)

        cookbook_name = read_cookbook_name(metadata_rb)
        cookbook_path = destination / cookbook_name
        if cookbook_path.resolve().parent != destination.resolve():
            raise ConfigurationError(
                f"Cookbook {cookbook_name!r} would be written outside {destination}"
            )
        cookbook_path.mkdir(parents=True, exist_ok=True)
        for entry in sorted(project_root.iterdir()):
            # top-level dotfiles (.git, .kitchen) stay behind
            if entry.name.startswith("."):
                continue
            target = cookbook_path / entry.name
            if entry.is_dir():
                shutil.copytree(entry, target, symlinks=True, dirs_exist_ok=True)
            else:
                shutil.copy2(entry, target)


class VendoredCopy:
    name = "vendored"

    def __init__(self, wrap: SingleCookbookWrap | None = None) -> None:
        self._wrap = wrap or SingleCookbookWrap()

    def resolve(self, project_root: Path, destination: Path) -> None:
        destination.mkdir(parents=True, exist_ok=True)
        for dirname in ("cookbooks", "site-cookbooks"):
            source = project_root / dirname
            logger.info("Preparing %s from project directory", dirname)
            if not source.is_dir():
                logger.debug("No %s directory in %s", dirname, project_root)
                continue
            logger.debug("Using cookbooks from %s", source)
            shutil.copytree(source, destination, symlinks=True, dirs_exist_ok=True)

        if CookbookMarker.METADATA.present_in(project_root):
            self._wrap.resolve(project_root, destination)
