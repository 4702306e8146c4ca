"""Choosing a cookbook resolver from the markers in a project root."""

from __future__ import annotations

import logging
from pathlib import Path

from chef_sandbox.models.cookbooks import MARKER_PRECEDENCE, CookbookMarker
from chef_sandbox.models.errors import ConfigurationError
from chef_sandbox.providers.cookbooks.base import CookbookResolver
from chef_sandbox.providers.cookbooks.berkshelf import BerkshelfResolve
from chef_sandbox.providers.cookbooks.librarian import LibrarianResolve
from chef_sandbox.providers.cookbooks.vendored import SingleCookbookWrap, VendoredCopy
from chef_sandbox.runtime import DEFAULT_RUNTIME, RuntimeContext

logger = logging.getLogger(__name__)


def find_marker(project_root: Path) -> CookbookMarker | None:
    for marker in MARKER_PRECEDENCE:
        if marker.present_in(project_root):
            return marker
    return None


def select_resolver(
    project_root: Path, runtime: RuntimeContext = DEFAULT_RUNTIME
) -> CookbookResolver:
    """Pick the single resolver for ``project_root``.

    Dependency manifests win over a vendored ``cookbooks/`` directory, which
    in turn wins over treating the project itself as the only cookbook.
    """
    marker = find_marker(project_root)
    if marker is CookbookMarker.BERKSFILE:
        resolver: CookbookResolver = BerkshelfResolve(runtime)
    elif marker is CookbookMarker.CHEFFILE:
        resolver = LibrarianResolve(runtime)
    elif marker is CookbookMarker.COOKBOOKS_DIR:
        resolver = VendoredCopy()
    elif marker is CookbookMarker.METADATA:
        resolver = SingleCookbookWrap()
    else:
        expected = ", ".join(
            f"{m.value}/" if m is CookbookMarker.COOKBOOKS_DIR else m.value
            for m in MARKER_PRECEDENCE
        )
        raise ConfigurationError(
            f"Cookbooks could not be found: one of {expected} must exist in {project_root}"
        )
    logger.debug("Selected %s resolver for %s", resolver.name, project_root)
    return resolver
