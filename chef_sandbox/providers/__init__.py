"""Provider package for sandbox assembly, cookbook resolution, and install commands."""

from chef_sandbox.providers.cookbooks import (
    BerkshelfResolve,
    CookbookResolver,
    LibrarianResolve,
    SingleCookbookWrap,
    VendoredCopy,
    select_resolver,
)
from chef_sandbox.providers.install import init_command, install_command
from chef_sandbox.providers.sandbox import LocalSandboxBuilder, SandboxBuilder

__all__ = [
    "BerkshelfResolve",
    "CookbookResolver",
    "LibrarianResolve",
    "LocalSandboxBuilder",
    "SandboxBuilder",
    "SingleCookbookWrap",
    "VendoredCopy",
    "init_command",
    "install_command",
    "select_resolver",
]
