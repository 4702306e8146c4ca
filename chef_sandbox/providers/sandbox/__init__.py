"""Sandbox builder implementations and interfaces."""

from chef_sandbox.providers.sandbox.base import SandboxBuilder
from chef_sandbox.providers.sandbox.ignore import IgnoreSpec, remove_ignored_files
from chef_sandbox.providers.sandbox.local import LocalSandboxBuilder
from chef_sandbox.providers.sandbox.sources import SourceMaterializer

__all__ = [
    "IgnoreSpec",
    "LocalSandboxBuilder",
    "SandboxBuilder",
    "SourceMaterializer",
    "remove_ignored_files",
]
