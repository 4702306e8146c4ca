"""Shared data models for the chef-sandbox application."""

from chef_sandbox.models.cookbooks import MARKER_PRECEDENCE, CookbookMarker
from chef_sandbox.models.errors import (
    CapabilityUnavailable,
    ConfigurationError,
    ResolutionError,
    SandboxError,
)
from chef_sandbox.models.sandbox import (
    ExecResult,
    OptionalSource,
    RunMetadata,
    SandboxSources,
)

__all__ = [
    "CapabilityUnavailable",
    "ConfigurationError",
    "CookbookMarker",
    "ExecResult",
    "MARKER_PRECEDENCE",
    "OptionalSource",
    "ResolutionError",
    "RunMetadata",
    "SandboxError",
    "SandboxSources",
]
