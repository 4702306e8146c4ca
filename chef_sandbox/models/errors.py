"""Errors raised while assembling a sandbox."""

from __future__ import annotations

from typing import Optional

from chef_sandbox.models.sandbox import ExecResult


class SandboxError(Exception):
    pass


class ConfigurationError(SandboxError):
    pass


class CapabilityUnavailable(SandboxError):
    def __init__(self, message: str, remediation: str) -> None:
        super().__init__(f"{message}. {remediation}")
        self.remediation = remediation


class ResolutionError(SandboxError):
    def __init__(self, message: str, result: Optional[ExecResult] = None) -> None:
        if result is not None:
            output = (result.stderr.strip() or result.stdout.strip())
            if output:
                message = f"{message}\n{output}"
        super().__init__(message)
        self.result = result


def require_plain_name(value: str, label: str) -> str:
    """Return ``value`` if it is usable as a single path segment."""
    if (
        not value
        or value in (".", "..")
        or "/" in value
        or "\\" in value
        or "\x00" in value
    ):
        raise ConfigurationError(
            f"Invalid {label} {value!r}: it must be a single path segment"
            " without '/', '\\', '.' or '..'"
        )
    return value
