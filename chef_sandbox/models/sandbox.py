"""Data models for sandbox assembly."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

DNA_FILE = "dna.json"
CACHE_DIR = "cache"
COOKBOOKS_DIR = "cookbooks"
SECRET_FILE = "encrypted_data_bag_secret"


@dataclass(frozen=True)
class RunMetadata:
    name: str
    run_list: list[str] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)

    def to_dna(self) -> dict[str, Any]:
        dna = dict(self.attributes)
        dna["run_list"] = list(self.run_list)
        return dna


@dataclass(frozen=True)
class OptionalSource:
    kind: str
    origin: Optional[Path]
    destination: str
    is_file: bool = False


@dataclass(frozen=True)
class SandboxSources:
    data_bags: Optional[Path] = None
    roles: Optional[Path] = None
    nodes: Optional[Path] = None
    environments: Optional[Path] = None
    data: Optional[Path] = None
    secret: Optional[Path] = None

    def optional_sources(self) -> list[OptionalSource]:
        return [
            OptionalSource("data_bags", self.data_bags, "data_bags"),
            OptionalSource("roles", self.roles, "roles"),
            OptionalSource("nodes", self.nodes, "nodes"),
            OptionalSource("environments", self.environments, "environments"),
            OptionalSource("data", self.data, "data"),
            OptionalSource("secret", self.secret, SECRET_FILE, is_file=True),
        ]


@dataclass(frozen=True)
class ExecResult:
    exit_code: int
    stdout: str
    stderr: str
    duration_ms: int
