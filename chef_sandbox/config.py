"""Loading sandbox configuration from YAML."""

from __future__ import annotations

from dataclasses import dataclass, field
import importlib
import importlib.util
from pathlib import Path
from typing import Any, Optional, Union

from chef_sandbox.models.errors import CapabilityUnavailable, ConfigurationError
from chef_sandbox.models.sandbox import RunMetadata, SandboxSources

DEFAULT_CONFIG_FILE = ".kitchen.yml"
DEFAULT_OMNIBUS_URL = "https://www.opscode.com/chef/install.sh"

_SOURCE_KEYS = {
    "data_bags": "data_bags_path",
    "roles": "roles_path",
    "nodes": "nodes_path",
    "environments": "environments_path",
    "data": "data_path",
    "secret": "encrypted_data_bag_secret_key_path",
}


@dataclass(frozen=True)
class ProvisionerConfig:
    require_chef_omnibus: Union[bool, str, None] = None
    chef_omnibus_url: str = DEFAULT_OMNIBUS_URL
    sudo: bool = True
    root_path: str = "/tmp/kitchen"


@dataclass(frozen=True)
class SuiteConfig:
    name: str = "default"
    run_list: list[str] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)
    sources: SandboxSources = field(default_factory=SandboxSources)

    def run_metadata(self) -> RunMetadata:
        return RunMetadata(
            name=self.name, run_list=list(self.run_list), attributes=dict(self.attributes)
        )


@dataclass(frozen=True)
class SandboxConfig:
    project_root: Path
    provisioner: ProvisionerConfig = field(default_factory=ProvisionerConfig)
    suite: SuiteConfig = field(default_factory=SuiteConfig)


def _load_yaml(path: Path) -> dict[str, Any]:
    yaml_spec = importlib.util.find_spec("yaml")
    if yaml_spec is None:
        raise CapabilityUnavailable(
            "PyYAML is required to load sandbox configuration",
            "Run `pip install pyyaml`",
        )
    yaml = importlib.import_module("yaml")
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Could not parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping at the top level")
    return data


def _section(data: dict[str, Any], key: str, path: Path) -> dict[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"`{key}' in {path} must be a mapping")
    return section


def _resolve_path(root: Path, value: Any) -> Optional[Path]:
    if value is None:
        return None
    candidate = Path(str(value)).expanduser()
    if not candidate.is_absolute():
        candidate = root / candidate
    return candidate


def _omnibus_flag(value: Any) -> Union[bool, str, None]:
    if value is None or isinstance(value, bool):
        return value
    return str(value)


def load_config(
    config_path: Union[str, Path, None] = None,
    project_root: Union[str, Path, None] = None,
) -> SandboxConfig:
    """Read a sandbox config file.

    Relative paths resolve against ``project_root``, which defaults to the
    directory holding the config file. A missing file yields the defaults.
    """
    if config_path is None:
        root = Path(project_root) if project_root else Path.cwd()
        path = root / DEFAULT_CONFIG_FILE
    else:
        path = Path(config_path)
        root = Path(project_root) if project_root else path.parent
    root = root.resolve()

    if not path.exists():
        return SandboxConfig(project_root=root)

    data = _load_yaml(path)
    provisioner = _section(data, "provisioner", path)
    suite = _section(data, "suite", path)

    run_list = suite.get("run_list") or []
    if not isinstance(run_list, list):
        raise ConfigurationError(f"`suite.run_list' in {path} must be a list")
    attributes = suite.get("attributes") or {}
    if not isinstance(attributes, dict):
        raise ConfigurationError(f"`suite.attributes' in {path} must be a mapping")

    sources = SandboxSources(
        **{
            field_name: _resolve_path(root, suite.get(key))
            for field_name, key in _SOURCE_KEYS.items()
        }
    )
    return SandboxConfig(
        project_root=root,
        provisioner=ProvisionerConfig(
            require_chef_omnibus=_omnibus_flag(provisioner.get("require_chef_omnibus")),
            chef_omnibus_url=provisioner.get("chef_omnibus_url") or DEFAULT_OMNIBUS_URL,
            sudo=bool(provisioner.get("sudo", True)),
            root_path=str(provisioner.get("root_path") or "/tmp/kitchen"),
        ),
        suite=SuiteConfig(
            name=str(suite.get("name") or "default"),
            run_list=[str(item) for item in run_list],
            attributes=attributes,
            sources=sources,
        ),
    )
