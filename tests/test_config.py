"""Tests for loading sandbox configuration."""

from pathlib import Path

import pytest

from chef_sandbox.config import DEFAULT_OMNIBUS_URL, load_config
from chef_sandbox.models.errors import ConfigurationError

KITCHEN_YML = """\
provisioner:
  require_chef_omnibus: 11.8
  sudo: false
  root_path: /opt/kitchen
suite:
  name: default-ubuntu
  run_list:
    - recipe[web]
  attributes:
    web:
      port: 8080
  data_bags_path: test/integration/default/data_bags
  encrypted_data_bag_secret_key_path: /etc/chef/secret
"""


def test_load_config_resolves_paths_against_project_root(tmp_path: Path) -> None:
    (tmp_path / ".kitchen.yml").write_text(KITCHEN_YML)

    config = load_config(project_root=tmp_path)

    assert config.project_root == tmp_path.resolve()
    assert config.provisioner.require_chef_omnibus == "11.8"
    assert config.provisioner.sudo is False
    assert config.provisioner.root_path == "/opt/kitchen"
    assert config.provisioner.chef_omnibus_url == DEFAULT_OMNIBUS_URL
    sources = config.suite.sources
    assert sources.data_bags == tmp_path.resolve() / "test/integration/default/data_bags"
    assert sources.secret == Path("/etc/chef/secret")
    assert sources.roles is None

    metadata = config.suite.run_metadata()
    assert metadata.name == "default-ubuntu"
    assert metadata.to_dna() == {"web": {"port": 8080}, "run_list": ["recipe[web]"]}


def test_missing_config_file_yields_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "absent.yml")

    assert config.project_root == tmp_path.resolve()
    assert config.provisioner.require_chef_omnibus is None
    assert config.suite.name == "default"
    assert config.suite.run_list == []


@pytest.mark.parametrize(
    "content",
    [
        "provisioner: [1, 2]\n",
        "- just\n- a list\n",
        "suite:\n  run_list: recipe[web]\n",
        "suite: {name: [unclosed\n",
    ],
)
def test_malformed_config_is_a_configuration_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "kitchen.yml"
    path.write_text(content)

    with pytest.raises(ConfigurationError):
        load_config(path)
