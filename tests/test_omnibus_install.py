"""Tests for the remote install and init commands."""

from chef_sandbox.config import ProvisionerConfig
from chef_sandbox.providers.install import init_command, install_command


def test_install_command_not_requested() -> None:
    assert install_command(ProvisionerConfig()) is None
    assert install_command(ProvisionerConfig(require_chef_omnibus=False)) is None


def test_install_command_for_explicit_version() -> None:
    command = install_command(
        ProvisionerConfig(require_chef_omnibus="11.8.0", chef_omnibus_url="http://example.com/install.sh")
    )

    assert command is not None
    assert command.startswith("sh -c '")
    assert 'case "11.8.0" in' in command
    assert "do_download http://example.com/install.sh /tmp/install.sh" in command
    assert "sudo -E sh /tmp/install.sh -v 11.8.0" in command


def test_install_command_latest_without_sudo() -> None:
    command = install_command(ProvisionerConfig(require_chef_omnibus="latest", sudo=False))

    assert command is not None
    assert "Installing Chef Omnibus (latest)" in command
    assert "https://www.opscode.com/chef/install.sh" in command
    assert "\n  sh /tmp/install.sh \n" in command
    assert "sudo" not in command


def test_install_command_true_installs_only_when_missing() -> None:
    command = install_command(ProvisionerConfig(require_chef_omnibus=True))

    assert command is not None
    assert 'case "true" in' in command
    assert '[ ! -d "/opt/chef" ]' in command


def test_init_command_clears_previous_run() -> None:
    assert init_command(ProvisionerConfig(root_path="/tmp/kitchen/")) == (
        "sudo -E rm -rf /tmp/kitchen/data_bags /tmp/kitchen/roles"
        " /tmp/kitchen/environments /tmp/kitchen/cookbooks /tmp/kitchen/data"
    )
    assert init_command(ProvisionerConfig(sudo=False)).startswith("rm -rf /tmp/kitchen/")
