"""Remote install and init command generation."""

from chef_sandbox.providers.install.omnibus import init_command, install_command

__all__ = ["init_command", "install_command"]
