"""Tests for copying optional sources into a sandbox."""

from pathlib import Path

import pytest

from chef_sandbox.models.sandbox import OptionalSource, SandboxSources
from chef_sandbox.providers.sandbox.sources import SourceMaterializer


def test_directory_source_is_copied_recursively(tmp_path: Path, write_tree) -> None:
    origin = write_tree(
        tmp_path / "data_bags",
        {"users/alice.json": "{}", ".hidden/x.json": "{}"},
    )
    sandbox = tmp_path / "sandbox"
    sandbox.mkdir()

    target = SourceMaterializer().materialize(
        OptionalSource("data_bags", origin, "data_bags"), sandbox
    )

    assert target == sandbox / "data_bags"
    assert (sandbox / "data_bags/users/alice.json").read_text() == "{}"
    assert (sandbox / "data_bags/.hidden/x.json").exists()


@pytest.mark.parametrize("origin", [None, Path("/nonexistent/roles")])
def test_absent_source_creates_nothing(tmp_path: Path, origin) -> None:
    sandbox = tmp_path / "sandbox"
    sandbox.mkdir()

    result = SourceMaterializer().materialize(OptionalSource("roles", origin, "roles"), sandbox)

    assert result is None
    assert list(sandbox.iterdir()) == []


def test_secret_is_copied_as_a_single_file(tmp_path: Path) -> None:
    secret = tmp_path / "secret.key"
    secret.write_text("s3cr3t")
    sandbox = tmp_path / "sandbox"
    sandbox.mkdir()
    source = SandboxSources(secret=secret).optional_sources()[-1]

    SourceMaterializer().materialize(source, sandbox)

    assert (sandbox / "encrypted_data_bag_secret").read_text() == "s3cr3t"


def test_copy_errors_propagate(tmp_path: Path) -> None:
    not_a_dir = tmp_path / "nodes"
    not_a_dir.write_text("oops")
    sandbox = tmp_path / "sandbox"
    sandbox.mkdir()

    with pytest.raises(OSError):
        SourceMaterializer().materialize(OptionalSource("nodes", not_a_dir, "nodes"), sandbox)


def test_optional_sources_cover_every_kind() -> None:
    kinds = [source.kind for source in SandboxSources().optional_sources()]

    assert kinds == ["data_bags", "roles", "nodes", "environments", "data", "secret"]
