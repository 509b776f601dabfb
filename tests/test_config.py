"""Tests for RegistryLayout configuration."""

from pathlib import Path

from tblx_registry import RegistryLayout
from tblx_registry.config import DEFAULT_MANIFEST_NAME
from tblx_registry.config import REGISTRY_PREFIX


def test_source_root_is_manifest_directory(tmp_path: Path):
    """Test that manifest paths resolve relative to registry.json's directory."""
    layout = RegistryLayout(manifest_path=tmp_path / "registry.json")

    assert layout.prefix == REGISTRY_PREFIX
    assert layout.source_root == tmp_path
    assert layout.source_path("registry/ui/Table.tsx") == tmp_path / "registry" / "ui" / "Table.tsx"


def test_from_option_default(tmp_path: Path, monkeypatch):
    """Test fallback to registry.json in the current directory."""
    monkeypatch.chdir(tmp_path)

    layout = RegistryLayout.from_option(None)

    assert layout.manifest_path == Path.cwd() / DEFAULT_MANIFEST_NAME


def test_from_option_directory(tmp_path: Path):
    """Test that a directory option points at its registry.json."""
    layout = RegistryLayout.from_option(tmp_path)

    assert layout.manifest_path == tmp_path / DEFAULT_MANIFEST_NAME


def test_from_option_file(tmp_path: Path):
    """Test that a file option is used as-is, even if it doesn't exist yet."""
    layout = RegistryLayout.from_option(str(tmp_path / "custom.json"))

    assert layout.manifest_path == tmp_path / "custom.json"


def test_source_path_absolute_stays_under_root(tmp_path: Path):
    """Test that an absolute manifest path is read from inside the registry."""
    layout = RegistryLayout(manifest_path=tmp_path / "registry.json")

    assert layout.source_path("/registry/ui/a.ts") == tmp_path / "registry" / "ui" / "a.ts"
