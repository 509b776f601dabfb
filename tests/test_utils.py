"""Tests for registry path rebasing."""

from pathlib import Path
from pathlib import PurePosixPath

from tblx_registry import rebase_registry_path
from tblx_registry.utils import strip_registry_prefix


def test_strip_prefix():
    """Test that the leading registry segment is removed."""
    assert strip_registry_prefix("registry/ui/Table.tsx", "registry") == PurePosixPath("ui/Table.tsx")


def test_strip_prefix_only_leading_segment():
    """Test that a later 'registry' segment is kept."""
    assert strip_registry_prefix("registry/ui/registry/x.ts", "registry") == PurePosixPath("ui/registry/x.ts")


def test_strip_prefix_not_a_partial_match():
    """Test that 'registryx/' is not treated as the prefix."""
    assert strip_registry_prefix("registryx/a.ts", "registry") == PurePosixPath("registryx/a.ts")


def test_path_without_prefix_unchanged():
    """Test paths outside the registry root are returned as-is."""
    assert strip_registry_prefix("styles/base.css", "registry") == PurePosixPath("styles/base.css")


def test_rebase_under_target(tmp_path: Path):
    """Test rebasing a manifest path into the target directory."""
    target = tmp_path / "src" / "components" / "tblx"

    destination = rebase_registry_path("registry/ui/inputs/SelectFilter.tsx", "registry", target)

    assert destination == target / "ui" / "inputs" / "SelectFilter.tsx"


def test_rebase_absolute_path_stays_under_target(tmp_path: Path):
    """Test that a leading "/" cannot move the destination out of the target."""
    target = tmp_path / "out"

    assert rebase_registry_path("/abs/x.ts", "registry", target) == target / "abs" / "x.ts"
    assert rebase_registry_path("/registry/ui/a.ts", "registry", target) == target / "ui" / "a.ts"
