"""Path utilities shared by the installer and the command surface."""

from pathlib import Path
from pathlib import PurePosixPath


def manifest_relative_path(relative_path: str) -> PurePosixPath:
    """Parse a manifest path, dropping any leading "/" so it stays relative.

    Examples:
        >>> manifest_relative_path("/registry/ui/Table.tsx")
        PurePosixPath('registry/ui/Table.tsx')
    """
    return PurePosixPath(relative_path.lstrip("/"))


def strip_registry_prefix(relative_path: str, prefix: str) -> PurePosixPath:
    """Remove the leading registry-root segment from a manifest path.

    Paths that do not start with the prefix are returned unchanged.

    Examples:
        >>> strip_registry_prefix("registry/ui/Table.tsx", "registry")
        PurePosixPath('ui/Table.tsx')
        >>> strip_registry_prefix("styles/base.css", "registry")
        PurePosixPath('styles/base.css')
    """
    path = manifest_relative_path(relative_path)
    prefix_parts = manifest_relative_path(prefix).parts
    if prefix_parts and path.parts[: len(prefix_parts)] == prefix_parts:
        return PurePosixPath(*path.parts[len(prefix_parts) :])
    return path


def rebase_registry_path(relative_path: str, prefix: str, target_dir: Path) -> Path:
    """Map a manifest path onto the consumer's target directory.

    The result always lies under target_dir, even for absolute manifest paths.

    Args:
        relative_path: Path as written in the manifest (e.g. "registry/ui/Table.tsx")
        prefix: Registry-root segment to strip (e.g. "registry")
        target_dir: Consumer directory to install into

    Returns:
        Destination path (e.g. target_dir / "ui/Table.tsx")
    """
    return target_dir.joinpath(*strip_registry_prefix(relative_path, prefix).parts)
