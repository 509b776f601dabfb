"""Component installation - Copy resolved registry files into a project tree.

Installation is a blind overwrite: no diffing, no backups, no record of what
was installed before. A failed copy aborts the run and leaves every file
copied so far in place.
"""

import logging
import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .config import RegistryLayout
from .exceptions import InstallFailedError
from .protocols import InstallReporterProtocol
from .schema import ComponentDescriptor
from .utils import rebase_registry_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstalledFile:
    """A registry file and where it was copied to."""

    source: Path
    destination: Path


def copy_registry_file(relative_path: str, layout: RegistryLayout, target_dir: Path) -> InstalledFile:
    """
    Copy one manifest path from the registry into target_dir.

    Missing parent directories are created. An existing destination is overwritten.

    Args:
        relative_path: Path as written in the manifest
        layout: Registry layout (source root and prefix)
        target_dir: Consumer directory to install into

    Returns:
        The (source, destination) pair that was copied

    Raises:
        InstallFailedError: If the source is missing or the destination is not writable
    """
    source = layout.source_path(relative_path)
    destination = rebase_registry_path(relative_path, layout.prefix, target_dir)

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)
    except OSError as e:
        raise InstallFailedError(source, destination, e.strerror or str(e)) from e

    logger.debug(f"Copied {source} -> {destination}")
    return InstalledFile(source=source, destination=destination)


def install_components(
    components: Sequence[ComponentDescriptor],
    layout: RegistryLayout,
    target_dir: Path,
    base_assets: Sequence[str] | None = None,
    reporter: InstallReporterProtocol | None = None,
) -> list[InstalledFile]:
    """
    Install resolved components (and optionally base assets) into target_dir.

    Process:
    1. Copy every base asset, in catalog order (if given)
    2. For each component, in resolution order, copy its files then its styles

    Args:
        components: Resolution result, dependencies first
        layout: Registry layout shared with the loader
        target_dir: Consumer directory to install into (app policy)
        base_assets: Optional shared asset paths to copy first
        reporter: Optional progress reporter

    Returns:
        Every copied file, in copy order

    Raises:
        InstallFailedError: On the first copy that fails. Earlier copies are kept.

    Example:
        >>> layout = RegistryLayout(manifest_path=Path("registry.json"))
        >>> catalog = layout.load_catalog()
        >>> installed = install_components(
        ...     resolve_components(catalog, "Table"),
        ...     layout,
        ...     Path("src/components/tblx"),
        ...     base_assets=catalog.base_styles,
        ... )
    """
    installed: list[InstalledFile] = []

    def _copy(relative_path: str) -> None:
        result = copy_registry_file(relative_path, layout, target_dir)
        installed.append(result)
        if reporter is not None:
            reporter.file_copied(result)

    if base_assets:
        logger.info(f"Installing {len(base_assets)} base asset(s) to {target_dir}")
        if reporter is not None:
            reporter.base_assets_started(len(base_assets))
        for asset in base_assets:
            _copy(asset)

    for component in components:
        logger.info(f"Installing component: {component.name}")
        if reporter is not None:
            reporter.component_started(component)
        for file in component.files:
            _copy(file)
        for style in component.styles:
            _copy(style)

    logger.info(f"Installed {len(installed)} file(s) to {target_dir}")
    return installed
