"""Registry layout configuration.

Manifest paths look like ``registry/ui/Table.tsx``: they are relative to the
directory holding registry.json and start with the registry-root segment.
The loader and the installer share one RegistryLayout so they agree on both.
"""

from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict

from .schema import Catalog
from .schema import load_catalog
from .utils import manifest_relative_path

DEFAULT_MANIFEST_NAME = "registry.json"
DEFAULT_TARGET_DIR = "src/components/tblx"
REGISTRY_PREFIX = "registry"


class RegistryLayout(BaseModel):
    """Where the registry lives on disk and how its paths are rooted."""

    model_config = ConfigDict(frozen=True)

    manifest_path: Path
    prefix: str = REGISTRY_PREFIX

    @property
    def source_root(self) -> Path:
        """Directory that manifest paths are relative to."""
        return self.manifest_path.parent

    def source_path(self, relative_path: str) -> Path:
        return self.source_root.joinpath(*manifest_relative_path(relative_path).parts)

    def load_catalog(self) -> Catalog:
        return load_catalog(self.manifest_path)

    @classmethod
    def from_option(cls, registry: str | Path | None) -> "RegistryLayout":
        """Build a layout from the ``--registry`` option.

        Accepts a manifest file or a directory containing registry.json.
        Falls back to registry.json in the current directory.
        """
        if registry is None:
            return cls(manifest_path=Path.cwd() / DEFAULT_MANIFEST_NAME)

        path = Path(registry).expanduser()
        if path.is_dir():
            path = path / DEFAULT_MANIFEST_NAME
        return cls(manifest_path=path)
