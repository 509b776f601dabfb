"""tblx-registry - Resolve and install tblx-ui components from a registry manifest.

Public API: load a catalog, resolve a component's dependency closure, copy the
files into a project. The CLI in ``tblx_registry.cli`` is a thin layer on top.
"""

from .config import RegistryLayout
from .exceptions import ComponentNotFoundError
from .exceptions import InstallFailedError
from .exceptions import ManifestMalformedError
from .exceptions import ManifestUnreadableError
from .exceptions import RegistryError
from .installer import InstalledFile
from .installer import copy_registry_file
from .installer import install_components
from .protocols import InstallReporterProtocol
from .resolver import ComponentResolver
from .resolver import resolve_components
from .schema import Catalog
from .schema import ComponentDescriptor
from .schema import load_catalog
from .utils import rebase_registry_path

__all__ = [
    # Manifest
    "Catalog",
    "ComponentDescriptor",
    "load_catalog",
    "RegistryLayout",
    # Resolution
    "ComponentResolver",
    "resolve_components",
    # Installation
    "install_components",
    "copy_registry_file",
    "InstalledFile",
    "InstallReporterProtocol",
    # Exceptions
    "RegistryError",
    "ManifestUnreadableError",
    "ManifestMalformedError",
    "ComponentNotFoundError",
    "InstallFailedError",
    # Utilities
    "rebase_registry_path",
]

__version__ = "0.1.0"
