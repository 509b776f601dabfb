"""Registry-specific exceptions.

Every error carries a human-readable message plus a context dict with the
offending name or path, so the command surface can print something actionable.
"""

from pathlib import Path


class RegistryError(Exception):
    """Base exception for registry operations."""

    def __init__(self, message: str, context: dict | None = None):
        """Initialize with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dict with additional context (file paths, names, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ManifestUnreadableError(RegistryError):
    """Manifest file is missing or cannot be read."""


class ManifestMalformedError(RegistryError):
    """Manifest content does not match the expected structure."""


class ComponentNotFoundError(RegistryError):
    """Requested (or transitively required) component is not in the catalog."""

    def __init__(self, name: str, available: dict[str, str]):
        """Initialize with the missing name and the catalog listing.

        Args:
            name: The missing component name
            available: Every catalog component name mapped to its description
        """
        self.name = name
        self.available = dict(available)
        super().__init__(
            f'Component "{name}" not found in registry',
            context={"name": name, "available": list(self.available)},
        )


class InstallFailedError(RegistryError):
    """Copying a single registry file into the target tree failed."""

    def __init__(self, source: Path, destination: Path, reason: str):
        self.source = source
        self.destination = destination
        super().__init__(
            f"Failed to copy {source} -> {destination}: {reason}",
            context={"source": str(source), "destination": str(destination)},
        )
