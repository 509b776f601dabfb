"""Protocols for installation progress reporting.

The installer does not print. Apps inject a reporter to turn progress events
into output (terminal lines, test recordings, nothing at all).
"""

from typing import TYPE_CHECKING
from typing import Protocol

if TYPE_CHECKING:
    from .installer import InstalledFile
    from .schema import ComponentDescriptor


class InstallReporterProtocol(Protocol):
    """Protocol for receiving installer progress events."""

    def base_assets_started(self, count: int) -> None:
        """Called once before base assets are copied."""
        ...

    def component_started(self, component: "ComponentDescriptor") -> None:
        """Called before the files of a component are copied."""
        ...

    def file_copied(self, installed: "InstalledFile") -> None:
        """Called after each successful copy."""
        ...
