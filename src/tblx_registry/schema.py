"""Registry manifest schema - Parse registry.json into a Catalog.

The loader only checks shape. It never checks that referenced files exist or
that dependency names point at real components; those problems surface later,
during resolution or installation.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError

from .exceptions import ManifestMalformedError
from .exceptions import ManifestUnreadableError

logger = logging.getLogger(__name__)


class ComponentDescriptor(BaseModel):
    """One installable component from the manifest."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    files: list[str] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    styles: list[str] = Field(default_factory=list)


class Catalog(BaseModel):
    """
    Parsed registry manifest.

    Manifest format (JSON):
    {
      "name": "tblx-ui",
      "version": "0.1.0",
      "baseStyles": ["registry/styles/base.css"],
      "components": {
        "Table": {
          "description": "Data table",
          "files": ["registry/ui/Table.tsx"],
          "dependencies": ["Loading"],
          "styles": ["registry/styles/table.css"]
        }
      }
    }
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    version: str = ""
    components: dict[str, ComponentDescriptor] = Field(default_factory=dict)
    base_styles: list[str] = Field(default_factory=list, alias="baseStyles")

    def component_names(self) -> list[str]:
        """All component names, in manifest order."""
        return list(self.components)

    def descriptions(self) -> dict[str, str]:
        """Component name to description, in manifest order."""
        return {name: component.description for name, component in self.components.items()}

    def get(self, name: str) -> ComponentDescriptor | None:
        return self.components.get(name)

    @classmethod
    def from_dict(cls, data: Any) -> "Catalog":
        """
        Build a catalog from already-decoded manifest data.

        Every component record takes its ``name`` from its key.

        Raises:
            ValidationError: If data does not match the manifest shape
        """
        if isinstance(data, dict) and isinstance(data.get("components"), dict):
            components = {}
            for key, record in data["components"].items():
                if isinstance(record, dict):
                    record = {**record, "name": key}
                components[key] = record
            data = {**data, "components": components}
        return cls.model_validate(data)


def load_catalog(manifest_path: Path) -> Catalog:
    """
    Load the registry catalog from a manifest file.

    Args:
        manifest_path: Path to registry.json

    Returns:
        Catalog instance

    Raises:
        ManifestUnreadableError: If the manifest is missing or unreadable
        ManifestMalformedError: If the content is not JSON or has the wrong shape
    """
    try:
        raw = manifest_path.read_bytes()
    except OSError as e:
        raise ManifestUnreadableError(
            f"Cannot read registry manifest {manifest_path}: {e.strerror or e}",
            context={"manifest_path": str(manifest_path)},
        ) from e

    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ManifestMalformedError(
            f"Registry manifest {manifest_path} is not valid UTF-8 JSON: {e}",
            context={"manifest_path": str(manifest_path)},
        ) from e

    if not isinstance(data, dict):
        raise ManifestMalformedError(
            f"Registry manifest {manifest_path} must contain a JSON object",
            context={"manifest_path": str(manifest_path)},
        )

    try:
        catalog = Catalog.from_dict(data)
    except ValidationError as e:
        raise ManifestMalformedError(
            f"Registry manifest {manifest_path} has an invalid structure:\n{e}",
            context={"manifest_path": str(manifest_path)},
        ) from e

    logger.debug(f"Loaded {len(catalog.components)} components from {manifest_path}")
    return catalog
