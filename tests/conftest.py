"""Shared fixtures: build throwaway registries on disk."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

RegistryFactory = Callable[..., Path]


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def make_registry(tmp_path: Path) -> RegistryFactory:
    """Write registry.json plus every referenced file, return the manifest path.

    Files get their own manifest path as content, so copies are easy to check.
    Paths listed in ``missing`` are left out of the source tree.
    """

    def _make(
        components: dict,
        base_styles: list[str] | None = None,
        missing: tuple[str, ...] = (),
        **header: str,
    ) -> Path:
        root = tmp_path / "registry-src"
        root.mkdir(exist_ok=True)

        paths = list(base_styles or [])
        for record in components.values():
            paths.extend(record.get("files", []))
            paths.extend(record.get("styles", []))

        for relative in paths:
            if relative in missing:
                continue
            source = root / relative
            source.parent.mkdir(parents=True, exist_ok=True)
            source.write_text(f"// {relative}\n")

        manifest = {**header, "components": components, "baseStyles": base_styles or []}
        manifest_path = root / "registry.json"
        manifest_path.write_text(json.dumps(manifest, indent=2))
        return manifest_path

    return _make


@pytest.fixture
def chain_registry(make_registry: RegistryFactory) -> Path:
    """A depends on B and C, B depends on C."""
    return make_registry(
        {
            "A": {"description": "Component A", "files": ["registry/ui/a.ts"], "dependencies": ["B", "C"]},
            "B": {
                "description": "Component B",
                "files": ["registry/ui/b.ts"],
                "dependencies": ["C"],
                "styles": ["registry/styles/b.css"],
            },
            "C": {"description": "Component C", "files": ["registry/ui/c.ts"]},
        },
        base_styles=["registry/styles/base.css", "registry/styles/layout.css"],
        name="tblx-ui",
        version="0.1.0",
    )
