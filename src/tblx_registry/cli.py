"""Command-line interface: ``tblx-ui add`` and ``tblx-ui list``."""

import logging
from pathlib import Path

import click

from . import __version__
from .config import DEFAULT_TARGET_DIR
from .config import RegistryLayout
from .error_boundary import cli_error_boundary
from .installer import InstalledFile
from .installer import install_components
from .resolver import resolve_components
from .schema import ComponentDescriptor

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


class EchoReporter:
    """Reports installer progress as terminal lines."""

    def base_assets_started(self, count: int) -> None:
        click.echo("📄 Adding base styles...")

    def component_started(self, component: ComponentDescriptor) -> None:
        click.echo(f"\n📦 Adding {component.name}...")

    def file_copied(self, installed: InstalledFile) -> None:
        click.echo(f"  ✓ Created {installed.destination}")


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option(
    "--registry",
    envvar="TBLX_REGISTRY",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to registry.json (or its directory). Defaults to ./registry.json",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, registry: Path | None, verbose: bool) -> None:
    """CLI to add tblx-ui components to your project."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = RegistryLayout.from_option(registry)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("component")
@click.option(
    "--dir",
    "-d",
    "target_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_TARGET_DIR,
    show_default=True,
    help="Target directory",
)
@click.option(
    "--with-base-styles",
    is_flag=True,
    default=False,
    help="Include base CSS variables and layout",
)
@click.pass_obj
@cli_error_boundary
def add(layout: RegistryLayout, component: str, target_dir: Path, with_base_styles: bool) -> None:
    """Add a component (and its dependencies) to your project.

    Examples:

        # Add the table and everything it needs
        tblx-ui add Table

        # Add into a custom folder, with the shared base styles
        tblx-ui add Table --dir app/ui --with-base-styles
    """
    click.echo("\n🚀 tblx-ui - Adding components\n")

    catalog = layout.load_catalog()

    # Resolve before copying anything so an unknown name writes nothing
    components = resolve_components(catalog, component)

    install_components(
        components,
        layout,
        target_dir,
        base_assets=catalog.base_styles if with_base_styles else None,
        reporter=EchoReporter(),
    )

    click.echo("\n✅ Done!")
    click.echo("\n📋 Next steps:")
    click.echo("  1. Make sure 'tblx' is installed: npm install tblx")
    click.echo(f"  2. Import the component from '{target_dir}'")
    click.echo("  3. Import the CSS styles in your app")


@cli.command(name="list")
@click.pass_obj
@cli_error_boundary
def list_components(layout: RegistryLayout) -> None:
    """List all available components."""
    catalog = layout.load_catalog()

    click.echo(f"\n📦 Available {catalog.name or 'tblx-ui'} components:\n")

    for name, component in catalog.components.items():
        click.echo(f"  {name}")
        click.echo(f"    {component.description}")
        if component.dependencies:
            click.echo(f"    Dependencies: {', '.join(component.dependencies)}")
        click.echo()


if __name__ == "__main__":
    cli()
