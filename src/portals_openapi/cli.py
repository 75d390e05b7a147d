"""CLI entry point for portals-openapi."""

import sys
from pathlib import Path

import click

from portals_openapi.build import build
from portals_openapi.config import load_config
from portals_openapi.errors import BuildError
from portals_openapi.report import close_report, open_report


@click.group()
def main():
    """Portals OpenAPI — build an OpenAPI document from grouped portal API descriptions."""
    pass


@main.command(name="build")
@click.argument("root", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--source", default=None, help="Source document, relative to ROOT (default: portals.json).")
@click.option("--dist", default=None, type=click.Path(file_okay=False, path_type=Path), help="Output directory (default: ROOT/dist).")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML build configuration.")
@click.option("--prefix", default=None, help="Endpoint prefix (default: /api/2.0).")
@click.option("--no-format", is_flag=True, help="Write the document without running the formatter.")
def build_cmd(root: Path, source: str | None, dist: Path | None, config_path: Path | None, prefix: str | None, no_format: bool):
    """Convert ROOT/portals.json into dist/portals.json."""
    try:
        config = load_config(
            config_path,
            source=source,
            prefix=prefix,
            formatter=[] if no_format else None,
        )
    except BuildError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)

    dist = dist or root / "dist"
    dist.mkdir(parents=True, exist_ok=True)

    report_path = dist / config.log_name
    handler = open_report(report_path)
    try:
        click.echo(f"Building {root / config.source}...")
        result = build(root, dist, config)
    except BuildError as e:
        click.echo(f"Error: {e}", err=True)
        click.echo(f"See {report_path} for details.", err=True)
        sys.exit(e.exit_code)
    finally:
        close_report(handler)

    click.echo(f"Added {result.accepted} of {result.total} operations ({result.skipped} skipped).")
    if result.duplicates:
        click.echo(f"{result.duplicates} operations overwrote an earlier one with the same endpoint and method.")
    click.echo(f"Saved to {result.target}")
    click.echo("end", err=True)
