"""
CLI commands for resolving and locating a Python install.

Thin wrappers over ``python_plugin.core.services.download`` and ``.locate``.
"""

from __future__ import annotations

from pathlib import Path

import click

from python_plugin.core.errors import PluginError
from python_plugin.ui.cli.common import echo_json, fail, get_config, get_host


@click.command()
@click.argument("version")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def download(ctx: click.Context, version: str, as_json: bool) -> None:
    """Resolve the pre-built archive for VERSION on this platform."""
    from python_plugin.core.services.download import download_prebuilt

    try:
        result = download_prebuilt(version, get_host(ctx), get_config(ctx))
    except PluginError as e:
        fail(str(e))

    if as_json:
        echo_json(result)
        return

    click.secho(f"📦 Python {version}", fg="cyan", bold=True)
    click.echo(f"   Download: {result.download_url}")
    if result.checksum_url:
        click.echo(f"   Checksum: {result.checksum_url}")
    else:
        click.secho("   Checksum: none published", fg="yellow")
    click.echo(f"   Archive prefix: {result.archive_prefix}")


@click.command()
@click.argument("tool_dir", type=click.Path(file_okay=False, path_type=Path))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def locate(ctx: click.Context, tool_dir: Path, as_json: bool) -> None:
    """Show the interpreter and global-package dirs of an install in TOOL_DIR."""
    from python_plugin.core.services.locate import locate_bins

    try:
        result = locate_bins(tool_dir, get_host(ctx))
    except PluginError as e:
        fail(str(e))

    if as_json:
        echo_json(result)
        return

    click.secho(f"🐍 {result.bin_path}", fg="cyan", bold=True)
    click.echo("   Global packages:")
    for i, d in enumerate(result.globals_lookup_dirs, 1):
        click.echo(f"     {i}. {d}")
