"""
Python plugin — CLI entrypoint.

Usage:
    python -m python_plugin.main --help
    python-plugin versions --latest
    python-plugin download 3.11.4
    python-plugin locate ~/.proto/tools/python/3.11.4
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from python_plugin import __version__
from python_plugin.core.observability.logging_config import (
    LOG_FILE_ENV,
    LOG_FILE_LEVEL_ENV,
    resolve_level,
    setup_logging,
)
from python_plugin.ui.cli.common import echo_json, fail, get_config, get_host


@click.group()
@click.version_option(version=__version__, prog_name="python-plugin")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to python-plugin.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Python plugin — resolve, install-map and shim Python toolchains."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(LOG_FILE_ENV),
        log_file_level=os.environ.get(LOG_FILE_LEVEL_ENV),
    )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def metadata(as_json: bool) -> None:
    """Show the tool this plugin manages."""
    from python_plugin.core.plugin import register_tool

    result = register_tool()
    if as_json:
        echo_json(result)
        return

    click.secho(f"🐍 {result.name}", fg="cyan", bold=True, nl=False)
    click.echo(f" ({result.type}) — plugin {result.plugin_version}")


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--latest", "latest_only", is_flag=True, help="Print only the latest stable version.")
@click.pass_context
def versions(ctx: click.Context, as_json: bool, latest_only: bool) -> None:
    """List installable Python versions from the CPython tags."""
    from python_plugin.core.errors import PluginError
    from python_plugin.core.services.versions import load_versions

    try:
        result = load_versions(get_host(ctx), get_config(ctx))
    except PluginError as e:
        fail(str(e))

    if latest_only:
        if result.latest is None:
            fail("No stable version found.")
        click.echo(result.latest)
        return

    if as_json:
        echo_json(result)
        return

    for version in result.versions:
        click.echo(version)
    if not ctx.obj.get("quiet") and result.latest:
        click.secho(f"\n{len(result.versions)} versions, latest {result.latest}", fg="cyan")


@cli.command("version-files")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def version_files(as_json: bool) -> None:
    """Show the files that pin a project's Python version."""
    from python_plugin.core.models.tool import DetectVersionOutput
    from python_plugin.core.services.versions import detect_version_files

    files = detect_version_files()
    if as_json:
        echo_json(DetectVersionOutput(files=files))
        return
    for name in files:
        click.echo(name)


@cli.group()
def config() -> None:
    """Plugin configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate python-plugin.yml and show the effective settings."""
    cfg = get_config(ctx)

    if as_json:
        echo_json(cfg)
        return

    click.secho("✅ Configuration is valid", fg="green", bold=True)
    for key, value in cfg.model_dump().items():
        click.echo(f"   {key}: {value}")


# ── Command registration ────────────────────────────────────────

from python_plugin.ui.cli.call import call  # noqa: E402
from python_plugin.ui.cli.shims import install_global, shims, uninstall_global  # noqa: E402
from python_plugin.ui.cli.toolchain import download, locate  # noqa: E402

cli.add_command(download)
cli.add_command(locate)
cli.add_command(shims)
cli.add_command(install_global)
cli.add_command(uninstall_global)
cli.add_command(call)


if __name__ == "__main__":
    cli()
