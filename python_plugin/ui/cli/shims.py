"""
CLI commands for shims and user-wide pip packages.

Thin wrappers over ``python_plugin.core.services.shims``.
"""

from __future__ import annotations

import sys

import click

from python_plugin.core.errors import PluginError
from python_plugin.ui.cli.common import echo_json, fail, get_host


@click.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--render", is_flag=True, help="Print each launcher script.")
@click.pass_context
def shims(ctx: click.Context, as_json: bool, render: bool) -> None:
    """List the shims a Python install provides."""
    from python_plugin.core.services.shims import create_shims, render_shim

    result = create_shims()

    if as_json:
        echo_json(result)
        return

    host_os = get_host(ctx).environment().os if render else None
    for name, shim in result.global_shims.items():
        args = " ".join(a for a in (shim.before_args, "…", shim.after_args) if a)
        click.secho(f"  {name}", fg="yellow", nl=False)
        click.echo(f"  → {shim.bin_path or 'python'} {args}")
        if host_os is not None:
            click.echo(render_shim(name, shim, host_os))


def _relay(result, verb: str, package: str) -> None:
    if result.stdout:
        click.echo(result.stdout, nl=False)
    if result.stderr:
        click.echo(result.stderr, nl=False, err=True)

    if result.ok:
        click.secho(f"✅ {verb} {package}", fg="green")
    else:
        click.secho(f"❌ pip exited with code {result.exit_code}", fg="red", err=True)
    sys.exit(result.exit_code)


@click.command("install-global")
@click.argument("package")
@click.pass_context
def install_global(ctx: click.Context, package: str) -> None:
    """pip install --user PACKAGE."""
    from python_plugin.core.services.shims import install_global as _install

    try:
        result = _install(package, get_host(ctx))
    except PluginError as e:
        fail(str(e))
    _relay(result, "Installed", package)


@click.command("uninstall-global")
@click.argument("package")
@click.pass_context
def uninstall_global(ctx: click.Context, package: str) -> None:
    """pip uninstall --yes PACKAGE."""
    from python_plugin.core.services.shims import uninstall_global as _uninstall

    try:
        result = _uninstall(package, get_host(ctx))
    except PluginError as e:
        fail(str(e))
    _relay(result, "Uninstalled", package)
