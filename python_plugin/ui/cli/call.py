"""
CLI command for raw JSON-in/JSON-out operation calls.

This is how a host that shells out to the plugin talks to it.
"""

from __future__ import annotations

import json

import click

from python_plugin.core.errors import PluginError
from python_plugin.ui.cli.common import echo_json, fail, get_config, get_host


@click.command()
@click.argument("operation", required=False)
@click.argument("payload", required=False)
@click.option("--list", "list_ops", is_flag=True, help="List operation names and exit.")
@click.pass_context
def call(ctx: click.Context, operation: str | None, payload: str | None, list_ops: bool) -> None:
    """Run OPERATION with a JSON PAYLOAD ('-' reads stdin)."""
    from python_plugin.core.plugin import call_operation, list_operations

    if list_ops:
        for name in list_operations():
            click.echo(name)
        return

    if not operation:
        fail("Missing OPERATION. Use --list to see the choices.")

    if payload == "-":
        payload = click.get_text_stream("stdin").read()

    try:
        data = json.loads(payload) if payload else None
    except json.JSONDecodeError as e:
        fail(f"Invalid JSON payload: {e}")

    try:
        result = call_operation(operation, data, get_host(ctx), get_config(ctx))
    except PluginError as e:
        fail(str(e))

    echo_json(result)
