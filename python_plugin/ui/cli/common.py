"""
Shared helpers for CLI commands — config, host, failure output.
"""

from __future__ import annotations

import json
import sys
from typing import NoReturn

import click
from pydantic import BaseModel

from python_plugin.adapters.base import Host
from python_plugin.core.config.loader import ConfigError, PluginConfig, load_config


def fail(message: str) -> NoReturn:
    click.secho(f"❌ {message}", fg="red", err=True)
    sys.exit(1)


def get_config(ctx: click.Context) -> PluginConfig:
    """Load the plugin config once per invocation."""
    config = ctx.obj.get("config")
    if config is None:
        try:
            config = load_config(ctx.obj.get("config_path"))
        except ConfigError as e:
            fail(str(e))
        ctx.obj["config"] = config
    return config


def get_host(ctx: click.Context) -> Host:
    """The host to run against: injected via ``obj["host"]``, else this machine."""
    host = ctx.obj.get("host")
    if host is None:
        from python_plugin.adapters.local import LocalHost

        host = LocalHost(get_config(ctx))
        ctx.obj["host"] = host
    return host


def echo_json(model: BaseModel | dict) -> None:
    data = model.model_dump(mode="json") if isinstance(model, BaseModel) else model
    click.echo(json.dumps(data, indent=2))
