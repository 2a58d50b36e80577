"""
Plugin dispatcher — the boundary a host calls through.

Each lifecycle event the host raises maps to one operation. Operations
take a JSON payload, validate it into a model, run the decision
function against the host, and return a JSON-ready dict. Errors are
raised, not encoded: the host reports them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from python_plugin import __version__
from python_plugin.adapters.base import Host
from python_plugin.core.config.loader import PluginConfig
from python_plugin.core.errors import PluginError
from python_plugin.core.models.locate import LocateBinsInput
from python_plugin.core.models.process import GlobalPackageInput
from python_plugin.core.models.release import DownloadPrebuiltInput
from python_plugin.core.models.tool import (
    DetectVersionOutput,
    PluginType,
    ToolMetadataOutput,
)
from python_plugin.core.services import download, locate, shims, versions

logger = logging.getLogger(__name__)

NAME = "Python"


def register_tool() -> ToolMetadataOutput:
    """Identify the tool this plugin manages."""
    return ToolMetadataOutput(
        name=NAME,
        type=PluginType.LANGUAGE,
        plugin_version=__version__,
    )


@dataclass(frozen=True)
class Operation:
    """One host-callable operation."""

    name: str
    handler: Callable[[Any, Host, PluginConfig], BaseModel]
    input_model: type[BaseModel] | None = None


OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        Operation(
            "register_tool",
            lambda _, host, config: register_tool(),
        ),
        Operation(
            "download_prebuilt",
            lambda params, host, config: download.download_prebuilt(
                params.context.version, host, config
            ),
            DownloadPrebuiltInput,
        ),
        Operation(
            "locate_bins",
            lambda params, host, config: locate.locate_bins(Path(params.context.tool_dir), host),
            LocateBinsInput,
        ),
        Operation(
            "load_versions",
            lambda _, host, config: versions.load_versions(host, config),
        ),
        Operation(
            "detect_version_files",
            lambda _, host, config: DetectVersionOutput(files=versions.detect_version_files()),
        ),
        Operation(
            "create_shims",
            lambda _, host, config: shims.create_shims(),
        ),
        Operation(
            "install_global",
            lambda params, host, config: shims.install_global(params.dependency, host),
            GlobalPackageInput,
        ),
        Operation(
            "uninstall_global",
            lambda params, host, config: shims.uninstall_global(params.dependency, host),
            GlobalPackageInput,
        ),
    )
}


def list_operations() -> list[str]:
    return list(OPERATIONS.keys())


def call_operation(
    name: str,
    payload: dict[str, Any] | None,
    host: Host,
    config: PluginConfig | None = None,
) -> dict[str, Any]:
    """Run operation ``name`` with a JSON payload.

    Raises:
        PluginError: Unknown operation, invalid payload, or any failure
            the operation itself reports.
    """
    op = OPERATIONS.get(name)
    if op is None:
        raise PluginError(
            f"Unknown operation '{name}'. Valid: {', '.join(sorted(OPERATIONS))}"
        )

    params = None
    if op.input_model is not None:
        try:
            params = op.input_model.model_validate(payload or {})
        except ValidationError as e:
            raise PluginError(f"Invalid input for {name}: {e}") from e

    logger.debug("Calling %s on %r", name, host)
    result = op.handler(params, host, config or PluginConfig())
    return result.model_dump(mode="json")
