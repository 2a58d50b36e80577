"""
Domain models — Pydantic types for the plugin's inputs and outputs.

All models are re-exported here for convenient access:

    from python_plugin.core.models import HostEnvironment, ReleaseIndex, ShimConfig
"""

from python_plugin.core.models.environment import HostArch, HostEnvironment, HostOS
from python_plugin.core.models.locate import (
    LocateBinsInput,
    LocateBinsOutput,
    LocateContext,
    PythonManifest,
)
from python_plugin.core.models.process import (
    ExecCommandInput,
    ExecCommandOutput,
    GlobalPackageInput,
    InstallGlobalOutput,
    UninstallGlobalOutput,
)
from python_plugin.core.models.release import (
    DownloadContext,
    DownloadPrebuiltInput,
    DownloadPrebuiltOutput,
    ReleaseEntry,
    ReleaseIndex,
)
from python_plugin.core.models.shim import CreateShimsOutput, ShimConfig
from python_plugin.core.models.tool import (
    DetectVersionOutput,
    LoadVersionsOutput,
    PluginType,
    ToolMetadataOutput,
)

__all__ = [
    # shim.py
    "CreateShimsOutput",
    # tool.py
    "DetectVersionOutput",
    # release.py
    "DownloadContext",
    "DownloadPrebuiltInput",
    "DownloadPrebuiltOutput",
    # process.py
    "ExecCommandInput",
    "ExecCommandOutput",
    "GlobalPackageInput",
    # environment.py
    "HostArch",
    "HostEnvironment",
    "HostOS",
    "InstallGlobalOutput",
    "LoadVersionsOutput",
    # locate.py
    "LocateBinsInput",
    "LocateBinsOutput",
    "LocateContext",
    "PluginType",
    "PythonManifest",
    "ReleaseEntry",
    "ReleaseIndex",
    "ShimConfig",
    "ToolMetadataOutput",
    "UninstallGlobalOutput",
]
