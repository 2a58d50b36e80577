"""Hosts — the capability providers plugin operations run against.

Public re-exports for convenient access.
"""

from python_plugin.adapters.base import Host
from python_plugin.adapters.local import LocalHost
from python_plugin.adapters.mock import MockHost

__all__ = [
    "Host",
    "LocalHost",
    "MockHost",
]
