"""Application ports - interfaces for external adapters."""

from warrant.application.ports.permission_graph_source import PermissionGraphSource
from warrant.application.ports.resource_source import ResourceSource

__all__ = [
    "PermissionGraphSource",
    "ResourceSource",
]
