"""Public package surface exposing the catalog, gateway wiring and metadata.

Routes imports through the architectural layers:
- Domain exports: catalog and resolver
- Composition exports: wired adapter services
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import build_gateway, get_config

# Domain exports
from .domain import Catalog, GreetingRecord, ResultShape, default_catalog, resolve_greeting

__all__ = [
    "Catalog",
    "GreetingRecord",
    "ResultShape",
    "build_gateway",
    "default_catalog",
    "get_config",
    "print_info",
    "resolve_greeting",
]
