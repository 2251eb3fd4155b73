"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Configuration loading, typed settings and display
    * :mod:`.graphql` - strawberry schema, query gateway and FastAPI app
    * :mod:`.server` - uvicorn listener lifecycle
    * :mod:`.client` - In-process and HTTP loopback greeting clients
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory doubles for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
