"""Server adapter - listener lifecycle around uvicorn.

Contents:
    * :mod:`.lifecycle` - Start, signal handling and bounded drain
    * :mod:`.listener` - Factory wiring the HTTP app into a lifecycle
"""

from __future__ import annotations

from .lifecycle import LifecycleState, ServiceLifecycle
from .listener import create_listener

__all__ = [
    "LifecycleState",
    "ServiceLifecycle",
    "create_listener",
]
