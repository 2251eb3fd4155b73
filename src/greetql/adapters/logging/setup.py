"""Centralized lib_log_rich initialization for every entry point.

Contents:
    * :class:`LoggingConfigModel` - Pydantic view over the ``[lib_log_rich]`` section.
    * :func:`init_logging` - Idempotent runtime initialization.

System Role:
    ``serve``, ``repl`` and the one-shot commands all call :func:`init_logging`
    through the root command. Standard ``logging`` records (ours, uvicorn's and
    strawberry's) are bridged into the runtime so there is one log stream.
"""

from __future__ import annotations

import logging
from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from greetql import __init__conf__

#: Library loggers that stay at WARNING unless configured otherwise.
QUIET_LOGGERS: tuple[str, ...] = ("uvicorn.access", "httpx", "httpcore")


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` config section.

    Extra fields pass through to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(service="greetql-dev").service
        'greetql-dev'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    ``service`` defaults to the package name when not configured.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def _quiet_library_loggers() -> None:
    for name in QUIET_LOGGERS:
        library_logger = logging.getLogger(name)
        if library_logger.level == logging.NOTSET:
            library_logger.setLevel(logging.WARNING)


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime once per process.

    Loads ``.env`` so ``LOG_*`` variables apply, builds the runtime from
    ``config`` and attaches the standard logging bridge. Later calls return
    immediately.

    Example:
        >>> config = Config({"lib_log_rich": {"environment": "test"}}, {})
        >>> init_logging(config)  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()
    _quiet_library_loggers()


__all__ = [
    "QUIET_LOGGERS",
    "LoggingConfigModel",
    "init_logging",
]
