"""Listener lifecycle: bind, serve in the background, drain on a trigger.

States move strictly ``STOPPED -> STARTING -> LISTENING -> DRAINING -> STOPPED``.
The ASGI app runs on a uvicorn server inside one daemon thread so the
foreground thread stays free for the interactive loop or for waiting on a
signal.

Contents:
    * :class:`LifecycleState` - The four lifecycle states.
    * :class:`ServiceLifecycle` - Start/stop driver with signal handling.
"""

from __future__ import annotations

import logging
import signal
import socket
import threading
import time
from collections.abc import Callable
from enum import Enum
from types import FrameType, TracebackType
from typing import Any

import uvicorn

from greetql.domain.errors import BindError, ShutdownRequested, ShutdownTimeoutError

logger = logging.getLogger(__name__)

#: Seconds allowed for uvicorn to report ``started`` after the thread launches.
STARTUP_TIMEOUT = 10.0

#: Seconds granted after a forced exit before the thread is given up on.
FORCE_EXIT_GRACE = 1.0

_SHUTDOWN_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)

_SignalHandler = Callable[[int, FrameType | None], Any] | int | None


class LifecycleState(str, Enum):
    """Listener lifecycle states."""

    STOPPED = "stopped"
    STARTING = "starting"
    LISTENING = "listening"
    DRAINING = "draining"


def _bind_socket(host: str, port: int) -> socket.socket:
    """Bind a listening socket or raise :class:`BindError`."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        raise BindError(host, port, exc.strerror or str(exc)) from exc
    return sock


def _connect_host(host: str) -> str:
    if host in ("", "0.0.0.0"):  # noqa: S104
        return "127.0.0.1"
    if host == "::":
        return "::1"
    return host


class ServiceLifecycle:
    """Run an ASGI app on a background listener with a bounded drain.

    Args:
        app: ASGI application to serve.
        host: Interface to bind.
        port: Port to bind; ``0`` picks a free port (see :attr:`port`).
        drain_timeout: Seconds in-flight requests get after a stop trigger.

    Example:
        >>> lifecycle = ServiceLifecycle(app=None, host="127.0.0.1", port=0)
        >>> lifecycle.state
        <LifecycleState.STOPPED: 'stopped'>
        >>> lifecycle.stop()  # no-op while stopped
    """

    def __init__(self, app: Any, *, host: str = "0.0.0.0", port: int = 8080, drain_timeout: float = 5.0) -> None:  # noqa: S104
        self._app = app
        self._host = host
        self._port = port
        self._drain_timeout = drain_timeout
        self._state = LifecycleState.STOPPED
        self._state_lock = threading.Lock()
        self._stop_requested = threading.Event()
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None
        self._socket: socket.socket | None = None
        self._previous_handlers: dict[signal.Signals, _SignalHandler] = {}

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def drain_timeout(self) -> float:
        return self._drain_timeout

    @property
    def port(self) -> int:
        """Actually bound port once started, configured port otherwise."""
        if self._socket is not None:
            return int(self._socket.getsockname()[1])
        return self._port

    @property
    def base_url(self) -> str:
        """URL a local client uses to reach the listener."""
        host = _connect_host(self._host)
        if ":" in host:
            host = f"[{host}]"
        return f"http://{host}:{self.port}/"

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested.is_set()

    def _transition(self, expected: tuple[LifecycleState, ...], target: LifecycleState) -> None:
        with self._state_lock:
            if self._state not in expected:
                raise RuntimeError(f"cannot move from {self._state.value} to {target.value}")
            logger.debug("Lifecycle %s -> %s", self._state.value, target.value)
            self._state = target

    def start(self) -> None:
        """Bind the socket and start serving in the background.

        Raises:
            BindError: If the address cannot be bound or the listener dies
                during startup. The lifecycle is back in ``STOPPED``.
            RuntimeError: If already started.
        """
        self._transition((LifecycleState.STOPPED,), LifecycleState.STARTING)
        self._stop_requested.clear()
        try:
            self._socket = _bind_socket(self._host, self._port)
        except BindError:
            self._state = LifecycleState.STOPPED
            raise

        config = uvicorn.Config(self._app, log_config=None, lifespan="off", access_log=False)
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(
            target=self._server.run,
            kwargs={"sockets": [self._socket]},
            name="greetql-listener",
            daemon=True,
        )
        self._thread.start()
        self._await_startup()
        self._transition((LifecycleState.STARTING,), LifecycleState.LISTENING)
        logger.info("Listening", extra={"url": self.base_url, "port": self.port})

    def _await_startup(self) -> None:
        assert self._server is not None and self._thread is not None
        deadline = time.monotonic() + STARTUP_TIMEOUT
        while not self._server.started:
            if not self._thread.is_alive() or time.monotonic() > deadline:
                self._server.should_exit = True
                self._release_socket()
                self._state = LifecycleState.STOPPED
                raise BindError(self._host, self.port, "listener did not start")
            time.sleep(0.01)

    def install_signal_handlers(self, *, interrupt: bool = False) -> None:
        """Route SIGINT and SIGTERM to :meth:`request_stop`.

        Args:
            interrupt: Also raise :class:`ShutdownRequested` in the main thread so
                a blocking ``input()`` returns immediately.

        Handlers are only installed from the main thread and are restored by
        the first signal or by :meth:`stop`.
        """
        if threading.current_thread() is not threading.main_thread():
            logger.debug("Not on the main thread, signal handlers left alone")
            return

        def _handle(signum: int, frame: FrameType | None) -> None:
            name = signal.Signals(signum).name
            logger.info("Received %s, shutting down", name)
            self._restore_signal_handlers()
            self.request_stop()
            if interrupt:
                raise ShutdownRequested(name)

        for sig in _SHUTDOWN_SIGNALS:
            self._previous_handlers[sig] = signal.signal(sig, _handle)

    def _restore_signal_handlers(self) -> None:
        while self._previous_handlers:
            sig, handler = self._previous_handlers.popitem()
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)

    def request_stop(self) -> None:
        """Trigger shutdown without a signal, e.g. on the CLI ``exit`` command."""
        self._stop_requested.set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until a stop trigger arrives or the listener dies.

        Returns:
            True when a trigger arrived, False on timeout.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while not self._stop_requested.is_set():
            if self._thread is not None and not self._thread.is_alive():
                logger.warning("Listener exited on its own")
                return True
            remaining = 0.5 if deadline is None else min(0.5, deadline - time.monotonic())
            if remaining <= 0:
                return False
            self._stop_requested.wait(remaining)
        return True

    def stop(self) -> None:
        """Drain in-flight requests and stop the listener.

        The listener stops accepting at once. Requests still running after
        ``drain_timeout`` are abandoned and :class:`ShutdownTimeoutError` is
        raised once the lifecycle is ``STOPPED``. Stopping a lifecycle that never
        started does nothing.
        """
        self._restore_signal_handlers()
        if self._state is LifecycleState.STOPPED:
            return
        self._transition((LifecycleState.LISTENING, LifecycleState.STARTING), LifecycleState.DRAINING)
        self._stop_requested.set()
        server, thread = self._server, self._thread
        assert server is not None and thread is not None

        in_flight = len(server.server_state.tasks)
        logger.info("Draining", extra={"in_flight": in_flight, "timeout": self._drain_timeout})
        server.should_exit = True
        thread.join(self._drain_timeout)

        abandoned = 0
        if thread.is_alive():
            abandoned = len(server.server_state.tasks)
            server.force_exit = True
            thread.join(FORCE_EXIT_GRACE)
        stuck = thread.is_alive()

        self._release_socket()
        self._server = None
        self._thread = None
        self._state = LifecycleState.STOPPED

        if abandoned:
            raise ShutdownTimeoutError(
                f"{abandoned} in-flight request(s) abandoned after {self._drain_timeout:g}s drain timeout"
            )
        if stuck:
            raise ShutdownTimeoutError(
                f"listener thread still running {FORCE_EXIT_GRACE:g}s after the {self._drain_timeout:g}s drain timeout"
            )
        logger.info("Stopped")

    def _release_socket(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    def __enter__(self) -> ServiceLifecycle:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()


__all__ = [
    "FORCE_EXIT_GRACE",
    "STARTUP_TIMEOUT",
    "LifecycleState",
    "ServiceLifecycle",
]
