"""In-memory listener that records lifecycle calls instead of binding a port."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config.settings import ServerSettings
from ..graphql.gateway import QueryGateway


@dataclass
class ListenerSpy:
    """Listener double for CLI stories.

    Attributes:
        gateway: Gateway the listener would serve.
        settings: Server settings it was created with.
        calls: Lifecycle method names in call order.
        signal_interrupt: ``interrupt`` flag of the last ``install_signal_handlers``.

    Example:
        >>> spy = ListenerSpy(gateway=None, settings=ServerSettings())  # type: ignore[arg-type]
        >>> spy.start(); spy.request_stop(); spy.stop()
        >>> spy.calls
        ['start', 'request_stop', 'stop']
    """

    gateway: QueryGateway
    settings: ServerSettings
    calls: list[str] = field(default_factory=list)
    signal_interrupt: bool | None = None
    stop_requested: bool = False

    @property
    def base_url(self) -> str:
        return f"http://127.0.0.1:{self.settings.port}/"

    def start(self) -> None:
        self.calls.append("start")

    def install_signal_handlers(self, *, interrupt: bool = False) -> None:
        self.calls.append("install_signal_handlers")
        self.signal_interrupt = interrupt

    def request_stop(self) -> None:
        self.calls.append("request_stop")
        self.stop_requested = True

    def wait(self, timeout: float | None = None) -> bool:
        self.calls.append("wait")
        return True

    def stop(self) -> None:
        self.calls.append("stop")


class ListenerRecorder:
    """``CreateListener`` implementation remembering every spy it created."""

    def __init__(self) -> None:
        self.created: list[ListenerSpy] = []

    def __call__(self, gateway: QueryGateway, settings: ServerSettings) -> ListenerSpy:
        spy = ListenerSpy(gateway=gateway, settings=settings)
        self.created.append(spy)
        return spy


__all__ = [
    "ListenerRecorder",
    "ListenerSpy",
]
