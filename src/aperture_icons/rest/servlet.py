"""An ASGI entry point that forwards every request to a REST application.

The hosting server (uvicorn, a test client) calls the forwarder once per
request. The forwarder hands the untouched ``scope``, ``receive`` and
``send`` to an adapter, and the adapter hands them to the application.
Errors raised by the application reach the hosting server unchanged.
"""

import logging
import threading
from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

Scope = MutableMapping[str, Any]
Message = MutableMapping[str, Any]
Receive = Callable[[], Awaitable[Message]]
Send = Callable[[Message], Awaitable[None]]
ASGIApp = Callable[[Scope, Receive, Send], Awaitable[None]]


@dataclass(frozen=True)
class ForwarderContext:
    """Hosting context the adapter is bound to.

    Attributes:
        mount_path: Path prefix the forwarder is served under
    """

    mount_path: str = ""


class ForwardingAdapter:
    """Bridges the hosting context to the next application in the chain."""

    def __init__(self, context: ForwarderContext) -> None:
        self._context = context
        self._next: ASGIApp | None = None

    @property
    def context(self) -> ForwarderContext:
        return self._context

    @property
    def next(self) -> ASGIApp | None:
        return self._next

    def set_next(self, app: ASGIApp) -> None:
        self._next = app

    async def service(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Pass a request to the next application.

        Raises:
            RuntimeError: If no next application is set
        """
        if self._next is None:
            raise RuntimeError("ForwardingAdapter has no next application. Call set_next() first.")
        await self._next(scope, receive, send)


class RestForwarder:
    """ASGI application forwarding all requests to a wrapped application.

    The wrapped application is supplied at construction and never replaced.
    The adapter is built exactly once, either eagerly through ``init()`` or
    lazily on the first request.

    Example:
        ```python
        forwarder = RestForwarder(create_app())
        forwarder.init()
        uvicorn.run(forwarder)
        ```
    """

    def __init__(self, app: ASGIApp, context: ForwarderContext | None = None) -> None:
        """Initialize the forwarder.

        Args:
            app: The application requests are forwarded to (required).
            context: Hosting context for the adapter. Defaults to an empty context.
        """
        self._app = app
        self._context = context or ForwarderContext()
        self._adapter: ForwardingAdapter | None = None
        self._init_lock = threading.Lock()

    @property
    def app(self) -> ASGIApp:
        """Get the wrapped application."""
        return self._app

    @property
    def adapter(self) -> ForwardingAdapter | None:
        """Get the adapter, or None before initialization."""
        return self._adapter

    def init(self, context: ForwarderContext | None = None) -> ForwardingAdapter:
        """Build the adapter and link it to the application, once.

        Later calls return the existing adapter and ignore ``context``.

        Args:
            context: Hosting context. Defaults to the one given at construction.

        Returns:
            The forwarder's adapter
        """
        if self._adapter is None:
            with self._init_lock:
                if self._adapter is None:
                    adapter = ForwardingAdapter(context or self._context)
                    adapter.set_next(self._app)
                    self._adapter = adapter
                    logger.debug("Forwarding adapter created for %r", self._app)
        return self._adapter

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        adapter = self._adapter or self.init()
        await adapter.service(scope, receive, send)
