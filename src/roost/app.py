"""Roost application class.

Mutable during setup (route groups, named handlers, hooks).
Frozen at runtime when app.run() or __call__() is first invoked.

Lifecycle::

    UNINITIALIZED -> MOUNTING -> COMPOSING -> READY

MOUNTING fills the mount registry, COMPOSING builds the API document.
Any authoring error raised on the way aborts startup and leaves the app
UNINITIALIZED; a half-mounted app never serves.
"""

import inspect
import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from roost._internal.asgi import Receive, Scope, Send
from roost._internal.types import Handler
from roost.config import AppConfig
from roost.errors import ConfigurationError
from roost.openapi.composer import compose
from roost.openapi.document import CompositeDocument
from roost.openapi.metadata import ApiInfo, DocumentMeta, TagDescriptor, TagGroup
from roost.openapi.publisher import DocumentPublisher
from roost.routing.registry import MountRegistry
from roost.routing.route import RouteGroup, RouteMatch
from roost.server.handler import handle_request

logger = logging.getLogger("roost.app")


class AppState(Enum):
    """Process-wide lifecycle of the registry, composer, and publisher."""

    UNINITIALIZED = "uninitialized"
    MOUNTING = "mounting"
    COMPOSING = "composing"
    READY = "ready"


@dataclass(frozen=True, slots=True)
class _Runtime:
    """Everything a request needs, published as one reference."""

    registry: MountRegistry
    publisher: DocumentPublisher


class App:
    """The roost application.

    Usage::

        app = App(meta=DocumentMeta(info=ApiInfo(title="Example", version="1.0")))
        app.mount(users.routes())
        app.mount(bots.routes(), prefix="/bots")

    Thread safety:
        Setup is single-threaded (module import time). The freeze
        transition uses a Lock + double-check so exactly one thread
        builds the runtime, which is then read-only.
    """

    __slots__ = (
        "_freeze_lock",
        "_handlers",
        "_meta",
        "_pending_groups",
        "_runtime",
        "_shutdown_hooks",
        "_startup_hooks",
        "_state",
        "_tag_groups",
        "_tags",
        "config",
    )

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        meta: DocumentMeta | None = None,
        tags: Iterable[TagDescriptor] = (),
        tag_groups: Iterable[TagGroup] = (),
        handlers: Mapping[str, Handler] | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self._meta: DocumentMeta = meta or DocumentMeta(info=ApiInfo(title="API", version="0.1.0"))
        self._tags: tuple[TagDescriptor, ...] = tuple(tags)
        self._tag_groups: tuple[TagGroup, ...] = tuple(tag_groups)
        self._handlers: dict[str, Handler] = dict(handlers or {})
        self._pending_groups: list[tuple[str | None, RouteGroup]] = []
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._state: AppState = AppState.UNINITIALIZED
        self._freeze_lock: threading.Lock = threading.Lock()

        # Set by _freeze()
        self._runtime: _Runtime | None = None

    # -- Registration --

    def mount(self, group: RouteGroup, prefix: str | None = None) -> None:
        """Queue *group* for mounting at *prefix* (default: ``group.prefix``).

        Groups are mounted in the order they are queued.
        """
        self._check_not_frozen()
        self._pending_groups.append((prefix, group))

    def bind(self, name: str, handler: Handler) -> None:
        """Bind a callable to a named handler reference."""
        self._check_not_frozen()
        self._handlers[name] = handler

    def handler(self, name: str) -> Callable[[Handler], Handler]:
        """Bind a named handler reference via decorator::

            @app.handler("users.fetch_self")
            async def fetch_self(request): ...
        """

        def decorator(func: Handler) -> Handler:
            self.bind(name, func)
            return func

        return decorator

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a hook run once at ASGI lifespan startup."""
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a hook run once at ASGI lifespan shutdown."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Runtime access --

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def registry(self) -> MountRegistry:
        return self._ready().registry

    @property
    def publisher(self) -> DocumentPublisher:
        return self._ready().publisher

    @property
    def document(self) -> CompositeDocument:
        """The currently published API document."""
        return self._ready().publisher.document

    @property
    def handlers(self) -> Mapping[str, Handler]:
        return self._handlers

    def dispatch(self, method: str, path: str) -> RouteMatch:
        """Resolve *method* and *path* against the mounted routes."""
        return self._ready().registry.dispatch(method, path)

    def compose_document(self) -> CompositeDocument:
        """Compose a fresh document from the mounted groups."""
        registry = self._ready().registry
        return compose(self._meta, self._tags, self._tag_groups, registry.groups)

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Freeze the app and serve it with pounce."""
        self._ensure_frozen()

        from pounce.config import ServerConfig
        from pounce.server import Server

        config = ServerConfig(
            host=host or self.config.host,
            port=port or self.config.port,
            workers=self.config.workers,
            reload=self.config.debug,
            log_level=self.config.log_level,
        )
        Server(config, self).run()

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        runtime = self._ready()
        await handle_request(
            scope,
            receive,
            send,
            registry=runtime.registry,
            publisher=runtime.publisher,
            handlers=self._handlers,
            config=self.config,
        )

    async def _handle_lifespan(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup so mounting errors fail the server
        start instead of the first request.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                    for hook in self._startup_hooks:
                        result = hook()
                        if inspect.isawaitable(result):
                            await result
                except Exception as exc:
                    logger.exception("Startup failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                for hook in self._shutdown_hooks:
                    result = hook()
                    if inspect.isawaitable(result):
                        await result
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Checks --

    def check(self) -> None:
        """Validate the mounted surface, print a report, exit 1 on errors."""
        import sys

        from roost.checks import check_surface

        result = check_surface(self)
        sys.stdout.write(result.summary() + "\n")
        if not result.ok:
            raise SystemExit(1)

    # -- Internal --

    def _ready(self) -> _Runtime:
        self._ensure_frozen()
        assert self._runtime is not None
        return self._runtime

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._runtime is not None:
            return
        with self._freeze_lock:
            if self._runtime is not None:
                return
            try:
                self._runtime = self._freeze()
            except Exception:
                self._state = AppState.UNINITIALIZED
                raise
            self._state = AppState.READY

    def _freeze(self) -> _Runtime:
        """Mount every queued group, then compose the document.

        MUST only be called while holding _freeze_lock.
        """
        self._state = AppState.MOUNTING
        registry = MountRegistry()
        for prefix, group in self._pending_groups:
            registry.register(group.prefix if prefix is None else prefix, group)
        registry.compile()

        self._state = AppState.COMPOSING
        meta, tags, tag_groups = self._meta, self._tags, self._tag_groups
        mounted = registry.groups

        def source() -> CompositeDocument:
            return compose(meta, tags, tag_groups, mounted)

        publisher = DocumentPublisher(source, cached=self.config.cache_document)
        # Compose eagerly so document errors abort startup too
        document = publisher.snapshot().document
        logger.info(
            "%s ready: %d routes in %d groups, %d documented operations",
            meta.info.title,
            len(registry.routes),
            len(mounted),
            document.operation_count,
        )
        return _Runtime(registry=registry, publisher=publisher)

    def _check_not_frozen(self) -> None:
        if self._runtime is not None:
            msg = "Cannot modify the app after it has started serving."
            raise ConfigurationError(msg)
