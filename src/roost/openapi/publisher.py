"""Document publisher: serves the composed document at a fixed path.

The publisher holds one immutable ``Snapshot`` (document, encoded body,
entity tag). Readers grab the current reference once and never see a
half-built snapshot; ``refresh`` and ``publish`` build the replacement
first and swap the reference under a single writer lock.

With ``cached=False`` every request recomposes from the source.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass

from kida import Environment

from roost.http.request import Request
from roost.http.response import JSON_CONTENT_TYPE, Response
from roost.openapi.document import CompositeDocument, etag_for

logger = logging.getLogger("roost.openapi")

DocumentSource = Callable[[], CompositeDocument]

REDOC_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{{ title }}</title>
    <style>body { margin: 0; padding: 0; }</style>
  </head>
  <body>
    <redoc spec-url="{{ spec_url }}"></redoc>
    <script src="{{ redoc_js_url }}"></script>
  </body>
</html>
"""


@dataclass(frozen=True, slots=True)
class Snapshot:
    """A composed document together with its wire form."""

    document: CompositeDocument
    body: bytes
    etag: str

    @classmethod
    def of(cls, document: CompositeDocument) -> Snapshot:
        body = document.to_json()
        return cls(document=document, body=body, etag=etag_for(body))


def _etag_matches(header: str | None, etag: str) -> bool:
    if not header:
        return False
    candidates = {value.strip().removeprefix("W/") for value in header.split(",")}
    return "*" in candidates or etag in candidates


class DocumentPublisher:
    """Exposes the most recently composed document.

    Usage::

        publisher = DocumentPublisher(lambda: compose(meta, tags, groups, mounted))
        response = publisher.serve(request)
    """

    __slots__ = ("_cached", "_kida_env", "_lock", "_snapshot", "_source")

    def __init__(self, source: DocumentSource, *, cached: bool = True) -> None:
        self._source = source
        self._cached = cached
        self._lock = threading.Lock()
        self._snapshot: Snapshot | None = None
        self._kida_env = Environment(autoescape=True)

    @property
    def cached(self) -> bool:
        return self._cached

    @property
    def document(self) -> CompositeDocument:
        return self.snapshot().document

    def snapshot(self) -> Snapshot:
        """The current snapshot, composing on first use when cached."""
        if not self._cached:
            return Snapshot.of(self._source())
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot
        with self._lock:
            if self._snapshot is None:
                self._snapshot = Snapshot.of(self._source())
            return self._snapshot

    def refresh(self) -> Snapshot:
        """Recompose from the source and swap the held snapshot."""
        with self._lock:
            snapshot = Snapshot.of(self._source())
            self._snapshot = snapshot
        logger.info("Republished API document (etag %s)", snapshot.etag)
        return snapshot

    def publish(self, document: CompositeDocument) -> Snapshot:
        """Swap in an already composed *document*."""
        snapshot = Snapshot.of(document)
        with self._lock:
            self._snapshot = snapshot
        return snapshot

    def serve(self, request: Request) -> Response:
        """JSON response for the document, honouring ``If-None-Match``."""
        snapshot = self.snapshot()
        if _etag_matches(request.headers.get("if-none-match"), snapshot.etag):
            return Response(body=b"", status=304).with_header("ETag", snapshot.etag)
        return (
            Response(body=snapshot.body, content_type=JSON_CONTENT_TYPE)
            .with_header("ETag", snapshot.etag)
            .with_header("Cache-Control", "no-cache")
        )

    def render_docs(self, spec_url: str, redoc_js_url: str) -> Response:
        """HTML page rendering the document with ReDoc.

        ReDoc understands the ``x-tagGroups`` and ``x-logo`` extensions.
        """
        title = self.snapshot().document.info.title
        html = self._kida_env.from_string(REDOC_TEMPLATE).render(
            {"title": title, "spec_url": spec_url, "redoc_js_url": redoc_js_url}
        )
        return Response(body=html, content_type="text/html; charset=utf-8")
