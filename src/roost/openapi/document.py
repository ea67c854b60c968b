"""The composed API document.

A ``CompositeDocument`` is a derived projection of the mounted route
groups plus static metadata. It is never edited after composition.
"""

import hashlib
import json as json_module
from dataclasses import dataclass, field
from typing import Any

from roost.openapi.metadata import ApiInfo, ExternalDocs, ServerInfo, TagDescriptor, TagGroup

OPENAPI_VERSION = "3.0.3"


@dataclass(frozen=True, slots=True)
class CompositeDocument:
    """An OpenAPI document built by ``compose()``.

    ``paths`` maps a qualified path to ``{method: operation object}``
    with lower-case methods. ``tag_groups`` is written out as the
    ``x-tagGroups`` extension.
    """

    info: ApiInfo
    servers: tuple[ServerInfo, ...]
    tags: tuple[TagDescriptor, ...]
    tag_groups: tuple[TagGroup, ...]
    paths: dict[str, dict[str, dict[str, Any]]]
    components: dict[str, Any] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)
    external_docs: ExternalDocs | None = None
    openapi: str = OPENAPI_VERSION

    @property
    def operation_count(self) -> int:
        return sum(len(methods) for methods in self.paths.values())

    def operations(self) -> list[tuple[str, str]]:
        """``(METHOD, path)`` pairs in document order."""
        return [
            (method.upper(), path)
            for path, methods in self.paths.items()
            for method in methods
        ]

    def to_dict(self) -> dict[str, Any]:
        doc: dict[str, Any] = {
            "openapi": self.openapi,
            "info": self.info.to_dict(),
            "servers": [server.to_dict() for server in self.servers],
        }
        if self.external_docs is not None:
            doc["externalDocs"] = self.external_docs.to_dict()
        doc["tags"] = [tag.to_dict() for tag in self.tags]
        doc.update(self.extensions)
        # The composed taxonomy always wins over a same-named extension
        if self.tag_groups:
            doc["x-tagGroups"] = [group.to_dict() for group in self.tag_groups]
        doc["paths"] = self.paths
        if self.components:
            doc["components"] = self.components
        return doc

    def to_json(self, *, indent: int | None = None) -> bytes:
        """Serialise to UTF-8 JSON. Identical documents give identical bytes."""
        separators = (",", ":") if indent is None else (",", ": ")
        return json_module.dumps(
            self.to_dict(), ensure_ascii=False, indent=indent, separators=separators
        ).encode("utf-8")

    @property
    def etag(self) -> str:
        """Strong entity tag for the compact JSON form."""
        return etag_for(self.to_json())


def etag_for(body: bytes) -> str:
    """Strong entity tag (quoted SHA-256 hex digest) for *body*."""
    return '"' + hashlib.sha256(body).hexdigest() + '"'
