"""API document composition: metadata tables, composer, and publisher."""

from roost.openapi.composer import compose
from roost.openapi.document import CompositeDocument
from roost.openapi.metadata import (
    ApiInfo,
    Contact,
    DocumentMeta,
    ExternalDocs,
    License,
    ServerInfo,
    TagDescriptor,
    TagGroup,
)
from roost.openapi.publisher import DocumentPublisher, Snapshot

__all__ = [
    "ApiInfo",
    "CompositeDocument",
    "Contact",
    "DocumentMeta",
    "DocumentPublisher",
    "ExternalDocs",
    "License",
    "ServerInfo",
    "Snapshot",
    "TagDescriptor",
    "TagGroup",
    "compose",
]
