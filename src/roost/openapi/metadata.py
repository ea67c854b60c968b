"""Static document configuration: info, servers, tags, tag groups.

Plain frozen records loaded once at startup. ``to_dict()`` emits the
OpenAPI field names and leaves out anything unset.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# Written by the composer, never copied from metadata
RESERVED_EXTENSIONS = frozenset({"x-tagGroups"})


def _compact(**fields: Any) -> dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}


@dataclass(frozen=True, slots=True)
class Contact:
    name: str | None = None
    url: str | None = None
    email: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(name=self.name, url=self.url, email=self.email)


@dataclass(frozen=True, slots=True)
class License:
    name: str
    url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(name=self.name, url=self.url)


@dataclass(frozen=True, slots=True)
class ServerInfo:
    """One base URL the API is reachable at."""

    url: str
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(url=self.url, description=self.description)


@dataclass(frozen=True, slots=True)
class ExternalDocs:
    url: str
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(description=self.description, url=self.url)


@dataclass(frozen=True, slots=True)
class ApiInfo:
    title: str
    version: str
    description: str | None = None
    terms_of_service: str | None = None
    contact: Contact | None = None
    license: License | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            title=self.title,
            description=self.description,
            termsOfService=self.terms_of_service,
            contact=self.contact.to_dict() if self.contact else None,
            license=self.license.to_dict() if self.license else None,
            version=self.version,
        )


@dataclass(frozen=True, slots=True)
class TagDescriptor:
    """A documentation tag. Tags are global and unique by name."""

    name: str
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(name=self.name, description=self.description)


@dataclass(frozen=True, slots=True)
class TagGroup:
    """A named, ordered set of tags: the upper level of the taxonomy."""

    name: str
    tags: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "tags": list(self.tags)}


@dataclass(frozen=True, slots=True)
class DocumentMeta:
    """Global document metadata that does not depend on mounted routes.

    ``extensions`` holds ``x-*`` vendor keys (e.g. ``x-logo``) copied
    verbatim onto the document.
    """

    info: ApiInfo
    servers: tuple[ServerInfo, ...] = ()
    external_docs: ExternalDocs | None = None
    extensions: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for key in self.extensions:
            if not key.startswith("x-"):
                msg = f"Document extension {key!r} must start with 'x-'"
                raise ValueError(msg)
            if key in RESERVED_EXTENSIONS:
                msg = f"Document extension {key!r} is composed from tag groups"
                raise ValueError(msg)
