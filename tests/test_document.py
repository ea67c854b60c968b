"""Tests for roost.openapi.metadata and roost.openapi.document."""

import json

import pytest

from roost.openapi.document import OPENAPI_VERSION, CompositeDocument, etag_for
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


def _document(**overrides: object) -> CompositeDocument:
    fields: dict[str, object] = {
        "info": ApiInfo(title="Test", version="1.0"),
        "servers": (ServerInfo("https://api.example.com", "Production"),),
        "tags": (TagDescriptor("Core", "Node"),),
        "tag_groups": (TagGroup("Main", ("Core",)),),
        "paths": {"/ping": {"get": {"operationId": "ping", "responses": {}}}},
    }
    fields.update(overrides)
    return CompositeDocument(**fields)  # type: ignore[arg-type]


class TestMetadata:
    def test_info_omits_unset_fields(self) -> None:
        assert ApiInfo(title="T", version="1").to_dict() == {"title": "T", "version": "1"}

    def test_info_full(self) -> None:
        info = ApiInfo(
            title="T",
            version="1",
            description="D",
            terms_of_service="https://example.com/terms",
            contact=Contact(name="Support", email="help@example.com"),
            license=License("MIT"),
        )
        assert info.to_dict() == {
            "title": "T",
            "description": "D",
            "termsOfService": "https://example.com/terms",
            "contact": {"name": "Support", "email": "help@example.com"},
            "license": {"name": "MIT"},
            "version": "1",
        }

    def test_external_docs(self) -> None:
        docs = ExternalDocs("https://docs.example.com", "Guide")
        assert docs.to_dict() == {"description": "Guide", "url": "https://docs.example.com"}

    def test_tag_without_description(self) -> None:
        assert TagDescriptor("Core").to_dict() == {"name": "Core"}

    def test_extensions_require_x_prefix(self) -> None:
        with pytest.raises(ValueError, match="must start with 'x-'"):
            DocumentMeta(info=ApiInfo(title="T", version="1"), extensions={"logo": {}})

    def test_extensions_cannot_set_tag_groups(self) -> None:
        with pytest.raises(ValueError, match="x-tagGroups"):
            DocumentMeta(info=ApiInfo(title="T", version="1"), extensions={"x-tagGroups": []})


class TestCompositeDocument:
    def test_to_dict_layout(self) -> None:
        doc = _document(
            extensions={"x-logo": {"url": "https://example.com/logo.png"}},
            external_docs=ExternalDocs("https://docs.example.com"),
        )
        data = doc.to_dict()
        assert data["openapi"] == OPENAPI_VERSION
        assert data["servers"] == [
            {"url": "https://api.example.com", "description": "Production"}
        ]
        assert data["externalDocs"] == {"url": "https://docs.example.com"}
        assert data["tags"] == [{"name": "Core", "description": "Node"}]
        assert data["x-tagGroups"] == [{"name": "Main", "tags": ["Core"]}]
        assert data["x-logo"] == {"url": "https://example.com/logo.png"}
        assert "components" not in data

    def test_composed_tag_groups_win_over_extensions(self) -> None:
        doc = _document(extensions={"x-tagGroups": [], "x-logo": {}})
        data = doc.to_dict()
        assert data["x-tagGroups"] == [{"name": "Main", "tags": ["Core"]}]
        assert data["x-logo"] == {}

    def test_no_tag_groups_no_extension(self) -> None:
        assert "x-tagGroups" not in _document(tag_groups=()).to_dict()

    def test_operations_upper_case(self) -> None:
        assert _document().operations() == [("GET", "/ping")]
        assert _document().operation_count == 1

    def test_to_json_compact_and_indented(self) -> None:
        doc = _document()
        compact = doc.to_json()
        assert b": " not in compact
        assert json.loads(compact) == json.loads(doc.to_json(indent=2))
        assert b"\n  " in doc.to_json(indent=2)

    def test_to_json_keeps_unicode(self) -> None:
        doc = _document(info=ApiInfo(title="Café", version="1"))
        assert "Café".encode() in doc.to_json()

    def test_etag_stable_and_content_addressed(self) -> None:
        assert _document().etag == _document().etag
        assert _document().etag != _document(info=ApiInfo(title="Other", version="1")).etag
        assert _document().etag == etag_for(_document().to_json())
        assert _document().etag.startswith('"') and _document().etag.endswith('"')
