"""Tests for roost.openapi.composer: merging groups into one document."""

import logging

import pytest
from pydantic import BaseModel

from roost.errors import DuplicatePathError, UnknownTagError
from roost.openapi.composer import compose
from roost.openapi.metadata import ApiInfo, DocumentMeta, TagDescriptor, TagGroup
from roost.routing.route import RouteGroup, delete, get, post

META = DocumentMeta(info=ApiInfo(title="Test API", version="1.0"))

TAGS = (
    TagDescriptor("Core", "Node information"),
    TagDescriptor("Users", "User lookup"),
    TagDescriptor("Extra", "Not in any group"),
)

GROUPS = (TagGroup("Main", ("Users", "Core")),)


class Pet(BaseModel):
    name: str


class NewPet(BaseModel):
    name: str
    owner: str | None = None


def _root() -> RouteGroup:
    return RouteGroup(
        "/",
        (
            get("/", "root.root", "Query Node", tags=("Core",)),
            get("/ping", "root.ping", "Ping", tags=("Core",)),
        ),
    )


def _users() -> RouteGroup:
    return RouteGroup(
        "/users",
        (
            get("/@me", "users.fetch_self", "Fetch Self", tags=("Users",)),
            get("/{id}", "users.fetch_user", "Fetch User", tags=("Users",)),
            delete("/{id}", "users.delete_user", "Delete User", tags=("Users",)),
        ),
    )


def _mounted() -> list[tuple[str, RouteGroup]]:
    return [("/", _root()), ("/users", _users())]


class TestCompose:
    def test_operation_count_is_union(self) -> None:
        doc = compose(META, TAGS, GROUPS, _mounted())
        assert doc.operation_count == 5
        assert set(doc.operations()) == {
            ("GET", "/"),
            ("GET", "/ping"),
            ("GET", "/users/@me"),
            ("GET", "/users/{id}"),
            ("DELETE", "/users/{id}"),
        }

    def test_deterministic(self) -> None:
        first = compose(META, TAGS, GROUPS, _mounted())
        second = compose(META, TAGS, GROUPS, _mounted())
        assert first.to_dict() == second.to_dict()
        assert first.to_json() == second.to_json()

    def test_paths_in_mount_order(self) -> None:
        doc = compose(META, TAGS, GROUPS, _mounted())
        assert list(doc.paths) == ["/", "/ping", "/users/@me", "/users/{id}"]

    def test_methods_share_path_entry(self) -> None:
        doc = compose(META, TAGS, GROUPS, _mounted())
        assert list(doc.paths["/users/{id}"]) == ["get", "delete"]

    def test_operation_entry(self) -> None:
        doc = compose(META, TAGS, GROUPS, _mounted())
        entry = doc.paths["/users/{id}"]["get"]
        assert entry["tags"] == ["Users"]
        assert entry["summary"] == "Fetch User"
        assert entry["operationId"] == "users_fetch_user"
        assert entry["parameters"] == [
            {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}
        ]
        assert entry["responses"] == {"200": {"description": "OK"}}

    def test_typed_param_documented_without_converter(self) -> None:
        group = RouteGroup("/items", (get("/{id:int}", "items.fetch"),))
        doc = compose(META, (), (), [("/items", group)])
        assert "/items/{id}" in doc.paths
        param = doc.paths["/items/{id}"]["get"]["parameters"][0]
        assert param["schema"] == {"type": "integer"}

    def test_explicit_operation_id_and_deprecated(self) -> None:
        group = RouteGroup(
            "/",
            (get("/old", "legacy.old", operation_id="oldThing", deprecated=True),),
        )
        entry = compose(META, (), (), [("/", group)]).paths["/old"]["get"]
        assert entry["operationId"] == "oldThing"
        assert entry["deprecated"] is True

    def test_callable_handler_operation_id(self) -> None:
        def list_pets() -> list:
            return []

        group = RouteGroup("/pets", (get("/", list_pets),))
        entry = compose(META, (), (), [("/pets", group)]).paths["/pets"]["get"]
        assert entry["operationId"] == "list_pets"


class TestSchemas:
    def test_request_and_response_refs(self) -> None:
        group = RouteGroup(
            "/pets",
            (post("/", "pets.create", request=NewPet, responses={200: Pet, 400: None}),),
        )
        doc = compose(META, (), (), [("/pets", group)])
        entry = doc.paths["/pets"]["post"]
        assert entry["requestBody"]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/NewPet"
        }
        assert entry["responses"]["200"]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/Pet"
        }
        assert entry["responses"]["400"] == {"description": "Bad Request"}
        assert list(doc.components["schemas"]) == ["NewPet", "Pet"]

    def test_no_models_no_components(self) -> None:
        doc = compose(META, TAGS, GROUPS, _mounted())
        assert doc.components == {}
        assert "components" not in doc.to_dict()


class TestDuplicates:
    def test_same_method_and_path_across_groups(self) -> None:
        clash = RouteGroup("/", (get("/users/{user}", "other.fetch", tags=("Users",)),))
        with pytest.raises(DuplicatePathError) as exc_info:
            compose(META, TAGS, GROUPS, [*_mounted(), ("/", clash)])
        assert exc_info.value.method == "GET"

    def test_same_documented_path_different_types(self) -> None:
        group = RouteGroup("/x", (get("/{id:int}", "x.a"), get("/{id}", "x.b")))
        with pytest.raises(DuplicatePathError):
            compose(META, (), (), [("/x", group)])

    def test_same_template_different_param_names(self) -> None:
        group = RouteGroup("/", (get("/a/{x}", "a.fetch"), post("/a/{y}", "a.update")))
        with pytest.raises(DuplicatePathError) as exc_info:
            compose(META, (), (), [("/", group)])
        assert exc_info.value.method == "POST"
        assert exc_info.value.path == "/a/{y}"
        assert exc_info.value.existing == "/a/{x}"
        assert "/a/{x}" in str(exc_info.value)

    def test_same_param_names_share_one_path_item(self) -> None:
        group = RouteGroup("/", (get("/a/{x}", "a.fetch"), post("/a/{x}", "a.update")))
        doc = compose(META, (), (), [("/", group)])
        assert list(doc.paths) == ["/a/{x}"]
        assert set(doc.paths["/a/{x}"]) == {"get", "post"}


class TestTags:
    def test_unknown_operation_tag(self) -> None:
        group = RouteGroup("/", (get("/a", "a.a", tags=("Nope",)),))
        with pytest.raises(UnknownTagError) as exc_info:
            compose(META, TAGS, GROUPS, [("/", group)])
        assert exc_info.value.tag == "Nope"
        assert "GET /a" in exc_info.value.where

    def test_unknown_group_member(self) -> None:
        groups = (TagGroup("Main", ("Core", "Ghost")),)
        with pytest.raises(UnknownTagError) as exc_info:
            compose(META, TAGS, groups, _mounted())
        assert exc_info.value.tag == "Ghost"

    def test_tag_order_follows_groups_then_rest(self) -> None:
        doc = compose(META, TAGS, GROUPS, _mounted())
        assert [t.name for t in doc.tags] == ["Users", "Core", "Extra"]

    def test_duplicate_tags_first_wins(self, caplog: pytest.LogCaptureFixture) -> None:
        tags = (*TAGS, TagDescriptor("Core", "Something else"))
        with caplog.at_level(logging.WARNING, logger="roost.openapi"):
            doc = compose(META, tags, GROUPS, _mounted())
        core = [t for t in doc.tags if t.name == "Core"]
        assert len(core) == 1
        assert core[0].description == "Node information"
        assert "declared twice" in caplog.text

    def test_ungrouped_tag_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        group = RouteGroup("/", (get("/extra", "extra.a", tags=("Extra",)),))
        with caplog.at_level(logging.WARNING, logger="roost.openapi"):
            doc = compose(META, TAGS, GROUPS, [*_mounted(), ("/", group)])
        assert "Extra" in [t.name for t in doc.tags]
        assert "belongs to no tag group" in caplog.text

    def test_tag_groups_extension(self) -> None:
        data = compose(META, TAGS, GROUPS, _mounted()).to_dict()
        assert data["x-tagGroups"] == [{"name": "Main", "tags": ["Users", "Core"]}]
