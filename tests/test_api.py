"""Tests for roost.api: the bundled Revolt API surface."""

from roost.api import API_VERSION, TAG_GROUPS, TAGS, create_app
from roost.api.features import MOUNT_ORDER
from roost.app import AppState
from roost.checks import check_surface
from roost.config import AppConfig
from roost.testing import TestClient


class TestCatalog:
    def test_twenty_tags(self) -> None:
        names = [tag.name for tag in TAGS]
        assert len(names) == 20
        assert len(set(names)) == 20

    def test_group_order(self) -> None:
        assert [group.name for group in TAG_GROUPS] == [
            "Revolt",
            "Users",
            "Bots",
            "Channels",
            "Servers",
            "Invites",
            "Authentication",
            "Miscellaneous",
        ]

    def test_every_tag_grouped_once(self) -> None:
        grouped = [name for group in TAG_GROUPS for name in group.tags]
        assert sorted(grouped) == sorted(tag.name for tag in TAGS)


class TestCreateApp:
    def test_mount_order(self) -> None:
        app = create_app()
        prefixes = [prefix for prefix, _ in app.registry.groups]
        assert prefixes == [
            "/",
            "/users",
            "/bots",
            "/channels",
            "/servers",
            "/invites",
            "/auth/account",
            "/auth/session",
            "/onboard",
            "/push",
            "/sync",
        ]
        assert len(MOUNT_ORDER) == 11
        assert app.state is AppState.READY

    def test_document_metadata(self) -> None:
        data = create_app().document.to_dict()
        assert data["info"]["title"] == "Revolt API"
        assert data["info"]["version"] == API_VERSION
        assert data["info"]["license"]["name"] == "AGPLv3"
        assert [s["url"] for s in data["servers"]] == [
            "https://api.revolt.chat",
            "http://local.revolt.chat:8000",
        ]
        assert data["externalDocs"]["url"] == "https://developers.revolt.chat"
        assert data["x-logo"] == {
            "url": "https://revolt.chat/header.png",
            "altText": "Revolt Header",
        }
        assert data["x-tagGroups"][0] == {"name": "Revolt", "tags": ["Core"]}

    def test_document_covers_every_route(self) -> None:
        app = create_app()
        assert app.document.operation_count == len(app.registry.routes)

    def test_surface_has_no_errors_or_warnings(self) -> None:
        result = check_surface(create_app())
        assert result.ok
        assert result.warnings == []

    def test_literal_segments_win(self) -> None:
        app = create_app()
        assert app.dispatch("GET", "/users/@me").route.handler == "users.fetch_self"
        assert app.dispatch("GET", "/users/someone").route.handler == "users.fetch_user"
        assert app.dispatch("GET", "/bots/@me").route.handler == "bots.fetch_owned"
        assert app.dispatch("DELETE", "/auth/session/all").route.handler == "session.revoke_all"
        match = app.dispatch("DELETE", "/channels/c1/messages/bulk")
        assert match.route.handler == "channels.message_bulk_delete"
        match = app.dispatch("PUT", "/servers/s1/permissions/default")
        assert match.route.handler == "servers.permissions_set_default"

    def test_group_root_route(self) -> None:
        app = create_app()
        assert app.dispatch("GET", "/auth/account").route.handler == "account.fetch_account"

    def test_components_include_schemas(self) -> None:
        schemas = create_app().document.components["schemas"]
        assert "NodeInfo" in schemas
        assert "User" in schemas


class TestServing:
    async def test_root_node_info(self) -> None:
        async with TestClient(create_app()) as client:
            response = await client.get("/")
            assert response.status == 200
            assert response.json_body()["revolt"] == API_VERSION

    async def test_ping(self) -> None:
        async with TestClient(create_app()) as client:
            assert (await client.get("/ping")).text == "pong"

    async def test_unbound_capability_is_501(self) -> None:
        async with TestClient(create_app()) as client:
            assert (await client.get("/users/@me")).status == 501

    async def test_bound_capability(self) -> None:
        async def fetch_user(target: str) -> dict:
            return {"_id": target, "username": "someone"}

        app = create_app(handlers={"users.fetch_user": fetch_user})
        async with TestClient(app) as client:
            response = await client.get("/users/01ABC")
            assert response.json_body() == {"_id": "01ABC", "username": "someone"}

    async def test_uncached_document(self) -> None:
        app = create_app(AppConfig(cache_document=False))
        async with TestClient(app) as client:
            first = await client.get("/openapi.json")
            second = await client.get("/openapi.json")
            assert first.header("etag") == second.header("etag")
