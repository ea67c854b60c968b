"""Tests for roost.checks: surface drift and taxonomy gaps."""

import pytest

from roost.app import App
from roost.checks import CheckResult, Severity, SurfaceIssue, check_surface
from roost.openapi.metadata import ApiInfo, DocumentMeta, TagDescriptor, TagGroup
from roost.routing.route import RouteGroup, get

META = DocumentMeta(info=ApiInfo(title="Test", version="1.0"))


def _handler() -> str:
    return "ok"


def _app(
    operations: tuple,
    tags: tuple = (TagDescriptor("Core"),),
    tag_groups: tuple = (TagGroup("Main", ("Core",)),),
) -> App:
    app = App(meta=META, tags=tags, tag_groups=tag_groups)
    app.mount(RouteGroup("/", operations))
    return app


def _categories(result: CheckResult) -> list[str]:
    return [issue.category for issue in result.issues]


class TestCheckSurface:
    def test_clean_surface(self) -> None:
        result = check_surface(_app((get("/ping", _handler, tags=("Core",)),)))
        assert result.ok
        assert result.issues == []
        assert result.routes_checked == 1
        assert result.paths_documented == 1

    def test_typed_params_do_not_drift(self) -> None:
        result = check_surface(_app((get("/items/{id:int}", _handler, tags=("Core",)),)))
        assert "drift" not in _categories(result)

    def test_drift_when_document_is_stale(self) -> None:
        app = _app((get("/ping", _handler, tags=("Core",)),))
        other = _app((get("/pong", _handler, tags=("Core",)),))
        app.publisher.publish(other.document)

        result = check_surface(app)
        assert not result.ok
        routes = sorted(issue.route for issue in result.errors)
        assert routes == ["GET /ping", "GET /pong"]

    def test_untagged_operation(self) -> None:
        result = check_surface(_app((get("/ping", _handler),)))
        assert result.ok
        assert "untagged" in _categories(result)

    def test_ungrouped_tag(self) -> None:
        tags = (TagDescriptor("Core"), TagDescriptor("Loose"))
        result = check_surface(_app((get("/ping", _handler, tags=("Loose",)),), tags=tags))
        assert "ungrouped-tag" in _categories(result)

    def test_no_groups_no_ungrouped_warning(self) -> None:
        result = check_surface(_app((get("/ping", _handler, tags=("Core",)),), tag_groups=()))
        assert "ungrouped-tag" not in _categories(result)

    def test_multi_grouped_tag(self) -> None:
        groups = (TagGroup("A", ("Core",)), TagGroup("B", ("Core",)))
        result = check_surface(_app((get("/ping", _handler, tags=("Core",)),), tag_groups=groups))
        assert "multi-grouped-tag" in _categories(result)

    def test_unused_tag_is_info(self) -> None:
        tags = (TagDescriptor("Core"), TagDescriptor("Spare"))
        result = check_surface(_app((get("/ping", _handler, tags=("Core",)),), tags=tags))
        unused = [i for i in result.issues if i.category == "unused-tag"]
        assert len(unused) == 1
        assert unused[0].severity is Severity.INFO
        assert result.ok


class TestCheckResult:
    def test_summary_clean(self) -> None:
        assert "No issues found." in CheckResult(routes_checked=2).summary()

    def test_summary_lists_issues(self) -> None:
        result = CheckResult(
            issues=[
                SurfaceIssue(Severity.ERROR, "drift", "Route is mounted", route="GET /a"),
                SurfaceIssue(Severity.WARNING, "untagged", "No tags"),
            ]
        )
        text = result.summary()
        assert "1 error(s), 1 warning(s)." in text
        assert "[ERROR] Route is mounted (GET /a)" in text
        assert "[WARNING] No tags" in text


class TestAppCheck:
    def test_check_passes(self, capsys: pytest.CaptureFixture[str]) -> None:
        _app((get("/ping", _handler, tags=("Core",)),)).check()
        assert "No issues found." in capsys.readouterr().out

    def test_check_exits_on_errors(self) -> None:
        app = _app((get("/ping", _handler, tags=("Core",)),))
        app.publisher.publish(_app((get("/pong", _handler, tags=("Core",)),)).document)
        with pytest.raises(SystemExit) as exc_info:
            app.check()
        assert exc_info.value.code == 1
