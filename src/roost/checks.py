"""Surface checks: validate that dispatch table and API document agree.

The registry and the composer enforce uniqueness independently; these
checks look at the finished pair for drift between them and for gaps
in the tag taxonomy that are not fatal on their own.

Usage::

    result = check_surface(app)
    print(result.summary())

    # Or via CLI:
    #   roost check myapp:app
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from roost.routing.router import parse_path

if TYPE_CHECKING:
    from roost.app import App


class Severity(Enum):
    """Severity of a surface check issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class SurfaceIssue:
    """A single issue found while checking the surface."""

    severity: Severity
    category: str
    message: str
    route: str | None = None


@dataclass(slots=True)
class CheckResult:
    """Result of a surface check."""

    issues: list[SurfaceIssue] = field(default_factory=list)
    routes_checked: int = 0
    paths_documented: int = 0

    @property
    def errors(self) -> list[SurfaceIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[SurfaceIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        """Human-readable summary."""
        lines = [
            f"Checked {self.routes_checked} routes against "
            f"{self.paths_documented} documented operations.",
        ]
        if self.ok and not self.warnings:
            lines.append("No issues found.")
        elif self.ok:
            lines.append(f"No errors. {len(self.warnings)} warning(s).")
        else:
            lines.append(f"{len(self.errors)} error(s), {len(self.warnings)} warning(s).")
        for issue in self.issues:
            prefix = issue.severity.value.upper()
            loc = f" ({issue.route})" if issue.route else ""
            lines.append(f"  [{prefix}] {issue.message}{loc}")
        return "\n".join(lines)


def _documented_path(path: str) -> str:
    return "/" + "/".join(
        "{" + seg.param_name + "}" if seg.is_param else seg.value for seg in parse_path(path)
    )


def check_surface(app: App) -> CheckResult:
    """Compare the mounted routes with the published document."""
    registry = app.registry
    document = app.document
    result = CheckResult(
        routes_checked=len(registry.routes),
        paths_documented=document.operation_count,
    )

    mounted = {(route.method, _documented_path(route.path)) for route in registry.routes}
    documented = set(document.operations())

    for method, path in sorted(mounted - documented):
        result.issues.append(
            SurfaceIssue(
                Severity.ERROR,
                "drift",
                "Route is mounted but missing from the API document",
                route=f"{method} {path}",
            )
        )
    for method, path in sorted(documented - mounted):
        result.issues.append(
            SurfaceIssue(
                Severity.ERROR,
                "drift",
                "Operation is documented but not mounted",
                route=f"{method} {path}",
            )
        )

    membership = Counter(name for group in document.tag_groups for name in group.tags)
    used: dict[str, None] = {}
    for route in registry.routes:
        if not route.operation.tags:
            result.issues.append(
                SurfaceIssue(
                    Severity.WARNING,
                    "untagged",
                    "Operation has no tags and will be listed outside every group",
                    route=f"{route.method} {route.path}",
                )
            )
        for name in route.operation.tags:
            used.setdefault(name)

    for name in used:
        if document.tag_groups and membership[name] == 0:
            result.issues.append(
                SurfaceIssue(
                    Severity.WARNING,
                    "ungrouped-tag",
                    f"Tag {name!r} is used but belongs to no tag group",
                )
            )
    for name, count in membership.items():
        if count > 1:
            result.issues.append(
                SurfaceIssue(
                    Severity.WARNING,
                    "multi-grouped-tag",
                    f"Tag {name!r} is listed in {count} tag groups",
                )
            )
    for tag in document.tags:
        if tag.name not in used:
            result.issues.append(
                SurfaceIssue(
                    Severity.INFO,
                    "unused-tag",
                    f"Tag {tag.name!r} is configured but no operation uses it",
                )
            )

    return result
