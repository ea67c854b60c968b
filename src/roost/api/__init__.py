"""The Revolt API surface, assembled from its feature route groups.

Usage::

    from roost.api import create_app

    app = create_app(handlers={"users.fetch_self": fetch_self})
    app.run()

Handlers not present in *handlers* answer 501 until bound with
``app.bind`` or ``@app.handler``.
"""

from collections.abc import Mapping

from roost._internal.types import Handler
from roost.api.catalog import API_VERSION, META, TAG_GROUPS, TAGS
from roost.api.features import MOUNT_ORDER
from roost.app import App
from roost.config import AppConfig


def create_app(
    config: AppConfig | None = None,
    handlers: Mapping[str, Handler] | None = None,
) -> App:
    """Build an ``App`` with every feature group mounted in order."""
    app = App(config, meta=META, tags=TAGS, tag_groups=TAG_GROUPS, handlers=handlers)
    for feature in MOUNT_ORDER:
        app.mount(feature.routes())
    return app


__all__ = ["API_VERSION", "META", "TAGS", "TAG_GROUPS", "create_app"]
