"""Application configuration.

AppConfig is a frozen dataclass, immutable after creation and read by
attribute rather than string keys.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, port=3000, docs_path=None)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    workers: int = 1
    log_level: str = "info"

    # API document
    openapi_path: str = "/openapi.json"
    docs_path: str | None = "/docs"  # None disables the ReDoc page
    cache_document: bool = True  # False recomposes on every request
    redoc_js_url: str = "https://cdn.redoc.ly/redoc/latest/bundles/redoc.standalone.js"
