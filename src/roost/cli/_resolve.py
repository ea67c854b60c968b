"""App import resolution: ``"module:attribute"`` strings to App instances.

Shared by every ``roost`` subcommand.
"""

import importlib
import sys

from roost.app import App
from roost.errors import ConfigurationError


def resolve_app(import_string: str) -> App:
    """Resolve an import string to a roost App instance.

    Accepts ``"module:attribute"``. When the attribute is omitted it
    defaults to ``"app"``. A callable that is not an App is treated as
    a factory and called with no arguments, so
    ``roost routes roost.api:create_app`` works.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not an ``App`` or factory.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, App):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, App):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a roost.App instance"
        raise TypeError(msg)

    return obj


def load_app(import_string: str) -> App:
    """Resolve and freeze an app, exiting with status 1 on any failure.

    Freezing mounts every group and composes the document, so authoring
    errors surface here rather than on the first request.
    """
    try:
        app = resolve_app(import_string)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        app._ensure_frozen()
    except ConfigurationError as exc:
        print(f"Startup failed: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    return app
