"""``roost routes``: list mounted routes in registration order."""

import argparse

from roost.cli._resolve import load_app


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of METHOD, PATH, HANDLER, and TAGS."""
    app = load_app(args.app)
    routes = app.registry.routes
    if not routes:
        print("No routes registered.")
        return

    rows = [
        (
            route.method,
            route.path,
            route.operation.handler_name,
            ", ".join(route.operation.tags),
        )
        for route in routes
    ]

    max_method = max(6, *(len(r[0]) for r in rows))
    max_path = max(4, *(len(r[1]) for r in rows))
    max_handler = max(7, *(len(r[2]) for r in rows))

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{:<{max_handler}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLER", "TAGS").rstrip())
    print("-" * min(max_method + max_path + max_handler + 10, 100))
    for row in rows:
        print(fmt.format(*row).rstrip())
