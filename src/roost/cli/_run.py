"""``roost run``: serve an app with pounce."""

import argparse

from roost.cli._resolve import load_app


def run_server(args: argparse.Namespace) -> None:
    """Start the server; CLI flags override the app's config."""
    app = load_app(args.app)
    app.run(host=args.host, port=args.port)
