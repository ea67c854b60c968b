"""Roost CLI: route listing, document export, surface checks, and serving.

Entry point registered as ``roost`` in ``pyproject.toml``::

    [project.scripts]
    roost = "roost.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``roost`` command."""
    parser = argparse.ArgumentParser(
        prog="roost",
        description="Roost: mount feature route groups and publish one API document.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- roost routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List mounted routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:app)")

    # -- roost openapi -----------------------------------------------------
    openapi_parser = subparsers.add_parser("openapi", help="Print the composed API document")
    openapi_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    openapi_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print with this many spaces (default: compact)",
    )

    # -- roost check -------------------------------------------------------
    check_parser = subparsers.add_parser(
        "check", help="Compare mounted routes with the API document"
    )
    check_parser.add_argument("app", help="Import string (e.g. myapp:app)")

    # -- roost run ---------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the server")
    run_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from roost.cli._routes import run_routes

        run_routes(args)
    elif args.command == "openapi":
        from roost.cli._openapi import run_openapi

        run_openapi(args)
    elif args.command == "check":
        from roost.cli._check import run_check

        run_check(args)
    elif args.command == "run":
        from roost.cli._run import run_server

        run_server(args)
