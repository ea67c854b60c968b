"""``roost openapi``: print the composed API document as JSON."""

import argparse
import sys

from roost.cli._resolve import load_app


def run_openapi(args: argparse.Namespace) -> None:
    app = load_app(args.app)
    sys.stdout.write(app.document.to_json(indent=args.indent).decode("utf-8") + "\n")
