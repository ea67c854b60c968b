"""``roost check``: surface validation command.

Resolves an import string to a roost App and compares its mounted
routes with its API document, printing results to stdout. Exits with
code 1 if errors are found.
"""

import argparse

from roost.cli._resolve import load_app


def run_check(args: argparse.Namespace) -> None:
    """Delegate to ``App.check()``, which raises ``SystemExit(1)`` on errors."""
    app = load_app(args.app)
    app.check()
